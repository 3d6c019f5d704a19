# routes/holydays.py
import logging

from schemas.holyday_schemas import HolyDaysRequest, EasterRangeRequest, MAX_EASTER_RANGE
from utils.computus import calculate_all_holy_days, calculate_easter_range
from utils.responses import text_reply, json_reply
from utils.router import path_ints
from .kjv import validate

logger = logging.getLogger(__name__)


def get_holy_days(year):
    """GET /holydays/<year>"""
    values = path_ints(year)
    params = validate(HolyDaysRequest, {'year': values[0]}) if values else None
    if params is None:
        return text_reply("Invalid year: expected 1583-9999\n", 400)

    holy_days = calculate_all_holy_days(params.year)
    return json_reply({
        "year": params.year,
        "holy_days": {name: day.isoformat() for name, day in holy_days.items()},
    })


def get_easter_range(start_year, end_year):
    """GET /easter/<start_year>/<end_year>"""
    values = path_ints(start_year, end_year)
    params = None
    if values is not None:
        params = validate(EasterRangeRequest, dict(zip(('start_year', 'end_year'), values)))
    if params is None:
        return text_reply(
            f"Invalid range: expected start_year <= end_year within 1583-9999, "
            f"at most {MAX_EASTER_RANGE} years\n", 400
        )

    dates = calculate_easter_range(params.start_year, params.end_year)
    logger.info(f"Calculated Easter for {len(dates)} years")
    return json_reply({
        "start_year": params.start_year,
        "end_year": params.end_year,
        "easter": {str(year): day.isoformat() for year, day in dates.items()},
    })
