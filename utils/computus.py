# utils/computus.py
"""Easter and the holy days that hang off it, for Gregorian years.

Easter uses the Meeus/Jones/Butcher algorithm, valid from 1583 (the first
full Gregorian year) on.
"""
from datetime import date, timedelta

FIRST_GREGORIAN_YEAR = 1583


def _check_year(year):
    if year < FIRST_GREGORIAN_YEAR:
        raise ValueError(f"Year must be {FIRST_GREGORIAN_YEAR} or later for Gregorian calendar.")


def calculate_easter(year):
    """Date of Easter Sunday in ``year``."""
    _check_year(year)
    a = year % 19
    b, c = divmod(year, 100)
    d, e = divmod(b, 4)
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i, k = divmod(c, 4)
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month, day = divmod(h + l - 7 * m + 114, 31)
    return date(year, month, day + 1)


def calculate_easter_range(start_year, end_year):
    """Easter for every year from start_year to end_year inclusive."""
    if start_year > end_year:
        raise ValueError("Start year must be less than or equal to end year.")
    return {year: calculate_easter(year) for year in range(start_year, end_year + 1)}


def calculate_ash_wednesday(year):
    return calculate_easter(year) - timedelta(days=46)


def calculate_good_friday(year):
    return calculate_easter(year) - timedelta(days=2)


def calculate_ascension(year):
    # Always a Thursday
    return calculate_easter(year) + timedelta(days=39)


def calculate_pentecost(year):
    # 50th day counting Easter as day 1
    return calculate_easter(year) + timedelta(days=49)


def calculate_trinity(year):
    return calculate_easter(year) + timedelta(days=56)


def calculate_annunciation(year):
    _check_year(year)
    return date(year, 3, 25)


def calculate_all_holy_days(year):
    """Name -> date for the Easter-derived feasts and the Annunciation."""
    return {
        "Easter Sunday": calculate_easter(year),
        "Ash Wednesday": calculate_ash_wednesday(year),
        "Pentecost": calculate_pentecost(year),
        "Trinity Sunday": calculate_trinity(year),
        "Annunciation of Mary": calculate_annunciation(year),
    }
