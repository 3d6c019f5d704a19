from typing import Annotated
from pydantic import BaseModel, ConfigDict, Field, StrictInt, model_validator

from utils.computus import FIRST_GREGORIAN_YEAR

MAX_EASTER_RANGE = 1000

GregorianYear = Annotated[StrictInt, Field(ge=FIRST_GREGORIAN_YEAR, le=9999)]


class HolyDaysRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    year: GregorianYear


class EasterRangeRequest(BaseModel):
    model_config = ConfigDict(strict=True)

    start_year: GregorianYear
    end_year: GregorianYear

    @model_validator(mode='after')
    def check_range(self):
        if self.start_year > self.end_year:
            raise ValueError("start_year must be <= end_year")
        if self.end_year - self.start_year >= MAX_EASTER_RANGE:
            raise ValueError(f"at most {MAX_EASTER_RANGE} years per request")
        return self
