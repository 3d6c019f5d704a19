from typing import Annotated
from pydantic import BaseModel, ConfigDict, Field, StrictInt

# Anything wider than a signed 64-bit SQLite INTEGER cannot be bound
ColumnInt = Annotated[StrictInt, Field(ge=0, le=2**63 - 1)]


class KjvRequest(BaseModel):
    # JSON numbers only; "1" or true are rejected rather than coerced
    model_config = ConfigDict(strict=True)


class VerseRequest(KjvRequest):
    book: ColumnInt
    chapter: ColumnInt
    verse: ColumnInt


class ChapterRequest(KjvRequest):
    book: ColumnInt
    chapter: ColumnInt


class PassageRequest(KjvRequest):
    book: ColumnInt
    start_chapter: ColumnInt
    start_verse: ColumnInt
    end_chapter: ColumnInt
    end_verse: ColumnInt
