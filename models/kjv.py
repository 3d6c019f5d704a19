from dataclasses import dataclass
from sqlalchemy import Column, Integer, Text
from .base import Base


class KjvVerse(Base):
    """Row of the read-only ``kjv`` table, keyed by (book, chapter, verse)."""
    __tablename__ = 'kjv'

    book = Column(Integer, primary_key=True, autoincrement=False)
    chapter = Column(Integer, primary_key=True, autoincrement=False)
    verse = Column(Integer, primary_key=True, autoincrement=False)
    text = Column(Text, nullable=False)

    def __repr__(self):
        return f'<KjvVerse {self.book} {self.chapter}:{self.verse}>'


@dataclass
class Verse:
    book: int
    chapter: int
    verse: int
    text: str

    @classmethod
    def from_row(cls, row):
        return cls(book=row.book, chapter=row.chapter, verse=row.verse, text=row.text)
