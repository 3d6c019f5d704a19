import logging
from contextlib import contextmanager
from sqlalchemy import create_engine, select, and_, or_
from sqlalchemy.orm import sessionmaker
from sqlalchemy.exc import SQLAlchemyError

from models import Base, KjvVerse, Verse

logger = logging.getLogger(__name__)

VERSE_COLUMNS = (KjvVerse.book, KjvVerse.chapter, KjvVerse.verse, KjvVerse.text)


class StoreError(Exception):
    """The verse store could not be opened, queried, or read into memory.

    Kept separate from an empty result so callers can tell "not found"
    apart from a broken database.
    """


class KjvStore:
    def __init__(self, database_url):
        self.database_url = database_url
        self.engine = create_engine(database_url)
        self.SessionLocal = sessionmaker(autoflush=False, bind=self.engine)

    def create_schema(self):
        """Create the kjv table if it does not exist yet (used by the loader)."""
        try:
            Base.metadata.create_all(self.engine)
        except SQLAlchemyError as e:
            logger.error(f"Error creating kjv schema: {e}")
            raise StoreError(str(e)) from e

    @contextmanager
    def session_scope(self):
        """Check a session out of the pool and always give it back."""
        db = self.SessionLocal()
        try:
            yield db
        except SQLAlchemyError as e:
            db.rollback()
            logger.error(f"SQLAlchemy Session Error: {e}")
            raise StoreError(str(e)) from e
        except MemoryError as e:
            db.rollback()
            logger.error("Out of memory while reading verses")
            raise StoreError("out of memory") from e
        finally:
            db.close()

    def ping(self):
        with self.session_scope() as db:
            db.execute(select(KjvVerse.book).limit(1)).first()
        return True

    def fetch_verse(self, book, chapter, verse):
        """Return the single matching Verse, or None."""
        stmt = select(*VERSE_COLUMNS).where(
            KjvVerse.book == book,
            KjvVerse.chapter == chapter,
            KjvVerse.verse == verse,
        )
        with self.session_scope() as db:
            row = db.execute(stmt).first()
            return Verse.from_row(row) if row else None

    def fetch_chapter(self, book, chapter):
        stmt = (
            select(*VERSE_COLUMNS)
            .where(KjvVerse.book == book, KjvVerse.chapter == chapter)
            .order_by(KjvVerse.verse.asc())
        )
        with self.session_scope() as db:
            rows = db.execute(stmt).all()
            return [Verse.from_row(row) for row in rows]

    def fetch_passage(self, book, start_chapter, start_verse, end_chapter, end_verse):
        """Return every verse of ``book`` with
        (start_chapter, start_verse) <= (chapter, verse) <= (end_chapter, end_verse),
        compared as ordered pairs, sorted by chapter then verse.
        """
        after_start = or_(
            KjvVerse.chapter > start_chapter,
            and_(KjvVerse.chapter == start_chapter, KjvVerse.verse >= start_verse),
        )
        before_end = or_(
            KjvVerse.chapter < end_chapter,
            and_(KjvVerse.chapter == end_chapter, KjvVerse.verse <= end_verse),
        )
        stmt = (
            select(*VERSE_COLUMNS)
            .where(KjvVerse.book == book, after_start, before_end)
            .order_by(KjvVerse.chapter.asc(), KjvVerse.verse.asc())
        )
        with self.session_scope() as db:
            rows = db.execute(stmt).all()
            return [Verse.from_row(row) for row in rows]
