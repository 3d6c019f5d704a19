# routes/kjv.py
from flask import current_app, request
from pydantic import ValidationError
import logging

from database import StoreError
from schemas.kjv_schemas import VerseRequest, ChapterRequest, PassageRequest
from utils.responses import (
    text_reply, json_reply, verse_document, chapter_document, passage_document,
)
from utils.router import path_ints

logger = logging.getLogger(__name__)


def _store():
    return current_app.extensions['kjv_store']


def validate(schema, data):
    """Validated schema instance, or None when ``data`` doesn't fit it."""
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        logger.warning(f"Rejected {request.path}: {e.error_count()} validation error(s)")
        return None


def _parse_body(schema):
    # Content type is not enforced; any body that parses as JSON is accepted
    return validate(schema, request.get_json(force=True, silent=True))


def _lookup_verse(book, chapter, verse):
    try:
        found = _store().fetch_verse(book, chapter, verse)
    except StoreError as e:
        logger.error(f"Database error fetching {book} {chapter}:{verse}: {e}", exc_info=True)
        return text_reply("Database error\n", 500)

    if not found:
        return text_reply("Verse not found\n", 404)
    return json_reply(verse_document(found))


def get_verse_by_path(book, chapter, verse):
    """GET /kjv/<book>/<chapter>/<verse>"""
    values = path_ints(book, chapter, verse)
    params = None
    if values is not None:
        params = validate(VerseRequest, dict(zip(('book', 'chapter', 'verse'), values)))
    if params is None:
        return text_reply("Invalid path: expected numeric book, chapter, verse\n", 400)
    return _lookup_verse(params.book, params.chapter, params.verse)


def get_verse():
    # Parse JSON body: expect {"book":1, "chapter":1, "verse":1}
    params = _parse_body(VerseRequest)
    if params is None:
        return text_reply("Invalid JSON: expected book, chapter, verse\n", 400)
    return _lookup_verse(params.book, params.chapter, params.verse)


def get_chapter():
    # Parse JSON body: expect {"book":1, "chapter":1}
    params = _parse_body(ChapterRequest)
    if params is None:
        return text_reply("Invalid JSON: expected book, chapter\n", 400)

    try:
        verses = _store().fetch_chapter(params.book, params.chapter)
    except StoreError as e:
        logger.error(f"Database error fetching chapter {params.book} {params.chapter}: {e}", exc_info=True)
        return text_reply("Database error\n", 500)

    document = chapter_document(params.book, params.chapter, verses)
    if document is None:
        return text_reply("Chapter not found\n", 404)
    logger.info(f"Returning {len(verses)} verses for chapter {params.book} {params.chapter}")
    return json_reply(document)


def get_passage():
    # Parse JSON body: expect {"book":1, "start_chapter":1, "start_verse":1, "end_chapter":1, "end_verse":1}
    params = _parse_body(PassageRequest)
    if params is None:
        return text_reply(
            "Invalid JSON: expected book, start_chapter, start_verse, end_chapter, end_verse\n", 400
        )

    bounds = (params.start_chapter, params.start_verse, params.end_chapter, params.end_verse)
    try:
        verses = _store().fetch_passage(params.book, *bounds)
    except StoreError as e:
        logger.error(f"Database error fetching passage {params.book} {bounds}: {e}", exc_info=True)
        return text_reply("Database error\n", 500)

    document = passage_document(params.book, *bounds, verses)
    if document is None:
        return text_reply("Passage not found\n", 404)
    return json_reply(document)
