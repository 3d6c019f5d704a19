# utils/responses.py
import logging
from flask import jsonify, make_response

logger = logging.getLogger(__name__)


def text_reply(body, status):
    response = make_response(body, status)
    response.mimetype = 'text/plain'
    return response


def json_reply(document, status=200):
    """Serialize a finished document in one go.

    Nothing is written to the response until serialization has succeeded, so
    a failure never leaves a half-built body behind.
    """
    try:
        response = jsonify(document)
    except (TypeError, ValueError, MemoryError) as e:
        logger.error(f"Failed to serialize response: {e}")
        return text_reply("Internal error\n", 500)
    response.status_code = status
    return response


def verse_document(verse):
    return {
        "book": verse.book,
        "chapter": verse.chapter,
        "verse": verse.verse,
        "text": verse.text,
    }


def chapter_document(book, chapter, verses):
    """Chapter listing, or None when the chapter has no verses."""
    if not verses:
        return None
    return {
        "book": book,
        "chapter": chapter,
        "verses": [{"verse": v.verse, "text": v.text} for v in verses],
    }


def passage_document(book, start_chapter, start_verse, end_chapter, end_verse, verses):
    """Passage listing echoing the requested bounds, or None when empty."""
    if not verses:
        return None
    return {
        "book": book,
        "start_chapter": start_chapter,
        "start_verse": start_verse,
        "end_chapter": end_chapter,
        "end_verse": end_verse,
        "verses": [
            {"chapter": v.chapter, "verse": v.verse, "text": v.text}
            for v in verses
        ],
    }
