import json

from models import Verse
from utils.responses import (
    chapter_document, json_reply, passage_document, text_reply, verse_document,
)


def test_verse_document_is_flat():
    doc = verse_document(Verse(1, 2, 3, 'text'))
    assert doc == {"book": 1, "chapter": 2, "verse": 3, "text": "text"}
    assert list(doc) == ["book", "chapter", "verse", "text"]


def test_chapter_document_omits_chapter_per_verse():
    doc = chapter_document(1, 2, [Verse(1, 2, 1, 'a'), Verse(1, 2, 2, 'b')])
    assert doc == {"book": 1, "chapter": 2, "verses": [
        {"verse": 1, "text": "a"},
        {"verse": 2, "text": "b"},
    ]}


def test_empty_listings_are_not_found():
    assert chapter_document(1, 2, []) is None
    assert passage_document(1, 1, 1, 2, 2, []) is None


def test_passage_document_echoes_bounds():
    doc = passage_document(1, 1, 3, 2, 1, [Verse(1, 1, 3, 'a'), Verse(1, 2, 1, 'b')])
    assert list(doc) == [
        "book", "start_chapter", "start_verse", "end_chapter", "end_verse", "verses",
    ]
    assert doc["verses"][1] == {"chapter": 2, "verse": 1, "text": "b"}


def test_json_reply_escapes_text(app):
    text = 'He said, "peace" \\ \x02'
    with app.test_request_context():
        response = json_reply(verse_document(Verse(1, 1, 1, text)))
    body = response.get_data(as_text=True)
    assert response.status_code == 200
    assert response.mimetype == 'application/json'
    assert '\\"peace\\"' in body
    assert '\\u0002' in body
    assert json.loads(body)["text"] == text


def test_json_reply_unserializable_falls_back_to_500(app):
    with app.test_request_context():
        response = json_reply({"text": object()})
    assert response.status_code == 500
    assert response.get_data(as_text=True) == "Internal error\n"


def test_text_reply(app):
    with app.test_request_context():
        response = text_reply("Not found\n", 404)
    assert response.status_code == 404
    assert response.mimetype == 'text/plain'
