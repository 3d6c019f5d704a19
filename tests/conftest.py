import pytest
from sqlalchemy import insert

from app import create_app
from database import KjvStore
from models import KjvVerse

QUOTED_TEXT = 'He said, "peace"'
ESCAPED_TEXT = 'back\\slash\tand\x01control'

# Inserted out of order on purpose; the store must sort
SEED_VERSES = [
    (1, 2, 2, 'Thus the heavens and the earth were finished.'),
    (1, 1, 1, 'In the beginning God created the heaven and the earth.'),
    (1, 1, 3, 'And God said, Let there be light: and there was light.'),
    (1, 1, 2, 'And the earth was without form, and void.'),
    (1, 2, 1, 'And on the seventh day God ended his work.'),
    (1, 2, 3, 'And God blessed the seventh day.'),
    (1, 2, 4, 'These are the generations of the heavens.'),
    (1, 3, 1, 'Now the serpent was more subtil.'),
    (1, 3, 2, 'And the woman said unto the serpent.'),
    (2, 1, 1, QUOTED_TEXT),
    (2, 1, 2, ESCAPED_TEXT),
    (43, 3, 16, 'For God so loved the world.'),
]


@pytest.fixture
def database_url(tmp_path):
    url = f"sqlite:///{tmp_path / 'kjv.db'}"
    store = KjvStore(url)
    store.create_schema()
    with store.session_scope() as db:
        db.execute(insert(KjvVerse), [
            {'book': b, 'chapter': c, 'verse': v, 'text': t} for b, c, v, t in SEED_VERSES
        ])
        db.commit()
    store.engine.dispose()
    return url


@pytest.fixture
def store(database_url):
    store = KjvStore(database_url)
    yield store
    store.engine.dispose()


@pytest.fixture
def app(database_url):
    app = create_app({'KJV_DATABASE_URL': database_url, 'TESTING': True})
    yield app
    app.extensions['kjv_store'].engine.dispose()


@pytest.fixture
def client(app):
    return app.test_client()
