from io import BytesIO

import pytest
from PIL import Image
from pymongo.errors import PyMongoError

from application import create_app
from session_store import LocalSessionStore


class InsertResult:
    def __init__(self, inserted_id):
        self.inserted_id = inserted_id


class FakeUsersCollection:
    """Just enough of a pymongo collection for the registration paths."""

    def __init__(self):
        self.docs = []

    def find_one(self, query):
        for doc in self.docs:
            if all(doc.get(k) == v for k, v in query.items()):
                return doc
        return None

    def insert_one(self, doc):
        self.docs.append(doc)
        return InsertResult(len(self.docs))


class BrokenUsersCollection(FakeUsersCollection):
    def insert_one(self, doc):
        raise PyMongoError("connection refused")


class StubGateway:
    def __init__(self, result):
        self.result = result
        self.calls = []
        self.languages = []

    def register(self, name, email, password, language=None):
        self.calls.append((name, email, password))
        self.languages.append(language)
        return self.result


@pytest.fixture
def store():
    return LocalSessionStore()


@pytest.fixture
def users():
    return FakeUsersCollection()


@pytest.fixture
def app(users):
    return create_app({
        'TESTING': True,
        'SECRET_KEY': 'test-secret',
        'USERS_COLLECTION': users,
        'LOG_LEVEL': 'WARNING',
    })


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def png_bytes():
    buf = BytesIO()
    Image.new('RGB', (8, 8), 'green').save(buf, format='PNG')
    return buf.getvalue()
