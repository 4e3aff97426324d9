import os
from types import SimpleNamespace

import pytest
from pymongo import MongoClient


# ----------------------------------------------------------------------
# Recording stand-ins for pymongo objects (unit tests)
# ----------------------------------------------------------------------
def _matches(doc, query):
    # equality-only filters are enough for the scripts under test
    return all(doc.get(k) == v for k, v in query.items())


class FakeCursor:
    def __init__(self, calls, docs):
        self.calls = calls
        self.docs = list(docs)

    def sort(self, key, direction):
        self.calls.append(("sort", key, direction))
        return self

    def limit(self, n):
        self.calls.append(("limit", n))
        self.docs = self.docs[:n]
        return self

    def __iter__(self):
        return iter(self.docs)


class FakeCollection:
    """
    Records every driver call as a tuple in `calls`. Returns canned
    results; only delete_many and count_documents look at `docs`.
    """

    def __init__(self, name, calls, docs=None):
        self.name = name
        self.calls = calls
        self.docs = docs if docs is not None else []

    def insert_many(self, docs):
        self.calls.append((self.name, "insert_many", [dict(d) for d in docs]))
        ids = []
        for i, doc in enumerate(docs):
            doc["_id"] = f"{self.name}-{i}"
            ids.append(doc["_id"])
        return SimpleNamespace(inserted_ids=ids)

    def insert_one(self, doc):
        self.calls.append((self.name, "insert_one", dict(doc)))
        doc["_id"] = f"{self.name}-one"
        return SimpleNamespace(inserted_id=doc["_id"])

    def find(self, query=None):
        self.calls.append((self.name, "find", query))
        return FakeCursor(self.calls, self.docs)

    def update_one(self, query, update):
        self.calls.append((self.name, "update_one", query, update))
        return SimpleNamespace(matched_count=1, modified_count=1)

    def update_many(self, query, update):
        self.calls.append((self.name, "update_many", query, update))
        return SimpleNamespace(matched_count=len(self.docs), modified_count=len(self.docs))

    def delete_one(self, query):
        self.calls.append((self.name, "delete_one", query))
        return SimpleNamespace(deleted_count=1)

    def delete_many(self, query):
        self.calls.append((self.name, "delete_many", query))
        kept = [d for d in self.docs if not _matches(d, query)]
        deleted = len(self.docs) - len(kept)
        self.docs[:] = kept
        return SimpleNamespace(deleted_count=deleted)

    def count_documents(self, query):
        return sum(1 for d in self.docs if _matches(d, query))

    def aggregate(self, pipeline):
        self.calls.append((self.name, "aggregate", pipeline))
        return iter([{"_id": "stub"}])

    def create_index(self, keys):
        self.calls.append((self.name, "create_index", keys))
        return "_".join(f"{field}_{direction}" for field, direction in keys)

    def index_information(self):
        return {
            "_id_": {"key": [("_id", 1)], "v": 2},
            "author_1": {"key": [("author", 1)], "v": 2},
        }


class FakeDatabase:
    def __init__(self, name="library"):
        self.name = name
        self.calls = []
        self.collections = {}

    def __getitem__(self, name):
        if name not in self.collections:
            self.collections[name] = FakeCollection(name, self.calls)
        return self.collections[name]


class FakeClient:
    def __init__(self, ping_error=None, database=None):
        self.ping_error = ping_error
        self.closed = False
        self.database = database
        self.admin = SimpleNamespace(command=self._command)

    def _command(self, name):
        if self.ping_error is not None:
            raise self.ping_error
        return {"ok": 1.0}

    def __getitem__(self, name):
        if self.database is None:
            self.database = FakeDatabase(name)
        return self.database

    def close(self):
        self.closed = True


@pytest.fixture
def fake_db():
    return FakeDatabase()


@pytest.fixture
def fake_books(fake_db):
    return fake_db["books"]


@pytest.fixture
def install_client(monkeypatch):
    """Route bookshelf.db.connect() to the given FakeClient."""
    from bookshelf import db as db_module

    def _install(client):
        monkeypatch.setattr(db_module, "get_client", lambda uri=None: client)
        return client

    return _install


@pytest.fixture
def fake_client(install_client):
    return install_client(FakeClient())


@pytest.fixture
def make_client(install_client):
    """Install a FakeClient with a ping error and/or pre-seeded books."""

    def _make(ping_error=None, books=None):
        database = FakeDatabase()
        database["books"].docs = list(books or [])
        return install_client(FakeClient(ping_error=ping_error, database=database))

    return _make


# ----------------------------------------------------------------------
# Real MongoDB (integration tests)
# ----------------------------------------------------------------------
@pytest.fixture(scope="session")
def mongodb_container():
    """
    Start a MongoDB container once per session.
    Skips when testcontainers is not installed or Docker is unavailable.
    """
    try:
        from testcontainers.mongodb import MongoDbContainer
    except ImportError:
        pytest.skip("testcontainers not installed. Install with: pip install -e '.[test]'")

    container = MongoDbContainer("mongo:7.0")
    try:
        container.start()
    except Exception as e:
        pytest.skip(f"Could not start MongoDB container: {e}")

    yield container

    container.stop()


@pytest.fixture(scope="session")
def mongo_client(mongodb_container):
    client = MongoClient(mongodb_container.get_connection_url())
    yield client
    client.close()


@pytest.fixture
def mongo_db(mongo_client, request):
    """A fresh database per test, dropped afterwards."""
    db_name = f"library_test_{os.getpid()}_{request.node.name}"[:60]
    db = mongo_client[db_name]
    yield db
    mongo_client.drop_database(db_name)
