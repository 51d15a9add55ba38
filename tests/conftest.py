"""
Pytest fixtures for the catalog gateway.

Relational stores run on file-backed SQLite through aiosqlite, the document
store is an in-memory double covering the collection calls the handlers make.
"""
import copy
import re
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from catalog_gateway.config import Settings
from catalog_gateway.db.database import RelationalStore, Stores
from catalog_gateway.main import create_app


def _field_matches(value, cond):
    if isinstance(cond, dict) and "$regex" in cond:
        flags = re.IGNORECASE if "i" in cond.get("$options", "") else 0
        values = value if isinstance(value, list) else [value]
        return any(isinstance(v, str) and re.search(cond["$regex"], v, flags) for v in values)
    if isinstance(value, list) and not isinstance(cond, list):
        return cond in value
    return value == cond


def matches(doc, filter_):
    for key, cond in filter_.items():
        if key == "$or":
            if not any(matches(doc, sub) for sub in cond):
                return False
        elif not _field_matches(doc.get(key), cond):
            return False
    return True


class FakeCursor:
    def __init__(self, docs):
        self._docs = docs

    def limit(self, n):
        return FakeCursor(self._docs[:n] if n else self._docs)

    async def to_list(self, length=None):
        docs = self._docs if length is None else self._docs[:length]
        return [copy.deepcopy(d) for d in docs]


class FakeCollection:
    def __init__(self, name):
        self.name = name
        self.docs = []
        self.indexes = []

    async def insert_one(self, doc):
        doc.setdefault("_id", ObjectId())
        self.docs.append(copy.deepcopy(doc))
        return SimpleNamespace(inserted_id=doc["_id"])

    def find(self, filter_=None):
        return FakeCursor([d for d in self.docs if matches(d, filter_ or {})])

    async def find_one(self, filter_):
        for d in self.docs:
            if matches(d, filter_):
                return copy.deepcopy(d)
        return None

    async def update_one(self, filter_, update):
        for d in self.docs:
            if matches(d, filter_):
                d.update(update.get("$set", {}))
                for key in update.get("$unset", {}):
                    d.pop(key, None)
                for key, delta in update.get("$inc", {}).items():
                    d[key] = d.get(key, 0) + delta
                return SimpleNamespace(matched_count=1, modified_count=1)
        return SimpleNamespace(matched_count=0, modified_count=0)

    async def delete_one(self, filter_):
        for i, d in enumerate(self.docs):
            if matches(d, filter_):
                del self.docs[i]
                return SimpleNamespace(deleted_count=1)
        return SimpleNamespace(deleted_count=0)

    async def create_index(self, keys):
        self.indexes.append(keys)
        return "_".join(f"{k}_{d}" for k, d in keys)


class FakeDatabase(dict):
    def __missing__(self, name):
        collection = self[name] = FakeCollection(name)
        return collection


class FakeDocumentStore:
    name = "document"

    def __init__(self, fail_connect=False):
        self.fail_connect = fail_connect
        self.db = FakeDatabase()
        self.connected = False
        self.closed = False

    async def connect(self):
        if self.fail_connect:
            raise ConnectionError("document store unreachable")
        self.connected = True

    def database(self):
        return self.db

    def collection(self, name):
        return self.db[name]

    async def close(self, timeout=5.0):
        self.closed = True


@pytest.fixture
def settings():
    return Settings(
        transactional_url="sqlite+aiosqlite://",
        analytics_url="sqlite+aiosqlite://",
        mongo_uri="mongodb://localhost:27017",
        log_level="DEBUG",
    )


@pytest.fixture
def orders_path(tmp_path):
    return tmp_path / "orders.db"


@pytest.fixture
def analytics_path(tmp_path):
    return tmp_path / "analytics.db"


@pytest.fixture
def document_store():
    return FakeDocumentStore()


@pytest.fixture
def stores(orders_path, analytics_path, document_store):
    return Stores(
        orders=RelationalStore("transactional", f"sqlite+aiosqlite:///{orders_path}"),
        analytics=RelationalStore("analytics", f"sqlite+aiosqlite:///{analytics_path}"),
        documents=document_store,
    )


@pytest.fixture
def client(settings, stores):
    app = create_app(settings, stores)
    with TestClient(app) as c:
        yield c


# Synchronous engines on the same files, for seeding rows and inspecting
# tables behind the API's back. Tables exist once the client has started.
@pytest.fixture
def orders_engine(client, orders_path):
    engine = create_engine(f"sqlite:///{orders_path}")
    yield engine
    engine.dispose()


@pytest.fixture
def analytics_engine(client, analytics_path):
    engine = create_engine(f"sqlite:///{analytics_path}")
    yield engine
    engine.dispose()
