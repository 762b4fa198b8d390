"""
Shared fixtures: in-memory stand-ins for the MongoDB database and the Redis
client, and a Flask app wired to them.
"""
import re
from types import SimpleNamespace

import pytest
from bson import ObjectId

from backend.app import create_app
from backend.config import TestingConfig


def _matches(doc, query):
    for key, condition in query.items():
        if key == "$or":
            if not any(_matches(doc, sub) for sub in condition):
                return False
            continue
        value = doc.get(key)
        if isinstance(condition, dict) and "$regex" in condition:
            flags = re.IGNORECASE if "i" in condition.get("$options", "") else 0
            if not isinstance(value, str) or not re.search(condition["$regex"], value, flags):
                return False
        elif value != condition:
            return False
    return True


class FakeCollection:
    def __init__(self):
        self.docs = []
        self.find_calls = []
        self.indexes = []

    def insert_one(self, doc):
        stored = dict(doc, _id=ObjectId())
        self.docs.append(stored)
        return SimpleNamespace(inserted_id=stored["_id"])

    def insert_many(self, docs):
        return SimpleNamespace(inserted_ids=[self.insert_one(d).inserted_id for d in docs])

    def find(self, query=None):
        self.find_calls.append(query)
        return [dict(d) for d in self.docs if _matches(d, query or {})]

    def create_index(self, keys, **kwargs):
        self.indexes.append(keys)
        return "_".join(f"{field}_{direction}" for field, direction in keys)


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())


class FakeRedis:
    def __init__(self):
        self.values = {}
        self.ttls = {}
        self.get_calls = 0

    def get(self, key):
        self.get_calls += 1
        return self.values.get(key)

    def setex(self, key, seconds, value):
        self.values[key] = value
        self.ttls[key] = seconds

    def ttl(self, key):
        return self.ttls.get(key, -2)

    def delete(self, *keys):
        removed = 0
        for key in keys:
            if self.values.pop(key, None) is not None:
                removed += 1
            self.ttls.pop(key, None)
        return removed

    def close(self):
        pass


@pytest.fixture
def mongo_db():
    return FakeDatabase()


@pytest.fixture
def books_collection(mongo_db):
    return mongo_db["books"]


@pytest.fixture
def redis_client():
    return FakeRedis()


@pytest.fixture
def seed_books(books_collection):
    def _seed(*books):
        for book in books:
            books_collection.insert_one(book)
    return _seed


@pytest.fixture
def app(mongo_db, redis_client):
    return create_app(TestingConfig, mongo_db=mongo_db, redis_client=redis_client)


@pytest.fixture
def client(app):
    return app.test_client()
