"""
Shared fixtures: an in-memory document store with failure injection,
a ticking clock, and the review services wired on top of them.
"""

import copy
import itertools
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from database import get_document_store
from main import app
from routes.review import get_review_store
from services.document_store import DESC, DocumentStore
from services.rating_aggregator import RatingAggregator
from services.review_store import ReviewStore
from utils.errors import StoreError


class InMemoryDocumentStore(DocumentStore):
    """Dict-backed DocumentStore. Operations named in `fail_on` raise StoreError."""

    def __init__(self):
        self.collections = {}
        self.fail_on = set()
        self._ids = itertools.count(1)

    def _check(self, operation):
        if operation in self.fail_on:
            raise StoreError("injected failure", operation=operation)

    def _collection(self, name):
        return self.collections.setdefault(name, {})

    def get(self, collection, doc_id):
        self._check("get")
        doc = self._collection(collection).get(doc_id)
        return copy.deepcopy(doc) if doc is not None else None

    def set(self, collection, doc_id, document):
        self._check("set")
        doc = copy.deepcopy(document)
        doc["_id"] = doc_id
        self._collection(collection)[doc_id] = doc

    def update(self, collection, doc_id, fields):
        self._check("update")
        docs = self._collection(collection)
        if doc_id not in docs:
            raise StoreError(f"{collection}/{doc_id} not found", operation="update")
        docs[doc_id].update(copy.deepcopy(fields))

    def query(self, collection, filters, order_by=None, limit=None):
        self._check("query")
        docs = [
            copy.deepcopy(d)
            for d in self._collection(collection).values()
            if all(d.get(k) == v for k, v in filters.items())
        ]
        if order_by is not None:
            field, direction = order_by
            docs.sort(key=lambda d: d[field], reverse=direction == DESC)
        if limit is not None:
            docs = docs[:limit]
        return docs

    def new_id(self, collection):
        return f"{collection}-{next(self._ids)}"


class TickingClock:
    """Returns a strictly increasing time on every call."""

    def __init__(self):
        self.now = datetime(2024, 6, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self):
        self.now += timedelta(seconds=1)
        return self.now


@pytest.fixture
def memory_store():
    store = InMemoryDocumentStore()
    for doctor_id, name in [("D1", "Dr. One"), ("D2", "Dr. Two"), ("D3", "Dr. Three")]:
        store.set("doctors", doctor_id, {
            "name": name,
            "specialty": "general",
            "rating": "0.0",
            "reviews_count": 0,
        })
    return store


@pytest.fixture
def clock():
    return TickingClock()


@pytest.fixture
def review_store(memory_store, clock):
    return ReviewStore(memory_store, clock=clock)


@pytest.fixture
def aggregator(review_store):
    return RatingAggregator(review_store)


@pytest.fixture
def client(memory_store, clock):
    app.dependency_overrides[get_document_store] = lambda: memory_store
    app.dependency_overrides[get_review_store] = lambda: ReviewStore(memory_store, clock=clock)
    yield TestClient(app)
    app.dependency_overrides.clear()
