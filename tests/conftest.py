# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - In-memory stand-in for a MongoDB collection
# - Patches the async MongoDB client so no test touches the network
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# app.config loads settings at import time

os.environ.setdefault("MONGO_USER", "gallery_test")
os.environ.setdefault("MONGO_PASSWORD", "test-password")
os.environ.setdefault("MONGO_DB", "gallery_test")

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from app.config import Settings
from app.main import create_app


# =============================================================================
# Fake Collection
# =============================================================================

class FakeCursor:
    """Just enough of AsyncCursor for find().sort().to_list()."""

    def __init__(self, docs: list[dict]):
        self._docs = docs

    def sort(self, key: str, direction: int = 1) -> "FakeCursor":
        self._docs = sorted(self._docs, key=lambda d: d[key], reverse=direction < 0)
        return self

    async def to_list(self, length=None) -> list[dict]:
        return [dict(d) for d in self._docs[:length]]


class FakeCollection:
    """
    In-memory collection supporting the calls ImageService makes.

    Filters are limited to {} and {"_id": ...}. Set `fail_with` to an
    exception to make every call raise it.
    """

    def __init__(self):
        self.docs: dict = {}
        self.fail_with: Exception | None = None

    def _check(self):
        if self.fail_with is not None:
            raise self.fail_with

    def _match(self, flt: dict) -> list[dict]:
        if "_id" in flt:
            doc = self.docs.get(flt["_id"])
            return [doc] if doc is not None else []
        return list(self.docs.values())

    def find(self, flt: dict) -> FakeCursor:
        self._check()
        return FakeCursor(self._match(flt))

    async def find_one(self, flt: dict):
        self._check()
        found = self._match(flt)
        return dict(found[0]) if found else None

    async def insert_one(self, doc: dict):
        self._check()
        doc.setdefault("_id", ObjectId())
        self.docs[doc["_id"]] = dict(doc)
        return SimpleNamespace(inserted_id=doc["_id"])

    async def find_one_and_update(self, flt: dict, update: dict, return_document=None):
        self._check()
        found = self._match(flt)
        if not found:
            return None
        found[0].update(update.get("$set", {}))
        return dict(found[0])

    async def find_one_and_delete(self, flt: dict):
        self._check()
        found = self._match(flt)
        if not found:
            return None
        return self.docs.pop(found[0]["_id"])


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def public_dir(tmp_path):
    """Empty public directory for one test."""
    path = tmp_path / "public"
    path.mkdir()
    return path


@pytest.fixture
def make_settings(public_dir):
    """Factory for Settings that ignore any local .env file."""
    def _make(**overrides) -> Settings:
        values = {
            "MONGO_USER": "gallery_test",
            "MONGO_PASSWORD": "test-password",
            "MONGO_DB": "gallery_test",
            "PUBLIC_DIR": public_dir,
            "DB_WAIT_ON_STARTUP": True,
        }
        values.update(overrides)
        return Settings(_env_file=None, **values)
    return _make


@pytest.fixture
def images_collection():
    return FakeCollection()


@pytest.fixture
def mongo_client_mock(images_collection):
    """
    Patch AsyncMongoClient with a mock whose ping succeeds.

    Yields the mock class; `.return_value` is the client instance.
    """
    client = MagicMock(name="AsyncMongoClient()")
    client.admin.command = AsyncMock(return_value={"ok": 1.0})
    client.close = AsyncMock()

    database = MagicMock(name="AsyncDatabase")
    database.__getitem__.return_value = images_collection
    client.__getitem__.return_value = database

    with patch("lib.mongo_client.AsyncMongoClient", return_value=client) as client_cls:
        yield client_cls


@pytest.fixture
def test_client(make_settings, mongo_client_mock):
    """TestClient for an app whose database connects immediately."""
    app = create_app(make_settings())
    with TestClient(app) as client:
        yield client
