"""Shared fixtures: an in-memory collection injected in place of MongoDB."""

import asyncio
from types import SimpleNamespace

import bson
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from vendor_api.core.config import Settings
from vendor_api.main import create_app


class FakeCollection:
    """Minimal async stand-in for a motor collection.

    Documents are BSON-encoded on insert, as the driver does, so encoding
    failures surface from ``insert_one`` exactly as they would in production.
    """

    def __init__(self, error: Exception | None = None, delay: float = 0.0):
        self.documents: list[dict] = []
        self.error = error
        self.delay = delay

    async def insert_one(self, document: dict):
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        document["_id"] = ObjectId()
        bson.encode(document)
        self.documents.append(document)
        return SimpleNamespace(inserted_id=document["_id"])


class FakeClient:
    def __init__(self):
        self.closed = False

    def close(self):
        self.closed = True


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        app_env="test",
        mongo_uri="mongodb://unused:27017",
        insert_timeout_seconds=0.2,
    )


@pytest.fixture
def collection() -> FakeCollection:
    return FakeCollection()


@pytest.fixture
def client(test_settings, collection):
    with TestClient(create_app(test_settings, collection=collection)) as c:
        yield c


@pytest.fixture
def vendor_payload() -> dict:
    return {
        "vendor_id": "v-100",
        "name": "Acme Freight",
        "category": "logistics",
        "company_wise_ratings": [
            {"company_id": "c-1", "avg_rating": 4.5},
            {"company_id": "c-2", "avg_rating": 3.75},
        ],
        "global_ratings": {"avg_rating": 4.1},
        "global_metrics": {"success_rate": 0.97, "avg_response_time": 320},
        "trust_score": 0.87,
    }
