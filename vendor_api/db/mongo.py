"""MongoDB bootstrap: one motor client and one collection handle per process.

``bootstrap`` never raises for expected failures; it returns a
:class:`StartupResult` that the application lifespan checks once before the
server starts accepting requests.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Optional

from fastapi import Request
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection
from pymongo.errors import PyMongoError

from vendor_api.core.config import Settings

logger = logging.getLogger(__name__)

MISSING_URI_MESSAGE = "You must set your 'MONGO_URI' environment variable."


@dataclass
class StartupResult:
    """Outcome of :func:`bootstrap`: a live collection or an error message."""

    client: Optional[AsyncIOMotorClient] = None
    collection: Optional[AsyncIOMotorCollection] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.collection is not None


def _describe(exc: BaseException) -> str:
    return str(exc) or type(exc).__name__


async def bootstrap(settings: Settings) -> StartupResult:
    """Connect, ping, and resolve the configured collection."""
    if not settings.mongo_uri:
        return StartupResult(error=MISSING_URI_MESSAGE)

    timeout_s = settings.mongo_connect_timeout_seconds
    timeout_ms = int(timeout_s * 1000)

    try:
        client = AsyncIOMotorClient(
            settings.mongo_uri,
            serverSelectionTimeoutMS=timeout_ms,
            connectTimeoutMS=timeout_ms,
        )
    except PyMongoError as exc:
        return StartupResult(error=f"Could not connect to MongoDB: {_describe(exc)}")

    try:
        await asyncio.wait_for(client.admin.command("ping"), timeout=timeout_s)
        collection = client[settings.db_name][settings.collection_name]
    except (PyMongoError, asyncio.TimeoutError) as exc:
        client.close()
        return StartupResult(error=f"Could not connect to MongoDB: {_describe(exc)}")

    logger.info(
        "Connected to MongoDB (db=%s, collection=%s)",
        settings.db_name, settings.collection_name,
    )
    return StartupResult(client=client, collection=collection)


# ---------------------------------------------------------------------------
# FastAPI dependency
# ---------------------------------------------------------------------------
def get_collection(request: Request) -> Any:
    """Return the collection handle stored on ``app.state`` at startup."""
    return request.app.state.vendor_collection
