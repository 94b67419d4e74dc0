"""Generic async repository over a single MongoDB collection."""

from __future__ import annotations

import asyncio
from typing import Any


class BaseRepository:
    """Thin wrapper around one collection handle.

    The handle is injected, never looked up, so the same repository works with
    a motor collection in production and an in-memory fake in tests. Every
    call is bounded by ``timeout``; expiry cancels only that call and surfaces
    as :class:`asyncio.TimeoutError`.
    """

    def __init__(self, collection: Any, timeout: float):
        self._collection = collection
        self._timeout = timeout

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    async def insert(self, document: dict[str, Any]) -> str:
        """Insert one document and return the store-generated id as a string."""
        result = await asyncio.wait_for(
            self._collection.insert_one(document), timeout=self._timeout
        )
        return str(result.inserted_id)
