"""Vendor service: creation business logic.

Rule: No FastAPI here. The collection handle is injected via the constructor
and all store access goes through the repository. Driver failures (network,
server, and BSON encoding alike) are logged with their cause and re-raised as
:class:`VendorCreateError`, whose message never includes that cause.
"""


import asyncio
import logging
from typing import Any

from bson.errors import BSONError
from pymongo.errors import PyMongoError

from vendor_api.core.exceptions import VendorCreateError
from vendor_api.repositories.vendor import VendorRepository
from vendor_api.schemas.vendor import Vendor, VendorCreated

logger = logging.getLogger(__name__)

# Raised by the BSON encoder inside insert_one
_ENCODE_ERRORS = (BSONError, OverflowError, UnicodeError)

class VendorService:
    def __init__(self, collection: Any, insert_timeout: float):
        self._repo = VendorRepository(collection, insert_timeout)

    async def create_vendor(self, vendor: Vendor) -> VendorCreated:
        try:
            inserted_id = await self._repo.create(vendor)
        except asyncio.TimeoutError:
            logger.error("Insert timed out for vendor_id=%r", vendor.vendor_id)
            raise VendorCreateError()
        except (PyMongoError, *_ENCODE_ERRORS) as exc:
            logger.error(
                "Insert failed for vendor_id=%r: %s: %s",
                vendor.vendor_id, type(exc).__name__, exc,
            )
            raise VendorCreateError() from exc

        logger.info("Created vendor vendor_id=%r insertedId=%s", vendor.vendor_id, inserted_id)
        return VendorCreated(inserted_id=inserted_id, vendor_id=vendor.vendor_id)
