"""Vendor creation router — thin HTTP layer.

Pattern:
  1. Body is decoded into :class:`Vendor` by the ``vendor_body`` dependency
     whatever the Content-Type header says (decode errors → 400 via the
     RequestValidationError handler)
  2. Collection handle injected via Depends
  3. Service does the write; VendorCreateError → 500 via the AppException handler
"""

from __future__ import annotations

import json
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from vendor_api.db.mongo import get_collection
from vendor_api.schemas.common import ErrorResponse
from vendor_api.schemas.vendor import Vendor, VendorCreated
from vendor_api.services.vendor import VendorService

router = APIRouter(prefix="/api", tags=["Vendors"])


async def vendor_body(request: Request) -> Vendor:
    """Decode the raw request body as a Vendor JSON document."""
    raw = await request.body()
    try:
        data = json.loads(raw)
    except ValueError as exc:  # JSONDecodeError, UnicodeDecodeError
        raise RequestValidationError(
            [{"type": "json_invalid", "loc": ("body",), "msg": f"JSON decode error: {exc}"}]
        )
    try:
        return Vendor.model_validate(data)
    except ValidationError as exc:
        raise RequestValidationError(exc.errors(include_url=False), body=data)


def get_vendor_service(
    request: Request,
    collection: Any = Depends(get_collection),
) -> VendorService:
    return VendorService(collection, request.app.state.settings.insert_timeout_seconds)


@router.post(
    "/vendor",
    response_model=VendorCreated,
    response_model_by_alias=True,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def create_vendor(
    body: Vendor = Depends(vendor_body),
    service: VendorService = Depends(get_vendor_service),
):
    """Insert one vendor document and return the generated id."""
    return await service.create_vendor(body)
