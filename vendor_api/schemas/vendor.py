"""Vendor Pydantic schemas (request body, stored document, response).

Decoding is structural: unknown keys are dropped, types are checked without
coercion, and omitted keys (or explicit nulls) fall back to zero values.
Strings have lone surrogates replaced with U+FFFD; integers must fit in int64.
"""

from __future__ import annotations

import re
from typing import Annotated, Any

from pydantic import (
    AfterValidator,
    BaseModel,
    Field,
    StrictFloat,
    StrictInt,
    StrictStr,
    model_validator,
)

_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def _replace_surrogates(value: str) -> str:
    return _LONE_SURROGATE.sub("\ufffd", value)


Text = Annotated[StrictStr, AfterValidator(_replace_surrogates)]
Int64 = Annotated[StrictInt, Field(ge=-(2**63), le=2**63 - 1)]


class _Document(BaseModel):
    """Base for every model that is decoded from a request body."""

    model_config = {"extra": "ignore"}

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: Any) -> Any:
        # null behaves like a missing key
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


class CompanyRating(_Document):
    company_id: Text = ""
    avg_rating: StrictFloat = 0.0


class GlobalRatings(_Document):
    avg_rating: StrictFloat = 0.0


class GlobalMetrics(_Document):
    success_rate: StrictFloat = 0.0
    avg_response_time: Int64 = 0  # milliseconds


class Vendor(_Document):
    """A vendor document as received and as written to the collection."""

    vendor_id: Text = ""
    name: Text = ""
    category: Text = ""
    company_wise_ratings: list[CompanyRating] = Field(default_factory=list)
    global_ratings: GlobalRatings = Field(default_factory=GlobalRatings)
    global_metrics: GlobalMetrics = Field(default_factory=GlobalMetrics)
    trust_score: StrictFloat = 0.0

    def to_document(self) -> dict[str, Any]:
        """Fresh dict for ``insert_one`` (the driver mutates it to add ``_id``)."""
        return self.model_dump()


class VendorCreated(BaseModel):
    message: str = "Vendor created successfully"
    inserted_id: str = Field(alias="insertedId")
    vendor_id: str

    model_config = {"populate_by_name": True}
