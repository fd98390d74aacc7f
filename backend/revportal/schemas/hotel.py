"""Pydantic v2 request/response schemas for hotel endpoints."""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

BRAND_PATTERN = "^(virgin_hotels|virgin_limited_edition)$"
STATUS_PATTERN = "^(active|inactive)$"

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class HotelCreate(BaseModel):
    """Schema for adding a hotel to the portfolio."""

    name: str = Field(..., min_length=1, max_length=255)
    location: str = Field(..., min_length=1, max_length=255)
    brand: str = Field(..., pattern=BRAND_PATTERN)
    region: str = Field(..., min_length=1, max_length=100)
    status: str = Field("active", pattern=STATUS_PATTERN)


class HotelUpdate(BaseModel):
    """Schema for partially updating a hotel. All fields optional."""

    name: str | None = Field(None, min_length=1, max_length=255)
    location: str | None = Field(None, min_length=1, max_length=255)
    brand: str | None = Field(None, pattern=BRAND_PATTERN)
    region: str | None = Field(None, min_length=1, max_length=100)
    status: str | None = Field(None, pattern=STATUS_PATTERN)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class HotelResponse(BaseModel):
    """Hotel information returned from the API."""

    id: uuid.UUID
    name: str
    location: str
    brand: str
    region: str
    status: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class HotelListResponse(BaseModel):
    """Hotels visible to the caller."""

    items: list[HotelResponse]
    total: int
