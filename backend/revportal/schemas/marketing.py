"""Pydantic v2 schemas for web analytics and paid media endpoints."""

import uuid
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from revportal.schemas.performance import AMOUNT_MAX, RATIO_MAX, REVENUE_MAX, ReportingPeriod

# ---------------------------------------------------------------------------
# Web analytics
# ---------------------------------------------------------------------------


class WebAnalyticsCreate(ReportingPeriod):
    sessions: int | None = Field(None, ge=0)
    users: int | None = Field(None, ge=0)
    bounce_rate: Decimal | None = Field(None, ge=0, le=100)
    booking_engine_conversion_rate: Decimal | None = Field(None, ge=0, le=100)
    revenue_direct_bookings: Decimal | None = Field(None, ge=0, le=REVENUE_MAX)
    traffic_organic: int | None = Field(None, ge=0)
    traffic_paid: int | None = Field(None, ge=0)
    traffic_direct: int | None = Field(None, ge=0)
    traffic_referral: int | None = Field(None, ge=0)


class WebAnalyticsResponse(BaseModel):
    id: uuid.UUID
    hotel_id: uuid.UUID
    period_type: str
    period_start: date
    period_end: date
    sessions: int | None = None
    users: int | None = None
    bounce_rate: Decimal | None = None
    booking_engine_conversion_rate: Decimal | None = None
    revenue_direct_bookings: Decimal | None = None
    traffic_organic: int | None = None
    traffic_paid: int | None = None
    traffic_direct: int | None = None
    traffic_referral: int | None = None
    updated_by: uuid.UUID | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ---------------------------------------------------------------------------
# Paid media
# ---------------------------------------------------------------------------


class PaidMediaCreate(ReportingPeriod):
    """One channel's results for a period. Channel names are free text."""

    channel: str = Field(..., min_length=1, max_length=100)
    spend: Decimal | None = Field(None, ge=0, le=AMOUNT_MAX)
    roas: Decimal | None = Field(None, ge=0, le=RATIO_MAX)
    cpa: Decimal | None = Field(None, ge=0, le=AMOUNT_MAX)
    impressions: int | None = Field(None, ge=0)
    clicks: int | None = Field(None, ge=0)
    ctr: Decimal | None = Field(None, ge=0, le=100)


class PaidMediaResponse(BaseModel):
    id: uuid.UUID
    hotel_id: uuid.UUID
    period_type: str
    period_start: date
    period_end: date
    channel: str
    spend: Decimal | None = None
    roas: Decimal | None = None
    cpa: Decimal | None = None
    impressions: int | None = None
    clicks: int | None = None
    ctr: Decimal | None = None
    updated_by: uuid.UUID | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ChannelSummaryResponse(BaseModel):
    """Per-channel roll-up; ``from_attributes`` reads a metrics ``ChannelSummary``."""

    channel: str
    records: int
    spend: Decimal
    clicks: int
    impressions: int
    roas: Decimal
    cpa: Decimal

    model_config = ConfigDict(from_attributes=True)


class ChannelTotalsResponse(BaseModel):
    total_spend: Decimal
    total_clicks: int
    total_impressions: int
    average_roas: Decimal
    average_cpa: Decimal

    model_config = ConfigDict(from_attributes=True)


class ChannelBreakdownResponse(BaseModel):
    """Channel roll-up for the latest period with paid media data."""

    hotel_id: uuid.UUID
    period_start: date | None = None
    period_end: date | None = None
    channels: list[ChannelSummaryResponse]
    totals: ChannelTotalsResponse
