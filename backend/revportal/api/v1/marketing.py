"""Digital marketing API routes — web analytics and paid media per hotel."""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from revportal.api.deps import get_current_user, get_db, get_editable_hotel, get_visible_hotel
from revportal.config import settings
from revportal.metrics import aggregate_by_channel, channel_totals
from revportal.models.hotel import Hotel
from revportal.models.marketing import PaidMediaData, WebAnalyticsData
from revportal.models.user import User
from revportal.schemas.marketing import (
    ChannelBreakdownResponse,
    ChannelSummaryResponse,
    ChannelTotalsResponse,
    PaidMediaCreate,
    PaidMediaResponse,
    WebAnalyticsCreate,
    WebAnalyticsResponse,
)
from revportal.schemas.performance import PERIOD_TYPE_PATTERN
from revportal.services.reporting_service import latest_paid_media_period

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/hotels/{hotel_id}", tags=["marketing"])


# ---------------------------------------------------------------------------
# Web analytics
# ---------------------------------------------------------------------------


@router.get(
    "/web-analytics",
    response_model=list[WebAnalyticsResponse],
    summary="List web analytics records, newest first",
)
async def list_web_analytics(
    period_type: str = Query("weekly", pattern=PERIOD_TYPE_PATTERN),
    limit: int = Query(settings.default_history_limit, ge=1, le=settings.max_history_limit),
    hotel: Hotel = Depends(get_visible_hotel),
    db: AsyncSession = Depends(get_db),
) -> list[WebAnalyticsResponse]:
    result = await db.execute(
        select(WebAnalyticsData)
        .where(WebAnalyticsData.hotel_id == hotel.id, WebAnalyticsData.period_type == period_type)
        .order_by(WebAnalyticsData.period_start.desc(), WebAnalyticsData.created_at.desc())
        .limit(limit)
    )
    return [WebAnalyticsResponse.model_validate(r) for r in result.scalars().all()]


@router.post(
    "/web-analytics",
    response_model=WebAnalyticsResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record a period's web analytics",
)
async def create_web_analytics(
    body: WebAnalyticsCreate,
    hotel: Hotel = Depends(get_editable_hotel),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> WebAnalyticsResponse:
    record = WebAnalyticsData(hotel_id=hotel.id, updated_by=current_user.id, **body.model_dump())
    db.add(record)
    await db.flush()
    await db.refresh(record)

    logger.info("Stored %s web analytics for hotel %s (%s)", body.period_type, hotel.id, body.period_start)
    return WebAnalyticsResponse.model_validate(record)


# ---------------------------------------------------------------------------
# Paid media
# ---------------------------------------------------------------------------


@router.get(
    "/paid-media",
    response_model=list[PaidMediaResponse],
    summary="List paid media records, newest first",
)
async def list_paid_media(
    period_type: str = Query("weekly", pattern=PERIOD_TYPE_PATTERN),
    limit: int = Query(settings.paid_media_history_limit, ge=1, le=settings.max_history_limit * 4),
    hotel: Hotel = Depends(get_visible_hotel),
    db: AsyncSession = Depends(get_db),
) -> list[PaidMediaResponse]:
    result = await db.execute(
        select(PaidMediaData)
        .where(PaidMediaData.hotel_id == hotel.id, PaidMediaData.period_type == period_type)
        .order_by(PaidMediaData.period_start.desc(), PaidMediaData.channel)
        .limit(limit)
    )
    return [PaidMediaResponse.model_validate(r) for r in result.scalars().all()]


@router.post(
    "/paid-media",
    response_model=PaidMediaResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record one channel's paid media results",
)
async def create_paid_media(
    body: PaidMediaCreate,
    hotel: Hotel = Depends(get_editable_hotel),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PaidMediaResponse:
    record = PaidMediaData(hotel_id=hotel.id, updated_by=current_user.id, **body.model_dump())
    db.add(record)
    await db.flush()
    await db.refresh(record)

    logger.info(
        "Stored %s paid media for hotel %s (%s, %s)", body.period_type, hotel.id, body.channel, body.period_start
    )
    return PaidMediaResponse.model_validate(record)


@router.get(
    "/paid-media/channels",
    response_model=ChannelBreakdownResponse,
    summary="Per-channel roll-up of the latest period",
)
async def paid_media_channels(
    period_type: str = Query("weekly", pattern=PERIOD_TYPE_PATTERN),
    hotel: Hotel = Depends(get_visible_hotel),
    db: AsyncSession = Depends(get_db),
) -> ChannelBreakdownResponse:
    """Sum spend, clicks and impressions and average ROAS and CPA per channel.

    Only rows from the newest period start are included. With no data the
    channel list is empty and every total is 0.
    """
    records = await latest_paid_media_period(db, hotel.id, period_type)
    summaries = aggregate_by_channel(records)
    return ChannelBreakdownResponse(
        hotel_id=hotel.id,
        period_start=records[0].period_start if records else None,
        period_end=max((r.period_end for r in records), default=None),
        channels=[ChannelSummaryResponse.model_validate(s) for s in summaries],
        totals=ChannelTotalsResponse.model_validate(channel_totals(summaries)),
    )
