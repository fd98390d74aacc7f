"""Weekly update API routes — the narrative report filed for each hotel-week."""

import logging

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from revportal.api.deps import get_current_user, get_db, get_editable_hotel, get_visible_hotel
from revportal.config import settings
from revportal.models.hotel import Hotel
from revportal.models.user import User
from revportal.models.weekly_update import WeeklyUpdate
from revportal.schemas.weekly_update import WeeklyUpdateCreate, WeeklyUpdateResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/hotels/{hotel_id}/weekly-updates", tags=["weekly-updates"])


@router.get(
    "",
    response_model=list[WeeklyUpdateResponse],
    summary="List weekly updates, newest first",
)
async def list_weekly_updates(
    limit: int = Query(settings.default_history_limit, ge=1, le=settings.max_history_limit),
    hotel: Hotel = Depends(get_visible_hotel),
    db: AsyncSession = Depends(get_db),
) -> list[WeeklyUpdateResponse]:
    result = await db.execute(
        select(WeeklyUpdate)
        .where(WeeklyUpdate.hotel_id == hotel.id)
        .order_by(WeeklyUpdate.week_start.desc(), WeeklyUpdate.created_at.desc())
        .limit(limit)
    )
    return [WeeklyUpdateResponse.model_validate(u) for u in result.scalars().all()]


@router.post(
    "",
    response_model=WeeklyUpdateResponse,
    status_code=status.HTTP_201_CREATED,
    summary="File a weekly update",
)
async def create_weekly_update(
    body: WeeklyUpdateCreate,
    hotel: Hotel = Depends(get_editable_hotel),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> WeeklyUpdateResponse:
    update = WeeklyUpdate(hotel_id=hotel.id, updated_by=current_user.id, **body.model_dump())
    db.add(update)
    await db.flush()
    await db.refresh(update)

    logger.info("Filed weekly update for hotel %s (week of %s)", hotel.id, body.week_start)
    return WeeklyUpdateResponse.model_validate(update)
