"""Hotels API routes — visibility-scoped reads, administrator-only writes."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from revportal.api.deps import get_current_user, get_db, get_visible_hotel, require_administrator, visible_hotels_clause
from revportal.models.hotel import Hotel
from revportal.models.user import User
from revportal.schemas.auth import MessageResponse
from revportal.schemas.hotel import HotelCreate, HotelListResponse, HotelResponse, HotelUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/hotels", tags=["hotels"])


async def _get_hotel_or_404(db: AsyncSession, hotel_id: uuid.UUID) -> Hotel:
    result = await db.execute(select(Hotel).where(Hotel.id == hotel_id))
    hotel = result.scalar_one_or_none()
    if hotel is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Hotel not found",
        )
    return hotel


@router.post(
    "",
    response_model=HotelResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add a hotel to the portfolio",
)
async def create_hotel(
    body: HotelCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_administrator),
) -> HotelResponse:
    hotel = Hotel(**body.model_dump())
    db.add(hotel)
    await db.flush()
    await db.refresh(hotel)

    logger.info("Administrator %s created hotel %s (%s)", admin.id, hotel.id, hotel.name)
    return HotelResponse.model_validate(hotel)


@router.get(
    "",
    response_model=HotelListResponse,
    summary="List hotels visible to the current user",
)
async def list_hotels(
    brand: str | None = Query(None),
    status_filter: str | None = Query(None, alias="status"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> HotelListResponse:
    """Return visible hotels ordered by name, optionally filtered by brand and status."""
    filters = [visible_hotels_clause(current_user)]
    if brand is not None:
        filters.append(Hotel.brand == brand)
    if status_filter is not None:
        filters.append(Hotel.status == status_filter)

    count_query = select(func.count()).select_from(Hotel).where(*filters)
    total = (await db.execute(count_query)).scalar_one()

    result = await db.execute(select(Hotel).where(*filters).order_by(Hotel.name))
    return HotelListResponse(
        items=[HotelResponse.model_validate(h) for h in result.scalars().all()],
        total=total,
    )


@router.get(
    "/{hotel_id}",
    response_model=HotelResponse,
    summary="Get a hotel by ID",
)
async def get_hotel(hotel: Hotel = Depends(get_visible_hotel)) -> HotelResponse:
    """Retrieve a single hotel. Returns 404 if it does not exist or is not visible."""
    return HotelResponse.model_validate(hotel)


@router.put(
    "/{hotel_id}",
    response_model=HotelResponse,
    summary="Update a hotel",
)
async def update_hotel(
    hotel_id: uuid.UUID,
    body: HotelUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_administrator),
) -> HotelResponse:
    """Partially update a hotel. Only explicitly set fields are changed."""
    hotel = await _get_hotel_or_404(db, hotel_id)

    # every hotel column is required, so an explicit null leaves it unchanged
    update_data = {k: v for k, v in body.model_dump(exclude_unset=True).items() if v is not None}
    for field, value in update_data.items():
        setattr(hotel, field, value)

    db.add(hotel)
    await db.flush()
    await db.refresh(hotel)

    logger.info("Administrator %s updated hotel %s", admin.id, hotel.id)
    return HotelResponse.model_validate(hotel)


@router.delete(
    "/{hotel_id}",
    response_model=MessageResponse,
    summary="Delete a hotel",
)
async def delete_hotel(
    hotel_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_administrator),
) -> MessageResponse:
    """Delete a hotel and cascade-delete all of its reporting data and assignments."""
    hotel = await _get_hotel_or_404(db, hotel_id)

    await db.delete(hotel)
    await db.flush()

    logger.info("Administrator %s deleted hotel %s (%s)", admin.id, hotel_id, hotel.name)
    return MessageResponse(message="Hotel deleted")
