"""Hotel visibility rules.

Corporate-scope users see every hotel. Property-scope users see only the
hotels they are assigned to; anything else answers 404 so the existence of
other hotels is not disclosed. Assignments are read from the table on every
check, never from a cached relationship.
"""

import uuid

from fastapi import Depends, HTTPException, status
from sqlalchemy import ColumnElement, select, true
from sqlalchemy.ext.asyncio import AsyncSession

from revportal.auth.dependencies import get_current_user, require_editor
from revportal.database import get_db
from revportal.models.hotel import Hotel
from revportal.models.user import User, UserHotelAssignment


def visible_hotels_clause(user: User) -> ColumnElement[bool]:
    """WHERE clause restricting ``Hotel`` rows to those ``user`` may see."""
    if user.scope == "corporate":
        return true()
    assigned = select(UserHotelAssignment.hotel_id).where(UserHotelAssignment.user_id == user.id)
    return Hotel.id.in_(assigned)


async def load_visible_hotel(db: AsyncSession, hotel_id: uuid.UUID, user: User) -> Hotel:
    """Fetch a hotel the user may see, or raise 404."""
    result = await db.execute(select(Hotel).where(Hotel.id == hotel_id, visible_hotels_clause(user)))
    hotel = result.scalar_one_or_none()

    if hotel is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Hotel not found",
        )
    return hotel


async def get_visible_hotel(
    hotel_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> Hotel:
    """Path dependency: the ``{hotel_id}`` hotel, if visible to the caller."""
    return await load_visible_hotel(db, hotel_id, current_user)


async def get_editable_hotel(
    hotel_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(require_editor),
) -> Hotel:
    """Path dependency for writes: caller must be an editor and see the hotel."""
    return await load_visible_hotel(db, hotel_id, current_user)
