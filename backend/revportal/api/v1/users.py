"""User administration API routes — accounts and hotel assignments. Administrators only."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from revportal.api.deps import get_db, require_administrator
from revportal.auth.security import hash_password
from revportal.models.hotel import Hotel
from revportal.models.user import User, UserHotelAssignment
from revportal.schemas.auth import MessageResponse, UserResponse
from revportal.schemas.user import AssignmentResponse, UserCreate, UserListResponse, UserUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/users", tags=["users"])


async def _get_user_or_404(db: AsyncSession, user_id: uuid.UUID) -> User:
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found",
        )
    return user


async def _get_hotel_or_404(db: AsyncSession, hotel_id: uuid.UUID) -> Hotel:
    result = await db.execute(select(Hotel).where(Hotel.id == hotel_id))
    hotel = result.scalar_one_or_none()
    if hotel is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Hotel not found",
        )
    return hotel


# ---------------------------------------------------------------------------
# Accounts
# ---------------------------------------------------------------------------


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a staff account",
)
async def create_user(
    body: UserCreate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_administrator),
) -> UserResponse:
    """Create a user. Email addresses are unique."""
    result = await db.execute(select(User).where(User.email == body.email))
    if result.scalar_one_or_none() is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Email already registered",
        )

    user = User(
        email=body.email,
        hashed_password=hash_password(body.password),
        full_name=body.full_name,
        role=body.role,
        scope=body.scope,
    )
    db.add(user)
    await db.flush()
    await db.refresh(user)

    logger.info("Administrator %s created user %s (%s, %s)", admin.id, user.id, user.role, user.scope)
    return UserResponse.model_validate(user)


@router.get("", response_model=UserListResponse, summary="List staff accounts")
async def list_users(
    db: AsyncSession = Depends(get_db),
    _admin: User = Depends(require_administrator),
) -> UserListResponse:
    total = (await db.execute(select(func.count()).select_from(User))).scalar_one()
    result = await db.execute(select(User).order_by(User.full_name, User.email))
    return UserListResponse(
        items=[UserResponse.model_validate(u) for u in result.scalars().all()],
        total=total,
    )


@router.get("/{user_id}", response_model=UserResponse, summary="Get a staff account")
async def get_user(
    user_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    _admin: User = Depends(require_administrator),
) -> UserResponse:
    return UserResponse.model_validate(await _get_user_or_404(db, user_id))


@router.put("/{user_id}", response_model=UserResponse, summary="Update a staff account")
async def update_user(
    user_id: uuid.UUID,
    body: UserUpdate,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_administrator),
) -> UserResponse:
    """Partially update a user. Only explicitly set fields are changed."""
    user = await _get_user_or_404(db, user_id)

    update_data = {k: v for k, v in body.model_dump(exclude_unset=True).items() if v is not None}
    password = update_data.pop("password", None)
    if password is not None:
        user.hashed_password = hash_password(password)
    for field, value in update_data.items():
        setattr(user, field, value)

    db.add(user)
    await db.flush()
    await db.refresh(user)

    logger.info("Administrator %s updated user %s: %s", admin.id, user.id, sorted(body.model_fields_set))
    return UserResponse.model_validate(user)


@router.delete("/{user_id}", response_model=MessageResponse, summary="Delete a staff account")
async def delete_user(
    user_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_administrator),
) -> MessageResponse:
    """Delete a user and their assignments. Administrators cannot delete themselves."""
    if user_id == admin.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Cannot delete your own account",
        )
    user = await _get_user_or_404(db, user_id)

    await db.delete(user)
    await db.flush()

    logger.info("Administrator %s deleted user %s", admin.id, user_id)
    return MessageResponse(message="User deleted")


# ---------------------------------------------------------------------------
# Hotel assignments
# ---------------------------------------------------------------------------


@router.get(
    "/{user_id}/hotels",
    response_model=list[AssignmentResponse],
    summary="List a user's hotel assignments",
)
async def list_assignments(
    user_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    _admin: User = Depends(require_administrator),
) -> list[AssignmentResponse]:
    await _get_user_or_404(db, user_id)
    result = await db.execute(
        select(UserHotelAssignment)
        .where(UserHotelAssignment.user_id == user_id)
        .order_by(UserHotelAssignment.created_at)
    )
    return [AssignmentResponse.model_validate(a) for a in result.scalars().all()]


@router.put(
    "/{user_id}/hotels/{hotel_id}",
    response_model=AssignmentResponse,
    summary="Assign a hotel to a user",
)
async def assign_hotel(
    user_id: uuid.UUID,
    hotel_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_administrator),
) -> AssignmentResponse:
    """Grant access to a hotel. Assigning an already-assigned hotel is a no-op."""
    await _get_user_or_404(db, user_id)
    await _get_hotel_or_404(db, hotel_id)

    result = await db.execute(
        select(UserHotelAssignment).where(
            UserHotelAssignment.user_id == user_id,
            UserHotelAssignment.hotel_id == hotel_id,
        )
    )
    assignment = result.scalar_one_or_none()
    if assignment is None:
        assignment = UserHotelAssignment(user_id=user_id, hotel_id=hotel_id)
        db.add(assignment)
        await db.flush()
        await db.refresh(assignment)
        logger.info("Administrator %s assigned hotel %s to user %s", admin.id, hotel_id, user_id)

    return AssignmentResponse.model_validate(assignment)


@router.delete(
    "/{user_id}/hotels/{hotel_id}",
    response_model=MessageResponse,
    summary="Remove a hotel assignment",
)
async def unassign_hotel(
    user_id: uuid.UUID,
    hotel_id: uuid.UUID,
    db: AsyncSession = Depends(get_db),
    admin: User = Depends(require_administrator),
) -> MessageResponse:
    result = await db.execute(
        select(UserHotelAssignment).where(
            UserHotelAssignment.user_id == user_id,
            UserHotelAssignment.hotel_id == hotel_id,
        )
    )
    assignment = result.scalar_one_or_none()
    if assignment is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Assignment not found",
        )

    await db.delete(assignment)
    await db.flush()

    logger.info("Administrator %s removed hotel %s from user %s", admin.id, hotel_id, user_id)
    return MessageResponse(message="Assignment removed")
