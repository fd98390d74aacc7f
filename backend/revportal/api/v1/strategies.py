"""Strategy API routes — annual and quarterly plans, and the tactics that execute them."""

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from revportal.api.deps import get_current_user, get_db, get_editable_hotel, get_visible_hotel
from revportal.models.hotel import Hotel
from revportal.models.strategy import AnnualStrategy, QuarterlyStrategy, Tactic
from revportal.models.user import User
from revportal.schemas.strategy import (
    DISCIPLINE_PATTERN,
    TACTIC_STATUS_PATTERN,
    AnnualStrategyCreate,
    AnnualStrategyResponse,
    QuarterlyStrategyCreate,
    QuarterlyStrategyResponse,
    TacticCreate,
    TacticResponse,
    TacticUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/hotels/{hotel_id}", tags=["strategies"])


async def _ensure_belongs(db: AsyncSession, model, row_id: uuid.UUID | None, hotel: Hotel, label: str) -> None:
    """Reject references to another hotel's strategy with 422."""
    if row_id is None:
        return
    result = await db.execute(select(model.id).where(model.id == row_id, model.hotel_id == hotel.id))
    if result.scalar_one_or_none() is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=f"{label} does not belong to this hotel",
        )


async def _ensure_owner(db: AsyncSession, owner_id: uuid.UUID | None) -> None:
    if owner_id is None:
        return
    result = await db.execute(select(User.id).where(User.id == owner_id))
    if result.scalar_one_or_none() is None:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Tactic owner does not exist",
        )


# ---------------------------------------------------------------------------
# Annual strategies
# ---------------------------------------------------------------------------


@router.get(
    "/strategies/annual",
    response_model=list[AnnualStrategyResponse],
    summary="List annual strategies, newest year first",
)
async def list_annual_strategies(
    hotel: Hotel = Depends(get_visible_hotel),
    db: AsyncSession = Depends(get_db),
) -> list[AnnualStrategyResponse]:
    result = await db.execute(
        select(AnnualStrategy).where(AnnualStrategy.hotel_id == hotel.id).order_by(AnnualStrategy.year.desc())
    )
    return [AnnualStrategyResponse.model_validate(s) for s in result.scalars().all()]


@router.post(
    "/strategies/annual",
    response_model=AnnualStrategyResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create the strategy for a year",
)
async def create_annual_strategy(
    body: AnnualStrategyCreate,
    hotel: Hotel = Depends(get_editable_hotel),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> AnnualStrategyResponse:
    """One strategy per hotel per year; a second one for the same year is a 409."""
    existing = await db.execute(
        select(AnnualStrategy.id).where(AnnualStrategy.hotel_id == hotel.id, AnnualStrategy.year == body.year)
    )
    if existing.scalar_one_or_none() is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"An annual strategy for {body.year} already exists",
        )

    strategy = AnnualStrategy(hotel_id=hotel.id, updated_by=current_user.id, **body.model_dump())
    db.add(strategy)
    await db.flush()
    await db.refresh(strategy)

    logger.info("Created %s annual strategy for hotel %s", body.year, hotel.id)
    return AnnualStrategyResponse.model_validate(strategy)


# ---------------------------------------------------------------------------
# Quarterly strategies
# ---------------------------------------------------------------------------


@router.get(
    "/strategies/quarterly",
    response_model=list[QuarterlyStrategyResponse],
    summary="List quarterly strategies",
)
async def list_quarterly_strategies(
    year: int | None = Query(None),
    hotel: Hotel = Depends(get_visible_hotel),
    db: AsyncSession = Depends(get_db),
) -> list[QuarterlyStrategyResponse]:
    """Newest year first, quarters in order within a year."""
    query = select(QuarterlyStrategy).where(QuarterlyStrategy.hotel_id == hotel.id)
    if year is not None:
        query = query.where(QuarterlyStrategy.year == year)
    result = await db.execute(query.order_by(QuarterlyStrategy.year.desc(), QuarterlyStrategy.quarter))
    return [QuarterlyStrategyResponse.model_validate(s) for s in result.scalars().all()]


@router.post(
    "/strategies/quarterly",
    response_model=QuarterlyStrategyResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create the strategy for a quarter",
)
async def create_quarterly_strategy(
    body: QuarterlyStrategyCreate,
    hotel: Hotel = Depends(get_editable_hotel),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> QuarterlyStrategyResponse:
    await _ensure_belongs(db, AnnualStrategy, body.annual_strategy_id, hotel, "Annual strategy")

    existing = await db.execute(
        select(QuarterlyStrategy.id).where(
            QuarterlyStrategy.hotel_id == hotel.id,
            QuarterlyStrategy.year == body.year,
            QuarterlyStrategy.quarter == body.quarter,
        )
    )
    if existing.scalar_one_or_none() is not None:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"A strategy for Q{body.quarter} {body.year} already exists",
        )

    strategy = QuarterlyStrategy(hotel_id=hotel.id, updated_by=current_user.id, **body.model_dump())
    db.add(strategy)
    await db.flush()
    await db.refresh(strategy)

    logger.info("Created Q%s %s strategy for hotel %s", body.quarter, body.year, hotel.id)
    return QuarterlyStrategyResponse.model_validate(strategy)


# ---------------------------------------------------------------------------
# Tactics
# ---------------------------------------------------------------------------


@router.get(
    "/tactics",
    response_model=list[TacticResponse],
    summary="List tactics",
)
async def list_tactics(
    discipline: str | None = Query(None, pattern=DISCIPLINE_PATTERN),
    status_filter: str | None = Query(None, alias="status", pattern=TACTIC_STATUS_PATTERN),
    quarterly_strategy_id: uuid.UUID | None = Query(None),
    hotel: Hotel = Depends(get_visible_hotel),
    db: AsyncSession = Depends(get_db),
) -> list[TacticResponse]:
    """Tactics ordered by due date, undated ones last."""
    filters = [Tactic.hotel_id == hotel.id]
    if discipline is not None:
        filters.append(Tactic.discipline == discipline)
    if status_filter is not None:
        filters.append(Tactic.status == status_filter)
    if quarterly_strategy_id is not None:
        filters.append(Tactic.quarterly_strategy_id == quarterly_strategy_id)

    result = await db.execute(
        select(Tactic).where(*filters).order_by(Tactic.due_date.is_(None), Tactic.due_date, Tactic.created_at)
    )
    return [TacticResponse.model_validate(t) for t in result.scalars().all()]


@router.post(
    "/tactics",
    response_model=TacticResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Create a tactic",
)
async def create_tactic(
    body: TacticCreate,
    hotel: Hotel = Depends(get_editable_hotel),
    db: AsyncSession = Depends(get_db),
) -> TacticResponse:
    await _ensure_belongs(db, QuarterlyStrategy, body.quarterly_strategy_id, hotel, "Quarterly strategy")
    await _ensure_owner(db, body.owner_id)

    tactic = Tactic(hotel_id=hotel.id, **body.model_dump())
    db.add(tactic)
    await db.flush()
    await db.refresh(tactic)

    logger.info("Created %s tactic %s for hotel %s", tactic.discipline, tactic.id, hotel.id)
    return TacticResponse.model_validate(tactic)


@router.patch(
    "/tactics/{tactic_id}",
    response_model=TacticResponse,
    summary="Update a tactic",
)
async def update_tactic(
    tactic_id: uuid.UUID,
    body: TacticUpdate,
    hotel: Hotel = Depends(get_editable_hotel),
    db: AsyncSession = Depends(get_db),
) -> TacticResponse:
    """Partially update a tactic. Only explicitly set fields are changed."""
    result = await db.execute(select(Tactic).where(Tactic.id == tactic_id, Tactic.hotel_id == hotel.id))
    tactic = result.scalar_one_or_none()

    if tactic is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Tactic not found",
        )

    update_data = body.model_dump(exclude_unset=True)
    # description and status cannot be cleared
    for field in ("description", "status"):
        if field in update_data and update_data[field] is None:
            del update_data[field]
    await _ensure_owner(db, update_data.get("owner_id"))
    for field, value in update_data.items():
        setattr(tactic, field, value)

    db.add(tactic)
    await db.flush()
    await db.refresh(tactic)

    logger.info("Updated tactic %s for hotel %s: %s", tactic.id, hotel.id, sorted(update_data))
    return TacticResponse.model_validate(tactic)
