"""STR performance API routes — history, entry with derived metrics, summary cards."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from revportal.api.deps import get_current_user, get_db, get_editable_hotel, get_visible_hotel
from revportal.config import settings
from revportal.metrics import MetricsError, calculate_variance, index_band
from revportal.models.hotel import Hotel
from revportal.models.performance import PerformanceRecord
from revportal.models.user import User
from revportal.schemas.performance import (
    PERIOD_TYPE_PATTERN,
    IndexReading,
    MetricVariance,
    PerformanceCreate,
    PerformanceResponse,
    PerformanceSummaryResponse,
)
from revportal.services.reporting_service import create_performance_record, latest_performance

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/hotels/{hotel_id}/performance", tags=["performance"])


def _variance(record: PerformanceRecord, metric: str) -> MetricVariance:
    actual = getattr(record, f"{metric}_actual")
    budget = getattr(record, f"{metric}_budget")
    prior_year = getattr(record, f"{metric}_prior_year")
    return MetricVariance(
        actual=actual,
        budget=budget,
        prior_year=prior_year,
        vs_budget=calculate_variance(actual, budget),
        vs_prior_year=calculate_variance(actual, prior_year),
    )


def _reading(value) -> IndexReading:
    return IndexReading(value=value, band=index_band(value))


@router.get(
    "",
    response_model=list[PerformanceResponse],
    summary="List performance records, newest first",
)
async def list_performance(
    period_type: str = Query("weekly", pattern=PERIOD_TYPE_PATTERN),
    limit: int = Query(settings.default_history_limit, ge=1, le=settings.max_history_limit),
    hotel: Hotel = Depends(get_visible_hotel),
    db: AsyncSession = Depends(get_db),
) -> list[PerformanceResponse]:
    result = await db.execute(
        select(PerformanceRecord)
        .where(PerformanceRecord.hotel_id == hotel.id, PerformanceRecord.period_type == period_type)
        .order_by(PerformanceRecord.period_start.desc(), PerformanceRecord.created_at.desc())
        .limit(limit)
    )
    return [PerformanceResponse.model_validate(r) for r in result.scalars().all()]


@router.post(
    "",
    response_model=PerformanceResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record a period's occupancy and ADR",
)
async def create_performance(
    body: PerformanceCreate,
    hotel: Hotel = Depends(get_editable_hotel),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> PerformanceResponse:
    """Store a record with RevPAR for every scenario and the MPI/ARI/RGI indices.

    Omitted comp-set values default to the hotel's actuals. A comp-set value
    of exactly 0 cannot produce an index and is rejected with 422.
    """
    try:
        record = await create_performance_record(
            db,
            hotel_id=hotel.id,
            period_type=body.period_type,
            period_start=body.period_start,
            period_end=body.period_end,
            values=body.metric_inputs(),
            updated_by=current_user.id,
        )
    except MetricsError as exc:
        logger.warning("Rejected performance input for hotel %s: %s", hotel.id, exc)
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(exc),
        ) from None

    return PerformanceResponse.model_validate(record)


@router.get(
    "/summary",
    response_model=PerformanceSummaryResponse,
    summary="Latest period with variances and index bands",
)
async def performance_summary(
    period_type: str = Query("weekly", pattern=PERIOD_TYPE_PATTERN),
    hotel: Hotel = Depends(get_visible_hotel),
    db: AsyncSession = Depends(get_db),
) -> PerformanceSummaryResponse:
    """Headline figures for the newest record. All fields are null when there is no data."""
    record = await latest_performance(db, hotel.id, period_type)
    if record is None:
        return PerformanceSummaryResponse(hotel_id=hotel.id, period_type=period_type)

    return PerformanceSummaryResponse(
        hotel_id=hotel.id,
        period_type=period_type,
        latest=PerformanceResponse.model_validate(record),
        occupancy=_variance(record, "occupancy"),
        adr=_variance(record, "adr"),
        revpar=_variance(record, "revpar"),
        mpi=_reading(record.mpi),
        ari=_reading(record.ari),
        rgi=_reading(record.rgi),
    )
