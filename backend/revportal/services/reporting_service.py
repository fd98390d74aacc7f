"""Reporting service — performance record creation and latest-period lookups."""

import logging
import uuid
from collections.abc import Mapping, Sequence
from datetime import date
from decimal import Decimal

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from revportal.database import numeric_max
from revportal.metrics import InvalidInputError, PerformanceInputs, derive_performance
from revportal.models.marketing import PaidMediaData
from revportal.models.performance import PerformanceRecord

logger = logging.getLogger(__name__)


def _check_storable(values: Mapping[str, Decimal]) -> None:
    """Reject values that overflow their ``str_data`` column instead of failing at flush."""
    columns = PerformanceRecord.__table__.c
    for name, value in values.items():
        limit = numeric_max(columns[name])
        if abs(value) > limit:
            raise InvalidInputError(name, value, f"exceeds the storable maximum of {limit}")


def build_performance_record(
    hotel_id: uuid.UUID,
    period_type: str,
    period_start: date,
    period_end: date,
    values: Mapping[str, object],
    updated_by: uuid.UUID | None = None,
) -> PerformanceRecord:
    """Validate the eight inputs and return an unsaved record with derived columns.

    Raises:
        InvalidInputError: If any input is missing, non-numeric or negative, or
            an input or derived value does not fit its column.
        DivisionByZeroError: If a comp-set denominator is 0.
    """
    inputs = PerformanceInputs.parse(values)
    stored = {**inputs.as_dict(), **derive_performance(inputs).as_dict()}
    _check_storable(stored)
    return PerformanceRecord(
        hotel_id=hotel_id,
        period_type=period_type,
        period_start=period_start,
        period_end=period_end,
        updated_by=updated_by,
        **stored,
    )


async def create_performance_record(
    db: AsyncSession,
    hotel_id: uuid.UUID,
    period_type: str,
    period_start: date,
    period_end: date,
    values: Mapping[str, object],
    updated_by: uuid.UUID | None = None,
) -> PerformanceRecord:
    """Derive, persist and refresh a performance record."""
    record = build_performance_record(hotel_id, period_type, period_start, period_end, values, updated_by)
    db.add(record)
    await db.flush()
    await db.refresh(record)
    logger.info(
        "Stored %s performance for hotel %s (%s..%s): RevPAR %s, RGI %s",
        period_type,
        hotel_id,
        period_start,
        period_end,
        record.revpar_actual,
        record.rgi,
    )
    return record


async def latest_performance(
    db: AsyncSession, hotel_id: uuid.UUID, period_type: str = "weekly"
) -> PerformanceRecord | None:
    """Most recent record of ``period_type`` by period end."""
    result = await db.execute(
        select(PerformanceRecord)
        .where(PerformanceRecord.hotel_id == hotel_id, PerformanceRecord.period_type == period_type)
        .order_by(PerformanceRecord.period_end.desc(), PerformanceRecord.created_at.desc())
        .limit(1)
    )
    return result.scalars().first()


async def latest_performance_by_hotel(
    db: AsyncSession, hotel_ids: Sequence[uuid.UUID], period_type: str = "weekly"
) -> dict[uuid.UUID, PerformanceRecord]:
    """Latest record per hotel in one query. Hotels with no data are absent."""
    if not hotel_ids:
        return {}

    ranked = (
        select(
            PerformanceRecord.id,
            func.row_number()
            .over(
                partition_by=PerformanceRecord.hotel_id,
                order_by=(PerformanceRecord.period_end.desc(), PerformanceRecord.created_at.desc()),
            )
            .label("position"),
        )
        .where(PerformanceRecord.hotel_id.in_(hotel_ids), PerformanceRecord.period_type == period_type)
        .subquery()
    )
    result = await db.execute(
        select(PerformanceRecord).join(ranked, PerformanceRecord.id == ranked.c.id).where(ranked.c.position == 1)
    )
    return {record.hotel_id: record for record in result.scalars().all()}


async def latest_paid_media_period(
    db: AsyncSession, hotel_id: uuid.UUID, period_type: str = "weekly"
) -> list[PaidMediaData]:
    """All channel rows sharing the newest period start, ordered by channel."""
    newest = (
        select(func.max(PaidMediaData.period_start))
        .where(PaidMediaData.hotel_id == hotel_id, PaidMediaData.period_type == period_type)
        .scalar_subquery()
    )
    result = await db.execute(
        select(PaidMediaData)
        .where(
            PaidMediaData.hotel_id == hotel_id,
            PaidMediaData.period_type == period_type,
            PaidMediaData.period_start == newest,
        )
        .order_by(PaidMediaData.channel)
    )
    return list(result.scalars().all())
