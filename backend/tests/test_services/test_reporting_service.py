"""Tests for the reporting service and the seed routine that builds on it."""

import random
import uuid
from datetime import date
from decimal import Decimal

import pytest
from conftest import make_hotel
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from revportal.database import numeric_max
from revportal.metrics import DivisionByZeroError, InvalidInputError
from revportal.models.hotel import Hotel
from revportal.models.marketing import PaidMediaData
from revportal.models.performance import PerformanceRecord
from revportal.models.strategy import Tactic
from revportal.models.weekly_update import WeeklyUpdate
from revportal.services.reporting_service import (
    build_performance_record,
    create_performance_record,
    latest_paid_media_period,
    latest_performance,
    latest_performance_by_hotel,
)
from scripts.seed_data import seed_hotel

pytestmark = pytest.mark.asyncio(loop_scope="session")

INPUTS = {
    "occupancy_actual": "80",
    "occupancy_budget": "78",
    "occupancy_prior_year": "75",
    "occupancy_comp_set": "72",
    "adr_actual": "250",
    "adr_budget": "240",
    "adr_prior_year": "230",
    "adr_comp_set": "245",
}


class TestBuildPerformanceRecord:
    async def test_populates_derived_columns(self) -> None:
        record = build_performance_record(uuid.uuid4(), "weekly", date(2025, 3, 2), date(2025, 3, 8), INPUTS)
        assert record.occupancy_actual == Decimal("80.00")
        assert record.revpar_actual == Decimal("200.00")
        assert record.rgi == Decimal("113.38")
        assert record.updated_by is None

    async def test_rejects_bad_input(self) -> None:
        with pytest.raises(InvalidInputError):
            build_performance_record(
                uuid.uuid4(), "weekly", date(2025, 3, 2), date(2025, 3, 8), {**INPUTS, "adr_actual": "n/a"}
            )

    async def test_rejects_zero_comp_set(self) -> None:
        with pytest.raises(DivisionByZeroError):
            build_performance_record(
                uuid.uuid4(), "weekly", date(2025, 3, 2), date(2025, 3, 8), {**INPUTS, "adr_comp_set": "0"}
            )

    async def test_rejects_index_beyond_column(self) -> None:
        values = {**INPUTS, "occupancy_actual": "60", "occupancy_comp_set": "0.5"}
        with pytest.raises(InvalidInputError) as excinfo:
            build_performance_record(uuid.uuid4(), "weekly", date(2025, 3, 2), date(2025, 3, 8), values)
        assert excinfo.value.field == "mpi"
        assert excinfo.value.value == Decimal("12000.00")

    async def test_rejects_adr_beyond_column(self) -> None:
        with pytest.raises(InvalidInputError) as excinfo:
            build_performance_record(
                uuid.uuid4(), "weekly", date(2025, 3, 2), date(2025, 3, 8), {**INPUTS, "adr_budget": "1e30"}
            )
        assert excinfo.value.field == "adr_budget"

    async def test_accepts_column_maxima(self) -> None:
        values = {name: ("100" if name.startswith("occupancy") else "99999999.99") for name in INPUTS}
        record = build_performance_record(uuid.uuid4(), "weekly", date(2025, 3, 2), date(2025, 3, 8), values)
        assert record.revpar_actual == Decimal("99999999.99")
        assert record.rgi == Decimal("100.00")


class TestNumericMax:
    @pytest.mark.parametrize(
        ("column", "limit"),
        [
            ("occupancy_actual", Decimal("999.99")),
            ("adr_actual", Decimal("99999999.99")),
            ("mpi", Decimal("9999.99")),
        ],
    )
    async def test_limits_follow_precision_and_scale(self, column: str, limit: Decimal) -> None:
        assert numeric_max(PerformanceRecord.__table__.c[column]) == limit

    async def test_rejects_non_numeric_column(self) -> None:
        with pytest.raises(TypeError):
            numeric_max(PerformanceRecord.__table__.c.period_type)


class TestLatestLookups:
    async def test_latest_performance(self, db_session: AsyncSession, hotel: Hotel) -> None:
        assert await latest_performance(db_session, hotel.id) is None

        await create_performance_record(db_session, hotel.id, "weekly", date(2025, 3, 9), date(2025, 3, 15), INPUTS)
        await create_performance_record(db_session, hotel.id, "weekly", date(2025, 3, 2), date(2025, 3, 8), INPUTS)
        await create_performance_record(db_session, hotel.id, "monthly", date(2025, 4, 1), date(2025, 4, 30), INPUTS)

        latest = await latest_performance(db_session, hotel.id)
        assert latest.period_start == date(2025, 3, 9)
        monthly = await latest_performance(db_session, hotel.id, "monthly")
        assert monthly.period_type == "monthly"

    async def test_latest_by_hotel(self, db_session: AsyncSession, hotel: Hotel, other_hotel: Hotel) -> None:
        empty = await make_hotel(db_session, name="No Data Yet")
        await create_performance_record(db_session, hotel.id, "weekly", date(2025, 3, 2), date(2025, 3, 8), INPUTS)
        await create_performance_record(db_session, hotel.id, "weekly", date(2025, 3, 9), date(2025, 3, 15), INPUTS)
        await create_performance_record(
            db_session, other_hotel.id, "weekly", date(2025, 2, 23), date(2025, 3, 1), INPUTS
        )

        latest = await latest_performance_by_hotel(db_session, [hotel.id, other_hotel.id, empty.id])
        assert set(latest) == {hotel.id, other_hotel.id}
        assert latest[hotel.id].period_start == date(2025, 3, 9)
        assert latest[other_hotel.id].period_start == date(2025, 2, 23)

    async def test_latest_by_hotel_without_ids(self, db_session: AsyncSession) -> None:
        assert await latest_performance_by_hotel(db_session, []) == {}

    async def test_latest_paid_media_period(self, db_session: AsyncSession, hotel: Hotel) -> None:
        for channel, start, end in (
            ("Meta", date(2025, 3, 2), date(2025, 3, 8)),
            ("Google", date(2025, 3, 2), date(2025, 3, 8)),
            ("Google", date(2025, 2, 23), date(2025, 3, 1)),
        ):
            db_session.add(
                PaidMediaData(
                    hotel_id=hotel.id, period_type="weekly", period_start=start, period_end=end, channel=channel
                )
            )
        await db_session.flush()

        rows = await latest_paid_media_period(db_session, hotel.id)
        assert [(r.channel, r.period_start) for r in rows] == [
            ("Google", date(2025, 3, 2)),
            ("Meta", date(2025, 3, 2)),
        ]


class TestSeedHotel:
    async def _count(self, db: AsyncSession, model, hotel: Hotel) -> int:
        result = await db.execute(select(func.count()).select_from(model).where(model.hotel_id == hotel.id))
        return result.scalar_one()

    async def test_populates_every_table(self, db_session: AsyncSession, other_hotel: Hotel) -> None:
        await seed_hotel(db_session, other_hotel, random.Random(11), date(2025, 3, 18))

        assert await self._count(db_session, PerformanceRecord, other_hotel) == 15
        assert await self._count(db_session, PaidMediaData, other_hotel) == 60
        assert await self._count(db_session, Tactic, other_hotel) == 24
        assert await self._count(db_session, WeeklyUpdate, other_hotel) == 4
