"""Portfolio dashboard API route — every visible hotel with its latest weekly STR."""

from collections import Counter

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from revportal.api.deps import get_current_user, get_db, visible_hotels_clause
from revportal.metrics import average, round2
from revportal.models.hotel import Hotel
from revportal.models.user import User
from revportal.schemas.dashboard import DashboardResponse, HotelPerformanceCard, PortfolioAverages
from revportal.schemas.hotel import BRAND_PATTERN, HotelResponse
from revportal.schemas.performance import PerformanceResponse
from revportal.services.reporting_service import latest_performance_by_hotel

router = APIRouter(prefix="/api/v1/dashboard", tags=["dashboard"])


@router.get("", response_model=DashboardResponse)
async def get_dashboard(
    brand: str | None = Query(None, pattern=BRAND_PATTERN, description="Restrict to one brand"),
    db: AsyncSession = Depends(get_db),
    current_user: User = Depends(get_current_user),
) -> DashboardResponse:
    """Active hotels the user can see, each with its most recent weekly record.

    Hotels with no weekly data are still listed, with ``latest_performance``
    null, and count as zero in the portfolio averages.
    """
    query = select(Hotel).where(Hotel.status == "active", visible_hotels_clause(current_user))
    if brand is not None:
        query = query.where(Hotel.brand == brand)
    result = await db.execute(query.order_by(Hotel.name))
    hotels = list(result.scalars().all())

    latest = await latest_performance_by_hotel(db, [h.id for h in hotels])
    records = [latest.get(h.id) for h in hotels]

    return DashboardResponse(
        hotels=[
            HotelPerformanceCard(
                hotel=HotelResponse.model_validate(hotel),
                latest_performance=PerformanceResponse.model_validate(record) if record is not None else None,
            )
            for hotel, record in zip(hotels, records)
        ],
        averages=PortfolioAverages(
            occupancy=round2(average(records, "occupancy_actual")),
            adr=round2(average(records, "adr_actual")),
            revpar=round2(average(records, "revpar_actual")),
            rgi=round2(average(records, "rgi")),
        ),
        total_hotels=len(hotels),
        brand_counts=dict(Counter(h.brand for h in hotels)),
    )
