"""Pydantic v2 schemas for the portfolio dashboard."""

from decimal import Decimal

from pydantic import BaseModel

from revportal.schemas.hotel import HotelResponse
from revportal.schemas.performance import PerformanceResponse


class HotelPerformanceCard(BaseModel):
    """A hotel and its most recent weekly record, if it has one."""

    hotel: HotelResponse
    latest_performance: PerformanceResponse | None = None


class PortfolioAverages(BaseModel):
    """Means across the listed hotels; hotels without data count as zero."""

    occupancy: Decimal
    adr: Decimal
    revpar: Decimal
    rgi: Decimal


class DashboardResponse(BaseModel):
    hotels: list[HotelPerformanceCard]
    averages: PortfolioAverages
    total_hotels: int
    brand_counts: dict[str, int]
