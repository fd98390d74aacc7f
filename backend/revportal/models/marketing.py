"""Web analytics and paid media models — digital marketing metrics per period."""

from decimal import Decimal

from sqlalchemy import CheckConstraint, Numeric, String
from sqlalchemy.orm import Mapped, mapped_column

from revportal.database import Base, CreatedAtMixin, UUIDPrimaryKeyMixin
from revportal.models.period import PERIOD_TYPES, ReportingPeriodMixin


class WebAnalyticsData(UUIDPrimaryKeyMixin, ReportingPeriodMixin, CreatedAtMixin, Base):
    """Website traffic and booking-engine conversion for a hotel-period."""

    __tablename__ = "web_analytics_data"

    sessions: Mapped[int | None] = mapped_column()
    users: Mapped[int | None] = mapped_column()
    bounce_rate: Mapped[Decimal | None] = mapped_column(Numeric(5, 2))
    booking_engine_conversion_rate: Mapped[Decimal | None] = mapped_column(Numeric(5, 2))
    revenue_direct_bookings: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    traffic_organic: Mapped[int | None] = mapped_column()
    traffic_paid: Mapped[int | None] = mapped_column()
    traffic_direct: Mapped[int | None] = mapped_column()
    traffic_referral: Mapped[int | None] = mapped_column()

    __table_args__ = (CheckConstraint(f"period_type IN {PERIOD_TYPES}", name="ck_web_analytics_data_period_type"),)

    def __repr__(self) -> str:
        return f"<WebAnalyticsData(id={self.id}, hotel_id={self.hotel_id}, period_start={self.period_start})>"


class PaidMediaData(UUIDPrimaryKeyMixin, ReportingPeriodMixin, CreatedAtMixin, Base):
    """Spend and return for one advertising channel in a hotel-period."""

    __tablename__ = "paid_media_data"

    channel: Mapped[str] = mapped_column(String(100), nullable=False)
    spend: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    roas: Mapped[Decimal | None] = mapped_column(Numeric(6, 2))
    cpa: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    impressions: Mapped[int | None] = mapped_column()
    clicks: Mapped[int | None] = mapped_column()
    ctr: Mapped[Decimal | None] = mapped_column(Numeric(5, 2))

    __table_args__ = (CheckConstraint(f"period_type IN {PERIOD_TYPES}", name="ck_paid_media_data_period_type"),)

    def __repr__(self) -> str:
        return f"<PaidMediaData(id={self.id}, hotel_id={self.hotel_id}, channel={self.channel!r})>"
