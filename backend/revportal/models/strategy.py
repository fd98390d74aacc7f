"""Strategy models — annual plans, quarterly plans, and the tactics that execute them."""

import uuid
from datetime import date
from decimal import Decimal

from sqlalchemy import CheckConstraint, Date, ForeignKey, Index, Integer, Numeric, String, Text, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column

from revportal.database import Base, CreatedAtMixin, TimestampMixin, UUIDPrimaryKeyMixin
from revportal.models.period import HotelOwnedMixin

DISCIPLINES = ("sales", "revenue_management", "ecommerce")
TACTIC_STATUSES = ("not_started", "in_progress", "completed")


class AnnualStrategy(UUIDPrimaryKeyMixin, HotelOwnedMixin, CreatedAtMixin, Base):
    """A hotel's strategy and goals for one calendar year."""

    __tablename__ = "annual_strategies"

    year: Mapped[int] = mapped_column(Integer, nullable=False)
    strategy_summary: Mapped[str | None] = mapped_column(Text)
    sales_strategy: Mapped[str | None] = mapped_column(Text)
    rm_strategy: Mapped[str | None] = mapped_column(Text)
    ecommerce_strategy: Mapped[str | None] = mapped_column(Text)
    revenue_goal: Mapped[Decimal | None] = mapped_column(Numeric(12, 2))
    revpar_goal: Mapped[Decimal | None] = mapped_column(Numeric(10, 2))
    market_share_goal: Mapped[Decimal | None] = mapped_column(Numeric(5, 2))

    __table_args__ = (UniqueConstraint("hotel_id", "year", name="uq_annual_strategies_hotel_year"),)

    def __repr__(self) -> str:
        return f"<AnnualStrategy(id={self.id}, hotel_id={self.hotel_id}, year={self.year})>"


class QuarterlyStrategy(UUIDPrimaryKeyMixin, HotelOwnedMixin, CreatedAtMixin, Base):
    """Initiatives for one quarter of an annual strategy."""

    __tablename__ = "quarterly_strategies"

    annual_strategy_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("annual_strategies.id", ondelete="CASCADE"),
        nullable=True,
        index=True,
    )
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    quarter: Mapped[int] = mapped_column(Integer, nullable=False)
    strategy_summary: Mapped[str | None] = mapped_column(Text)
    sales_initiatives: Mapped[str | None] = mapped_column(Text)
    rm_initiatives: Mapped[str | None] = mapped_column(Text)
    ecommerce_initiatives: Mapped[str | None] = mapped_column(Text)

    __table_args__ = (
        UniqueConstraint("hotel_id", "year", "quarter", name="uq_quarterly_strategies_hotel_year_quarter"),
        CheckConstraint("quarter >= 1 AND quarter <= 4", name="ck_quarterly_strategies_quarter"),
    )

    def __repr__(self) -> str:
        return f"<QuarterlyStrategy(id={self.id}, hotel_id={self.hotel_id}, {self.year} Q{self.quarter})>"


class Tactic(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A concrete action owned by a staff member, tracked to completion."""

    __tablename__ = "tactics"

    hotel_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("hotels.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    quarterly_strategy_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("quarterly_strategies.id", ondelete="SET NULL"),
        nullable=True,
    )
    discipline: Mapped[str] = mapped_column(String(50), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    owner_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )
    due_date: Mapped[date | None] = mapped_column(Date)
    status: Mapped[str] = mapped_column(String(50), default="not_started", nullable=False)
    kpi_target: Mapped[str | None] = mapped_column(Text)

    __table_args__ = (
        CheckConstraint(f"discipline IN {DISCIPLINES}", name="ck_tactics_discipline"),
        CheckConstraint(f"status IN {TACTIC_STATUSES}", name="ck_tactics_status"),
        Index("idx_tactics_status", "status"),
    )

    def __repr__(self) -> str:
        return f"<Tactic(id={self.id}, hotel_id={self.hotel_id}, status={self.status!r})>"
