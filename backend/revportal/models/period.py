"""Columns shared by every hotel-period reporting table."""

import uuid
from datetime import date

from sqlalchemy import Date, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column

PERIOD_TYPES = ("weekly", "monthly")


class HotelOwnedMixin:
    """Row belongs to one hotel and remembers who entered it."""

    hotel_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("hotels.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    updated_by: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True,
    )


class ReportingPeriodMixin(HotelOwnedMixin):
    """A weekly or monthly date range. Overlaps are allowed."""

    period_type: Mapped[str] = mapped_column(String(20), nullable=False)
    period_start: Mapped[date] = mapped_column(Date, nullable=False)
    period_end: Mapped[date] = mapped_column(Date, nullable=False)
