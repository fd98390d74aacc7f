"""Weekly update model — the narrative report filed for each hotel-week."""

from datetime import date

from sqlalchemy import Date, Text
from sqlalchemy.orm import Mapped, mapped_column

from revportal.database import Base, CreatedAtMixin, UUIDPrimaryKeyMixin
from revportal.models.period import HotelOwnedMixin


class WeeklyUpdate(UUIDPrimaryKeyMixin, HotelOwnedMixin, CreatedAtMixin, Base):
    """What happened this week, what worked, and what changes next."""

    __tablename__ = "weekly_updates"

    week_start: Mapped[date] = mapped_column(Date, nullable=False)
    week_end: Mapped[date] = mapped_column(Date, nullable=False)
    str_summary: Mapped[str | None] = mapped_column(Text)
    web_analytics_summary: Mapped[str | None] = mapped_column(Text)
    paid_media_summary: Mapped[str | None] = mapped_column(Text)
    tactics_deployed: Mapped[str | None] = mapped_column(Text)
    whats_working: Mapped[str | None] = mapped_column(Text)
    whats_not_working: Mapped[str | None] = mapped_column(Text)
    adjustments_planned: Mapped[str | None] = mapped_column(Text)
    promotions_in_market: Mapped[str | None] = mapped_column(Text)

    def __repr__(self) -> str:
        return f"<WeeklyUpdate(id={self.id}, hotel_id={self.hotel_id}, week_start={self.week_start})>"
