"""Hotel model — the tenant every reporting row belongs to."""

from sqlalchemy import CheckConstraint, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from revportal.database import Base, CreatedAtMixin, UUIDPrimaryKeyMixin

BRANDS = ("virgin_hotels", "virgin_limited_edition")
HOTEL_STATUSES = ("active", "inactive")

# Child rows are removed by the database's ON DELETE CASCADE; the ORM never
# loads these collections, and touching one unloaded is an error.
_CHILD = {"cascade": "all, delete-orphan", "passive_deletes": True, "lazy": "raise"}


class Hotel(UUIDPrimaryKeyMixin, CreatedAtMixin, Base):
    """A property in the portfolio."""

    __tablename__ = "hotels"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(255), nullable=False)
    brand: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    region: Mapped[str] = mapped_column(String(100), nullable=False)
    status: Mapped[str] = mapped_column(String(50), default="active", nullable=False)

    # Relationships
    assignments: Mapped[list["UserHotelAssignment"]] = relationship(**_CHILD)  # type: ignore[name-defined]  # noqa: F821
    performance_records: Mapped[list["PerformanceRecord"]] = relationship(**_CHILD)  # type: ignore[name-defined]  # noqa: F821
    web_analytics: Mapped[list["WebAnalyticsData"]] = relationship(**_CHILD)  # type: ignore[name-defined]  # noqa: F821
    paid_media: Mapped[list["PaidMediaData"]] = relationship(**_CHILD)  # type: ignore[name-defined]  # noqa: F821
    annual_strategies: Mapped[list["AnnualStrategy"]] = relationship(**_CHILD)  # type: ignore[name-defined]  # noqa: F821
    quarterly_strategies: Mapped[list["QuarterlyStrategy"]] = relationship(**_CHILD)  # type: ignore[name-defined]  # noqa: F821
    tactics: Mapped[list["Tactic"]] = relationship(**_CHILD)  # type: ignore[name-defined]  # noqa: F821
    weekly_updates: Mapped[list["WeeklyUpdate"]] = relationship(**_CHILD)  # type: ignore[name-defined]  # noqa: F821

    __table_args__ = (
        CheckConstraint(f"brand IN {BRANDS}", name="ck_hotels_brand"),
        CheckConstraint(f"status IN {HOTEL_STATUSES}", name="ck_hotels_status"),
    )

    def __repr__(self) -> str:
        return f"<Hotel(id={self.id}, name={self.name!r}, brand={self.brand!r})>"
