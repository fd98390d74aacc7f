"""Performance record — STR/STAR occupancy, ADR, RevPAR and market indices."""

from decimal import Decimal

from sqlalchemy import CheckConstraint, Index, Numeric
from sqlalchemy.orm import Mapped, mapped_column

from revportal.database import Base, CreatedAtMixin, UUIDPrimaryKeyMixin
from revportal.models.period import PERIOD_TYPES, ReportingPeriodMixin


class PerformanceRecord(UUIDPrimaryKeyMixin, ReportingPeriodMixin, CreatedAtMixin, Base):
    """One hotel-period of STR benchmark data. Insert-only.

    ``revpar_*``, ``mpi``, ``ari`` and ``rgi`` are derived by
    :func:`revportal.metrics.derive_performance` before insert.
    """

    __tablename__ = "str_data"

    occupancy_actual: Mapped[Decimal] = mapped_column(Numeric(5, 2))
    occupancy_budget: Mapped[Decimal] = mapped_column(Numeric(5, 2))
    occupancy_prior_year: Mapped[Decimal] = mapped_column(Numeric(5, 2))
    occupancy_comp_set: Mapped[Decimal] = mapped_column(Numeric(5, 2))
    adr_actual: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    adr_budget: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    adr_prior_year: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    adr_comp_set: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    revpar_actual: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    revpar_budget: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    revpar_prior_year: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    revpar_comp_set: Mapped[Decimal] = mapped_column(Numeric(10, 2))
    mpi: Mapped[Decimal] = mapped_column(Numeric(6, 2))
    ari: Mapped[Decimal] = mapped_column(Numeric(6, 2))
    rgi: Mapped[Decimal] = mapped_column(Numeric(6, 2))

    __table_args__ = (
        CheckConstraint(f"period_type IN {PERIOD_TYPES}", name="ck_str_data_period_type"),
        Index("idx_str_data_period", "period_start", "period_end"),
    )

    def __repr__(self) -> str:
        return (
            f"<PerformanceRecord(id={self.id}, hotel_id={self.hotel_id}, "
            f"{self.period_type} {self.period_start}..{self.period_end})>"
        )
