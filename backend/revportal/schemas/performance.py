"""Pydantic v2 schemas for STR performance records and the summary view."""

import uuid
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field, model_validator

PERIOD_TYPE_PATTERN = "^(weekly|monthly)$"

# Upper bounds of the Numeric columns the values are stored in
AMOUNT_MAX = Decimal("99999999.99")  # Numeric(10, 2)
REVENUE_MAX = Decimal("9999999999.99")  # Numeric(12, 2)
RATIO_MAX = Decimal("9999.99")  # Numeric(6, 2)


class ReportingPeriod(BaseModel):
    """Shared period fields; the range may overlap other records."""

    period_type: str = Field(..., pattern=PERIOD_TYPE_PATTERN)
    period_start: date
    period_end: date

    @model_validator(mode="after")
    def _check_period(self):
        if self.period_start > self.period_end:
            raise ValueError("period_start must be on or before period_end")
        return self


# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class PerformanceCreate(ReportingPeriod):
    """User-entered occupancy and ADR for one period.

    Comp-set values may be omitted, in which case the hotel's own actuals
    stand in for the competitive set.
    """

    occupancy_actual: Decimal = Field(..., ge=0, le=100)
    occupancy_budget: Decimal = Field(..., ge=0, le=100)
    occupancy_prior_year: Decimal = Field(..., ge=0, le=100)
    occupancy_comp_set: Decimal | None = Field(None, ge=0, le=100)
    adr_actual: Decimal = Field(..., ge=0, le=AMOUNT_MAX)
    adr_budget: Decimal = Field(..., ge=0, le=AMOUNT_MAX)
    adr_prior_year: Decimal = Field(..., ge=0, le=AMOUNT_MAX)
    adr_comp_set: Decimal | None = Field(None, ge=0, le=AMOUNT_MAX)

    def metric_inputs(self) -> dict[str, Decimal]:
        """The eight calculator inputs, comp set defaulted to actual."""
        values = self.model_dump(exclude={"period_type", "period_start", "period_end"})
        if values["occupancy_comp_set"] is None:
            values["occupancy_comp_set"] = values["occupancy_actual"]
        if values["adr_comp_set"] is None:
            values["adr_comp_set"] = values["adr_actual"]
        return values


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class PerformanceResponse(BaseModel):
    """A stored performance record including derived columns."""

    id: uuid.UUID
    hotel_id: uuid.UUID
    period_type: str
    period_start: date
    period_end: date
    occupancy_actual: Decimal
    occupancy_budget: Decimal
    occupancy_prior_year: Decimal
    occupancy_comp_set: Decimal
    adr_actual: Decimal
    adr_budget: Decimal
    adr_prior_year: Decimal
    adr_comp_set: Decimal
    revpar_actual: Decimal
    revpar_budget: Decimal
    revpar_prior_year: Decimal
    revpar_comp_set: Decimal
    mpi: Decimal
    ari: Decimal
    rgi: Decimal
    updated_by: uuid.UUID | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class MetricVariance(BaseModel):
    """Actual figure with percent variance to budget and prior year."""

    actual: Decimal
    budget: Decimal
    prior_year: Decimal
    vs_budget: Decimal
    vs_prior_year: Decimal


class IndexReading(BaseModel):
    value: Decimal
    band: str  # above | near | below


class PerformanceSummaryResponse(BaseModel):
    """Headline cards for the most recent period of the requested type."""

    hotel_id: uuid.UUID
    period_type: str
    latest: PerformanceResponse | None = None
    occupancy: MetricVariance | None = None
    adr: MetricVariance | None = None
    revpar: MetricVariance | None = None
    mpi: IndexReading | None = None
    ari: IndexReading | None = None
    rgi: IndexReading | None = None
