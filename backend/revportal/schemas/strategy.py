"""Pydantic v2 schemas for annual/quarterly strategies and tactics."""

import uuid
from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from revportal.schemas.performance import AMOUNT_MAX, REVENUE_MAX

DISCIPLINE_PATTERN = "^(sales|revenue_management|ecommerce)$"
TACTIC_STATUS_PATTERN = "^(not_started|in_progress|completed)$"

# ---------------------------------------------------------------------------
# Annual
# ---------------------------------------------------------------------------


class AnnualStrategyCreate(BaseModel):
    """One strategy per hotel per year."""

    year: int = Field(..., ge=2000, le=2100)
    strategy_summary: str | None = None
    sales_strategy: str | None = None
    rm_strategy: str | None = None
    ecommerce_strategy: str | None = None
    revenue_goal: Decimal | None = Field(None, ge=0, le=REVENUE_MAX)
    revpar_goal: Decimal | None = Field(None, ge=0, le=AMOUNT_MAX)
    market_share_goal: Decimal | None = Field(None, ge=0, le=100)


class AnnualStrategyResponse(BaseModel):
    id: uuid.UUID
    hotel_id: uuid.UUID
    year: int
    strategy_summary: str | None = None
    sales_strategy: str | None = None
    rm_strategy: str | None = None
    ecommerce_strategy: str | None = None
    revenue_goal: Decimal | None = None
    revpar_goal: Decimal | None = None
    market_share_goal: Decimal | None = None
    updated_by: uuid.UUID | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ---------------------------------------------------------------------------
# Quarterly
# ---------------------------------------------------------------------------


class QuarterlyStrategyCreate(BaseModel):
    """One strategy per hotel per quarter, optionally tied to the annual plan."""

    annual_strategy_id: uuid.UUID | None = None
    year: int = Field(..., ge=2000, le=2100)
    quarter: int = Field(..., ge=1, le=4)
    strategy_summary: str | None = None
    sales_initiatives: str | None = None
    rm_initiatives: str | None = None
    ecommerce_initiatives: str | None = None


class QuarterlyStrategyResponse(BaseModel):
    id: uuid.UUID
    hotel_id: uuid.UUID
    annual_strategy_id: uuid.UUID | None = None
    year: int
    quarter: int
    strategy_summary: str | None = None
    sales_initiatives: str | None = None
    rm_initiatives: str | None = None
    ecommerce_initiatives: str | None = None
    updated_by: uuid.UUID | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


# ---------------------------------------------------------------------------
# Tactics
# ---------------------------------------------------------------------------


class TacticCreate(BaseModel):
    quarterly_strategy_id: uuid.UUID | None = None
    discipline: str = Field(..., pattern=DISCIPLINE_PATTERN)
    description: str = Field(..., min_length=1)
    owner_id: uuid.UUID | None = None
    due_date: date | None = None
    status: str = Field("not_started", pattern=TACTIC_STATUS_PATTERN)
    kpi_target: str | None = None


class TacticUpdate(BaseModel):
    """Partial update; used mostly to move a tactic through its statuses."""

    description: str | None = Field(None, min_length=1)
    owner_id: uuid.UUID | None = None
    due_date: date | None = None
    status: str | None = Field(None, pattern=TACTIC_STATUS_PATTERN)
    kpi_target: str | None = None


class TacticResponse(BaseModel):
    id: uuid.UUID
    hotel_id: uuid.UUID
    quarterly_strategy_id: uuid.UUID | None = None
    discipline: str
    description: str
    owner_id: uuid.UUID | None = None
    due_date: date | None = None
    status: str
    kpi_target: str | None = None
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
