"""Pydantic v2 schemas for weekly narrative updates."""

import uuid
from datetime import date, datetime

from pydantic import BaseModel, ConfigDict, model_validator


class WeeklyUpdateCreate(BaseModel):
    week_start: date
    week_end: date
    str_summary: str | None = None
    web_analytics_summary: str | None = None
    paid_media_summary: str | None = None
    tactics_deployed: str | None = None
    whats_working: str | None = None
    whats_not_working: str | None = None
    adjustments_planned: str | None = None
    promotions_in_market: str | None = None

    @model_validator(mode="after")
    def _check_week(self):
        if self.week_start > self.week_end:
            raise ValueError("week_start must be on or before week_end")
        return self


class WeeklyUpdateResponse(BaseModel):
    id: uuid.UUID
    hotel_id: uuid.UUID
    week_start: date
    week_end: date
    str_summary: str | None = None
    web_analytics_summary: str | None = None
    paid_media_summary: str | None = None
    tactics_deployed: str | None = None
    whats_working: str | None = None
    whats_not_working: str | None = None
    adjustments_planned: str | None = None
    promotions_in_market: str | None = None
    updated_by: uuid.UUID | None = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
