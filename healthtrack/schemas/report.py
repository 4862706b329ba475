"""
Report API schemas.
"""

import datetime
from typing import Any, Literal, Optional

from pydantic import BaseModel, Field, model_validator

from healthtrack.models.report import ReportFormat, ReportType
from healthtrack.schemas.common import UtcDateTime

ReportSection = Literal["measurements", "performance", "health"]


class ReportCreate(BaseModel):
    """Schema for generating a report for one of the caller's patients."""
    user_id: int
    type: ReportType
    format: ReportFormat
    start_date: Optional[UtcDateTime] = Field(None, description="Period start (inclusive)")
    end_date: Optional[UtcDateTime] = Field(None, description="Period end (inclusive)")
    metrics: Optional[list[ReportSection]] = Field(
        None, description="Sections to include in the snapshot (default: all)",
    )
    shared: bool = False

    @model_validator(mode="after")
    def _check_period(self) -> "ReportCreate":
        if self.start_date and self.end_date and self.start_date > self.end_date:
            raise ValueError("start_date must not be after end_date")
        return self


class ReportResponse(BaseModel):
    id: int
    user_id: int
    professional_id: int
    type: ReportType
    format: ReportFormat
    date: datetime.datetime
    content: dict[str, Any]
    shared: bool
    access_code: Optional[str]
    created_at: datetime.datetime
    updated_at: datetime.datetime

    class Config:
        from_attributes = True
