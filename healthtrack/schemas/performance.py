"""
Performance metrics API schemas.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from healthtrack.schemas.common import UtcDateTime


class PerformanceMetricBase(BaseModel):
    date: Optional[UtcDateTime] = Field(None, description="Test date (defaults to now)")
    vo2max: Optional[float] = Field(None, ge=0, description="VO2 max (ml/kg/min)")
    power: Optional[float] = Field(None, ge=0, description="Power (W)")
    speed: Optional[float] = Field(None, ge=0, description="Speed (km/h)")
    training_load: Optional[float] = Field(None, ge=0)
    sport: Optional[str] = Field(None, max_length=100)
    position: Optional[str] = Field(None, max_length=100)
    notes: Optional[str] = Field(None, max_length=2000)


class PerformanceMetricCreate(PerformanceMetricBase):
    """Schema for recording a performance test for one of the caller's patients."""
    user_id: int = Field(..., description="Athlete the record belongs to")


class PerformanceMetricUpdate(PerformanceMetricBase):
    """Schema for updating a performance record (all fields optional)."""
    pass


class PerformanceMetricResponse(PerformanceMetricBase):
    id: int
    user_id: int
    professional_id: int
    date: datetime.datetime
    created_at: datetime.datetime
    updated_at: datetime.datetime
