"""
Health metrics API schemas.

Self-reported health data.  Sleep metrics are grouped in a nested object
that is flattened into columns by the service.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from healthtrack.models.health import HealthSource
from healthtrack.schemas.common import UtcDateTime


class SleepData(BaseModel):
    """Sleep metrics."""

    duration: Optional[float] = Field(None, ge=0, description="Total sleep duration (minutes)")
    quality: Optional[float] = Field(None, ge=0, le=100, description="Sleep quality score (0-100)")
    deep_sleep: Optional[float] = Field(None, ge=0, description="Time in deep sleep (minutes)")
    light_sleep: Optional[float] = Field(None, ge=0, description="Time in light sleep (minutes)")
    rem_sleep: Optional[float] = Field(None, ge=0, description="Time in REM sleep (minutes)")


class HealthMetricBase(BaseModel):
    date: Optional[UtcDateTime] = Field(None, description="Measurement time (defaults to now)")
    sleep: Optional[SleepData] = None
    stress: Optional[float] = Field(None, ge=0, le=100, description="Stress score (0-100)")
    resting_heart_rate: Optional[float] = Field(None, ge=0, description="Resting heart rate (bpm)")
    heart_rate_variability: Optional[float] = Field(None, ge=0, description="HRV (ms)")
    steps: Optional[float] = Field(None, ge=0)
    notes: Optional[str] = Field(None, max_length=2000)


# Request schemas
class HealthMetricCreate(HealthMetricBase):
    """Schema for creating a health metrics entry."""
    source: HealthSource


class HealthMetricUpdate(HealthMetricBase):
    """Schema for updating a health metrics entry (all fields optional)."""
    source: Optional[HealthSource] = None


# Response schemas
class HealthMetricResponse(HealthMetricBase):
    id: int
    user_id: int
    date: datetime.datetime
    source: HealthSource
    created_at: datetime.datetime
    updated_at: datetime.datetime
