"""
Health metrics database model.

Self-reported daily health data synced from a wearable integration.
Nested API groups (sleep) are stored as flat columns.
"""

import datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel


class HealthSource(str, Enum):
    garmin = "garmin"
    google_fit = "google_fit"
    apple_health = "apple_health"


class HealthMetric(SQLModel, table=True):
    """A health metrics entry owned by one user.  No professional stamp."""
    __tablename__ = "health_metrics"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.datetime = Field(default_factory=datetime.datetime.utcnow, nullable=False, index=True)

    # Sleep
    sleep_duration: Optional[float] = Field(default=None)
    sleep_quality: Optional[float] = Field(default=None)
    deep_sleep: Optional[float] = Field(default=None)
    light_sleep: Optional[float] = Field(default=None)
    rem_sleep: Optional[float] = Field(default=None)

    stress: Optional[float] = Field(default=None)
    resting_heart_rate: Optional[float] = Field(default=None)
    heart_rate_variability: Optional[float] = Field(default=None)
    steps: Optional[float] = Field(default=None)

    source: str = Field(nullable=False, max_length=20, index=True)
    notes: Optional[str] = Field(default=None, max_length=2000)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
