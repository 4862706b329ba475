"""
Performance metrics database model.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel


class PerformanceMetric(SQLModel, table=True):
    """Performance test results for an athlete, authored by a professional."""
    __tablename__ = "performance_metrics"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    professional_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.datetime = Field(default_factory=datetime.datetime.utcnow, nullable=False, index=True)

    vo2max: Optional[float] = Field(default=None)
    power: Optional[float] = Field(default=None)
    speed: Optional[float] = Field(default=None)
    training_load: Optional[float] = Field(default=None)
    sport: Optional[str] = Field(default=None, max_length=100, index=True)
    position: Optional[str] = Field(default=None, max_length=100)
    notes: Optional[str] = Field(default=None, max_length=2000)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
