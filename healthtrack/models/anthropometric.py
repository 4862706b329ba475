"""
Anthropometric measurement database model.

Skinfold and perimeter groups are stored as flat, prefixed columns.
``lean_mass`` is derived from weight and body-fat percentage at the service
layer on every save.
"""

import datetime
from typing import Optional

from sqlmodel import Field, SQLModel

SKINFOLD_SITES = ("triceps", "subscapular", "biceps", "iliac", "supraspinal", "abdominal", "thigh", "calf")
PERIMETER_SITES = ("arm", "forearm", "chest", "waist", "hip", "thigh", "calf")


class AnthropometricMeasurement(SQLModel, table=True):
    """Body composition measurement taken by a professional."""
    __tablename__ = "anthropometric_measurements"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    professional_id: int = Field(foreign_key="users.id", nullable=False, index=True)
    date: datetime.datetime = Field(default_factory=datetime.datetime.utcnow, nullable=False, index=True)

    weight: float = Field(nullable=False)
    height: float = Field(nullable=False)

    # Skinfolds (mm)
    skinfold_triceps: Optional[float] = Field(default=None)
    skinfold_subscapular: Optional[float] = Field(default=None)
    skinfold_biceps: Optional[float] = Field(default=None)
    skinfold_iliac: Optional[float] = Field(default=None)
    skinfold_supraspinal: Optional[float] = Field(default=None)
    skinfold_abdominal: Optional[float] = Field(default=None)
    skinfold_thigh: Optional[float] = Field(default=None)
    skinfold_calf: Optional[float] = Field(default=None)

    # Perimeters (cm)
    perimeter_arm: Optional[float] = Field(default=None)
    perimeter_forearm: Optional[float] = Field(default=None)
    perimeter_chest: Optional[float] = Field(default=None)
    perimeter_waist: Optional[float] = Field(default=None)
    perimeter_hip: Optional[float] = Field(default=None)
    perimeter_thigh: Optional[float] = Field(default=None)
    perimeter_calf: Optional[float] = Field(default=None)

    body_fat_percentage: Optional[float] = Field(default=None)
    lean_mass: Optional[float] = Field(default=None)
    notes: Optional[str] = Field(default=None, max_length=2000)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
