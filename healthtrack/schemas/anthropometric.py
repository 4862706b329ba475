"""
Anthropometric measurement API schemas.

Skinfolds (mm) and perimeters (cm) are nested groups; every site is optional.
``lean_mass`` is read-only and derived from weight and body-fat percentage.
"""

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from healthtrack.schemas.common import UtcDateTime


class Skinfolds(BaseModel):
    triceps: Optional[float] = Field(None, ge=0)
    subscapular: Optional[float] = Field(None, ge=0)
    biceps: Optional[float] = Field(None, ge=0)
    iliac: Optional[float] = Field(None, ge=0)
    supraspinal: Optional[float] = Field(None, ge=0)
    abdominal: Optional[float] = Field(None, ge=0)
    thigh: Optional[float] = Field(None, ge=0)
    calf: Optional[float] = Field(None, ge=0)


class Perimeters(BaseModel):
    arm: Optional[float] = Field(None, ge=0)
    forearm: Optional[float] = Field(None, ge=0)
    chest: Optional[float] = Field(None, ge=0)
    waist: Optional[float] = Field(None, ge=0)
    hip: Optional[float] = Field(None, ge=0)
    thigh: Optional[float] = Field(None, ge=0)
    calf: Optional[float] = Field(None, ge=0)


class AnthropometricCreate(BaseModel):
    """Schema for recording a measurement for one of the caller's patients."""
    user_id: int = Field(..., description="Athlete the measurement belongs to")
    date: Optional[UtcDateTime] = Field(None, description="Measurement date (defaults to now)")
    weight: float = Field(..., ge=0, description="Body weight (kg)")
    height: float = Field(..., ge=0, description="Height (cm)")
    skinfolds: Optional[Skinfolds] = None
    perimeters: Optional[Perimeters] = None
    body_fat_percentage: Optional[float] = Field(None, ge=0, le=100)
    notes: Optional[str] = Field(None, max_length=2000)


class AnthropometricUpdate(BaseModel):
    """Schema for updating a measurement (all fields optional, groups merge per site)."""
    date: Optional[UtcDateTime] = None
    weight: Optional[float] = Field(None, ge=0)
    height: Optional[float] = Field(None, ge=0)
    skinfolds: Optional[Skinfolds] = None
    perimeters: Optional[Perimeters] = None
    body_fat_percentage: Optional[float] = Field(None, ge=0, le=100)
    notes: Optional[str] = Field(None, max_length=2000)


class AnthropometricResponse(BaseModel):
    id: int
    user_id: int
    professional_id: int
    date: datetime.datetime
    weight: float
    height: float
    skinfolds: Skinfolds
    perimeters: Perimeters
    body_fat_percentage: Optional[float]
    lean_mass: Optional[float]
    notes: Optional[str]
    created_at: datetime.datetime
    updated_at: datetime.datetime
