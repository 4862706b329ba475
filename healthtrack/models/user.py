"""
User database models.

A user is a tagged union: the ``users`` row carries the fields every account
shares plus the ``role`` discriminant, and exactly one variant payload row
holds the role-specific fields:

* ``athlete``      -> :class:`AthleteProfile`
* ``professional`` -> :class:`ProfessionalProfile`
"""

import datetime
from enum import Enum
from typing import Optional

from sqlmodel import Field, SQLModel


class UserRole(str, Enum):
    athlete = "athlete"
    professional = "professional"


class User(SQLModel, table=True):
    """
    Account shared by both roles.

    Stores credentials, the role tag and account settings.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False, max_length=255)
    # Always stored lower-cased
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    hashed_password: str = Field(nullable=False)
    role: str = Field(nullable=False, max_length=20, index=True)

    # Account settings
    language: str = Field(default="en", max_length=10)
    theme: str = Field(default="light", max_length=10)
    notify_email: bool = Field(default=True)
    notify_push: bool = Field(default=True)

    is_active: bool = Field(default=True)
    last_login: Optional[datetime.datetime] = Field(default=None)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)
    updated_at: datetime.datetime = Field(default_factory=datetime.datetime.utcnow)


class AthleteProfile(SQLModel, table=True):
    """Athlete variant payload.  ``professional_id`` is the authoritative ownership link."""
    __tablename__ = "athlete_profiles"

    user_id: int = Field(foreign_key="users.id", primary_key=True)
    gender: str = Field(nullable=False, max_length=10)
    age: int = Field(nullable=False, ge=0)
    country: str = Field(nullable=False, max_length=100)
    sport: Optional[str] = Field(default=None, max_length=100)
    position: Optional[str] = Field(default=None, max_length=100)
    professional_id: int = Field(foreign_key="users.id", nullable=False, index=True)


class ProfessionalProfile(SQLModel, table=True):
    """Professional variant payload."""
    __tablename__ = "professional_profiles"

    user_id: int = Field(foreign_key="users.id", primary_key=True)
    specialization: str = Field(nullable=False, max_length=255)
    license_number: str = Field(nullable=False, max_length=100)
    years_of_experience: int = Field(nullable=False, ge=0)
