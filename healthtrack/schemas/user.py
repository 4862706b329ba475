"""
User API schemas.

Pydantic models for registration, login, profile and patient management.
Users are a tagged union on ``role``: request and response bodies are
discriminated unions of an athlete variant and a professional variant.
"""

import datetime
from typing import Annotated, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, EmailStr, Field

Gender = Literal["male", "female", "other"]
Theme = Literal["light", "dark"]


# ---------------------------------------------------------------------------
# Account settings
# ---------------------------------------------------------------------------

class NotificationSettings(BaseModel):
    email: bool = True
    push: bool = True


class AccountSettings(BaseModel):
    language: str = "en"
    theme: Theme = "light"
    notifications: NotificationSettings = Field(default_factory=NotificationSettings)


class NotificationSettingsUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    email: Optional[bool] = None
    push: Optional[bool] = None


class AccountSettingsUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    language: Optional[str] = Field(None, min_length=2, max_length=10)
    theme: Optional[Theme] = None
    notifications: Optional[NotificationSettingsUpdate] = None


# ---------------------------------------------------------------------------
# Registration / login
# ---------------------------------------------------------------------------

class _RegisterBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255, description="Name is required")
    email: EmailStr
    password: str = Field(..., min_length=8, description="Password (min 8 characters)")


class AthleteRegister(_RegisterBase):
    """Self-registration of an athlete.  Must name an existing professional."""
    role: Literal["athlete"]
    gender: Gender
    age: int = Field(..., ge=0)
    country: str = Field(..., min_length=1, max_length=100)
    sport: Optional[str] = Field(None, max_length=100)
    position: Optional[str] = Field(None, max_length=100)
    professional_id: int = Field(..., description="Id of the professional who follows this athlete")


class ProfessionalRegister(_RegisterBase):
    role: Literal["professional"]
    specialization: str = Field(..., min_length=1, max_length=255)
    license_number: str = Field(..., min_length=1, max_length=100)
    years_of_experience: int = Field(..., ge=0)


RegisterRequest = Annotated[Union[AthleteRegister, ProfessionalRegister], Field(discriminator="role")]


class UserLogin(BaseModel):
    """Schema for user login."""
    email: EmailStr
    password: str = Field(..., min_length=1)


# ---------------------------------------------------------------------------
# Responses
# ---------------------------------------------------------------------------

class _UserResponseBase(BaseModel):
    """Public profile fields shared by both roles (no credentials)."""
    id: int
    name: str
    email: str
    settings: AccountSettings
    is_active: bool
    last_login: Optional[datetime.datetime]
    created_at: datetime.datetime
    updated_at: datetime.datetime


class AthleteResponse(_UserResponseBase):
    role: Literal["athlete"] = "athlete"
    gender: Gender
    age: int
    country: str
    sport: Optional[str]
    position: Optional[str]
    professional_id: int


class ProfessionalResponse(_UserResponseBase):
    role: Literal["professional"] = "professional"
    specialization: str
    license_number: str
    years_of_experience: int
    patients: list[int] = Field(default_factory=list, description="Ids of the athletes assigned to this professional")


UserResponse = Annotated[Union[AthleteResponse, ProfessionalResponse], Field(discriminator="role")]


class AuthResponse(BaseModel):
    """Public profile plus a fresh token pair."""
    user: UserResponse
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


# ---------------------------------------------------------------------------
# Profile / patient management
# ---------------------------------------------------------------------------

class ProfileUpdate(BaseModel):
    """Own profile update.  Unknown fields reject the whole request."""
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    gender: Optional[Gender] = None
    age: Optional[int] = Field(None, ge=0)
    country: Optional[str] = Field(None, min_length=1, max_length=100)
    settings: Optional[AccountSettingsUpdate] = None


class PatientCreate(BaseModel):
    """Athlete account created by a professional, who becomes its owner."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=6, description="Password (min 6 characters)")
    gender: Gender
    age: int = Field(..., ge=0)
    country: str = Field(..., min_length=1, max_length=100)
    sport: Optional[str] = Field(None, max_length=100)
    position: Optional[str] = Field(None, max_length=100)


class PatientUpdate(BaseModel):
    """Patient update by the owning professional.  Unknown fields reject the whole request."""
    model_config = ConfigDict(extra="forbid", str_strip_whitespace=True)

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    email: Optional[EmailStr] = None
    gender: Optional[Gender] = None
    age: Optional[int] = Field(None, ge=0)
    country: Optional[str] = Field(None, min_length=1, max_length=100)
    sport: Optional[str] = Field(None, max_length=100)
    position: Optional[str] = Field(None, max_length=100)


class PatientFilters(BaseModel):
    """Query filters for the patient list."""
    name: Optional[str] = None
    gender: Optional[Gender] = None
    age: Optional[int] = None
    sport: Optional[str] = None
    position: Optional[str] = None
