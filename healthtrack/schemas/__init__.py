"""Pydantic schemas for request/response validation."""

from healthtrack.schemas.token import RefreshRequest, TokenClaims, TokenPair
from healthtrack.schemas.common import Message, Page, PageParams, Pagination
from healthtrack.schemas.user import (
    AthleteRegister,
    AthleteResponse,
    AuthResponse,
    PatientCreate,
    PatientUpdate,
    ProfessionalRegister,
    ProfessionalResponse,
    ProfileUpdate,
    RegisterRequest,
    UserLogin,
    UserResponse,
)
from healthtrack.schemas.health import HealthMetricCreate, HealthMetricResponse, HealthMetricUpdate, SleepData
from healthtrack.schemas.performance import (
    PerformanceMetricCreate,
    PerformanceMetricResponse,
    PerformanceMetricUpdate,
)
from healthtrack.schemas.anthropometric import (
    AnthropometricCreate,
    AnthropometricResponse,
    AnthropometricUpdate,
    Perimeters,
    Skinfolds,
)
from healthtrack.schemas.report import ReportCreate, ReportResponse
from healthtrack.schemas.integration import IntegrationConnectResponse, IntegrationStatus

__all__ = [
    "RefreshRequest",
    "TokenClaims",
    "TokenPair",
    "Message",
    "Page",
    "PageParams",
    "Pagination",
    "AthleteRegister",
    "AthleteResponse",
    "AuthResponse",
    "PatientCreate",
    "PatientUpdate",
    "ProfessionalRegister",
    "ProfessionalResponse",
    "ProfileUpdate",
    "RegisterRequest",
    "UserLogin",
    "UserResponse",
    "HealthMetricCreate",
    "HealthMetricResponse",
    "HealthMetricUpdate",
    "SleepData",
    "PerformanceMetricCreate",
    "PerformanceMetricResponse",
    "PerformanceMetricUpdate",
    "AnthropometricCreate",
    "AnthropometricResponse",
    "AnthropometricUpdate",
    "Perimeters",
    "Skinfolds",
    "ReportCreate",
    "ReportResponse",
    "IntegrationConnectResponse",
    "IntegrationStatus",
]
