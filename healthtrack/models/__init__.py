"""SQLModel database models."""

from healthtrack.models.user import AthleteProfile, ProfessionalProfile, User, UserRole
from healthtrack.models.health import HealthMetric, HealthSource
from healthtrack.models.performance import PerformanceMetric
from healthtrack.models.anthropometric import AnthropometricMeasurement
from healthtrack.models.report import Report, ReportFormat, ReportType
from healthtrack.models.integration import IntegrationConnection

__all__ = [
    "User",
    "UserRole",
    "AthleteProfile",
    "ProfessionalProfile",
    "HealthMetric",
    "HealthSource",
    "PerformanceMetric",
    "AnthropometricMeasurement",
    "Report",
    "ReportType",
    "ReportFormat",
    "IntegrationConnection",
]
