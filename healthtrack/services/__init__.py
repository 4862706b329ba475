"""Business logic services."""

from healthtrack.services.anthropometric_service import AnthropometricService
from healthtrack.services.auth_service import AuthService
from healthtrack.services.health_service import HealthMetricService
from healthtrack.services.integration_service import IntegrationService
from healthtrack.services.patient_service import PatientService
from healthtrack.services.performance_service import PerformanceMetricService
from healthtrack.services.report_service import ReportService
from healthtrack.services.user_service import UserService

__all__ = [
    "AnthropometricService",
    "AuthService",
    "HealthMetricService",
    "IntegrationService",
    "PatientService",
    "PerformanceMetricService",
    "ReportService",
    "UserService",
]
