"""Database repositories."""

from healthtrack.db.repositories.user import UserRepository
from healthtrack.db.repositories.health import HealthMetricRepository
from healthtrack.db.repositories.performance import PerformanceMetricRepository
from healthtrack.db.repositories.anthropometric import AnthropometricRepository
from healthtrack.db.repositories.report import ReportRepository
from healthtrack.db.repositories.integration import IntegrationRepository

__all__ = [
    "UserRepository",
    "HealthMetricRepository",
    "PerformanceMetricRepository",
    "AnthropometricRepository",
    "ReportRepository",
    "IntegrationRepository",
]
