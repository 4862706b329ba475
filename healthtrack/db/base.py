"""
Base database configuration.

Import all models here so Alembic can detect them for migrations.
"""

# Import all models for Alembic autogenerate
from healthtrack.models.user import AthleteProfile, ProfessionalProfile, User  # noqa: F401
from healthtrack.models.health import HealthMetric  # noqa: F401
from healthtrack.models.performance import PerformanceMetric  # noqa: F401
from healthtrack.models.anthropometric import AnthropometricMeasurement  # noqa: F401
from healthtrack.models.report import Report  # noqa: F401
from healthtrack.models.integration import IntegrationConnection  # noqa: F401
