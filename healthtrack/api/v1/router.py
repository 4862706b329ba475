"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from healthtrack.api.v1.endpoints import auth, health, integrations, measurements, performance, reports, users

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    auth.router, prefix="/auth", tags=["Authentication"]
)
api_router.include_router(
    users.router, prefix="/users", tags=["Users"]
)
api_router.include_router(
    health.router, prefix="/health", tags=["Health metrics"]
)
api_router.include_router(
    performance.router, prefix="/performance", tags=["Performance metrics"]
)
api_router.include_router(
    measurements.router, prefix="/measurements", tags=["Measurements"]
)
api_router.include_router(
    reports.router, prefix="/reports", tags=["Reports"]
)
api_router.include_router(
    integrations.router, prefix="/integrations", tags=["Integrations"]
)
