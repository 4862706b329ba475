"""
Wearable integration endpoints (connection flags only).
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from healthtrack.api.dependencies import get_current_user
from healthtrack.db.session import get_db
from healthtrack.models.health import HealthSource
from healthtrack.models.user import User
from healthtrack.schemas.integration import IntegrationConnectResponse, IntegrationStatus
from healthtrack.services.integration_service import IntegrationService

router = APIRouter()


@router.post("/garmin", summary="Connect a Garmin account.", response_model=IntegrationConnectResponse)
def connect_garmin(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return IntegrationService(db).connect(user, HealthSource.garmin)


@router.post("/google-fit", summary="Connect a Google Fit account.", response_model=IntegrationConnectResponse)
def connect_google_fit(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return IntegrationService(db).connect(user, HealthSource.google_fit)


@router.post("/apple-health", summary="Connect an Apple Health account.", response_model=IntegrationConnectResponse)
def connect_apple_health(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return IntegrationService(db).connect(user, HealthSource.apple_health)


@router.get("/status", summary="Connection status of every provider.", response_model=dict[str, IntegrationStatus])
def integration_status(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return IntegrationService(db).status(user)
