"""
Health metrics endpoints.

Self-reported health data; every caller sees only their own entries.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from healthtrack.api.dependencies import get_current_user, get_date_range, get_page_params
from healthtrack.db.session import get_db
from healthtrack.models.health import HealthSource
from healthtrack.models.user import User
from healthtrack.schemas.common import DateRange, Page, PageParams
from healthtrack.schemas.health import HealthMetricCreate, HealthMetricResponse, HealthMetricUpdate
from healthtrack.services.health_service import HealthMetricService

router = APIRouter()


@router.post("", summary="Record health metrics.", response_model=HealthMetricResponse,
             status_code=status.HTTP_201_CREATED, )
def create_health_metric(data: HealthMetricCreate, db: Session = Depends(get_db),
                         user: User = Depends(get_current_user), ):
    return HealthMetricService(db).create(user, data)


@router.get("", summary="List own health metrics.", response_model=Page[HealthMetricResponse])
def list_health_metrics(source: Optional[HealthSource] = Query(None, description="Integration source"),
                        date_range: DateRange = Depends(get_date_range),
                        params: PageParams = Depends(get_page_params), db: Session = Depends(get_db),
                        user: User = Depends(get_current_user), ):
    """Most recent first."""
    return HealthMetricService(db).list_records(user, date_range, params, source)


@router.get("/{entry_id}", summary="Get one health metrics entry.", response_model=HealthMetricResponse)
def get_health_metric(entry_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return HealthMetricService(db).get_by_id(user, entry_id)


@router.put("/{entry_id}", summary="Update a health metrics entry.", response_model=HealthMetricResponse)
def update_health_metric(entry_id: int, data: HealthMetricUpdate, db: Session = Depends(get_db),
                         user: User = Depends(get_current_user), ):
    return HealthMetricService(db).update(user, entry_id, data)


@router.delete("/{entry_id}", summary="Delete a health metrics entry.", status_code=status.HTTP_204_NO_CONTENT)
def delete_health_metric(entry_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    HealthMetricService(db).delete(user, entry_id)
