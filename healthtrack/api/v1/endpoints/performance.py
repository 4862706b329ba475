"""
Performance metrics endpoints.

Professionals write records for their patients; athletes read their own.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from healthtrack.api.dependencies import get_current_user, get_date_range, get_page_params, require_professional
from healthtrack.db.session import get_db
from healthtrack.models.user import User
from healthtrack.schemas.common import DateRange, Page, PageParams
from healthtrack.schemas.performance import (PerformanceMetricCreate, PerformanceMetricResponse,
                                             PerformanceMetricUpdate, )
from healthtrack.services.performance_service import PerformanceMetricService

router = APIRouter()


@router.post("", summary="Record a performance test for a patient.", response_model=PerformanceMetricResponse,
             status_code=status.HTTP_201_CREATED, )
def create_performance_metric(data: PerformanceMetricCreate, db: Session = Depends(get_db),
                              professional: User = Depends(require_professional), ):
    return PerformanceMetricService(db).create(professional, data)


@router.get("", summary="List performance records in scope.", response_model=Page[PerformanceMetricResponse])
def list_performance_metrics(user_id: Optional[int] = Query(None, description="Athlete filter (professionals only)"),
                             sport: Optional[str] = Query(None, description="Case-insensitive sport substring"),
                             date_range: DateRange = Depends(get_date_range),
                             params: PageParams = Depends(get_page_params), db: Session = Depends(get_db),
                             user: User = Depends(get_current_user), ):
    """
    Professionals see the records they authored, optionally narrowed to one
    athlete; athletes see the records about themselves.
    """
    return PerformanceMetricService(db).list_records(user, date_range, params, user_id, sport)


@router.get("/{entry_id}", summary="Get one performance record.", response_model=PerformanceMetricResponse)
def get_performance_metric(entry_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return PerformanceMetricService(db).get_by_id(user, entry_id)


@router.put("/{entry_id}", summary="Update a performance record.", response_model=PerformanceMetricResponse)
def update_performance_metric(entry_id: int, data: PerformanceMetricUpdate, db: Session = Depends(get_db),
                              professional: User = Depends(require_professional), ):
    return PerformanceMetricService(db).update(professional, entry_id, data)


@router.delete("/{entry_id}", summary="Delete a performance record.", status_code=status.HTTP_204_NO_CONTENT)
def delete_performance_metric(entry_id: int, db: Session = Depends(get_db),
                              professional: User = Depends(require_professional), ):
    PerformanceMetricService(db).delete(professional, entry_id)
