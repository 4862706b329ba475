"""
Anthropometric measurement endpoints.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from healthtrack.api.dependencies import get_current_user, get_date_range, get_page_params, require_professional
from healthtrack.db.session import get_db
from healthtrack.models.user import User
from healthtrack.schemas.anthropometric import AnthropometricCreate, AnthropometricResponse, AnthropometricUpdate
from healthtrack.schemas.common import DateRange, Page, PageParams
from healthtrack.services.anthropometric_service import AnthropometricService

router = APIRouter()


@router.post("/anthropometric", summary="Record a measurement for a patient.", response_model=AnthropometricResponse,
             status_code=status.HTTP_201_CREATED, )
def create_measurement(data: AnthropometricCreate, db: Session = Depends(get_db),
                       professional: User = Depends(require_professional), ):
    """Lean mass is derived from weight and body-fat percentage."""
    return AnthropometricService(db).create(professional, data)


@router.get("/anthropometric", summary="List measurements in scope.", response_model=Page[AnthropometricResponse])
def list_measurements(user_id: Optional[int] = Query(None, description="Athlete filter (professionals only)"),
                      date_range: DateRange = Depends(get_date_range),
                      params: PageParams = Depends(get_page_params), db: Session = Depends(get_db),
                      user: User = Depends(get_current_user), ):
    return AnthropometricService(db).list_records(user, date_range, params, user_id)


@router.get("/anthropometric/{entry_id}", summary="Get one measurement.", response_model=AnthropometricResponse)
def get_measurement(entry_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return AnthropometricService(db).get_by_id(user, entry_id)


@router.put("/anthropometric/{entry_id}", summary="Update a measurement.", response_model=AnthropometricResponse)
def update_measurement(entry_id: int, data: AnthropometricUpdate, db: Session = Depends(get_db),
                       professional: User = Depends(require_professional), ):
    return AnthropometricService(db).update(professional, entry_id, data)


@router.delete("/anthropometric/{entry_id}", summary="Delete a measurement.",
               status_code=status.HTTP_204_NO_CONTENT, )
def delete_measurement(entry_id: int, db: Session = Depends(get_db),
                       professional: User = Depends(require_professional), ):
    AnthropometricService(db).delete(professional, entry_id)
