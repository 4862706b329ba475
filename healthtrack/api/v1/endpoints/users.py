"""
User endpoints.

Own profile, and patient management for professionals.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from healthtrack.api.dependencies import get_current_user, get_page_params, require_professional
from healthtrack.db.session import get_db
from healthtrack.models.user import User
from healthtrack.schemas.common import Message, Page, PageParams
from healthtrack.schemas.user import (AthleteResponse, Gender, PatientCreate, PatientFilters, PatientUpdate,
                                      ProfileUpdate, UserResponse, )
from healthtrack.services.patient_service import PatientService
from healthtrack.services.user_service import UserService

router = APIRouter()


@router.get("/profile", summary="Get own profile.", response_model=UserResponse)
def get_profile(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return UserService(db).get_profile(user)


@router.put("/profile", summary="Update own profile.", response_model=UserResponse)
def update_profile(data: ProfileUpdate, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    """
    Partial update of the caller's profile.

    Athletes may change ``name, gender, age, country, settings``;
    professionals only ``name, settings``.  Anything else is rejected with
    ``INVALID_UPDATE``.
    """
    return UserService(db).update_profile(user, data)


@router.get("/patients", summary="List own patients.", response_model=Page[AthleteResponse])
def list_patients(name: Optional[str] = Query(None, description="Case-insensitive name substring"),
                  gender: Optional[Gender] = Query(None), age: Optional[int] = Query(None, ge=0),
                  sport: Optional[str] = Query(None), position: Optional[str] = Query(None),
                  params: PageParams = Depends(get_page_params), db: Session = Depends(get_db),
                  professional: User = Depends(require_professional), ):
    filters = PatientFilters(name=name, gender=gender, age=age, sport=sport, position=position)
    return PatientService(db).list_patients(professional, filters, params)


@router.post("/patients", summary="Create a patient.", response_model=AthleteResponse,
             status_code=status.HTTP_201_CREATED, )
def create_patient(data: PatientCreate, db: Session = Depends(get_db),
                   professional: User = Depends(require_professional), ):
    return PatientService(db).create(professional, data)


@router.get("/patients/{patient_id}", summary="Get one patient.", response_model=AthleteResponse)
def get_patient(patient_id: int, db: Session = Depends(get_db), professional: User = Depends(require_professional)):
    return PatientService(db).get(professional, patient_id)


@router.put("/patients/{patient_id}", summary="Update a patient.", response_model=AthleteResponse)
def update_patient(patient_id: int, data: PatientUpdate, db: Session = Depends(get_db),
                   professional: User = Depends(require_professional), ):
    return PatientService(db).update(professional, patient_id, data)


@router.delete("/patients/{patient_id}", summary="Delete a patient and their records.", response_model=Message)
def delete_patient(patient_id: int, db: Session = Depends(get_db),
                   professional: User = Depends(require_professional), ):
    """Removes the patient's health, performance and anthropometric records.  Reports are kept."""
    return PatientService(db).delete(professional, patient_id)
