"""
Report endpoints.

Generation, listing, sharing and public access by code.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from healthtrack.api.dependencies import get_current_user, get_date_range, get_page_params, require_professional
from healthtrack.db.session import get_db
from healthtrack.models.report import ReportFormat, ReportType
from healthtrack.models.user import User
from healthtrack.schemas.common import DateRange, Page, PageParams
from healthtrack.schemas.report import ReportCreate, ReportResponse
from healthtrack.services.report_service import ReportService

router = APIRouter()


@router.post("", summary="Generate a report for a patient.", response_model=ReportResponse,
             status_code=status.HTTP_201_CREATED, )
def create_report(data: ReportCreate, db: Session = Depends(get_db),
                  professional: User = Depends(require_professional), ):
    """
    Snapshot the patient's measurements, performance and health records in
    the requested period.  ``metrics`` limits the sections included.
    """
    return ReportService(db).create(professional, data)


@router.get("", summary="List reports in scope.", response_model=Page[ReportResponse])
def list_reports(type: Optional[ReportType] = Query(None), format: Optional[ReportFormat] = Query(None),
                 date_range: DateRange = Depends(get_date_range), params: PageParams = Depends(get_page_params),
                 db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    return ReportService(db).list_reports(user, date_range, params, type, format)


@router.get("/shared/{access_code}", summary="Get a shared report by access code (no authentication).",
            response_model=ReportResponse, )
def get_shared_report(access_code: str, db: Session = Depends(get_db)):
    return ReportService(db).get_shared(access_code)


@router.get("/{report_id}", summary="Get one report.", response_model=ReportResponse)
def get_report(report_id: int, db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return ReportService(db).get_by_id(user, report_id)


@router.post("/{report_id}/share", summary="Share a report.", response_model=ReportResponse)
def share_report(report_id: int, db: Session = Depends(get_db), professional: User = Depends(require_professional)):
    return ReportService(db).share(professional, report_id)


@router.delete("/{report_id}", summary="Delete a report.", status_code=status.HTTP_204_NO_CONTENT)
def delete_report(report_id: int, db: Session = Depends(get_db), professional: User = Depends(require_professional)):
    ReportService(db).delete(professional, report_id)
