"""
Report service.

A report is a JSON snapshot of one patient's records over a period, taken
when the report is generated.  Later edits to the underlying records do not
change it.  Shared reports are readable without authentication through a
random access code.
"""

import datetime
import secrets
from typing import Any, Optional

from loguru import logger
from sqlmodel import Session

from healthtrack.core.config import settings
from healthtrack.core.errors import InternalError, NotFound
from healthtrack.db.repositories.anthropometric import AnthropometricRepository
from healthtrack.db.repositories.health import HealthMetricRepository
from healthtrack.db.repositories.performance import PerformanceMetricRepository
from healthtrack.db.repositories.report import ReportRepository
from healthtrack.db.repositories.user import UserRepository
from healthtrack.models.report import Report, ReportFormat, ReportType
from healthtrack.models.user import AthleteProfile, User
from healthtrack.schemas.common import DateRange, Page, PageParams
from healthtrack.schemas.report import ReportCreate, ReportResponse
from healthtrack.services.anthropometric_service import AnthropometricService
from healthtrack.services.health_service import HealthMetricService
from healthtrack.services.ownership import OwnershipScope, get_owned_patient
from healthtrack.services.performance_service import PerformanceMetricService

SECTIONS = ("measurements", "performance", "health")

# Draws before giving up on a unique access code
MAX_ACCESS_CODE_ATTEMPTS = 5


class ReportService:
    """Service for report generation, listing and sharing."""

    def __init__(self, session: Session, access_code_bytes: int = settings.ACCESS_CODE_BYTES):
        self.repository = ReportRepository(session)
        self.users = UserRepository(session)
        self.anthropometric = AnthropometricRepository(session)
        self.performance = PerformanceMetricRepository(session)
        self.health = HealthMetricRepository(session)
        self.access_code_bytes = access_code_bytes

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def create(self, professional: User, data: ReportCreate) -> ReportResponse:
        """
        Generate a report for an owned patient.

        Args:
            professional: Report author
            data: Target patient, period and sections

        Raises:
            NotFound: If the athlete is not assigned to *professional*
        """
        patient, profile = get_owned_patient(self.users, professional, data.user_id,
                                             message="User not found or not assigned to you")

        report = Report(user_id=patient.id, professional_id=professional.id, type=data.type.value,
                        format=data.format.value,
                        content=self._build_content(patient, profile, data.start_date, data.end_date, data.metrics),
                        shared=data.shared, )
        if report.shared:
            report.access_code = self._new_access_code()

        report = self.repository.create(report)
        logger.info(f"Professional id={professional.id} generated report id={report.id} for user id={patient.id}")
        return self.to_response(report)

    def list_reports(self, caller: User, date_range: DateRange, params: PageParams,
                     report_type: Optional[ReportType] = None,
                     report_format: Optional[ReportFormat] = None, ) -> Page[ReportResponse]:
        reports, total = self.repository.list_scoped(OwnershipScope.for_user(caller), date_range, params,
                                                     report_type.value if report_type else None,
                                                     report_format.value if report_format else None, )
        return Page[ReportResponse].build([self.to_response(r) for r in reports], total, params)

    def get_by_id(self, caller: User, report_id: int) -> ReportResponse:
        return self.to_response(self._get_owned_report(caller, report_id))

    def share(self, professional: User, report_id: int) -> ReportResponse:
        """Mark a report shared.  The access code is assigned once and kept on re-share."""
        report = self._get_owned_report(professional, report_id)
        report.shared = True
        if report.access_code is None:
            report.access_code = self._new_access_code()
        report.updated_at = datetime.datetime.utcnow()
        report = self.repository.update(report)
        logger.info(f"Report id={report.id} shared by professional id={professional.id}")
        return self.to_response(report)

    def get_shared(self, access_code: str) -> ReportResponse:
        report = self.repository.get_shared(access_code)
        if not report:
            raise NotFound("Report not found or not shared")
        return self.to_response(report)

    def delete(self, professional: User, report_id: int) -> None:
        report = self._get_owned_report(professional, report_id)
        self.repository.delete(report.id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_owned_report(self, caller: User, report_id: int) -> Report:
        report = self.repository.get_scoped(report_id, OwnershipScope.for_user(caller))
        if not report:
            raise NotFound("Report not found")
        return report

    def _build_content(self, patient: User, profile: AthleteProfile, start: Optional[datetime.datetime],
                       end: Optional[datetime.datetime], sections: Optional[list[str]], ) -> dict[str, Any]:
        """Snapshot of the patient's records in ``[start, end]`` as plain JSON."""
        date_range = DateRange(start=start, end=end)
        wanted = set(sections) if sections else set(SECTIONS)

        content: dict[str, Any] = {
            "user": {
                "name": patient.name,
                "age": profile.age,
                "gender": profile.gender,
                "sport": profile.sport,
                "position": profile.position,
            },
        }
        if "measurements" in wanted:
            content["measurements"] = [AnthropometricService.to_response(e).model_dump(mode="json")
                                       for e in self.anthropometric.get_by_user_in_range(patient.id, date_range)]
        if "performance" in wanted:
            content["performance"] = [PerformanceMetricService.to_response(e).model_dump(mode="json")
                                      for e in self.performance.get_by_user_in_range(patient.id, date_range)]
        if "health" in wanted:
            content["health"] = [HealthMetricService.to_response(e).model_dump(mode="json")
                                 for e in self.health.get_by_user_in_range(patient.id, date_range)]
        content["period"] = {
            "start": start.isoformat() if start else None,
            "end": end.isoformat() if end else None,
        }
        return content

    def _new_access_code(self) -> str:
        for _ in range(MAX_ACCESS_CODE_ATTEMPTS):
            code = secrets.token_hex(self.access_code_bytes)
            if not self.repository.access_code_exists(code):
                return code
        raise InternalError("Could not generate a unique access code")

    @staticmethod
    def to_response(report: Report) -> ReportResponse:
        return ReportResponse.model_validate(report)
