"""
Report repository.
"""

from typing import TYPE_CHECKING, Optional

from sqlmodel import Session, col, select

from healthtrack.db.repositories._query import apply_date_range, paginate
from healthtrack.models.report import Report
from healthtrack.schemas.common import DateRange, PageParams

if TYPE_CHECKING:
    from healthtrack.services.ownership import OwnershipScope


class ReportRepository:
    """Repository for Report database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, report: Report) -> Report:
        self.session.add(report)
        self.session.commit()
        self.session.refresh(report)
        return report

    def get_by_id(self, report_id: int) -> Optional[Report]:
        return self.session.get(Report, report_id)

    def get_scoped(self, report_id: int, scope: "OwnershipScope") -> Optional[Report]:
        statement = scope.apply(select(Report).where(Report.id == report_id), Report)
        return self.session.exec(statement).first()

    def get_shared(self, access_code: str) -> Optional[Report]:
        """Get a report by access code, only while it is shared."""
        statement = select(Report).where(Report.access_code == access_code, Report.shared == True)  # noqa: E712
        return self.session.exec(statement).first()

    def access_code_exists(self, access_code: str) -> bool:
        statement = select(Report.id).where(Report.access_code == access_code)
        return self.session.exec(statement).first() is not None

    def list_scoped(self, scope: "OwnershipScope", date_range: DateRange, params: PageParams,
                    report_type: Optional[str] = None, report_format: Optional[str] = None, ) -> tuple[list[Report], int]:
        statement = scope.apply(select(Report), Report)
        statement = apply_date_range(statement, Report.date, date_range)
        if report_type:
            statement = statement.where(Report.type == report_type)
        if report_format:
            statement = statement.where(Report.format == report_format)
        statement = statement.order_by(col(Report.date).desc(), col(Report.id).desc())
        return paginate(self.session, statement, params)

    def update(self, report: Report) -> Report:
        self.session.add(report)
        self.session.commit()
        self.session.refresh(report)
        return report

    def delete(self, report_id: int) -> bool:
        report = self.get_by_id(report_id)
        if report:
            self.session.delete(report)
            self.session.commit()
            return True
        return False
