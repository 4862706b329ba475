"""
Performance metrics repository.

Handles database operations for PerformanceMetric model.
"""

from typing import TYPE_CHECKING, Optional

from sqlmodel import Session, col, select

from healthtrack.db.repositories._query import apply_date_range, paginate
from healthtrack.models.performance import PerformanceMetric
from healthtrack.schemas.common import DateRange, PageParams

if TYPE_CHECKING:
    from healthtrack.services.ownership import OwnershipScope


class PerformanceMetricRepository:
    """Repository for PerformanceMetric database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: PerformanceMetric) -> PerformanceMetric:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[PerformanceMetric]:
        return self.session.get(PerformanceMetric, entry_id)

    def get_scoped(self, entry_id: int, scope: "OwnershipScope") -> Optional[PerformanceMetric]:
        statement = scope.apply(select(PerformanceMetric).where(PerformanceMetric.id == entry_id), PerformanceMetric)
        return self.session.exec(statement).first()

    def list_scoped(self, scope: "OwnershipScope", date_range: DateRange, params: PageParams,
                    sport: Optional[str] = None, ) -> tuple[list[PerformanceMetric], int]:
        """Page of records in scope, most recent first.  *sport* matches case-insensitively as a substring."""
        statement = scope.apply(select(PerformanceMetric), PerformanceMetric)
        statement = apply_date_range(statement, PerformanceMetric.date, date_range)
        if sport:
            statement = statement.where(col(PerformanceMetric.sport).ilike(f"%{sport}%"))
        statement = statement.order_by(col(PerformanceMetric.date).desc(), col(PerformanceMetric.id).desc())
        return paginate(self.session, statement, params)

    def get_by_user_in_range(self, user_id: int, date_range: DateRange) -> list[PerformanceMetric]:
        statement = apply_date_range(select(PerformanceMetric).where(PerformanceMetric.user_id == user_id),
                                     PerformanceMetric.date, date_range).order_by(PerformanceMetric.date)
        return list(self.session.exec(statement).all())

    def update(self, entry: PerformanceMetric) -> PerformanceMetric:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry_id: int) -> bool:
        entry = self.get_by_id(entry_id)
        if entry:
            self.session.delete(entry)
            self.session.commit()
            return True
        return False

    def delete_by_user(self, user_id: int) -> int:
        entries = self.session.exec(select(PerformanceMetric).where(PerformanceMetric.user_id == user_id)).all()
        for entry in entries:
            self.session.delete(entry)
        self.session.commit()
        return len(entries)
