"""
Health metrics repository.

Handles database operations for HealthMetric model.
"""

from typing import TYPE_CHECKING, Optional

from sqlmodel import Session, col, select

from healthtrack.db.repositories._query import apply_date_range, paginate
from healthtrack.models.health import HealthMetric
from healthtrack.schemas.common import DateRange, PageParams

if TYPE_CHECKING:
    from healthtrack.services.ownership import OwnershipScope


class HealthMetricRepository:
    """Repository for HealthMetric database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: HealthMetric) -> HealthMetric:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[HealthMetric]:
        return self.session.get(HealthMetric, entry_id)

    def get_scoped(self, entry_id: int, scope: "OwnershipScope") -> Optional[HealthMetric]:
        """Get an entry only if it is inside the caller's ownership scope."""
        statement = scope.apply(select(HealthMetric).where(HealthMetric.id == entry_id), HealthMetric)
        return self.session.exec(statement).first()

    def list_scoped(self, scope: "OwnershipScope", date_range: DateRange, params: PageParams,
                    source: Optional[str] = None, ) -> tuple[list[HealthMetric], int]:
        """Page of entries in scope, most recent first."""
        statement = scope.apply(select(HealthMetric), HealthMetric)
        statement = apply_date_range(statement, HealthMetric.date, date_range)
        if source:
            statement = statement.where(HealthMetric.source == source)
        statement = statement.order_by(col(HealthMetric.date).desc(), col(HealthMetric.id).desc())
        return paginate(self.session, statement, params)

    def get_by_user_in_range(self, user_id: int, date_range: DateRange) -> list[HealthMetric]:
        """All entries of one user inside *date_range*, oldest first."""
        statement = apply_date_range(select(HealthMetric).where(HealthMetric.user_id == user_id), HealthMetric.date,
                                     date_range).order_by(HealthMetric.date)
        return list(self.session.exec(statement).all())

    def update(self, entry: HealthMetric) -> HealthMetric:
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
        """Delete every entry owned by *user_id*.  Returns the number of rows removed."""
        entries = self.session.exec(select(HealthMetric).where(HealthMetric.user_id == user_id)).all()
        for entry in entries:
            self.session.delete(entry)
        self.session.commit()
        return len(entries)
