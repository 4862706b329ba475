"""
Anthropometric measurement repository.
"""

from typing import TYPE_CHECKING, Optional

from sqlmodel import Session, col, select

from healthtrack.db.repositories._query import apply_date_range, paginate
from healthtrack.models.anthropometric import AnthropometricMeasurement
from healthtrack.schemas.common import DateRange, PageParams

if TYPE_CHECKING:
    from healthtrack.services.ownership import OwnershipScope


class AnthropometricRepository:
    """Repository for AnthropometricMeasurement database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: AnthropometricMeasurement) -> AnthropometricMeasurement:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_id(self, entry_id: int) -> Optional[AnthropometricMeasurement]:
        return self.session.get(AnthropometricMeasurement, entry_id)

    def get_scoped(self, entry_id: int, scope: "OwnershipScope") -> Optional[AnthropometricMeasurement]:
        statement = scope.apply(select(AnthropometricMeasurement).where(AnthropometricMeasurement.id == entry_id),
                                AnthropometricMeasurement)
        return self.session.exec(statement).first()

    def list_scoped(self, scope: "OwnershipScope", date_range: DateRange,
                    params: PageParams, ) -> tuple[list[AnthropometricMeasurement], int]:
        statement = scope.apply(select(AnthropometricMeasurement), AnthropometricMeasurement)
        statement = apply_date_range(statement, AnthropometricMeasurement.date, date_range)
        statement = statement.order_by(col(AnthropometricMeasurement.date).desc(),
                                       col(AnthropometricMeasurement.id).desc())
        return paginate(self.session, statement, params)

    def get_by_user_in_range(self, user_id: int, date_range: DateRange) -> list[AnthropometricMeasurement]:
        statement = apply_date_range(
            select(AnthropometricMeasurement).where(AnthropometricMeasurement.user_id == user_id),
            AnthropometricMeasurement.date, date_range).order_by(AnthropometricMeasurement.date)
        return list(self.session.exec(statement).all())

    def update(self, entry: AnthropometricMeasurement) -> AnthropometricMeasurement:
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
        entries = self.session.exec(
            select(AnthropometricMeasurement).where(AnthropometricMeasurement.user_id == user_id)).all()
        for entry in entries:
            self.session.delete(entry)
        self.session.commit()
        return len(entries)
