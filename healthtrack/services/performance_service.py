"""
Performance metrics service.

Professionals record test results for their own patients; athletes read the
records written about them.
"""

import datetime
from typing import Optional

from loguru import logger
from sqlmodel import Session

from healthtrack.core.errors import NotFound
from healthtrack.db.repositories.performance import PerformanceMetricRepository
from healthtrack.db.repositories.user import UserRepository
from healthtrack.models.performance import PerformanceMetric
from healthtrack.models.user import User
from healthtrack.schemas.common import DateRange, Page, PageParams
from healthtrack.schemas.performance import (PerformanceMetricCreate, PerformanceMetricResponse,
                                             PerformanceMetricUpdate, )
from healthtrack.services.ownership import OwnershipScope, get_owned_patient


class PerformanceMetricService:
    """Service for performance metrics business logic."""

    def __init__(self, session: Session):
        self.repository = PerformanceMetricRepository(session)
        self.users = UserRepository(session)

    def create(self, professional: User, data: PerformanceMetricCreate) -> PerformanceMetricResponse:
        """
        Record a performance test for an owned patient, stamped with the caller.

        Raises:
            NotFound: If the athlete is not assigned to *professional*
        """
        patient, _ = get_owned_patient(self.users, professional, data.user_id,
                                       message="User not found or not assigned to you")

        values = data.model_dump(exclude={"user_id"})
        if values.get("date") is None:
            values.pop("date", None)
        entry = PerformanceMetric(user_id=patient.id, professional_id=professional.id, **values)
        entry = self.repository.create(entry)
        logger.debug(f"Performance record id={entry.id} created for user id={patient.id}")
        return self.to_response(entry)

    def list_records(self, caller: User, date_range: DateRange, params: PageParams, user_id: Optional[int] = None,
                     sport: Optional[str] = None, ) -> Page[PerformanceMetricResponse]:
        scope = OwnershipScope.for_user(caller, user_id)
        entries, total = self.repository.list_scoped(scope, date_range, params, sport)
        return Page[PerformanceMetricResponse].build([self.to_response(e) for e in entries], total, params)

    def get_by_id(self, caller: User, entry_id: int) -> PerformanceMetricResponse:
        return self.to_response(self._get_owned_entry(caller, entry_id))

    def update(self, professional: User, entry_id: int, data: PerformanceMetricUpdate) -> PerformanceMetricResponse:
        entry = self._get_owned_entry(professional, entry_id)
        for key, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(entry, key, value)
        entry.updated_at = datetime.datetime.utcnow()
        entry = self.repository.update(entry)
        return self.to_response(entry)

    def delete(self, professional: User, entry_id: int) -> None:
        entry = self._get_owned_entry(professional, entry_id)
        self.repository.delete(entry.id)

    def _get_owned_entry(self, caller: User, entry_id: int) -> PerformanceMetric:
        entry = self.repository.get_scoped(entry_id, OwnershipScope.for_user(caller))
        if not entry:
            raise NotFound("Performance record not found")
        return entry

    @staticmethod
    def to_response(entry: PerformanceMetric) -> PerformanceMetricResponse:
        return PerformanceMetricResponse.model_validate(entry, from_attributes=True)
