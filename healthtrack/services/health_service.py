"""
Health metrics service.

Business logic for self-reported health data.
Handles mapping between nested API schemas and flat database model.
Every operation is scoped to the caller's own records, whatever the role.
"""

import datetime
from typing import Optional, Union

from sqlmodel import Session

from healthtrack.core.errors import NotFound
from healthtrack.db.repositories.health import HealthMetricRepository
from healthtrack.models.health import HealthMetric, HealthSource
from healthtrack.models.user import User
from healthtrack.schemas.common import DateRange, Page, PageParams
from healthtrack.schemas.health import HealthMetricCreate, HealthMetricResponse, HealthMetricUpdate, SleepData
from healthtrack.services.ownership import OwnershipScope

_SLEEP_COLUMNS = {
    "duration": "sleep_duration",
    "quality": "sleep_quality",
    "deep_sleep": "deep_sleep",
    "light_sleep": "light_sleep",
    "rem_sleep": "rem_sleep",
}


class HealthMetricService:
    """Service for health metrics business logic."""

    def __init__(self, session: Session):
        self.repository = HealthMetricRepository(session)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def create(self, user: User, data: HealthMetricCreate) -> HealthMetricResponse:
        flat = self._schema_to_flat(data)
        if flat.get("date") is None:
            flat.pop("date", None)
        entry = HealthMetric(user_id=user.id, **flat)
        entry = self.repository.create(entry)
        return self.to_response(entry)

    def list_records(self, user: User, date_range: DateRange, params: PageParams,
                     source: Optional[HealthSource] = None, ) -> Page[HealthMetricResponse]:
        entries, total = self.repository.list_scoped(OwnershipScope.self_only(user), date_range, params,
                                                     source.value if source else None, )
        return Page[HealthMetricResponse].build([self.to_response(e) for e in entries], total, params)

    def get_by_id(self, user: User, entry_id: int) -> HealthMetricResponse:
        return self.to_response(self._get_owned_entry(user, entry_id))

    def update(self, user: User, entry_id: int, data: HealthMetricUpdate) -> HealthMetricResponse:
        entry = self._get_owned_entry(user, entry_id)
        for key, value in self._schema_to_flat(data, exclude_unset=True).items():
            if value is not None:
                setattr(entry, key, value)
        entry.updated_at = datetime.datetime.utcnow()
        entry = self.repository.update(entry)
        return self.to_response(entry)

    def delete(self, user: User, entry_id: int) -> None:
        entry = self._get_owned_entry(user, entry_id)
        self.repository.delete(entry.id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_owned_entry(self, user: User, entry_id: int) -> HealthMetric:
        """Get entry by id within the caller's scope."""
        entry = self.repository.get_scoped(entry_id, OwnershipScope.self_only(user))
        if not entry:
            raise NotFound("Health record not found")
        return entry

    @staticmethod
    def _schema_to_flat(data: Union[HealthMetricCreate, HealthMetricUpdate], exclude_unset: bool = False) -> dict:
        """Convert nested schema to flat dict for the database model."""
        values = data.model_dump(exclude_unset=exclude_unset)
        sleep = values.pop("sleep", None) or {}
        flat = dict(values)
        for field, column in _SLEEP_COLUMNS.items():
            if field in sleep:
                flat[column] = sleep[field]
        if flat.get("source") is not None:
            flat["source"] = str(getattr(flat["source"], "value", flat["source"]))
        return flat

    @staticmethod
    def to_response(entry: HealthMetric) -> HealthMetricResponse:
        """Convert flat database model to nested response schema."""
        sleep = None
        if any(getattr(entry, column) is not None for column in _SLEEP_COLUMNS.values()):
            sleep = SleepData(**{field: getattr(entry, column) for field, column in _SLEEP_COLUMNS.items()})

        return HealthMetricResponse(id=entry.id, user_id=entry.user_id, date=entry.date, sleep=sleep,
                                    stress=entry.stress, resting_heart_rate=entry.resting_heart_rate,
                                    heart_rate_variability=entry.heart_rate_variability, steps=entry.steps,
                                    source=entry.source, notes=entry.notes, created_at=entry.created_at,
                                    updated_at=entry.updated_at, )
