"""
Anthropometric measurement service.

Business logic for body composition measurements.
Handles mapping between nested API schemas (skinfolds, perimeters) and the
flat database model, and derives lean mass on every save.
"""

import datetime
from typing import Optional, Union

from loguru import logger
from sqlmodel import Session

from healthtrack.core.errors import NotFound
from healthtrack.db.repositories.anthropometric import AnthropometricRepository
from healthtrack.db.repositories.user import UserRepository
from healthtrack.models.anthropometric import PERIMETER_SITES, SKINFOLD_SITES, AnthropometricMeasurement
from healthtrack.models.user import User
from healthtrack.schemas.anthropometric import (AnthropometricCreate, AnthropometricResponse, AnthropometricUpdate,
                                                Perimeters, Skinfolds, )
from healthtrack.schemas.common import DateRange, Page, PageParams
from healthtrack.services.ownership import OwnershipScope, get_owned_patient

# Nested group -> (column prefix, sites)
_GROUPS = {
    "skinfolds": ("skinfold", SKINFOLD_SITES),
    "perimeters": ("perimeter", PERIMETER_SITES),
}


def compute_lean_mass(weight: Optional[float], body_fat_percentage: Optional[float]) -> Optional[float]:
    """
    Lean body mass in kg.

    ``weight * (1 - body_fat_percentage / 100)``; ``None`` unless both
    values are known.  A body-fat percentage of 0 yields the full weight.
    """
    if weight is None or body_fat_percentage is None:
        return None
    return weight * (1 - body_fat_percentage / 100)


class AnthropometricService:
    """Service for anthropometric measurement business logic."""

    def __init__(self, session: Session):
        self.repository = AnthropometricRepository(session)
        self.users = UserRepository(session)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def create(self, professional: User, data: AnthropometricCreate) -> AnthropometricResponse:
        """
        Record a measurement for an owned patient, stamped with the caller.

        Raises:
            NotFound: If the athlete is not assigned to *professional*
        """
        patient, _ = get_owned_patient(self.users, professional, data.user_id,
                                       message="User not found or not assigned to you")

        flat = self._schema_to_flat(data)
        flat.pop("user_id", None)
        if flat.get("date") is None:
            flat.pop("date", None)
        entry = AnthropometricMeasurement(user_id=patient.id, professional_id=professional.id, **flat)
        entry.lean_mass = compute_lean_mass(entry.weight, entry.body_fat_percentage)

        entry = self.repository.create(entry)
        logger.debug(f"Anthropometric measurement id={entry.id} created for user id={patient.id}")
        return self.to_response(entry)

    def list_records(self, caller: User, date_range: DateRange, params: PageParams,
                     user_id: Optional[int] = None, ) -> Page[AnthropometricResponse]:
        scope = OwnershipScope.for_user(caller, user_id)
        entries, total = self.repository.list_scoped(scope, date_range, params)
        return Page[AnthropometricResponse].build([self.to_response(e) for e in entries], total, params)

    def get_by_id(self, caller: User, entry_id: int) -> AnthropometricResponse:
        return self.to_response(self._get_owned_entry(caller, entry_id))

    def update(self, professional: User, entry_id: int, data: AnthropometricUpdate) -> AnthropometricResponse:
        """Partial update; skinfold and perimeter groups merge site by site."""
        entry = self._get_owned_entry(professional, entry_id)

        updates = self._schema_to_flat(data, exclude_unset=True)
        for key, value in updates.items():
            if value is not None:
                setattr(entry, key, value)

        if updates.get("weight") is not None or updates.get("body_fat_percentage") is not None:
            lean_mass = compute_lean_mass(entry.weight, entry.body_fat_percentage)
            if lean_mass is not None:
                entry.lean_mass = lean_mass

        entry.updated_at = datetime.datetime.utcnow()
        entry = self.repository.update(entry)
        return self.to_response(entry)

    def delete(self, professional: User, entry_id: int) -> None:
        entry = self._get_owned_entry(professional, entry_id)
        self.repository.delete(entry.id)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _get_owned_entry(self, caller: User, entry_id: int) -> AnthropometricMeasurement:
        entry = self.repository.get_scoped(entry_id, OwnershipScope.for_user(caller))
        if not entry:
            raise NotFound("Measurement not found")
        return entry

    @staticmethod
    def _schema_to_flat(data: Union[AnthropometricCreate, AnthropometricUpdate], exclude_unset: bool = False) -> dict:
        """Convert nested schema to flat dict for the database model."""
        values = data.model_dump(exclude_unset=exclude_unset)
        flat = {}
        for key, value in values.items():
            if key in _GROUPS:
                prefix, sites = _GROUPS[key]
                for site in sites:
                    if value and site in value:
                        flat[f"{prefix}_{site}"] = value[site]
            else:
                flat[key] = value
        return flat

    @staticmethod
    def to_response(entry: AnthropometricMeasurement) -> AnthropometricResponse:
        """Convert flat database model to nested response schema."""
        skinfolds = Skinfolds(**{site: getattr(entry, f"skinfold_{site}") for site in SKINFOLD_SITES})
        perimeters = Perimeters(**{site: getattr(entry, f"perimeter_{site}") for site in PERIMETER_SITES})

        return AnthropometricResponse(id=entry.id, user_id=entry.user_id, professional_id=entry.professional_id,
                                      date=entry.date, weight=entry.weight, height=entry.height, skinfolds=skinfolds,
                                      perimeters=perimeters, body_fat_percentage=entry.body_fat_percentage,
                                      lean_mass=entry.lean_mass, notes=entry.notes, created_at=entry.created_at,
                                      updated_at=entry.updated_at, )
