"""
Ownership model.

Every read or write of a measurement, report or patient goes through one of
the rules below:

* a **professional** is scoped by ``professional_id == caller.id``; an explicit
  target athlete (``user_id``) narrows that scope further, it never replaces it;
* an **athlete** is scoped by ``user_id == caller.id``;
* a patient record is reachable only by the professional it is assigned to.

Scopes are rebuilt from the caller on every request, so reassigning an
athlete takes effect on the next call.  A lookup outside the scope raises
:class:`NotFound`, the same error as a missing record, so callers cannot
probe for records they do not own.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, TypeVar

from healthtrack.core.errors import Forbidden, NotFound
from healthtrack.db.repositories.user import UserRepository
from healthtrack.models.user import AthleteProfile, User, UserRole

S = TypeVar("S")


@dataclass(frozen=True)
class OwnershipScope:
    """Column filters derived from the caller."""

    user_id: Optional[int] = None
    professional_id: Optional[int] = None

    def __post_init__(self) -> None:
        if self.user_id is None and self.professional_id is None:
            raise ValueError("An ownership scope needs at least one owner filter")

    @classmethod
    def for_user(cls, caller: User, target_user_id: Optional[int] = None) -> "OwnershipScope":
        """Scope for records authored by professionals (performance, anthropometric, reports).

        *target_user_id* is only honoured for professionals; athletes are
        always pinned to their own id.
        """
        if caller.role == UserRole.professional:
            return cls(user_id=target_user_id, professional_id=caller.id)
        if caller.role == UserRole.athlete:
            return cls(user_id=caller.id)
        raise Forbidden(f"Unknown role '{caller.role}'")

    @classmethod
    def self_only(cls, caller: User) -> "OwnershipScope":
        """Scope for self-reported records (health metrics), whatever the role."""
        return cls(user_id=caller.id)

    def apply(self, statement: S, model: Any) -> S:
        """Add this scope's WHERE clauses to *statement* selecting from *model*."""
        if self.professional_id is not None:
            statement = statement.where(model.professional_id == self.professional_id)
        if self.user_id is not None:
            statement = statement.where(model.user_id == self.user_id)
        return statement


def get_owned_patient(users: UserRepository, professional: User, patient_id: int,
                      message: str = "Patient not found or not assigned to you", ) -> tuple[User, AthleteProfile]:
    """Return the athlete *patient_id* if it is assigned to *professional*.

    Raises:
        NotFound: the athlete does not exist, is not an athlete, or belongs
            to another professional.
    """
    if professional.role != UserRole.professional:
        raise NotFound(message)
    patient = users.get_patient(patient_id, professional.id)
    if patient is None:
        raise NotFound(message)
    return patient
