"""
Patient service.

Professionals manage the athletes assigned to them.  Every operation goes
through :func:`get_owned_patient`, so a professional never sees or touches an
athlete owned by someone else.
"""

import datetime

from loguru import logger
from sqlmodel import Session

from healthtrack.core.errors import Conflict
from healthtrack.core.security import get_password_hash
from healthtrack.db.repositories.anthropometric import AnthropometricRepository
from healthtrack.db.repositories.health import HealthMetricRepository
from healthtrack.db.repositories.integration import IntegrationRepository
from healthtrack.db.repositories.performance import PerformanceMetricRepository
from healthtrack.db.repositories.user import UserRepository
from healthtrack.models.user import AthleteProfile, User, UserRole
from healthtrack.schemas.common import Message, Page, PageParams
from healthtrack.schemas.user import AthleteResponse, PatientCreate, PatientFilters, PatientUpdate
from healthtrack.services.ownership import get_owned_patient
from healthtrack.services.user_service import athlete_to_response

# Fields of PatientUpdate stored on the athlete payload rather than the user row
_PROFILE_FIELDS = ("gender", "age", "country", "sport", "position")


class PatientService:
    """Service for patient management by professionals."""

    def __init__(self, session: Session):
        self.users = UserRepository(session)
        self.health = HealthMetricRepository(session)
        self.performance = PerformanceMetricRepository(session)
        self.anthropometric = AnthropometricRepository(session)
        self.integrations = IntegrationRepository(session)

    def list_patients(self, professional: User, filters: PatientFilters, params: PageParams) -> Page[AthleteResponse]:
        rows, total = self.users.list_patients(professional.id, filters, params)
        return Page[AthleteResponse].build([athlete_to_response(user, profile) for user, profile in rows], total,
                                           params)

    def get(self, professional: User, patient_id: int) -> AthleteResponse:
        user, profile = get_owned_patient(self.users, professional, patient_id)
        return athlete_to_response(user, profile)

    def create(self, professional: User, data: PatientCreate) -> AthleteResponse:
        """
        Create an athlete account owned by *professional*.

        Raises:
            Conflict: If email already registered
        """
        email = data.email.lower()
        if self.users.exists_by_email(email):
            raise Conflict(details=[{"field": "email", "message": "Email is already registered"}])

        user = User(name=data.name, email=email, hashed_password=get_password_hash(data.password),
                    role=UserRole.athlete.value, is_active=True, )
        profile = AthleteProfile(gender=data.gender, age=data.age, country=data.country, sport=data.sport,
                                 position=data.position, professional_id=professional.id, )
        user = self.users.create(user, profile)
        logger.info(f"Professional id={professional.id} created patient id={user.id}")

        return athlete_to_response(user, self.users.get_athlete_profile(user.id))

    def update(self, professional: User, patient_id: int, data: PatientUpdate) -> AthleteResponse:
        """
        Merge *data* into an owned patient.

        Raises:
            NotFound: If the patient is not assigned to *professional*
            Conflict: If the new email belongs to another account
        """
        user, profile = get_owned_patient(self.users, professional, patient_id)
        updates = data.model_dump(exclude_unset=True)

        if updates.get("email") is not None:
            email = updates["email"].lower()
            existing = self.users.get_by_email(email)
            if existing is not None and existing.id != user.id:
                raise Conflict(details=[{"field": "email", "message": "Email is already registered"}])
            user.email = email
        if updates.get("name") is not None:
            user.name = updates["name"]
        for key in _PROFILE_FIELDS:
            if updates.get(key) is not None:
                setattr(profile, key, updates[key])

        user.updated_at = datetime.datetime.utcnow()
        user = self.users.update(user, profile)
        return athlete_to_response(user, self.users.get_athlete_profile(user.id))

    def delete(self, professional: User, patient_id: int) -> Message:
        """
        Delete an owned patient and the records that belong to them.

        Health, performance and anthropometric records and integration flags
        are removed, then the account.  Each step commits on its own; reports
        about the patient are kept.
        """
        user, _ = get_owned_patient(self.users, professional, patient_id)

        removed = {
            "anthropometric": self.anthropometric.delete_by_user(user.id),
            "health": self.health.delete_by_user(user.id),
            "performance": self.performance.delete_by_user(user.id),
            "integrations": self.integrations.delete_by_user(user.id),
        }
        self.users.delete(user.id)
        logger.info(f"Professional id={professional.id} deleted patient id={patient_id}, removed records: {removed}")

        return Message(message="Patient deleted successfully")
