"""
User service.

Business logic for reading and updating the caller's own profile, and the
mapping from the user tables to the role-specific response schemas.
"""

import datetime
from typing import Union

from sqlmodel import Session

from healthtrack.core.errors import InternalError, InvalidUpdate
from healthtrack.db.repositories.user import UserRepository
from healthtrack.models.user import AthleteProfile, ProfessionalProfile, User, UserRole
from healthtrack.schemas.user import (AccountSettings, AccountSettingsUpdate, AthleteResponse, NotificationSettings,
                                      ProfessionalResponse, ProfileUpdate, )

# Profile fields that only exist on the athlete payload
ATHLETE_PROFILE_FIELDS = ("gender", "age", "country")


class UserService:
    """Service for profile business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.repository = UserRepository(session)

    def get_profile(self, user: User) -> Union[AthleteResponse, ProfessionalResponse]:
        return user_to_response(self.repository, user)

    def update_profile(self, user: User, data: ProfileUpdate) -> Union[AthleteResponse, ProfessionalResponse]:
        """
        Merge *data* into the caller's profile.

        Only fields present in the request are written.  Athlete-only fields
        sent by a professional reject the whole update.

        Raises:
            InvalidUpdate: If a field does not apply to the caller's role
        """
        updates = data.model_dump(exclude_unset=True)

        profile = None
        if user.role == UserRole.athlete:
            profile = self._athlete_profile(user)
            for key in ATHLETE_PROFILE_FIELDS:
                if updates.get(key) is not None:
                    setattr(profile, key, updates[key])
        else:
            rejected = [key for key in ATHLETE_PROFILE_FIELDS if key in updates]
            if rejected:
                raise InvalidUpdate(details=[{"field": key, "message": "Not an updatable field"} for key in rejected])

        if updates.get("name") is not None:
            user.name = data.name
        if data.settings is not None:
            apply_settings(user, data.settings)

        user.updated_at = datetime.datetime.utcnow()
        user = self.repository.update(user, profile)
        return user_to_response(self.repository, user)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _athlete_profile(self, user: User) -> AthleteProfile:
        profile = self.repository.get_athlete_profile(user.id)
        if profile is None:
            raise InternalError(f"Athlete {user.id} has no profile")
        return profile


def apply_settings(user: User, data: AccountSettingsUpdate) -> None:
    """Merge an account-settings update field by field."""
    if data.language is not None:
        user.language = data.language
    if data.theme is not None:
        user.theme = data.theme
    if data.notifications is not None:
        if data.notifications.email is not None:
            user.notify_email = data.notifications.email
        if data.notifications.push is not None:
            user.notify_push = data.notifications.push


def _common_fields(user: User) -> dict:
    return {
        "id": user.id,
        "name": user.name,
        "email": user.email,
        "settings": AccountSettings(language=user.language, theme=user.theme,
                                    notifications=NotificationSettings(email=user.notify_email,
                                                                       push=user.notify_push), ),
        "is_active": user.is_active,
        "last_login": user.last_login,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def athlete_to_response(user: User, profile: AthleteProfile) -> AthleteResponse:
    return AthleteResponse(**_common_fields(user), gender=profile.gender, age=profile.age, country=profile.country,
                           sport=profile.sport, position=profile.position, professional_id=profile.professional_id, )


def professional_to_response(user: User, profile: ProfessionalProfile, patients: list[int]) -> ProfessionalResponse:
    return ProfessionalResponse(**_common_fields(user), specialization=profile.specialization,
                                license_number=profile.license_number,
                                years_of_experience=profile.years_of_experience, patients=patients, )


def user_to_response(repository: UserRepository, user: User) -> Union[AthleteResponse, ProfessionalResponse]:
    """Public profile of *user*, shaped by its role."""
    if user.role == UserRole.athlete:
        profile = repository.get_athlete_profile(user.id)
        if profile is not None:
            return athlete_to_response(user, profile)
    elif user.role == UserRole.professional:
        profile = repository.get_professional_profile(user.id)
        if profile is not None:
            return professional_to_response(user, profile, repository.patient_ids(user.id))
    raise InternalError(f"User {user.id} has no profile for role '{user.role}'")
