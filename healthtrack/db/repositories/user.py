"""
User repository.

Handles database operations for the User model and its role payloads.
"""

from typing import Optional, Union

from sqlmodel import Session, col, select

from healthtrack.db.repositories._query import paginate
from healthtrack.models.user import AthleteProfile, ProfessionalProfile, User, UserRole
from healthtrack.schemas.common import PageParams
from healthtrack.schemas.user import PatientFilters


class UserRepository:
    """Repository for User database operations."""

    def __init__(self, session: Session):
        """
        Initialize repository with database session.

        Args:
            session: SQLModel database session
        """
        self.session = session

    def create(self, user: User, profile: Union[AthleteProfile, ProfessionalProfile]) -> User:
        """
        Create a user together with its role payload.

        Args:
            user: User instance to create
            profile: Athlete or professional payload (``user_id`` is filled in)

        Returns:
            Created user with generated id
        """
        self.session.add(user)
        self.session.flush()
        profile.user_id = user.id
        self.session.add(profile)
        self.session.commit()
        self.session.refresh(user)
        return user

    def get_by_id(self, user_id: int) -> Optional[User]:
        """
        Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User instance if found, None otherwise
        """
        return self.session.get(User, user_id)

    def get_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email address (case-insensitive).

        Args:
            email: User email

        Returns:
            User instance if found, None otherwise
        """
        statement = select(User).where(User.email == email.strip().lower())
        return self.session.exec(statement).first()

    def exists_by_email(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    def get_professional(self, user_id: int) -> Optional[User]:
        """Get a user only if it exists and has the ``professional`` role."""
        statement = select(User).where(User.id == user_id, User.role == UserRole.professional.value)
        return self.session.exec(statement).first()

    # ------------------------------------------------------------------
    # Role payloads
    # ------------------------------------------------------------------

    def get_athlete_profile(self, user_id: int) -> Optional[AthleteProfile]:
        return self.session.get(AthleteProfile, user_id)

    def get_professional_profile(self, user_id: int) -> Optional[ProfessionalProfile]:
        return self.session.get(ProfessionalProfile, user_id)

    def patient_ids(self, professional_id: int) -> list[int]:
        """Ids of the athletes whose owner is *professional_id*."""
        statement = (select(AthleteProfile.user_id).where(AthleteProfile.professional_id == professional_id)
                     .order_by(AthleteProfile.user_id))
        return list(self.session.exec(statement).all())

    # ------------------------------------------------------------------
    # Patients (athletes scoped to one professional)
    # ------------------------------------------------------------------

    def get_patient(self, patient_id: int, professional_id: int) -> Optional[tuple[User, AthleteProfile]]:
        """Get an athlete only if it is assigned to *professional_id*."""
        statement = (select(User, AthleteProfile).join(AthleteProfile, AthleteProfile.user_id == User.id)
                     .where(User.id == patient_id, User.role == UserRole.athlete.value,
                            AthleteProfile.professional_id == professional_id, ))
        row = self.session.exec(statement).first()
        return (row[0], row[1]) if row else None

    def list_patients(self, professional_id: int, filters: PatientFilters,
                      params: PageParams, ) -> tuple[list[tuple[User, AthleteProfile]], int]:
        statement = (select(User, AthleteProfile).join(AthleteProfile, AthleteProfile.user_id == User.id)
                     .where(User.role == UserRole.athlete.value, AthleteProfile.professional_id == professional_id, ))
        if filters.name:
            statement = statement.where(col(User.name).ilike(f"%{filters.name}%"))
        if filters.gender:
            statement = statement.where(AthleteProfile.gender == filters.gender)
        if filters.age is not None:
            statement = statement.where(AthleteProfile.age == filters.age)
        if filters.sport:
            statement = statement.where(AthleteProfile.sport == filters.sport)
        if filters.position:
            statement = statement.where(AthleteProfile.position == filters.position)
        statement = statement.order_by(User.name, User.id)

        rows, total = paginate(self.session, statement, params)
        return [(row[0], row[1]) for row in rows], total

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, user: User, profile: Optional[Union[AthleteProfile, ProfessionalProfile]] = None) -> User:
        """
        Update an existing user (and optionally its role payload).

        Returns:
            Updated user
        """
        self.session.add(user)
        if profile is not None:
            self.session.add(profile)
        self.session.commit()
        self.session.refresh(user)
        return user

    def delete(self, user_id: int) -> bool:
        """
        Delete a user and its role payload.

        Args:
            user_id: User ID to delete

        Returns:
            True if deleted, False if not found
        """
        user = self.get_by_id(user_id)
        if not user:
            return False
        for payload in (self.get_athlete_profile(user_id), self.get_professional_profile(user_id)):
            if payload is not None:
                self.session.delete(payload)
        self.session.flush()
        self.session.delete(user)
        self.session.commit()
        return True
