"""
Authentication service.

Registration, login and token refresh.
"""

import datetime
from typing import Optional, Union

from loguru import logger
from sqlmodel import Session

from healthtrack.core.errors import Conflict, Forbidden, InvalidCredentials, InvalidToken, ValidationFailed
from healthtrack.core.security import get_password_hash, verify_password
from healthtrack.core.tokens import TokenService
from healthtrack.db.repositories.user import UserRepository
from healthtrack.models.user import AthleteProfile, ProfessionalProfile, User, UserRole
from healthtrack.schemas.token import TokenPair
from healthtrack.schemas.user import AthleteRegister, AuthResponse, ProfessionalRegister, UserLogin
from healthtrack.services.user_service import user_to_response


class AuthService:
    """Service for registration, login and token refresh."""

    def __init__(self, session: Session, tokens: TokenService):
        self.repository = UserRepository(session)
        self.tokens = tokens

    def register(self, data: Union[AthleteRegister, ProfessionalRegister]) -> AuthResponse:
        """
        Register a new athlete or professional.

        Args:
            data: Role-tagged registration payload

        Returns:
            Public profile and a fresh token pair

        Raises:
            ValidationFailed: If an athlete names a missing or non-professional owner
            Conflict: If email already registered
        """
        if isinstance(data, AthleteRegister):
            if self.repository.get_professional(data.professional_id) is None:
                raise ValidationFailed(details=[{"field": "professional_id", "message": "Professional not found"}])
            profile = AthleteProfile(gender=data.gender, age=data.age, country=data.country, sport=data.sport,
                                     position=data.position, professional_id=data.professional_id, )
        else:
            profile = ProfessionalProfile(specialization=data.specialization, license_number=data.license_number,
                                          years_of_experience=data.years_of_experience, )

        email = data.email.lower()
        if self.repository.exists_by_email(email):
            raise Conflict("User already exists", details=[{"field": "email", "message": "Email is already registered"}])

        user = User(name=data.name, email=email, hashed_password=get_password_hash(data.password), role=data.role, )
        user = self.repository.create(user, profile)
        logger.info(f"Registered {user.role} user id={user.id}")

        return self._auth_response(user)

    def authenticate(self, login_data: UserLogin) -> AuthResponse:
        """
        Authenticate user and return a token pair.

        Raises:
            InvalidCredentials: If email or password is wrong
            Forbidden: If the account is inactive
        """
        user = self.repository.get_by_email(login_data.email)

        # Verify user exists and password is correct
        if not user or not verify_password(login_data.password, user.hashed_password):
            logger.info("Login failed: invalid credentials")
            raise InvalidCredentials()

        if not user.is_active:
            raise Forbidden("User account is inactive")

        user.last_login = datetime.datetime.utcnow()
        user = self.repository.update(user)
        logger.info(f"User id={user.id} logged in")

        return self._auth_response(user)

    def refresh(self, refresh_token: str) -> TokenPair:
        """
        Exchange a refresh token for a new pair.  The old token is not revoked.

        Raises:
            InvalidToken: If the token is invalid, expired, or its user is gone
        """
        try:
            return self.tokens.refresh(refresh_token, self._load_active_user)
        except InvalidToken:
            logger.info("Token refresh rejected")
            raise

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _load_active_user(self, user_id: int) -> Optional[User]:
        user = self.repository.get_by_id(user_id)
        if user is None or not user.is_active:
            return None
        return user

    def _auth_response(self, user: User) -> AuthResponse:
        pair = self.tokens.issue_pair(user.id, UserRole(user.role).value)
        return AuthResponse(user=user_to_response(self.repository, user), access_token=pair.access_token,
                            refresh_token=pair.refresh_token, token_type=pair.token_type, )
