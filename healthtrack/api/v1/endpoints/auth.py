"""
Authentication endpoints.

Handles registration, login, token refresh and the current-user lookup.
"""

from typing import Union

from fastapi import APIRouter, Body, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel import Session

from healthtrack.api.dependencies import get_current_user, get_token_service
from healthtrack.core.tokens import TokenService
from healthtrack.db.session import get_db
from healthtrack.models.user import User
from healthtrack.schemas.token import RefreshRequest, TokenPair
from healthtrack.schemas.user import (AthleteRegister, AuthResponse, ProfessionalRegister, UserLogin,
                                      UserResponse, )
from healthtrack.services.auth_service import AuthService
from healthtrack.services.user_service import UserService

router = APIRouter()


@router.post("/register",
             summary="User registration endpoint.",
             response_model=AuthResponse,
             status_code=status.HTTP_201_CREATED)
def register(data: Union[AthleteRegister, ProfessionalRegister] = Body(..., discriminator="role"),
             db: Session = Depends(get_db), tokens: TokenService = Depends(get_token_service), ):
    """
    Register a new athlete or professional.

    Args:
        data: Registration payload tagged by ``role``
        db: Database session

    Returns:
        Created user profile and a token pair

    Raises:
        400: If email already registered, or the athlete's professional does not exist
    """
    return AuthService(db, tokens).register(data)


@router.post("/login",
             summary="User login endpoint via Json.",
             response_model=AuthResponse)
def login(login_data: UserLogin, db: Session = Depends(get_db), tokens: TokenService = Depends(get_token_service)):
    """
    Authenticate user via JSON body.

    Args:
        login_data: User login credentials (email, password)
        db: Database session

    Returns:
        User profile, access token (1 hour) and refresh token (7 days)
    """
    return AuthService(db, tokens).authenticate(login_data)


@router.post("/token",
             summary="User login endpoint via OAuth2 form (for Swagger UI).",
             response_model=AuthResponse)
def login_form(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db),
               tokens: TokenService = Depends(get_token_service), ):
    """
    Authenticate user via OAuth2 form (for Swagger UI).

    Use email as username.
    """
    login_data = UserLogin(email=form_data.username, password=form_data.password)
    return AuthService(db, tokens).authenticate(login_data)


@router.post("/refresh",
             summary="Exchange a refresh token for a new token pair.",
             response_model=TokenPair)
def refresh(data: RefreshRequest, db: Session = Depends(get_db), tokens: TokenService = Depends(get_token_service)):
    return AuthService(db, tokens).refresh(data.refresh_token)


@router.get("/me",
            summary="User info endpoint.",
            response_model=UserResponse)
def me(user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    return UserService(db).get_profile(user)
