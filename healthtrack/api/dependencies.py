"""
Shared API dependencies.

Reusable FastAPI dependencies for authentication, role gates, pagination
and database access.
"""

import datetime
from typing import Callable, Optional

from fastapi import Depends, Query
from sqlmodel import Session

from healthtrack.core.config import settings
from healthtrack.core.errors import Forbidden, InvalidToken, Unauthorized
from healthtrack.core.security import oauth2_scheme
from healthtrack.core.tokens import TokenConfig, TokenService
from healthtrack.db.repositories.user import UserRepository
from healthtrack.db.session import get_db
from healthtrack.models.user import User, UserRole
from healthtrack.schemas.common import DateRange, PageParams, to_naive_utc


def get_token_service() -> TokenService:
    return TokenService(TokenConfig.from_settings(settings))


def get_current_user(token: Optional[str] = Depends(oauth2_scheme), db: Session = Depends(get_db),
                     tokens: TokenService = Depends(get_token_service), ) -> User:
    """Extract and validate the current user from the bearer access token."""
    if not token:
        raise Unauthorized("No token provided")
    try:
        claims = tokens.verify_access(token)
    except InvalidToken:
        raise Unauthorized("Invalid or expired token")

    user = UserRepository(db).get_by_id(claims.user_id)
    if not user:
        raise Unauthorized("User not found")
    return user


def require_role(role: UserRole) -> Callable[..., User]:
    """Dependency factory: the current user, only if it has *role*."""

    def _check(user: User = Depends(get_current_user)) -> User:
        if user.role != role:
            raise Forbidden(f"Access denied. {role.value.capitalize()} role required.")
        return user

    return _check


require_professional = require_role(UserRole.professional)


def get_page_params(page: int = Query(1, ge=1, description="Page number (1-based)"),
                    limit: int = Query(10, ge=1, le=100, description="Page size"), ) -> PageParams:
    return PageParams(page=page, limit=limit)


def get_date_range(start_date: Optional[datetime.datetime] = Query(None, description="Range start (inclusive)"),
                   end_date: Optional[datetime.datetime] = Query(None, description="Range end (inclusive)"),
                   ) -> DateRange:
    return DateRange(start=to_naive_utc(start_date) if start_date else None,
                     end=to_naive_utc(end_date) if end_date else None, )
