"""
Token API schemas.
"""

import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field


class TokenPair(BaseModel):
    """Access + refresh token pair returned by login, registration and refresh."""
    access_token: str
    refresh_token: str
    token_type: str = "bearer"


class RefreshRequest(BaseModel):
    """Schema for the refresh endpoint."""
    refresh_token: str = Field(..., min_length=1)


class TokenClaims(BaseModel):
    """Decoded, verified token claims."""
    user_id: int
    role: Optional[str] = None
    token_type: Literal["access", "refresh"]
    issued_at: datetime.datetime
    expires_at: datetime.datetime
