"""
Token service.

Issues and verifies the two classes of signed tokens:

* **access**: ``{sub, role, type}``, short lived, signed with the access secret.
* **refresh**: ``{sub, type}``, long lived, signed with a *separate* secret so
  that leaking the access secret does not allow minting refresh tokens.

Tokens are stateless: a valid signature and an unexpired ``exp`` are
sufficient.  There is no revocation list, so a refresh token stays usable
until it expires even after it has been exchanged for a new pair.
"""

from __future__ import annotations

import datetime
import uuid
from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from jose import JWTError, jwt
from loguru import logger

from healthtrack.core.config import Settings
from healthtrack.core.errors import InvalidToken
from healthtrack.schemas.token import TokenClaims, TokenPair

ACCESS = "access"
REFRESH = "refresh"


@dataclass(frozen=True)
class TokenConfig:
    """Everything the token service needs, passed in explicitly."""

    access_secret: str
    refresh_secret: str
    algorithm: str = "HS256"
    access_ttl: datetime.timedelta = datetime.timedelta(hours=1)
    refresh_ttl: datetime.timedelta = datetime.timedelta(days=7)

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenConfig":
        return cls(access_secret=settings.JWT_SECRET, refresh_secret=settings.REFRESH_TOKEN_SECRET,
                   algorithm=settings.ALGORITHM,
                   access_ttl=datetime.timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
                   refresh_ttl=datetime.timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS), )


class TokenSubject(Protocol):
    id: Optional[int]
    role: str


def _utcnow() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


class TokenService:
    """Signs and verifies access and refresh tokens."""

    def __init__(self, config: TokenConfig, clock: Callable[[], datetime.datetime] = _utcnow):
        self.config = config
        self._clock = clock

    # ------------------------------------------------------------------
    # Issuing
    # ------------------------------------------------------------------

    def issue_access_token(self, user_id: int, role: str) -> str:
        return self._encode({"sub": str(user_id), "role": role, "type": ACCESS}, self.config.access_ttl,
                            self.config.access_secret)

    def issue_refresh_token(self, user_id: int) -> str:
        return self._encode({"sub": str(user_id), "type": REFRESH}, self.config.refresh_ttl,
                            self.config.refresh_secret)

    def issue_pair(self, user_id: int, role: str) -> TokenPair:
        return TokenPair(access_token=self.issue_access_token(user_id, role),
                         refresh_token=self.issue_refresh_token(user_id))

    # ------------------------------------------------------------------
    # Verification
    # ------------------------------------------------------------------

    def verify(self, token: str, secret: str) -> TokenClaims:
        """Decode *token* with *secret*.

        Raises:
            InvalidToken: bad signature, wrong secret, expired, malformed,
                or missing subject.
        """
        try:
            payload = jwt.decode(token, secret, algorithms=[self.config.algorithm])
        except JWTError as e:
            raise InvalidToken() from e

        try:
            return TokenClaims(user_id=int(payload["sub"]), role=payload.get("role"), token_type=payload["type"],
                               issued_at=datetime.datetime.fromtimestamp(payload["iat"], datetime.timezone.utc),
                               expires_at=datetime.datetime.fromtimestamp(payload["exp"], datetime.timezone.utc), )
        except (KeyError, TypeError, ValueError) as e:
            raise InvalidToken() from e

    def verify_access(self, token: str) -> TokenClaims:
        return self._verify_kind(token, self.config.access_secret, ACCESS)

    def verify_refresh(self, token: str) -> TokenClaims:
        return self._verify_kind(token, self.config.refresh_secret, REFRESH)

    def refresh(self, refresh_token: str, load_user: Callable[[int], Optional[TokenSubject]]) -> TokenPair:
        """Exchange a refresh token for a fresh pair.

        The presented refresh token is not invalidated.

        Raises:
            InvalidToken: token invalid/expired or its user no longer exists.
        """
        claims = self.verify_refresh(refresh_token)
        user = load_user(claims.user_id)
        if user is None:
            logger.info(f"Refresh rejected: user {claims.user_id} no longer exists")
            raise InvalidToken("Invalid refresh token")
        return self.issue_pair(user.id, user.role)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _verify_kind(self, token: str, secret: str, kind: str) -> TokenClaims:
        claims = self.verify(token, secret)
        if claims.token_type != kind:
            raise InvalidToken()
        return claims

    def _encode(self, claims: dict, ttl: datetime.timedelta, secret: str) -> str:
        # Whole seconds so that exp - iat is exactly the configured lifetime.
        issued_at = int(self._clock().timestamp())
        payload = dict(claims, iat=issued_at, exp=issued_at + int(ttl.total_seconds()), jti=uuid.uuid4().hex)
        return jwt.encode(payload, secret, algorithm=self.config.algorithm)
