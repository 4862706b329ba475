"""Tests for the token service.

Pure unit tests: tokens are issued and verified in memory, the clock is
injected so expiry can be exercised without waiting.
"""

import datetime
from types import SimpleNamespace

import pytest
from jose import jwt

from healthtrack.core.config import settings
from healthtrack.core.errors import InvalidToken
from healthtrack.core.tokens import ACCESS, REFRESH, TokenConfig, TokenService

CONFIG = TokenConfig(access_secret="access-secret", refresh_secret="refresh-secret")


def _service(now: datetime.datetime = None) -> TokenService:
    if now is None:
        return TokenService(CONFIG)
    return TokenService(CONFIG, clock=lambda: now)


def _claims(token: str) -> dict:
    return jwt.get_unverified_claims(token)


# ======================================================================
# TokenConfig
# ======================================================================


class TestTokenConfig:
    def test_default_lifetimes(self):
        assert CONFIG.access_ttl == datetime.timedelta(hours=1)
        assert CONFIG.refresh_ttl == datetime.timedelta(days=7)
        assert CONFIG.algorithm == "HS256"

    def test_from_settings(self):
        config = TokenConfig.from_settings(settings)
        assert config.access_secret == settings.JWT_SECRET
        assert config.refresh_secret == settings.REFRESH_TOKEN_SECRET
        assert config.access_ttl == datetime.timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        assert config.refresh_ttl == datetime.timedelta(days=settings.REFRESH_TOKEN_EXPIRE_DAYS)


# ======================================================================
# Issuing
# ======================================================================


class TestIssue:
    def test_access_token_claims(self):
        claims = _claims(_service().issue_access_token(7, "athlete"))
        assert claims["sub"] == "7"
        assert claims["role"] == "athlete"
        assert claims["type"] == ACCESS

    def test_refresh_token_has_no_role(self):
        claims = _claims(_service().issue_refresh_token(7))
        assert claims["type"] == REFRESH
        assert "role" not in claims

    def test_access_expires_after_one_hour(self):
        claims = _claims(_service().issue_access_token(1, "professional"))
        assert claims["exp"] - claims["iat"] == 3600

    def test_refresh_expires_after_seven_days(self):
        claims = _claims(_service().issue_refresh_token(1))
        assert claims["exp"] - claims["iat"] == 7 * 24 * 3600

    def test_tokens_issued_in_same_second_differ(self):
        now = datetime.datetime.now(datetime.timezone.utc)
        service = _service(now)
        assert service.issue_access_token(1, "athlete") != service.issue_access_token(1, "athlete")

    def test_pair_is_bearer(self):
        pair = _service().issue_pair(3, "athlete")
        assert pair.token_type == "bearer"
        assert _claims(pair.access_token)["type"] == ACCESS
        assert _claims(pair.refresh_token)["type"] == REFRESH


# ======================================================================
# Verification
# ======================================================================


class TestVerify:
    def test_verify_access_round_trip(self):
        service = _service()
        claims = service.verify_access(service.issue_access_token(42, "professional"))
        assert claims.user_id == 42
        assert claims.role == "professional"
        assert claims.token_type == ACCESS
        assert claims.expires_at - claims.issued_at == datetime.timedelta(hours=1)

    def test_refresh_token_rejected_as_access(self):
        service = _service()
        with pytest.raises(InvalidToken):
            service.verify_access(service.issue_refresh_token(42))

    def test_access_token_rejected_as_refresh(self):
        service = _service()
        with pytest.raises(InvalidToken):
            service.verify_refresh(service.issue_access_token(42, "athlete"))

    def test_type_claim_is_checked(self):
        """An access-typed token signed with the refresh secret is still rejected."""
        token = jwt.encode({"sub": "1", "type": ACCESS, "iat": 0, "exp": 4102444800}, CONFIG.refresh_secret,
                           algorithm="HS256")
        with pytest.raises(InvalidToken):
            _service().verify_refresh(token)

    def test_tampered_token_rejected(self):
        service = _service()
        token = service.issue_access_token(1, "athlete")
        header, payload, signature = token.split(".")
        flipped = ("B" if signature[0] == "A" else "A") + signature[1:]
        tampered = ".".join([header, payload, flipped])
        with pytest.raises(InvalidToken):
            service.verify_access(tampered)

    def test_garbage_rejected(self):
        with pytest.raises(InvalidToken):
            _service().verify_access("not-a-token")

    def test_missing_subject_rejected(self):
        token = jwt.encode({"type": ACCESS, "iat": 0, "exp": 4102444800}, CONFIG.access_secret, algorithm="HS256")
        with pytest.raises(InvalidToken):
            _service().verify_access(token)

    def test_expired_access_token_rejected(self):
        two_hours_ago = datetime.datetime.now(datetime.timezone.utc) - datetime.timedelta(hours=2)
        token = _service(two_hours_ago).issue_access_token(1, "athlete")
        with pytest.raises(InvalidToken):
            _service().verify_access(token)

    def test_expired_refresh_token_rejected(self):
        eight_days_ago = datetime.datetime.now(datetime.timezone.utc) - datetime.timedelta(days=8)
        token = _service(eight_days_ago).issue_refresh_token(1)
        with pytest.raises(InvalidToken):
            _service().verify_refresh(token)


# ======================================================================
# Refresh
# ======================================================================


class TestRefresh:
    def test_refresh_issues_new_pair(self):
        service = _service()
        user = SimpleNamespace(id=5, role="athlete")
        old = service.issue_refresh_token(5)

        pair = service.refresh(old, lambda user_id: user if user_id == 5 else None)

        assert service.verify_access(pair.access_token).user_id == 5
        assert service.verify_access(pair.access_token).role == "athlete"
        assert pair.refresh_token != old

    def test_old_refresh_token_stays_usable(self):
        service = _service()
        user = SimpleNamespace(id=5, role="athlete")
        old = service.issue_refresh_token(5)

        service.refresh(old, lambda _: user)
        again = service.refresh(old, lambda _: user)

        assert service.verify_refresh(again.refresh_token).user_id == 5

    def test_refresh_for_missing_user_rejected(self):
        service = _service()
        with pytest.raises(InvalidToken) as exc_info:
            service.refresh(service.issue_refresh_token(5), lambda _: None)
        assert exc_info.value.message == "Invalid refresh token"
