"""
Password hashing and bearer-token extraction.

Passwords are hashed with bcrypt; raw passwords are never stored or logged.
"""

import bcrypt
from fastapi.security import OAuth2PasswordBearer

# bcrypt only looks at the first 72 bytes of the input.
_BCRYPT_MAX_BYTES = 72

# auto_error=False: a missing header is reported by the auth dependency with the uniform error body.
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/token", auto_error=False)


def get_password_hash(password: str) -> str:
    """Hash a password."""
    salt = bcrypt.gensalt()
    return bcrypt.hashpw(password.encode("utf-8")[:_BCRYPT_MAX_BYTES], salt).decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against a hash."""
    if not plain_password or not hashed_password:
        return False
    return bcrypt.checkpw(plain_password.encode("utf-8")[:_BCRYPT_MAX_BYTES], hashed_password.encode("utf-8"))
