"""
API error taxonomy.

Every failure a handler can report maps to one of the classes below.  They
subclass :class:`fastapi.HTTPException` so services raise them exactly as
they would raise a plain ``HTTPException``; the application's exception
handlers render all of them with the same body::

    {"error": {"code": "...", "message": "...", "details": [...]}}
"""

from typing import Any, Optional

from fastapi import HTTPException, status


class ApiError(HTTPException):
    """Base class for errors rendered with the uniform error body."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_SERVER_ERROR"
    message: str = "An unexpected error occurred"

    def __init__(self, message: Optional[str] = None, details: Optional[list[dict[str, Any]]] = None,
                 headers: Optional[dict[str, str]] = None, ):
        self.message = message or self.message
        self.details = details
        super().__init__(status_code=self.status_code, detail=self.message, headers=headers)

    def to_body(self) -> dict[str, Any]:
        return error_body(self.code, self.message, self.details)


class ValidationFailed(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    code = "VALIDATION_ERROR"
    message = "Validation failed"


class InvalidUpdate(ApiError):
    """Update payload names fields the caller may not change."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "INVALID_UPDATE"
    message = "Invalid updates"


class Conflict(ApiError):
    """Duplicate unique value (email).  Reported as 400 like other input errors."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "EMAIL_IN_USE"
    message = "Email already in use"


class Unauthorized(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED
    code = "UNAUTHORIZED"
    message = "Authentication required"

    def __init__(self, message: Optional[str] = None, details: Optional[list[dict[str, Any]]] = None):
        super().__init__(message, details, headers={"WWW-Authenticate": "Bearer"})


class InvalidCredentials(Unauthorized):
    code = "INVALID_CREDENTIALS"
    message = "Invalid email or password"


class InvalidToken(Unauthorized):
    code = "INVALID_TOKEN"
    message = "Invalid or expired token"


class Forbidden(ApiError):
    status_code = status.HTTP_403_FORBIDDEN
    code = "FORBIDDEN"
    message = "Access denied"


class NotFound(ApiError):
    """Resource absent *or* outside the caller's ownership scope."""

    status_code = status.HTTP_404_NOT_FOUND
    code = "NOT_FOUND"
    message = "Resource not found"


class InternalError(ApiError):
    pass


_STATUS_CODES = {
    status.HTTP_400_BAD_REQUEST: "BAD_REQUEST",
    status.HTTP_401_UNAUTHORIZED: "UNAUTHORIZED",
    status.HTTP_403_FORBIDDEN: "FORBIDDEN",
    status.HTTP_404_NOT_FOUND: "NOT_FOUND",
    status.HTTP_405_METHOD_NOT_ALLOWED: "METHOD_NOT_ALLOWED",
}


def code_for_status(status_code: int) -> str:
    """Error code for a bare ``HTTPException`` raised by the framework."""
    if status_code >= 500:
        return InternalError.code
    return _STATUS_CODES.get(status_code, "HTTP_ERROR")


def error_body(code: str, message: str, details: Optional[list[dict[str, Any]]] = None) -> dict[str, Any]:
    error: dict[str, Any] = {"code": code, "message": message}
    if details:
        error["details"] = details
    return {"error": error}


def validation_details(errors: list[dict[str, Any]]) -> list[dict[str, str]]:
    """Flatten pydantic error dicts into ``{field, message}`` pairs.

    The leading ``body``/``query``/``path`` location segment and the role tag
    of the registration union are dropped; nested locations are joined with
    dots (``settings.theme``).
    """
    details = []
    for err in errors:
        loc = [str(part) for part in err.get("loc", ())]
        if loc and loc[0] in ("body", "query", "path", "header"):
            loc = loc[1:]
        if len(loc) > 1 and loc[0] in _UNION_TAGS:
            loc = loc[1:]
        field = ".".join(loc) or ("role" if err.get("type", "").startswith("union_tag") else "")
        details.append({"field": field, "message": err.get("msg", "Invalid value")})
    return details


_UNION_TAGS = frozenset({"athlete", "professional"})
