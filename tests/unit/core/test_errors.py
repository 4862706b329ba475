"""Tests for the error taxonomy and the uniform error body."""

from fastapi import HTTPException

from healthtrack.core.errors import (ApiError, Conflict, Forbidden, InternalError, InvalidCredentials, InvalidToken,
                                     InvalidUpdate, NotFound, Unauthorized, ValidationFailed, code_for_status,
                                     error_body, validation_details, )


class TestErrorClasses:
    def test_status_and_codes(self):
        expected = {
            ValidationFailed: (400, "VALIDATION_ERROR"),
            InvalidUpdate: (400, "INVALID_UPDATE"),
            Conflict: (400, "EMAIL_IN_USE"),
            Unauthorized: (401, "UNAUTHORIZED"),
            InvalidCredentials: (401, "INVALID_CREDENTIALS"),
            InvalidToken: (401, "INVALID_TOKEN"),
            Forbidden: (403, "FORBIDDEN"),
            NotFound: (404, "NOT_FOUND"),
            InternalError: (500, "INTERNAL_SERVER_ERROR"),
        }
        for cls, (status_code, code) in expected.items():
            exc = cls()
            assert exc.status_code == status_code, cls
            assert exc.code == code, cls

    def test_errors_are_http_exceptions(self):
        assert issubclass(ApiError, HTTPException)
        assert NotFound("Report not found").detail == "Report not found"

    def test_unauthorized_family_sets_bearer_challenge(self):
        for cls in (Unauthorized, InvalidCredentials, InvalidToken):
            assert cls().headers == {"WWW-Authenticate": "Bearer"}

    def test_default_message_used_when_none_given(self):
        assert InvalidUpdate().message == "Invalid updates"

    def test_to_body(self):
        body = Conflict(details=[{"field": "email", "message": "taken"}]).to_body()
        assert body == {"error": {"code": "EMAIL_IN_USE", "message": "Email already in use",
                                  "details": [{"field": "email", "message": "taken"}]}}


class TestErrorBody:
    def test_details_omitted_when_empty(self):
        assert error_body("NOT_FOUND", "Missing") == {"error": {"code": "NOT_FOUND", "message": "Missing"}}
        assert "details" not in error_body("NOT_FOUND", "Missing", [])["error"]

    def test_code_for_framework_statuses(self):
        assert code_for_status(404) == "NOT_FOUND"
        assert code_for_status(405) == "METHOD_NOT_ALLOWED"
        assert code_for_status(503) == "INTERNAL_SERVER_ERROR"
        assert code_for_status(418) == "HTTP_ERROR"


class TestValidationDetails:
    def test_location_prefix_dropped(self):
        errors = [{"loc": ("body", "email"), "msg": "value is not a valid email address", "type": "value_error"}]
        assert validation_details(errors) == [{"field": "email", "message": "value is not a valid email address"}]

    def test_nested_location_joined(self):
        errors = [{"loc": ("body", "settings", "theme"), "msg": "bad theme", "type": "literal_error"}]
        assert validation_details(errors)[0]["field"] == "settings.theme"

    def test_union_tag_dropped(self):
        errors = [{"loc": ("body", "athlete", "professional_id"), "msg": "Field required", "type": "missing"}]
        assert validation_details(errors)[0]["field"] == "professional_id"

    def test_missing_discriminator_reported_on_role(self):
        errors = [{"loc": ("body",), "msg": "Unable to extract tag", "type": "union_tag_not_found"}]
        assert validation_details(errors)[0]["field"] == "role"
