"""
Application exceptions. Each carries a message, an error_code and the HTTP
status it maps to; the app-level exception handlers turn them into JSON.
"""

from typing import Any


class MyFlixError(Exception):
    """Root exception for all request-level errors."""

    http_status_code: int = 400
    error_code: str = "MYFLIX_ERROR"

    def __init__(self, message: str, detail: dict[str, Any] | None = None) -> None:
        self.message = message
        self.detail = detail or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "detail": self.detail,
        }


class ValidationError(MyFlixError):
    http_status_code = 422
    error_code = "VALIDATION_ERROR"


class AuthenticationError(MyFlixError):
    """Missing, invalid or expired bearer token."""

    http_status_code = 401
    error_code = "NOT_AUTHENTICATED"


class InvalidCredentialsError(AuthenticationError):
    """Wrong username or password at login. Deliberately vague."""

    http_status_code = 400
    error_code = "INVALID_CREDENTIALS"

    def __init__(self) -> None:
        super().__init__("Invalid username or password.")


class AuthorizationError(MyFlixError):
    """Authenticated, but acting on another identity's resource."""

    http_status_code = 400
    error_code = "PERMISSION_DENIED"

    def __init__(self, message: str = "Permission denied.") -> None:
        super().__init__(message)


class ConflictError(MyFlixError):
    http_status_code = 400
    error_code = "DUPLICATE_USERNAME"

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(
            f"{username} already exists.",
            detail={"username": username},
        )


class NotFoundError(MyFlixError):
    http_status_code = 404
    error_code = "NOT_FOUND"

    def __init__(self, resource: str, key: str) -> None:
        self.resource = resource
        self.key = key
        super().__init__(
            f"{resource} {key!r} not found.",
            detail={"resource": resource, "key": key},
        )


class DependencyError(MyFlixError):
    """Store unreachable, deadline exceeded or stored data unusable. Always 500, generic body."""

    http_status_code = 500
    error_code = "DEPENDENCY_ERROR"

    def to_dict(self) -> dict[str, Any]:
        return {
            "error_code": self.error_code,
            "message": "An internal error occurred.",
            "detail": {},
        }


class CredentialIntegrityError(DependencyError):
    """A stored password hash could not be parsed."""


class ConfigurationError(Exception):
    """Fatal misconfiguration detected at startup (never raised per request)."""
