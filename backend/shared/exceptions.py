"""
Base exception classes for the Shop backend.

Each module should define its own exceptions that inherit from these bases.
Every base carries the HTTP status it maps to, so the API layer can render
any of them with a single exception handler.
"""

from http import HTTPStatus
from typing import Optional, Any


class ShopError(Exception):
    """
    Base exception for all Shop errors.

    All custom exceptions should inherit from this class.
    """

    status_code: int = HTTPStatus.INTERNAL_SERVER_ERROR

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """
        Convert exception to the public response body.

        ``details`` stays server-side; it is meant for logs, not clients.
        """
        return error_body(self.status_code, self.message)


def error_body(status_code: int, message: Any) -> dict[str, Any]:
    """Build the ``{statusCode, message, error}`` body used for all errors."""
    return {
        "statusCode": int(status_code),
        "message": message,
        "error": HTTPStatus(status_code).phrase,
    }


class ValidationError(ShopError):
    """
    Input validation failed.

    Rendered with ``message`` as a list, the same shape as request
    validation failures.
    """

    status_code = HTTPStatus.BAD_REQUEST

    def to_dict(self) -> dict[str, Any]:
        return error_body(self.status_code, [self.message])


class AuthenticationError(ShopError):
    """Authentication failed (invalid or missing credentials)."""

    status_code = HTTPStatus.UNAUTHORIZED


class AuthorizationError(ShopError):
    """Authorization failed (authenticated, but not entitled)."""

    status_code = HTTPStatus.FORBIDDEN


class NotFoundError(ShopError):
    """Resource not found."""

    status_code = HTTPStatus.NOT_FOUND


class ConflictError(ShopError):
    """A unique constraint would be violated."""

    status_code = HTTPStatus.CONFLICT


class ConfigurationError(ShopError):
    """The server is misconfigured and cannot operate."""

    pass


class ResourceNotFoundError(NotFoundError):
    """Raised when a resource with the given ID does not exist."""

    def __init__(self, resource: str, resource_id: Any):
        super().__init__(
            f"{resource} with ID {resource_id} not found",
            code=f"{resource.upper()}_NOT_FOUND",
            details={"resource": resource, "resource_id": resource_id},
        )
