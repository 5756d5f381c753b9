"""
Authentication module exceptions.

Token failures are typed so callers can tell them apart internally, but the
request guard collapses all of them into a single UnauthorizedError so that
clients never learn which check failed.
"""

from shared.exceptions import AuthenticationError, AuthorizationError, ValidationError


class UnauthorizedError(AuthenticationError):
    """Generic rejection for protected routes."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, code="UNAUTHORIZED")


class InvalidCredentialsError(AuthenticationError):
    """
    Raised when login fails.

    Used for both an unknown email and a wrong password.
    """

    def __init__(self):
        super().__init__("Invalid credentials", code="INVALID_CREDENTIALS")


class TokenError(AuthenticationError):
    """Base class for bearer token verification failures."""

    pass


class MalformedTokenError(TokenError):
    """Raised when a token cannot be decoded or lacks required claims."""

    def __init__(self, message: str = "Malformed authentication token"):
        super().__init__(message, code="MALFORMED_TOKEN")


class TokenSignatureError(TokenError):
    """Raised when a token's signature does not match the signing secret."""

    def __init__(self, message: str = "Invalid token signature"):
        super().__init__(message, code="INVALID_SIGNATURE")


class ExpiredTokenError(TokenError):
    """Raised when a JWT token has expired."""

    def __init__(self, message: str = "Authentication token has expired"):
        super().__init__(message, code="TOKEN_EXPIRED")


class PasswordTooLongError(ValidationError):
    """Raised when a password exceeds the bcrypt input limit."""

    def __init__(self, max_bytes: int):
        super().__init__(
            f"password: must be at most {max_bytes} bytes",
            code="PASSWORD_TOO_LONG",
            details={"max_bytes": max_bytes},
        )


class NotOwnerError(AuthorizationError):
    """Raised when an authenticated customer accesses a resource they don't own."""

    def __init__(self, resource: str, resource_id: int, user_id: int):
        super().__init__(
            f"You do not have access to this {resource.lower()}",
            code="NOT_OWNER",
            details={"resource": resource, "resource_id": resource_id, "user_id": user_id},
        )
