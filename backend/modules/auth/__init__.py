"""
Authentication module.

Handles password hashing, JWT issuing/validation, registration, login and
ownership checks.

Public API:
- IAuthService: Interface for auth operations
- RegisterRequest, LoginRequest, AuthResponse, TokenPayload: Data models
- owns / assert_owner: Ownership predicate for customer-owned resources
- Auth exceptions: UnauthorizedError, InvalidCredentialsError, token errors
"""

from .interfaces import IAuthService
from .models import RegisterRequest, LoginRequest, AuthResponse, TokenPayload
from .ownership import Owned, owns, assert_owner
from .exceptions import (
    UnauthorizedError,
    InvalidCredentialsError,
    TokenError,
    MalformedTokenError,
    TokenSignatureError,
    ExpiredTokenError,
    PasswordTooLongError,
    NotOwnerError,
)

__all__ = [
    # Interface
    "IAuthService",
    # Models
    "RegisterRequest",
    "LoginRequest",
    "AuthResponse",
    "TokenPayload",
    # Ownership
    "Owned",
    "owns",
    "assert_owner",
    # Exceptions
    "UnauthorizedError",
    "InvalidCredentialsError",
    "TokenError",
    "MalformedTokenError",
    "TokenSignatureError",
    "ExpiredTokenError",
    "PasswordTooLongError",
    "NotOwnerError",
]
