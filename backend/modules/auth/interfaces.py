"""
Authentication module interface.

Other modules should depend on IAuthService, not the concrete implementation.
This enables testing with mocks.
"""

from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .models import AuthResponse, LoginRequest, RegisterRequest


@runtime_checkable
class IAuthService(Protocol):
    """
    Interface for authentication operations.

    This protocol defines the contract that the auth module exposes
    to the API layer. Implementations must provide all these methods.
    """

    async def register(self, request: RegisterRequest) -> AuthResponse:
        """
        Create a customer account and issue its first access token.

        Args:
            request: Validated registration data

        Returns:
            AuthResponse with the public customer view and a bearer token

        Raises:
            EmailAlreadyExistsError: If the email is already registered
        """
        ...

    async def login(self, request: LoginRequest) -> AuthResponse:
        """
        Exchange email and password for an access token.

        Raises:
            InvalidCredentialsError: For an unknown email or a wrong password
                alike, so the response never reveals which one it was
        """
        ...

    async def authenticate(self, token: str) -> AuthenticatedUser:
        """
        Resolve a bearer token to a live customer.

        The token must verify *and* the customer it names must still exist.

        Raises:
            UnauthorizedError: On any failure, without saying which
        """
        ...
