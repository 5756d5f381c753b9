"""
Authentication service implementation.

Orchestrates registration and login on top of the customer store, the
password hasher and the token service, and resolves bearer tokens for the
request guard.
"""

import asyncio
import logging

from shared.models import AuthenticatedUser
from modules.customers.interfaces import ICustomerService
from modules.customers.models import Customer

from .interfaces import IAuthService
from .models import AuthResponse, LoginRequest, RegisterRequest
from .passwords import PasswordHasher
from .tokens import TokenService
from .exceptions import InvalidCredentialsError, TokenError, UnauthorizedError

logger = logging.getLogger(__name__)


class AuthService(IAuthService):
    """
    Implementation of the authentication service.

    Plaintext passwords only ever flow into the hasher; they are never
    logged or stored.
    """

    def __init__(
        self,
        customers: ICustomerService,
        hasher: PasswordHasher,
        tokens: TokenService,
    ):
        self._customers = customers
        self._hasher = hasher
        self._tokens = tokens

    async def register(self, request: RegisterRequest) -> AuthResponse:
        customer = await self._customers.create_customer(
            name=request.name,
            email=request.email,
            password=request.password,
        )
        logger.info("Registered customer %s", customer.id)
        return self._issue(customer)

    async def login(self, request: LoginRequest) -> AuthResponse:
        record = await self._customers.get_credentials(request.email)

        if record is None:
            # Same bcrypt cost as a real check, so timing doesn't leak existence
            await asyncio.to_thread(self._hasher.dummy_verify, request.password)
            logger.info("Login failed: unknown email")
            raise InvalidCredentialsError()

        valid = await asyncio.to_thread(
            self._hasher.verify, request.password, record.password_hash
        )
        if not valid:
            logger.info("Login failed for customer %s: wrong password", record.id)
            raise InvalidCredentialsError()

        logger.info("Customer %s logged in", record.id)
        return self._issue(record.to_public())

    async def authenticate(self, token: str) -> AuthenticatedUser:
        try:
            customer_id = self._tokens.verify(token)
        except TokenError as e:
            logger.debug("Rejected bearer token: %s", e.code)
            raise UnauthorizedError() from e

        customer = await self._customers.get(customer_id)
        if customer is None:
            logger.info("Rejected token for missing customer %s", customer_id)
            raise UnauthorizedError()

        return AuthenticatedUser(id=customer.id, email=customer.email, name=customer.name)

    def _issue(self, customer: Customer) -> AuthResponse:
        token = self._tokens.issue(customer.id, {"email": customer.email})
        return AuthResponse(customer=customer, access_token=token)
