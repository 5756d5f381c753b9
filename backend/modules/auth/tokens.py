"""
Bearer token issuing and verification.

Tokens are HS256 JWTs carrying the customer ID in ``sub`` plus ``iat`` and
``exp``. There is no revocation list: expiry is the only way a token stops
being valid.
"""

from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt

from shared.exceptions import ConfigurationError

from .exceptions import ExpiredTokenError, MalformedTokenError, TokenSignatureError
from .models import TokenPayload

RESERVED_CLAIMS = frozenset({"sub", "iat", "exp"})


class TokenService:
    """
    Issues and verifies signed, time-limited access tokens.

    The signing secret is handed in once at construction (normally from
    Settings) and never read from the environment afterwards.
    """

    def __init__(
        self,
        secret: str,
        expires_in: timedelta = timedelta(hours=24),
        algorithm: str = "HS256",
        min_secret_length: int = 0,
    ):
        if not secret or not secret.strip():
            raise ConfigurationError("JWT signing secret is not configured", code="JWT_SECRET_MISSING")
        if len(secret) < min_secret_length:
            raise ConfigurationError(
                f"JWT signing secret must be at least {min_secret_length} characters",
                code="JWT_SECRET_TOO_SHORT",
            )
        if expires_in.total_seconds() <= 0:
            raise ConfigurationError("Token lifetime must be positive", code="JWT_TTL_INVALID")

        self._secret = secret
        self._expires_in = expires_in
        self._algorithm = algorithm

    @property
    def expires_in(self) -> timedelta:
        return self._expires_in

    def issue(
        self,
        subject_id: int,
        claims: Optional[dict[str, Any]] = None,
        now: Optional[datetime] = None,
    ) -> str:
        """
        Create a signed access token for a customer.

        Args:
            subject_id: Customer ID stored in the ``sub`` claim
            claims: Extra claims (e.g. email); cannot override sub/iat/exp
            now: Issue time, defaults to the current UTC time

        Returns:
            Encoded JWT string
        """
        issued_at = now or datetime.now(timezone.utc)
        payload: dict[str, Any] = {
            k: v for k, v in (claims or {}).items() if k not in RESERVED_CLAIMS
        }
        payload.update(
            sub=str(subject_id),
            iat=int(issued_at.timestamp()),
            exp=int((issued_at + self._expires_in).timestamp()),
        )
        return jwt.encode(payload, self._secret, algorithm=self._algorithm)

    def decode(self, token: str) -> TokenPayload:
        """
        Validate a token and return its claims.

        Raises:
            MalformedTokenError: Not a JWT, or required claims missing/invalid
            TokenSignatureError: Signed with a different secret
            ExpiredTokenError: Past its ``exp``
        """
        if not token:
            raise MalformedTokenError("Token is empty")

        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self._algorithm],
                options={"require": ["sub", "iat", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            raise ExpiredTokenError()
        except jwt.InvalidSignatureError:
            raise TokenSignatureError()
        except jwt.InvalidTokenError as e:
            raise MalformedTokenError(str(e))

        try:
            return TokenPayload(**payload)
        except ValueError as e:
            raise MalformedTokenError(f"Invalid token claims: {e}")

    def verify(self, token: str) -> int:
        """Validate a token and return the customer ID it was issued for."""
        return self.decode(token).sub
