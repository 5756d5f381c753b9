"""
Password hashing.

Thin wrapper around bcrypt. Hashes are self-describing
(``$2b$<cost>$<salt><digest>``), so the cost factor can be raised later
without invalidating stored hashes.
"""

import bcrypt

from .exceptions import PasswordTooLongError

# bcrypt only looks at the first 72 bytes of its input.
MAX_PASSWORD_BYTES = 72


class PasswordHasher:
    """Salted, adaptive password hashing with a tunable cost factor."""

    def __init__(self, rounds: int = 10):
        self._rounds = rounds
        self._dummy_hash: bytes | None = None

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, password: str) -> str:
        """
        Hash a plaintext password.

        Raises:
            ValueError: If the password is empty
            PasswordTooLongError: If the password exceeds 72 bytes
        """
        if not password:
            raise ValueError("password_blank")
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise PasswordTooLongError(MAX_PASSWORD_BYTES)
        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self._rounds)).decode("ascii")

    def verify(self, password: str, password_hash: str) -> bool:
        """
        Check a plaintext password against a stored hash.

        Fails closed: a blank input, an over-long password or a malformed
        hash all return False instead of raising.
        """
        if not password or not password_hash:
            return False
        encoded = password.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, password_hash.encode("ascii"))
        except (ValueError, UnicodeEncodeError):
            return False

    def dummy_verify(self, password: str) -> bool:
        """
        Burn one verification against a throwaway hash.

        Lets login spend the same time whether or not the email exists.
        Always returns False.
        """
        if self._dummy_hash is None:
            self._dummy_hash = bcrypt.hashpw(b"dummy-password", bcrypt.gensalt(rounds=self._rounds))
        encoded = (password or "").encode("utf-8")[:MAX_PASSWORD_BYTES]
        bcrypt.checkpw(encoded, self._dummy_hash)
        return False
