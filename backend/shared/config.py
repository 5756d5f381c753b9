"""
Centralized configuration for the Shop backend.

All settings are loaded from environment variables with sensible defaults.
The JWT signing secret is the only required value: the application refuses
to start without it.
"""

import re
from datetime import timedelta
from functools import lru_cache
from typing import Any

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_DURATION_RE = re.compile(r"^\s*(\d+)\s*([smhd]?)\s*$", re.IGNORECASE)
_DURATION_UNITS = {"": "seconds", "s": "seconds", "m": "minutes", "h": "hours", "d": "days"}


def parse_duration(value: Any) -> timedelta:
    """
    Parse a token lifetime.

    Accepts a timedelta, a number of seconds, or a string such as
    "3600", "90s", "30m", "24h" or "7d".
    """
    if isinstance(value, timedelta):
        return value
    if isinstance(value, (int, float)):
        return timedelta(seconds=value)

    match = _DURATION_RE.match(str(value))
    if not match:
        raise ValueError(f"Invalid duration: {value!r}")
    amount, unit = match.groups()
    return timedelta(**{_DURATION_UNITS[unit.lower()]: int(amount)})


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Shop API"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 3001
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Authentication
    jwt_secret: str = Field(..., repr=False)
    jwt_secret_min_length: int = 0  # 0 = only reject a blank secret
    jwt_algorithm: str = "HS256"
    jwt_expires_in: timedelta = timedelta(hours=24)
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    # Supabase / Postgres
    supabase_url: str = ""
    supabase_service_role_key: str = Field(default="", repr=False)
    supabase_db_url: str = Field(default="", repr=False)

    @field_validator("jwt_expires_in", mode="before")
    @classmethod
    def _parse_expires_in(cls, value: Any) -> timedelta:
        ttl = parse_duration(value)
        if ttl.total_seconds() <= 0:
            raise ValueError("JWT_EXPIRES_IN must be positive")
        return ttl

    @model_validator(mode="after")
    def _check_jwt_secret(self) -> "Settings":
        secret = self.jwt_secret.strip()
        if not secret:
            raise ValueError("JWT_SECRET must be set")
        if len(secret) < self.jwt_secret_min_length:
            raise ValueError(
                f"JWT_SECRET must be at least {self.jwt_secret_min_length} characters"
            )
        return self


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
