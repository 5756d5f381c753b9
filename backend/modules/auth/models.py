"""
Authentication module data models.

Request models are the validation boundary: anything that reaches the
service layer has already been checked here.
"""

from typing import Optional
from pydantic import BaseModel, Field

from modules.customers.models import Customer, DisplayName, NormalizedEmail, Password


class RegisterRequest(BaseModel):
    """Body of POST /auth/register."""

    name: DisplayName = Field(..., description="Customer full name")
    email: NormalizedEmail = Field(..., description="Customer email address")
    password: Password = Field(..., description="Password (6 to 72 characters)")


class LoginRequest(BaseModel):
    """Body of POST /auth/login."""

    email: NormalizedEmail = Field(..., description="Customer email address")
    password: str = Field(..., min_length=1, description="Customer password")


class AuthResponse(BaseModel):
    """
    Returned by register and login.

    ``customer`` is the public view of the account; it never carries the
    password hash.
    """

    customer: Customer
    access_token: str


class TokenPayload(BaseModel):
    """Decoded access token claims."""

    model_config = {"extra": "ignore"}

    sub: int = Field(..., description="Customer ID")
    email: Optional[str] = Field(None, description="Customer email at issue time")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")
