"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, EmailStr, Field, PlainSerializer
from pydantic.alias_generators import to_camel


# Monetary amounts are stored as NUMERIC(10, 2) and rendered as JSON numbers.
Money = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]


class ApiModel(BaseModel):
    """
    Base for models that cross the HTTP boundary.

    Fields are snake_case in Python and camelCase on the wire
    (``created_at`` <-> ``createdAt``). Both spellings are accepted on input;
    FastAPI renders responses by alias.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated customer in the system.

    Populated by the request guard after the bearer token has been
    verified *and* the customer record has been re-read from the database,
    then made available to route handlers via dependency injection.
    """

    id: int = Field(..., description="Customer ID")
    email: EmailStr = Field(..., description="Customer's email address")
    name: str = Field(..., description="Customer's display name")

    model_config = {
        "frozen": True,  # Make immutable for safety
        "extra": "ignore",
    }
