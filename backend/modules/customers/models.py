"""
Customers module data models.

A customer is both the shop's account record and the credential record
used by the auth module. ``CustomerRecord`` carries the password hash and
never leaves the service layer; everything returned to clients is a plain
``Customer``.
"""

from datetime import datetime
from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, EmailStr, Field, StringConstraints

from shared.models import ApiModel


def normalize_email(value: Any) -> Any:
    """Trim and lower-case an email before validation."""
    if isinstance(value, str):
        return value.strip().lower()
    return value


NormalizedEmail = Annotated[EmailStr, BeforeValidator(normalize_email)]
DisplayName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
Password = Annotated[str, StringConstraints(min_length=6, max_length=72)]


class Customer(ApiModel):
    """Public view of a customer account."""

    id: int = Field(..., description="Customer ID")
    name: str = Field(..., description="Customer full name")
    email: str = Field(..., description="Customer email address")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")

    @property
    def owner_id(self) -> int:
        """A customer profile is owned by the customer itself."""
        return self.id


class CustomerRecord(Customer):
    """Customer row including the stored password hash."""

    password_hash: str = Field(..., exclude=True, repr=False)

    def to_public(self) -> Customer:
        return Customer(
            id=self.id,
            name=self.name,
            email=self.email,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )


class UpdateCustomerRequest(ApiModel):
    """Body of PATCH /customers/{customer_id}. All fields optional."""

    name: Optional[DisplayName] = None
    email: Optional[NormalizedEmail] = None
    password: Optional[Password] = None
