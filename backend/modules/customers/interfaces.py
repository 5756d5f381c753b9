"""
Customers module interface.

The auth module and the API layer depend on ICustomerService, not on the
Supabase-backed implementation.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import Customer, CustomerRecord, UpdateCustomerRequest


@runtime_checkable
class ICustomerService(Protocol):
    """Interface for customer account operations."""

    resource_name: str

    async def create_customer(self, name: str, email: str, password: str) -> Customer:
        """
        Create a customer with a freshly hashed password.

        Raises:
            EmailAlreadyExistsError: If the email is already registered
        """
        ...

    async def list_customers(self) -> list[Customer]:
        """List all customers, newest first."""
        ...

    async def get(self, customer_id: int) -> Optional[Customer]:
        """
        Get a customer by ID.

        Returns:
            Customer if found, None otherwise
        """
        ...

    async def get_credentials(self, email: str) -> Optional[CustomerRecord]:
        """
        Look up a customer by email, including the password hash.

        Only the auth module should call this.
        """
        ...

    async def update_customer(
        self,
        customer_id: int,
        request: UpdateCustomerRequest,
    ) -> Customer:
        """
        Update name, email and/or password.

        Raises:
            CustomerNotFoundError: If the customer doesn't exist
            EmailAlreadyExistsError: If the new email is taken
        """
        ...

    async def delete_customer(self, customer_id: int) -> None:
        """
        Hard-delete a customer.

        Raises:
            CustomerNotFoundError: If the customer doesn't exist
        """
        ...
