"""
Customer service implementation.

Owns the credential store invariants: emails are unique and the stored
password is always a bcrypt hash.
"""

import asyncio
import logging
from typing import Optional

from modules.auth.passwords import PasswordHasher

from .interfaces import ICustomerService
from .models import Customer, CustomerRecord, UpdateCustomerRequest
from .repository import CustomerRepository
from .exceptions import CustomerNotFoundError, EmailAlreadyExistsError

logger = logging.getLogger(__name__)


class CustomerService(ICustomerService):
    """Customer service with Supabase backend."""

    resource_name = "Customer"

    def __init__(self, repository: CustomerRepository, hasher: PasswordHasher):
        self._repository = repository
        self._hasher = hasher

    async def create_customer(self, name: str, email: str, password: str) -> Customer:
        if self._repository.get_by_email(email) is not None:
            raise EmailAlreadyExistsError(email)

        # bcrypt is CPU-bound; keep it off the event loop
        password_hash = await asyncio.to_thread(self._hasher.hash, password)
        record = self._repository.create(name=name, email=email, password_hash=password_hash)

        logger.info("Created customer %s", record.id)
        return record.to_public()

    async def list_customers(self) -> list[Customer]:
        return [record.to_public() for record in self._repository.list_all()]

    async def get(self, customer_id: int) -> Optional[Customer]:
        record = self._repository.get_by_id(customer_id)
        return record.to_public() if record else None

    async def get_credentials(self, email: str) -> Optional[CustomerRecord]:
        return self._repository.get_by_email(email)

    async def update_customer(
        self,
        customer_id: int,
        request: UpdateCustomerRequest,
    ) -> Customer:
        current = self._repository.get_by_id(customer_id)
        if current is None:
            raise CustomerNotFoundError(customer_id)

        changes = request.model_dump(exclude_unset=True, exclude_none=True)

        if "email" in changes and changes["email"] != current.email:
            if self._repository.get_by_email(changes["email"]) is not None:
                raise EmailAlreadyExistsError(changes["email"])

        if "password" in changes:
            changes["password_hash"] = await asyncio.to_thread(
                self._hasher.hash, changes.pop("password")
            )

        if not changes:
            return current.to_public()

        updated = self._repository.update(customer_id, changes)
        if updated is None:
            raise CustomerNotFoundError(customer_id)

        logger.info("Updated customer %s (%s)", customer_id, ", ".join(sorted(changes)))
        return updated.to_public()

    async def delete_customer(self, customer_id: int) -> None:
        if self._repository.get_by_id(customer_id) is None:
            raise CustomerNotFoundError(customer_id)
        self._repository.delete(customer_id)
        logger.info("Deleted customer %s", customer_id)
