"""
Customer repository for database access.

Encapsulates all Supabase queries and data mapping for the ``customers``
table. The UNIQUE constraint on ``customers.email`` is the final word on
duplicates; a violation is surfaced as EmailAlreadyExistsError.
"""

from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.repository import BaseRepository, is_unique_violation, utcnow_iso
from .exceptions import EmailAlreadyExistsError
from .models import CustomerRecord


class CustomerRepository(BaseRepository[CustomerRecord]):
    """
    Repository for customer data access.

    Note: This repository does NOT perform authorization checks.
    """

    table = "customers"

    def create(self, name: str, email: str, password_hash: str) -> CustomerRecord:
        """
        Insert a new customer row.

        Raises:
            EmailAlreadyExistsError: If the email is already taken
        """
        data = {"name": name, "email": email, "password_hash": password_hash}
        try:
            result = self._db.table(self.table).insert(data).execute()
        except APIError as e:
            if is_unique_violation(e):
                raise EmailAlreadyExistsError(email) from e
            raise
        return self._map_to_customer(result.data[0])

    def get_by_id(self, customer_id: int) -> Optional[CustomerRecord]:
        row = self._select_one("id", customer_id)
        return self._map_to_customer(row) if row else None

    def get_by_email(self, email: str) -> Optional[CustomerRecord]:
        row = self._select_one("email", email)
        return self._map_to_customer(row) if row else None

    def list_all(self) -> list[CustomerRecord]:
        """All customers, newest first."""
        result = (
            self._db.table(self.table)
            .select("*")
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_customer(row) for row in result.data]

    def update(self, customer_id: int, data: dict[str, Any]) -> Optional[CustomerRecord]:
        """
        Update the given columns of a customer.

        Returns:
            The updated record, or None if no row matched.

        Raises:
            EmailAlreadyExistsError: If the new email is already taken
        """
        data = {**data, "updated_at": utcnow_iso()}
        try:
            result = self._db.table(self.table).update(data).eq("id", customer_id).execute()
        except APIError as e:
            if is_unique_violation(e):
                raise EmailAlreadyExistsError(str(data.get("email", ""))) from e
            raise
        if not result.data:
            return None
        return self._map_to_customer(result.data[0])

    def delete(self, customer_id: int) -> None:
        """Hard-delete a customer. Their orders keep a NULL owner."""
        self._db.table(self.table).delete().eq("id", customer_id).execute()

    def _map_to_customer(self, data: dict[str, Any]) -> CustomerRecord:
        """Map database row to CustomerRecord model."""
        return CustomerRecord(
            id=int(data["id"]),
            name=data["name"],
            email=data["email"],
            password_hash=data["password_hash"],
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
