"""
Base repository class for database access.

Provides a common abstraction layer for all repositories, encapsulating
Supabase client access and providing shared utilities for data operations.
"""

from datetime import datetime, timezone
from typing import Any, Optional, TypeVar, Generic

from postgrest.exceptions import APIError
from supabase import Client


T = TypeVar("T")

# Postgres SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def is_unique_violation(error: APIError) -> bool:
    """Return True if a PostgREST error was caused by a UNIQUE constraint."""
    return getattr(error, "code", None) == UNIQUE_VIOLATION


def utcnow_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class BaseRepository(Generic[T]):
    """
    Base class for all repositories.

    Provides common functionality for database operations:
    - Supabase client access via self._db
    - Generic type parameter for model type hints

    Subclasses should implement domain-specific data access methods
    and handle dict-to-Pydantic model mapping internally.

    Repositories never check ownership. The service and API layers
    are responsible for authorization.

    Example:
        class ProductRepository(BaseRepository[Product]):
            table = "products"

            def get_by_id(self, product_id: int) -> Optional[Product]:
                row = self._select_one("id", product_id)
                return self._map(row) if row else None
    """

    table: str = ""

    def __init__(self, db: Client) -> None:
        """
        Initialize the repository with a Supabase client.

        Args:
            db: Supabase client instance for database operations.
        """
        self._db = db

    def _select_one(
        self,
        column: str,
        value: Any,
        columns: str = "*",
    ) -> Optional[dict[str, Any]]:
        """Fetch the first row where ``column == value``, or None."""
        result = (
            self._db.table(self.table)
            .select(columns)
            .eq(column, value)
            .limit(1)
            .execute()
        )
        if not result.data:
            return None
        return result.data[0]
