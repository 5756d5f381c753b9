"""
Product repository for database access.

Encapsulates all Supabase queries and data mapping for the ``products`` table.
"""

from decimal import Decimal
from typing import Any, Optional

from shared.repository import BaseRepository, utcnow_iso
from .models import Product


class ProductRepository(BaseRepository[Product]):
    """Repository for product data access."""

    table = "products"

    def create(self, data: dict[str, Any]) -> Product:
        result = self._db.table(self.table).insert(data).execute()
        return self._map_to_product(result.data[0])

    def get_by_id(self, product_id: int) -> Optional[Product]:
        row = self._select_one("id", product_id)
        return self._map_to_product(row) if row else None

    def get_many(self, product_ids: list[int]) -> dict[int, Product]:
        """Fetch several products at once, keyed by ID. Missing IDs are absent."""
        if not product_ids:
            return {}
        result = (
            self._db.table(self.table)
            .select("*")
            .in_("id", sorted(set(product_ids)))
            .execute()
        )
        products = [self._map_to_product(row) for row in result.data]
        return {p.id: p for p in products}

    def list_all(self) -> list[Product]:
        """All products, newest first."""
        result = (
            self._db.table(self.table)
            .select("*")
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_product(row) for row in result.data]

    def update(self, product_id: int, data: dict[str, Any]) -> Optional[Product]:
        data = {**data, "updated_at": utcnow_iso()}
        result = self._db.table(self.table).update(data).eq("id", product_id).execute()
        if not result.data:
            return None
        return self._map_to_product(result.data[0])

    def delete(self, product_id: int) -> None:
        self._db.table(self.table).delete().eq("id", product_id).execute()

    def _map_to_product(self, data: dict[str, Any]) -> Product:
        """Map database row to Product model."""
        return Product(
            id=int(data["id"]),
            name=data["name"],
            description=data["description"],
            price=Decimal(str(data["price"])),
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )
