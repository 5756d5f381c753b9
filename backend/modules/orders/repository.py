"""
Order repository for database access.

Encapsulates all Supabase queries and data mapping for the order tables:
- orders
- order_items (each embedding its product)
"""

import logging
from decimal import Decimal
from typing import Any, Optional

from postgrest.exceptions import APIError

from shared.repository import BaseRepository, utcnow_iso
from modules.products.models import Product
from .exceptions import OrderNotFoundError
from .models import Order, OrderItem, OrderStatus

ORDER_COLUMNS = "*, order_items(*, product:products(*))"

logger = logging.getLogger(__name__)


class OrderRepository(BaseRepository[Order]):
    """
    Repository for order data access.

    Note: This repository does NOT perform authorization checks.
    The API layer verifies ownership before any read or write by ID.
    """

    table = "orders"
    items_table = "order_items"

    # -------------------------------------------------------------------------
    # Order CRUD operations
    # -------------------------------------------------------------------------

    def create(self, data: dict[str, Any], items: list[dict[str, Any]]) -> Order:
        """
        Insert an order and its items.

        PostgREST has no multi-statement transactions, so if the items
        insert fails the order row is removed again before re-raising.
        """
        result = self._db.table(self.table).insert(data).execute()
        order_id = int(result.data[0]["id"])

        try:
            self._insert_items(order_id, items)
        except APIError:
            self._db.table(self.table).delete().eq("id", order_id).execute()
            raise

        order = self.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    def get_by_id(self, order_id: int) -> Optional[Order]:
        row = self._select_one("id", order_id, columns=ORDER_COLUMNS)
        return self._map_to_order(row) if row else None

    def list_by_customer(self, customer_id: int) -> list[Order]:
        """A customer's orders, newest first."""
        result = (
            self._db.table(self.table)
            .select(ORDER_COLUMNS)
            .eq("customer_id", customer_id)
            .order("created_at", desc=True)
            .execute()
        )
        return [self._map_to_order(row) for row in result.data]

    def update(
        self,
        order_id: int,
        data: dict[str, Any],
        items: Optional[list[dict[str, Any]]] = None,
    ) -> Optional[Order]:
        """
        Update order columns and optionally replace all of its items.

        New items are inserted before the order row changes and the old items
        are deleted last. If a later step fails, the new items are removed
        and the previous column values written back before re-raising.

        Returns:
            The updated order, or None if no row matched.
        """
        current = self._select_one("id", order_id, columns=ORDER_COLUMNS)
        if current is None:
            return None

        data = {**data, "updated_at": utcnow_iso()}
        previous = {column: current[column] for column in data if column in current}
        old_item_ids = [int(item["id"]) for item in current.get("order_items") or []]

        new_item_ids: list[int] = []
        if items is not None:
            new_item_ids = self._insert_items(order_id, items)

        row_updated = False
        try:
            result = self._db.table(self.table).update(data).eq("id", order_id).execute()
            row_updated = bool(result.data)
            if row_updated and items is not None and old_item_ids:
                self._db.table(self.items_table).delete().in_("id", old_item_ids).execute()
        except APIError:
            self._rollback_update(order_id, previous if row_updated else None, new_item_ids)
            raise

        if not row_updated:
            # Deleted concurrently
            self._rollback_update(order_id, None, new_item_ids)
            return None

        return self.get_by_id(order_id)

    def delete(self, order_id: int) -> None:
        """Delete an order. Items are removed via ON DELETE CASCADE."""
        self._db.table(self.table).delete().eq("id", order_id).execute()

    # -------------------------------------------------------------------------
    # Private helpers
    # -------------------------------------------------------------------------

    def _insert_items(self, order_id: int, items: list[dict[str, Any]]) -> list[int]:
        """Insert item rows and return their new IDs."""
        if not items:
            return []
        rows = [{**item, "order_id": order_id} for item in items]
        result = self._db.table(self.items_table).insert(rows).execute()
        return [int(row["id"]) for row in result.data]

    def _rollback_update(
        self,
        order_id: int,
        previous: Optional[dict[str, Any]],
        new_item_ids: list[int],
    ) -> None:
        if new_item_ids:
            self._db.table(self.items_table).delete().in_("id", new_item_ids).execute()
        if previous:
            self._db.table(self.table).update(previous).eq("id", order_id).execute()
        logger.warning("Rolled back partial update of order %s", order_id)

    def _map_to_order(self, data: dict[str, Any]) -> Order:
        """Map database row (with embedded items) to Order model."""
        items = sorted(
            (self._map_to_item(item) for item in data.get("order_items") or []),
            key=lambda item: item.id,
        )
        customer_id = data.get("customer_id")

        return Order(
            id=int(data["id"]),
            customer_id=int(customer_id) if customer_id is not None else None,
            customer_name=data.get("customer_name"),
            customer_email=data.get("customer_email"),
            shipping_address=data.get("shipping_address"),
            status=OrderStatus(data.get("status") or OrderStatus.PENDING.value),
            total_amount=Decimal(str(data.get("total_amount", 0))),
            items=items,
            created_at=data["created_at"],
            updated_at=data["updated_at"],
        )

    def _map_to_item(self, data: dict[str, Any]) -> OrderItem:
        product_data = data.get("product")
        product = None
        if product_data:
            product = Product(
                id=int(product_data["id"]),
                name=product_data["name"],
                description=product_data["description"],
                price=Decimal(str(product_data["price"])),
                created_at=product_data["created_at"],
                updated_at=product_data["updated_at"],
            )

        return OrderItem(
            id=int(data["id"]),
            product_id=data.get("product_id"),
            product=product,
            quantity=data["quantity"],
            price=Decimal(str(data["price"])),
        )
