"""
Order service implementation.
"""

import logging
from decimal import Decimal
from typing import Any, Optional

from modules.products.exceptions import ProductNotFoundError
from modules.products.models import price_to_db
from modules.products.repository import ProductRepository

from .interfaces import IOrderService
from .models import (
    MAX_ORDER_TOTAL,
    CreateOrderRequest,
    Order,
    OrderItemRequest,
    OrderStatus,
    UpdateOrderRequest,
)
from .repository import OrderRepository
from .exceptions import OrderNotFoundError, OrderTotalTooLargeError

logger = logging.getLogger(__name__)


class OrderService(IOrderService):
    """Order service with Supabase backend."""

    resource_name = "Order"

    def __init__(self, repository: OrderRepository, products: ProductRepository):
        self._repository = repository
        self._products = products

    async def create_order(self, customer_id: int, request: CreateOrderRequest) -> Order:
        # Price every line before writing anything
        items, total = self._price_items(request.items)

        order = self._repository.create(
            {
                "customer_id": customer_id,
                "customer_name": request.customer_name,
                "customer_email": request.customer_email,
                "shipping_address": request.shipping_address,
                "status": OrderStatus.PENDING.value,
                "total_amount": price_to_db(total),
            },
            items,
        )
        logger.info("Customer %s placed order %s", customer_id, order.id)
        return order

    async def list_orders(self, customer_id: int) -> list[Order]:
        return self._repository.list_by_customer(customer_id)

    async def get(self, order_id: int) -> Optional[Order]:
        return self._repository.get_by_id(order_id)

    async def update_order(self, order_id: int, request: UpdateOrderRequest) -> Order:
        changes = request.model_dump(mode="json", exclude_unset=True, exclude_none=True, exclude={"items"})

        items = None
        if request.items is not None:
            items, total = self._price_items(request.items)
            changes["total_amount"] = price_to_db(total)

        order = self._repository.update(order_id, changes, items)
        if order is None:
            raise OrderNotFoundError(order_id)
        return order

    async def delete_order(self, order_id: int) -> None:
        if self._repository.get_by_id(order_id) is None:
            raise OrderNotFoundError(order_id)
        self._repository.delete(order_id)
        logger.info("Deleted order %s", order_id)

    def _price_items(
        self,
        requested: list[OrderItemRequest],
    ) -> tuple[list[dict[str, Any]], Decimal]:
        """Resolve products and build item rows plus the order total."""
        products = self._products.get_many([item.product_id for item in requested])

        rows: list[dict[str, Any]] = []
        total = Decimal("0")
        for item in requested:
            product = products.get(item.product_id)
            if product is None:
                raise ProductNotFoundError(item.product_id)
            rows.append({
                "product_id": product.id,
                "quantity": item.quantity,
                "price": price_to_db(product.price),
            })
            total += product.price * item.quantity

        if total > MAX_ORDER_TOTAL:
            raise OrderTotalTooLargeError(MAX_ORDER_TOTAL)

        return rows, total
