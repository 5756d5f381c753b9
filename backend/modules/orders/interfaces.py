"""
Orders module interface.

Ownership is checked by the API layer before any method that takes an
``order_id`` is called; the service itself trusts its caller.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import CreateOrderRequest, Order, UpdateOrderRequest


@runtime_checkable
class IOrderService(Protocol):
    """Interface for order operations."""

    resource_name: str

    async def create_order(self, customer_id: int, request: CreateOrderRequest) -> Order:
        """
        Place an order owned by ``customer_id``.

        Each item captures the current product price; the total is the sum
        of price x quantity.

        Raises:
            ProductNotFoundError: If any item references an unknown product
        """
        ...

    async def list_orders(self, customer_id: int) -> list[Order]:
        """List a customer's own orders, newest first."""
        ...

    async def get(self, order_id: int) -> Optional[Order]:
        """
        Get an order by ID regardless of owner.

        Returns:
            Order if found, None otherwise
        """
        ...

    async def update_order(self, order_id: int, request: UpdateOrderRequest) -> Order:
        """
        Update an order. Replacing items recomputes the total.

        Raises:
            OrderNotFoundError: If the order doesn't exist
            ProductNotFoundError: If a new item references an unknown product
        """
        ...

    async def delete_order(self, order_id: int) -> None:
        """
        Delete an order and its items.

        Raises:
            OrderNotFoundError: If the order doesn't exist
        """
        ...
