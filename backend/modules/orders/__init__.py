"""
Orders module.

Customer-owned orders. Every read or write by ID is ownership-checked.

Public API:
- IOrderService: Interface for order operations
- Order, OrderItem, OrderStatus: Order data
- CreateOrderRequest, UpdateOrderRequest: Request bodies
- OrderNotFoundError, OrderTotalTooLargeError
"""

from .interfaces import IOrderService
from .models import (
    Order,
    OrderItem,
    OrderStatus,
    CreateOrderRequest,
    UpdateOrderRequest,
)
from .exceptions import OrderNotFoundError, OrderTotalTooLargeError

__all__ = [
    # Interface
    "IOrderService",
    # Models
    "Order",
    "OrderItem",
    "OrderStatus",
    "CreateOrderRequest",
    "UpdateOrderRequest",
    # Exceptions
    "OrderNotFoundError",
    "OrderTotalTooLargeError",
]
