"""
Orders module data models.

An order belongs to the customer who placed it (``customer_id``). The
owner is taken from the authenticated identity at creation and no request
model exposes it, so it cannot be changed afterwards.
"""

from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Optional

from pydantic import EmailStr, Field, StringConstraints

from shared.models import ApiModel, Money
from modules.products.models import Product

RequiredText = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

# order_items.quantity is INTEGER and orders.total_amount is NUMERIC(10, 2)
MAX_ITEM_QUANTITY = 10_000
MAX_ORDER_TOTAL = Decimal("99999999.99")


class OrderStatus(str, Enum):
    """Order fulfilment status."""

    PENDING = "pending"
    PROCESSING = "processing"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"


class OrderItem(ApiModel):
    """A line of an order. ``price`` is the unit price when the order was placed."""

    id: int = Field(..., description="Order item ID")
    product_id: Optional[int] = Field(None, description="Product ID (null if the product was deleted)")
    product: Optional[Product] = Field(None, description="Product details")
    quantity: int = Field(..., ge=1, description="Quantity ordered")
    price: Money = Field(..., description="Unit price at time of order")


class Order(ApiModel):
    """A customer order with its items."""

    id: int = Field(..., description="Order ID")
    customer_id: Optional[int] = Field(None, description="Owning customer ID")
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    shipping_address: Optional[str] = None
    status: OrderStatus = OrderStatus.PENDING
    total_amount: Money = Field(..., description="Sum of price x quantity over all items")
    items: list[OrderItem] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @property
    def owner_id(self) -> Optional[int]:
        return self.customer_id


class OrderItemRequest(ApiModel):
    """One requested line of an order."""

    product_id: int = Field(..., ge=1, description="Product ID")
    quantity: int = Field(..., ge=1, le=MAX_ITEM_QUANTITY, description="Quantity ordered")


class CreateOrderRequest(ApiModel):
    """Body of POST /orders."""

    customer_name: RequiredText
    customer_email: EmailStr
    shipping_address: RequiredText
    items: list[OrderItemRequest] = Field(..., min_length=1)


class UpdateOrderRequest(ApiModel):
    """
    Body of PATCH /orders/{order_id}. All fields optional.

    Sending ``items`` replaces every line and recomputes the total.
    """

    customer_name: Optional[RequiredText] = None
    customer_email: Optional[EmailStr] = None
    shipping_address: Optional[RequiredText] = None
    items: Optional[list[OrderItemRequest]] = Field(None, min_length=1)
    status: Optional[OrderStatus] = None
