"""
Orders module exceptions.
"""

from decimal import Decimal

from shared.exceptions import ResourceNotFoundError, ValidationError


class OrderNotFoundError(ResourceNotFoundError):
    """Raised when an order is not found."""

    def __init__(self, order_id: int):
        super().__init__("Order", order_id)


class OrderTotalTooLargeError(ValidationError):
    """Raised when an order total does not fit the stored amount."""

    def __init__(self, max_total: Decimal):
        super().__init__(
            f"items: order total must not exceed {max_total}",
            code="ORDER_TOTAL_TOO_LARGE",
            details={"max_total": str(max_total)},
        )
