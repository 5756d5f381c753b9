"""
Products module exceptions.
"""

from shared.exceptions import ResourceNotFoundError


class ProductNotFoundError(ResourceNotFoundError):
    """Raised when a product is not found."""

    def __init__(self, product_id: int):
        super().__init__("Product", product_id)
