"""
Products module interface.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import CreateProductRequest, Product, UpdateProductRequest


@runtime_checkable
class IProductService(Protocol):
    """
    Interface for catalog operations.

    Reads are public; writes require an authenticated caller but no
    ownership, since products have no owner.
    """

    async def create_product(self, request: CreateProductRequest) -> Product:
        """Add a product to the catalog."""
        ...

    async def list_products(self) -> list[Product]:
        """List all products, newest first."""
        ...

    async def get_product(self, product_id: int) -> Product:
        """
        Get a product by ID.

        Raises:
            ProductNotFoundError: If the product doesn't exist
        """
        ...

    async def update_product(self, product_id: int, request: UpdateProductRequest) -> Product:
        """
        Update some fields of a product.

        Raises:
            ProductNotFoundError: If the product doesn't exist
        """
        ...

    async def delete_product(self, product_id: int) -> None:
        """
        Remove a product from the catalog.

        Raises:
            ProductNotFoundError: If the product doesn't exist
        """
        ...
