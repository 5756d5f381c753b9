"""
Product service implementation.
"""

import logging

from .interfaces import IProductService
from .models import CreateProductRequest, Product, UpdateProductRequest, price_to_db
from .repository import ProductRepository
from .exceptions import ProductNotFoundError

logger = logging.getLogger(__name__)


class ProductService(IProductService):
    """Product catalog service with Supabase backend."""

    def __init__(self, repository: ProductRepository):
        self._repository = repository

    async def create_product(self, request: CreateProductRequest) -> Product:
        product = self._repository.create({
            "name": request.name,
            "description": request.description,
            "price": price_to_db(request.price),
        })
        logger.info("Created product %s", product.id)
        return product

    async def list_products(self) -> list[Product]:
        return self._repository.list_all()

    async def get_product(self, product_id: int) -> Product:
        product = self._repository.get_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def update_product(self, product_id: int, request: UpdateProductRequest) -> Product:
        changes = request.model_dump(exclude_unset=True, exclude_none=True)
        if "price" in changes:
            changes["price"] = price_to_db(changes["price"])

        if not changes:
            return await self.get_product(product_id)

        product = self._repository.update(product_id, changes)
        if product is None:
            raise ProductNotFoundError(product_id)
        return product

    async def delete_product(self, product_id: int) -> None:
        await self.get_product(product_id)
        self._repository.delete(product_id)
        logger.info("Deleted product %s", product_id)
