"""Tests for the product service."""

from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from modules.products.exceptions import ProductNotFoundError
from modules.products.models import CreateProductRequest, UpdateProductRequest
from modules.products.service import ProductService
from tests.support import InMemoryProductRepository


@pytest.fixture
def repository():
    return InMemoryProductRepository()


@pytest.fixture
def service(repository):
    return ProductService(repository)


def widget(**overrides) -> CreateProductRequest:
    data = {"name": "Widget", "description": "A widget", "price": Decimal("9.99")}
    data.update(overrides)
    return CreateProductRequest(**data)


class TestProductService:
    @pytest.mark.asyncio
    async def test_create(self, service):
        product = await service.create_product(widget())
        assert product.name == "Widget"
        assert product.price == Decimal("9.99")

    @pytest.mark.asyncio
    async def test_create_sends_price_as_string(self):
        repository = MagicMock()
        await ProductService(repository).create_product(widget(price=Decimal("5")))

        repository.create.assert_called_once_with(
            {"name": "Widget", "description": "A widget", "price": "5.00"}
        )

    @pytest.mark.asyncio
    async def test_get_missing(self, service):
        with pytest.raises(ProductNotFoundError):
            await service.get_product(1)

    @pytest.mark.asyncio
    async def test_list_newest_first(self, service):
        await service.create_product(widget(name="First"))
        await service.create_product(widget(name="Second"))
        assert [p.name for p in await service.list_products()] == ["Second", "First"]

    @pytest.mark.asyncio
    async def test_update_price(self, service):
        product = await service.create_product(widget())
        updated = await service.update_product(product.id, UpdateProductRequest(price=Decimal("12.50")))
        assert updated.price == Decimal("12.50")
        assert updated.name == "Widget"

    @pytest.mark.asyncio
    async def test_empty_update_returns_current(self, service):
        product = await service.create_product(widget())
        assert await service.update_product(product.id, UpdateProductRequest()) == product

    @pytest.mark.asyncio
    async def test_update_missing(self, service):
        with pytest.raises(ProductNotFoundError):
            await service.update_product(5, UpdateProductRequest(name="X"))

    @pytest.mark.asyncio
    async def test_delete(self, service):
        product = await service.create_product(widget())
        await service.delete_product(product.id)
        with pytest.raises(ProductNotFoundError):
            await service.get_product(product.id)

    @pytest.mark.asyncio
    async def test_delete_missing(self, service):
        with pytest.raises(ProductNotFoundError):
            await service.delete_product(5)
