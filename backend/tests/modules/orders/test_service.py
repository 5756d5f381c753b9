"""Tests for the order service."""

from decimal import Decimal

import pytest

from modules.orders.exceptions import OrderNotFoundError, OrderTotalTooLargeError
from modules.orders.models import CreateOrderRequest, OrderStatus, UpdateOrderRequest
from modules.orders.service import OrderService
from modules.products.exceptions import ProductNotFoundError
from tests.support import InMemoryStore


@pytest.fixture
def store():
    store = InMemoryStore()
    store.products.create({"name": "Widget", "description": "A widget", "price": "10.00"})
    store.products.create({"name": "Gadget", "description": "A gadget", "price": "2.50"})
    return store


@pytest.fixture
def service(store):
    return OrderService(store.orders, products=store.products)


def order_request(items=None) -> CreateOrderRequest:
    return CreateOrderRequest(
        customer_name="Ann",
        customer_email="ann@x.io",
        shipping_address="1 Main St",
        items=items or [{"product_id": 1, "quantity": 2}, {"product_id": 2, "quantity": 3}],
    )


class TestCreateOrder:
    @pytest.mark.asyncio
    async def test_total_and_captured_prices(self, service):
        order = await service.create_order(7, order_request())

        assert order.customer_id == 7
        assert order.status == OrderStatus.PENDING
        assert order.total_amount == Decimal("27.50")
        assert [(i.product_id, i.quantity, i.price) for i in order.items] == [
            (1, 2, Decimal("10.00")),
            (2, 3, Decimal("2.50")),
        ]

    @pytest.mark.asyncio
    async def test_unknown_product_writes_nothing(self, service, store):
        with pytest.raises(ProductNotFoundError):
            await service.create_order(7, order_request([{"product_id": 99, "quantity": 1}]))
        assert store.orders.rows == {}

    @pytest.mark.asyncio
    async def test_total_over_column_limit_writes_nothing(self, service, store):
        luxury = store.products.create({"name": "Yacht", "description": "A yacht", "price": "99999999.99"})

        with pytest.raises(OrderTotalTooLargeError):
            await service.create_order(7, order_request([{"product_id": luxury.id, "quantity": 2}]))
        assert store.orders.rows == {}

    @pytest.mark.asyncio
    async def test_total_at_column_limit(self, service, store):
        luxury = store.products.create({"name": "Yacht", "description": "A yacht", "price": "99999999.99"})

        order = await service.create_order(7, order_request([{"product_id": luxury.id, "quantity": 1}]))

        assert order.total_amount == Decimal("99999999.99")

    @pytest.mark.asyncio
    async def test_price_change_does_not_affect_existing_order(self, service, store):
        order = await service.create_order(7, order_request())
        store.products.update(1, {"price": "99.00"})

        reread = await service.get(order.id)

        assert reread.items[0].price == Decimal("10.00")
        assert reread.total_amount == Decimal("27.50")


class TestReads:
    @pytest.mark.asyncio
    async def test_list_only_own_orders_newest_first(self, service):
        first = await service.create_order(7, order_request())
        await service.create_order(8, order_request())
        second = await service.create_order(7, order_request())

        assert [o.id for o in await service.list_orders(7)] == [second.id, first.id]

    @pytest.mark.asyncio
    async def test_get_missing(self, service):
        assert await service.get(99) is None


class TestUpdateOrder:
    @pytest.mark.asyncio
    async def test_update_status(self, service):
        order = await service.create_order(7, order_request())
        updated = await service.update_order(order.id, UpdateOrderRequest(status="shipped"))
        assert updated.status == OrderStatus.SHIPPED
        assert updated.total_amount == order.total_amount

    @pytest.mark.asyncio
    async def test_replace_items_recomputes_total(self, service):
        order = await service.create_order(7, order_request())
        updated = await service.update_order(
            order.id,
            UpdateOrderRequest(items=[{"product_id": 2, "quantity": 1}]),
        )
        assert updated.total_amount == Decimal("2.50")
        assert len(updated.items) == 1

    @pytest.mark.asyncio
    async def test_owner_not_changed(self, service):
        order = await service.create_order(7, order_request())
        updated = await service.update_order(order.id, UpdateOrderRequest(customer_name="Someone"))
        assert updated.customer_id == 7

    @pytest.mark.asyncio
    async def test_update_missing(self, service):
        with pytest.raises(OrderNotFoundError):
            await service.update_order(99, UpdateOrderRequest(status="shipped"))

    @pytest.mark.asyncio
    async def test_replace_items_over_limit_keeps_order(self, service, store):
        order = await service.create_order(7, order_request())
        luxury = store.products.create({"name": "Yacht", "description": "A yacht", "price": "99999999.99"})

        with pytest.raises(OrderTotalTooLargeError):
            await service.update_order(
                order.id,
                UpdateOrderRequest(items=[{"product_id": luxury.id, "quantity": 3}]),
            )

        reread = await service.get(order.id)
        assert reread.total_amount == Decimal("27.50")
        assert len(reread.items) == 2


class TestDeleteOrder:
    @pytest.mark.asyncio
    async def test_delete(self, service):
        order = await service.create_order(7, order_request())
        await service.delete_order(order.id)
        assert await service.get(order.id) is None

    @pytest.mark.asyncio
    async def test_delete_missing(self, service):
        with pytest.raises(OrderNotFoundError):
            await service.delete_order(99)
