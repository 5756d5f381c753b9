"""
Test helpers: tokens and in-memory repositories.

The in-memory repositories expose the same methods as the Supabase-backed
ones, so the real services can run end-to-end over HTTP without a database.
"""

import itertools
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Any, Optional

import jwt

from modules.customers.exceptions import EmailAlreadyExistsError
from modules.customers.models import CustomerRecord
from modules.orders.models import Order, OrderItem, OrderStatus
from modules.products.models import Product

# Test JWT secret (only for testing)
TEST_JWT_SECRET = "test-secret-key-for-testing-only"

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


def create_test_token(
    customer_id: int = 1,
    email: str = "test@example.com",
    expired: bool = False,
    secret: str = TEST_JWT_SECRET,
) -> str:
    """
    Create a signed access token for tests.

    Args:
        customer_id: Customer ID for the ``sub`` claim
        email: Email claim
        expired: If True, the token expired an hour ago
        secret: Signing secret

    Returns:
        JWT token string
    """
    now = datetime.now(timezone.utc)
    exp = now - timedelta(hours=1) if expired else now + timedelta(hours=1)
    payload = {
        "sub": str(customer_id),
        "email": email,
        "iat": int(now.timestamp()),
        "exp": int(exp.timestamp()),
    }
    return jwt.encode(payload, secret, algorithm="HS256")


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


class _Clock:
    """Monotonic fake timestamps so "newest first" ordering is deterministic."""

    def __init__(self):
        self._ticks = itertools.count()

    def now(self) -> datetime:
        return BASE_TIME + timedelta(seconds=next(self._ticks))


class InMemoryCustomerRepository:
    def __init__(self, clock: Optional[_Clock] = None):
        self._clock = clock or _Clock()
        self._ids = itertools.count(1)
        self.rows: dict[int, CustomerRecord] = {}

    def create(self, name: str, email: str, password_hash: str) -> CustomerRecord:
        if any(r.email == email for r in self.rows.values()):
            raise EmailAlreadyExistsError(email)
        now = self._clock.now()
        record = CustomerRecord(
            id=next(self._ids),
            name=name,
            email=email,
            password_hash=password_hash,
            created_at=now,
            updated_at=now,
        )
        self.rows[record.id] = record
        return record

    def get_by_id(self, customer_id: int) -> Optional[CustomerRecord]:
        return self.rows.get(customer_id)

    def get_by_email(self, email: str) -> Optional[CustomerRecord]:
        return next((r for r in self.rows.values() if r.email == email), None)

    def list_all(self) -> list[CustomerRecord]:
        return sorted(self.rows.values(), key=lambda r: r.created_at, reverse=True)

    def update(self, customer_id: int, data: dict[str, Any]) -> Optional[CustomerRecord]:
        current = self.rows.get(customer_id)
        if current is None:
            return None
        if "email" in data and any(
            r.email == data["email"] and r.id != customer_id for r in self.rows.values()
        ):
            raise EmailAlreadyExistsError(data["email"])
        updated = current.model_copy(update={**data, "updated_at": self._clock.now()})
        self.rows[customer_id] = updated
        return updated

    def delete(self, customer_id: int) -> None:
        self.rows.pop(customer_id, None)


class InMemoryProductRepository:
    def __init__(self, clock: Optional[_Clock] = None):
        self._clock = clock or _Clock()
        self._ids = itertools.count(1)
        self.rows: dict[int, Product] = {}

    def create(self, data: dict[str, Any]) -> Product:
        now = self._clock.now()
        product = Product(
            id=next(self._ids),
            name=data["name"],
            description=data["description"],
            price=Decimal(str(data["price"])),
            created_at=now,
            updated_at=now,
        )
        self.rows[product.id] = product
        return product

    def get_by_id(self, product_id: int) -> Optional[Product]:
        return self.rows.get(product_id)

    def get_many(self, product_ids: list[int]) -> dict[int, Product]:
        return {pid: self.rows[pid] for pid in product_ids if pid in self.rows}

    def list_all(self) -> list[Product]:
        return sorted(self.rows.values(), key=lambda p: p.created_at, reverse=True)

    def update(self, product_id: int, data: dict[str, Any]) -> Optional[Product]:
        current = self.rows.get(product_id)
        if current is None:
            return None
        if "price" in data:
            data = {**data, "price": Decimal(str(data["price"]))}
        updated = current.model_copy(update={**data, "updated_at": self._clock.now()})
        self.rows[product_id] = updated
        return updated

    def delete(self, product_id: int) -> None:
        self.rows.pop(product_id, None)


class InMemoryOrderRepository:
    def __init__(self, products: InMemoryProductRepository, clock: Optional[_Clock] = None):
        self._products = products
        self._clock = clock or _Clock()
        self._ids = itertools.count(1)
        self._item_ids = itertools.count(1)
        self.rows: dict[int, Order] = {}

    def create(self, data: dict[str, Any], items: list[dict[str, Any]]) -> Order:
        now = self._clock.now()
        order = Order(
            id=next(self._ids),
            customer_id=data["customer_id"],
            customer_name=data.get("customer_name"),
            customer_email=data.get("customer_email"),
            shipping_address=data.get("shipping_address"),
            status=OrderStatus(data.get("status", "pending")),
            total_amount=Decimal(str(data.get("total_amount", 0))),
            items=self._build_items(items),
            created_at=now,
            updated_at=now,
        )
        self.rows[order.id] = order
        return order

    def get_by_id(self, order_id: int) -> Optional[Order]:
        return self.rows.get(order_id)

    def list_by_customer(self, customer_id: int) -> list[Order]:
        orders = [o for o in self.rows.values() if o.customer_id == customer_id]
        return sorted(orders, key=lambda o: o.created_at, reverse=True)

    def update(
        self,
        order_id: int,
        data: dict[str, Any],
        items: Optional[list[dict[str, Any]]] = None,
    ) -> Optional[Order]:
        current = self.rows.get(order_id)
        if current is None:
            return None
        changes: dict[str, Any] = {**data, "updated_at": self._clock.now()}
        if "status" in changes:
            changes["status"] = OrderStatus(changes["status"])
        if "total_amount" in changes:
            changes["total_amount"] = Decimal(str(changes["total_amount"]))
        if items is not None:
            changes["items"] = self._build_items(items)
        updated = current.model_copy(update=changes)
        self.rows[order_id] = updated
        return updated

    def delete(self, order_id: int) -> None:
        self.rows.pop(order_id, None)

    def _build_items(self, items: list[dict[str, Any]]) -> list[OrderItem]:
        return [
            OrderItem(
                id=next(self._item_ids),
                product_id=item["product_id"],
                product=self._products.get_by_id(item["product_id"]),
                quantity=item["quantity"],
                price=Decimal(str(item["price"])),
            )
            for item in items
        ]


class InMemoryStore:
    """One set of repositories sharing a clock, like one database."""

    def __init__(self):
        clock = _Clock()
        self.customers = InMemoryCustomerRepository(clock)
        self.products = InMemoryProductRepository(clock)
        self.orders = InMemoryOrderRepository(self.products, clock)
