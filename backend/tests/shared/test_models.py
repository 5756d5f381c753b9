"""
Tests for shared models.
"""

import json
from decimal import Decimal

import pytest
from pydantic import BaseModel, ValidationError

from shared.models import ApiModel, AuthenticatedUser, Money


class TestAuthenticatedUser:
    """Tests for the AuthenticatedUser model in shared."""

    def test_create(self):
        user = AuthenticatedUser(id=1, email="ann@x.io", name="Ann")
        assert user.id == 1
        assert user.email == "ann@x.io"
        assert user.name == "Ann"

    def test_email_validation(self):
        """Should validate email format."""
        with pytest.raises(ValidationError):
            AuthenticatedUser(id=1, email="not-an-email", name="Ann")

    def test_immutability(self):
        """Should be frozen/immutable."""
        user = AuthenticatedUser(id=1, email="ann@x.io", name="Ann")
        with pytest.raises(ValidationError):
            user.id = 2

    def test_extra_fields_ignored(self):
        user = AuthenticatedUser(id=1, email="ann@x.io", name="Ann", role="admin")  # type: ignore
        assert not hasattr(user, "role")


class _Line(ApiModel):
    unit_price: Money
    product_id: int


class TestApiModel:
    def test_accepts_both_spellings(self):
        assert _Line(unitPrice=Decimal("1.50"), productId=3).product_id == 3
        assert _Line(unit_price=Decimal("1.50"), product_id=3).product_id == 3

    def test_dumps_camel_case_by_alias(self):
        data = _Line(unit_price=Decimal("1.50"), product_id=3).model_dump(by_alias=True)
        assert set(data) == {"unitPrice", "productId"}


class TestMoney:
    def test_json_renders_number(self):
        class Priced(BaseModel):
            amount: Money

        payload = json.loads(Priced(amount=Decimal("19.99")).model_dump_json())
        assert payload == {"amount": 19.99}

    def test_python_dump_keeps_decimal(self):
        class Priced(BaseModel):
            amount: Money

        assert Priced(amount=Decimal("19.99")).model_dump()["amount"] == Decimal("19.99")
