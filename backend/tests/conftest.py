"""
Shared test fixtures and utilities.

This module provides common test infrastructure used across all test modules.
"""

import os

from tests.support import TEST_JWT_SECRET

# Must be set before the api package is imported: it builds the app at import.
os.environ["JWT_SECRET"] = TEST_JWT_SECRET

import pytest
from fastapi.testclient import TestClient

from api.app import create_app
from api.dependencies import (
    get_auth_service,
    get_customer_service,
    get_order_service,
    get_product_service,
    reset_container,
)
from modules.auth.passwords import PasswordHasher
from modules.auth.service import AuthService
from modules.auth.tokens import TokenService
from modules.customers.service import CustomerService
from modules.orders.service import OrderService
from modules.products.service import ProductService
from shared.config import get_settings
from shared.database import reset_client_cache
from tests.support import InMemoryStore, bearer, create_test_token


@pytest.fixture(autouse=True)
def reset_singletons():
    """Reset cached settings, services and DB client around each test."""
    get_settings.cache_clear()
    reset_container()
    reset_client_cache()
    yield
    get_settings.cache_clear()
    reset_container()
    reset_client_cache()


@pytest.fixture
def hasher() -> PasswordHasher:
    """Low-cost hasher so tests stay fast."""
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(secret=TEST_JWT_SECRET)


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def services(store, hasher, token_service) -> dict:
    """Real services over in-memory repositories."""
    customers = CustomerService(store.customers, hasher)
    return {
        "customers": customers,
        "auth": AuthService(customers=customers, hasher=hasher, tokens=token_service),
        "products": ProductService(store.products),
        "orders": OrderService(store.orders, products=store.products),
    }


@pytest.fixture
def app(services):
    """A fresh app wired to the in-memory services."""
    app = create_app()
    app.dependency_overrides[get_auth_service] = lambda: services["auth"]
    app.dependency_overrides[get_customer_service] = lambda: services["customers"]
    app.dependency_overrides[get_product_service] = lambda: services["products"]
    app.dependency_overrides[get_order_service] = lambda: services["orders"]
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    return TestClient(app)


@pytest.fixture
def register(client):
    """Register a customer over HTTP and return the response body."""

    def _register(name: str = "Ann", email: str = "ann@x.io", password: str = "secret1") -> dict:
        response = client.post(
            "/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _register


@pytest.fixture
def auth_token() -> str:
    """A valid token for customer 1 (the customer itself may not exist)."""
    return create_test_token(customer_id=1)


@pytest.fixture
def auth_headers(auth_token: str) -> dict[str, str]:
    """Create authorization headers with a valid token."""
    return bearer(auth_token)
