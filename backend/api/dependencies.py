"""
Dependency injection setup for FastAPI.

This module provides the "container" that wires together all module
implementations. Each module exposes its service through an interface,
and this file creates the concrete implementations.
"""

from typing import TYPE_CHECKING

from shared.config import Settings, get_settings

# Type checking imports for interfaces (avoids circular imports)
if TYPE_CHECKING:
    from modules.auth.interfaces import IAuthService
    from modules.auth.passwords import PasswordHasher
    from modules.auth.tokens import TokenService
    from modules.customers.interfaces import ICustomerService
    from modules.products.interfaces import IProductService
    from modules.products.repository import ProductRepository
    from modules.orders.interfaces import IOrderService


class ServiceContainer:
    """
    Container for all service instances.

    Services are created lazily on first access and cached as singletons
    within the container. Use reset() to clear them for testing.
    """

    def __init__(self, settings: Settings | None = None) -> None:
        self._settings = settings
        self._password_hasher: "PasswordHasher | None" = None
        self._token_service: "TokenService | None" = None
        self._auth_service: "IAuthService | None" = None
        self._customer_service: "ICustomerService | None" = None
        self._product_repository: "ProductRepository | None" = None
        self._product_service: "IProductService | None" = None
        self._order_service: "IOrderService | None" = None

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def password_hasher(self) -> "PasswordHasher":
        """Get the password hasher."""
        if self._password_hasher is None:
            from modules.auth.passwords import PasswordHasher
            self._password_hasher = PasswordHasher(rounds=self.settings.bcrypt_rounds)
        return self._password_hasher

    @property
    def tokens(self) -> "TokenService":
        """Get the token service, configured once from settings."""
        if self._token_service is None:
            from modules.auth.tokens import TokenService
            settings = self.settings
            self._token_service = TokenService(
                secret=settings.jwt_secret,
                expires_in=settings.jwt_expires_in,
                algorithm=settings.jwt_algorithm,
                min_secret_length=settings.jwt_secret_min_length,
            )
        return self._token_service

    @property
    def customers(self) -> "ICustomerService":
        """Get the customer service instance."""
        if self._customer_service is None:
            from modules.customers.repository import CustomerRepository
            from modules.customers.service import CustomerService
            from shared.database import get_supabase_client
            self._customer_service = CustomerService(
                repository=CustomerRepository(get_supabase_client()),
                hasher=self.password_hasher,
            )
        return self._customer_service

    @property
    def auth(self) -> "IAuthService":
        """Get the auth service instance."""
        if self._auth_service is None:
            from modules.auth.service import AuthService
            self._auth_service = AuthService(
                customers=self.customers,
                hasher=self.password_hasher,
                tokens=self.tokens,
            )
        return self._auth_service

    @property
    def product_repository(self) -> "ProductRepository":
        """Get the product repository (shared by products and orders)."""
        if self._product_repository is None:
            from modules.products.repository import ProductRepository
            from shared.database import get_supabase_client
            self._product_repository = ProductRepository(get_supabase_client())
        return self._product_repository

    @property
    def products(self) -> "IProductService":
        """Get the product service instance."""
        if self._product_service is None:
            from modules.products.service import ProductService
            self._product_service = ProductService(self.product_repository)
        return self._product_service

    @property
    def orders(self) -> "IOrderService":
        """Get the order service instance."""
        if self._order_service is None:
            from modules.orders.repository import OrderRepository
            from modules.orders.service import OrderService
            from shared.database import get_supabase_client
            self._order_service = OrderService(
                repository=OrderRepository(get_supabase_client()),
                products=self.product_repository,
            )
        return self._order_service

    def reset(self) -> None:
        """
        Reset all cached services.

        This is primarily for testing - allows tests to get fresh
        service instances with different mock dependencies.
        """
        self._password_hasher = None
        self._token_service = None
        self._auth_service = None
        self._customer_service = None
        self._product_repository = None
        self._product_service = None
        self._order_service = None


# Module-level container singleton
_container: ServiceContainer | None = None


def get_container() -> ServiceContainer:
    """Get the singleton service container."""
    global _container
    if _container is None:
        _container = ServiceContainer()
    return _container


def reset_container() -> None:
    """
    Reset the service container.

    The next call to get_container() creates a fresh container.
    Primarily used for testing.
    """
    global _container
    _container = None


# FastAPI dependency functions
# These are the functions that should be used in route Depends() calls


def get_auth_service() -> "IAuthService":
    """FastAPI dependency for auth service."""
    return get_container().auth


def get_customer_service() -> "ICustomerService":
    """FastAPI dependency for customer service."""
    return get_container().customers


def get_product_service() -> "IProductService":
    """FastAPI dependency for product service."""
    return get_container().products


def get_order_service() -> "IOrderService":
    """FastAPI dependency for order service."""
    return get_container().orders
