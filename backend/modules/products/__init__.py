"""
Products module.

Public product catalog. Reads are open to everyone, writes need a login.
"""

from .interfaces import IProductService
from .models import Product, CreateProductRequest, UpdateProductRequest
from .exceptions import ProductNotFoundError

__all__ = [
    "IProductService",
    "Product",
    "CreateProductRequest",
    "UpdateProductRequest",
    "ProductNotFoundError",
]
