"""
Products module data models.
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated, Optional

from pydantic import Field, StringConstraints

from shared.models import ApiModel, Money

ProductName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=255)]
ProductDescription = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Price = Annotated[Money, Field(ge=0, max_digits=10, decimal_places=2)]


class Product(ApiModel):
    """A catalog product."""

    id: int = Field(..., description="Product ID")
    name: str = Field(..., description="Product name")
    description: str = Field(..., description="Product description")
    price: Money = Field(..., description="Product price")
    created_at: datetime = Field(..., description="Creation timestamp")
    updated_at: datetime = Field(..., description="Last update timestamp")


class CreateProductRequest(ApiModel):
    """Body of POST /products."""

    name: ProductName = Field(..., description="Product name")
    description: ProductDescription = Field(..., description="Product description")
    price: Price = Field(..., description="Product price")


class UpdateProductRequest(ApiModel):
    """Body of PATCH /products/{product_id}. All fields optional."""

    name: Optional[ProductName] = None
    description: Optional[ProductDescription] = None
    price: Optional[Price] = None


def price_to_db(price: Decimal) -> str:
    """NUMERIC values are sent as strings to avoid float rounding."""
    return str(price.quantize(Decimal("0.01")))
