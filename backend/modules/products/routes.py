"""
Product API endpoints.

Listing and reading products is public and ignores any Authorization
header. Creating, updating and deleting require a logged-in customer.
"""

from fastapi import APIRouter, Depends, Response

from api.dependencies import get_product_service
from api.middleware.auth import get_current_user
from api.models.errors import BAD_REQUEST, NOT_FOUND, UNAUTHORIZED

from .interfaces import IProductService
from .models import CreateProductRequest, Product, UpdateProductRequest

router = APIRouter()


@router.get("", response_model=list[Product])
async def list_products(
    service: IProductService = Depends(get_product_service),
) -> list[Product]:
    """List all products, newest first."""
    return await service.list_products()


@router.get("/{product_id}", response_model=Product, responses=NOT_FOUND)
async def get_product(
    product_id: int,
    service: IProductService = Depends(get_product_service),
) -> Product:
    """Get a single product."""
    return await service.get_product(product_id)


@router.post(
    "",
    response_model=Product,
    status_code=201,
    dependencies=[Depends(get_current_user)],
    responses={**BAD_REQUEST, **UNAUTHORIZED},
)
async def create_product(
    request: CreateProductRequest,
    service: IProductService = Depends(get_product_service),
) -> Product:
    """Add a product to the catalog."""
    return await service.create_product(request)


@router.patch(
    "/{product_id}",
    response_model=Product,
    dependencies=[Depends(get_current_user)],
    responses={**BAD_REQUEST, **UNAUTHORIZED, **NOT_FOUND},
)
async def update_product(
    product_id: int,
    request: UpdateProductRequest,
    service: IProductService = Depends(get_product_service),
) -> Product:
    """Update some fields of a product."""
    return await service.update_product(product_id, request)


@router.delete(
    "/{product_id}",
    status_code=204,
    dependencies=[Depends(get_current_user)],
    responses={**UNAUTHORIZED, **NOT_FOUND},
)
async def delete_product(
    product_id: int,
    service: IProductService = Depends(get_product_service),
) -> Response:
    """Remove a product from the catalog."""
    await service.delete_product(product_id)
    return Response(status_code=204)
