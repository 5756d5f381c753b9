"""
Order API endpoints.

All endpoints require authentication. A customer only ever sees and
changes their own orders; another customer's order ID returns 403.
"""

from fastapi import APIRouter, Depends, Response

from api.dependencies import get_order_service
from api.middleware.auth import get_current_user, require_owned
from api.models.errors import BAD_REQUEST, FORBIDDEN, NOT_FOUND, UNAUTHORIZED
from shared.models import AuthenticatedUser

from .interfaces import IOrderService
from .models import CreateOrderRequest, Order, UpdateOrderRequest

router = APIRouter(dependencies=[Depends(get_current_user)], responses=UNAUTHORIZED)

owned_order = require_owned(get_order_service, "order_id")


@router.post("", response_model=Order, status_code=201, responses={**BAD_REQUEST, **NOT_FOUND})
async def create_order(
    request: CreateOrderRequest,
    user: AuthenticatedUser = Depends(get_current_user),
    service: IOrderService = Depends(get_order_service),
) -> Order:
    """
    Place an order.

    The order belongs to the caller. Item prices are copied from the
    products at the time of ordering.
    """
    return await service.create_order(user.id, request)


@router.get("", response_model=list[Order])
async def list_orders(
    user: AuthenticatedUser = Depends(get_current_user),
    service: IOrderService = Depends(get_order_service),
) -> list[Order]:
    """List your own orders, newest first."""
    return await service.list_orders(user.id)


@router.get("/{order_id}", response_model=Order, responses={**FORBIDDEN, **NOT_FOUND})
async def get_order(order: Order = Depends(owned_order)) -> Order:
    """Get one of your orders with all items."""
    return order


@router.patch(
    "/{order_id}",
    response_model=Order,
    responses={**BAD_REQUEST, **FORBIDDEN, **NOT_FOUND},
)
async def update_order(
    request: UpdateOrderRequest,
    order: Order = Depends(owned_order),
    service: IOrderService = Depends(get_order_service),
) -> Order:
    """Update one of your orders (shipping details, items or status)."""
    return await service.update_order(order.id, request)


@router.delete("/{order_id}", status_code=204, responses={**FORBIDDEN, **NOT_FOUND})
async def delete_order(
    order: Order = Depends(owned_order),
    service: IOrderService = Depends(get_order_service),
) -> Response:
    """Delete one of your orders."""
    await service.delete_order(order.id)
    return Response(status_code=204)
