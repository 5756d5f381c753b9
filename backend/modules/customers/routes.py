"""
Customer API endpoints.

All endpoints require authentication. Customers are created through
/auth/register; reads and writes by ID are limited to the customer's own
profile.
"""

from fastapi import APIRouter, Depends, Response

from api.dependencies import get_customer_service
from api.middleware.auth import get_current_user, require_owned
from api.models.errors import BAD_REQUEST, CONFLICT, FORBIDDEN, NOT_FOUND, UNAUTHORIZED
from shared.models import AuthenticatedUser

from .interfaces import ICustomerService
from .models import Customer, UpdateCustomerRequest
from .exceptions import CustomerNotFoundError

router = APIRouter(dependencies=[Depends(get_current_user)], responses=UNAUTHORIZED)

owned_customer = require_owned(get_customer_service, "customer_id")


@router.get("", response_model=list[Customer])
async def list_customers(
    service: ICustomerService = Depends(get_customer_service),
) -> list[Customer]:
    """List all customers, newest first."""
    return await service.list_customers()


@router.get("/me", response_model=Customer)
async def get_my_profile(
    user: AuthenticatedUser = Depends(get_current_user),
    service: ICustomerService = Depends(get_customer_service),
) -> Customer:
    """Get the current customer's profile."""
    customer = await service.get(user.id)
    if customer is None:
        raise CustomerNotFoundError(user.id)
    return customer


@router.get("/{customer_id}", response_model=Customer, responses={**FORBIDDEN, **NOT_FOUND})
async def get_customer(customer: Customer = Depends(owned_customer)) -> Customer:
    """Get a customer profile. Only your own."""
    return customer


@router.patch(
    "/{customer_id}",
    response_model=Customer,
    responses={**BAD_REQUEST, **FORBIDDEN, **NOT_FOUND, **CONFLICT},
)
async def update_customer(
    request: UpdateCustomerRequest,
    customer: Customer = Depends(owned_customer),
    service: ICustomerService = Depends(get_customer_service),
) -> Customer:
    """
    Update your own name, email or password.

    Changing the email to one that is already registered returns 409.
    """
    return await service.update_customer(customer.id, request)


@router.delete("/{customer_id}", status_code=204, responses={**FORBIDDEN, **NOT_FOUND})
async def delete_customer(
    customer: Customer = Depends(owned_customer),
    service: ICustomerService = Depends(get_customer_service),
) -> Response:
    """
    Delete your own account.

    Tokens already issued keep verifying until they expire, but the guard
    rejects them because the account no longer exists.
    """
    await service.delete_customer(customer.id)
    return Response(status_code=204)
