"""
Authentication endpoints.

Both endpoints are public. Logout is client-side only: the server keeps no
session state and cannot revoke a token before it expires.
"""

from fastapi import APIRouter, Depends

from api.dependencies import get_auth_service
from api.models.errors import BAD_REQUEST, CONFLICT, UNAUTHORIZED

from .interfaces import IAuthService
from .models import AuthResponse, LoginRequest, RegisterRequest

router = APIRouter()


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=201,
    responses={**BAD_REQUEST, **CONFLICT},
)
async def register(
    request: RegisterRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Create a customer account.

    Returns the new customer (without password) and an access token.
    """
    return await service.register(request)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={**BAD_REQUEST, **UNAUTHORIZED},
)
async def login(
    request: LoginRequest,
    service: IAuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Log in with email and password.

    Any failure returns the same 401 "Invalid credentials" response.
    """
    return await service.login(request)
