"""
Service information endpoint.
"""

from fastapi import APIRouter
from pydantic import BaseModel

from shared.config import get_settings

router = APIRouter()


class ServiceInfo(BaseModel):
    """Root endpoint response."""

    name: str
    version: str
    status: str
    endpoints: dict
    message: str


@router.get("/", response_model=ServiceInfo)
async def get_info() -> ServiceInfo:
    """Describe the API and where to find things."""
    settings = get_settings()
    docs = "/api/docs" if settings.debug else None
    return ServiceInfo(
        name=settings.app_name,
        version=settings.app_version,
        status="running",
        endpoints={
            "documentation": docs,
            "products": "/products",
            "orders": "/orders",
            "customers": "/customers",
            "auth": {
                "login": "/auth/login",
                "register": "/auth/register",
            },
        },
        message=(
            f"Visit {docs} for complete API documentation"
            if docs
            else "API documentation is disabled (set DEBUG=true to enable)"
        ),
    )
