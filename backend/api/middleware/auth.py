"""
JWT authentication guard and ownership dependency.

Routes opt in to authentication by depending on ``get_current_user``;
routes that don't stay public. Customer-owned resources are loaded through
``require_owned`` so that every owned route applies the same checks in the
same order:

    401 (no/invalid token) -> 404 (no such resource) -> 403 (not the owner)
"""

from typing import Any, Awaitable, Callable, Optional, Protocol

from fastapi import Depends, Path
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from shared.exceptions import ResourceNotFoundError
from shared.models import AuthenticatedUser
from modules.auth.interfaces import IAuthService
from modules.auth.ownership import Owned, assert_owner
from modules.auth.exceptions import UnauthorizedError

from ..dependencies import get_auth_service

# Bearer token extractor. auto_error=False so that a missing header and a
# non-Bearer scheme are rejected by us with the same body as a bad token.
bearer_scheme = HTTPBearer(auto_error=False)


class OwnedResourceService(Protocol):
    """A service that can load a customer-owned resource by ID."""

    resource_name: str

    async def get(self, resource_id: int) -> Optional[Owned]: ...


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth: IAuthService = Depends(get_auth_service),
) -> AuthenticatedUser:
    """
    Dependency that requires authentication.

    Use this for endpoints that require a logged-in customer.

    Usage:
        @router.get("/protected")
        async def protected_route(user: AuthenticatedUser = Depends(get_current_user)):
            return {"user_id": user.id}
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError()

    return await auth.authenticate(credentials.credentials)


def require_owned(
    get_service: Callable[[], Any],
    param: str,
) -> Callable[..., Awaitable[Any]]:
    """
    Build a dependency that loads a resource and checks the caller owns it.

    Args:
        get_service: FastAPI dependency returning an OwnedResourceService
        param: Name of the path parameter holding the resource ID

    Usage:
        owned_order = require_owned(get_order_service, "order_id")

        @router.get("/{order_id}")
        async def get_order(order: Order = Depends(owned_order)):
            return order
    """

    async def dependency(
        resource_id: int = Path(..., alias=param),
        user: AuthenticatedUser = Depends(get_current_user),
        service: OwnedResourceService = Depends(get_service),
    ) -> Any:
        resource = await service.get(resource_id)
        if resource is None:
            raise ResourceNotFoundError(service.resource_name, resource_id)
        assert_owner(user, resource, service.resource_name)
        return resource

    return dependency
