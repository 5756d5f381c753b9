"""
Ownership checks for customer-owned resources.

Any model exposing an ``owner_id`` property can be guarded with
``assert_owner``. The API layer applies it through one dependency factory
(``api.middleware.auth.require_owned``) so every owned route goes through the
same code path.
"""

import logging
from typing import Protocol, runtime_checkable

from shared.models import AuthenticatedUser

from .exceptions import NotOwnerError

logger = logging.getLogger(__name__)


@runtime_checkable
class Owned(Protocol):
    """A resource that belongs to exactly one customer."""

    @property
    def owner_id(self) -> int | None: ...


def owns(user: AuthenticatedUser, resource: Owned) -> bool:
    """True if ``user`` is the owner of ``resource``."""
    owner_id = resource.owner_id
    return owner_id is not None and owner_id == user.id


def assert_owner(user: AuthenticatedUser, resource: Owned, resource_name: str = "Resource") -> None:
    """
    Raise NotOwnerError unless ``user`` owns ``resource``.

    Raises:
        NotOwnerError: The caller is authenticated but not the owner (403)
    """
    if owns(user, resource):
        return
    resource_id = getattr(resource, "id", None)
    logger.warning(
        "Customer %s denied access to %s %s",
        user.id,
        resource_name.lower(),
        resource_id,
    )
    raise NotOwnerError(resource_name, resource_id, user.id)
