"""
Tests for the JWT request guard and the ownership dependency.
"""

import pytest
from unittest.mock import AsyncMock
from fastapi.security import HTTPAuthorizationCredentials

from api.middleware.auth import get_current_user
from modules.auth.exceptions import UnauthorizedError
from shared.models import AuthenticatedUser
from tests.support import bearer, create_test_token

UNAUTHORIZED_BODY = {"statusCode": 401, "message": "Unauthorized", "error": "Unauthorized"}


class TestGetCurrentUser:
    @pytest.mark.asyncio
    async def test_missing_credentials(self):
        """No Authorization header never reaches the auth service."""
        auth = AsyncMock()
        with pytest.raises(UnauthorizedError):
            await get_current_user(credentials=None, auth=auth)
        auth.authenticate.assert_not_called()

    @pytest.mark.asyncio
    async def test_delegates_to_auth_service(self):
        user = AuthenticatedUser(id=1, email="ann@x.io", name="Ann")
        auth = AsyncMock()
        auth.authenticate.return_value = user
        credentials = HTTPAuthorizationCredentials(scheme="Bearer", credentials="abc")

        assert await get_current_user(credentials=credentials, auth=auth) is user
        auth.authenticate.assert_awaited_once_with("abc")


class TestProtectedRoutes:
    """Every way of failing authentication gives the same response."""

    def _assert_unauthorized(self, response):
        assert response.status_code == 401
        assert response.json() == UNAUTHORIZED_BODY
        assert response.headers["www-authenticate"] == "Bearer"

    def test_missing_auth_header(self, client):
        self._assert_unauthorized(client.get("/orders"))

    def test_non_bearer_scheme(self, client):
        response = client.get("/orders", headers={"Authorization": "Basic YW5uOnNlY3JldA=="})
        self._assert_unauthorized(response)

    def test_garbage_token(self, client):
        self._assert_unauthorized(client.get("/orders", headers=bearer("not-a-jwt")))

    def test_expired_token(self, client, register):
        ann = register()
        token = create_test_token(customer_id=ann["customer"]["id"], expired=True)
        self._assert_unauthorized(client.get("/orders", headers=bearer(token)))

    def test_token_signed_with_other_secret(self, client, register):
        ann = register()
        token = create_test_token(customer_id=ann["customer"]["id"], secret="some-other-secret")
        self._assert_unauthorized(client.get("/orders", headers=bearer(token)))

    def test_token_for_unknown_customer(self, client):
        """A well-signed token for an account that doesn't exist is rejected."""
        self._assert_unauthorized(client.get("/orders", headers=bearer(create_test_token(999))))

    def test_token_of_deleted_customer(self, client, register):
        ann = register()
        headers = bearer(ann["access_token"])
        assert client.delete(f"/customers/{ann['customer']['id']}", headers=headers).status_code == 204

        self._assert_unauthorized(client.get("/customers/me", headers=headers))

    def test_valid_token(self, client, register):
        ann = register()
        response = client.get("/customers/me", headers=bearer(ann["access_token"]))
        assert response.status_code == 200
        assert response.json()["email"] == "ann@x.io"


class TestOwnershipOrder:
    """Authentication is checked first, then existence, then ownership."""

    def test_unauthenticated_beats_not_found(self, client):
        response = client.get("/orders/12345")
        assert response.status_code == 401

    def test_not_found_for_missing_resource(self, client, register):
        ann = register()
        response = client.get("/orders/12345", headers=bearer(ann["access_token"]))
        assert response.status_code == 404
        assert response.json() == {
            "statusCode": 404,
            "message": "Order with ID 12345 not found",
            "error": "Not Found",
        }

    def test_forbidden_for_other_customers_profile(self, client, register):
        ann = register()
        bob = register(name="Bob", email="bob@x.io")
        response = client.get(
            f"/customers/{ann['customer']['id']}",
            headers=bearer(bob["access_token"]),
        )
        assert response.status_code == 403
        assert response.json()["error"] == "Forbidden"

    def test_non_integer_id_is_bad_request(self, client, register):
        ann = register()
        response = client.get("/orders/abc", headers=bearer(ann["access_token"]))
        assert response.status_code == 400
