from unittest.mock import patch
from fastapi import status

from app.core.errors import GENERIC_ERROR_MESSAGE


class TestLoginEndpoint:
    """Test the login endpoint."""

    def test_login_success(self, test_client, users):
        username, password = users["admin"]
        response = test_client.post(
            "/api/users", json={"username": username, "password": password}
        )

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["username"] == "admin"
        assert data["email"] == "admin@bookstore.test"
        assert data["roles"] == ["Administrator"]
        assert "password" not in data
        assert "password_hash" not in data

    def test_login_customer_roles(self, test_client, users):
        username, password = users["customer"]
        response = test_client.post(
            "/api/users", json={"username": username, "password": password}
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["roles"] == ["Customer"]

    def test_login_wrong_password(self, test_client, users):
        """Test that a failed login discloses no user data."""
        response = test_client.post(
            "/api/users", json={"username": "admin", "password": "not-it"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"username": "admin"}

    def test_login_unknown_user(self, test_client, users):
        response = test_client.post(
            "/api/users", json={"username": "nobody", "password": "whatever"}
        )

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"username": "nobody"}

    def test_login_invalid_payload(self, test_client):
        response = test_client.post("/api/users", json={"username": "admin"})
        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_login_needs_no_credentials(self, test_client, users):
        """Test that login is reachable anonymously."""
        response = test_client.post(
            "/api/users", json={"username": "admin", "password": "nope"}
        )
        assert "WWW-Authenticate" not in response.headers

    def test_login_storage_error(self, test_client):
        with patch(
            "app.api.routes.users.IdentityService.password_sign_in",
            side_effect=RuntimeError("identity store down"),
        ):
            response = test_client.post(
                "/api/users", json={"username": "admin", "password": "x"}
            )

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == GENERIC_ERROR_MESSAGE
