"""Integration tests for authentication endpoints."""

import pytest


class TestRegister:
    def test_register_returns_token_and_user(
        self,
        test_client,
        registered_user_data,
        api_v1_prefix,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json=registered_user_data,
        )

        assert response.status_code == 201
        data = response.json()
        assert data["access_token"]
        assert data["token_type"] == "bearer"
        assert data["expires_in"] > 0
        assert data["user"]["email"] == "rider@example.com"
        assert data["user"]["role"] == "USER"
        assert data["user"]["first_name"] == "Ann"
        assert "password_hash" not in data["user"]

    def test_register_normalizes_email(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": "Rider@Example.COM", "password": "SecurePassword123!"},
        )

        assert response.status_code == 201
        assert response.json()["user"]["email"] == "rider@example.com"

    def test_duplicate_email_is_conflict(
        self,
        test_client,
        registered_user_data,
        auth_headers,
        api_v1_prefix,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={**registered_user_data, "email": "RIDER@example.com"},
        )

        assert response.status_code == 409
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "DUPLICATE_EMAIL"
        assert body["statusCode"] == 409

    def test_short_password_is_validation_error(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": "short@example.com", "password": "abc"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["error"] == "VALIDATION_ERROR"
        fields = [error["field"] for error in body["details"]["errors"]]
        assert "body.password" in fields

    def test_invalid_email_is_validation_error(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/register",
            json={"email": "not-an-email", "password": "SecurePassword123!"},
        )

        assert response.status_code == 400
        fields = [error["field"] for error in response.json()["details"]["errors"]]
        assert "body.email" in fields


class TestLogin:
    def test_login_with_registered_account(
        self,
        test_client,
        registered_user_data,
        auth_headers,
        api_v1_prefix,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={
                "email": registered_user_data["email"],
                "password": registered_user_data["password"],
            },
        )

        assert response.status_code == 200
        assert response.json()["user"]["email"] == registered_user_data["email"]

    def test_wrong_password_is_unauthorized(
        self,
        test_client,
        registered_user_data,
        auth_headers,
        api_v1_prefix,
    ):
        response = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": registered_user_data["email"], "password": "wrong-password"},
        )

        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_CREDENTIALS"
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_unknown_email_is_unauthorized(self, test_client, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": "nobody@example.com", "password": "whatever123"},
        )

        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_CREDENTIALS"

    def test_admin_login_carries_role(self, test_client, admin_user, api_v1_prefix):
        response = test_client.post(
            f"{api_v1_prefix}/auth/login",
            json={"email": "admin@skateshop.com", "password": "password123"},
        )

        assert response.status_code == 200
        assert response.json()["user"]["role"] == "ADMIN"


class TestMe:
    def test_me_returns_current_user(self, test_client, auth_headers, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/auth/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["email"] == "rider@example.com"

    def test_missing_token_is_unauthorized(self, test_client, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/auth/me")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"
        body = response.json()
        assert body["error"] == "AUTHENTICATION_REQUIRED"
        assert body["path"] == f"{api_v1_prefix}/auth/me"
        assert body["timestamp"]

    @pytest.mark.parametrize("token", ["garbage", "a.b.c"])
    def test_invalid_token_is_unauthorized(self, test_client, api_v1_prefix, token):
        response = test_client.get(
            f"{api_v1_prefix}/auth/me",
            headers={"Authorization": f"Bearer {token}"},
        )

        assert response.status_code == 401
        assert response.json()["error"] == "INVALID_TOKEN"
        assert response.headers["WWW-Authenticate"] == "Bearer"


class TestUnversionedEndpoints:
    def test_health(self, test_client):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_unknown_route_uses_error_envelope(self, test_client, api_v1_prefix):
        response = test_client.get(f"{api_v1_prefix}/does-not-exist")

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error"] == "ENTITY_NOT_FOUND"
