"""Integration tests for SimpleJWT authentication.

Validates:
  - /health is public (plain Django view, no DRF).
  - Protected DRF endpoints return 401 without a token or with a bad one.
  - A manager can obtain a token with its email and password and use it.
"""

import pytest

pytestmark = pytest.mark.integration

ME_URL = "/api/v1/managers/me/"


class TestPublicEndpoints:
    def test_health_is_public(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"


class TestProtectedEndpoints:
    def test_no_token_returns_401(self, api_client):
        response = api_client.get(ME_URL)
        assert response.status_code == 401

    def test_invalid_token_returns_401(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Bearer invalid.token.here")
        response = api_client.get(ME_URL)
        assert response.status_code == 401

    def test_malformed_auth_header_returns_401(self, api_client):
        api_client.credentials(HTTP_AUTHORIZATION="Token some-token")
        response = api_client.get(ME_URL)
        assert response.status_code == 401

    def test_401_includes_www_authenticate_header(self, api_client):
        response = api_client.get(ME_URL)
        assert "Bearer" in response.get("WWW-Authenticate", "")

    def test_user_without_profile_is_forbidden(self, api_client, django_user_model):
        user = django_user_model.objects.create_user(username="nobody", password="Str0ng!Pass")
        api_client.force_authenticate(user=user)

        response = api_client.get("/api/v1/orders/")

        assert response.status_code == 403


class TestTokenFlow:
    def test_manager_obtains_and_uses_token(self, api_client, manager):
        response = api_client.post(
            "/api/v1/auth/token/",
            {"username": manager.email, "password": "Str0ng!Pass"},
            format="json",
        )
        assert response.status_code == 200
        access = response.json()["access"]

        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {access}")
        me = api_client.get(ME_URL)

        assert me.status_code == 200
        assert me.json()["email"] == manager.email

    def test_wrong_password(self, api_client, manager):
        response = api_client.post(
            "/api/v1/auth/token/",
            {"username": manager.email, "password": "wrong"},
            format="json",
        )
        assert response.status_code == 401
