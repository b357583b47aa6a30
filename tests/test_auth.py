"""Tests for token verification and the app-level endpoints."""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi import HTTPException

from skillswap.modules.auth.service import AuthService


def _auth_response(user_id="user-alice"):
    user = SimpleNamespace(
        id=user_id,
        email=f"{user_id}@example.com",
        user_metadata={"full_name": "Alice"},
        app_metadata=None,
    )
    return SimpleNamespace(user=user)


class TestAuthService:

    def test_resolves_token_to_user(self):
        supabase = MagicMock()
        supabase.auth.get_user.return_value = _auth_response()

        user = AuthService(supabase).get_current_user("token-1")

        assert user["id"] == "user-alice"
        assert user["user_metadata"] == {"full_name": "Alice"}
        assert user["app_metadata"] == {}
        supabase.auth.get_user.assert_called_once_with(jwt="token-1")

    def test_caches_by_token(self):
        supabase = MagicMock()
        supabase.auth.get_user.return_value = _auth_response()
        service = AuthService(supabase)

        service.get_current_user("token-1")
        service.get_current_user("token-1")
        service.get_current_user("token-2")

        assert supabase.auth.get_user.call_count == 2

    def test_missing_user_is_unauthorized(self):
        supabase = MagicMock()
        supabase.auth.get_user.return_value = SimpleNamespace(user=None)

        with pytest.raises(HTTPException) as exc_info:
            AuthService(supabase).get_current_user("token-1")
        assert exc_info.value.status_code == 401

    def test_expired_jwt_is_unauthorized(self):
        supabase = MagicMock()
        supabase.auth.get_user.side_effect = Exception("invalid JWT: token is expired")

        with pytest.raises(HTTPException) as exc_info:
            AuthService(supabase).get_current_user("token-1")
        assert exc_info.value.status_code == 401
        assert exc_info.value.detail == "Invalid or expired token"


class TestAppEndpoints:

    def test_me_returns_current_user(self, client):
        response = client.get("/api/v1/auth/me")
        assert response.status_code == 200
        assert response.json()["id"] == "user-alice"

    def test_health_and_ready(self, client):
        assert client.get("/health").json() == {"status": "healthy"}
        assert client.get("/ready").json() == {"status": "ready"}

    def test_security_headers(self, client):
        response = client.get("/health")
        assert response.headers["X-Content-Type-Options"] == "nosniff"
        assert response.headers["X-Frame-Options"] == "DENY"

    def test_missing_bearer_token_is_rejected(self, db):
        from fastapi.testclient import TestClient
        from skillswap.main import app
        from skillswap.database.supabase_client import get_supabase

        app.dependency_overrides[get_supabase] = lambda: db
        try:
            response = TestClient(app).get("/api/v1/profiles/me")
        finally:
            app.dependency_overrides.clear()
        assert response.status_code in (401, 403)
