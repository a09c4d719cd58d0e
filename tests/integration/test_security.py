"""Security-related integration tests."""

from __future__ import annotations

from datetime import timedelta

import pytest
from fastapi import status

from foodsaver.security import create_access_token

PROTECTED_ROUTES = [
    ("get", "/auth/me"),
    ("post", "/auth/upgrade"),
    ("get", "/food-items"),
    ("get", "/food-items/expiring/3"),
    ("get", "/donations"),
    ("get", "/analytics"),
    ("get", "/analytics/waste-report"),
    ("get", "/notification-settings"),
    ("get", "/notifications/expiring"),
]


@pytest.mark.parametrize(("method", "path"), PROTECTED_ROUTES)
def test_protected_routes_require_token(client, method, path):
    response = getattr(client, method)(path)

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["detail"] == "Access token required"


def test_malformed_token_is_forbidden(client):
    response = client.get("/food-items", headers={"Authorization": "Bearer not-a-jwt"})

    assert response.status_code == status.HTTP_403_FORBIDDEN
    assert response.json()["detail"] == "Invalid or expired token"


def test_expired_token_is_forbidden(client):
    token = create_access_token("someone", "someone@foodsaver.io", timedelta(minutes=-5))

    response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == status.HTTP_403_FORBIDDEN


def test_token_for_unknown_user_is_rejected(client):
    token = create_access_token("missing-user", "ghost@foodsaver.io")

    response = client.get("/auth/me", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == status.HTTP_401_UNAUTHORIZED
    assert response.json()["detail"] == "Invalid token"


def test_token_signed_with_other_secret_is_forbidden(client, monkeypatch):
    from foodsaver.config import get_settings

    monkeypatch.setenv("FOODSAVER_JWT_SECRET", "someone-elses-secret")
    get_settings.cache_clear()
    foreign_token = create_access_token("someone", "someone@foodsaver.io")
    monkeypatch.setenv("FOODSAVER_JWT_SECRET", "test-signing-secret")
    get_settings.cache_clear()

    response = client.get("/auth/me", headers={"Authorization": f"Bearer {foreign_token}"})

    assert response.status_code == status.HTTP_403_FORBIDDEN
