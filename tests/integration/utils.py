"""Shared helpers for integration tests."""

from __future__ import annotations

from typing import Any

from fastapi.testclient import TestClient


def register(
    client: TestClient,
    email: str = "alice@foodsaver.io",
    password: str = "carrots123",
    name: str = "Alice",
    user_type: str = "household",
) -> dict[str, Any]:
    response = client.post(
        "/auth/register",
        json={"email": email, "password": password, "name": name, "user_type": user_type},
    )
    assert response.status_code == 201, response.text
    return response.json()


def auth_headers(client: TestClient, email: str = "alice@foodsaver.io") -> dict[str, str]:
    token = register(client, email=email)["access_token"]
    return {"Authorization": f"Bearer {token}"}
