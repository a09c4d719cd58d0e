"""Integration tests for the generic error responses."""

from __future__ import annotations

from fastapi import status
from fastapi.testclient import TestClient

from foodsaver.server import deps


def test_health_reports_version(client):
    from foodsaver import __version__

    response = client.get("/health")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {"status": "ok", "version": __version__}


def test_malformed_json_is_a_validation_failure(client):
    response = client.post(
        "/auth/login",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["error"] == "Validation failed"


def test_unexpected_errors_return_500(app):
    def broken_provider():
        raise RuntimeError("database exploded")

    app.dependency_overrides[deps.get_recipe_provider] = lambda: broken_provider
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/recipes")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"detail": "Internal server error"}
    assert "database exploded" not in response.text
