"""Shared pytest fixtures for the FoodSaver test suite."""

from __future__ import annotations

from datetime import date, timedelta
from typing import Dict, Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from foodsaver.config import get_settings
from foodsaver.db.repository import reset_repository_state
from foodsaver.server.app import create_app


@pytest.fixture()
def app() -> Generator[FastAPI, None, None]:
    """Create a new FastAPI app instance for each test and reset overrides."""

    application = create_app()
    yield application
    application.dependency_overrides.clear()


@pytest.fixture()
def client(app) -> TestClient:
    """Return a test client bound to the FastAPI app."""

    return TestClient(app)


@pytest.fixture()
def food_item_payload() -> Dict[str, object]:
    """Provide a valid food item payload expiring in two days."""

    today = date.today()
    return {
        "name": "Carrots",
        "category": "vegetables",
        "quantity": 2,
        "unit": "kg",
        "purchase_date": (today - timedelta(days=3)).isoformat(),
        "expiration_date": (today + timedelta(days=2)).isoformat(),
        "storage_location": "refrigerator",
        "cost": 3.5,
    }


@pytest.fixture(autouse=True)
def isolated_settings(tmp_path, monkeypatch):
    """Ensure each test uses an isolated SQLite database location."""

    db_path = tmp_path / "test_foodsaver.db"
    monkeypatch.setenv("FOODSAVER_DATABASE_PATH", str(db_path))
    monkeypatch.setenv("FOODSAVER_JWT_SECRET", "test-signing-secret")
    get_settings.cache_clear()
    reset_repository_state()
    yield
    reset_repository_state()
    monkeypatch.delenv("FOODSAVER_DATABASE_PATH", raising=False)
    monkeypatch.delenv("FOODSAVER_JWT_SECRET", raising=False)
    get_settings.cache_clear()
