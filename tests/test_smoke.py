"""Basic smoke tests for application wiring."""

from fastapi.testclient import TestClient

from foodsaver.config import get_settings
from foodsaver.server.app import create_app


def test_app_serves_health_with_alert_sweep(monkeypatch) -> None:
    monkeypatch.setenv("FOODSAVER_ALERT_SWEEP_ENABLED", "true")
    monkeypatch.setenv("FOODSAVER_ALERT_SWEEP_INTERVAL", "3600")
    get_settings.cache_clear()

    with TestClient(create_app()) as client:
        response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "ok"


def test_openapi_lists_core_routes(client) -> None:
    paths = client.get("/openapi.json").json()["paths"]

    for path in (
        "/auth/register",
        "/food-items/{item_id}/consume",
        "/recipes/recommendations",
        "/donations/{donation_id}/status",
        "/food-banks/nearby",
        "/analytics/waste-report",
    ):
        assert path in paths


def test_startup_sweep_runs_off_the_event_loop(monkeypatch) -> None:
    import threading

    from foodsaver.alerts import ExpirationAlertSweeper

    threads: list[str] = []

    def record_thread(self) -> int:
        threads.append(threading.current_thread().name)
        return 0

    monkeypatch.setattr(ExpirationAlertSweeper, "sweep_once", record_thread)
    monkeypatch.setenv("FOODSAVER_ALERT_SWEEP_ENABLED", "true")
    get_settings.cache_clear()

    with TestClient(create_app()):
        pass

    assert len(threads) == 1
    assert threads[0].startswith("asyncio")
