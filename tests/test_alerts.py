"""Tests for expiration alert collection and the periodic sweep."""

from __future__ import annotations

import logging
from datetime import date, timedelta

from foodsaver import metrics
from foodsaver.alerts import ExpirationAlertSweeper, collect_expiration_alerts
from foodsaver.db.food_items import create_food_item
from foodsaver.db.notification_settings import save_notification_settings
from foodsaver.db.users import create_user

TODAY = date(2025, 6, 2)


def _user(email: str) -> str:
    return create_user(email=email, password="secret1", name="Tester", user_type="household").id


def _stock(user_id: str, name: str, expires_in: int) -> None:
    create_food_item(
        user_id,
        name=name,
        category="dairy",
        quantity=1,
        unit="l",
        purchase_date=TODAY - timedelta(days=1),
        expiration_date=TODAY + timedelta(days=expires_in),
        storage_location="refrigerator",
    )


def test_collect_alerts_respects_user_windows():
    short_window = _user("short@foodsaver.io")
    long_window = _user("long@foodsaver.io")
    muted = _user("muted@foodsaver.io")
    nothing_due = _user("idle@foodsaver.io")

    _stock(short_window, "Milk", 2)
    _stock(short_window, "Cream", 5)
    _stock(long_window, "Kefir", 5)
    _stock(muted, "Butter", 0)
    _stock(nothing_due, "Cheese", 20)
    save_notification_settings(long_window, alert_days_before=7)
    save_notification_settings(muted, expiration_alerts=False)

    alerts = collect_expiration_alerts(today=TODAY)

    by_user = {alert.user_id: alert for alert in alerts}
    assert set(by_user) == {short_window, long_window}
    assert [item.name for item in by_user[short_window].items] == ["Milk"]
    assert by_user[short_window].days_ahead == 3
    assert [item.name for item in by_user[long_window].items] == ["Kefir"]
    assert by_user[long_window].email == "long@foodsaver.io"
    assert by_user[long_window].generated_on == TODAY


def test_sweep_logs_and_counts_alerts(caplog):
    user_id = _user("sweep@foodsaver.io")
    _stock(user_id, "Milk", 1)
    sweeper = ExpirationAlertSweeper(collector=lambda: collect_expiration_alerts(today=TODAY))
    before = metrics.EXPIRATION_ALERTS._value.get()

    with caplog.at_level(logging.INFO, logger="foodsaver.alerts"):
        raised = sweeper.sweep_once()

    assert raised == 1
    assert metrics.EXPIRATION_ALERTS._value.get() == before + 1
    assert any("Expiration alert" in record.getMessage() for record in caplog.records)


def test_sweep_survives_collector_failure(caplog):
    def broken():
        raise RuntimeError("database locked")

    with caplog.at_level(logging.ERROR, logger="foodsaver.alerts"):
        assert ExpirationAlertSweeper(collector=broken).sweep_once() == 0

    assert "Expiration alert sweep failed" in caplog.text
