"""Integration tests for notification settings and expiration alerts."""

from __future__ import annotations

from datetime import date, timedelta

from fastapi import status

from tests.integration.utils import auth_headers


def test_registration_creates_default_settings(client):
    response = client.get("/notification-settings", headers=auth_headers(client))

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "expiration_alerts": True,
        "alert_days_before": 3,
        "recipe_recommendations": True,
        "donation_reminders": True,
        "weekly_reports": False,
    }


def test_settings_partial_update(client):
    headers = auth_headers(client)

    response = client.put(
        "/notification-settings",
        json={"alert_days_before": 7, "weekly_reports": True},
        headers=headers,
    )

    assert response.status_code == status.HTTP_200_OK
    updated = response.json()
    assert updated["alert_days_before"] == 7
    assert updated["weekly_reports"] is True
    assert updated["expiration_alerts"] is True
    assert client.get("/notification-settings", headers=headers).json() == updated


def test_settings_update_validation(client):
    headers = auth_headers(client)

    too_far = client.put(
        "/notification-settings",
        json={"alert_days_before": 31},
        headers=headers,
    )
    empty = client.put("/notification-settings", json={}, headers=headers)

    assert too_far.status_code == status.HTTP_400_BAD_REQUEST
    assert too_far.json()["error"] == "Validation failed"
    assert empty.status_code == status.HTTP_400_BAD_REQUEST
    assert empty.json()["detail"] == "No fields provided for update"


def test_expiring_alert_follows_settings(client, food_item_payload):
    headers = auth_headers(client)
    soon = (date.today() + timedelta(days=2)).isoformat()
    later = (date.today() + timedelta(days=6)).isoformat()
    client.post("/food-items", json={**food_item_payload, "expiration_date": soon}, headers=headers)
    client.post(
        "/food-items",
        json={**food_item_payload, "name": "Yogurt", "expiration_date": later},
        headers=headers,
    )

    alert = client.get("/notifications/expiring", headers=headers).json()
    assert alert["email"] == "alice@foodsaver.io"
    assert alert["days_ahead"] == 3
    assert [item["name"] for item in alert["items"]] == ["Carrots"]

    client.put("/notification-settings", json={"alert_days_before": 7}, headers=headers)
    alert = client.get("/notifications/expiring", headers=headers).json()
    assert [item["name"] for item in alert["items"]] == ["Carrots", "Yogurt"]

    client.put("/notification-settings", json={"expiration_alerts": False}, headers=headers)
    alert = client.get("/notifications/expiring", headers=headers).json()
    assert alert["items"] == []
