"""Integration tests for metrics endpoint."""

from __future__ import annotations

from tests.integration.utils import auth_headers


def test_metrics_endpoint_available(client):
    client.get("/health")
    response = client.get("/metrics")
    assert response.status_code == 200
    body = response.content.decode()
    assert "foodsaver_http_requests_total" in body
    assert 'path="/health"' in body


def test_consumption_is_counted(client, food_item_payload):
    headers = auth_headers(client)
    item = client.post("/food-items", json=food_item_payload, headers=headers).json()
    client.post(f"/food-items/{item['id']}/consume", json={"quantity": 0.5}, headers=headers)

    body = client.get("/metrics").content.decode()
    assert 'foodsaver_food_items_consumed_total{result="partially_consumed"}' in body


def test_request_metrics_use_route_templates(client, food_item_payload):
    headers = auth_headers(client)
    item = client.post("/food-items", json=food_item_payload, headers=headers).json()
    client.get(f"/food-items/{item['id']}", headers=headers)
    client.get("/no-such-route")

    body = client.get("/metrics").content.decode()
    assert 'path="/food-items/{item_id}"' in body
    assert 'path="unmatched"' in body
    assert item["id"] not in body
    assert "/no-such-route" not in body
