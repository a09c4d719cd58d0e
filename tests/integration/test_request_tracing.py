"""Integration tests covering request ID propagation and middleware."""

from __future__ import annotations


def test_request_id_echoed_when_provided(client):
    request_id = "test-request-123"
    response = client.get("/recipes", headers={"X-Request-ID": request_id})
    assert response.status_code == 200
    assert response.headers["X-Request-ID"] == request_id


def test_request_id_generated_when_missing(client):
    response = client.get("/health")
    assert response.status_code == 200
    generated = response.headers.get("X-Request-ID")
    assert generated
    assert len(generated) >= 8


def test_access_log_line_per_request(client, caplog):
    caplog.set_level("INFO", logger="foodsaver.access")

    client.get("/food-banks", headers={"X-Request-ID": "trace-me"})

    records = [record for record in caplog.records if record.name == "foodsaver.access"]
    assert len(records) == 1
    assert "GET /food-banks status=200" in records[0].getMessage()
    assert records[0].request_id == "trace-me"
