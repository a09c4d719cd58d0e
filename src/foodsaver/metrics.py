"""Prometheus metrics definitions for FoodSaver."""

from __future__ import annotations

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "foodsaver_http_requests_total",
    "Total number of HTTP requests processed by the FoodSaver API",
    ["method", "path", "status"],
)

REQUEST_LATENCY = Histogram(
    "foodsaver_http_request_duration_seconds",
    "Latency of HTTP requests processed by the FoodSaver API",
    ["method", "path"],
)

FOOD_ITEMS_CONSUMED = Counter(
    "foodsaver_food_items_consumed_total",
    "Number of consume operations by outcome",
    ["result"],
)

DONATION_STATUS_CHANGES = Counter(
    "foodsaver_donation_status_changes_total",
    "Number of donation status updates by target status",
    ["status"],
)

EXPIRATION_ALERTS = Counter(
    "foodsaver_expiration_alerts_total",
    "Number of expiration alerts raised by the alert sweep",
)

__all__ = [
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "FOOD_ITEMS_CONSUMED",
    "DONATION_STATUS_CHANGES",
    "EXPIRATION_ALERTS",
]
