"""Distance helpers for locating nearby food banks."""

from __future__ import annotations

import math
from typing import Iterable, List

from foodsaver.models.food_bank import FoodBank

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points in kilometres."""

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lng2 - lng1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    return 2 * EARTH_RADIUS_KM * math.asin(min(1.0, math.sqrt(a)))


def filter_nearby(
    banks: Iterable[FoodBank],
    lat: float,
    lng: float,
    radius_km: float,
) -> List[FoodBank]:
    """Return banks strictly within ``radius_km`` of the point, nearest first.

    Banks without coordinates are skipped; distances are rounded to two decimals.
    """

    nearby: List[FoodBank] = []
    for bank in banks:
        if bank.coordinates is None:
            continue
        distance = haversine_km(lat, lng, bank.coordinates.lat, bank.coordinates.lng)
        if distance < radius_km:
            nearby.append(bank.model_copy(update={"distance": round(distance, 2)}))
    nearby.sort(key=lambda bank: bank.distance or 0.0)
    return nearby
