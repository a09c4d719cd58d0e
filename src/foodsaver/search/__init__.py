"""Search and ranking utilities for FoodSaver."""

from __future__ import annotations

from .geo import filter_nearby, haversine_km
from .recipes import matching_ingredients, recommend_recipes, score_recipe

__all__ = [
    "filter_nearby",
    "haversine_km",
    "matching_ingredients",
    "recommend_recipes",
    "score_recipe",
]
