"""Tests for ingredient matching and recipe ranking."""

from __future__ import annotations

import pytest

from foodsaver.models.recipe import Recipe
from foodsaver.search import matching_ingredients, recommend_recipes, score_recipe


def _recipe(recipe_id: str, name: str, ingredients: list[str]) -> Recipe:
    return Recipe(
        id=recipe_id,
        name=name,
        description="",
        ingredients=ingredients,
        instructions=["Cook"],
        prep_time=5,
        cook_time=5,
        servings=2,
        category="dinner",
        cuisine="Any",
    )


def test_matching_works_in_both_directions():
    ingredients = ["Cherry Tomatoes", "basil", "olive oil"]

    assert matching_ingredients(ingredients, ["tomatoes"]) == ["cherry tomatoes"]
    assert matching_ingredients(ingredients, ["fresh basil leaves"]) == ["basil"]
    assert matching_ingredients(ingredients, ["  ", ""]) == []


def test_score_is_share_of_ingredients():
    recipe = _recipe("1", "Pasta", ["pasta", "tomatoes", "basil", "garlic"])

    scored = score_recipe(recipe, ["garlic", "basil"])

    assert scored.match_score == pytest.approx(0.5)
    assert scored.matching_ingredients == 2
    assert scored.name == "Pasta"


def test_recommendations_drop_non_matches_and_keep_ties_stable():
    recipes = [
        _recipe("1", "Alpha", ["eggs", "milk"]),
        _recipe("2", "Bravo", ["rice", "beans"]),
        _recipe("3", "Charlie", ["eggs", "flour"]),
        _recipe("4", "Delta", ["eggs"]),
    ]

    ranked = recommend_recipes(recipes, ["Eggs"])

    assert [entry.name for entry in ranked] == ["Delta", "Alpha", "Charlie"]
    assert recommend_recipes(recipes, ["eggs"], limit=1)[0].name == "Delta"


def test_no_inventory_means_no_recommendations():
    assert recommend_recipes([_recipe("1", "Alpha", ["eggs"])], []) == []
