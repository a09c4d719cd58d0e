"""Recipe recommendation scoring against on-hand ingredients."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from foodsaver.models.recipe import Recipe, RecipeRecommendation


def _normalize(values: Iterable[str]) -> List[str]:
    return [value.strip().lower() for value in values if value and value.strip()]


def matching_ingredients(ingredients: Sequence[str], available: Sequence[str]) -> List[str]:
    """Return recipe ingredients covered by an available item.

    An ingredient is covered when it contains an available name or an available name
    contains it ("cherry tomatoes" covers "tomatoes" and vice versa).
    """

    pantry = _normalize(available)
    return [
        ingredient
        for ingredient in _normalize(ingredients)
        if any(have in ingredient or ingredient in have for have in pantry)
    ]


def score_recipe(recipe: Recipe, available: Sequence[str]) -> RecipeRecommendation:
    matches = matching_ingredients(recipe.ingredients, available)
    total = len(recipe.ingredients)
    score = len(matches) / total if total else 0.0
    return RecipeRecommendation(
        **recipe.model_dump(),
        match_score=score,
        matching_ingredients=len(matches),
    )


def recommend_recipes(
    recipes: Sequence[Recipe],
    available: Sequence[str],
    *,
    limit: int | None = None,
) -> List[RecipeRecommendation]:
    """Rank recipes by the share of their ingredients found in ``available``.

    Recipes without a single match are dropped. The sort is stable, so recipes with
    equal scores keep their incoming order.
    """

    if not _normalize(available):
        return []

    scored = [score_recipe(recipe, available) for recipe in recipes]
    ranked = sorted(
        (entry for entry in scored if entry.matching_ingredients > 0),
        key=lambda entry: entry.match_score,
        reverse=True,
    )
    if limit is not None:
        return ranked[:limit]
    return ranked
