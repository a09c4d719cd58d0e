from __future__ import annotations

from foodsaver.db.food_banks import list_located_food_banks, search_food_banks
from foodsaver.db.recipes import get_recipe, list_recipes, seed_recipes
from foodsaver.db.repository import session_scope


def test_recipes_seeded_once():
    first = list_recipes()
    second = list_recipes()

    assert len(first) == len(second) == 4
    with session_scope() as session:
        assert seed_recipes(session) == 0


def test_recipe_lists_are_decoded():
    recipe = get_recipe("4")

    assert recipe is not None
    assert recipe.name == "Banana Bread"
    assert "flour" in recipe.ingredients
    assert recipe.total_time == recipe.prep_time + recipe.cook_time
    assert get_recipe("404") is None


def test_food_bank_search_matches_address():
    banks = search_food_banks(search="camberwell")

    assert [bank.city for bank in banks] == ["London"]


def test_located_food_banks_have_coordinates():
    banks = list_located_food_banks()

    assert len(banks) == 12
    assert all(bank.coordinates is not None for bank in banks)
