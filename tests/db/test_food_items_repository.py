from __future__ import annotations

from datetime import date, timedelta

import pytest

from foodsaver.db.food_items import (
    consume_food_item,
    create_food_item,
    find_owned_item_ids,
    get_food_item,
    list_available_ingredient_names,
    list_expiring_items,
    update_food_item,
)
from foodsaver.db.models import FoodItemORM
from foodsaver.db.repository import session_scope
from foodsaver.db.users import create_user

TODAY = date(2025, 3, 10)


@pytest.fixture()
def owner_id() -> str:
    return create_user(
        email="pantry@foodsaver.io",
        password="pantry-pass",
        name="Pantry Owner",
        user_type="household",
    ).id


def _item(owner_id: str, name: str, expires: date, quantity: float = 1.0):
    return create_food_item(
        owner_id,
        name=name,
        category="vegetables",
        quantity=quantity,
        unit="pcs",
        purchase_date=TODAY - timedelta(days=2),
        expiration_date=expires,
        storage_location="pantry",
    )


def test_create_food_item_persists_row(owner_id):
    created = _item(owner_id, "  Leeks ", TODAY)

    assert created.name == "Leeks"
    assert created.is_consumed is False
    with session_scope() as session:
        row = session.get(FoodItemORM, created.id)
        assert row is not None
        assert row.user_id == owner_id
        assert row.created_at is not None


def test_update_ignores_unknown_and_null_required_fields(owner_id):
    created = _item(owner_id, "Leeks", TODAY)

    updated = update_food_item(owner_id, created.id, name=None, unit="bunch", colour="green")

    assert updated.name == "Leeks"
    assert updated.unit == "bunch"

    with pytest.raises(ValueError, match="No valid fields"):
        update_food_item(owner_id, created.id, colour="green")


def test_consume_exact_quantity_marks_consumed(owner_id):
    created = _item(owner_id, "Leeks", TODAY, quantity=2)

    consumed = consume_food_item(owner_id, created.id, 2)

    assert consumed.quantity == 0
    assert consumed.is_consumed is True
    assert consumed.consumed_at is not None


def test_consume_other_users_item_raises(owner_id):
    created = _item(owner_id, "Leeks", TODAY)
    other = create_user(
        email="other@foodsaver.io",
        password="other-pass",
        name="Other",
        user_type="business",
    )

    with pytest.raises(ValueError, match="not found"):
        consume_food_item(other.id, created.id)
    assert get_food_item(other.id, created.id) is None
    assert find_owned_item_ids(other.id, [created.id]) == set()
    assert find_owned_item_ids(owner_id, [created.id, "missing"]) == {created.id}


def test_expiring_items_window(owner_id):
    _item(owner_id, "Yesterday", TODAY - timedelta(days=1))
    _item(owner_id, "Today", TODAY)
    _item(owner_id, "Friday", TODAY + timedelta(days=4))

    assert [item.name for item in list_expiring_items(owner_id, 0, today=TODAY)] == ["Today"]
    names = [item.name for item in list_expiring_items(owner_id, 4, today=TODAY)]
    assert names == ["Today", "Friday"]


def test_available_ingredients_skip_consumed_and_empty(owner_id):
    kept = _item(owner_id, "Cherry Tomatoes", TODAY)
    eaten = _item(owner_id, "Basil", TODAY)
    consume_food_item(owner_id, eaten.id)

    assert list_available_ingredient_names(owner_id) == ["cherry tomatoes"]
    assert kept.id
