from __future__ import annotations

from datetime import date

from sqlalchemy import delete, text

from foodsaver.db.food_items import create_food_item, list_food_items
from foodsaver.db.models import UserORM
from foodsaver.db.repository import get_engine, reset_repository_state, session_scope
from foodsaver.db.users import create_user


def test_foreign_keys_cascade_user_deletion():
    user = create_user(email="gone@foodsaver.io", password="secret1", name="Gone", user_type="household")
    create_food_item(
        user.id,
        name="Rice",
        category="grains",
        quantity=1,
        unit="kg",
        purchase_date=date(2025, 1, 1),
        expiration_date=date(2026, 1, 1),
        storage_location="pantry",
    )

    with session_scope() as session:
        assert session.execute(text("PRAGMA foreign_keys")).scalar() == 1
        session.execute(delete(UserORM).where(UserORM.id == user.id))

    assert list_food_items(user.id) == []


def test_engine_reopens_existing_schema():
    create_user(email="keep@foodsaver.io", password="secret1", name="Keep", user_type="household")
    first = get_engine()

    reset_repository_state()
    second = get_engine()

    assert second is not first
    with session_scope() as session:
        assert session.execute(text("SELECT count(*) FROM users")).scalar() == 1
