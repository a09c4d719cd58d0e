"""Food inventory data access helpers."""

from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Iterable, List, Optional
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from foodsaver import metrics
from foodsaver.models.food import FoodItem

from .models import FoodItemORM
from .repository import session_scope

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {
    "name",
    "category",
    "quantity",
    "unit",
    "purchase_date",
    "expiration_date",
    "storage_location",
    "cost",
    "barcode",
    "is_consumed",
    "consumed_at",
}
NULLABLE_FIELDS = {"cost", "barcode", "consumed_at"}


def _to_model(row: FoodItemORM) -> FoodItem:
    return FoodItem.model_validate(
        {
            "id": row.id,
            "user_id": row.user_id,
            "name": row.name,
            "category": row.category,
            "quantity": row.quantity,
            "unit": row.unit,
            "purchase_date": row.purchase_date,
            "expiration_date": row.expiration_date,
            "storage_location": row.storage_location,
            "cost": row.cost,
            "barcode": row.barcode,
            "is_consumed": row.is_consumed,
            "consumed_at": row.consumed_at,
            "created_at": row.created_at,
            "updated_at": row.updated_at,
        }
    )


def _get_owned(session: Session, user_id: str, item_id: str) -> FoodItemORM:
    row = session.get(FoodItemORM, item_id)
    if row is None or row.user_id != user_id:
        raise ValueError(f"Food item {item_id} not found")
    return row


def list_food_items(user_id: str) -> List[FoodItem]:
    """Return the user's items ordered by expiration date (soonest first)."""

    with session_scope() as session:
        rows = (
            session.execute(
                select(FoodItemORM)
                .where(FoodItemORM.user_id == user_id)
                .order_by(FoodItemORM.expiration_date.asc(), FoodItemORM.name.asc())
            )
            .scalars()
            .all()
        )
        return [_to_model(row) for row in rows]


def get_food_item(user_id: str, item_id: str) -> Optional[FoodItem]:
    with session_scope() as session:
        row = session.get(FoodItemORM, item_id)
        if row is None or row.user_id != user_id:
            return None
        return _to_model(row)


def create_food_item(
    user_id: str,
    *,
    name: str,
    category: str,
    quantity: float,
    unit: str,
    purchase_date: date,
    expiration_date: date,
    storage_location: str,
    cost: Optional[float] = None,
    barcode: Optional[str] = None,
) -> FoodItem:
    with session_scope() as session:
        db_item = FoodItemORM(
            id=str(uuid4()),
            user_id=user_id,
            name=name.strip(),
            category=category,
            quantity=float(quantity),
            unit=unit.strip(),
            purchase_date=purchase_date,
            expiration_date=expiration_date,
            storage_location=storage_location,
            cost=float(cost) if cost is not None else None,
            barcode=barcode.strip() if barcode else None,
            is_consumed=False,
        )
        session.add(db_item)
        session.flush()
        return _to_model(db_item)


def update_food_item(user_id: str, item_id: str, **changes: object) -> FoodItem:
    """Apply a partial update; unknown keys are ignored.

    Ownership is checked first, so a missing or foreign item is "not found" even
    when the update itself is empty.
    """

    updates = {
        key: value
        for key, value in changes.items()
        if key in UPDATABLE_FIELDS and (value is not None or key in NULLABLE_FIELDS)
    }

    with session_scope() as session:
        db_item = _get_owned(session, user_id, item_id)
        if not updates:
            raise ValueError("No valid fields to update")
        for key, value in updates.items():
            if key == "quantity" and value is not None:
                value = float(value)  # type: ignore[arg-type]
            setattr(db_item, key, value)
        session.flush()
        return _to_model(db_item)


def consume_food_item(user_id: str, item_id: str, quantity: Optional[float] = None) -> FoodItem:
    """Consume ``quantity`` (everything when omitted), clamping the remainder at zero."""

    with session_scope() as session:
        db_item = _get_owned(session, user_id, item_id)
        used = quantity if quantity else db_item.quantity
        remaining = db_item.quantity - used
        if remaining <= 0:
            db_item.quantity = 0.0
            db_item.is_consumed = True
            db_item.consumed_at = datetime.now()
            metrics.FOOD_ITEMS_CONSUMED.labels(result="fully_consumed").inc()
        else:
            db_item.quantity = remaining
            db_item.is_consumed = False
            db_item.consumed_at = None
            metrics.FOOD_ITEMS_CONSUMED.labels(result="partially_consumed").inc()
        session.flush()
        logger.debug(
            "Consumed food item id=%s used=%s remaining=%s", item_id, used, db_item.quantity
        )
        return _to_model(db_item)


def delete_food_item(user_id: str, item_id: str) -> None:
    with session_scope() as session:
        db_item = _get_owned(session, user_id, item_id)
        session.delete(db_item)


def list_expiring_items(
    user_id: str,
    days: int,
    *,
    today: Optional[date] = None,
) -> List[FoodItem]:
    """Return unconsumed items expiring between today and ``days`` from now (inclusive)."""

    start = today or date.today()
    end = start + timedelta(days=days)
    with session_scope() as session:
        rows = (
            session.execute(
                select(FoodItemORM)
                .where(
                    FoodItemORM.user_id == user_id,
                    FoodItemORM.is_consumed.is_(False),
                    FoodItemORM.expiration_date >= start,
                    FoodItemORM.expiration_date <= end,
                )
                .order_by(FoodItemORM.expiration_date.asc(), FoodItemORM.name.asc())
            )
            .scalars()
            .all()
        )
        return [_to_model(row) for row in rows]


def list_available_ingredient_names(user_id: str) -> List[str]:
    """Return lower-cased names of unconsumed items that still have stock."""

    with session_scope() as session:
        names: Iterable[str] = session.execute(
            select(FoodItemORM.name).where(
                FoodItemORM.user_id == user_id,
                FoodItemORM.is_consumed.is_(False),
                FoodItemORM.quantity > 0,
            )
        ).scalars()
        return [name.lower() for name in names]


def find_owned_item_ids(user_id: str, item_ids: Iterable[str]) -> set[str]:
    """Return the subset of ``item_ids`` that belong to ``user_id``."""

    wanted = set(item_ids)
    if not wanted:
        return set()
    with session_scope() as session:
        rows = session.execute(
            select(FoodItemORM.id).where(
                FoodItemORM.user_id == user_id,
                FoodItemORM.id.in_(wanted),
            )
        ).scalars()
        return set(rows)


__all__ = [
    "UPDATABLE_FIELDS",
    "consume_food_item",
    "create_food_item",
    "delete_food_item",
    "find_owned_item_ids",
    "get_food_item",
    "list_available_ingredient_names",
    "list_expiring_items",
    "list_food_items",
    "update_food_item",
]
