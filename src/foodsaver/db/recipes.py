"""Recipe catalogue data access helpers."""

from __future__ import annotations

import json
import logging
from typing import Iterable, List, Optional

from sqlalchemy import select
from sqlalchemy.orm import Session

from foodsaver.models.recipe import Recipe

from .models import RecipeORM
from .repository import session_scope
from .seed_data import DEFAULT_RECIPES

logger = logging.getLogger(__name__)


def _decode_list(value: str | None) -> list[str]:
    if not value:
        return []
    try:
        decoded = json.loads(value)
    except json.JSONDecodeError:
        logger.warning("Discarding malformed JSON list column value=%r", value)
        return []
    return [str(entry) for entry in decoded] if isinstance(decoded, list) else []


def seed_recipes(session: Session, records: Iterable[dict] | None = None) -> int:
    """Insert the default catalogue when the table is empty; return rows added."""

    exists = session.execute(select(RecipeORM.id).limit(1)).first()
    if exists:
        return 0

    added = 0
    for record in records if records is not None else DEFAULT_RECIPES:
        session.merge(
            RecipeORM(
                id=str(record["id"]),
                name=str(record["name"]),
                description=str(record.get("description") or ""),
                ingredients=json.dumps(list(record.get("ingredients") or [])),
                instructions=json.dumps(list(record.get("instructions") or [])),
                prep_time=int(record.get("prep_time") or 0),
                cook_time=int(record.get("cook_time") or 0),
                servings=int(record.get("servings") or 1),
                category=str(record["category"]),
                cuisine=str(record.get("cuisine") or ""),
                dietary_restrictions=json.dumps(list(record.get("dietary_restrictions") or [])),
                image_url=record.get("image_url"),
            )
        )
        added += 1

    session.flush()
    logger.info("Seeded %s recipe(s)", added)
    return added


def _to_model(row: RecipeORM) -> Recipe:
    return Recipe.model_validate(
        {
            "id": row.id,
            "name": row.name,
            "description": row.description,
            "ingredients": _decode_list(row.ingredients),
            "instructions": _decode_list(row.instructions),
            "prep_time": row.prep_time,
            "cook_time": row.cook_time,
            "servings": row.servings,
            "category": row.category,
            "cuisine": row.cuisine,
            "dietary_restrictions": _decode_list(row.dietary_restrictions),
            "image_url": row.image_url,
        }
    )


def list_recipes() -> List[Recipe]:
    """Return the catalogue ordered by name (seeded on first access)."""

    with session_scope() as session:
        seed_recipes(session)
        rows = session.execute(select(RecipeORM).order_by(RecipeORM.name)).scalars().all()
        return [_to_model(row) for row in rows]


def get_recipe(recipe_id: str) -> Optional[Recipe]:
    with session_scope() as session:
        seed_recipes(session)
        row = session.get(RecipeORM, recipe_id)
        if row is None:
            return None
        return _to_model(row)


__all__ = ["get_recipe", "list_recipes", "seed_recipes"]
