"""Food bank directory data access helpers."""

from __future__ import annotations

import json
import logging
from typing import Iterable, List, Optional

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from foodsaver.models.food_bank import FoodBank

from .models import FoodBankORM
from .repository import session_scope
from .seed_data import DEFAULT_FOOD_BANKS

logger = logging.getLogger(__name__)


def seed_food_banks(session: Session, records: Iterable[dict] | None = None) -> int:
    """Insert the default directory when the table is empty; return rows added."""

    exists = session.execute(select(FoodBankORM.id).limit(1)).first()
    if exists:
        return 0

    added = 0
    for record in records if records is not None else DEFAULT_FOOD_BANKS:
        session.merge(
            FoodBankORM(
                id=str(record["id"]),
                name=str(record["name"]),
                address=str(record["address"]),
                phone=str(record.get("phone") or ""),
                email=str(record.get("email") or ""),
                accepted_items=json.dumps(list(record.get("accepted_items") or [])),
                operating_hours=str(record.get("operating_hours") or ""),
                website=record.get("website"),
                country=str(record["country"]),
                city=str(record["city"]),
                latitude=record.get("latitude"),
                longitude=record.get("longitude"),
            )
        )
        added += 1

    session.flush()
    logger.info("Seeded %s food bank(s)", added)
    return added


def _to_model(row: FoodBankORM) -> FoodBank:
    try:
        accepted = json.loads(row.accepted_items or "[]")
    except json.JSONDecodeError:
        accepted = []
    coordinates = None
    if row.latitude is not None and row.longitude is not None:
        coordinates = {"lat": row.latitude, "lng": row.longitude}
    return FoodBank.model_validate(
        {
            "id": row.id,
            "name": row.name,
            "address": row.address,
            "phone": row.phone,
            "email": row.email,
            "accepted_items": accepted,
            "operating_hours": row.operating_hours,
            "website": row.website,
            "country": row.country,
            "city": row.city,
            "coordinates": coordinates,
        }
    )


def _like(value: str) -> str:
    escaped = value.strip().replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"%{escaped}%"


def search_food_banks(
    *,
    search: Optional[str] = None,
    country: Optional[str] = None,
    city: Optional[str] = None,
) -> List[FoodBank]:
    """Return banks matching every supplied filter, ordered by country, city and name."""

    statement = select(FoodBankORM)
    if search and search.strip():
        term = _like(search)
        statement = statement.where(
            or_(
                FoodBankORM.name.ilike(term, escape="\\"),
                FoodBankORM.city.ilike(term, escape="\\"),
                FoodBankORM.country.ilike(term, escape="\\"),
                FoodBankORM.address.ilike(term, escape="\\"),
            )
        )
    if country and country.strip():
        statement = statement.where(FoodBankORM.country.ilike(_like(country), escape="\\"))
    if city and city.strip():
        statement = statement.where(FoodBankORM.city.ilike(_like(city), escape="\\"))
    statement = statement.order_by(FoodBankORM.country, FoodBankORM.city, FoodBankORM.name)

    with session_scope() as session:
        seed_food_banks(session)
        rows = session.execute(statement).scalars().all()
        return [_to_model(row) for row in rows]


def list_located_food_banks() -> List[FoodBank]:
    """Return every bank with known coordinates."""

    with session_scope() as session:
        seed_food_banks(session)
        rows = (
            session.execute(
                select(FoodBankORM).where(
                    FoodBankORM.latitude.is_not(None),
                    FoodBankORM.longitude.is_not(None),
                )
            )
            .scalars()
            .all()
        )
        return [_to_model(row) for row in rows]


__all__ = ["list_located_food_banks", "search_food_banks", "seed_food_banks"]
