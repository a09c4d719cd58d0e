"""Donation data access helpers."""

from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import List, Optional, Sequence
from uuid import uuid4

from sqlalchemy import select

from foodsaver import metrics
from foodsaver.models.donation import DONATION_STATUSES, Donation

from .food_items import find_owned_item_ids
from .models import DonationORM
from .repository import session_scope

logger = logging.getLogger(__name__)


def _to_model(row: DonationORM) -> Donation:
    return Donation.model_validate(
        {
            "id": row.id,
            "user_id": row.user_id,
            "food_item_ids": json.loads(row.food_item_ids or "[]"),
            "recipient_organization": row.recipient_organization,
            "pickup_date": row.pickup_date,
            "status": row.status,
            "notes": row.notes,
            "created_at": row.created_at,
            "updated_at": row.updated_at,
        }
    )


def list_donations(user_id: str) -> List[Donation]:
    """Return the user's donations, newest first."""

    with session_scope() as session:
        rows = (
            session.execute(
                select(DonationORM)
                .where(DonationORM.user_id == user_id)
                .order_by(DonationORM.created_at.desc(), DonationORM.id.desc())
            )
            .scalars()
            .all()
        )
        return [_to_model(row) for row in rows]


def get_donation(user_id: str, donation_id: str) -> Optional[Donation]:
    with session_scope() as session:
        row = session.get(DonationORM, donation_id)
        if row is None or row.user_id != user_id:
            return None
        return _to_model(row)


def create_donation(
    user_id: str,
    *,
    food_item_ids: Sequence[str],
    recipient_organization: str,
    pickup_date: datetime,
    notes: Optional[str] = None,
) -> Donation:
    """Record a pending donation of the user's own food items."""

    # Preserve request order while dropping repeats.
    item_ids = list(dict.fromkeys(food_item_ids))
    if not item_ids:
        raise ValueError("At least one food item is required")

    unknown = sorted(set(item_ids) - find_owned_item_ids(user_id, item_ids))
    if unknown:
        raise ValueError(f"Unknown food item ids: {', '.join(unknown)}")

    with session_scope() as session:
        db_donation = DonationORM(
            id=str(uuid4()),
            user_id=user_id,
            food_item_ids=json.dumps(item_ids),
            recipient_organization=recipient_organization.strip(),
            pickup_date=pickup_date,
            status="pending",
            notes=notes.strip() if notes and notes.strip() else None,
        )
        session.add(db_donation)
        session.flush()
        logger.info(
            "Created donation id=%s items=%s recipient=%s",
            db_donation.id,
            len(item_ids),
            db_donation.recipient_organization,
        )
        return _to_model(db_donation)


def update_donation_status(user_id: str, donation_id: str, status: str) -> Donation:
    """Set the donation status; any status may follow any other."""

    if status not in DONATION_STATUSES:
        raise ValueError("Invalid status")

    with session_scope() as session:
        row = session.get(DonationORM, donation_id)
        if row is None or row.user_id != user_id:
            raise ValueError(f"Donation {donation_id} not found")
        previous = row.status
        row.status = status
        session.flush()
        metrics.DONATION_STATUS_CHANGES.labels(status=status).inc()
        logger.info("Donation id=%s status %s -> %s", donation_id, previous, status)
        return _to_model(row)


__all__ = ["create_donation", "get_donation", "list_donations", "update_donation_status"]
