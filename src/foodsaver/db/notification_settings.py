"""Data access helpers for per-user notification settings."""

from __future__ import annotations

import logging
from typing import List, Tuple
from uuid import uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from foodsaver.models.notifications import NotificationSettings

from .models import NotificationSettingsORM, UserORM
from .repository import session_scope

logger = logging.getLogger(__name__)

SETTING_KEYS = set(NotificationSettings.model_fields)


def _to_model(row: NotificationSettingsORM) -> NotificationSettings:
    return NotificationSettings.model_validate({key: getattr(row, key) for key in SETTING_KEYS})


def _get_or_create(session: Session, user_id: str) -> NotificationSettingsORM:
    row = session.execute(
        select(NotificationSettingsORM).where(NotificationSettingsORM.user_id == user_id)
    ).scalar_one_or_none()
    if row is not None:
        return row

    if session.get(UserORM, user_id) is None:
        raise ValueError(f"User {user_id} not found")

    defaults = NotificationSettings()
    row = NotificationSettingsORM(id=str(uuid4()), user_id=user_id, **defaults.model_dump())
    session.add(row)
    session.flush()
    logger.debug("Created default notification settings for user_id=%s", user_id)
    return row


def load_notification_settings(user_id: str) -> NotificationSettings:
    """Return the user's settings, creating defaults when none exist."""

    with session_scope() as session:
        return _to_model(_get_or_create(session, user_id))


def save_notification_settings(user_id: str, **changes: object) -> NotificationSettings:
    """Persist a partial settings update."""

    updates = {key: value for key, value in changes.items() if key in SETTING_KEYS}
    if not updates:
        raise ValueError("No fields provided for update")

    with session_scope() as session:
        row = _get_or_create(session, user_id)
        merged = _to_model(row).model_copy(update=updates)
        # Re-validate the merged payload so bounds still apply.
        validated = NotificationSettings.model_validate(merged.model_dump())
        for key, value in validated.model_dump().items():
            setattr(row, key, value)
        session.flush()
        return _to_model(row)


def list_alert_subscribers() -> List[Tuple[str, str, int]]:
    """Return ``(user_id, email, alert_days_before)`` for users with expiration alerts on."""

    with session_scope() as session:
        rows = session.execute(
            select(UserORM.id, UserORM.email, NotificationSettingsORM.alert_days_before)
            .join(NotificationSettingsORM, NotificationSettingsORM.user_id == UserORM.id)
            .where(NotificationSettingsORM.expiration_alerts.is_(True))
            .order_by(UserORM.created_at)
        ).all()
        return [(row[0], row[1], int(row[2])) for row in rows]


__all__ = [
    "list_alert_subscribers",
    "load_notification_settings",
    "save_notification_settings",
]
