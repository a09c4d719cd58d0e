"""Data access helpers for user accounts."""

from __future__ import annotations

import logging
from typing import Optional
from uuid import uuid4

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError

from foodsaver.models.user import User
from foodsaver.security import hash_password, verify_password

from .models import NotificationSettingsORM, UserORM
from .repository import session_scope

logger = logging.getLogger(__name__)


def _normalize_email(email: str) -> str:
    return email.strip().lower()


def _to_model(row: UserORM) -> User:
    return User.model_validate(
        {
            "id": row.id,
            "email": row.email,
            "name": row.name,
            "user_type": row.user_type,
            "subscription_plan": row.subscription_plan,
            "created_at": row.created_at,
        }
    )


def create_user(*, email: str, password: str, name: str, user_type: str) -> User:
    """Register a new account together with its default notification settings."""

    normalized = _normalize_email(email)
    with session_scope() as session:
        existing = session.execute(
            select(UserORM.id).where(func.lower(UserORM.email) == normalized)
        ).first()
        if existing:
            raise ValueError("User already exists with this email")

        db_user = UserORM(
            id=str(uuid4()),
            email=normalized,
            password_hash=hash_password(password),
            name=name.strip(),
            user_type=user_type,
            subscription_plan="free",
        )
        session.add(db_user)
        try:
            session.flush()
        except IntegrityError as exc:
            # A concurrent registration won the unique email constraint.
            raise ValueError("User already exists with this email") from exc
        session.add(NotificationSettingsORM(id=str(uuid4()), user_id=db_user.id))
        session.flush()
        logger.info("Registered user id=%s type=%s", db_user.id, user_type)
        return _to_model(db_user)


def authenticate_user(email: str, password: str) -> Optional[User]:
    """Return the user matching the credentials, or ``None``."""

    with session_scope() as session:
        row = session.execute(
            select(UserORM).where(UserORM.email == _normalize_email(email))
        ).scalar_one_or_none()
        if row is None or not verify_password(password, row.password_hash):
            return None
        return _to_model(row)


def get_user(user_id: str) -> Optional[User]:
    with session_scope() as session:
        row = session.get(UserORM, user_id)
        if row is None:
            return None
        return _to_model(row)


def get_user_by_email(email: str) -> Optional[User]:
    with session_scope() as session:
        row = session.execute(
            select(UserORM).where(UserORM.email == _normalize_email(email))
        ).scalar_one_or_none()
        if row is None:
            return None
        return _to_model(row)


def upgrade_subscription(user_id: str) -> User:
    """Move the account onto the premium plan."""

    with session_scope() as session:
        row = session.get(UserORM, user_id)
        if row is None:
            raise ValueError(f"User {user_id} not found")
        row.subscription_plan = "premium"
        session.flush()
        return _to_model(row)


def list_users() -> list[User]:
    with session_scope() as session:
        rows = session.execute(select(UserORM).order_by(UserORM.created_at)).scalars().all()
        return [_to_model(row) for row in rows]


__all__ = [
    "authenticate_user",
    "create_user",
    "get_user",
    "get_user_by_email",
    "list_users",
    "upgrade_subscription",
]
