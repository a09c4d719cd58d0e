"""SQLAlchemy models representing FoodSaver persistence tables."""

from __future__ import annotations

from datetime import date, datetime
from typing import Optional

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Date,
    DateTime,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
    func,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from foodsaver.models.donation import DONATION_STATUSES
from foodsaver.models.food import FOOD_CATEGORIES, STORAGE_LOCATIONS


def _in_clause(column: str, values: tuple[str, ...]) -> str:
    quoted = ", ".join(f"'{value}'" for value in values)
    return f"{column} IN ({quoted})"


def _now() -> datetime:
    return datetime.now()


class Base(DeclarativeBase):
    """Declarative base class for FoodSaver ORM models."""


class UserORM(Base):
    """Registered account."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    user_type: Mapped[str] = mapped_column(String(32), nullable=False)
    subscription_plan: Mapped[str] = mapped_column(String(32), nullable=False, default="free")
    created_at: Mapped[datetime] = mapped_column(DateTime, default=_now, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=_now,
        onupdate=_now,
        nullable=False,
    )

    __table_args__ = (
        CheckConstraint(_in_clause("user_type", ("household", "business")), name="ck_users_type"),
        CheckConstraint(
            _in_clause("subscription_plan", ("free", "premium")), name="ck_users_plan"
        ),
    )


class FoodItemORM(Base):
    """Perishable item owned by a user."""

    __tablename__ = "food_items"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    category: Mapped[str] = mapped_column(String(32), nullable=False)
    quantity: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    unit: Mapped[str] = mapped_column(String(64), nullable=False)
    purchase_date: Mapped[date] = mapped_column(Date, nullable=False)
    expiration_date: Mapped[date] = mapped_column(Date, nullable=False)
    storage_location: Mapped[str] = mapped_column(String(32), nullable=False)
    cost: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    barcode: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    is_consumed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    consumed_at: Mapped[Optional[datetime]] = mapped_column(DateTime, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=_now, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=_now,
        onupdate=_now,
        nullable=False,
    )

    __table_args__ = (
        CheckConstraint(_in_clause("category", FOOD_CATEGORIES), name="ck_food_items_category"),
        CheckConstraint(
            _in_clause("storage_location", STORAGE_LOCATIONS), name="ck_food_items_storage"
        ),
        Index("idx_food_items_user_id", "user_id"),
        Index("idx_food_items_expiration", "expiration_date"),
    )


class RecipeORM(Base):
    """Catalogue recipe; list-valued columns hold JSON arrays."""

    __tablename__ = "recipes"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False)
    ingredients: Mapped[str] = mapped_column(Text, nullable=False)
    instructions: Mapped[str] = mapped_column(Text, nullable=False)
    prep_time: Mapped[int] = mapped_column(Integer, nullable=False)
    cook_time: Mapped[int] = mapped_column(Integer, nullable=False)
    servings: Mapped[int] = mapped_column(Integer, nullable=False)
    category: Mapped[str] = mapped_column(String(32), nullable=False)
    cuisine: Mapped[str] = mapped_column(String(64), nullable=False)
    dietary_restrictions: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    image_url: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.now(),
        nullable=False,
    )


class FoodBankORM(Base):
    """Food bank directory entry."""

    __tablename__ = "food_banks"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    address: Mapped[str] = mapped_column(String(512), nullable=False)
    phone: Mapped[str] = mapped_column(String(64), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    accepted_items: Mapped[str] = mapped_column(Text, nullable=False, default="[]")
    operating_hours: Mapped[str] = mapped_column(String(255), nullable=False)
    website: Mapped[Optional[str]] = mapped_column(String(1024), nullable=True)
    country: Mapped[str] = mapped_column(String(128), nullable=False)
    city: Mapped[str] = mapped_column(String(128), nullable=False)
    latitude: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    longitude: Mapped[Optional[float]] = mapped_column(Float, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        server_default=func.now(),
        nullable=False,
    )

    __table_args__ = (Index("idx_food_banks_country_city", "country", "city"),)


class DonationORM(Base):
    """Donation pledge; ``food_item_ids`` holds a JSON array of food item ids."""

    __tablename__ = "donations"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    food_item_ids: Mapped[str] = mapped_column(Text, nullable=False)
    recipient_organization: Mapped[str] = mapped_column(String(255), nullable=False)
    pickup_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default="pending")
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=_now, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=_now,
        onupdate=_now,
        nullable=False,
    )

    __table_args__ = (
        CheckConstraint(_in_clause("status", DONATION_STATUSES), name="ck_donations_status"),
        Index("idx_donations_user_id", "user_id"),
    )


class NotificationSettingsORM(Base):
    """Per-user notification preferences."""

    __tablename__ = "notification_settings"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    )
    expiration_alerts: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    alert_days_before: Mapped[int] = mapped_column(Integer, nullable=False, default=3)
    recipe_recommendations: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    donation_reminders: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    weekly_reports: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=_now, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=_now,
        onupdate=_now,
        nullable=False,
    )


__all__ = [
    "Base",
    "UserORM",
    "FoodItemORM",
    "RecipeORM",
    "FoodBankORM",
    "DonationORM",
    "NotificationSettingsORM",
]
