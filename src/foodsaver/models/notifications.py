"""Notification preference and alert models."""

from __future__ import annotations

from datetime import date

from pydantic import BaseModel, ConfigDict, Field

from foodsaver.models.food import FoodItem


class NotificationSettings(BaseModel):
    """Per-user notification preferences."""

    expiration_alerts: bool = Field(default=True)
    alert_days_before: int = Field(default=3, ge=0, le=30)
    recipe_recommendations: bool = Field(default=True)
    donation_reminders: bool = Field(default=True)
    weekly_reports: bool = Field(default=False)

    model_config = ConfigDict(frozen=True)


class ExpirationAlert(BaseModel):
    """Items about to expire for a single user."""

    user_id: str
    email: str
    generated_on: date
    days_ahead: int
    items: list[FoodItem] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


__all__ = ["ExpirationAlert", "NotificationSettings"]
