"""Donation models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field

DonationStatus = Literal["pending", "confirmed", "completed", "cancelled"]

DONATION_STATUSES: tuple[str, ...] = get_args(DonationStatus)


class Donation(BaseModel):
    """Pledge of surplus food items to a recipient organization."""

    id: str
    user_id: str
    food_item_ids: list[str] = Field(default_factory=list)
    recipient_organization: str
    pickup_date: datetime
    status: DonationStatus = Field(default="pending")
    notes: Optional[str] = Field(default=None)
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(frozen=True)


__all__ = ["DONATION_STATUSES", "Donation", "DonationStatus"]
