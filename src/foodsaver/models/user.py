"""User and authentication data models."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

UserType = Literal["household", "business"]
SubscriptionPlan = Literal["free", "premium"]


class User(BaseModel):
    """Registered account without credential material."""

    id: str
    email: str
    name: str
    user_type: UserType
    subscription_plan: SubscriptionPlan = Field(default="free")
    created_at: datetime

    model_config = ConfigDict(frozen=True)


class AuthToken(BaseModel):
    """Bearer token issued after registration or login."""

    access_token: str
    token_type: str = Field(default="bearer")
    expires_in: int
    user: User

    model_config = ConfigDict(frozen=True)


__all__ = ["AuthToken", "SubscriptionPlan", "User", "UserType"]
