"""Food bank directory models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Coordinates(BaseModel):
    lat: float = Field(ge=-90, le=90)
    lng: float = Field(ge=-180, le=180)

    model_config = ConfigDict(frozen=True)


class FoodBank(BaseModel):
    """Food bank accepting donations."""

    id: str
    name: str
    address: str
    phone: str
    email: str
    accepted_items: list[str] = Field(default_factory=list)
    operating_hours: str
    website: Optional[str] = Field(default=None)
    country: str
    city: str
    coordinates: Optional[Coordinates] = Field(default=None)
    distance: Optional[float] = Field(default=None, description="Kilometres from the query point.")

    model_config = ConfigDict(frozen=True)


__all__ = ["Coordinates", "FoodBank"]
