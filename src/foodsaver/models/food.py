"""Food inventory data models."""

from __future__ import annotations

from datetime import date, datetime
from typing import Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field

FoodCategory = Literal[
    "vegetables",
    "fruits",
    "meats",
    "dairy",
    "grains",
    "canned",
    "frozen",
    "snacks",
    "beverages",
    "other",
]
StorageLocation = Literal["refrigerator", "freezer", "pantry", "counter"]

FOOD_CATEGORIES: tuple[str, ...] = get_args(FoodCategory)
STORAGE_LOCATIONS: tuple[str, ...] = get_args(StorageLocation)


class FoodItem(BaseModel):
    """Perishable item tracked in a user's inventory."""

    id: str
    user_id: str
    name: str
    category: FoodCategory
    quantity: float = Field(ge=0)
    unit: str
    purchase_date: date
    expiration_date: date
    storage_location: StorageLocation
    cost: Optional[float] = Field(default=None)
    barcode: Optional[str] = Field(default=None)
    is_consumed: bool = Field(default=False)
    consumed_at: Optional[datetime] = Field(default=None)
    created_at: datetime
    updated_at: datetime

    model_config = ConfigDict(frozen=True)

    def days_until_expiration(self, today: date | None = None) -> int:
        return (self.expiration_date - (today or date.today())).days


__all__ = [
    "FOOD_CATEGORIES",
    "STORAGE_LOCATIONS",
    "FoodCategory",
    "FoodItem",
    "StorageLocation",
]
