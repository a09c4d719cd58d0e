"""Analytics and waste report models."""

from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Overview(BaseModel):
    total_items: int = 0
    consumed_items: int = 0
    expired_items: int = 0
    waste_reduction: float = 0.0


class Financial(BaseModel):
    total_value: float = 0.0
    saved_value: float = 0.0
    wasted_value: float = 0.0
    savings_rate: float = 0.0


class CategoryCount(BaseModel):
    name: str
    value: int


class MonthlyTrend(BaseModel):
    month: str
    consumed: int
    saved: float


class DonationStats(BaseModel):
    total_donations: int = 0
    completed_donations: int = 0


class EnvironmentalImpact(BaseModel):
    co2_saved: float = Field(default=0.0, description="Estimated kg of CO2 saved.")
    water_saved: float = Field(default=0.0, description="Estimated litres of water saved.")
    meals_donated: int = 0


class Analytics(BaseModel):
    """Aggregate statistics over a user's inventory and donations."""

    overview: Overview = Field(default_factory=Overview)
    financial: Financial = Field(default_factory=Financial)
    category_breakdown: list[CategoryCount] = Field(default_factory=list)
    monthly_trend: list[MonthlyTrend] = Field(default_factory=list)
    donations: DonationStats = Field(default_factory=DonationStats)
    environmental: EnvironmentalImpact = Field(default_factory=EnvironmentalImpact)


class WastedItem(BaseModel):
    name: str
    category: str
    quantity: float
    unit: str
    cost: Optional[float] = None
    expiration_date: date
    days_expired: int

    model_config = ConfigDict(frozen=True)


class WasteSummary(BaseModel):
    total_wasted_items: int = 0
    total_wasted_value: float = 0.0
    average_days_expired: float = 0.0
    category_breakdown: dict[str, int] = Field(default_factory=dict)


class WasteReport(BaseModel):
    """Items that expired unconsumed within a reporting period."""

    period_days: int
    summary: WasteSummary = Field(default_factory=WasteSummary)
    items: list[WastedItem] = Field(default_factory=list)


__all__ = [
    "Analytics",
    "CategoryCount",
    "DonationStats",
    "EnvironmentalImpact",
    "Financial",
    "MonthlyTrend",
    "Overview",
    "WasteReport",
    "WasteSummary",
    "WastedItem",
]
