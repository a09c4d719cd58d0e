"""Pydantic models defining shared data contracts."""

from foodsaver.models.analytics import (
    Analytics,
    CategoryCount,
    MonthlyTrend,
    WasteReport,
    WasteSummary,
    WastedItem,
)
from foodsaver.models.donation import DONATION_STATUSES, Donation, DonationStatus
from foodsaver.models.food import (
    FOOD_CATEGORIES,
    STORAGE_LOCATIONS,
    FoodCategory,
    FoodItem,
    StorageLocation,
)
from foodsaver.models.food_bank import Coordinates, FoodBank
from foodsaver.models.notifications import ExpirationAlert, NotificationSettings
from foodsaver.models.recipe import Recipe, RecipeCategory, RecipeRecommendation
from foodsaver.models.user import AuthToken, SubscriptionPlan, User, UserType

__all__ = [
    "Analytics",
    "CategoryCount",
    "MonthlyTrend",
    "WasteReport",
    "WasteSummary",
    "WastedItem",
    "DONATION_STATUSES",
    "Donation",
    "DonationStatus",
    "FOOD_CATEGORIES",
    "STORAGE_LOCATIONS",
    "FoodCategory",
    "FoodItem",
    "StorageLocation",
    "Coordinates",
    "FoodBank",
    "ExpirationAlert",
    "NotificationSettings",
    "Recipe",
    "RecipeCategory",
    "RecipeRecommendation",
    "AuthToken",
    "SubscriptionPlan",
    "User",
    "UserType",
]
