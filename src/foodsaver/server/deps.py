"""Dependency definitions for the FoodSaver API server."""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from foodsaver.alerts import expiring_items_for_user
from foodsaver.db.analytics import build_analytics, build_waste_report
from foodsaver.db.donations import create_donation, list_donations, update_donation_status
from foodsaver.db.food_banks import list_located_food_banks, search_food_banks
from foodsaver.db.food_items import (
    consume_food_item,
    create_food_item,
    delete_food_item,
    get_food_item,
    list_available_ingredient_names,
    list_expiring_items,
    list_food_items,
    update_food_item,
)
from foodsaver.db.notification_settings import (
    load_notification_settings,
    save_notification_settings,
)
from foodsaver.db.recipes import get_recipe, list_recipes
from foodsaver.db.users import authenticate_user, create_user, get_user, upgrade_subscription
from foodsaver.models.analytics import Analytics, WasteReport
from foodsaver.models.donation import Donation
from foodsaver.models.food import FoodItem
from foodsaver.models.food_bank import FoodBank
from foodsaver.models.notifications import NotificationSettings
from foodsaver.models.recipe import Recipe
from foodsaver.models.user import User
from foodsaver.security import verify_token

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

UserLookup = Callable[[str], Optional[User]]
UserRegistrar = Callable[[dict], User]
UserAuthenticator = Callable[[str, str], Optional[User]]
SubscriptionUpgrader = Callable[[str], User]
FoodItemProvider = Callable[[str], List[FoodItem]]
FoodItemFetcher = Callable[[str, str], Optional[FoodItem]]
FoodItemCreator = Callable[[str, dict], FoodItem]
FoodItemUpdater = Callable[[str, str, dict], FoodItem]
FoodItemDeleter = Callable[[str, str], None]
FoodItemConsumer = Callable[[str, str, Optional[float]], FoodItem]
ExpiringItemsProvider = Callable[[str, int], List[FoodItem]]
RecipeProvider = Callable[[], List[Recipe]]
RecipeFetcher = Callable[[str], Optional[Recipe]]
IngredientProvider = Callable[[str], List[str]]
DonationProvider = Callable[[str], List[Donation]]
DonationCreator = Callable[[str, dict], Donation]
DonationStatusUpdater = Callable[[str, str, str], Donation]
FoodBankSearcher = Callable[[Optional[str], Optional[str], Optional[str]], List[FoodBank]]
LocatedFoodBankProvider = Callable[[], List[FoodBank]]
AnalyticsProvider = Callable[[str], Analytics]
WasteReportProvider = Callable[[str, int], WasteReport]
NotificationSettingsProvider = Callable[[str], NotificationSettings]
NotificationSettingsSaver = Callable[[str, dict], NotificationSettings]
ExpirationAlertProvider = Callable[[str], List[FoodItem]]


def get_user_lookup() -> UserLookup:
    return get_user


def get_user_registrar() -> UserRegistrar:
    return lambda payload: create_user(**payload)


def get_user_authenticator() -> UserAuthenticator:
    return authenticate_user


def get_subscription_upgrader() -> SubscriptionUpgrader:
    return upgrade_subscription


def get_food_item_provider() -> FoodItemProvider:
    return list_food_items


def get_food_item_fetcher() -> FoodItemFetcher:
    return get_food_item


def get_food_item_creator() -> FoodItemCreator:
    return lambda user_id, payload: create_food_item(user_id, **payload)


def get_food_item_updater() -> FoodItemUpdater:
    return lambda user_id, item_id, payload: update_food_item(user_id, item_id, **payload)


def get_food_item_deleter() -> FoodItemDeleter:
    return delete_food_item


def get_food_item_consumer() -> FoodItemConsumer:
    return lambda user_id, item_id, quantity=None: consume_food_item(user_id, item_id, quantity)


def get_expiring_items_provider() -> ExpiringItemsProvider:
    return lambda user_id, days: list_expiring_items(user_id, days)


def get_recipe_provider() -> RecipeProvider:
    return list_recipes


def get_recipe_fetcher() -> RecipeFetcher:
    return get_recipe


def get_ingredient_provider() -> IngredientProvider:
    return list_available_ingredient_names


def get_donation_provider() -> DonationProvider:
    return list_donations


def get_donation_creator() -> DonationCreator:
    return lambda user_id, payload: create_donation(user_id, **payload)


def get_donation_status_updater() -> DonationStatusUpdater:
    return update_donation_status


def get_food_bank_searcher() -> FoodBankSearcher:
    return lambda search, country, city: search_food_banks(
        search=search,
        country=country,
        city=city,
    )


def get_located_food_bank_provider() -> LocatedFoodBankProvider:
    return list_located_food_banks


def get_analytics_provider() -> AnalyticsProvider:
    return lambda user_id: build_analytics(user_id)


def get_waste_report_provider() -> WasteReportProvider:
    return lambda user_id, period: build_waste_report(user_id, period)


def get_notification_settings_provider() -> NotificationSettingsProvider:
    return load_notification_settings


def get_notification_settings_saver() -> NotificationSettingsSaver:
    return lambda user_id, payload: save_notification_settings(user_id, **payload)


def get_expiration_alert_provider() -> ExpirationAlertProvider:
    return lambda user_id: expiring_items_for_user(user_id)


def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    user_lookup: UserLookup = Depends(get_user_lookup),
) -> User:
    """Resolve the bearer token into the calling user."""

    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Access token required",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token_data = verify_token(credentials.credentials)
    if token_data is None:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Invalid or expired token",
        )

    user = user_lookup(token_data.user_id)
    if user is None:
        logger.warning("Token references unknown user_id=%s", token_data.user_id)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid token",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    user_lookup: UserLookup = Depends(get_user_lookup),
) -> Optional[User]:
    """Return the calling user when a valid token is supplied, otherwise ``None``."""

    if credentials is None:
        return None
    try:
        return get_current_user(credentials, user_lookup)
    except HTTPException:
        return None
