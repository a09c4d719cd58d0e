"""Expiration alert collection and the periodic sweep that raises them."""

from __future__ import annotations

import logging
from datetime import date
from typing import Callable, List, Optional, Sequence, Tuple

from foodsaver import metrics
from foodsaver.db.food_items import list_expiring_items
from foodsaver.db.notification_settings import (
    list_alert_subscribers,
    load_notification_settings,
)
from foodsaver.models.food import FoodItem
from foodsaver.models.notifications import ExpirationAlert

logger = logging.getLogger(__name__)

SubscriberProvider = Callable[[], Sequence[Tuple[str, str, int]]]
ExpiringProvider = Callable[..., List[FoodItem]]


def expiring_items_for_user(user_id: str, *, today: Optional[date] = None) -> List[FoodItem]:
    """Return the items the user should be alerted about, honouring their settings."""

    settings = load_notification_settings(user_id)
    if not settings.expiration_alerts:
        return []
    return list_expiring_items(user_id, settings.alert_days_before, today=today)


def collect_expiration_alerts(
    *,
    today: Optional[date] = None,
    subscribers: SubscriberProvider = list_alert_subscribers,
    expiring: ExpiringProvider = list_expiring_items,
) -> List[ExpirationAlert]:
    """Build one alert per subscribed user that has at least one expiring item."""

    run_date = today or date.today()
    alerts: List[ExpirationAlert] = []
    for user_id, email, days_ahead in subscribers():
        items = expiring(user_id, days_ahead, today=run_date)
        if not items:
            continue
        alerts.append(
            ExpirationAlert(
                user_id=user_id,
                email=email,
                generated_on=run_date,
                days_ahead=days_ahead,
                items=items,
            )
        )
    return alerts


class ExpirationAlertSweeper:
    """Periodically collect expiration alerts and log them."""

    def __init__(
        self,
        *,
        collector: Callable[[], List[ExpirationAlert]] = collect_expiration_alerts,
    ) -> None:
        self._collector = collector

    def sweep_once(self) -> int:
        """Run a single sweep and return the number of alerts raised."""

        try:
            alerts = self._collector()
        except Exception:
            logger.exception("Expiration alert sweep failed")
            return 0

        for alert in alerts:
            soonest = min(item.expiration_date for item in alert.items)
            logger.info(
                "Expiration alert user_id=%s items=%s window_days=%s soonest=%s",
                alert.user_id,
                len(alert.items),
                alert.days_ahead,
                soonest.isoformat(),
                extra={"user_id": alert.user_id},
            )
        if alerts:
            metrics.EXPIRATION_ALERTS.inc(len(alerts))
        logger.debug("Expiration alert sweep finished alerts=%s", len(alerts))
        return len(alerts)


__all__ = [
    "ExpirationAlertSweeper",
    "collect_expiration_alerts",
    "expiring_items_for_user",
]
