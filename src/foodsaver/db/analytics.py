"""Aggregate queries backing the analytics dashboard and waste report."""

from __future__ import annotations

import calendar
import logging
from collections import Counter
from datetime import date, datetime, time, timedelta
from typing import Optional

from sqlalchemy import and_, case, desc, func, select

from foodsaver.models.analytics import (
    Analytics,
    CategoryCount,
    DonationStats,
    EnvironmentalImpact,
    Financial,
    MonthlyTrend,
    Overview,
    WasteReport,
    WasteSummary,
    WastedItem,
)

from .models import DonationORM, FoodItemORM
from .repository import session_scope

logger = logging.getLogger(__name__)

CO2_KG_PER_CONSUMED_ITEM = 0.5
WATER_LITRES_PER_CONSUMED_ITEM = 2.5
MEALS_PER_COMPLETED_DONATION = 3
TREND_MONTHS = 6


def months_ago(day: date, months: int) -> date:
    """Return the same day-of-month ``months`` earlier, clamped to the month's length."""

    month_index = day.year * 12 + (day.month - 1) - months
    year, month_zero = divmod(month_index, 12)
    month = month_zero + 1
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day.day, last_day))


def _percentage(part: float, whole: float) -> float:
    return (part / whole) * 100 if whole > 0 else 0.0


def build_analytics(user_id: str, *, today: Optional[date] = None) -> Analytics:
    """Compute inventory, financial, trend and donation statistics for a user."""

    today = today or date.today()
    owned = FoodItemORM.user_id == user_id
    consumed = FoodItemORM.is_consumed.is_(True)
    expired = and_(FoodItemORM.is_consumed.is_(False), FoodItemORM.expiration_date < today)
    cost_sum = func.coalesce(func.sum(FoodItemORM.cost), 0.0)

    with session_scope() as session:
        total_items = session.scalar(select(func.count(FoodItemORM.id)).where(owned)) or 0
        consumed_items = (
            session.scalar(select(func.count(FoodItemORM.id)).where(owned, consumed)) or 0
        )
        expired_items = session.scalar(select(func.count(FoodItemORM.id)).where(owned, expired)) or 0

        total_value = float(session.scalar(select(cost_sum).where(owned)) or 0.0)
        saved_value = float(session.scalar(select(cost_sum).where(owned, consumed)) or 0.0)
        wasted_value = float(session.scalar(select(cost_sum).where(owned, expired)) or 0.0)

        item_count = func.count(FoodItemORM.id).label("item_count")
        category_rows = session.execute(
            select(FoodItemORM.category, item_count)
            .where(owned)
            .group_by(FoodItemORM.category)
            .order_by(desc("item_count"), FoodItemORM.category)
        ).all()

        month = func.strftime("%Y-%m", FoodItemORM.consumed_at).label("month")
        cutoff = datetime.combine(months_ago(today, TREND_MONTHS), time.min)
        trend_rows = session.execute(
            select(month, func.count(FoodItemORM.id), cost_sum)
            .where(
                owned,
                consumed,
                FoodItemORM.consumed_at.is_not(None),
                FoodItemORM.consumed_at >= cutoff,
            )
            .group_by(month)
            .order_by(month)
        ).all()

        donation_row = session.execute(
            select(
                func.count(DonationORM.id),
                func.count(case((DonationORM.status == "completed", 1))),
            ).where(DonationORM.user_id == user_id)
        ).one()

    total_donations, completed_donations = int(donation_row[0]), int(donation_row[1])
    logger.debug(
        "Analytics user_id=%s total=%s consumed=%s expired=%s",
        user_id,
        total_items,
        consumed_items,
        expired_items,
    )

    return Analytics(
        overview=Overview(
            total_items=total_items,
            consumed_items=consumed_items,
            expired_items=expired_items,
            waste_reduction=_percentage(consumed_items, total_items),
        ),
        financial=Financial(
            total_value=total_value,
            saved_value=saved_value,
            wasted_value=wasted_value,
            savings_rate=_percentage(saved_value, total_value),
        ),
        category_breakdown=[
            CategoryCount(name=category.capitalize(), value=int(count))
            for category, count in category_rows
        ],
        monthly_trend=[
            MonthlyTrend(month=row[0], consumed=int(row[1]), saved=float(row[2]))
            for row in trend_rows
        ],
        donations=DonationStats(
            total_donations=total_donations,
            completed_donations=completed_donations,
        ),
        environmental=EnvironmentalImpact(
            co2_saved=consumed_items * CO2_KG_PER_CONSUMED_ITEM,
            water_saved=consumed_items * WATER_LITRES_PER_CONSUMED_ITEM,
            meals_donated=completed_donations * MEALS_PER_COMPLETED_DONATION,
        ),
    )


def build_waste_report(
    user_id: str,
    period_days: int = 30,
    *,
    today: Optional[date] = None,
) -> WasteReport:
    """List items that expired unconsumed during the last ``period_days`` days."""

    today = today or date.today()
    window_start = today - timedelta(days=period_days)

    with session_scope() as session:
        rows = (
            session.execute(
                select(FoodItemORM)
                .where(
                    FoodItemORM.user_id == user_id,
                    FoodItemORM.is_consumed.is_(False),
                    FoodItemORM.expiration_date < today,
                    FoodItemORM.expiration_date >= window_start,
                )
                .order_by(FoodItemORM.expiration_date.desc(), FoodItemORM.name)
            )
            .scalars()
            .all()
        )
        items = [
            WastedItem(
                name=row.name,
                category=row.category,
                quantity=row.quantity,
                unit=row.unit,
                cost=row.cost,
                expiration_date=row.expiration_date,
                days_expired=(today - row.expiration_date).days,
            )
            for row in rows
        ]

    summary = WasteSummary(
        total_wasted_items=len(items),
        total_wasted_value=sum(item.cost or 0.0 for item in items),
        average_days_expired=(
            sum(item.days_expired for item in items) / len(items) if items else 0.0
        ),
        category_breakdown=dict(Counter(item.category for item in items)),
    )
    return WasteReport(period_days=period_days, summary=summary, items=items)


__all__ = ["build_analytics", "build_waste_report", "months_ago"]
