"""Dashboard alert generation.

Alerts are derived fresh on every call from the inventory snapshot; the
ids are stable so a surrounding layer can remember dismissals.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable, Iterable, Mapping, Sequence
from datetime import datetime
from typing import Any

from .calculations.calories import round_half_up
from .calculations.status import get_days_until_expiration
from .calculations.water import calculate_water_requirements
from .categories import recommended_quantity_for_item
from .constants import (
    ALERT_PRIORITY,
    CRITICALLY_LOW_STOCK_PERCENTAGE,
    CUSTOM_ITEM_TYPE,
    EXPIRING_SOON_ALERT_DAYS,
    LOW_STOCK_PERCENTAGE,
    STANDARD_CATEGORIES,
)
from .models import (
    Alert,
    AlertCounts,
    CalculationOptions,
    HouseholdConfig,
    InventoryItem,
    RecommendedItemDefinition,
)
from .strategies import StrategyRegistry

logger = logging.getLogger(__name__)

TranslationFunction = Callable[..., str]


def _translate(t: TranslationFunction, key: str, params: Mapping[str, Any] | None = None) -> str:
    return t(key, params) if params is not None else t(key)


def get_translated_item_name(item: InventoryItem, t: TranslationFunction) -> str:
    """Catalog translation for template items, the stored name otherwise."""
    template_id = item.product_template_id or item.item_type
    if template_id and template_id != CUSTOM_ITEM_TYPE:
        key = f"products.{template_id}"
        translated = t(key)
        if translated and translated != key:
            return translated
    return item.name


def generate_expiration_alerts(
    items: Iterable[InventoryItem],
    t: TranslationFunction,
    now: datetime,
    expiring_soon_days: int = EXPIRING_SOON_ALERT_DAYS,
) -> list[Alert]:
    alerts: list[Alert] = []
    for item in items:
        days = get_days_until_expiration(item.expiration_date, item.never_expires, now)
        if days is None:
            continue
        if days < 0:
            alerts.append(Alert(
                id=f"expired-{item.id}",
                type="critical",
                message=t("alerts.expiration.expired"),
                item_name=get_translated_item_name(item, t),
            ))
        elif days <= expiring_soon_days:
            alerts.append(Alert(
                id=f"expiring-soon-{item.id}",
                type="warning",
                message=_translate(t, "alerts.expiration.expiringSoon", {"days": days}),
                item_name=get_translated_item_name(item, t),
            ))
    return alerts


def _category_name(category_id: str, t: TranslationFunction) -> str:
    key = f"categories.{category_id}"
    translated = t(key)
    return translated if translated and translated != key else category_id


def _category_order(items: Iterable[InventoryItem]) -> list[str]:
    """Standard categories first, then other categories by first appearance."""
    present: list[str] = []
    for item in items:
        if item.category_id not in present:
            present.append(item.category_id)
    standard = [c for c in STANDARD_CATEGORIES if c in present]
    return standard + [c for c in present if c not in STANDARD_CATEGORIES]


def generate_category_stock_alerts(
    items: Sequence[InventoryItem],
    t: TranslationFunction,
    household: HouseholdConfig | None = None,
    recommended_items: Sequence[RecommendedItemDefinition] = (),
    options: CalculationOptions | None = None,
    registry: StrategyRegistry | None = None,
) -> list[Alert]:
    """At most one stock alert per category that has items."""
    options = options or CalculationOptions()
    registry = registry or StrategyRegistry.default()
    alerts: list[Alert] = []

    for category_id in _category_order(items):
        category_items = [i for i in items if i.category_id == category_id]
        total_actual = sum(i.quantity for i in category_items)
        total_needed = sum(
            recommended_quantity_for_item(
                i, household, recommended_items, options, items, registry
            )
            for i in category_items
        )
        category_name = _category_name(category_id, t)

        if all(i.quantity == 0 for i in category_items):
            alerts.append(Alert(
                id=f"category-out-of-stock-{category_id}",
                type="critical",
                message=t("alerts.stock.outOfStock"),
                item_name=category_name,
            ))
            continue
        if total_actual >= total_needed:
            continue

        percent = total_actual / total_needed * 100
        if percent < CRITICALLY_LOW_STOCK_PERCENTAGE:
            alerts.append(Alert(
                id=f"category-critically-low-{category_id}",
                type="critical",
                message=_translate(
                    t, "alerts.stock.criticallyLow", {"percent": round_half_up(percent)}
                ),
                item_name=category_name,
            ))
        elif percent < LOW_STOCK_PERCENTAGE:
            alerts.append(Alert(
                id=f"category-low-stock-{category_id}",
                type="warning",
                message=_translate(
                    t, "alerts.stock.runningLow", {"percent": round_half_up(percent)}
                ),
                item_name=category_name,
            ))
    return alerts


def round_up_one_decimal(value: float) -> float:
    # round first so float noise like 0.30000000000000004 does not bump a tenth
    return math.ceil(round(value * 10, 9)) / 10


def generate_water_shortage_alerts(
    items: Sequence[InventoryItem],
    t: TranslationFunction,
    household: HouseholdConfig | None,
    recommended_items: Sequence[RecommendedItemDefinition] = (),
    options: CalculationOptions | None = None,
) -> list[Alert]:
    """Warn when water left after drinking needs cannot cover food preparation."""
    if household is None:
        return []

    requirements = calculate_water_requirements(
        items, recommended_items, household, options
    )
    if requirements.water_shortfall <= 0:
        return []

    return [Alert(
        id="water-shortage-preparation",
        type="warning",
        message=_translate(
            t,
            "alerts.water.preparationShortage",
            {"liters": round_up_one_decimal(requirements.water_shortfall)},
        ),
    )]


def sort_alerts(alerts: Iterable[Alert]) -> list[Alert]:
    """Critical first, then warning, then info; generation order otherwise."""
    return sorted(alerts, key=lambda a: ALERT_PRIORITY.get(a.type, len(ALERT_PRIORITY)))


def generate_alerts(
    items: Sequence[InventoryItem],
    t: TranslationFunction,
    household: HouseholdConfig | None = None,
    recommended_items: Sequence[RecommendedItemDefinition] = (),
    *,
    now: datetime | None = None,
    options: CalculationOptions | None = None,
    expiring_soon_days: int = EXPIRING_SOON_ALERT_DAYS,
    registry: StrategyRegistry | None = None,
) -> list[Alert]:
    """All alerts for the inventory, most severe first.

    Args:
        items: Full inventory snapshot.
        t: Translation lookup called as ``t(key)`` or ``t(key, params)``.
        household: Needed for catalog-based stock targets and water alerts.
        recommended_items: Effective catalog.
        now: Reference time, read once per call when omitted.
        options: Requirement settings.
        expiring_soon_days: Window for "expiring soon" warnings.
        registry: Category strategies used for stock targets.
    """
    now = now or datetime.now()
    items = list(items)

    alerts = [
        *generate_expiration_alerts(items, t, now, expiring_soon_days),
        *generate_category_stock_alerts(
            items, t, household, recommended_items, options, registry
        ),
        *generate_water_shortage_alerts(items, t, household, recommended_items, options),
    ]
    result = sort_alerts(alerts)
    logger.debug("Generated %d alerts for %d items", len(result), len(items))
    return result


def count_alerts(alerts: Iterable[Alert]) -> AlertCounts:
    """Tally alerts by severity for badge display."""
    counts = {"critical": 0, "warning": 0, "info": 0}
    total = 0
    for alert in alerts:
        total += 1
        if alert.type in counts:
            counts[alert.type] += 1
    return AlertCounts(total=total, **counts)


def filter_dismissed(alerts: Iterable[Alert], dismissed_ids: Iterable[str]) -> list[Alert]:
    """Drop alerts whose ids the user has dismissed."""
    dismissed = set(dismissed_ids)
    return [a for a in alerts if a.id not in dismissed]
