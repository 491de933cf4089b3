"""Per-category shortage and status calculation.

Drives the category's strategy across every recommended item of the
category and classifies the result.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from .calculations.calories import round_half_up
from .calculations.matching import find_matching_items, item_matches_definition
from .calculations.status import get_status_from_percentage
from .calculations.water import people_multiplier
from .models import (
    CalculationOptions,
    CategoryStatus,
    HouseholdConfig,
    InventoryItem,
    ItemCalculationResult,
    RecommendedItemDefinition,
    ShortageCalculationResult,
)
from .strategies import CalculationContext, StrategyRegistry


def build_calculation_context(
    category_id: str,
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    recommended_items: Sequence[RecommendedItemDefinition],
    disabled_recommended_items: Iterable[str] = (),
    options: CalculationOptions | None = None,
) -> CalculationContext:
    options = options or CalculationOptions()
    disabled = set(disabled_recommended_items)
    catalog = tuple(r for r in recommended_items if r.id not in disabled)
    return CalculationContext(
        category_id=category_id,
        items=tuple(items),
        category_items=tuple(i for i in items if i.category_id == category_id),
        recommended_for_category=tuple(r for r in catalog if r.category == category_id),
        household=household,
        people_multiplier=people_multiplier(household, options),
        catalog=catalog,
        options=options,
    )


def calculate_category_shortages(
    category_id: str,
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    recommended_items: Sequence[RecommendedItemDefinition],
    disabled_recommended_items: Iterable[str] = (),
    options: CalculationOptions | None = None,
    registry: StrategyRegistry | None = None,
) -> ShortageCalculationResult:
    """Shortages and totals for one category.

    Recommended items whose scaled quantity is 0 (e.g. pet supplies in a
    household without pets) are skipped.
    """
    context = build_calculation_context(
        category_id, items, household, recommended_items,
        disabled_recommended_items, options,
    )
    if not context.recommended_for_category:
        return ShortageCalculationResult()

    strategy = (registry or StrategyRegistry.default()).get(category_id)

    item_results: list[ItemCalculationResult] = []
    for rec_item in context.recommended_for_category:
        recommended_qty = strategy.calculate_recommended_quantity(rec_item, context)
        if recommended_qty == 0:
            continue

        matching = find_matching_items(context.category_items, rec_item)
        actual = strategy.calculate_actual_quantity(matching, rec_item, context)
        item_results.append(
            ItemCalculationResult(
                rec_item=rec_item,
                recommended_qty=recommended_qty,
                actual_qty=actual.quantity,
                matching_items=matching,
                has_marked_as_enough=any(i.marked_as_enough for i in matching),
                actual_calories=actual.calories,
            )
        )

    return strategy.aggregate_totals(item_results, context)


def completion_percentage(actual: float, needed: float) -> float:
    """Uncapped completion percentage. Nothing needed means fully satisfied."""
    if needed <= 0:
        return 100.0
    return actual / needed * 100


def get_category_status(
    category_id: str,
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    recommended_items: Sequence[RecommendedItemDefinition],
    disabled_recommended_items: Iterable[str] = (),
    options: CalculationOptions | None = None,
    registry: StrategyRegistry | None = None,
) -> CategoryStatus:
    """Status, completion and totals for displaying one category."""
    registry = registry or StrategyRegistry.default()
    disabled = tuple(disabled_recommended_items)
    result = calculate_category_shortages(
        category_id, items, household, recommended_items, disabled, options, registry
    )
    strategy = registry.get(category_id)

    has_recommendations = any(
        r.category == category_id and r.id not in disabled for r in recommended_items
    )
    has_enough = strategy.has_enough_inventory(result)
    percentage = completion_percentage(*strategy.comparison_totals(result))

    if has_enough:
        status = "ok"
        completion = 100
    else:
        status = get_status_from_percentage(percentage)
        completion = min(round_half_up(percentage), 100)

    return CategoryStatus(
        category_id=category_id,
        status=status,
        completion_percentage=completion,
        total_actual=result.total_actual,
        total_needed=result.total_needed,
        primary_unit=result.primary_unit,
        shortages=result.shortages,
        has_recommendations=has_recommendations,
        total_actual_calories=result.total_actual_calories,
        total_needed_calories=result.total_needed_calories,
        missing_calories=result.missing_calories,
        drinking_water_needed=result.drinking_water_needed,
        preparation_water_needed=result.preparation_water_needed,
    )


def calculate_all_category_statuses(
    category_ids: Iterable[str],
    items: Sequence[InventoryItem],
    household: HouseholdConfig,
    recommended_items: Sequence[RecommendedItemDefinition],
    disabled_recommended_items: Iterable[str] = (),
    options: CalculationOptions | None = None,
    registry: StrategyRegistry | None = None,
) -> list[CategoryStatus]:
    registry = registry or StrategyRegistry.default()
    disabled = tuple(disabled_recommended_items)
    return [
        get_category_status(
            category_id, items, household, recommended_items, disabled, options, registry
        )
        for category_id in category_ids
    ]


def calculate_preparedness_score(statuses: Sequence[CategoryStatus]) -> int:
    """Share of categories in ok status, as a 0-100 score."""
    if not statuses:
        return 0
    ok = sum(1 for s in statuses if s.status == "ok")
    return round_half_up(ok / len(statuses) * 100)


def recommended_quantity_for_item(
    item: InventoryItem,
    household: HouseholdConfig | None,
    recommended_items: Sequence[RecommendedItemDefinition],
    options: CalculationOptions | None = None,
    items: Sequence[InventoryItem] = (),
    registry: StrategyRegistry | None = None,
) -> float:
    """Target quantity for a single stored item.

    Recomputed by the category's strategy from the first matching catalog
    definition when a household is known, otherwise the value cached on the
    item. ``items`` is the full inventory, used by rules that depend on
    other stored items (preparation water for bottled water).
    """
    if household is None:
        return item.recommended_quantity
    for rec_item in recommended_items:
        if item_matches_definition(item, rec_item):
            context = build_calculation_context(
                rec_item.category, items, household, recommended_items, options=options
            )
            strategy = (registry or StrategyRegistry.default()).get(rec_item.category)
            return strategy.calculate_recommended_quantity(rec_item, context)
    return item.recommended_quantity
