"""Helpers shared by the category strategies."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ..constants import PET_REQUIREMENT_MULTIPLIER
from ..models import CategoryShortage, ShortageCalculationResult

if TYPE_CHECKING:
    from ..models import ItemCalculationResult, RecommendedItemDefinition
    from .base import CalculationContext


def scale_quantity(
    quantity: float,
    rec_item: RecommendedItemDefinition,
    context: CalculationContext,
) -> float:
    """Apply people, pet and day scaling without rounding."""
    if rec_item.scale_with_people:
        quantity *= context.people_multiplier
    if rec_item.scale_with_pets:
        quantity *= context.household.pets * PET_REQUIREMENT_MULTIPLIER
    if rec_item.scale_with_days:
        quantity *= context.household.supply_duration_days
    return quantity


def calculate_base_recommended_quantity(
    rec_item: RecommendedItemDefinition, context: CalculationContext
) -> int:
    """Base quantity with standard scaling, ceiled once at the end."""
    return math.ceil(scale_quantity(rec_item.base_quantity, rec_item, context))


def _shortage_for(result: ItemCalculationResult) -> CategoryShortage | None:
    if result.has_marked_as_enough:
        return None
    shortage = CategoryShortage.create(
        result.rec_item, result.actual_qty, result.recommended_qty
    )
    return shortage if shortage.missing > 0 else None


def collect_shortages(
    item_results: list[ItemCalculationResult],
) -> list[CategoryShortage]:
    """Unmet, non-overridden items, largest missing amount first."""
    shortages = [s for s in map(_shortage_for, item_results) if s is not None]
    shortages.sort(key=lambda s: s.missing, reverse=True)
    return shortages


def has_mixed_units(item_results: list[ItemCalculationResult]) -> bool:
    return len({r.unit for r in item_results}) > 1


def aggregate_standard_totals(
    item_results: list[ItemCalculationResult],
) -> ShortageCalculationResult:
    """Sum quantities of single-unit results.

    Marked-as-enough only hides the shortage; totals still use real amounts.
    """
    unit_counts: dict[str, float] = {}
    for r in item_results:
        unit_counts[r.unit] = unit_counts.get(r.unit, 0) + r.recommended_qty

    primary_unit = max(unit_counts, key=unit_counts.__getitem__) if unit_counts else None

    return ShortageCalculationResult(
        shortages=collect_shortages(item_results),
        total_actual=sum(r.actual_qty for r in item_results),
        total_needed=sum(r.recommended_qty for r in item_results),
        primary_unit=primary_unit,
    )


def fulfillment_ratio(result: ItemCalculationResult) -> float:
    if result.has_marked_as_enough or result.recommended_qty == 0:
        return 1.0
    return min(result.actual_qty / result.recommended_qty, 1.0)


def aggregate_mixed_units_totals(
    item_results: list[ItemCalculationResult],
) -> ShortageCalculationResult:
    """Item-count totals for categories whose units cannot be summed.

    Each recommended item contributes its capped fulfillment ratio, so
    ``total_needed`` is the number of items and the unit is None.
    """
    return ShortageCalculationResult(
        shortages=collect_shortages(item_results),
        total_actual=sum(fulfillment_ratio(r) for r in item_results),
        total_needed=len(item_results),
        primary_unit=None,
    )


def aggregate_quantity_totals(
    item_results: list[ItemCalculationResult],
) -> ShortageCalculationResult:
    if has_mixed_units(item_results):
        return aggregate_mixed_units_totals(item_results)
    return aggregate_standard_totals(item_results)
