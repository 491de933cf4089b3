"""Calorie-based strategy for the food category."""

from __future__ import annotations

from ..calculations.calories import (
    get_template_calories_per_unit,
    get_template_weight_per_unit,
)
from ..calculations.matching import sum_items_calories
from ..constants import FOOD_CATEGORY_ID
from .base import ActualQuantity, CategoryStrategy
from .common import aggregate_quantity_totals, calculate_base_recommended_quantity


class FoodCategoryStrategy(CategoryStrategy):
    """Food sufficiency is judged on calories, not unit counts.

    A smaller amount of a calorie-dense substitute can cover the
    requirement even when the quantities look low. Quantity totals are still
    reported for the shortage list.
    """

    strategy_id = "food"

    def can_handle(self, category_id: str) -> bool:
        return category_id == FOOD_CATEGORY_ID

    def calculate_recommended_quantity(self, rec_item, context) -> int:
        return calculate_base_recommended_quantity(rec_item, context)

    def calculate_actual_quantity(self, matching_items, rec_item, context) -> ActualQuantity:
        calories = sum_items_calories(
            matching_items,
            get_template_calories_per_unit(rec_item),
            get_template_weight_per_unit(rec_item),
        )
        return ActualQuantity(
            quantity=sum(item.quantity for item in matching_items),
            calories=calories,
        )

    def aggregate_totals(self, item_results, context):
        result = aggregate_quantity_totals(item_results)

        actual_calories = sum(r.actual_calories or 0 for r in item_results)
        needed_calories = sum(
            r.recommended_qty * (get_template_calories_per_unit(r.rec_item) or 0)
            for r in item_results
        )
        result.total_actual_calories = actual_calories
        result.total_needed_calories = needed_calories
        result.missing_calories = max(0, needed_calories - actual_calories)
        return result

    def comparison_totals(self, result):
        # Fall back to quantities when no catalog entry carries calorie data
        if result.total_needed_calories:
            return result.total_actual_calories or 0, result.total_needed_calories
        return result.total_actual, result.total_needed
