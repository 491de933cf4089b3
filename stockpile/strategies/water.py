"""Strategy for the water-beverages category."""

from __future__ import annotations

import math

from ..calculations.water import (
    calculate_drinking_water_needed,
    calculate_total_water_required,
)
from ..constants import BOTTLED_WATER_ID, WATER_CATEGORY_ID
from .base import ActualQuantity, CategoryStrategy
from .common import aggregate_quantity_totals, scale_quantity


class WaterCategoryStrategy(CategoryStrategy):
    """Drinking water plus the water stored food needs for preparation.

    Bottled water is based on the configured daily water per person rather
    than the catalog base quantity, and the preparation water of every food
    item in the inventory is added on top of it.
    """

    strategy_id = "water-beverages"

    def can_handle(self, category_id: str) -> bool:
        return category_id == WATER_CATEGORY_ID

    def calculate_recommended_quantity(self, rec_item, context) -> int:
        if rec_item.id != BOTTLED_WATER_ID:
            return math.ceil(scale_quantity(rec_item.base_quantity, rec_item, context))

        qty = scale_quantity(context.options.daily_water_per_person, rec_item, context)
        qty += calculate_total_water_required(context.items, context.catalog)
        return math.ceil(qty)

    def calculate_actual_quantity(self, matching_items, rec_item, context) -> ActualQuantity:
        return ActualQuantity(quantity=sum(item.quantity for item in matching_items))

    def aggregate_totals(self, item_results, context):
        result = aggregate_quantity_totals(item_results)
        result.drinking_water_needed = calculate_drinking_water_needed(
            context.household, context.options
        )
        result.preparation_water_needed = calculate_total_water_required(
            context.items, context.catalog
        )
        return result
