"""Fallback strategy for categories without special rules."""

from __future__ import annotations

from .base import ActualQuantity, CategoryStrategy
from .common import aggregate_quantity_totals, calculate_base_recommended_quantity


class DefaultCategoryStrategy(CategoryStrategy):
    """Quantity sums, switching to item-count totals when units are mixed."""

    strategy_id = "default"

    def can_handle(self, category_id: str) -> bool:
        return True

    def calculate_recommended_quantity(self, rec_item, context) -> int:
        return calculate_base_recommended_quantity(rec_item, context)

    def calculate_actual_quantity(self, matching_items, rec_item, context) -> ActualQuantity:
        return ActualQuantity(quantity=sum(item.quantity for item in matching_items))

    def aggregate_totals(self, item_results, context):
        return aggregate_quantity_totals(item_results)
