"""Item-type presence strategy for the communication-info category."""

from __future__ import annotations

from ..constants import COMMUNICATION_CATEGORY_ID
from ..models import ShortageCalculationResult
from .base import ActualQuantity, CategoryStrategy
from .common import calculate_base_recommended_quantity, collect_shortages


class CommunicationCategoryStrategy(CategoryStrategy):
    """Each recommended device is one slot, regardless of units or amounts.

    A slot is fulfilled when the stored amount reaches the recommendation or
    any matching item is marked as enough.
    """

    strategy_id = "communication-info"

    def can_handle(self, category_id: str) -> bool:
        return category_id == COMMUNICATION_CATEGORY_ID

    def calculate_recommended_quantity(self, rec_item, context) -> int:
        return calculate_base_recommended_quantity(rec_item, context)

    def calculate_actual_quantity(self, matching_items, rec_item, context) -> ActualQuantity:
        return ActualQuantity(quantity=sum(item.quantity for item in matching_items))

    def aggregate_totals(self, item_results, context):
        fulfilled = sum(
            1
            for r in item_results
            if r.actual_qty >= r.recommended_qty or r.has_marked_as_enough
        )
        return ShortageCalculationResult(
            shortages=collect_shortages(item_results),
            total_actual=fulfilled,
            total_needed=len(item_results),
            primary_unit=None,
        )
