"""Strategy base class and calculation context."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..models import CalculationOptions

if TYPE_CHECKING:
    from ..models import (
        HouseholdConfig,
        InventoryItem,
        ItemCalculationResult,
        RecommendedItemDefinition,
        ShortageCalculationResult,
    )


@dataclass(frozen=True)
class CalculationContext:
    """Inputs shared by every strategy call for one category."""

    category_id: str
    items: tuple[InventoryItem, ...]  # whole inventory, for cross-category needs
    category_items: tuple[InventoryItem, ...]
    recommended_for_category: tuple[RecommendedItemDefinition, ...]
    household: HouseholdConfig
    people_multiplier: float
    catalog: tuple[RecommendedItemDefinition, ...] = ()
    options: CalculationOptions = field(default_factory=CalculationOptions)


@dataclass(frozen=True)
class ActualQuantity:
    quantity: float
    calories: float | None = None


class CategoryStrategy(ABC):
    """Category-specific recommended/actual/aggregate computation."""

    strategy_id: str = ""

    @abstractmethod
    def can_handle(self, category_id: str) -> bool:
        ...

    @abstractmethod
    def calculate_recommended_quantity(
        self, rec_item: RecommendedItemDefinition, context: CalculationContext
    ) -> int:
        """Scaled recommended quantity for one catalog entry (ceiled)."""
        ...

    @abstractmethod
    def calculate_actual_quantity(
        self,
        matching_items: list[InventoryItem],
        rec_item: RecommendedItemDefinition,
        context: CalculationContext,
    ) -> ActualQuantity:
        ...

    @abstractmethod
    def aggregate_totals(
        self,
        item_results: list[ItemCalculationResult],
        context: CalculationContext,
    ) -> ShortageCalculationResult:
        ...

    def comparison_totals(
        self, result: ShortageCalculationResult
    ) -> tuple[float, float]:
        """The (actual, needed) pair the category percentage is based on."""
        return result.total_actual, result.total_needed

    def has_enough_inventory(self, result: ShortageCalculationResult) -> bool:
        """True when the requirement is met. Nothing needed counts as met."""
        actual, needed = self.comparison_totals(result)
        return actual >= needed

    def __repr__(self) -> str:
        return f"{type(self).__name__}(strategy_id={self.strategy_id!r})"
