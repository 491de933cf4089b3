"""Tests for the strategy registry."""

import pytest

from stockpile.categories import calculate_category_shortages
from stockpile.models import HouseholdConfig, RecommendedItemDefinition, ShortageCalculationResult
from stockpile.strategies import (
    ActualQuantity,
    CategoryStrategy,
    DefaultCategoryStrategy,
    FoodCategoryStrategy,
    StrategyRegistry,
)


class FixedStrategy(CategoryStrategy):
    """Always recommends 7 of everything in one category."""

    strategy_id = "fixed"

    def __init__(self, category_id: str = "garden"):
        self.category_id = category_id

    def can_handle(self, category_id):
        return category_id == self.category_id

    def calculate_recommended_quantity(self, rec_item, context):
        return 7

    def calculate_actual_quantity(self, matching_items, rec_item, context):
        return ActualQuantity(quantity=0)

    def aggregate_totals(self, item_results, context):
        return ShortageCalculationResult(
            total_actual=0,
            total_needed=sum(r.recommended_qty for r in item_results),
        )


def test_default_order():
    """Built-in strategies are checked in order with the default last."""
    registry = StrategyRegistry.default()
    assert registry.strategy_ids == [
        "food", "water-beverages", "communication-info", "default",
    ]
    assert len(registry) == 4


def test_get_dispatches_by_category():
    registry = StrategyRegistry.default()
    assert isinstance(registry.get("food"), FoodCategoryStrategy)
    assert isinstance(registry.get("anything-else"), DefaultCategoryStrategy)


def test_register_inserts_before_default():
    """New strategies take priority without removing the fallback."""
    registry = StrategyRegistry.default().register(FixedStrategy())
    assert registry.strategy_ids[-2:] == ["fixed", "default"]
    assert isinstance(registry.get("garden"), FixedStrategy)
    assert isinstance(registry.get("tools-supplies"), DefaultCategoryStrategy)


def test_register_appends_without_default():
    registry = StrategyRegistry([FoodCategoryStrategy()]).register(FixedStrategy())
    assert registry.strategy_ids == ["food", "fixed"]


def test_registries_are_independent():
    """Registering on one registry leaves others untouched."""
    StrategyRegistry.default().register(FixedStrategy())
    assert "fixed" not in StrategyRegistry.default().strategy_ids


def test_get_without_fallback_raises():
    registry = StrategyRegistry([FoodCategoryStrategy()])
    with pytest.raises(LookupError, match="garden"):
        registry.get("garden")


def test_custom_registry_used_by_shortage_calculation():
    """A caller-owned registry drives the category calculation."""
    rec = RecommendedItemDefinition(
        id="seeds", i18n_key="products.seeds", category="garden",
        base_quantity=1, unit="packages",
    )
    registry = StrategyRegistry.default().register(FixedStrategy())
    result = calculate_category_shortages(
        "garden", [], HouseholdConfig(), [rec], registry=registry
    )
    assert result.total_needed == 7


def test_strategy_repr():
    assert repr(FoodCategoryStrategy()) == "FoodCategoryStrategy(strategy_id='food')"
