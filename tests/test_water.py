"""Tests for drinking and preparation water calculations."""

import pytest

from stockpile.calculations.water import (
    calculate_drinking_water_needed,
    calculate_total_water_available,
    calculate_total_water_required,
    calculate_water_requirements,
    get_water_requirement_per_unit,
    people_multiplier,
)
from stockpile.models import (
    CalculationOptions,
    HouseholdConfig,
    InventoryItem,
    RecommendedItemDefinition,
)


@pytest.fixture
def catalog():
    return [
        RecommendedItemDefinition(
            id="pasta",
            i18n_key="products.pasta",
            category="food",
            base_quantity=0.1,
            unit="kilograms",
            requires_water_liters=5,
        ),
        RecommendedItemDefinition(
            id="crispbread",
            i18n_key="products.crispbread",
            category="food",
            base_quantity=1,
            unit="packages",
        ),
    ]


def _water(quantity: float, **kwargs) -> InventoryItem:
    defaults = dict(
        id="w1", name="Bottled water", category_id="water-beverages",
        unit="liters", item_type="bottled-water",
    )
    defaults.update(kwargs)
    return InventoryItem(quantity=quantity, **defaults)


def _pasta(quantity: float, **kwargs) -> InventoryItem:
    defaults = dict(
        id="p1", name="Pasta", category_id="food", unit="kilograms", item_type="pasta",
    )
    defaults.update(kwargs)
    return InventoryItem(quantity=quantity, **defaults)


def test_people_multiplier():
    """Children count by the configured multiplier."""
    household = HouseholdConfig(adults=2, children=1)
    assert people_multiplier(household) == 3
    assert people_multiplier(household, CalculationOptions(children_multiplier=0.5)) == 2.5


def test_drinking_water_needed():
    """Daily water times people times days."""
    household = HouseholdConfig(adults=2, children=1, supply_duration_days=3)
    assert calculate_drinking_water_needed(household) == 27
    options = CalculationOptions(daily_water_per_person=2)
    assert calculate_drinking_water_needed(household, options) == 18


def test_water_per_unit_prefers_item_value(catalog):
    """A positive per-item requirement overrides the catalog."""
    assert get_water_requirement_per_unit(_pasta(1, requires_water_liters=1.5), catalog) == 1.5


def test_water_per_unit_from_catalog(catalog):
    """Template reference or item type locate the catalog entry."""
    assert get_water_requirement_per_unit(_pasta(1), catalog) == 5
    by_template = _pasta(1, item_type="custom", product_template_id="pasta")
    assert get_water_requirement_per_unit(by_template, catalog) == 5


def test_water_per_unit_not_applicable(catalog):
    """Items without any water requirement contribute nothing."""
    bread = InventoryItem(
        id="b", name="Crispbread", category_id="food", quantity=2,
        unit="packages", item_type="crispbread",
    )
    assert get_water_requirement_per_unit(bread, catalog) == 0
    assert get_water_requirement_per_unit(_pasta(1)) == 0


def test_total_water_required(catalog):
    """Per-unit requirement times quantity, summed."""
    items = [_pasta(0.6), _pasta(1, id="p2", requires_water_liters=2)]
    assert calculate_total_water_required(items, catalog) == pytest.approx(5.0)


def test_total_water_available_counts_only_drinking_water():
    """Only liters of water in the water category count."""
    items = [
        _water(10),
        _water(4, id="w2", name="Spring Water", item_type="custom"),
        _water(2, id="j", name="Juice", item_type="long-life-juice"),
        _water(5, id="w3", category_id="tools-supplies"),
        _water(6, id="w4", unit="bottles"),
    ]
    assert calculate_total_water_available(items) == 14


def test_water_requirements_with_shortfall(catalog):
    """Water left after the drinking reservation cannot cover preparation."""
    household = HouseholdConfig(adults=1, children=0, supply_duration_days=1)
    result = calculate_water_requirements([_water(5), _pasta(1)], catalog, household)

    assert result.total_water_required == 5
    assert result.total_water_available == 5
    assert result.drinking_water_reserved == 3
    assert result.water_available_for_preparation == 2
    assert result.water_shortfall == 3
    assert not result.has_enough_water
    assert [w.item_id for w in result.items_requiring_water] == ["p1"]


def test_water_requirements_without_household(catalog):
    """No drinking reservation is made without a household."""
    result = calculate_water_requirements([_water(5), _pasta(1)], catalog)
    assert result.drinking_water_reserved == 0
    assert result.water_shortfall == 0
    assert result.has_enough_water
