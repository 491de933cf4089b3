"""Weight and calorie conversions for food items."""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from ..constants import CALORIE_BASE_WEIGHT_GRAMS, GRAMS_PER_KILOGRAM, MASS_UNIT

if TYPE_CHECKING:
    from ..models import InventoryItem, RecommendedItemDefinition


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves away from zero for positives."""
    return math.floor(value + 0.5)


def calculate_total_weight(quantity: float, weight_grams_per_unit: float) -> float:
    """Total weight in grams for ``quantity`` units."""
    return quantity * weight_grams_per_unit


def calculate_calories_from_weight(
    weight_grams: float, calories_per_100g: float
) -> int:
    """Calories for a given weight, from a per-100g value."""
    return round_half_up(weight_grams * calories_per_100g / CALORIE_BASE_WEIGHT_GRAMS)


def calculate_total_calories(
    quantity: float,
    calories_per_unit: float,
    unit: str | None = None,
    weight_grams_per_unit: float | None = None,
) -> int:
    """Total calories for a stored quantity.

    Bulk stock may be recorded in kilograms while the catalog tracks the
    item per unit. When ``unit`` is kilograms and a per-unit weight is known,
    the mass is converted to a unit count first.

    Args:
        quantity: Stored amount, in ``unit``.
        calories_per_unit: Calories of one discrete unit.
        unit: Unit the quantity is recorded in.
        weight_grams_per_unit: Weight of one discrete unit in grams.

    Returns:
        Rounded total calories.
    """
    if unit == MASS_UNIT and weight_grams_per_unit and weight_grams_per_unit > 0:
        units = quantity * GRAMS_PER_KILOGRAM / weight_grams_per_unit
        return round_half_up(units * calories_per_unit)
    return round_half_up(quantity * calories_per_unit)


def calculate_item_total_calories(
    item: InventoryItem,
    default_calories_per_unit: float | None = None,
    default_weight_grams_per_unit: float | None = None,
) -> int:
    """Calories held by one inventory item.

    The item's own ``calories_per_unit`` wins whenever it is set, including
    an explicit 0. The defaults only apply when the item has no value.
    """
    calories_per_unit = item.calories_per_unit
    if calories_per_unit is None:
        calories_per_unit = default_calories_per_unit
    if calories_per_unit is None:
        return 0

    weight = item.weight_grams
    if weight is None:
        weight = default_weight_grams_per_unit
    return calculate_total_calories(item.quantity, calories_per_unit, item.unit, weight)


def get_template_weight_per_unit(rec_item: RecommendedItemDefinition) -> float | None:
    return rec_item.weight_grams_per_unit


def get_template_calories_per_unit(
    rec_item: RecommendedItemDefinition,
) -> float | None:
    """Calories per unit for a catalog entry.

    Derived from weight and per-100g data when both are present, otherwise
    the entry's direct value (possibly None).
    """
    if rec_item.weight_grams_per_unit and rec_item.calories_per_100g:
        return calculate_calories_from_weight(
            rec_item.weight_grams_per_unit, rec_item.calories_per_100g
        )
    return rec_item.calories_per_unit


def resolve_calories_per_unit(
    user_calories_per_unit: float | None,
    user_weight_grams: float | None,
    catalog_calories_per_100g: float | None,
    catalog_calories_per_unit: float | None,
) -> float | None:
    """Pick the calories-per-unit value for an item.

    Precedence: the user's own value, then a value derived from the user's
    weight and the catalog's per-100g figure, then the catalog default.

    Note: a user value of exactly 0 counts as unset and falls through.
    """
    if user_calories_per_unit:
        return user_calories_per_unit

    if user_weight_grams and catalog_calories_per_100g is not None:
        return calculate_calories_from_weight(
            user_weight_grams, catalog_calories_per_100g
        )

    return catalog_calories_per_unit
