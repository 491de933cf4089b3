"""Water requirement calculations (drinking and food preparation)."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..constants import (
    ADULT_REQUIREMENT_MULTIPLIER,
    BOTTLED_WATER_ID,
    WATER_CATEGORY_ID,
    WATER_UNIT,
)
from ..models import CalculationOptions
from .matching import normalize_name

if TYPE_CHECKING:
    from ..models import HouseholdConfig, InventoryItem, RecommendedItemDefinition


@dataclass
class WaterRequirementItem:
    item_id: str
    item_name: str
    quantity: float
    water_per_unit: float
    total_water_required: float


@dataclass
class WaterRequirementResult:
    """Preparation water needed versus water left after drinking needs."""

    total_water_required: float = 0.0
    total_water_available: float = 0.0
    drinking_water_reserved: float = 0.0
    water_available_for_preparation: float = 0.0
    water_shortfall: float = 0.0
    items_requiring_water: list[WaterRequirementItem] = field(default_factory=list)

    @property
    def has_enough_water(self) -> bool:
        return self.water_shortfall <= 0


def people_multiplier(
    household: HouseholdConfig, options: CalculationOptions | None = None
) -> float:
    """Adults count as one person, children by the configured multiplier."""
    options = options or CalculationOptions()
    return (
        household.adults * ADULT_REQUIREMENT_MULTIPLIER
        + household.children * options.children_multiplier
    )


def _positive(value: float | None) -> bool:
    return value is not None and value > 0


def get_water_requirement_per_unit(
    item: InventoryItem,
    catalog: Sequence[RecommendedItemDefinition] = (),
) -> float:
    """Liters of preparation water needed per unit of ``item``.

    The item's own value wins when positive; otherwise the catalog entry
    referenced by the product template or item type is consulted.
    """
    if _positive(item.requires_water_liters):
        return item.requires_water_liters

    candidates: list[str] = []
    if item.product_template_id:
        candidates.append(item.product_template_id)
    if item.item_type:
        candidates.append(normalize_name(item.item_type))

    for candidate in candidates:
        for rec_item in catalog:
            if rec_item.id == candidate and _positive(rec_item.requires_water_liters):
                return rec_item.requires_water_liters
    return 0.0


def calculate_total_water_required(
    items: Iterable[InventoryItem],
    catalog: Sequence[RecommendedItemDefinition] = (),
) -> float:
    return sum(
        get_water_requirement_per_unit(item, catalog) * item.quantity for item in items
    )


def _is_bottled_water(item: InventoryItem) -> bool:
    return (
        item.product_template_id == BOTTLED_WATER_ID
        or item.item_type == BOTTLED_WATER_ID
        or "water" in item.item_type.casefold()
        or "water" in item.name.casefold()
    )


def calculate_total_water_available(items: Iterable[InventoryItem]) -> float:
    """Liters of stored drinking water in the water category."""
    return sum(
        item.quantity
        for item in items
        if item.category_id == WATER_CATEGORY_ID
        and item.unit == WATER_UNIT
        and _is_bottled_water(item)
    )


def calculate_drinking_water_needed(
    household: HouseholdConfig, options: CalculationOptions | None = None
) -> float:
    options = options or CalculationOptions()
    return (
        options.daily_water_per_person
        * people_multiplier(household, options)
        * household.supply_duration_days
    )


def calculate_water_requirements(
    items: Sequence[InventoryItem],
    catalog: Sequence[RecommendedItemDefinition] = (),
    household: HouseholdConfig | None = None,
    options: CalculationOptions | None = None,
) -> WaterRequirementResult:
    """Compare preparation water needs with water left after drinking needs.

    Without a household no drinking reservation is made.
    """
    result = WaterRequirementResult()

    for item in items:
        per_unit = get_water_requirement_per_unit(item, catalog)
        if per_unit > 0 and item.quantity > 0:
            result.items_requiring_water.append(
                WaterRequirementItem(
                    item_id=item.id,
                    item_name=item.name,
                    quantity=item.quantity,
                    water_per_unit=per_unit,
                    total_water_required=per_unit * item.quantity,
                )
            )

    result.total_water_required = sum(
        w.total_water_required for w in result.items_requiring_water
    )
    result.total_water_available = calculate_total_water_available(items)
    if household is not None:
        result.drinking_water_reserved = calculate_drinking_water_needed(
            household, options
        )
    result.water_available_for_preparation = max(
        0.0, result.total_water_available - result.drinking_water_reserved
    )
    result.water_shortfall = max(
        0.0, result.total_water_required - result.water_available_for_preparation
    )
    return result
