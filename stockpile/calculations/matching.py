"""Match inventory items to recommended item definitions.

An item matches a definition when its ``item_type`` equals the definition id
(items created from a catalog template), or, for items that are not custom,
when its display name normalized to kebab-case equals the id. Custom items
are never matched by name so free-text entries cannot collide with catalog
ids.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ..constants import CUSTOM_ITEM_TYPE
from .calories import calculate_item_total_calories, get_template_weight_per_unit

if TYPE_CHECKING:
    from ..models import InventoryItem, RecommendedItemDefinition

_WHITESPACE = re.compile(r"\s+")


def normalize_name(name: str) -> str:
    """Case-fold a display name and hyphenate its whitespace."""
    return _WHITESPACE.sub("-", name.casefold())


def item_matches_definition(
    item: InventoryItem, rec_item: RecommendedItemDefinition
) -> bool:
    if item.item_type == rec_item.id:
        return True
    if item.item_type != CUSTOM_ITEM_TYPE:
        return normalize_name(item.name) == rec_item.id.casefold()
    return False


def find_matching_items(
    items: Iterable[InventoryItem], rec_item: RecommendedItemDefinition
) -> list[InventoryItem]:
    """Items matching ``rec_item`` by reference id or normalized name."""
    return [item for item in items if item_matches_definition(item, rec_item)]


def find_matching_items_by_type(
    items: Iterable[InventoryItem], rec_item_id: str
) -> list[InventoryItem]:
    """Items whose ``item_type`` is exactly ``rec_item_id`` (no name fallback)."""
    return [item for item in items if item.item_type == rec_item_id]


def sum_matching_items_quantity(
    items: Iterable[InventoryItem], rec_item: RecommendedItemDefinition
) -> float:
    return sum(item.quantity for item in find_matching_items(items, rec_item))


def sum_matching_items_quantity_by_type(
    items: Iterable[InventoryItem], rec_item_id: str
) -> float:
    return sum(item.quantity for item in find_matching_items_by_type(items, rec_item_id))


def sum_items_calories(
    items: Iterable[InventoryItem],
    default_calories_per_unit: float | None = 0,
    default_weight_grams_per_unit: float | None = None,
) -> int:
    """Total calories of already-matched items."""
    return sum(
        calculate_item_total_calories(
            item, default_calories_per_unit, default_weight_grams_per_unit
        )
        for item in items
    )


def sum_matching_items_calories(
    items: Iterable[InventoryItem],
    rec_item: RecommendedItemDefinition,
    default_calories_per_unit: float | None = 0,
) -> int:
    """Total calories of items matching ``rec_item``.

    An item's own calories-per-unit is used when present (0 included); the
    default applies only to items without one.
    """
    return sum_items_calories(
        find_matching_items(items, rec_item),
        default_calories_per_unit,
        get_template_weight_per_unit(rec_item),
    )


def has_marked_as_enough(
    items: Iterable[InventoryItem], rec_item: RecommendedItemDefinition
) -> bool:
    return any(item.marked_as_enough for item in find_matching_items(items, rec_item))
