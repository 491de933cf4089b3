"""Shopping list of items that have fallen below their recommended quantity."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import date

from .alerts import TranslationFunction, get_translated_item_name
from .categories import recommended_quantity_for_item
from .models import (
    CalculationOptions,
    HouseholdConfig,
    InventoryItem,
    RecommendedItemDefinition,
)
from .strategies import StrategyRegistry

RULE_WIDTH = 40


@dataclass
class ShoppingEntry:
    item: InventoryItem
    current: float
    recommended: float

    @property
    def needed(self) -> float:
        return self.recommended - self.current

    @property
    def category_id(self) -> str:
        return self.item.category_id

    @property
    def unit(self) -> str:
        return self.item.unit


def format_quantity(value: float) -> str:
    """``3.0`` -> ``"3"``, ``0.25`` -> ``"0.25"``."""
    return f"{round(value, 2):g}"


def items_to_restock(
    items: Iterable[InventoryItem],
    household: HouseholdConfig,
    catalog: Sequence[RecommendedItemDefinition],
    options: CalculationOptions | None = None,
    registry: StrategyRegistry | None = None,
) -> list[ShoppingEntry]:
    """Items below their recommended quantity, skipping ones marked as enough."""
    items = list(items)
    registry = registry or StrategyRegistry.default()
    entries: list[ShoppingEntry] = []
    for item in items:
        if item.marked_as_enough:
            continue
        recommended = recommended_quantity_for_item(
            item, household, catalog, options, items, registry
        )
        if item.quantity < recommended:
            entries.append(ShoppingEntry(item, item.quantity, recommended))
    return entries


def build_shopping_list(
    items: Iterable[InventoryItem],
    household: HouseholdConfig,
    catalog: Sequence[RecommendedItemDefinition],
    options: CalculationOptions | None = None,
    registry: StrategyRegistry | None = None,
) -> dict[str, list[ShoppingEntry]]:
    """Restock entries grouped by category id, categories in sorted order."""
    grouped: dict[str, list[ShoppingEntry]] = {}
    for entry in items_to_restock(items, household, catalog, options, registry):
        grouped.setdefault(entry.category_id, []).append(entry)
    return {category_id: grouped[category_id] for category_id in sorted(grouped)}


def _lookup(t: TranslationFunction, key: str, fallback: str) -> str:
    translated = t(key)
    return translated if translated and translated != key else fallback


def category_label(category_id: str, t: TranslationFunction) -> str:
    return _lookup(t, f"categories.{category_id}", category_id)


def unit_label(unit: str, t: TranslationFunction) -> str:
    return _lookup(t, f"units.{unit}", unit)


def format_shopping_list(
    grouped: dict[str, list[ShoppingEntry]],
    t: TranslationFunction,
    generated: date | None = None,
) -> str:
    """Plain-text shopping list with one checkbox line per item."""
    if not any(grouped.values()):
        return t("shoppingList.noItems")

    generated = generated or date.today()
    lines = [
        t("shoppingList.title"),
        f"{t('shoppingList.generated')}: {generated.isoformat()}",
        "",
    ]
    for category_id, entries in grouped.items():
        lines.append(category_label(category_id, t))
        lines.append("─" * RULE_WIDTH)
        for entry in entries:
            name = get_translated_item_name(entry.item, t)
            lines.append(
                f"□ {name}: {format_quantity(entry.needed)} {unit_label(entry.unit, t)}"
            )
            lines.append(
                f"  {t('shoppingList.current')}: {format_quantity(entry.current)}, "
                f"{t('shoppingList.recommended')}: {format_quantity(entry.recommended)}"
            )
        lines.append("")
    return "\n".join(lines)
