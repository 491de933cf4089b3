"""Default English messages and a simple translation function."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

DEFAULT_MESSAGES: dict[str, str] = {
    # alerts
    "alerts.expiration.expired": "Expired",
    "alerts.expiration.expiringSoon": "Expires in {days} days",
    "alerts.stock.outOfStock": "Out of stock",
    "alerts.stock.criticallyLow": "Critically low ({percent}%)",
    "alerts.stock.runningLow": "Running low ({percent}%)",
    "alerts.water.preparationShortage": (
        "Not enough water to prepare stored food: {liters} L short"
    ),
    # categories
    "categories.water-beverages": "Water & Beverages",
    "categories.food": "Food",
    "categories.cooking-heat": "Cooking & Heat",
    "categories.light-power": "Light & Power",
    "categories.communication-info": "Communication & Info",
    "categories.medical-health": "Medical & Health",
    "categories.hygiene-sanitation": "Hygiene & Sanitation",
    "categories.tools-supplies": "Tools & Supplies",
    "categories.cash-documents": "Cash & Documents",
    # units
    "units.pieces": "pcs",
    "units.liters": "L",
    "units.kilograms": "kg",
    "units.grams": "g",
    "units.cans": "cans",
    "units.bottles": "bottles",
    "units.packages": "packages",
    "units.jars": "jars",
    "units.canisters": "canisters",
    "units.boxes": "boxes",
    "units.days": "days",
    "units.rolls": "rolls",
    "units.tubes": "tubes",
    "units.meters": "m",
    "units.pairs": "pairs",
    "units.euros": "€",
    "units.sets": "sets",
    # shopping list
    "shoppingList.title": "Shopping list",
    "shoppingList.generated": "Generated",
    "shoppingList.noItems": "Nothing to restock.",
    "shoppingList.current": "Current",
    "shoppingList.recommended": "Recommended",
    "shoppingList.needed": "Needed",
    "shoppingList.item": "Item",
}


def make_translator(
    messages: Mapping[str, str] | None = None,
) -> Callable[..., str]:
    """Return ``t(key, params=None)`` over a message table.

    Missing keys come back unchanged so callers can detect them and fall
    back to stored names. ``str.format`` placeholders are filled from params.
    """
    table = dict(DEFAULT_MESSAGES if messages is None else messages)

    def t(key: str, params: Mapping[str, Any] | None = None) -> str:
        template = table.get(key)
        if template is None:
            return key
        if not params:
            return template
        try:
            return template.format(**params)
        except (KeyError, IndexError):
            return template

    return t
