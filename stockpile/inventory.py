"""Read-only loader for exported inventory snapshots.

Accepts either an application export::

    {"household": {...}, "items": [...],
     "disabledRecommendedItems": [...], "dismissedAlertIds": [...]}

or a bare list of items.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path

from .models import HouseholdConfig, InventoryItem

logger = logging.getLogger(__name__)


@dataclass
class InventorySnapshot:
    items: list[InventoryItem] = field(default_factory=list)
    household: HouseholdConfig | None = None
    disabled_recommended_items: list[str] = field(default_factory=list)
    dismissed_alert_ids: list[str] = field(default_factory=list)


def parse_inventory(raw: dict | list) -> InventorySnapshot:
    """Build a snapshot from decoded JSON.

    Raises:
        ValueError: The document is neither an object nor a list, or an
            item is missing required fields.
    """
    if isinstance(raw, list):
        raw = {"items": raw}
    if not isinstance(raw, dict):
        raise ValueError("Inventory must be a JSON object or list")

    items: list[InventoryItem] = []
    for index, entry in enumerate(raw.get("items", [])):
        if not isinstance(entry, dict):
            raise ValueError(f"Invalid inventory item at index {index}: not an object")
        try:
            items.append(InventoryItem.from_dict(entry))
        except (TypeError, ValueError) as e:
            raise ValueError(f"Invalid inventory item at index {index}: {e}") from e

    household_raw = raw.get("household")
    household = HouseholdConfig.from_dict(household_raw) if household_raw else None

    return InventorySnapshot(
        items=items,
        household=household,
        disabled_recommended_items=list(raw.get("disabledRecommendedItems", [])),
        dismissed_alert_ids=list(raw.get("dismissedAlertIds", [])),
    )


def load_inventory(path: str | Path) -> InventorySnapshot:
    """Read an inventory JSON file.

    Raises:
        FileNotFoundError: The file does not exist.
        ValueError: The file is not valid JSON or has malformed items.
    """
    p = Path(path).expanduser()
    if not p.exists():
        raise FileNotFoundError(f"Inventory file not found: {p}")
    try:
        raw = json.loads(p.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Inventory {p} is not valid JSON: {e}") from e

    snapshot = parse_inventory(raw)
    logger.info("Loaded %d inventory items from %s", len(snapshot.items), p)
    return snapshot
