"""Recommended item catalog loading and validation.

Catalog files are JSON documents shaped like::

    {
      "meta": {"name": "...", "version": "1.0.0", ...},
      "items": [
        {"id": "bottled-water", "names": {"en": "Bottled water"},
         "category": "water-beverages", "baseQuantity": 3, "unit": "liters",
         "scaleWithPeople": true, "scaleWithDays": true},
        ...
      ]
    }

Keys may be camelCase (as exported by the app) or snake_case.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Any

from .constants import STANDARD_CATEGORIES, UNITS
from .models import HouseholdConfig, RecommendedItemDefinition, _snake_keys

logger = logging.getLogger(__name__)

BUILTIN_CATALOG = "recommended_items.json"

_BOOL_FIELDS = (
    "scale_with_people",
    "scale_with_days",
    "scale_with_pets",
    "requires_freezer",
)
_POSITIVE_NUMBER_FIELDS = (
    "weight_grams_per_unit",
    "capacity_mah",
    "capacity_wh",
    "requires_water_liters",
)
_NON_NEGATIVE_NUMBER_FIELDS = (
    "calories_per_100g",
    "calories_per_unit",
)


@dataclass
class ValidationIssue:
    path: str
    message: str
    code: str


@dataclass
class ValidationResult:
    errors: list[ValidationIssue] = field(default_factory=list)
    warnings: list[ValidationIssue] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors

    def error(self, path: str, message: str, code: str) -> None:
        self.errors.append(ValidationIssue(path, message, code))

    def warn(self, path: str, message: str, code: str) -> None:
        self.warnings.append(ValidationIssue(path, message, code))


@dataclass
class Catalog:
    """A loaded catalog: metadata, item definitions and display names."""

    meta: dict[str, Any]
    items: list[RecommendedItemDefinition]
    names: dict[str, dict[str, str]] = field(default_factory=dict)

    def messages(self, language: str = "en") -> dict[str, str]:
        """Translation entries for the catalog items in ``language``.

        Falls back to English, then to any available name.
        """
        table: dict[str, str] = {}
        for item in self.items:
            names = self.names.get(item.id) or {}
            name = names.get(language) or names.get("en")
            if not name and names:
                name = next(iter(names.values()))
            if name:
                table[item.i18n_key] = name
        return table


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def validate_catalog_data(raw: Any) -> ValidationResult:
    """Check a decoded catalog document without raising.

    Errors make the catalog unusable; warnings flag entries that will load
    but probably are not what the author meant (unknown units or categories).
    """
    result = ValidationResult()

    if not isinstance(raw, dict):
        result.error("", "Catalog must be a JSON object", "INVALID_ROOT")
        return result

    meta = raw.get("meta")
    if not isinstance(meta, dict):
        result.error("meta", "Missing meta section", "MISSING_META")
    else:
        for key in ("name", "version"):
            if not meta.get(key):
                result.error(f"meta.{key}", f"Missing meta.{key}", "MISSING_FIELD")

    items = raw.get("items")
    if not isinstance(items, list):
        result.error("items", "Items must be a list", "INVALID_ITEMS")
        return result
    if not items:
        result.error("items", "Catalog has no items", "EMPTY_ITEMS")

    seen: set[str] = set()
    for index, entry in enumerate(items):
        path = f"items[{index}]"
        if not isinstance(entry, dict):
            result.error(path, "Item must be an object", "INVALID_ITEM")
            continue
        data = _snake_keys(entry)

        item_id = data.get("id")
        if not item_id or not isinstance(item_id, str):
            result.error(f"{path}.id", "Missing item id", "MISSING_FIELD")
        elif item_id in seen:
            result.error(f"{path}.id", f"Duplicate item id {item_id!r}", "DUPLICATE_ID")
        else:
            seen.add(item_id)

        category = data.get("category")
        if not category:
            result.error(f"{path}.category", "Missing category", "MISSING_FIELD")
        elif category not in STANDARD_CATEGORIES:
            result.warn(
                f"{path}.category", f"Unknown category {category!r}", "UNKNOWN_CATEGORY"
            )

        unit = data.get("unit")
        if not unit:
            result.error(f"{path}.unit", "Missing unit", "MISSING_FIELD")
        elif unit not in UNITS:
            result.warn(f"{path}.unit", f"Unknown unit {unit!r}", "UNKNOWN_UNIT")

        base = data.get("base_quantity")
        if not _is_number(base):
            result.error(
                f"{path}.baseQuantity", "baseQuantity must be a number", "INVALID_NUMBER"
            )
        elif base <= 0:
            result.error(
                f"{path}.baseQuantity", "baseQuantity must be positive", "INVALID_QUANTITY"
            )

        for key in _BOOL_FIELDS:
            if key in data and not isinstance(data[key], bool):
                result.error(f"{path}.{key}", f"{key} must be a boolean", "INVALID_BOOLEAN")

        for key in _POSITIVE_NUMBER_FIELDS:
            value = data.get(key)
            if value is None:
                continue
            if not _is_number(value) or value <= 0:
                result.error(
                    f"{path}.{key}", f"{key} must be a positive number", "INVALID_NUMBER"
                )

        for key in _NON_NEGATIVE_NUMBER_FIELDS:
            value = data.get(key)
            if value is None:
                continue
            if not _is_number(value) or value < 0:
                result.error(
                    f"{path}.{key}", f"{key} must not be negative", "INVALID_NUMBER"
                )

        names = data.get("names")
        if names is not None and not isinstance(names, dict):
            result.error(f"{path}.names", "names must be an object", "INVALID_NAMES")

    return result


def parse_catalog(raw: dict[str, Any]) -> Catalog:
    """Build a :class:`Catalog` from an already validated document."""
    items: list[RecommendedItemDefinition] = []
    names: dict[str, dict[str, str]] = {}
    for entry in raw["items"]:
        definition = RecommendedItemDefinition.from_dict(entry)
        items.append(definition)
        if entry.get("names"):
            names[definition.id] = dict(entry["names"])
    return Catalog(meta=dict(raw.get("meta", {})), items=items, names=names)


def _read_catalog_text(path: str | Path | None) -> tuple[str, str]:
    if path is None:
        source = resources.files("stockpile").joinpath("data").joinpath(BUILTIN_CATALOG)
        return source.read_text(encoding="utf-8"), f"built-in {BUILTIN_CATALOG}"
    p = Path(path).expanduser()
    if not p.exists():
        raise FileNotFoundError(f"Catalog file not found: {p}")
    return p.read_text(encoding="utf-8"), str(p)


def load_catalog(path: str | Path | None = None) -> Catalog:
    """Load a catalog file, or the built-in catalog when ``path`` is None.

    Raises:
        FileNotFoundError: ``path`` does not exist.
        ValueError: The file is not valid JSON or fails validation.
    """
    text, label = _read_catalog_text(path)
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Catalog {label} is not valid JSON: {e}") from e

    result = validate_catalog_data(raw)
    for issue in result.warnings:
        logger.warning("Catalog %s: %s (%s)", label, issue.message, issue.path)
    if not result.valid:
        details = "; ".join(f"{e.path}: {e.message}" for e in result.errors)
        raise ValueError(f"Invalid catalog {label}: {details}")

    catalog = parse_catalog(raw)
    logger.info("Loaded %d recommended items from %s", len(catalog.items), label)
    return catalog


def effective_catalog(
    items: Sequence[RecommendedItemDefinition],
    household: HouseholdConfig,
    disabled_ids: Iterable[str] = (),
) -> list[RecommendedItemDefinition]:
    """Definitions that apply to this household.

    Drops disabled items, and freezer items when the household has no freezer.
    """
    disabled = set(disabled_ids)
    return [
        item
        for item in items
        if item.id not in disabled
        and not (item.requires_freezer and not household.use_freezer)
    ]
