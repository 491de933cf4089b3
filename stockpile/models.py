"""Data models for households, catalog definitions, inventory and results."""

from __future__ import annotations

import re
from dataclasses import dataclass, field, fields
from datetime import date, datetime
from typing import Any

from .constants import (
    CHILDREN_REQUIREMENT_MULTIPLIER,
    CUSTOM_ITEM_TYPE,
    DAILY_WATER_PER_PERSON,
)

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")

# camelCase keys whose mechanical conversion differs from the field name
_KEY_ALIASES: dict[str, str] = {
    "calories_per100g": "calories_per_100g",
}


def _snake_keys(data: dict[str, Any]) -> dict[str, Any]:
    """Normalize camelCase keys (as used in app exports) to snake_case."""
    out: dict[str, Any] = {}
    for key, value in data.items():
        snake = _CAMEL_BOUNDARY.sub("_", key).lower()
        out[_KEY_ALIASES.get(snake, snake)] = value
    return out


def _known_fields(cls, data: dict[str, Any]) -> dict[str, Any]:
    names = {f.name for f in fields(cls)}
    return {k: v for k, v in data.items() if k in names}


def parse_date(value: Any) -> date | datetime | None:
    """Parse an ISO date or datetime string. Dates pass through unchanged."""
    if value is None or value == "":
        return None
    if isinstance(value, (date, datetime)):
        return value
    text = str(value)
    if "T" in text or " " in text:
        return datetime.fromisoformat(text.replace("Z", "+00:00"))
    return date.fromisoformat(text)


@dataclass(frozen=True)
class HouseholdConfig:
    """People, pets and coverage duration that drive quantity scaling."""

    adults: int = 2
    children: int = 0
    supply_duration_days: int = 3
    use_freezer: bool = False
    pets: int = 0

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> HouseholdConfig:
        return cls(**_known_fields(cls, _snake_keys(data)))


@dataclass(frozen=True)
class CalculationOptions:
    """User-tunable requirement settings."""

    children_multiplier: float = CHILDREN_REQUIREMENT_MULTIPLIER
    daily_water_per_person: float = DAILY_WATER_PER_PERSON


@dataclass(frozen=True)
class RecommendedItemDefinition:
    """A catalog entry describing a suggested supply item."""

    id: str
    i18n_key: str
    category: str
    base_quantity: float
    unit: str
    scale_with_people: bool = False
    scale_with_days: bool = False
    scale_with_pets: bool = False
    requires_freezer: bool = False
    default_expiration_months: int | None = None
    weight_grams_per_unit: float | None = None
    calories_per_100g: float | None = None
    calories_per_unit: float | None = None
    capacity_mah: float | None = None
    capacity_wh: float | None = None
    requires_water_liters: float | None = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> RecommendedItemDefinition:
        raw = _snake_keys(data)
        if not raw.get("i18n_key"):
            raw["i18n_key"] = f"products.{raw.get('id', '')}"
        return cls(**_known_fields(cls, raw))


@dataclass(frozen=True)
class InventoryItem:
    """A read-only snapshot of one stored supply item."""

    id: str
    name: str
    category_id: str
    quantity: float
    unit: str
    item_type: str = CUSTOM_ITEM_TYPE
    recommended_quantity: float = 0
    expiration_date: date | datetime | None = None
    never_expires: bool = False
    product_template_id: str | None = None
    weight_grams: float | None = None
    calories_per_unit: float | None = None
    capacity_mah: float | None = None
    capacity_wh: float | None = None
    requires_water_liters: float | None = None
    marked_as_enough: bool = False
    location: str = ""
    notes: str = ""

    @property
    def is_custom(self) -> bool:
        return self.item_type == CUSTOM_ITEM_TYPE

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> InventoryItem:
        raw = _known_fields(cls, _snake_keys(data))
        raw["id"] = str(raw.get("id", ""))
        raw["expiration_date"] = parse_date(raw.get("expiration_date"))
        raw["location"] = raw.get("location") or ""
        raw["notes"] = raw.get("notes") or ""
        if not raw.get("item_type"):
            raw["item_type"] = CUSTOM_ITEM_TYPE
        return cls(**raw)


@dataclass
class ItemCalculationResult:
    """Per recommended item result, recomputed on every call."""

    rec_item: RecommendedItemDefinition
    recommended_qty: float
    actual_qty: float
    matching_items: list[InventoryItem] = field(default_factory=list)
    has_marked_as_enough: bool = False
    actual_calories: float | None = None

    @property
    def unit(self) -> str:
        return self.rec_item.unit


@dataclass
class CategoryShortage:
    item_id: str
    item_name: str  # i18n key
    actual: float
    needed: float
    unit: str
    missing: float

    @classmethod
    def create(
        cls,
        rec_item: RecommendedItemDefinition,
        actual: float,
        needed: float,
    ) -> CategoryShortage:
        return cls(
            item_id=rec_item.id,
            item_name=rec_item.i18n_key,
            actual=actual,
            needed=needed,
            unit=rec_item.unit,
            missing=max(0, needed - actual),
        )


@dataclass
class ShortageCalculationResult:
    """Aggregated category totals. ``primary_unit`` is None for item counts."""

    shortages: list[CategoryShortage] = field(default_factory=list)
    total_actual: float = 0
    total_needed: float = 0
    primary_unit: str | None = None
    # food
    total_actual_calories: float | None = None
    total_needed_calories: float | None = None
    missing_calories: float | None = None
    # water-beverages
    drinking_water_needed: float | None = None
    preparation_water_needed: float | None = None


@dataclass
class CategoryStatus:
    """Everything a caller needs to display one category."""

    category_id: str
    status: str
    completion_percentage: int
    total_actual: float
    total_needed: float
    primary_unit: str | None
    shortages: list[CategoryShortage] = field(default_factory=list)
    has_recommendations: bool = True
    total_actual_calories: float | None = None
    total_needed_calories: float | None = None
    missing_calories: float | None = None
    drinking_water_needed: float | None = None
    preparation_water_needed: float | None = None

    def summary_dict(self) -> dict:
        """Return a summary dict for JSON serialization."""
        data = {
            "category_id": self.category_id,
            "status": self.status,
            "completion_percentage": self.completion_percentage,
            "total_actual": round(self.total_actual, 2),
            "total_needed": round(self.total_needed, 2),
            "unit": self.primary_unit,
            "shortages": [
                {
                    "item_id": s.item_id,
                    "actual": s.actual,
                    "needed": s.needed,
                    "unit": s.unit,
                    "missing": s.missing,
                }
                for s in self.shortages
            ],
        }
        if self.total_needed_calories is not None:
            data["calories"] = {
                "actual": self.total_actual_calories,
                "needed": self.total_needed_calories,
                "missing": self.missing_calories,
            }
        if self.drinking_water_needed is not None:
            data["water"] = {
                "drinking": self.drinking_water_needed,
                "preparation": self.preparation_water_needed,
            }
        return data


@dataclass(frozen=True)
class Alert:
    id: str
    type: str  # "critical" | "warning" | "info"
    message: str
    item_name: str | None = None


@dataclass(frozen=True)
class AlertCounts:
    critical: int = 0
    warning: int = 0
    info: int = 0
    total: int = 0
