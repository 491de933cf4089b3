"""TOML configuration loader for the stockpile tools."""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass, field
from pathlib import Path

from .constants import (
    CHILDREN_REQUIREMENT_MULTIPLIER,
    DAILY_WATER_PER_PERSON,
    EXPIRING_SOON_ALERT_DAYS,
    STANDARD_CATEGORIES,
)
from .models import CalculationOptions, HouseholdConfig

if sys.version_info >= (3, 11):
    import tomllib
else:
    try:
        import tomli as tomllib
    except ImportError:
        tomllib = None  # type: ignore[assignment]

DEFAULT_INVENTORY_PATH = "~/.config/stockpile/inventory.json"


@dataclass
class HouseholdSection:
    adults: int = 2
    children: int = 0
    supply_duration_days: int = 3
    use_freezer: bool = False
    pets: int = 0

    def to_household(self) -> HouseholdConfig:
        return HouseholdConfig(
            adults=self.adults,
            children=self.children,
            supply_duration_days=self.supply_duration_days,
            use_freezer=self.use_freezer,
            pets=self.pets,
        )


@dataclass
class CalculationSection:
    children_multiplier: float = CHILDREN_REQUIREMENT_MULTIPLIER
    daily_water_per_person: float = DAILY_WATER_PER_PERSON

    def to_options(self) -> CalculationOptions:
        return CalculationOptions(
            children_multiplier=self.children_multiplier,
            daily_water_per_person=self.daily_water_per_person,
        )


@dataclass
class AlertSection:
    expiring_soon_days: int = EXPIRING_SOON_ALERT_DAYS
    dismissed: list[str] = field(default_factory=list)


@dataclass
class CatalogSection:
    path: str = ""  # empty means the built-in catalog
    language: str = "en"
    disabled_items: list[str] = field(default_factory=list)
    categories: list[str] = field(default_factory=lambda: list(STANDARD_CATEGORIES))


@dataclass
class InventorySection:
    path: str = DEFAULT_INVENTORY_PATH


@dataclass
class StockpileConfig:
    household: HouseholdSection = field(default_factory=HouseholdSection)
    calculation: CalculationSection = field(default_factory=CalculationSection)
    alerts: AlertSection = field(default_factory=AlertSection)
    catalog: CatalogSection = field(default_factory=CatalogSection)
    inventory: InventorySection = field(default_factory=InventorySection)


def load_config(path: str | Path | None = None) -> StockpileConfig:
    """Load configuration from a TOML file.

    Falls back to defaults if no path is given or the file doesn't exist.
    The inventory path can be overridden via STOCKPILE_INVENTORY.
    """
    raw: dict = {}

    if path is not None:
        p = Path(path)
        if p.exists():
            if tomllib is None:
                raise ImportError(
                    "tomli is required on Python < 3.11: pip install tomli"
                )
            with open(p, "rb") as f:
                raw = tomllib.load(f)

    hh = raw.get("household", {})
    calc = raw.get("calculation", {})
    alr = raw.get("alerts", {})
    cat = raw.get("catalog", {})
    inv = raw.get("inventory", {})

    # Resolve inventory path: config file → environment variable → default
    inventory_path = (
        inv.get("path", "")
        or os.environ.get("STOCKPILE_INVENTORY", "")
        or DEFAULT_INVENTORY_PATH
    )

    # Custom categories are shown after the standard ones
    categories = list(STANDARD_CATEGORIES)
    for category_id in cat.get("categories", []):
        if category_id not in categories:
            categories.append(category_id)

    return StockpileConfig(
        household=HouseholdSection(
            adults=hh.get("adults", 2),
            children=hh.get("children", 0),
            supply_duration_days=hh.get("supply_duration_days", 3),
            use_freezer=hh.get("use_freezer", False),
            pets=hh.get("pets", 0),
        ),
        calculation=CalculationSection(
            children_multiplier=calc.get(
                "children_multiplier", CHILDREN_REQUIREMENT_MULTIPLIER
            ),
            daily_water_per_person=calc.get(
                "daily_water_per_person", DAILY_WATER_PER_PERSON
            ),
        ),
        alerts=AlertSection(
            expiring_soon_days=alr.get("expiring_soon_days", EXPIRING_SOON_ALERT_DAYS),
            dismissed=list(alr.get("dismissed", [])),
        ),
        catalog=CatalogSection(
            path=cat.get("path", ""),
            language=cat.get("language", "en"),
            disabled_items=list(cat.get("disabled_items", [])),
            categories=categories,
        ),
        inventory=InventorySection(path=inventory_path),
    )
