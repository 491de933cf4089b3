"""Household emergency supply sufficiency calculations."""

from .alerts import count_alerts, filter_dismissed, generate_alerts
from .catalog import Catalog, effective_catalog, load_catalog, validate_catalog_data
from .categories import (
    calculate_all_category_statuses,
    calculate_category_shortages,
    calculate_preparedness_score,
    get_category_status,
)
from .config import StockpileConfig, load_config
from .messages import make_translator
from .models import (
    Alert,
    AlertCounts,
    CalculationOptions,
    CategoryShortage,
    CategoryStatus,
    HouseholdConfig,
    InventoryItem,
    RecommendedItemDefinition,
    ShortageCalculationResult,
)
from .strategies import CategoryStrategy, StrategyRegistry

__all__ = [
    "HouseholdConfig",
    "CalculationOptions",
    "RecommendedItemDefinition",
    "InventoryItem",
    "CategoryShortage",
    "ShortageCalculationResult",
    "CategoryStatus",
    "Alert",
    "AlertCounts",
    "CategoryStrategy",
    "StrategyRegistry",
    "calculate_category_shortages",
    "get_category_status",
    "calculate_all_category_statuses",
    "calculate_preparedness_score",
    "generate_alerts",
    "count_alerts",
    "filter_dismissed",
    "Catalog",
    "load_catalog",
    "validate_catalog_data",
    "effective_catalog",
    "make_translator",
    "StockpileConfig",
    "load_config",
]
