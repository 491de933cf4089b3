"""Shared constants for supply calculations and alerts."""

from __future__ import annotations

# Household scaling
ADULT_REQUIREMENT_MULTIPLIER = 1.0
CHILDREN_REQUIREMENT_MULTIPLIER = 1.0
PET_REQUIREMENT_MULTIPLIER = 1
DAILY_WATER_PER_PERSON = 3.0  # liters

# Calories / weight
CALORIE_BASE_WEIGHT_GRAMS = 100
GRAMS_PER_KILOGRAM = 1000

# Expiration windows (days)
EXPIRING_SOON_DAYS_THRESHOLD = 30
EXPIRING_SOON_ALERT_DAYS = 30

# Item and category status
LOW_QUANTITY_WARNING_RATIO = 0.5
CRITICAL_PERCENTAGE_THRESHOLD = 25
WARNING_PERCENTAGE_THRESHOLD = 50

# Category stock alerts
CRITICALLY_LOW_STOCK_PERCENTAGE = 25
LOW_STOCK_PERCENTAGE = 50

CUSTOM_ITEM_TYPE = "custom"

FOOD_CATEGORY_ID = "food"
WATER_CATEGORY_ID = "water-beverages"
COMMUNICATION_CATEGORY_ID = "communication-info"
BOTTLED_WATER_ID = "bottled-water"

STANDARD_CATEGORIES: tuple[str, ...] = (
    "water-beverages",
    "food",
    "cooking-heat",
    "light-power",
    "communication-info",
    "medical-health",
    "hygiene-sanitation",
    "tools-supplies",
    "cash-documents",
)

UNITS: tuple[str, ...] = (
    "pieces",
    "liters",
    "kilograms",
    "grams",
    "cans",
    "bottles",
    "packages",
    "jars",
    "canisters",
    "boxes",
    "days",
    "rolls",
    "tubes",
    "meters",
    "pairs",
    "euros",
    "sets",
)

MASS_UNIT = "kilograms"
WATER_UNIT = "liters"

# Lower sorts first
ALERT_PRIORITY: dict[str, int] = {
    "critical": 0,
    "warning": 1,
    "info": 2,
}
