"""Pure calculation helpers: matching, calories, water and status."""

from .calories import (
    calculate_calories_from_weight,
    calculate_item_total_calories,
    calculate_total_calories,
    calculate_total_weight,
    get_template_calories_per_unit,
    get_template_weight_per_unit,
    resolve_calories_per_unit,
)
from .matching import (
    find_matching_items,
    find_matching_items_by_type,
    has_marked_as_enough,
    item_matches_definition,
    normalize_name,
    sum_matching_items_calories,
    sum_matching_items_quantity,
    sum_matching_items_quantity_by_type,
)
from .status import (
    calculate_item_status,
    get_days_until_expiration,
    get_item_status,
    get_status_from_percentage,
    is_item_expired,
)
from .water import (
    WaterRequirementResult,
    calculate_drinking_water_needed,
    calculate_total_water_available,
    calculate_total_water_required,
    calculate_water_requirements,
    get_water_requirement_per_unit,
    people_multiplier,
)

__all__ = [
    "calculate_total_weight",
    "calculate_calories_from_weight",
    "calculate_total_calories",
    "calculate_item_total_calories",
    "get_template_weight_per_unit",
    "get_template_calories_per_unit",
    "resolve_calories_per_unit",
    "normalize_name",
    "item_matches_definition",
    "find_matching_items",
    "find_matching_items_by_type",
    "sum_matching_items_quantity",
    "sum_matching_items_quantity_by_type",
    "sum_matching_items_calories",
    "has_marked_as_enough",
    "get_status_from_percentage",
    "get_days_until_expiration",
    "is_item_expired",
    "get_item_status",
    "calculate_item_status",
    "WaterRequirementResult",
    "people_multiplier",
    "get_water_requirement_per_unit",
    "calculate_total_water_required",
    "calculate_total_water_available",
    "calculate_drinking_water_needed",
    "calculate_water_requirements",
]
