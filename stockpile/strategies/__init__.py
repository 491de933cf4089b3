"""Category calculation strategies and their registry."""

from .base import ActualQuantity, CalculationContext, CategoryStrategy
from .communication import CommunicationCategoryStrategy
from .default import DefaultCategoryStrategy
from .food import FoodCategoryStrategy
from .registry import StrategyRegistry
from .water import WaterCategoryStrategy

__all__ = [
    "ActualQuantity",
    "CalculationContext",
    "CategoryStrategy",
    "CommunicationCategoryStrategy",
    "DefaultCategoryStrategy",
    "FoodCategoryStrategy",
    "StrategyRegistry",
    "WaterCategoryStrategy",
]
