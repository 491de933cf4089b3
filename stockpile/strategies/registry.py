"""Ordered, caller-owned dispatch from category id to strategy."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from .base import CategoryStrategy
from .communication import CommunicationCategoryStrategy
from .default import DefaultCategoryStrategy
from .food import FoodCategoryStrategy
from .water import WaterCategoryStrategy

logger = logging.getLogger(__name__)

DEFAULT_STRATEGY_ID = DefaultCategoryStrategy.strategy_id


class StrategyRegistry:
    """Strategies checked in order; the first that can handle a category wins.

    Usage:
        registry = StrategyRegistry.default().register(MyStrategy())
        strategy = registry.get("food")
    """

    def __init__(self, strategies: Iterable[CategoryStrategy]) -> None:
        self._strategies: list[CategoryStrategy] = list(strategies)

    @classmethod
    def default(cls) -> StrategyRegistry:
        """Built-in strategies with the catch-all default last."""
        return cls([
            FoodCategoryStrategy(),
            WaterCategoryStrategy(),
            CommunicationCategoryStrategy(),
            DefaultCategoryStrategy(),
        ])

    def register(self, strategy: CategoryStrategy) -> StrategyRegistry:
        """Insert ``strategy`` just before the default strategy.

        Appends when the registry has no default. Returns self for chaining.
        """
        for index, existing in enumerate(self._strategies):
            if existing.strategy_id == DEFAULT_STRATEGY_ID:
                self._strategies.insert(index, strategy)
                break
        else:
            self._strategies.append(strategy)
        logger.debug("Registered strategy %r", strategy.strategy_id)
        return self

    def get(self, category_id: str) -> CategoryStrategy:
        for strategy in self._strategies:
            if strategy.can_handle(category_id):
                logger.debug(
                    "Category %r handled by %r", category_id, strategy.strategy_id
                )
                return strategy
        raise LookupError(f"No strategy found for category: {category_id!r}")

    @property
    def strategy_ids(self) -> list[str]:
        return [s.strategy_id for s in self._strategies]

    def __len__(self) -> int:
        return len(self._strategies)
