from __future__ import annotations

import logging

from pixel_puppy.models import ResponsiveImageOptions

from .base import ResponsiveStrategy
from .strategies import DefaultStrategy, NonResponsiveStrategy, SizesStrategy, WidthStrategy

logger = logging.getLogger(__name__)

# Tried in insertion order; the first strategy that matches wins.
STRATEGY_REGISTRY: dict[str, ResponsiveStrategy] = {
    NonResponsiveStrategy.name: NonResponsiveStrategy(),
    SizesStrategy.name: SizesStrategy(),
    WidthStrategy.name: WidthStrategy(),
    DefaultStrategy.name: DefaultStrategy(),
}


def select_strategy(options: ResponsiveImageOptions) -> ResponsiveStrategy:
    # DefaultStrategy always matches, so a strategy is always found.
    strategy = next(s for s in STRATEGY_REGISTRY.values() if s.matches(options))
    logger.debug("Selected responsive strategy: %s", strategy.name)
    return strategy
