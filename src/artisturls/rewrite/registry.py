"""Ordered registry of rewrite strategies.

Dispatch is "first matching strategy wins"; DefaultStrategy is always last
and matches everything. The registry is an optional pre-processing step
that callers run before parsing or normalizing.
"""

import logging
from functools import lru_cache
from typing import Optional, Sequence

from artisturls.rewrite.base import (
    Data,
    DefaultStrategy,
    Headers,
    HTTPProbe,
    HttpxProbe,
    RewriteResult,
    RewriteStrategy,
)
from artisturls.rewrite.strategies import (
    ArtStationStrategy,
    DeviantArtStrategy,
    MoebooruStrategy,
    NicoSeigaStrategy,
    NijieStrategy,
    PawooStrategy,
    PixivStrategy,
    TumblrStrategy,
    TwitpicStrategy,
    TwitterStrategy,
)


logger = logging.getLogger(__name__)


DEFAULT_STRATEGY_CLASSES: tuple[type[RewriteStrategy], ...] = (
    PixivStrategy,
    NicoSeigaStrategy,
    ArtStationStrategy,
    TwitpicStrategy,
    DeviantArtStrategy,
    TumblrStrategy,
    MoebooruStrategy,
    TwitterStrategy,
    NijieStrategy,
    PawooStrategy,
)


class StrategyRegistry:
    """Immutable ordered list of rewrite strategies."""

    def __init__(
        self,
        *,
        strategies: Optional[Sequence[RewriteStrategy]] = None,
        probe: Optional[HTTPProbe] = None,
    ) -> None:
        """Initialize StrategyRegistry.

        Args:
            strategies: Strategies in dispatch order (defaults to one instance
                of each DEFAULT_STRATEGY_CLASSES entry sharing ``probe``)
            probe: Probe handed to the default strategies
        """
        if strategies is None:
            strategies = [cls(probe=probe) for cls in DEFAULT_STRATEGY_CLASSES]

        self.default = DefaultStrategy()
        self.strategies: tuple[RewriteStrategy, ...] = tuple(strategies) + (self.default,)

    def resolve(self, url: str) -> RewriteStrategy:
        """Select the first strategy matching url.

        Args:
            url: Raw URL

        Returns:
            Matching strategy, or the default identity strategy
        """
        if not isinstance(url, str):
            return self.default

        for strategy in self.strategies:
            if strategy.matches(url):
                return strategy

        return self.default

    def rewrite(self, url: str, headers: Headers = None, data: Data = None) -> RewriteResult:
        """Resolve a strategy for url and apply it."""
        strategy = self.resolve(url)
        result = strategy.rewrite(url, headers, data)
        if result[0] != url:
            logger.debug(f"Rewrote {url} -> {result[0]} ({strategy.name})")
        return result

    def __len__(self) -> int:
        return len(self.strategies)

    def __iter__(self):
        return iter(self.strategies)


@lru_cache(maxsize=1)
def get_default_registry() -> StrategyRegistry:
    """Registry with the default strategies and an HttpxProbe using default settings."""
    return StrategyRegistry(probe=HttpxProbe())


def resolve_strategy(url: str) -> RewriteStrategy:
    """Resolve url against the default registry."""
    return get_default_registry().resolve(url)


def rewrite(
    strategy: RewriteStrategy,
    url: str,
    headers: Headers = None,
    data: Data = None,
) -> RewriteResult:
    """Apply strategy to a (url, headers, data) tuple."""
    return strategy.rewrite(url, headers, data)
