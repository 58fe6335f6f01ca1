"""Pre-parse URL rewriting.

- RewriteStrategy: Per-site (url, headers, data) transformation
- StrategyRegistry: Ordered first-match dispatch with a default fallback
- HTTPProbe / HttpxProbe: Bounded HEAD probe used by some strategies
"""

from artisturls.rewrite.base import DefaultStrategy, HTTPProbe, HttpxProbe, RewriteStrategy
from artisturls.rewrite.registry import (
    DEFAULT_STRATEGY_CLASSES,
    StrategyRegistry,
    get_default_registry,
    resolve_strategy,
    rewrite,
)

__all__ = [
    "DefaultStrategy",
    "HTTPProbe",
    "HttpxProbe",
    "RewriteStrategy",
    "DEFAULT_STRATEGY_CLASSES",
    "StrategyRegistry",
    "get_default_registry",
    "resolve_strategy",
    "rewrite",
]
