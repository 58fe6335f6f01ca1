"""artisturls: artist profile URL canonicalization, classification and ranking."""

from artisturls.classifier.classifier import URLClassifier, is_secondary, priority_rank
from artisturls.classifier.deduper import URLDeduper
from artisturls.classifier.normalizer import URLNormalizer, clean_url, normalize
from artisturls.core.entry import URLEntry
from artisturls.core.exceptions import ArtistURLError, ConfigError, FormatError, ProbeError
from artisturls.core.models import ParsedURL, ProbeResult
from artisturls.core.validation import validate_format
from artisturls.rewrite.base import HTTPProbe, HttpxProbe, RewriteStrategy
from artisturls.rewrite.registry import StrategyRegistry, resolve_strategy, rewrite
from artisturls.sources.parser import parse

__version__ = "0.1.0"

__all__ = [
    "normalize",
    "clean_url",
    "parse",
    "resolve_strategy",
    "rewrite",
    "is_secondary",
    "priority_rank",
    "validate_format",
    "ParsedURL",
    "ProbeResult",
    "URLEntry",
    "URLNormalizer",
    "URLClassifier",
    "URLDeduper",
    "StrategyRegistry",
    "RewriteStrategy",
    "HTTPProbe",
    "HttpxProbe",
    "ArtistURLError",
    "ConfigError",
    "FormatError",
    "ProbeError",
]
