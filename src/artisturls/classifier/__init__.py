"""Artist URL normalization, classification, and deduplication.

This package provides the display-side processing of artist URLs:
- URLNormalizer: Canonical string used for equality and lookup
- URLClassifier: Secondary detection and display priority rank
- URLDeduper: Collapse URLs that point at the same profile
- HostRewriteRule / SecondaryRule: Rule tables driving the above
"""

from artisturls.classifier.normalizer import URLNormalizer, HostRewriteRule, normalize, clean_url
from artisturls.classifier.deduper import URLDeduper
from artisturls.classifier.classifier import (
    URLClassifier,
    SecondaryRule,
    is_secondary,
    priority_rank,
)

__all__ = [
    "URLNormalizer",
    "HostRewriteRule",
    "normalize",
    "clean_url",
    "URLDeduper",
    "URLClassifier",
    "SecondaryRule",
    "is_secondary",
    "priority_rank",
]
