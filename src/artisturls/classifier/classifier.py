"""Artist URL classification for display.

This module decides whether an artist URL is secondary (a redundant or noisy
alternate of a primary profile URL) and ranks URLs for display using a
curated site preference list. Both queries are pure and recomputed on every
call from the parsed URL.
"""

import re
from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Sequence, TypeVar, Union

from artisturls.core.constants import PRIORITY_SENTINEL, SITE_PRIORITY
from artisturls.core.models import ParsedURL
from artisturls.sources.parser import parse


T = TypeVar("T")


@dataclass
class SecondaryRule:
    """Pattern marking a URL as a redundant alternate of a primary profile."""
    name: str
    pattern: str
    description: str = ""

    def __post_init__(self) -> None:
        """Compile regex pattern after initialization."""
        self.regex = re.compile(self.pattern, re.IGNORECASE)

    def matches(self, url: str) -> bool:
        """Check if url matches this rule."""
        return self.regex.search(url) is not None


DEFAULT_SECONDARY_RULES: tuple[SecondaryRule, ...] = (
    SecondaryRule("pixiv_stacc", r"pixiv\.net/stacc", "Pixiv activity feed"),
    SecondaryRule("pixiv_fanbox", r"pixiv\.net/fanbox", "Legacy Fanbox path on pixiv.net"),
    SecondaryRule("twitter_intent", r"twitter\.com/intent", "Intent link instead of a profile"),
    SecondaryRule("nicoseiga_lohas", r"lohas\.nicoseiga\.jp", "NicoSeiga image host"),
    SecondaryRule("nicovideo_alternate", r"(?:www|com|dic)\.nicovideo\.jp", "Niconico pages besides Seiga"),
    SecondaryRule("pawoo_web_accounts", r"pawoo\.net/web/accounts", "Pawoo web interface account id"),
    SecondaryRule("artstation_www", r"www\.artstation\.com", "Mirror of the user.artstation.com portfolio"),
    SecondaryRule("livedoor_blogimg", r"blogimg\.jp", "Livedoor image host"),
    SecondaryRule("livedoor_image_blog", r"image\.blog\.livedoor\.jp", "Livedoor image host"),
)


URLLike = Union[ParsedURL, str]


class URLClassifier:
    """Classify artist URLs for display.

    - is_secondary: URL is redundant with a primary profile URL
    - priority_rank: position of the URL's site in the preference list,
      lower ranks first; unknown and unlisted sites get PRIORITY_SENTINEL
    """

    def __init__(
        self,
        *,
        priorities: Sequence[str] = SITE_PRIORITY,
        secondary_rules: Optional[list[SecondaryRule]] = None,
    ):
        """Initialize URLClassifier.

        Args:
            priorities: Site names, most preferred first
            secondary_rules: Replacement secondary rules (defaults to DEFAULT_SECONDARY_RULES)
        """
        self.priorities = tuple(priorities)
        self._ranks = {}
        for index, site in enumerate(self.priorities):
            self._ranks.setdefault(site, index)
        self.secondary_rules = (
            tuple(secondary_rules) if secondary_rules is not None else DEFAULT_SECONDARY_RULES
        )

    def _parsed(self, url: URLLike) -> ParsedURL:
        if isinstance(url, ParsedURL):
            return url
        return parse(url)

    def is_secondary(self, url: URLLike) -> bool:
        """Check if URL is a redundant alternate of a primary profile URL.

        Args:
            url: ParsedURL or raw URL string

        Returns:
            True if any secondary rule matches the original URL string
        """
        text = self._parsed(url).url
        return any(rule.matches(text) for rule in self.secondary_rules)

    def priority_rank(self, url: URLLike) -> int:
        """Get the display rank of a URL.

        Args:
            url: ParsedURL or raw URL string

        Returns:
            Zero-based position of the site in the preference list, or
            PRIORITY_SENTINEL for unknown or unlisted sites
        """
        return self._ranks.get(self._parsed(url).site_name, PRIORITY_SENTINEL)

    def sort_by_priority(
        self,
        items: Iterable[T],
        *,
        key: Optional[Callable[[T], URLLike]] = None,
    ) -> list[T]:
        """Sort items by priority rank.

        The sort is stable, so items of equal rank keep their input order.

        Args:
            items: URLs, ParsedURLs or arbitrary objects
            key: Extracts the URL from each item (defaults to the item itself)

        Returns:
            New list ordered from most to least preferred
        """
        key = key or (lambda item: item)
        return sorted(items, key=lambda item: self.priority_rank(key(item)))

    def get_statistics(self, urls: list[str]) -> dict[str, int]:
        """Get classification statistics for a list of URLs.

        Args:
            urls: List of URLs to analyze

        Returns:
            Dictionary with classification statistics
        """
        parsed = [parse(url) for url in urls]
        return {
            "total_urls": len(parsed),
            "recognized_urls": sum(1 for p in parsed if p.is_recognized),
            "secondary_urls": sum(1 for p in parsed if self.is_secondary(p)),
            "unranked_urls": sum(1 for p in parsed if self.priority_rank(p) == PRIORITY_SENTINEL),
        }


_default_classifier = URLClassifier()


def is_secondary(url: URLLike) -> bool:
    """Secondary check with the default classifier."""
    return _default_classifier.is_secondary(url)


def priority_rank(url: URLLike) -> int:
    """Priority rank with the default classifier."""
    return _default_classifier.priority_rank(url)
