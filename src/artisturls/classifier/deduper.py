"""Artist URL deduplication.

This module removes URLs that point at the same profile, using the normalized
form produced by URLNormalizer as the identity key.
"""

from typing import Callable, Iterable, Optional, TypeVar

from artisturls.classifier.normalizer import URLNormalizer


T = TypeVar("T")


class URLDeduper:
    """Deduplicate artist URLs based on their normalized representation.

    Two URLs are duplicates when they normalize to the same string, e.g.
    ``https://www.pixiv.net/member.php?id=1`` and ``http://pixiv.net/users/1/``.
    """

    def __init__(self, *, normalizer: Optional[URLNormalizer] = None):
        """Initialize URLDeduper.

        Args:
            normalizer: URLNormalizer instance (creates default if None)
        """
        self.normalizer = normalizer or URLNormalizer()

    def deduplicate(
        self,
        items: Iterable[T],
        *,
        key: Optional[Callable[[T], str]] = None,
    ) -> list[T]:
        """Deduplicate a list of URLs or URL-bearing objects.

        Args:
            items: URLs or objects carrying a URL
            key: Extracts the raw URL from each item (defaults to the item itself)

        Returns:
            Deduplicated list (preserves first occurrence order)
        """
        key = key or (lambda item: item)
        seen_keys = set()
        deduplicated = []

        for item in items:
            dedup_key = self.normalizer.normalize(key(item))
            if dedup_key not in seen_keys:
                seen_keys.add(dedup_key)
                deduplicated.append(item)

        return deduplicated

    def get_duplicates(self, urls: list[str]) -> dict[str, list[str]]:
        """Find duplicate URL groups.

        Args:
            urls: List of URLs to analyze

        Returns:
            Dictionary mapping normalized URLs to lists of duplicate raw URLs
        """
        duplicates: dict[str, list[str]] = {}

        for url in urls:
            duplicates.setdefault(self.normalizer.normalize(url), []).append(url)

        # Filter to only groups with actual duplicates
        return {
            key: urls_list
            for key, urls_list in duplicates.items()
            if len(urls_list) > 1
        }
