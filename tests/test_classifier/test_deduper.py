"""Unit tests for URL deduplication."""

import unittest

from artisturls.classifier.deduper import URLDeduper
from artisturls.classifier.normalizer import HostRewriteRule, URLNormalizer


class TestURLDeduper(unittest.TestCase):
    """Test suite for URLDeduper class."""

    def setUp(self):
        """Set up test fixtures."""
        self.deduper = URLDeduper()

    def test_deduplicate_same_profile(self):
        """Test spellings of one profile collapse to the first occurrence."""
        urls = [
            "https://www.pixiv.net/member.php?id=1",
            "https://twitter.com/someone",
            "http://pixiv.net/users/1/",
            "https://x.com/someone",
        ]
        self.assertEqual(
            self.deduper.deduplicate(urls),
            ["https://www.pixiv.net/member.php?id=1", "https://twitter.com/someone"],
        )

    def test_deduplicate_scheme_and_slash(self):
        """Test scheme and trailing slash differences are duplicates."""
        urls = ["https://example.com/a", "http://example.com/a/", "http://example.com/b"]
        self.assertEqual(self.deduper.deduplicate(urls), ["https://example.com/a", "http://example.com/b"])

    def test_deduplicate_with_key(self):
        """Test deduplicating objects through a key function."""
        items = [
            {"id": 1, "url": "https://example.com/a"},
            {"id": 2, "url": "http://example.com/a"},
        ]
        result = self.deduper.deduplicate(items, key=lambda item: item["url"])
        self.assertEqual([item["id"] for item in result], [1])

    def test_deduplicate_empty(self):
        """Test empty input."""
        self.assertEqual(self.deduper.deduplicate([]), [])

    def test_get_duplicates(self):
        """Test duplicate groups are keyed by normalized URL."""
        groups = self.deduper.get_duplicates([
            "https://twitter.com/someone",
            "https://x.com/someone",
            "https://example.com/",
        ])
        self.assertEqual(
            groups,
            {"http://twitter.com/someone/": ["https://twitter.com/someone", "https://x.com/someone"]},
        )

    def test_custom_normalizer(self):
        """Test an injected normalizer defines identity."""
        normalizer = URLNormalizer(rules=[
            HostRewriteRule("mirror", r"^http://mirror\.example\.com", "http://example.com"),
        ])
        deduper = URLDeduper(normalizer=normalizer)
        urls = ["https://example.com/a", "https://mirror.example.com/a"]
        self.assertEqual(deduper.deduplicate(urls), ["https://example.com/a"])


if __name__ == "__main__":
    unittest.main()
