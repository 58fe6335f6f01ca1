"""Unit tests for URL classifier module.

Tests for URLClassifier including the secondary pattern table, priority
ranks, the unknown-site sentinel, stable sorting and injected preference
lists.
"""

import unittest

from artisturls.classifier.classifier import (
    DEFAULT_SECONDARY_RULES,
    SecondaryRule,
    URLClassifier,
    is_secondary,
    priority_rank,
)
from artisturls.core.constants import PRIORITY_SENTINEL, SITE_PRIORITY
from artisturls.sources.parser import parse


class TestSecondaryClassification(unittest.TestCase):
    """Test suite for secondary URL detection."""

    def setUp(self):
        """Set up test fixtures."""
        self.classifier = URLClassifier()

    def test_secondary_examples(self):
        """Test each redundant-pattern example is secondary."""
        urls = [
            "https://www.pixiv.net/stacc/someone",
            "https://www.pixiv.net/fanbox/creator/123",
            "https://twitter.com/intent/user?user_id=42",
            "https://lohas.nicoseiga.jp/thumb/1i",
            "https://www.nicovideo.jp/user/1",
            "https://dic.nicovideo.jp/a/someone",
            "https://pawoo.net/web/accounts/5",
            "https://www.artstation.com/someone",
            "http://livedoor.blogimg.jp/someone/imgs/1.jpg",
            "http://image.blog.livedoor.jp/someone/",
        ]
        for url in urls:
            with self.subTest(url=url):
                self.assertTrue(self.classifier.is_secondary(url))

    def test_primary_profiles_not_secondary(self):
        """Test plain profile URLs on the same platforms are not secondary."""
        urls = [
            "https://www.pixiv.net/users/1",
            "https://twitter.com/someone",
            "https://seiga.nicovideo.jp/user/illust/1",
            "https://pawoo.net/@someone",
            "https://someone.artstation.com/",
            "http://blog.livedoor.jp/someone/",
        ]
        for url in urls:
            with self.subTest(url=url):
                self.assertFalse(self.classifier.is_secondary(url))

    def test_unknown_site_not_secondary(self):
        """Test unlisted patterns are never secondary."""
        self.assertFalse(self.classifier.is_secondary("https://example.com/intent"))

    def test_accepts_parsed_url(self):
        """Test ParsedURL input is classified from its original string."""
        parsed = parse("https://twitter.com/intent/user?user_id=1")
        self.assertTrue(self.classifier.is_secondary(parsed))

    def test_case_insensitive(self):
        """Test patterns ignore case."""
        self.assertTrue(self.classifier.is_secondary("https://WWW.PIXIV.NET/stacc/someone"))

    def test_custom_rules(self):
        """Test injected secondary rules replace the defaults."""
        classifier = URLClassifier(secondary_rules=[SecondaryRule("mirror", r"mirror\.example\.com")])
        self.assertTrue(classifier.is_secondary("https://mirror.example.com/a"))
        self.assertFalse(classifier.is_secondary("https://www.pixiv.net/stacc/someone"))

    def test_default_rules_table(self):
        """Test the default table is non-empty and immutable."""
        self.assertIsInstance(DEFAULT_SECONDARY_RULES, tuple)
        self.assertGreater(len(DEFAULT_SECONDARY_RULES), 0)


class TestPriorityRank(unittest.TestCase):
    """Test suite for priority ranking."""

    def setUp(self):
        """Set up test fixtures."""
        self.classifier = URLClassifier()

    def test_rank_is_list_position(self):
        """Test rank equals the zero-based position of the site."""
        self.assertEqual(self.classifier.priority_rank("https://www.pixiv.net/users/1"), 0)
        self.assertEqual(self.classifier.priority_rank("https://twitter.com/someone"), 1)
        self.assertEqual(
            self.classifier.priority_rank("https://nijie.info/members.php?id=1"),
            SITE_PRIORITY.index("Nijie"),
        )

    def test_earlier_site_ranks_lower(self):
        """Test a site earlier in the list ranks ahead of a later one."""
        pixiv = self.classifier.priority_rank("https://www.pixiv.net/users/1")
        tumblr = self.classifier.priority_rank("https://someone.tumblr.com/")
        self.assertLess(pixiv, tumblr)

    def test_unknown_site_sentinel(self):
        """Test unknown sites rank behind every listed site."""
        rank = self.classifier.priority_rank("https://example.com/someone")
        self.assertEqual(rank, PRIORITY_SENTINEL)
        self.assertGreater(rank, len(SITE_PRIORITY))

    def test_unlisted_recognized_site_sentinel(self):
        """Test recognized sites missing from the list get the sentinel."""
        self.assertEqual(
            self.classifier.priority_rank("https://yande.re/post/show/1"),
            PRIORITY_SENTINEL,
        )

    def test_malformed_input_sentinel(self):
        """Test malformed input ranks with the sentinel instead of raising."""
        self.assertEqual(self.classifier.priority_rank("http://[::1"), PRIORITY_SENTINEL)

    def test_injected_priority_list(self):
        """Test a custom preference list changes the ranking."""
        classifier = URLClassifier(priorities=["Tumblr", "Pixiv"])
        self.assertEqual(classifier.priority_rank("https://someone.tumblr.com/"), 0)
        self.assertEqual(classifier.priority_rank("https://www.pixiv.net/users/1"), 1)
        self.assertEqual(classifier.priority_rank("https://twitter.com/someone"), PRIORITY_SENTINEL)

    def test_module_level_helpers(self):
        """Test module-level helpers use the default classifier."""
        self.assertEqual(priority_rank("https://www.pixiv.net/users/1"), 0)
        self.assertTrue(is_secondary("https://www.pixiv.net/stacc/someone"))


class TestSortByPriority(unittest.TestCase):
    """Test suite for priority sorting."""

    def setUp(self):
        """Set up test fixtures."""
        self.classifier = URLClassifier()

    def test_sort_orders_by_rank(self):
        """Test URLs are ordered from most to least preferred."""
        urls = [
            "https://example.com/a",
            "https://someone.tumblr.com/",
            "https://twitter.com/someone",
            "https://www.pixiv.net/users/1",
        ]
        self.assertEqual(
            self.classifier.sort_by_priority(urls),
            [
                "https://www.pixiv.net/users/1",
                "https://twitter.com/someone",
                "https://someone.tumblr.com/",
                "https://example.com/a",
            ],
        )

    def test_sort_is_stable_for_ties(self):
        """Test equal ranks keep insertion order."""
        urls = [
            "https://example.com/b",
            "https://twitter.com/second",
            "https://example.org/a",
            "https://twitter.com/first",
        ]
        self.assertEqual(
            self.classifier.sort_by_priority(urls),
            [
                "https://twitter.com/second",
                "https://twitter.com/first",
                "https://example.com/b",
                "https://example.org/a",
            ],
        )

    def test_sort_with_key(self):
        """Test sorting arbitrary objects through a key function."""
        items = [{"url": "https://twitter.com/a"}, {"url": "https://www.pixiv.net/users/1"}]
        result = self.classifier.sort_by_priority(items, key=lambda item: item["url"])
        self.assertEqual(result[0]["url"], "https://www.pixiv.net/users/1")

    def test_get_statistics(self):
        """Test statistics counts."""
        stats = self.classifier.get_statistics([
            "https://www.pixiv.net/users/1",
            "https://www.pixiv.net/stacc/someone",
            "https://example.com/",
        ])
        self.assertEqual(stats["total_urls"], 3)
        self.assertEqual(stats["recognized_urls"], 2)
        self.assertEqual(stats["secondary_urls"], 1)
        self.assertEqual(stats["unranked_urls"], 1)


if __name__ == "__main__":
    unittest.main()
