"""Unit tests for URLEntry.

Tests cover:
- Assignment: clean-up, validation, derived normalized form
- Failed assignment leaves the previous URL in place
- Inactive marker parsing and rendering
- Read-through site properties
- Equality on (artist_id, url)
"""

import unittest

from artisturls.classifier.classifier import URLClassifier
from artisturls.core.constants import PRIORITY_SENTINEL
from artisturls.core.entry import URLEntry
from artisturls.core.exceptions import FormatError


class TestURLEntryAssignment(unittest.TestCase):
    """Test URL assignment and derived fields."""

    def test_normalized_url_derived(self):
        """Test the normalized form is computed on creation."""
        entry = URLEntry("https://www.pixiv.net/member.php?id=1", artist_id=7)
        self.assertEqual(entry.url, "https://www.pixiv.net/member.php?id=1")
        self.assertEqual(entry.normalized_url, "http://www.pixiv.net/users/1/")
        self.assertEqual(entry.artist_id, 7)
        self.assertTrue(entry.is_active)

    def test_reassignment_rederives(self):
        """Test changing the URL recomputes every derived field."""
        entry = URLEntry("https://twitter.com/someone")
        entry.url = "https://someone.tumblr.com/"
        self.assertEqual(entry.normalized_url, "http://someone.tumblr.com/")
        self.assertEqual(entry.site_name, "Tumblr")

    def test_url_is_cleaned(self):
        """Test whitespace, case and default port are tidied before storing."""
        entry = URLEntry("  HTTPS://Twitter.com:443/Someone ")
        self.assertEqual(entry.url, "https://twitter.com/Someone")

    def test_invalid_url_raises(self):
        """Test invalid input raises FormatError on creation."""
        with self.assertRaises(FormatError):
            URLEntry("ftp://example.com")
        with self.assertRaises(FormatError):
            URLEntry("")

    def test_failed_assignment_keeps_previous(self):
        """Test a rejected assignment leaves raw and derived forms unchanged."""
        entry = URLEntry("https://twitter.com/someone")
        with self.assertRaises(FormatError):
            entry.url = "http://localhost"
        self.assertEqual(entry.url, "https://twitter.com/someone")
        self.assertEqual(entry.normalized_url, "http://twitter.com/someone/")
        self.assertEqual(entry.site_name, "Twitter")

    def test_normalized_url_read_only(self):
        """Test the normalized form cannot be set independently."""
        entry = URLEntry("https://example.com/")
        with self.assertRaises(AttributeError):
            entry.normalized_url = "http://other.com/"


class TestURLEntryPrefix(unittest.TestCase):
    """Test the inactive '-' marker."""

    def test_parse_prefix(self):
        """Test the marker is split off."""
        self.assertEqual(URLEntry.parse_prefix("-https://a.com"), (False, "https://a.com"))
        self.assertEqual(URLEntry.parse_prefix("https://a.com"), (True, "https://a.com"))

    def test_from_string_inactive(self):
        """Test from_string marks prefixed URLs inactive."""
        entry = URLEntry.from_string(" -https://twitter.com/someone", artist_id=3)
        self.assertFalse(entry.is_active)
        self.assertEqual(entry.url, "https://twitter.com/someone")
        self.assertEqual(entry.artist_id, 3)

    def test_str_renders_marker(self):
        """Test str() renders inactive entries with a leading '-'."""
        entry = URLEntry("https://twitter.com/someone", is_active=False)
        self.assertEqual(str(entry), "-https://twitter.com/someone")
        entry.is_active = True
        self.assertEqual(str(entry), "https://twitter.com/someone")


class TestURLEntryProperties(unittest.TestCase):
    """Test read-through site properties."""

    def test_site_properties(self):
        """Test domain, site name, secondary flag and priority."""
        entry = URLEntry("https://www.pixiv.net/stacc/someone")
        self.assertEqual(entry.domain, "pixiv.net")
        self.assertEqual(entry.site_name, "Pixiv")
        self.assertTrue(entry.is_secondary)
        self.assertEqual(entry.priority, 0)

    def test_unknown_site(self):
        """Test unknown sites fall back instead of failing."""
        entry = URLEntry("https://example.com/someone")
        self.assertEqual(entry.site_name, "unknown")
        self.assertFalse(entry.is_secondary)
        self.assertEqual(entry.priority, PRIORITY_SENTINEL)

    def test_priority_rank_with_classifier(self):
        """Test ranking with an injected classifier."""
        entry = URLEntry("https://twitter.com/someone")
        self.assertEqual(entry.priority_rank(URLClassifier(priorities=["Twitter"])), 0)
        self.assertEqual(entry.priority_rank(), 1)

    def test_to_dict(self):
        """Test dictionary conversion."""
        entry = URLEntry("https://twitter.com/someone", artist_id=1, is_active=False)
        self.assertEqual(entry.to_dict(), {
            "artist_id": 1,
            "url": "https://twitter.com/someone",
            "normalized_url": "http://twitter.com/someone/",
            "is_active": False,
        })


class TestURLEntryEquality(unittest.TestCase):
    """Test equality and hashing."""

    def test_equal_on_artist_and_url(self):
        """Test entries with the same artist and raw URL are equal."""
        a = URLEntry("https://twitter.com/someone", artist_id=1)
        b = URLEntry("https://twitter.com/someone", artist_id=1, is_active=False)
        c = URLEntry("https://twitter.com/someone", artist_id=2)
        self.assertEqual(a, b)
        self.assertNotEqual(a, c)
        self.assertEqual(len({a, b, c}), 2)


if __name__ == "__main__":
    unittest.main()
