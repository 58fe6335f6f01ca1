"""Unit tests for the YAML settings loader."""

import tempfile
import unittest
from pathlib import Path

from artisturls.classifier.classifier import URLClassifier
from artisturls.core.config import Settings, load_settings
from artisturls.core.constants import DEFAULTS, SITE_PRIORITY
from artisturls.core.exceptions import ConfigError, InvalidPriorityListError
from artisturls.rewrite.base import HttpxProbe
from artisturls.rewrite.registry import StrategyRegistry


EXAMPLE_SETTINGS = Path(__file__).parents[2] / "configs" / "settings.example.yaml"


class TestLoadSettings(unittest.TestCase):
    """Test load_settings with temporary files."""

    def setUp(self):
        """Create temporary directory for each test."""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.dir = Path(self.temp_dir.name)

    def tearDown(self):
        """Clean up temporary directory."""
        self.temp_dir.cleanup()

    def _write(self, content: str) -> Path:
        path = self.dir / "settings.yaml"
        path.write_text(content)
        return path

    def test_no_path_returns_defaults(self):
        """Test defaults when no file is given."""
        settings = load_settings()
        self.assertEqual(settings.probe_timeout, DEFAULTS["probe_timeout"])
        self.assertEqual(settings.site_priority, SITE_PRIORITY)

    def test_missing_file(self):
        """Test a missing file raises ConfigError."""
        with self.assertRaises(ConfigError):
            load_settings(self.dir / "missing.yaml")

    def test_empty_file_returns_defaults(self):
        """Test an empty file yields defaults."""
        settings = load_settings(self._write(""))
        self.assertEqual(settings, Settings())

    def test_full_file(self):
        """Test every supported key is read."""
        path = self._write(
            "probe:\n"
            "  timeout: 2\n"
            "  user_agent: tester\n"
            "  follow_redirects: false\n"
            "priority:\n"
            "  sites: [Tumblr, Pixiv]\n"
        )
        settings = load_settings(str(path))
        self.assertEqual(settings.probe_timeout, 2.0)
        self.assertEqual(settings.user_agent, "tester")
        self.assertFalse(settings.follow_redirects)
        self.assertEqual(settings.site_priority, ("Tumblr", "Pixiv"))

    def test_invalid_yaml(self):
        """Test unparseable YAML raises ConfigError."""
        with self.assertRaises(ConfigError):
            load_settings(self._write("probe: [unclosed\n"))

    def test_not_a_mapping(self):
        """Test a top-level list is rejected."""
        with self.assertRaises(ConfigError):
            load_settings(self._write("- a\n- b\n"))

    def test_bad_timeout(self):
        """Test non-positive and non-numeric timeouts are rejected."""
        for value in ["0", "-1", "soon", "true"]:
            with self.subTest(value=value):
                with self.assertRaises(ConfigError):
                    load_settings(self._write(f"probe:\n  timeout: {value}\n"))

    def test_priority_not_a_list(self):
        """Test a scalar priority list is rejected."""
        with self.assertRaises(InvalidPriorityListError):
            load_settings(self._write("priority:\n  sites: Pixiv\n"))

    def test_priority_duplicates(self):
        """Test duplicate site names are rejected."""
        with self.assertRaises(InvalidPriorityListError):
            load_settings(self._write("priority:\n  sites: [Pixiv, Twitter, Pixiv]\n"))

    def test_priority_non_string(self):
        """Test non-string site names are rejected."""
        with self.assertRaises(InvalidPriorityListError):
            load_settings(self._write("priority:\n  sites: [Pixiv, 3]\n"))

    def test_invalid_priority_is_config_error(self):
        """Test InvalidPriorityListError can be caught as ConfigError."""
        self.assertTrue(issubclass(InvalidPriorityListError, ConfigError))

    def test_example_settings_file_loads(self):
        """Test the shipped example settings are valid."""
        settings = load_settings(EXAMPLE_SETTINGS)
        self.assertEqual(settings.site_priority, SITE_PRIORITY)


class TestSettingsBuilders(unittest.TestCase):
    """Test component wiring from Settings."""

    def test_build_probe(self):
        """Test the probe receives the configured values."""
        probe = Settings(probe_timeout=1.5, user_agent="ua", follow_redirects=False).build_probe()
        self.assertIsInstance(probe, HttpxProbe)
        self.assertEqual(probe.timeout, 1.5)
        self.assertEqual(probe.user_agent, "ua")
        self.assertFalse(probe.follow_redirects)

    def test_build_classifier(self):
        """Test the classifier receives the configured priority list."""
        classifier = Settings(site_priority=("Tumblr",)).build_classifier()
        self.assertIsInstance(classifier, URLClassifier)
        self.assertEqual(classifier.priority_rank("https://someone.tumblr.com/"), 0)

    def test_build_registry(self):
        """Test the registry strategies share one configured probe."""
        registry = Settings(probe_timeout=3.0).build_registry()
        self.assertIsInstance(registry, StrategyRegistry)
        self.assertEqual(registry.strategies[0].probe.timeout, 3.0)


if __name__ == "__main__":
    unittest.main()
