"""Configuration loader for artisturls.

This module loads and validates the YAML settings file that tunes the HTTP
probe and the site priority list.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from artisturls.classifier.classifier import URLClassifier
from artisturls.core.constants import DEFAULTS, SITE_PRIORITY
from artisturls.core.exceptions import ConfigError, InvalidPriorityListError
from artisturls.rewrite.base import HttpxProbe
from artisturls.rewrite.registry import StrategyRegistry


# ============================================================================
# Settings Model
# ============================================================================

@dataclass
class Settings:
    """Validated application settings."""
    probe_timeout: float = DEFAULTS["probe_timeout"]
    user_agent: str = DEFAULTS["user_agent"]
    follow_redirects: bool = DEFAULTS["follow_redirects"]
    site_priority: tuple[str, ...] = field(default_factory=lambda: SITE_PRIORITY)

    def build_probe(self) -> HttpxProbe:
        """Create an HttpxProbe from these settings."""
        return HttpxProbe(
            timeout=self.probe_timeout,
            user_agent=self.user_agent,
            follow_redirects=self.follow_redirects,
        )

    def build_classifier(self) -> URLClassifier:
        """Create a URLClassifier using the configured priority list."""
        return URLClassifier(priorities=self.site_priority)

    def build_registry(self) -> StrategyRegistry:
        """Create a StrategyRegistry whose strategies share a configured probe."""
        return StrategyRegistry(probe=self.build_probe())


# ============================================================================
# Settings Loader
# ============================================================================

def load_settings(settings_file: Path | str | None = None) -> Settings:
    """Load settings from a YAML file.

    Args:
        settings_file: Path to settings YAML file. If None, returns defaults

    Returns:
        Settings object with validated values

    Raises:
        ConfigError: If file not found, YAML parsing fails or a value is invalid
        InvalidPriorityListError: If the priority list is invalid
    """
    if settings_file is None:
        return Settings()

    settings_path = Path(settings_file)

    if not settings_path.exists():
        raise ConfigError(f"Settings file not found: {settings_path}")

    try:
        with settings_path.open("r") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Failed to parse settings YAML: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read settings file: {e}") from e

    if data is None:
        return Settings()

    if not isinstance(data, dict):
        raise ConfigError("Settings must be a mapping")

    probe = _section(data, "probe")
    priority = _section(data, "priority")

    timeout = probe.get("timeout", DEFAULTS["probe_timeout"])
    if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
        raise ConfigError("'probe.timeout' must be a positive number")

    user_agent = probe.get("user_agent", DEFAULTS["user_agent"])
    if not isinstance(user_agent, str) or not user_agent:
        raise ConfigError("'probe.user_agent' must be a non-empty string")

    follow_redirects = probe.get("follow_redirects", DEFAULTS["follow_redirects"])
    if not isinstance(follow_redirects, bool):
        raise ConfigError("'probe.follow_redirects' must be true or false")

    sites = priority.get("sites", list(SITE_PRIORITY))
    _validate_priority_list(sites)

    return Settings(
        probe_timeout=float(timeout),
        user_agent=user_agent,
        follow_redirects=follow_redirects,
        site_priority=tuple(sites),
    )


def _section(data: dict[str, Any], name: str) -> dict[str, Any]:
    section = data.get(name) or {}
    if not isinstance(section, dict):
        raise ConfigError(f"'{name}' section must be a mapping")
    return section


def _validate_priority_list(sites: Any) -> None:
    if not isinstance(sites, list):
        raise InvalidPriorityListError("'priority.sites' must be a list")

    for site in sites:
        if not isinstance(site, str) or not site:
            raise InvalidPriorityListError(f"Invalid site name in priority list: {site!r}")

    seen = set()
    for site in sites:
        if site in seen:
            raise InvalidPriorityListError(f"Duplicate site in priority list: {site}")
        seen.add(site)
