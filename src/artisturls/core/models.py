"""Core data models for artisturls.

This module defines the immutable structures passed between the parser,
the classifier and the rewrite strategies.
"""

from dataclasses import dataclass
from typing import Optional

from artisturls.core.constants import UNKNOWN_SITE


# ============================================================================
# Parsed URL Model
# ============================================================================

@dataclass(frozen=True)
class ParsedURL:
    """Structured, site-aware view of a raw URL string.

    Produced by ``artisturls.sources.parser.parse``. Unrecognized or
    malformed input still yields a ParsedURL, with ``site_name`` set to
    ``"unknown"`` and no profile URL.
    """
    url: str                                # Original string, unchanged
    scheme: str = ""
    host: str = ""                          # Lowercased, no port
    port: Optional[int] = None
    path: str = ""
    query: str = ""
    fragment: str = ""

    # Derived attributes
    domain: str = ""                        # Registrable domain (pixiv.net)
    site_name: str = UNKNOWN_SITE
    profile_url: Optional[str] = None       # Canonical profile URL, if any

    @property
    def is_recognized(self) -> bool:
        """Check if a site grammar matched this URL."""
        return self.site_name != UNKNOWN_SITE

    @property
    def subdomain(self) -> str:
        """Host labels in front of the registrable domain."""
        if self.domain and self.host.endswith("." + self.domain):
            return self.host[: -len(self.domain) - 1]
        return ""

    def to_dict(self) -> dict[str, Optional[str]]:
        """Convert to dictionary."""
        return {
            "url": self.url,
            "domain": self.domain,
            "site_name": self.site_name,
            "profile_url": self.profile_url,
        }


# ============================================================================
# Probe Result Model
# ============================================================================

@dataclass(frozen=True)
class ProbeResult:
    """Outcome of a single HTTP HEAD probe."""
    success: bool
    location: Optional[str] = None          # Final URL when redirected
    status_code: Optional[int] = None

    @property
    def is_redirect(self) -> bool:
        """Check if the probe stopped at an unfollowed 3xx response."""
        return self.status_code is not None and 300 <= self.status_code < 400
