"""URL canonicalization for artist URL equality and lookup.

This module maps a raw artist URL to the normalized string used to decide
whether two entries point at the same profile. It handles:
- Profile URL substitution for recognized sites
- Scheme downgrade (https -> http)
- Host rewrites collapsing alternate hostnames of one platform
- Trailing slash canonicalization

It also provides the light clean-up applied to the raw URL before storing it.
"""

import re
from dataclasses import dataclass
from typing import Callable, Optional, Union
from urllib.parse import urlsplit, urlunsplit

from artisturls.core.constants import DEFAULT_PORTS
from artisturls.sources.parser import parse


@dataclass
class HostRewriteRule:
    """Single ordered host/path substitution applied during normalization."""
    name: str
    pattern: str
    replacement: Union[str, Callable[[re.Match], str]]
    description: str = ""

    def __post_init__(self) -> None:
        """Compile regex pattern after initialization."""
        self.regex = re.compile(self.pattern)

    def apply(self, url: str) -> str:
        """Apply the substitution once; unmatched URLs are returned unchanged."""
        return self.regex.sub(self.replacement, url, count=1)


def _fc2_user_blog(match: re.Match) -> str:
    # Drops the rest of the URL; the user segment is a lowercased subdomain
    return f"http://{match.group(1).lower()}.blog.fc2.com"


DEFAULT_HOST_RULES: tuple[HostRewriteRule, ...] = (
    HostRewriteRule(
        name="fc2_numbered_image_host",
        pattern=r"^http://blog-imgs-\d+\.fc2",
        replacement="http://blog.fc2",
        description="blog-imgs-NN.fc2.com image hosts",
    ),
    HostRewriteRule(
        name="fc2_numbered_suffixed_image_host",
        pattern=r"^http://blog-imgs-\d+-\w+\.fc2",
        replacement="http://blog.fc2",
        description="blog-imgs-NN-origin.fc2.com image hosts",
    ),
    HostRewriteRule(
        name="fc2_legacy_path_blog",
        pattern=r"^http://blog\d+\.fc2\.com/(?:\w/){0,3}([\w-]+).*",
        replacement=_fc2_user_blog,
        description="blogN.fc2.com/u/s/user/... legacy blogs to user.blog.fc2.com",
    ),
)


class URLNormalizer:
    """Normalize artist URLs for equality and lookup.

    Normalization steps:
    1. Substitute the site's profile URL when the parser finds one
    2. Downgrade https:// to http://
    3. Apply host rewrite rules in order
    4. Strip trailing slashes, then append exactly one

    The result is a pure function of the input and normalizing it again
    yields the same string.
    """

    DEFAULT_PORTS = DEFAULT_PORTS

    def __init__(self, *, rules: Optional[list[HostRewriteRule]] = None):
        """Initialize URLNormalizer.

        Args:
            rules: Host rewrite rules (defaults to DEFAULT_HOST_RULES)
        """
        self.rules = tuple(rules) if rules is not None else DEFAULT_HOST_RULES

    def normalize(self, url: Optional[str]) -> Optional[str]:
        """Normalize a single URL.

        Args:
            url: Raw URL string

        Returns:
            Normalized URL string, or None if url is None
        """
        if url is None:
            return None

        url = parse(url).profile_url or url
        url = re.sub(r"^https://", "http://", url)

        for rule in self.rules:
            url = rule.apply(url)

        url = re.sub(r"/+\Z", "", url)
        return url + "/"

    def normalize_batch(self, urls: list[str]) -> list[str]:
        """Normalize a batch of URLs.

        Args:
            urls: List of URLs to normalize

        Returns:
            List of normalized URLs, in input order
        """
        return [self.normalize(url) for url in urls]

    def clean(self, url: str) -> str:
        """Tidy a raw URL for storage without changing what it points at.

        Strips surrounding whitespace, lowercases scheme and host and removes
        default ports. Input that cannot be parsed is returned stripped.

        Args:
            url: Raw URL string

        Returns:
            Cleaned URL string
        """
        url = url.strip()
        try:
            parts = urlsplit(url)
        except ValueError:
            return url

        if not parts.scheme or not parts.netloc:
            return url

        scheme = parts.scheme.lower()
        netloc = self._normalize_netloc(parts.netloc, scheme)
        return urlunsplit((scheme, netloc, parts.path, parts.query, parts.fragment))

    def _normalize_netloc(self, netloc: str, scheme: str) -> str:
        """Normalize network location (host:port).

        Args:
            netloc: Network location string
            scheme: URL scheme

        Returns:
            Normalized netloc; userinfo keeps its case
        """
        userinfo, at, hostport = netloc.rpartition('@')
        hostport = hostport.lower()

        # Remove default ports
        if ':' in hostport and not hostport.endswith(']'):
            host, port_str = hostport.rsplit(':', 1)
            try:
                port = int(port_str)
                if port == self.DEFAULT_PORTS.get(scheme):
                    hostport = host
            except ValueError:
                # Port is not a number, keep as is
                pass

        return f"{userinfo}{at}{hostport}"


_default_normalizer = URLNormalizer()


def normalize(url: Optional[str]) -> Optional[str]:
    """Normalize url with the default rules."""
    return _default_normalizer.normalize(url)


def clean_url(url: str) -> str:
    """Clean url with the default normalizer."""
    return _default_normalizer.clean(url)
