"""Base classes for URL rewrite strategies and the HTTP probe capability.

A rewrite strategy turns a (url, headers, data) tuple into a more canonical
one before parsing. Some strategies confirm a candidate URL with a single
bounded HTTP HEAD request through an HTTPProbe; a failed or timed out probe
means "no rewrite possible" and never reaches the caller as an error.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import Any, Optional

import httpx

from artisturls.core.constants import DEFAULTS
from artisturls.core.exceptions import ProbeError
from artisturls.core.models import ProbeResult


logger = logging.getLogger(__name__)

Headers = Optional[dict[str, str]]
Data = Optional[dict[str, Any]]
RewriteResult = tuple[str, Headers, Data]


# ============================================================================
# HTTP Probe
# ============================================================================

class HTTPProbe(ABC):
    """Capability for a single bounded existence/redirect check."""

    @abstractmethod
    def head(self, url: str, headers: Headers = None) -> ProbeResult:
        """Send one HEAD request.

        Args:
            url: URL to probe
            headers: Extra request headers

        Returns:
            ProbeResult; no response body is read

        Raises:
            ProbeError: On network error or timeout
        """
        pass


class HttpxProbe(HTTPProbe):
    """HTTPProbe backed by an httpx client.

    Each call is a single attempt bounded by ``timeout``; retry policy
    belongs to the caller.
    """

    def __init__(
        self,
        *,
        timeout: float = DEFAULTS["probe_timeout"],
        user_agent: str = DEFAULTS["user_agent"],
        follow_redirects: bool = DEFAULTS["follow_redirects"],
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.timeout = timeout
        self.user_agent = user_agent
        self.follow_redirects = follow_redirects
        self.transport = transport

    def head(self, url: str, headers: Headers = None) -> ProbeResult:
        request_headers = {"User-Agent": self.user_agent, **(headers or {})}

        try:
            with httpx.Client(
                timeout=self.timeout,
                follow_redirects=self.follow_redirects,
                transport=self.transport,
            ) as client:
                response = client.head(url, headers=request_headers)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise ProbeError(f"HEAD {url} failed: {e}") from e

        location = None
        if response.history:
            location = str(response.url)
        elif response.is_redirect:
            location = response.headers.get("location")

        return ProbeResult(
            success=response.is_success,
            location=location,
            status_code=response.status_code,
        )


# ============================================================================
# Rewrite Strategy
# ============================================================================

class RewriteStrategy(ABC):
    """Base class for all rewrite strategies.

    Subclasses declare ``patterns`` (regexes searched in the URL) that decide
    whether the strategy handles a URL, and override ``rewrite``.

    Attributes:
        name: Strategy identifier (e.g. "pixiv")
        patterns: Regexes matched against the raw URL
    """

    name: str = "base"
    patterns: tuple[str, ...] = ()

    def __init__(self, *, probe: Optional[HTTPProbe] = None) -> None:
        self.probe = probe
        self._compiled = tuple(re.compile(pattern, re.IGNORECASE) for pattern in self.patterns)

    def matches(self, url: str) -> bool:
        """Check if this strategy handles url."""
        return any(regex.search(url) for regex in self._compiled)

    @abstractmethod
    def rewrite(self, url: str, headers: Headers = None, data: Data = None) -> RewriteResult:
        """Rewrite a (url, headers, data) tuple.

        Implementations return the input objects unchanged when no rewrite
        applies, and fresh copies of headers/data when one does. The
        caller's dictionaries are never mutated.

        Args:
            url: Raw URL
            headers: Request headers for a later download
            data: Auxiliary data carried along with the URL

        Returns:
            (url, headers, data)
        """
        pass

    def _rewritten(
        self,
        url: str,
        headers: Headers,
        data: Data,
        extra_headers: Headers = None,
    ) -> RewriteResult:
        new_headers = {**(headers or {}), **(extra_headers or {})}
        new_data = dict(data or {})
        return url, new_headers, new_data

    def http_head(self, url: str, headers: Headers = None) -> Optional[ProbeResult]:
        """Probe url, returning None when no probe is configured or it fails."""
        if self.probe is None:
            logger.debug(f"{self.name}: no probe configured, skipping {url}")
            return None

        try:
            return self.probe.head(url, headers)
        except ProbeError as e:
            logger.warning(f"{self.name}: probe failed, keeping original URL: {e}")
            return None

    def http_exists(self, url: str, headers: Headers = None) -> bool:
        """Check if url exists according to the probe."""
        result = self.http_head(url, headers)
        return result is not None and result.success

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class DefaultStrategy(RewriteStrategy):
    """Identity strategy; matches every URL."""

    name = "default"

    def matches(self, url: str) -> bool:
        return True

    def rewrite(self, url: str, headers: Headers = None, data: Data = None) -> RewriteResult:
        return url, headers, data
