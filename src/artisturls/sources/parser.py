"""Site-aware URL parsing.

``parse`` turns any raw string into a ParsedURL. It never raises: malformed,
non-http(s) and unrecognized input degrade to ``site_name = "unknown"`` with
no profile URL.
"""

from typing import Any, Optional
from urllib.parse import urlsplit

import tldextract

from artisturls.core.constants import ALLOWED_SCHEMES
from artisturls.core.models import ParsedURL
from artisturls.sources.sites import find_grammar


# Offline extractor: uses the public suffix snapshot bundled with tldextract
_extractor = tldextract.TLDExtract(suffix_list_urls=(), cache_dir=None)


def get_domain(host: str) -> str:
    """Extract the registrable domain from a host.

    Args:
        host: Lowercased host name without port

    Returns:
        Domain such as ``pixiv.net``; the host itself for IPs or bare names
    """
    if not host:
        return ""
    ext = _extractor(host)
    if ext.domain and ext.suffix:
        return f"{ext.domain}.{ext.suffix}"
    return ext.domain or host


def parse(url: Any) -> ParsedURL:
    """Parse a raw URL string into a site-aware ParsedURL.

    Args:
        url: Raw user input

    Returns:
        ParsedURL; unrecognized or malformed input yields the unknown site
    """
    if not isinstance(url, str):
        return ParsedURL(url="" if url is None else str(url))

    text = url.strip()
    try:
        parts = urlsplit(text)
        port: Optional[int] = parts.port
    except ValueError:
        return ParsedURL(url=url)

    scheme = parts.scheme.lower()
    host = (parts.hostname or "").rstrip(".")

    base = dict(
        url=url,
        scheme=scheme,
        host=host,
        port=port,
        path=parts.path,
        query=parts.query,
        fragment=parts.fragment,
        domain=get_domain(host),
    )

    if scheme not in ALLOWED_SCHEMES or not host:
        return ParsedURL(**base)

    grammar = find_grammar(host, parts.path)
    if grammar is None:
        return ParsedURL(**base)

    target = host + parts.path
    if parts.query:
        target += "?" + parts.query

    return ParsedURL(
        **base,
        site_name=grammar.name,
        profile_url=grammar.profile_url(target),
    )


def profile_url(url: Any) -> Optional[str]:
    """Shortcut for ``parse(url).profile_url``."""
    return parse(url).profile_url
