"""Format validation for artist URLs."""

from urllib.parse import urlsplit

from artisturls.core.constants import ALLOWED_SCHEMES
from artisturls.core.exceptions import FormatError


def validate_format(url: str) -> None:
    """Validate that url is an absolute http(s) URL with a dotted hostname.

    Scheme and hostname problems are collected and reported together.

    Args:
        url: Raw URL string

    Raises:
        FormatError: If the URL is blank, malformed, uses another scheme,
            or its hostname contains no dot
    """
    if url is None or not str(url).strip():
        raise FormatError(url or "", ["can't be blank"])
    if not isinstance(url, str):
        raise FormatError(str(url), [f"'{url}' is malformed: expected a string"])

    try:
        parts = urlsplit(url)
        parts.port  # raises on a non-numeric or out of range port
    except ValueError as e:
        raise FormatError(url, [f"'{url}' is malformed: {e}"]) from e

    errors = []

    if parts.scheme.lower() not in ALLOWED_SCHEMES:
        scheme = parts.scheme or "(none)"
        errors.append(f"'{url}' must begin with http:// or https:// (got scheme '{scheme}')")

    host = parts.hostname or ""
    if "." not in host:
        errors.append(f"'{url}' has a hostname '{host}' that does not contain a dot")

    if errors:
        raise FormatError(url, errors)


def is_valid_format(url: str) -> bool:
    """Check url against validate_format without raising."""
    try:
        validate_format(url)
    except FormatError:
        return False
    return True
