"""Artist URL entry.

A URLEntry binds a raw artist URL to its normalized form, an active flag and
the identifier of the owning artist. Assigning the raw URL validates it and
re-derives the normalized form in one step, so the two never diverge.
Storage and uniqueness of (artist, url) belong to the persistence layer.
"""

import re
from typing import Optional

from artisturls.classifier.classifier import (
    URLClassifier,
    is_secondary as site_is_secondary,
    priority_rank as site_priority_rank,
)
from artisturls.classifier.normalizer import clean_url, normalize
from artisturls.core.models import ParsedURL
from artisturls.core.validation import validate_format
from artisturls.sources.parser import parse


_PREFIX_RE = re.compile(r"\A(-)?(.*)", re.DOTALL)


class URLEntry:
    """Single URL in an artist's URL list.

    Attributes:
        artist_id: Identifier of the owning artist (never the artist object)
        is_active: Inactive entries render with a leading ``-``
    """

    def __init__(
        self,
        url: str,
        *,
        artist_id: Optional[int] = None,
        is_active: bool = True,
    ) -> None:
        self.artist_id = artist_id
        self.is_active = is_active
        self._url: str = ""
        self._normalized_url: str = ""
        self._parsed_url: Optional[ParsedURL] = None
        self.url = url

    @staticmethod
    def parse_prefix(url: str) -> tuple[bool, str]:
        """Split the inactive marker off a raw URL.

        Returns:
            (is_active, url) where a leading ``-`` means inactive
        """
        prefix, rest = _PREFIX_RE.match(url).groups()
        return prefix is None, rest

    @classmethod
    def from_string(cls, url: str, *, artist_id: Optional[int] = None) -> "URLEntry":
        """Build an entry from user input that may carry a ``-`` marker."""
        is_active, url = cls.parse_prefix(url.strip())
        return cls(url, artist_id=artist_id, is_active=is_active)

    @property
    def url(self) -> str:
        return self._url

    @url.setter
    def url(self, value: str) -> None:
        """Validate, then store the raw URL together with its derived forms.

        Raises:
            FormatError: The entry keeps its previous URL
        """
        cleaned = clean_url(value) if isinstance(value, str) else value
        validate_format(cleaned)

        parsed = parse(cleaned)
        normalized = normalize(cleaned)

        self._url = cleaned
        self._parsed_url = parsed
        self._normalized_url = normalized

    @property
    def normalized_url(self) -> str:
        return self._normalized_url

    @property
    def parsed_url(self) -> ParsedURL:
        return self._parsed_url

    @property
    def domain(self) -> str:
        return self.parsed_url.domain

    @property
    def site_name(self) -> str:
        return self.parsed_url.site_name

    @property
    def is_secondary(self) -> bool:
        return site_is_secondary(self.parsed_url)

    @property
    def priority(self) -> int:
        return site_priority_rank(self.parsed_url)

    def priority_rank(self, classifier: Optional[URLClassifier] = None) -> int:
        """Rank this entry with a specific classifier (e.g. a configured one)."""
        if classifier is None:
            return self.priority
        return classifier.priority_rank(self.parsed_url)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "artist_id": self.artist_id,
            "url": self.url,
            "normalized_url": self.normalized_url,
            "is_active": self.is_active,
        }

    def __str__(self) -> str:
        if self.is_active:
            return self.url
        return f"-{self.url}"

    def __repr__(self) -> str:
        return f"URLEntry({str(self)!r}, artist_id={self.artist_id!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, URLEntry):
            return NotImplemented
        return (self.artist_id, self.url) == (other.artist_id, other.url)

    def __hash__(self) -> int:
        return hash((self.artist_id, self.url))
