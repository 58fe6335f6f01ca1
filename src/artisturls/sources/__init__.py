"""Site-specific URL grammars and parsing.

- parse: Turn a raw string into a site-aware ParsedURL
- SiteGrammar: Host/path grammar of one known platform
- ProfileRule: Regex + template extracting a canonical profile URL
"""

from artisturls.sources.parser import parse, get_domain, profile_url
from artisturls.sources.sites import SITE_GRAMMARS, SiteGrammar, ProfileRule, find_grammar

__all__ = [
    "parse",
    "get_domain",
    "profile_url",
    "SITE_GRAMMARS",
    "SiteGrammar",
    "ProfileRule",
    "find_grammar",
]
