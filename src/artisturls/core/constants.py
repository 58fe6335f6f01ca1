"""Constants used throughout artisturls.

This module contains the curated site preference list, sentinel values and
application defaults so every component agrees on them.
"""

# Site name reported for URLs that match no known grammar
UNKNOWN_SITE = "unknown"

# Rank given to unknown or unlisted sites; sorts behind every listed site
PRIORITY_SENTINEL = 1000


# The sort order of sites in artist URL lists, most preferred first.
SITE_PRIORITY = (
    # Primary art sites
    "Pixiv", "Twitter",
    # Other art and social platforms
    "ArtStation", "Baraag", "BCY", "Deviant Art", "Hentai Foundry", "Fantia",
    "Foundation", "Lofter", "Nico Seiga", "Nijie", "Pawoo", "Pixiv Fanbox",
    "Pixiv Sketch", "Plurk", "Tinami", "Tumblr", "Weibo",
    # Personal pages, shops and streaming
    "Ask.fm", "Booth.pm", "Facebook", "FC2", "Gumroad", "Instagram", "Ko-fi",
    "Livedoor", "Mihuashi", "Mixi.jp", "Patreon", "Piapro.jp", "Picarto",
    "Privatter", "Sakura.ne.jp", "Stickam", "Skeb", "Twitch", "Youtube",
    # Storefronts and reference databases
    "Amazon", "Circle.ms", "DLSite", "Doujinshi.org", "Erogamescape",
    "Mangaupdates", "Melonbooks", "Toranoana", "Wikipedia",
)


# Schemes accepted by format validation
ALLOWED_SCHEMES = ("http", "https")

DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
}


# Application-wide defaults
DEFAULTS = {
    "probe_timeout": 5.0,
    "user_agent": "artisturls/0.1.0",
    "follow_redirects": True,
}
