"""Site grammars for recognizing artist profile URLs.

Each SiteGrammar recognizes the hosts (and optionally paths) of one known
platform and carries an ordered list of ProfileRule objects that extract the
part of a URL identifying an artist's account on that platform.

Profile rules are matched against ``host + path [+ "?" + query]`` with the
host already lowercased. Every template must parse back to itself, including
after an ``http://`` downgrade and a trailing slash, so normalization stays
idempotent.
"""

import re
from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ProfileRule:
    """Regex plus format template producing a canonical profile URL.

    The template is filled with the match groups in order
    (``"{0}"``, ``"{1}"``, ...). Groups placed in the template's host are
    lowercased, since the parser lowercases hosts when reading the profile
    URL back.
    """
    pattern: str
    template: str

    def __post_init__(self) -> None:
        """Compile regex pattern and find host placeholders after initialization."""
        self.regex = re.compile(self.pattern)
        host = re.match(r"^\w+://([^/?#]*)", self.template)
        self.host_groups = frozenset(
            int(index) for index in re.findall(r"\{(\d+)\}", host.group(1) if host else "")
        )

    def apply(self, target: str) -> Optional[str]:
        """Return the profile URL for target, or None if the rule does not match."""
        match = self.regex.match(target)
        if match is None:
            return None
        groups = [
            group.lower() if index in self.host_groups and group else group
            for index, group in enumerate(match.groups())
        ]
        return self.template.format(*groups)


@dataclass
class SiteGrammar:
    """URL grammar for a single platform."""
    name: str                                   # Display name, e.g. "Pixiv"
    hosts: list[str]                            # Regexes matched against the full host
    profiles: list[ProfileRule] = field(default_factory=list)
    path: Optional[str] = None                  # Optional regex the path must start with

    def __post_init__(self) -> None:
        """Compile host and path patterns after initialization."""
        self.host_regex = re.compile("|".join(f"(?:{host})" for host in self.hosts))
        self.path_regex = re.compile(self.path) if self.path else None

    def matches(self, host: str, path: str) -> bool:
        """Check if this grammar recognizes the given host and path."""
        if not self.host_regex.fullmatch(host):
            return False
        if self.path_regex is not None and not self.path_regex.match(path or "/"):
            return False
        return True

    def profile_url(self, target: str) -> Optional[str]:
        """Apply profile rules in order; first match wins."""
        for rule in self.profiles:
            profile = rule.apply(target)
            if profile is not None:
                return profile
        return None


def _reserved(*names: str) -> str:
    """Negative lookahead rejecting reserved first path segments."""
    return r"(?!(?:%s)(?:[/?]|$))" % "|".join(names)


# ============================================================================
# Grammar Table
# ============================================================================

# Order matters: grammars for specific subdomains or paths come before the
# grammar covering the rest of the same domain.
SITE_GRAMMARS: tuple[SiteGrammar, ...] = (
    SiteGrammar(
        name="Pixiv Sketch",
        hosts=[r"(?:img-)?sketch\.pixiv\.net", r"img-sketch\.pximg\.net"],
        profiles=[
            ProfileRule(r"^sketch\.pixiv\.net/@([\w-]+)", "https://sketch.pixiv.net/@{0}"),
        ],
    ),
    SiteGrammar(
        name="Pixiv Fanbox",
        hosts=[r"(?:www\.|touch\.)?pixiv\.net"],
        path=r"/fanbox(?:/|$)",
        profiles=[
            ProfileRule(
                r"^(?:www\.|touch\.)?pixiv\.net/fanbox/creator/(\d+)",
                "https://www.pixiv.net/fanbox/creator/{0}",
            ),
        ],
    ),
    SiteGrammar(
        name="Pixiv Fanbox",
        hosts=[r"(?:[\w-]+\.)?fanbox\.cc", r"pixiv\.pximg\.net"],
        profiles=[
            ProfileRule(r"^(?:www\.)?fanbox\.cc/@([\w-]+)", "https://{0}.fanbox.cc"),
            ProfileRule(r"^(?!www\.|api\.|downloads\.)([\w-]+)\.fanbox\.cc", "https://{0}.fanbox.cc"),
        ],
    ),
    SiteGrammar(
        name="Booth.pm",
        hosts=[r"(?:[\w-]+\.)?booth\.pm", r"booth\.pximg\.net"],
        profiles=[
            ProfileRule(r"^(?!www\.|accounts\.|asset\.)([\w-]+)\.booth\.pm", "https://{0}.booth.pm"),
        ],
    ),
    SiteGrammar(
        name="Pixiv",
        hosts=[
            r"(?:www\.|touch\.)?pixiv\.net",
            r"i\d*\.pixiv\.net",
            r"img\d+\.pixiv\.net",
            r"(?:i|i-f|s|tc-pximg01)\.pximg\.net",
            r"pixiv\.me",
        ],
        profiles=[
            ProfileRule(r"^(?:www\.|touch\.)?pixiv\.net/(?:en/)?users/(\d+)", "https://www.pixiv.net/users/{0}"),
            ProfileRule(r"^(?:www\.|touch\.)?pixiv\.net/(?:en/)?u/(\d+)", "https://www.pixiv.net/users/{0}"),
            ProfileRule(
                r"^(?:www\.|touch\.)?pixiv\.net/(?:novel/)?(?:member|member_illust)\.php\?(?:[^#]*&)?id=(\d+)",
                "https://www.pixiv.net/users/{0}",
            ),
            ProfileRule(r"^(?:www\.)?pixiv\.net/stacc/([\w-]+)", "https://www.pixiv.net/stacc/{0}"),
            ProfileRule(r"^pixiv\.me/([\w-]+)", "https://pixiv.me/{0}"),
        ],
    ),
    SiteGrammar(
        name="Twitter",
        hosts=[
            r"(?:www\.|mobile\.)?(?:twitter|x)\.com",
            r"(?:pbs|video|abs)\.twimg\.com",
        ],
        profiles=[
            ProfileRule(
                r"^(?:www\.|mobile\.)?(?:twitter|x)\.com/intent/user\?(?:.*&)?user_id=(\d+)",
                "https://twitter.com/intent/user?user_id={0}",
            ),
            ProfileRule(
                r"^(?:www\.|mobile\.)?(?:twitter|x)\.com/intent/user\?(?:.*&)?screen_name=(\w+)",
                "https://twitter.com/{0}",
            ),
            ProfileRule(
                r"^(?:www\.|mobile\.)?(?:twitter|x)\.com/i/user/(\d+)",
                "https://twitter.com/intent/user?user_id={0}",
            ),
            ProfileRule(
                r"^(?:www\.|mobile\.)?(?:twitter|x)\.com/"
                + _reserved("i", "intent", "home", "search", "hashtag", "settings", "messages",
                            "explore", "notifications", "share", "login", "signup")
                + r"(\w+)",
                "https://twitter.com/{0}",
            ),
        ],
    ),
    SiteGrammar(
        name="ArtStation",
        hosts=[r"(?:[\w-]+\.)?artstation\.com"],
        profiles=[
            ProfileRule(r"^(?:www\.)?artstation\.com/artist/([\w-]+)", "https://www.artstation.com/{0}"),
            ProfileRule(
                r"^(?:www\.)?artstation\.com/"
                + _reserved("artwork", "artist", "marketplace", "jobs", "learning", "search",
                            "blogs", "contests", "prints", "about", "users", "api", "sitemap")
                + r"([\w-]+)",
                "https://www.artstation.com/{0}",
            ),
            ProfileRule(r"^(?!www\.|cdn[\w-]*\.)([\w-]+)\.artstation\.com", "https://www.artstation.com/{0}"),
        ],
    ),
    SiteGrammar(
        name="Baraag",
        hosts=[r"baraag\.net"],
        profiles=[
            ProfileRule(r"^baraag\.net/@(\w+)", "https://baraag.net/@{0}"),
            ProfileRule(r"^baraag\.net/users/(\w+)", "https://baraag.net/@{0}"),
            ProfileRule(r"^baraag\.net/web/accounts/(\d+)", "https://baraag.net/web/accounts/{0}"),
        ],
    ),
    SiteGrammar(
        name="Pawoo",
        hosts=[r"(?:img\.)?pawoo\.net"],
        profiles=[
            ProfileRule(r"^pawoo\.net/@(\w+)", "https://pawoo.net/@{0}"),
            ProfileRule(r"^pawoo\.net/users/(\w+)", "https://pawoo.net/@{0}"),
            ProfileRule(r"^pawoo\.net/web/accounts/(\d+)", "https://pawoo.net/web/accounts/{0}"),
        ],
    ),
    SiteGrammar(
        name="BCY",
        hosts=[r"(?:www\.)?bcy\.net", r"[\w-]+\.bcyimg\.com"],
        profiles=[
            ProfileRule(r"^(?:www\.)?bcy\.net/u/(\d+)", "https://bcy.net/u/{0}"),
        ],
    ),
    SiteGrammar(
        name="Deviant Art",
        hosts=[
            r"(?:[\w-]+\.)?deviantart\.com",
            r"[\w-]+\.deviantart\.net",
            r"fav\.me",
            r"images-wixmp-[\w-]+\.wixmp\.com",
        ],
        profiles=[
            ProfileRule(
                r"^(?:www\.)?deviantart\.com/"
                + _reserved("deviation", "users", "search", "tag", "art", "download", "join",
                            "about", "core-membership", "watch", "developers", "team",
                            "settings", "notifications")
                + r"([\w-]+)",
                "https://www.deviantart.com/{0}",
            ),
            ProfileRule(r"^(?!www\.)([\w-]+)\.deviantart\.com", "https://www.deviantart.com/{0}"),
        ],
    ),
    SiteGrammar(
        name="Hentai Foundry",
        hosts=[r"(?:www\.|pictures\.|thumbs\.)?hentai-foundry\.com"],
        profiles=[
            ProfileRule(
                r"^(?:www\.)?hentai-foundry\.com/(?:user|pictures/user|stories/user)/([\w-]+)",
                "https://www.hentai-foundry.com/user/{0}",
            ),
            ProfileRule(
                r"^pictures\.hentai-foundry\.com/\w/([\w-]+)(?:[/?]|$)",
                "https://www.hentai-foundry.com/user/{0}",
            ),
        ],
    ),
    SiteGrammar(
        name="Fantia",
        hosts=[r"(?:www\.|c\.|cc\.)?fantia\.jp"],
        profiles=[
            ProfileRule(r"^(?:www\.)?fantia\.jp/fanclubs/(\d+)", "https://fantia.jp/fanclubs/{0}"),
        ],
    ),
    SiteGrammar(
        name="Foundation",
        hosts=[r"(?:[\w-]+\.)?foundation\.app"],
        profiles=[
            ProfileRule(r"^(?:www\.)?foundation\.app/@([\w-]+)", "https://foundation.app/@{0}"),
        ],
    ),
    SiteGrammar(
        name="Lofter",
        hosts=[r"(?:[\w-]+\.)?lofter\.com", r"imglf\d*\.lf127\.net", r"imglf\d*\.nosdn\d*\.127\.net"],
        profiles=[
            ProfileRule(r"^(?:www\.)?lofter\.com/front/blog/home-page/([\w-]+)", "https://{0}.lofter.com"),
            ProfileRule(r"^(?!www\.)([\w-]+)\.lofter\.com", "https://{0}.lofter.com"),
        ],
    ),
    SiteGrammar(
        name="Nico Seiga",
        hosts=[r"(?:[\w-]+\.)*nicovideo\.jp", r"(?:[\w-]+\.)*nicoseiga\.jp", r"nico\.ms"],
        profiles=[
            ProfileRule(
                r"^(?:sp\.)?seiga\.nicovideo\.jp/user/(?:illust|manga)/(\d+)",
                "https://seiga.nicovideo.jp/user/illust/{0}",
            ),
            ProfileRule(r"^(?:www\.|sp\.)?nicovideo\.jp/user/(\d+)", "https://www.nicovideo.jp/user/{0}"),
        ],
    ),
    SiteGrammar(
        name="Nijie",
        hosts=[r"(?:www\.|sp\.)?nijie\.info", r"pic\d*\.nijie\.(?:info|net)"],
        profiles=[
            ProfileRule(
                r"^(?:www\.|sp\.)?nijie\.info/(?:members|members_illust|members_dojin|members_bookmark)\.php\?(?:.*&)?id=(\d+)",
                "https://nijie.info/members.php?id={0}",
            ),
        ],
    ),
    SiteGrammar(
        name="Plurk",
        hosts=[r"(?:www\.|images\.)?plurk\.com"],
        profiles=[
            ProfileRule(r"^(?:www\.)?plurk\.com/m/u/(\w+)", "https://www.plurk.com/{0}"),
            ProfileRule(
                r"^(?:www\.)?plurk\.com/"
                + _reserved("p", "s", "m", "search", "portal", "hotlinks", "news", "settings")
                + r"(\w+)",
                "https://www.plurk.com/{0}",
            ),
        ],
    ),
    SiteGrammar(
        name="Tinami",
        hosts=[r"(?:www\.|img\.)?tinami\.com"],
        profiles=[
            ProfileRule(r"^(?:www\.)?tinami\.com/creator/profile/(\d+)", "http://www.tinami.com/creator/profile/{0}"),
        ],
    ),
    SiteGrammar(
        name="Tumblr",
        hosts=[r"(?:[\w-]+\.)*tumblr\.com"],
        profiles=[
            ProfileRule(r"^(?:www\.)?tumblr\.com/blog/view/([\w-]+)", "https://{0}.tumblr.com"),
            ProfileRule(
                r"^(?:www\.)?tumblr\.com/"
                + _reserved("blog", "dashboard", "explore", "search", "tagged", "settings", "login",
                            "register", "likes", "privacy", "policy", "docs", "about", "help")
                + r"([\w-]+)",
                "https://{0}.tumblr.com",
            ),
            ProfileRule(r"^(?!www\.|media\.|assets\.|static\.|api\.)([\w-]+)\.tumblr\.com", "https://{0}.tumblr.com"),
        ],
    ),
    SiteGrammar(
        name="Weibo",
        hosts=[r"(?:www\.|m\.)?weibo\.(?:com|cn)", r"[\w-]+\.sinaimg\.cn"],
        profiles=[
            ProfileRule(r"^(?:www\.|m\.)?weibo\.(?:com|cn)/u/(\d+)", "https://www.weibo.com/u/{0}"),
            ProfileRule(r"^(?:www\.|m\.)?weibo\.(?:com|cn)/p/\d{6}(\d+)", "https://www.weibo.com/u/{0}"),
            ProfileRule(r"^(?:www\.|m\.)?weibo\.(?:com|cn)/profile/(\d+)", "https://www.weibo.com/u/{0}"),
            ProfileRule(r"^(?:www\.|m\.)?weibo\.(?:com|cn)/(\d+)(?:[/?]|$)", "https://www.weibo.com/u/{0}"),
            ProfileRule(
                r"^(?:www\.|m\.)?weibo\.(?:com|cn)/"
                + _reserved("u", "p", "n", "profile", "detail", "status", "login", "signup",
                            "search", "tv", "ajax", "aj")
                + r"([a-zA-Z][\w-]*)",
                "https://www.weibo.com/{0}",
            ),
        ],
    ),
    SiteGrammar(
        name="Ask.fm",
        hosts=[r"(?:www\.)?ask\.fm"],
        profiles=[
            ProfileRule(
                r"^(?:www\.)?ask\.fm/" + _reserved("account", "signup", "login", "about") + r"([\w-]+)",
                "https://ask.fm/{0}",
            ),
        ],
    ),
    SiteGrammar(
        name="Facebook",
        hosts=[r"(?:www\.|m\.|mbasic\.)?facebook\.com", r"[\w.-]+\.fbcdn\.net"],
        profiles=[
            ProfileRule(
                r"^(?:www\.|m\.)?facebook\.com/profile\.php\?(?:.*&)?id=(\d+)",
                "https://www.facebook.com/profile.php?id={0}",
            ),
            ProfileRule(
                r"^(?:www\.|m\.)?facebook\.com/"
                + _reserved(r"profile\.php", r"photo\.php", "photo", "groups", "pages", "events",
                            "watch", "sharer", "login", "help", r"permalink\.php", r"story\.php")
                + r"([\w.-]+)",
                "https://www.facebook.com/{0}",
            ),
        ],
    ),
    SiteGrammar(
        name="FC2",
        hosts=[r"(?:[\w-]+\.)*fc2\.com", r"(?:[\w-]+\.)*fc2blog\.(?:us|net)"],
        profiles=[
            ProfileRule(
                r"^(?!blog\.|blog-imgs|blog\d+\.|www\.|static\.)([\w-]+)\.blog\d*\.fc2\.com",
                "http://{0}.blog.fc2.com",
            ),
            ProfileRule(r"^(?!www\.)([\w-]+)\.web\.fc2\.com", "http://{0}.web.fc2.com"),
        ],
    ),
    SiteGrammar(
        name="Gumroad",
        hosts=[r"(?:[\w-]+\.)?gumroad\.com"],
        profiles=[
            ProfileRule(
                r"^(?:www\.)?gumroad\.com/"
                + _reserved("l", "d", "discover", "login", "signup", "features", "pricing", "about",
                            "help", "blog", "settings", "checkout")
                + r"([\w-]+)",
                "https://{0}.gumroad.com",
            ),
            ProfileRule(
                r"^(?!www\.|app\.|help\.|assets\.|public-files\.)([\w-]+)\.gumroad\.com",
                "https://{0}.gumroad.com",
            ),
        ],
    ),
    SiteGrammar(
        name="Instagram",
        hosts=[r"(?:www\.)?instagram\.com", r"[\w.-]+\.cdninstagram\.com"],
        profiles=[
            ProfileRule(r"^(?:www\.)?instagram\.com/stories/(\w[\w.]*)", "https://www.instagram.com/{0}"),
            ProfileRule(
                r"^(?:www\.)?instagram\.com/"
                + _reserved("p", "reel", "reels", "tv", "explore", "stories", "accounts", "direct",
                            "about", "developer", "legal")
                + r"(\w[\w.]*)",
                "https://www.instagram.com/{0}",
            ),
        ],
    ),
    SiteGrammar(
        name="Ko-fi",
        hosts=[r"(?:www\.|storage\.)?ko-fi\.com"],
        profiles=[
            ProfileRule(
                r"^(?:www\.)?ko-fi\.com/"
                + _reserved("home", "explore", "manage", "account", "s", "i", "post", "album",
                            "shop", "about", "login", "signup")
                + r"(\w+)",
                "https://ko-fi.com/{0}",
            ),
        ],
    ),
    SiteGrammar(
        name="Livedoor",
        hosts=[r"(?:[\w-]+\.)*livedoor\.(?:jp|com|biz|blog)", r"(?:[\w-]+\.)?blogimg\.jp"],
        profiles=[
            ProfileRule(r"^blog\.livedoor\.jp/([\w-]+)", "http://blog.livedoor.jp/{0}"),
            ProfileRule(r"^livedoor\.blogimg\.jp/([\w-]+)(?:[/?]|$)", "http://blog.livedoor.jp/{0}"),
            ProfileRule(r"^image\.blog\.livedoor\.jp/([\w-]+)(?:[/?]|$)", "http://blog.livedoor.jp/{0}"),
        ],
    ),
    SiteGrammar(
        name="Mihuashi",
        hosts=[r"(?:www\.|image-assets\.)?mihuashi\.com"],
        profiles=[
            ProfileRule(r"^(?:www\.)?mihuashi\.com/profiles/(\d+)", "https://www.mihuashi.com/profiles/{0}"),
        ],
    ),
    SiteGrammar(
        name="Mixi.jp",
        hosts=[r"(?:[\w-]+\.)?mixi\.jp"],
        profiles=[
            ProfileRule(
                r"^mixi\.jp/show_(?:friend|profile)\.pl\?(?:.*&)?id=(\d+)",
                "https://mixi.jp/show_friend.pl?id={0}",
            ),
        ],
    ),
    SiteGrammar(
        name="Patreon",
        hosts=[r"(?:www\.)?patreon\.com", r"c\d*\.patreon\.com", r"[\w-]+\.patreonusercontent\.com"],
        profiles=[
            ProfileRule(r"^(?:www\.)?patreon\.com/user\?(?:.*&)?u=(\d+)", "https://www.patreon.com/user?u={0}"),
            ProfileRule(
                r"^(?:www\.)?patreon\.com/(?:c/)?"
                + _reserved("user", "posts", "join", "checkout", "login", "signup", "home", "search",
                            "bePatron", "messages", "settings", "m", "api", "file")
                + r"(\w+)",
                "https://www.patreon.com/{0}",
            ),
        ],
    ),
    SiteGrammar(
        name="Piapro.jp",
        hosts=[r"(?:[\w-]+\.)?piapro\.jp"],
        profiles=[
            ProfileRule(r"^(?:www\.)?piapro\.jp/my_page/\?(?:.*&)?pid=(\w+)", "https://piapro.jp/{0}"),
            ProfileRule(
                r"^(?:www\.)?piapro\.jp/"
                + _reserved("t", "c", "a", "my_page", "content", "login", "search", "intro", "help",
                            "license", "timg")
                + r"(\w+)",
                "https://piapro.jp/{0}",
            ),
        ],
    ),
    SiteGrammar(
        name="Picarto",
        hosts=[r"(?:www\.)?picarto\.tv"],
        profiles=[
            ProfileRule(
                r"^(?:www\.)?picarto\.tv/"
                + _reserved("communities", "settings", "videopopout", "channel", "explore", "login",
                            "site")
                + r"(\w+)",
                "https://picarto.tv/{0}",
            ),
        ],
    ),
    SiteGrammar(
        name="Privatter",
        hosts=[r"(?:www\.)?privatter\.net"],
        profiles=[
            ProfileRule(r"^(?:www\.)?privatter\.net/u/(\w+)", "https://privatter.net/u/{0}"),
        ],
    ),
    SiteGrammar(
        name="Sakura.ne.jp",
        hosts=[r"(?:[\w-]+\.)+sakura\.ne\.jp"],
        profiles=[
            ProfileRule(r"^(?!www\d*\.)([\w-]+)\.sakura\.ne\.jp", "http://{0}.sakura.ne.jp"),
        ],
    ),
    SiteGrammar(
        name="Stickam",
        hosts=[r"(?:www\.)?stickam\.(?:jp|com)"],
        profiles=[
            ProfileRule(r"^(?:www\.)?stickam\.jp/profile/(\w+)", "http://www.stickam.jp/profile/{0}"),
        ],
    ),
    SiteGrammar(
        name="Skeb",
        hosts=[r"(?:www\.)?skeb\.jp"],
        profiles=[
            ProfileRule(r"^(?:www\.)?skeb\.jp/@(\w+)", "https://skeb.jp/@{0}"),
        ],
    ),
    SiteGrammar(
        name="Twitch",
        hosts=[r"(?:www\.|m\.)?twitch\.tv"],
        profiles=[
            ProfileRule(
                r"^(?:www\.|m\.)?twitch\.tv/"
                + _reserved("directory", "videos", "settings", "p", "downloads", "jobs", "search",
                            "subscriptions", "inventory", "wallet", "friends")
                + r"(\w+)",
                "https://www.twitch.tv/{0}",
            ),
        ],
    ),
    SiteGrammar(
        name="Youtube",
        hosts=[r"(?:www\.|m\.)?youtube\.com", r"youtu\.be"],
        profiles=[
            ProfileRule(r"^(?:www\.|m\.)?youtube\.com/(channel|c|user)/([\w-]+)", "https://www.youtube.com/{0}/{1}"),
            ProfileRule(r"^(?:www\.|m\.)?youtube\.com/@([\w.-]+)", "https://www.youtube.com/@{0}"),
        ],
    ),
    SiteGrammar(
        name="Amazon",
        hosts=[r"(?:[\w-]+\.)*amazon\.(?:com|co\.jp|jp|co\.uk|de|fr)", r"amzn\.(?:to|asia)"],
        profiles=[
            ProfileRule(r"^(?:www\.)?amazon\.([\w.]+)/(?:[^/]+/)?e/(\w+)", "https://www.amazon.{0}/-/e/{1}"),
        ],
    ),
    SiteGrammar(
        name="Circle.ms",
        hosts=[r"(?:[\w-]+\.)?circle\.ms"],
        profiles=[
            ProfileRule(r"^portal\.circle\.ms/circle/(\d+)", "https://portal.circle.ms/circle/{0}"),
        ],
    ),
    SiteGrammar(
        name="DLSite",
        hosts=[r"(?:[\w-]+\.)?dlsite\.(?:com|jp)"],
        profiles=[
            ProfileRule(
                r"^(?:www\.)?dlsite\.com/(\w+)/circle/profile/=/maker_id/(\w+)",
                "https://www.dlsite.com/{0}/circle/profile/=/maker_id/{1}",
            ),
        ],
    ),
    SiteGrammar(
        name="Doujinshi.org",
        hosts=[r"(?:www\.|img\.)?doujinshi\.org"],
        profiles=[
            ProfileRule(
                r"^(?:www\.)?doujinshi\.org/browse/(author|circle)/(\d+)",
                "https://www.doujinshi.org/browse/{0}/{1}",
            ),
        ],
    ),
    SiteGrammar(
        name="Erogamescape",
        hosts=[r"erogamescape\.(?:dyndns\.org|org)"],
        profiles=[
            ProfileRule(
                r"^erogamescape\.(dyndns\.org|org)/~ap2/ero/toukei_kaiseki/creater\.php\?(?:.*&)?creater=(\d+)",
                "https://erogamescape.{0}/~ap2/ero/toukei_kaiseki/creater.php?creater={1}",
            ),
        ],
    ),
    SiteGrammar(
        name="Mangaupdates",
        hosts=[r"(?:www\.)?mangaupdates\.com"],
        profiles=[
            ProfileRule(
                r"^(?:www\.)?mangaupdates\.com/authors\.html\?(?:.*&)?id=(\d+)",
                "https://www.mangaupdates.com/authors.html?id={0}",
            ),
            ProfileRule(r"^(?:www\.)?mangaupdates\.com/author/(\w+)", "https://www.mangaupdates.com/author/{0}"),
        ],
    ),
    SiteGrammar(
        name="Melonbooks",
        hosts=[r"(?:www\.)?melonbooks\.co\.jp"],
        profiles=[
            ProfileRule(
                r"^(?:www\.)?melonbooks\.co\.jp/circle/index\.php\?(?:.*&)?circle_id=(\d+)",
                "https://www.melonbooks.co.jp/circle/index.php?circle_id={0}",
            ),
        ],
    ),
    SiteGrammar(
        name="Toranoana",
        hosts=[r"(?:[\w-]+\.)?toranoana\.(?:jp|shop)"],
        profiles=[
            ProfileRule(
                r"^ec\.toranoana\.(jp|shop)/(\w+)/ec/cot/circle/(\w+)/all(?:[/?]|$)",
                "https://ec.toranoana.{0}/{1}/ec/cot/circle/{2}/all/",
            ),
        ],
    ),
    SiteGrammar(
        name="Wikipedia",
        hosts=[r"(?:[\w-]+\.)*wikipedia\.org"],
        profiles=[
            ProfileRule(r"^([a-z-]+)\.(?:m\.)?wikipedia\.org/wiki/([^/?#]+)", "https://{0}.wikipedia.org/wiki/{1}"),
        ],
    ),
    # Image hosts handled by rewrite strategies; no profile URL
    SiteGrammar(
        name="Moebooru",
        hosts=[r"(?:[\w-]+\.)?yande\.re", r"(?:[\w-]+\.)?konachan\.(?:com|net)"],
    ),
    SiteGrammar(
        name="Twitpic",
        hosts=[r"(?:www\.|[\w-]+\.)?twitpic\.com"],
    ),
)


def find_grammar(host: str, path: str) -> Optional[SiteGrammar]:
    """Return the first grammar recognizing host and path, or None."""
    for grammar in SITE_GRAMMARS:
        if grammar.matches(host, path):
            return grammar
    return None


def known_site_names() -> list[str]:
    """Site names the grammar table can produce, in table order, without duplicates."""
    names: list[str] = []
    for grammar in SITE_GRAMMARS:
        if grammar.name not in names:
            names.append(grammar.name)
    return names
