"""Site-specific rewrite strategies.

Most strategies upgrade a thumbnail or sample image URL to its full-size
original purely by rewriting the string. Strategies whose target cannot be
derived with certainty (Pixiv, NicoSeiga, ArtStation, Tumblr, Moebooru)
confirm the candidate with an HTTP HEAD probe and fall back to the input
when nothing is confirmed.
"""

import logging
import re

from artisturls.rewrite.base import Data, Headers, RewriteResult, RewriteStrategy


logger = logging.getLogger(__name__)


class PixivStrategy(RewriteStrategy):
    """Pixiv master/thumbnail images -> img-original, probing each extension."""

    name = "pixiv"
    patterns = (
        r"^https?://i\d*\.pixiv\.net/",
        r"^https?://i(?:-f)?\.pximg\.net/",
    )

    REFERER = "https://www.pixiv.net"
    EXTENSIONS = ("jpg", "png", "gif")

    _MASTER_RE = re.compile(
        r"^(https?://[^/]+)/(?:c/[\w.-]+/)?img-master/img/((?:\d+/){6})(\d+_p\d+)_(?:master|square|custom)1200\.\w+",
        re.IGNORECASE,
    )

    def rewrite(self, url: str, headers: Headers = None, data: Data = None) -> RewriteResult:
        match = self._MASTER_RE.match(url)
        if match is None:
            return url, headers, data

        host, date_path, stem = match.groups()
        new_headers = {**(headers or {}), "Referer": self.REFERER}

        for ext in self.EXTENSIONS:
            candidate = f"{host}/img-original/img/{date_path}{stem}.{ext}"
            if self.http_exists(candidate, new_headers):
                logger.debug(f"pixiv: {url} -> {candidate}")
                return self._rewritten(candidate, headers, data, {"Referer": self.REFERER})

        return url, headers, data


class NicoSeigaStrategy(RewriteStrategy):
    """Seiga thumbnails and illust pages -> image source, following the redirect."""

    name = "nico_seiga"
    patterns = (
        r"^https?://lohas\.nicoseiga\.jp/",
        r"^https?://seiga\.nicovideo\.jp/seiga/im\d+",
    )

    _ID_RES = (
        re.compile(r"^https?://lohas\.nicoseiga\.jp/thumb/(\d+)i?", re.IGNORECASE),
        re.compile(r"^https?://seiga\.nicovideo\.jp/seiga/im(\d+)", re.IGNORECASE),
    )

    def rewrite(self, url: str, headers: Headers = None, data: Data = None) -> RewriteResult:
        image_id = None
        for regex in self._ID_RES:
            match = regex.match(url)
            if match:
                image_id = match.group(1)
                break

        if image_id is None:
            return url, headers, data

        source = f"https://seiga.nicovideo.jp/image/source/{image_id}"
        result = self.http_head(source, headers)
        if result is None:
            return url, headers, data

        if result.success:
            return self._rewritten(result.location or source, headers, data)
        if result.is_redirect and result.location:
            return self._rewritten(result.location, headers, data)
        return url, headers, data


class ArtStationStrategy(RewriteStrategy):
    """ArtStation sized images -> original, else large."""

    name = "artstation"
    patterns = (r"^https?://cdn\w*\.artstation\.com/p/assets/",)

    SIZES = ("small", "medium", "smaller_square", "micro_square", "large", "4k")

    _SIZED_RE = re.compile(
        r"^(https?://cdn\w*\.artstation\.com/p/assets/(?:images|covers)/images/[\d/]+?/)(%s)/(.+)$"
        % "|".join(SIZES),
        re.IGNORECASE,
    )

    def rewrite(self, url: str, headers: Headers = None, data: Data = None) -> RewriteResult:
        match = self._SIZED_RE.match(url)
        if match is None:
            return url, headers, data

        prefix, size, filename = match.groups()
        candidates = [f"{prefix}original/{filename}"]
        if size != "large":
            candidates.append(f"{prefix}large/{filename}")

        for candidate in candidates:
            if self.http_exists(candidate, headers):
                return self._rewritten(candidate, headers, data)

        return url, headers, data


class TwitpicStrategy(RewriteStrategy):
    """Twitpic thumbnails -> full size."""

    name = "twitpic"
    patterns = (r"^https?://(?:www\.)?twitpic\.com/show/",)

    def rewrite(self, url: str, headers: Headers = None, data: Data = None) -> RewriteResult:
        rewritten = re.sub(r"/show/(?:mini|thumb|large)/", "/show/full/", url, count=1)
        if rewritten == url:
            return url, headers, data
        return self._rewritten(rewritten, headers, data)


class DeviantArtStrategy(RewriteStrategy):
    """DeviantArt th* thumbnail hosts -> fc* full-size hosts."""

    name = "deviantart"
    patterns = (r"^https?://th\d+\.deviantart\.net/",)

    _THUMB_RE = re.compile(
        r"^(https?)://th(\d+)\.deviantart\.net/(fs\d+)/(?:PRE|\d+[WH]|150)/(.+)$",
        re.IGNORECASE,
    )

    def rewrite(self, url: str, headers: Headers = None, data: Data = None) -> RewriteResult:
        match = self._THUMB_RE.match(url)
        if match is None:
            return url, headers, data

        scheme, server, fs, rest = match.groups()
        return self._rewritten(f"{scheme}://fc{server}.deviantart.net/{fs}/{rest}", headers, data)


class TumblrStrategy(RewriteStrategy):
    """Tumblr resized media -> 1280 size when it exists."""

    name = "tumblr"
    patterns = (r"^https?://(?:[\w-]+\.)?media\.tumblr\.com/",)

    FULL_SIZE = "1280"

    _SIZED_RE = re.compile(r"^(.+/tumblr_\w+_)(\d+)(\.\w+)$", re.IGNORECASE)

    def rewrite(self, url: str, headers: Headers = None, data: Data = None) -> RewriteResult:
        match = self._SIZED_RE.match(url)
        if match is None or match.group(2) == self.FULL_SIZE:
            return url, headers, data

        prefix, _, ext = match.groups()
        candidate = f"{prefix}{self.FULL_SIZE}{ext}"
        if self.http_exists(candidate, headers):
            return self._rewritten(candidate, headers, data)
        return url, headers, data


class MoebooruStrategy(RewriteStrategy):
    """yande.re / konachan samples and jpeg versions -> original image."""

    name = "moebooru"
    patterns = (r"^https?://(?:[\w-]+\.)?(?:yande\.re|konachan\.(?:com|net))/(?:sample|jpeg)/",)

    EXTENSIONS = ("png", "jpg")

    _SAMPLE_RE = re.compile(r"^(https?://[^/]+)/(?:sample|jpeg)/([0-9a-f]{32})/", re.IGNORECASE)

    def rewrite(self, url: str, headers: Headers = None, data: Data = None) -> RewriteResult:
        match = self._SAMPLE_RE.match(url)
        if match is None:
            return url, headers, data

        host, md5 = match.groups()
        for ext in self.EXTENSIONS:
            candidate = f"{host}/image/{md5}.{ext}"
            if self.http_exists(candidate, headers):
                return self._rewritten(candidate, headers, data)

        return url, headers, data


class TwitterStrategy(RewriteStrategy):
    """Twitter media -> :orig size."""

    name = "twitter"
    patterns = (r"^https?://pbs\.twimg\.com/media/",)

    _SUFFIX_RE = re.compile(r"^(https?://pbs\.twimg\.com/media/[\w-]+\.\w+)(?::\w+)?$", re.IGNORECASE)
    _QUERY_RE = re.compile(r"^(https?://pbs\.twimg\.com/media/[\w-]+)\?(?:.*&)?format=(\w+)", re.IGNORECASE)

    def rewrite(self, url: str, headers: Headers = None, data: Data = None) -> RewriteResult:
        match = self._SUFFIX_RE.match(url)
        if match:
            rewritten = f"{match.group(1)}:orig"
        else:
            match = self._QUERY_RE.match(url)
            if match is None:
                return url, headers, data
            rewritten = f"{match.group(1)}.{match.group(2)}:orig"

        if rewritten == url:
            return url, headers, data
        return self._rewritten(rewritten, headers, data)


class NijieStrategy(RewriteStrategy):
    """Nijie resized thumbnails -> nijie_picture originals."""

    name = "nijie"
    patterns = (r"^https?://pic\d*\.nijie\.(?:info|net)/",)

    def rewrite(self, url: str, headers: Headers = None, data: Data = None) -> RewriteResult:
        rewritten = re.sub(r"/(?:__rs_\w+|small_light\([^)]*\))/", "/", url, count=1)
        rewritten = rewritten.replace("/nijie_picture/sp/", "/nijie_picture/", 1)
        if rewritten == url:
            return url, headers, data
        return self._rewritten(rewritten, headers, data)


class PawooStrategy(RewriteStrategy):
    """Pawoo small attachments -> original."""

    name = "pawoo"
    patterns = (r"^https?://img\.pawoo\.net/media_attachments/files/",)

    def rewrite(self, url: str, headers: Headers = None, data: Data = None) -> RewriteResult:
        rewritten = re.sub(r"/small/", "/original/", url, count=1)
        if rewritten == url:
            return url, headers, data
        return self._rewritten(rewritten, headers, data)
