"""Per-dialect feed parsers.

Each dialect detected by ``Reader.detect_format`` has a parser class here.
They all delegate the actual XML work to ``feedparser`` and differ in the feed
versions they expect to see.  ``PARSERS`` is the fixed lookup table used by
``Reader.get_parser``.
"""

from __future__ import annotations

import hashlib
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Type, Union

import feedparser
from bs4 import BeautifulSoup
from feedparser import FeedParserDict

from feedlocator.main.config import Config
from feedlocator.main.tools.feed_format import FeedFormat

logger = logging.getLogger(__name__)


class ParserError(Exception):
    """Raised when a feed body cannot be parsed at all."""
    pass


def clean_html(html_content: str) -> str:
    soup = BeautifulSoup(html_content, "html.parser")
    return soup.get_text(separator=" ", strip=True)


def generate_id(hash_algo: str, *values: str) -> str:
    """Hash the first non-empty value with *hash_algo*."""
    for value in values:
        if value:
            return hashlib.new(hash_algo, value.encode("utf-8")).hexdigest()
    return ""


def _to_datetime(parsed: Any) -> Optional[datetime]:
    if not parsed:
        return None
    try:
        return datetime(*parsed[:6], tzinfo=timezone.utc)
    except (TypeError, ValueError):
        return None


class ParsedEntry:
    """A single feed item."""

    def __init__(self, data: Dict[str, Any], hash_algo: str):
        self.url = data.get("link", "")
        self.title = data.get("title", "")
        self.author = data.get("author")
        self.guid = data.get("id") or self.url
        self.id = generate_id(hash_algo, self.guid, self.title)

        summary = data.get("summary") or ""
        self.summary = clean_html(summary) if summary else ""

        # Prefer full content over the summary.
        content_list = data.get("content") or []
        if content_list:
            self.content = content_list[0].get("value", "")
        else:
            self.content = summary

        self.tags = [tag.get("term", "") for tag in data.get("tags", []) if tag.get("term")]
        self.published_at = _to_datetime(data.get("published_parsed") or data.get("updated_parsed"))


class ParsedFeed:
    """Feed-level metadata plus the parsed entries."""

    def __init__(self, data: FeedParserDict, feed_url: str, hash_algo: str):
        feed_info = data.get("feed", {})
        self.feed_url = feed_url
        self.version = data.get("version", "")
        self.title = feed_info.get("title", "")
        self.description = feed_info.get("description", "")
        self.site_url = feed_info.get("link", "")
        self.language = feed_info.get("language")
        self.icon_url = feed_info.get("icon") or feed_info.get("logo")
        self.updated_at = _to_datetime(feed_info.get("updated_parsed"))
        self.id = generate_id(hash_algo, feed_info.get("id", ""), self.site_url, feed_url)
        self.entries: List[ParsedEntry] = [
            ParsedEntry(entry, hash_algo) for entry in data.get("entries", [])
        ]


class Parser:
    """Base class for the dialect parsers.

    Parameters
    ----------
    content:
        Raw feed body, as downloaded.
    encoding:
        Charset announced by the HTTP response (may be empty).
    url:
        URL the feed was fetched from; relative links are resolved against it.
    """

    feed_format: FeedFormat = FeedFormat.UNKNOWN
    # ``feedparser`` version strings this dialect is expected to produce.
    versions: tuple[str, ...] = ()

    def __init__(self, content: Union[str, bytes], encoding: str = "", url: str = ""):
        self.content = content
        self.encoding = encoding
        self.url = url
        self.hash_algo = "sha256"
        self.config: Optional[Config] = None

    def set_hash_algo(self, hash_algo: str) -> "Parser":
        if hash_algo not in hashlib.algorithms_available or hash_algo.startswith("shake_"):
            raise ValueError(f"Unsupported hash algorithm: {hash_algo}")
        self.hash_algo = hash_algo
        return self

    def set_config(self, config: Config) -> "Parser":
        self.config = config
        return self

    def _response_headers(self, encoding: str) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        if self.url:
            headers["content-location"] = self.url
        if encoding:
            headers["content-type"] = f"application/xml; charset={encoding}"
        return headers

    def execute(self) -> ParsedFeed:
        """Parse the feed body.

        Raises ``ParserError`` when feedparser finds neither feed metadata nor
        entries.
        """
        content, encoding = self.content, self.encoding
        if isinstance(content, str):
            content, encoding = content.encode("utf-8"), "utf-8"

        data = feedparser.parse(content, response_headers=self._response_headers(encoding))

        if data.get("bozo") and not data.get("entries") and not data.get("feed"):
            raise ParserError(
                f"Failed to parse {self.feed_format.value} feed {self.url}: "
                f"{data.get('bozo_exception', 'Unknown error')}"
            )

        version = data.get("version", "")
        if self.versions and version not in self.versions:
            logger.warning(
                "%s: feedparser reported version %r for %s",
                type(self).__name__, version, self.url,
            )

        feed = ParsedFeed(data, self.url, self.hash_algo)
        logger.info("Parsed %d entries from %s", len(feed.entries), self.url)
        return feed


class Atom(Parser):
    feed_format = FeedFormat.ATOM
    versions = ("atom", "atom01", "atom02", "atom03", "atom10")


class Rss20(Parser):
    feed_format = FeedFormat.RSS20
    versions = ("rss", "rss20")


class Rss92(Parser):
    feed_format = FeedFormat.RSS92
    versions = ("rss092",)


class Rss91(Parser):
    feed_format = FeedFormat.RSS91
    versions = ("rss091", "rss091u", "rss091n")


class Rss10(Parser):
    feed_format = FeedFormat.RSS10
    versions = ("rss090", "rss10")


PARSERS: Dict[FeedFormat, Type[Parser]] = {
    FeedFormat.ATOM: Atom,
    FeedFormat.RSS20: Rss20,
    FeedFormat.RSS92: Rss92,
    FeedFormat.RSS91: Rss91,
    FeedFormat.RSS10: Rss10,
}
