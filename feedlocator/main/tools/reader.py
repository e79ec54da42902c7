"""Feed download, format detection and discovery.

``Reader`` turns whatever the user typed (a feed URL, a bare domain or the URL
of a web page that advertises a feed) into a downloaded feed document:

1. ``download`` fetches the URL once, adding ``http://`` when needed.
2. ``detect_format`` classifies the body into one of the ``FeedFormat``
   dialects using ordered XPath queries.
3. ``discover`` returns the first download when it is already a feed (or was
   not modified); otherwise it looks for ``<link>`` autodiscovery hints with
   ``find`` and downloads the first candidate.
4. ``get_parser`` builds the dialect-specific parser for a downloaded feed.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional, Union

from feedlocator.main.config import Config
from feedlocator.main.tools.client import Client, FetchResult
from feedlocator.main.tools.feed_format import FORMATS, RDF_CLOSING_TAG, FeedFormat
from feedlocator.main.tools.parsers import PARSERS, Parser
from feedlocator.main.tools.url import Url, prepend_scheme
from feedlocator.main.tools.xml_parser import get_html_document, xpath_nodes

# Atom hints are collected before RSS hints.
DISCOVERY_QUERIES = (
    '//link[@type="application/atom+xml"]',
    '//link[@type="application/rss+xml"]',
)


class SubscriptionNotFoundError(Exception):
    """No feed could be located for the given URL."""
    pass


class UnsupportedFeedFormatError(Exception):
    """The content does not match any known feed dialect."""
    pass


def _contains_rdf_closing_tag(content: Union[str, bytes]) -> bool:
    if isinstance(content, bytes):
        return RDF_CLOSING_TAG.encode("ascii") in content
    return RDF_CLOSING_TAG in content


class Reader:
    """Discover and download feeds.

    Parameters
    ----------
    config:
        Settings forwarded to the HTTP client and the parsers.
    client_factory:
        Builds a fresh client for every download; defaults to ``Client``.
    logger:
        Destination for diagnostic messages.
    """

    def __init__(
        self,
        config: Config,
        client_factory: Callable[[Config], Client] = Client,
        logger: Optional[logging.Logger] = None,
    ):
        self.config = config
        self.client_factory = client_factory
        self.logger = logger or logging.getLogger(__name__)

    def download(
        self,
        url: str,
        last_modified: str = "",
        etag: str = "",
        username: str = "",
        password: str = "",
    ) -> FetchResult:
        """Download a feed (no discovery).

        Transport errors raised by the client are not caught here.
        """
        url = prepend_scheme(url)

        return (
            self.client_factory(self.config)
            .set_last_modified(last_modified)
            .set_etag(etag)
            .set_username(username)
            .set_password(password)
            .execute(url)
        )

    def discover(
        self,
        url: str,
        last_modified: str = "",
        etag: str = "",
        username: str = "",
        password: str = "",
    ) -> FetchResult:
        """Discover and download a feed.

        Raises ``SubscriptionNotFoundError`` when the page is not a feed and
        does not advertise one.
        """
        result = self.download(url, last_modified, etag, username, password)

        # Not modified, or already a feed
        if not result.is_modified or self.detect_format(result.content) is not FeedFormat.UNKNOWN:
            return result

        links = self.find(result.url, result.content)

        if not links:
            raise SubscriptionNotFoundError(f"Unable to find a subscription for {url}")

        return self.download(links[0], last_modified, etag, username, password)

    def find(self, url: str, html: Union[str, bytes]) -> List[str]:
        """Return the feed URLs advertised by ``<link>`` tags in *html*.

        Relative ``href`` values are resolved against the base of *url*.
        """
        self.logger.debug("%s: Try to discover subscriptions", type(self).__name__)

        document = get_html_document(html)
        site_url = Url(url)
        links: List[str] = []

        for query in DISCOVERY_QUERIES:
            for node in xpath_nodes(document, query):
                href = (node.get("href") or "").strip()
                if not href:
                    continue

                feed_url = Url(href)
                base_url = site_url.url if feed_url.is_relative_url() else ""
                absolute_url = feed_url.get_absolute_url(base_url)
                if absolute_url:
                    links.append(absolute_url)

        self.logger.debug("%s: %s", type(self).__name__, ", ".join(links))

        return links

    def get_parser(self, url: str, content: Union[str, bytes], encoding: str) -> Parser:
        """Build the parser matching the format of *content*.

        Raises ``UnsupportedFeedFormatError`` when the format is unknown.
        """
        feed_format = self.detect_format(content)

        if feed_format is FeedFormat.UNKNOWN:
            raise UnsupportedFeedFormatError("Unable to detect feed format")

        parser_class = PARSERS[feed_format]
        parser = parser_class(content, encoding, url)
        parser.set_hash_algo(self.config.parser_hash_algo)
        parser.set_config(self.config)

        return parser

    def detect_format(self, content: Union[str, bytes]) -> FeedFormat:
        """Classify *content*; never raises for malformed input."""
        document = get_html_document(content)

        for feed_format, query in FORMATS:
            if len(xpath_nodes(document, query)) == 1:
                return feed_format

        if _contains_rdf_closing_tag(content):
            return FeedFormat.RSS10

        return FeedFormat.UNKNOWN
