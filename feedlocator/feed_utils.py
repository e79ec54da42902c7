"""Shared entry points for feedlocator.

The FastAPI server (``feedlocator/app_server.py``) and the OPML import script
both need to turn a user-supplied URL into a feed.  This module builds the
process-wide ``Config`` and ``Reader`` and exposes a tiny API on top of them.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from feedlocator.main.config import Config
from feedlocator.main.tools.reader import Reader

logger = logging.getLogger("feedlocator")


def get_reader(config: Optional[Config] = None) -> Reader:
    """Return a ``Reader`` wired with *config* (or the environment defaults)."""
    return Reader(config or Config.from_env(), logger=logger)


def discover_feed(
    site_url: str,
    etag: str = "",
    last_modified: str = "",
    username: str = "",
    password: str = "",
    reader: Optional[Reader] = None,
) -> Dict[str, Any]:
    """Discover a feed for *site_url* and collect basic metadata.

    Returns a dictionary with at least ``url`` and ``modified``.  When the
    feed was modified it also carries ``format`` and, if present, ``title``,
    ``etag`` and ``last_modified``.

    Raises ``SubscriptionNotFoundError``, ``UnsupportedFeedFormatError``,
    ``ParserError`` or a ``ClientError`` subclass.
    """
    reader = reader or get_reader()
    result = reader.discover(site_url.strip(), last_modified, etag, username, password)

    info: Dict[str, Any] = {"url": result.url, "modified": result.is_modified}
    if result.etag:
        info["etag"] = result.etag
    if result.last_modified:
        info["last_modified"] = result.last_modified
    if not result.is_modified:
        logger.info("Feed not modified: %s", result.url)
        return info

    parser = reader.get_parser(result.url, result.content, result.encoding)
    feed = parser.execute()
    info["format"] = parser.feed_format.value
    if feed.title:
        info["title"] = feed.title
    logger.info("Discovered %s feed: %s", info["format"], result.url)
    return info


def find_feeds(site_url: str, reader: Optional[Reader] = None) -> List[str]:
    """Download *site_url* and return every feed URL it advertises."""
    reader = reader or get_reader()
    result = reader.download(site_url.strip())
    return reader.find(result.url, result.content)
