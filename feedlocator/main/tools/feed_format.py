from __future__ import annotations

from enum import Enum


class FeedFormat(Enum):
    """Feed dialects recognised by ``Reader.detect_format``."""

    ATOM = "Atom"
    RSS20 = "Rss20"
    RSS92 = "Rss92"
    RSS91 = "Rss91"
    RSS10 = "Rss10"
    UNKNOWN = "Unknown"


# Evaluated in this order; the first query with exactly one match wins.
FORMATS: tuple[tuple[FeedFormat, str], ...] = (
    (FeedFormat.ATOM, "//feed"),
    (FeedFormat.RSS20, '//rss[@version="2.0"]'),
    (FeedFormat.RSS92, '//rss[@version="0.92"]'),
    (FeedFormat.RSS91, '//rss[@version="0.91"]'),
    (FeedFormat.RSS10, "//rdf"),
)

# Prefixed RDF roots are invisible to the ``//rdf`` query.
RDF_CLOSING_TAG = "</rdf:RDF>"
