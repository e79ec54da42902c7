"""Lenient document construction for feed detection and link discovery.

Real-world feeds are frequently broken XML (mismatched encodings, unclosed
tags, stray entities), so every document is built with libxml2's HTML parser
in recovery mode.  Element names are lower-cased and namespace prefixes are
kept as part of the tag name, which is why a prefixed ``<rdf:RDF>`` root does
not match ``//rdf``.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from lxml import etree

logger = logging.getLogger(__name__)


def _html_parser(encoding: Optional[str] = None) -> etree.HTMLParser:
    # One parser per document; lxml parser objects must not be shared between threads.
    return etree.HTMLParser(
        recover=True,
        no_network=True,
        collect_ids=False,
        remove_comments=True,
        encoding=encoding,
    )


def get_html_document(content: Union[str, bytes]) -> Optional[etree._Element]:
    """Parse *content* leniently and return the root element.

    ``None`` is returned for empty or unparsable input; callers treat that as
    a document with no matches.
    """
    if isinstance(content, str):
        data = content.encode("utf-8")
        parser = _html_parser("utf-8")
    else:
        data = content or b""
        parser = _html_parser()

    if not data.strip():
        return None

    try:
        return etree.fromstring(data, parser=parser)
    except (etree.LxmlError, ValueError) as exc:
        logger.debug("Unable to build a document: %s", exc)
        return None


def xpath_nodes(document: Optional[etree._Element], query: str) -> list:
    """Evaluate *query* against *document*; a missing document has no matches."""
    if document is None:
        return []
    return document.xpath(query)
