import logging
import sys
from xml.etree import ElementTree

from feedlocator.feed_utils import discover_feed, get_reader
from feedlocator.main.config import Config
from feedlocator.main.logging_config import configure_logging
from feedlocator.main.tools.client import ClientError
from feedlocator.main.tools.parsers import ParserError
from feedlocator.main.tools.reader import SubscriptionNotFoundError, UnsupportedFeedFormatError

logger = logging.getLogger(__name__)


def parse_opml(file_path: str) -> list[dict[str, str]]:
    """Parse an OPML subscription list.

    Parameters
    ----------
    file_path:
        Path to the OPML file.
    Returns
    -------
    list[dict[str, str]]:
        One dictionary per ``<outline>`` with ``text``, ``type``, ``xmlUrl``
        and ``htmlUrl`` keys.  Folders (outlines without either URL) are
        skipped.

    Raises ``ValueError`` when the file is not valid XML.
    """
    try:
        tree = ElementTree.parse(file_path)
    except ElementTree.ParseError as exc:
        raise ValueError(f"Invalid OPML file {file_path}: {exc}")

    feeds = []
    for outline in tree.iter("outline"):
        feed_info = {
            "text": outline.attrib.get("text") or outline.attrib.get("title", ""),
            "type": outline.attrib.get("type", ""),
            "xmlUrl": outline.attrib.get("xmlUrl", ""),
            "htmlUrl": outline.attrib.get("htmlUrl", ""),
        }
        if feed_info["xmlUrl"] or feed_info["htmlUrl"]:
            feeds.append(feed_info)

    return feeds


def main(argv: list[str]) -> int:
    if len(argv) != 2:
        print("Usage: python -m feedlocator.main.tools.opml_helper <path_to_opml_file>")
        return 1

    config = Config.from_env()
    configure_logging(config.log_level)
    reader = get_reader(config)

    failures = 0
    for feed in parse_opml(argv[1]):
        url = feed["xmlUrl"] or feed["htmlUrl"]
        try:
            info = discover_feed(url, reader=reader)
        except (SubscriptionNotFoundError, UnsupportedFeedFormatError, ParserError, ClientError) as exc:
            failures += 1
            print(f"No feed found for {url}: {exc}")
            continue
        print(f"{info.get('format', '?')} feed for {url}: {info['url']}")

    return 1 if failures else 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
