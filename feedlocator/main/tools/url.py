"""URL helpers used by feed discovery.

``Url`` is a small wrapper around ``urllib.parse.urlparse`` that can tell an
absolute URL from a relative one and resolve a relative ``href`` against the
page it was found on.
"""

from __future__ import annotations

import re
from urllib.parse import urlparse

_SCHEME_PATTERN = re.compile(r"^https?://")


def prepend_scheme(url: str) -> str:
    """Add ``http://`` when the end-user only typed a domain name."""
    if not _SCHEME_PATTERN.match(url):
        url = "http://" + url
    return url


class Url:
    """Parsed URL with base/relative resolution helpers."""

    def __init__(self, url: str):
        self.url = url
        self.components = urlparse(url)

    def has_scheme(self) -> bool:
        return bool(self.components.scheme)

    def has_host(self) -> bool:
        return bool(self.components.netloc)

    def is_protocol_relative_url(self) -> bool:
        """``//host/path``: a host but no scheme."""
        return not self.has_scheme() and self.has_host()

    def is_relative_url(self) -> bool:
        return not (self.has_scheme() and self.has_host())

    def get_base_url(self, suffix: str = "") -> str:
        """Return ``scheme://host[:port]`` followed by *suffix*.

        An empty string is returned when the URL has no host.
        """
        if not self.has_host():
            return ""
        scheme = self.components.scheme or "http"
        return f"{scheme}://{self.components.netloc}{suffix}"

    def get_full_path(self) -> str:
        """Path (always rooted at ``/``) plus query string and fragment."""
        path = self.components.path
        if not path.startswith("/"):
            path = "/" + path
        if self.components.query:
            path += "?" + self.components.query
        if self.components.fragment:
            path += "#" + self.components.fragment
        return path

    def get_absolute_url(self, base_url: str = "") -> str:
        """Resolve this URL to an absolute one.

        Absolute URLs are returned unchanged.  Relative URLs are joined onto the
        ``scheme://host[:port]`` of *base_url*; protocol-relative URLs only borrow
        its scheme.  Returns an empty string when nothing absolute can be built.
        """
        if not self.is_relative_url():
            return self.url

        base = Url(base_url)
        if self.is_protocol_relative_url():
            scheme = base.components.scheme or "http"
            return f"{scheme}:{self.url}"

        if not base.has_host():
            return ""
        return base.get_base_url(self.get_full_path())

    def __str__(self) -> str:
        return self.url

    def __repr__(self) -> str:
        return f"Url({self.url!r})"
