"""HTTP client used to download feeds and web pages.

The client performs a single GET with optional conditional headers
(``If-None-Match`` / ``If-Modified-Since``) and basic-auth credentials, and
returns an immutable ``FetchResult``.  Transport failures are translated into
the ``ClientError`` hierarchy below; callers are expected to let them
propagate.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

import requests

from feedlocator.main.config import Config

logger = logging.getLogger(__name__)

_CHARSET_PATTERN = re.compile(r"charset\s*=\s*[\"']?([\w\-.:]+)", re.IGNORECASE)
_CHUNK_SIZE = 8192


class ClientError(Exception):
    """Base exception for transport failures."""
    pass


class InvalidUrlError(ClientError):
    """The URL is malformed or the resource does not exist (404)."""
    pass


class ClientTimeoutError(ClientError):
    pass


class InvalidCertificateError(ClientError):
    pass


class MaxRedirectError(ClientError):
    pass


class MaxSizeError(ClientError):
    """The response body is larger than ``Config.max_body_size``."""
    pass


class UnauthorizedError(ClientError):
    pass


class ForbiddenError(ClientError):
    pass


@dataclass(frozen=True)
class FetchResult:
    """Outcome of one HTTP GET.

    ``url`` is the final URL after redirects.  ``etag`` and ``last_modified``
    are the response validators, passed through for the caller to store.
    """

    url: str
    content: bytes
    is_modified: bool
    status_code: int
    etag: str = ""
    last_modified: str = ""
    encoding: str = ""
    content_type: str = ""


def parse_charset(content_type: str) -> str:
    """Extract the charset from a ``Content-Type`` header value."""
    match = _CHARSET_PATTERN.search(content_type or "")
    return match.group(1).lower() if match else ""


class Client:
    """Single-use HTTP client configured from a ``Config``.

    Setters return the client so calls can be chained::

        Client(config).set_etag(etag).set_last_modified(modified).execute(url)
    """

    def __init__(self, config: Config):
        self.config = config
        self.last_modified = ""
        self.etag = ""
        self.username = ""
        self.password = ""

    def set_last_modified(self, last_modified: str) -> "Client":
        self.last_modified = last_modified or ""
        return self

    def set_etag(self, etag: str) -> "Client":
        self.etag = etag or ""
        return self

    def set_username(self, username: str) -> "Client":
        self.username = username or ""
        return self

    def set_password(self, password: str) -> "Client":
        self.password = password or ""
        return self

    def _build_headers(self) -> dict[str, str]:
        headers = {"User-Agent": self.config.client_user_agent, "Accept": "*/*"}
        if self.etag:
            headers["If-None-Match"] = self.etag
        if self.last_modified:
            headers["If-Modified-Since"] = self.last_modified
        return headers

    def execute(self, url: str) -> FetchResult:
        """Download *url* and return a ``FetchResult``.

        Raises:
        * ``InvalidUrlError`` for malformed URLs and 404 responses.
        * ``ClientTimeoutError``, ``InvalidCertificateError``, ``MaxRedirectError``
          for the matching transport failures.
        * ``UnauthorizedError`` / ``ForbiddenError`` for 401 / 403.
        * ``MaxSizeError`` when the body exceeds the configured limit.
        * ``ClientError`` for any other failure.
        """
        logger.debug("Fetching %s", url)
        auth = (self.username, self.password) if self.username else None

        try:
            with requests.Session() as session:
                session.max_redirects = self.config.max_redirections
                response = session.get(
                    url,
                    headers=self._build_headers(),
                    auth=auth,
                    timeout=self.config.client_timeout,
                    proxies=self.config.get_proxies(),
                    allow_redirects=True,
                    stream=True,
                )
                try:
                    return self._handle_response(url, response)
                finally:
                    response.close()
        except requests.exceptions.Timeout as exc:
            raise ClientTimeoutError(f"Timeout while fetching {url}: {exc}") from exc
        except requests.exceptions.SSLError as exc:
            raise InvalidCertificateError(f"Invalid certificate for {url}: {exc}") from exc
        except requests.exceptions.TooManyRedirects as exc:
            raise MaxRedirectError(f"Too many redirects for {url}") from exc
        except (
            requests.exceptions.MissingSchema,
            requests.exceptions.InvalidSchema,
            requests.exceptions.InvalidURL,
        ) as exc:
            raise InvalidUrlError(f"Invalid URL {url}: {exc}") from exc
        except requests.exceptions.RequestException as exc:
            raise ClientError(f"Failed to fetch {url}: {exc}") from exc

    def _handle_response(self, url: str, response: requests.Response) -> FetchResult:
        status = response.status_code
        if status == 404:
            raise InvalidUrlError(f"Resource not found (404): {url}")
        if status == 401:
            raise UnauthorizedError(f"Wrong or missing credentials (401): {url}")
        if status == 403:
            raise ForbiddenError(f"Access forbidden (403): {url}")
        if status >= 400:
            raise ClientError(f"Unexpected HTTP status {status} for {url}")

        etag = response.headers.get("ETag", "")
        last_modified = response.headers.get("Last-Modified", "")
        content_type = response.headers.get("Content-Type", "")

        if status == 304:
            is_modified = False
            content = b""
        else:
            is_modified = not (
                (self.etag and self.etag == etag)
                or (self.last_modified and self.last_modified == last_modified)
            )
            content = self._read_body(url, response)

        logger.debug(
            "Fetched %s (status=%s, modified=%s, %d bytes)",
            response.url, status, is_modified, len(content),
        )
        return FetchResult(
            url=response.url or url,
            content=content,
            is_modified=is_modified,
            status_code=status,
            etag=etag,
            last_modified=last_modified,
            encoding=parse_charset(content_type),
            content_type=content_type,
        )

    def _read_body(self, url: str, response: requests.Response) -> bytes:
        limit = self.config.max_body_size
        body = bytearray()
        for chunk in response.iter_content(chunk_size=_CHUNK_SIZE):
            body.extend(chunk)
            if limit and len(body) > limit:
                raise MaxSizeError(f"Response from {url} exceeds {limit} bytes")
        return bytes(body)
