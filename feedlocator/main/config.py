"""Runtime configuration for feedlocator.

Settings are read from ``FEEDLOCATOR_*`` environment variables (a ``.env`` file
in the working directory is loaded first).  The resulting ``Config`` object is
handed explicitly to the reader, the HTTP client and the feed parsers; only the
outermost entry points (``feed_utils`` and the servers) build a default one.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()

ENV_PREFIX = "FEEDLOCATOR_"
DEFAULT_USER_AGENT = "feedlocator/0.1 (+https://github.com/feedlocator/feedlocator)"


def _get_str(name: str, default: str) -> str:
    return os.getenv(ENV_PREFIX + name, default)


def _get_int(name: str, default: int) -> int:
    raw = os.getenv(ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{ENV_PREFIX}{name} must be an integer, got {raw!r}")


@dataclass
class Config:
    """HTTP client and parser settings."""

    client_timeout: int = 10
    client_user_agent: str = DEFAULT_USER_AGENT
    max_redirections: int = 5
    max_body_size: int = 2097152
    proxy_hostname: str = ""
    proxy_port: int = 3128
    proxy_username: str = ""
    proxy_password: str = ""
    parser_hash_algo: str = "sha256"
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from the environment, falling back to defaults."""
        return cls(
            client_timeout=_get_int("CLIENT_TIMEOUT", cls.client_timeout),
            client_user_agent=_get_str("CLIENT_USER_AGENT", cls.client_user_agent),
            max_redirections=_get_int("MAX_REDIRECTIONS", cls.max_redirections),
            max_body_size=_get_int("MAX_BODY_SIZE", cls.max_body_size),
            proxy_hostname=_get_str("PROXY_HOSTNAME", cls.proxy_hostname),
            proxy_port=_get_int("PROXY_PORT", cls.proxy_port),
            proxy_username=_get_str("PROXY_USERNAME", cls.proxy_username),
            proxy_password=_get_str("PROXY_PASSWORD", cls.proxy_password),
            parser_hash_algo=_get_str("PARSER_HASH_ALGO", cls.parser_hash_algo),
            log_level=_get_str("LOG_LEVEL", cls.log_level).upper(),
        )

    def get_proxies(self) -> dict[str, str] | None:
        """Return a ``requests`` proxies mapping, or ``None`` when no proxy is set."""
        if not self.proxy_hostname:
            return None
        credentials = ""
        if self.proxy_username:
            credentials = f"{self.proxy_username}:{self.proxy_password}@"
        proxy_url = f"http://{credentials}{self.proxy_hostname}:{self.proxy_port}"
        return {"http": proxy_url, "https": proxy_url}
