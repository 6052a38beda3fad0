"""Client configuration settings for the Booli MCP server."""

from dataclasses import dataclass, field
from typing import Dict
import logging
import os


DEFAULT_GRAPHQL_URL = "https://www.booli.se/graphql"

# Booli accepts requests without an API key when they look like they come
# from its own web front end.
DEFAULT_HEADERS: Dict[str, str] = {
    'User-Agent': (
        'Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 '
        '(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36'
    ),
    'Accept': 'application/json',
    'Content-Type': 'application/json',
    'Accept-Language': 'sv-SE,sv;q=0.9,en;q=0.8',
    'Origin': 'https://www.booli.se',
    'Referer': 'https://www.booli.se/',
    'Sec-Ch-Ua': '"Not_A Brand";v="8", "Chromium";v="120", "Google Chrome";v="120"',
    'Sec-Ch-Ua-Mobile': '?0',
    'Sec-Ch-Ua-Platform': '"macOS"',
    'Sec-Fetch-Dest': 'empty',
    'Sec-Fetch-Mode': 'cors',
    'Sec-Fetch-Site': 'same-origin',
}


@dataclass(frozen=True)
class ClientConfig:
    """Outbound GraphQL client configuration.

    Built once at start-up and shared read-only by every tool call.
    """
    graphql_url: str = DEFAULT_GRAPHQL_URL
    request_timeout_seconds: float = 30.0
    default_limit: int = 10
    headers: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_HEADERS))


# Default configuration, overridable through the environment
BOOLI_CONFIG = {
    "graphql_url": os.getenv("BOOLI_GRAPHQL_URL", DEFAULT_GRAPHQL_URL),
    "request_timeout_seconds": float(os.getenv("BOOLI_REQUEST_TIMEOUT_SECONDS", "30")),
    "default_limit": int(os.getenv("BOOLI_DEFAULT_LIMIT", "10")),
    "log_level": os.getenv("LOG_LEVEL", "INFO"),
}


def get_client_config() -> ClientConfig:
    """Get client configuration from the current environment.

    Reads the environment at call time so that values loaded from a .env
    file after import are honoured.
    """
    return ClientConfig(
        graphql_url=os.getenv("BOOLI_GRAPHQL_URL") or BOOLI_CONFIG["graphql_url"],
        request_timeout_seconds=float(
            os.getenv("BOOLI_REQUEST_TIMEOUT_SECONDS", BOOLI_CONFIG["request_timeout_seconds"])
        ),
        default_limit=int(os.getenv("BOOLI_DEFAULT_LIMIT", BOOLI_CONFIG["default_limit"])),
    )


def get_log_level() -> int:
    """Resolve LOG_LEVEL from the environment to a logging level."""
    name = os.getenv("LOG_LEVEL", BOOLI_CONFIG["log_level"])
    return getattr(logging, str(name).upper(), logging.INFO)
