"""Configuration module for the Booli MCP server."""

from .client_config import (
    BOOLI_CONFIG,
    DEFAULT_GRAPHQL_URL,
    DEFAULT_HEADERS,
    ClientConfig,
    get_client_config,
    get_log_level,
)

__all__ = [
    'BOOLI_CONFIG',
    'DEFAULT_GRAPHQL_URL',
    'DEFAULT_HEADERS',
    'ClientConfig',
    'get_client_config',
    'get_log_level',
]
