"""
MCP tool for searching locations on Booli.se.

Helps users discover area IDs for property searches.
"""

import logging
from typing import Any, Dict, Optional

from booli_mcp.client import BooliGraphQLClient
from booli_mcp.error_handling import BooliError, ErrorHandler, ErrorKind
from booli_mcp.formatting import LOCATION_USAGE_HINT, format_location_entry
from booli_mcp.models import ToolResult
from booli_mcp.normalization import normalize_location_result
from booli_mcp.tools.arguments import resolve_limit


logger = logging.getLogger(__name__)

ERROR_PREFIX = 'Error searching for locations: '
MIN_QUERY_LENGTH = 2


def validate_query(query: Any) -> str:
    """Validate and trim the location search string.

    Raises:
        BooliError: VALIDATION with the corrective message
    """
    if not query or not isinstance(query, str):
        raise BooliError(
            ErrorKind.VALIDATION,
            'Error: Query parameter is required and must be a non-empty string.',
        )

    query = query.strip()
    if not query:
        raise BooliError(ErrorKind.VALIDATION, 'Error: Search query cannot be empty.')
    if len(query) < MIN_QUERY_LENGTH:
        raise BooliError(
            ErrorKind.VALIDATION,
            f'Error: Search query must be at least {MIN_QUERY_LENGTH} characters long.',
        )
    return query


async def search_locations(
    args: Optional[Dict[str, Any]],
    client: BooliGraphQLClient
) -> ToolResult:
    """
    Search for area suggestions matching a partial location name.

    Args:
        args: Raw MCP arguments with ``query`` and optional ``limit``
        client: Shared GraphQL client

    Returns:
        ToolResult listing the suggestions with a usage hint, a "no
        locations" message, or an error envelope
    """
    args = args or {}

    try:
        query = validate_query(args.get('query'))
        limit = resolve_limit(args.get('limit'), client.config.default_limit)
    except BooliError as e:
        return ToolResult.error(e.message)

    try:
        raw = await client.search_locations(query)
        page = normalize_location_result(raw)
    except Exception as e:
        return ErrorHandler().to_result('search_locations', e, ERROR_PREFIX)

    if not page.suggestions:
        return ToolResult.text(
            f'No locations found matching "{query}". '
            'Try a different search term or check the spelling.'
        )

    shown = page.suggestions[:limit]

    summary = f'Found {page.total_count} location suggestions for "{query}"'
    if len(shown) < page.total_count:
        summary += f" (showing first {len(shown)})"
    summary += ":\n\n"

    logger.info(f"Location search for {query!r} returned {page.total_count} suggestions")

    entries = "\n\n".join(
        format_location_entry(index, location)
        for index, location in enumerate(shown, start=1)
    )
    return ToolResult.text(summary + entries + "\n\n" + LOCATION_USAGE_HINT)
