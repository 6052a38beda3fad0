"""
MCP tool for searching properties on Booli.se.

Handles argument mapping, result limiting and formatting for the
search_properties tool.
"""

import logging
from typing import Any, Dict, Optional

from booli_mcp.client import BooliGraphQLClient
from booli_mcp.error_handling import BooliError, ErrorHandler, ErrorKind
from booli_mcp.formatting import format_property_entry
from booli_mcp.models import SearchCriteria, ToolResult
from booli_mcp.normalization import normalize_search_result
from booli_mcp.tools.arguments import resolve_limit


logger = logging.getLogger(__name__)

ERROR_PREFIX = 'Error searching for properties: '


async def search_properties(
    args: Optional[Dict[str, Any]],
    client: BooliGraphQLClient
) -> ToolResult:
    """
    Search for properties using the provided criteria.

    Supports basic filters (location, price, rooms, living area, property
    type), advanced filters (price per m², plot area, construction year,
    rent) and special filters (days active, amenities, floor, showOnly).

    Args:
        args: Raw MCP arguments; every key is optional
        client: Shared GraphQL client

    Returns:
        ToolResult with a summary and one block per property, a "no
        matches" message, or an error envelope
    """
    args = args or {}
    handler = ErrorHandler()

    try:
        criteria = SearchCriteria.from_arguments(args)
        limit = resolve_limit(args.get('limit'), client.config.default_limit)

        raw = await client.search_for_sale(criteria)
        page = normalize_search_result(raw)
    except BooliError as e:
        if e.kind is ErrorKind.VALIDATION:
            return ToolResult.error(e.message)
        return handler.to_result('search_properties', e, ERROR_PREFIX)
    except Exception as e:
        return handler.to_result('search_properties', e, ERROR_PREFIX)

    if not page.records:
        area = criteria.location or 'the specified area'
        return ToolResult.text(f"No properties found matching your criteria in {area}.")

    shown = page.records[:limit]
    total_count = max(page.total_count, len(page.records))

    summary = f"Found {total_count} properties"
    if criteria.location:
        summary += f" in {criteria.location}"
    if len(shown) < total_count:
        summary += f" (showing first {len(shown)})"
    summary += ":\n\n"

    logger.info(f"Property search returned {total_count} matches, showing {len(shown)}")

    entries = "\n\n".join(
        format_property_entry(index, record)
        for index, record in enumerate(shown, start=1)
    )
    return ToolResult.text(summary + entries)
