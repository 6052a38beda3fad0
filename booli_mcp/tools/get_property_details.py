"""
MCP tools for property detail retrieval on Booli.se.

Booli's API cannot look up a property by ID, so ``get_property_details``
answers every valid ID with guidance towards the search tools.
``lookup_property_details`` attempts a booliId-filtered search instead and
is kept as a separate, unregistered variant.
"""

import logging
import re
from typing import Any, Dict, Optional

from booli_mcp.client import BooliGraphQLClient
from booli_mcp.error_handling import BooliError, ErrorHandler, ErrorKind
from booli_mcp.formatting import UNSUPPORTED_LOOKUP_GUIDANCE, format_property_details
from booli_mcp.models import ToolResult
from booli_mcp.normalization import normalize_property


logger = logging.getLogger(__name__)

ERROR_PREFIX = 'Error retrieving property details: '

_PROPERTY_ID_PATTERN = re.compile(r'^\d+$')


def validate_property_id(property_id: Any) -> str:
    """Validate and trim a property ID argument.

    Raises:
        BooliError: VALIDATION with the corrective message
    """
    if not property_id or not isinstance(property_id, str):
        raise BooliError(
            ErrorKind.VALIDATION,
            'Error: Property ID parameter is required and must be a non-empty string.',
        )

    property_id = property_id.strip()
    if not property_id:
        raise BooliError(ErrorKind.VALIDATION, 'Error: Property ID cannot be empty.')
    if not _PROPERTY_ID_PATTERN.match(property_id):
        raise BooliError(
            ErrorKind.VALIDATION,
            'Error: Property ID must be a numeric value (e.g., "12345").',
        )
    return property_id


async def get_property_details(
    args: Optional[Dict[str, Any]],
    client: BooliGraphQLClient
) -> ToolResult:
    """
    Answer a property detail request.

    Args:
        args: Raw MCP arguments with ``propertyId``
        client: Shared GraphQL client

    Returns:
        Guidance explaining the lookup limitation for a valid ID, or a
        validation error envelope
    """
    args = args or {}

    try:
        property_id = validate_property_id(args.get('propertyId'))
    except BooliError as e:
        return ToolResult.error(e.message)

    try:
        await client.get_property_details(property_id)
    except BooliError as e:
        if e.kind is not ErrorKind.UNSUPPORTED:
            return ErrorHandler().to_result('get_property_details', e, ERROR_PREFIX)
    except Exception as e:
        return ErrorHandler().to_result('get_property_details', e, ERROR_PREFIX)

    logger.info(f"Direct lookup refused for property {property_id}")
    return ToolResult.text(UNSUPPORTED_LOOKUP_GUIDANCE.format(property_id=property_id))


async def lookup_property_details(
    args: Optional[Dict[str, Any]],
    client: BooliGraphQLClient
) -> ToolResult:
    """
    Retrieve one property through a booliId-filtered search.

    Args:
        args: Raw MCP arguments with ``propertyId``
        client: Shared GraphQL client

    Returns:
        ToolResult with the formatted detail block, a not-found error, or
        an upstream error envelope
    """
    args = args or {}

    try:
        property_id = validate_property_id(args.get('propertyId'))
    except BooliError as e:
        return ToolResult.error(e.message)

    handler = ErrorHandler()
    try:
        entry = await client.lookup_property_by_id(property_id)
    except BooliError as e:
        if e.kind is ErrorKind.NOT_FOUND:
            return handler.to_result(
                'lookup_property_details',
                BooliError(
                    ErrorKind.NOT_FOUND,
                    f"Property with ID {property_id} was not found. "
                    "Please verify the property ID is correct.",
                ),
                ERROR_PREFIX,
            )
        return handler.to_result('lookup_property_details', e, ERROR_PREFIX)
    except Exception as e:
        return handler.to_result('lookup_property_details', e, ERROR_PREFIX)

    return ToolResult.text(format_property_details(normalize_property(entry)))
