"""
MCP tool implementations.

Every tool takes the raw argument dictionary and the shared client and
returns a ToolResult envelope; no exception escapes a tool.
"""

from .search_properties import search_properties
from .search_locations import search_locations
from .get_property_details import get_property_details, lookup_property_details

__all__ = [
    'search_properties',
    'search_locations',
    'get_property_details',
    'lookup_property_details',
]
