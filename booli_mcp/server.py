"""
Main entry point and CLI for the Booli MCP server.

Exposes Swedish real estate search from Booli.se as MCP tools over stdio.
Logging goes to stderr because stdout carries the MCP protocol.
"""

import argparse
import asyncio
import json
import logging
import sys
from typing import Any, Awaitable, Callable, Dict, List, Optional

from dotenv import load_dotenv
import mcp.server.stdio
import mcp.types as types
from mcp.server.lowlevel import Server

from booli_mcp.client import BooliGraphQLClient
from booli_mcp.config import ClientConfig, get_client_config, get_log_level
from booli_mcp.models import ToolResult
from booli_mcp.tools import get_property_details, search_locations, search_properties


logger = logging.getLogger(__name__)

SERVER_NAME = "booli-mcp-server"

ToolHandler = Callable[[Optional[Dict[str, Any]], BooliGraphQLClient], Awaitable[ToolResult]]

TOOL_HANDLERS: Dict[str, ToolHandler] = {
    'search_properties': search_properties,
    'search_locations': search_locations,
    'get_property_details': get_property_details,
}


def _number(description: str, **extra) -> dict:
    return {'type': 'number', 'description': description, **extra}


def _string(description: str, **extra) -> dict:
    return {'type': 'string', 'description': description, **extra}


TOOLS: List[types.Tool] = [
    types.Tool(
        name='search_properties',
        description='Search for properties on Booli.se with comprehensive filtering options',
        inputSchema={
            'type': 'object',
            'properties': {
                'location': _string('Location to search in (e.g., "Stockholm", "Södermalm", "509" for area ID)'),
                'minPrice': _number('Minimum list price in SEK'),
                'maxPrice': _number('Maximum list price in SEK'),
                'minRooms': _number('Minimum number of rooms'),
                'maxRooms': _number('Maximum number of rooms'),
                'minArea': _number('Minimum living area in square meters'),
                'maxArea': _number('Maximum living area in square meters'),
                'propertyType': _string('Type of property to search for', enum=['apartment', 'house']),
                'minPricePerSqm': _number('Minimum price per square meter in SEK'),
                'maxPricePerSqm': _number('Maximum price per square meter in SEK'),
                'minPlotArea': _number('Minimum plot area in square meters (for houses)'),
                'maxPlotArea': _number('Maximum plot area in square meters (for houses)'),
                'minConstructionYear': _number('Minimum construction year'),
                'maxConstructionYear': _number('Maximum construction year'),
                'maxRent': _number('Maximum monthly rent in SEK (for tenant-owned cooperatives)'),
                'daysActive': _number('Maximum days the listing has been active'),
                'amenities': _string(
                    'Comma-separated amenities (e.g., "hasBalconyOrPatio,hasFireplace,buildingHasElevator")'
                ),
                'floor': _string('Specific floor preference', enum=['bottomFloor', 'topFloor']),
                'showOnly': _string('Special filters (e.g., "priceDecrease,tenureOwnership,newConstruction")'),
                'limit': _number('Maximum number of results to return (default: 10)', default=10),
            },
            'required': [],
        },
    ),
    types.Tool(
        name='search_locations',
        description='Search for location suggestions on Booli.se to find area IDs and names',
        inputSchema={
            'type': 'object',
            'properties': {
                'query': _string('Search query to find location suggestions (e.g., "ektorp", "stockholm", "nacka")'),
                'limit': _number('Maximum number of results to return (default: 10)', default=10),
            },
            'required': ['query'],
        },
    ),
    types.Tool(
        name='get_property_details',
        description='Retrieve comprehensive details for a specific property using its property ID',
        inputSchema={
            'type': 'object',
            'properties': {
                'propertyId': _string('Unique identifier of the property to retrieve details for (e.g., "12345")'),
            },
            'required': ['propertyId'],
        },
    ),
]


class ToolCallError(Exception):
    """Carries an error envelope's text to the MCP layer, which marks it isError."""


async def dispatch(
    name: str,
    arguments: Optional[Dict[str, Any]],
    client: BooliGraphQLClient
) -> ToolResult:
    """
    Route a tool call to its implementation.

    Raises:
        ValueError: If the tool name is unknown
    """
    handler = TOOL_HANDLERS.get(name)
    if handler is None:
        raise ValueError(f"Unknown tool: {name}")
    return await handler(arguments, client)


def to_text_content(result: ToolResult) -> List[types.TextContent]:
    return [types.TextContent(type='text', text=text) for text in result.content]


async def call_tool(
    name: str,
    arguments: Optional[Dict[str, Any]],
    client: BooliGraphQLClient
) -> List[types.TextContent]:
    """Run a tool and translate its envelope for the MCP layer.

    Raises:
        ToolCallError: If the tool returned an error envelope
    """
    result = await dispatch(name, arguments, client)
    if result.is_error:
        # The MCP server turns a raised exception into isError content
        raise ToolCallError("\n".join(result.content))
    return to_text_content(result)


def create_server(client: BooliGraphQLClient) -> Server:
    """
    Build the MCP server with the tool catalogue bound to one client.

    Args:
        client: Client shared by every tool call

    Returns:
        Configured low-level MCP Server
    """
    server = Server(SERVER_NAME)

    @server.list_tools()
    async def handle_list_tools() -> List[types.Tool]:
        return TOOLS

    # Arguments reach the tools unvalidated; unknown enum values are dropped there
    @server.call_tool(validate_input=False)
    async def handle_call_tool(name: str, arguments: Optional[Dict[str, Any]]) -> List[types.TextContent]:
        return await call_tool(name, arguments, client)

    return server


async def run_server(config: ClientConfig) -> None:
    """Serve MCP requests over stdio until the client disconnects."""
    client = BooliGraphQLClient(config)
    server = create_server(client)

    async with mcp.server.stdio.stdio_server() as (read_stream, write_stream):
        logger.info("Booli MCP Server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())


async def check_connection(config: ClientConfig) -> int:
    """Run the connection test. Returns exit code 0 on success, 1 otherwise."""
    client = BooliGraphQLClient(config)
    if await client.test_connection():
        print(f"Connected to {config.graphql_url}")
        return 0
    print(f"Could not connect to {config.graphql_url}", file=sys.stderr)
    return 1


async def print_schema(config: ClientConfig) -> int:
    """Print the introspected GraphQL schema as JSON."""
    schema = await BooliGraphQLClient(config).introspect_schema()
    if schema is None:
        print("Schema introspection failed", file=sys.stderr)
        return 1
    print(json.dumps(schema, indent=2, ensure_ascii=False))
    return 0


def main() -> None:
    """Main CLI entry point."""
    load_dotenv()

    parser = argparse.ArgumentParser(
        description="Booli MCP server - Swedish real estate search over the Model Context Protocol",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        '--check',
        action='store_true',
        help='Test the connection to the Booli GraphQL endpoint and exit',
    )
    mode.add_argument(
        '--introspect',
        action='store_true',
        help='Print the Booli GraphQL schema and exit',
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable verbose (debug) logging',
    )
    args = parser.parse_args()

    config = get_client_config()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else get_log_level(),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        stream=sys.stderr,
    )

    try:
        if args.check:
            sys.exit(asyncio.run(check_connection(config)))
        if args.introspect:
            sys.exit(asyncio.run(print_schema(config)))
        asyncio.run(run_server(config))
    except KeyboardInterrupt:
        logger.info("Server stopped")
        sys.exit(0)
    except Exception as e:
        logger.error(f"Server error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
