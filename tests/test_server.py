"""Tests for tool registration and dispatch."""

import pytest
import mcp.types as types
from mcp.server.lowlevel import Server

from booli_mcp.error_handling import BooliError, ErrorKind
from booli_mcp.models import ToolResult
from booli_mcp.query_builder import SearchInputBuilder
from booli_mcp.server import (
    SERVER_NAME,
    TOOL_HANDLERS,
    TOOLS,
    ToolCallError,
    call_tool,
    create_server,
    dispatch,
    to_text_content,
)


def _tool(name):
    return next(tool for tool in TOOLS if tool.name == name)


def test_three_tools_are_registered():
    assert [tool.name for tool in TOOLS] == ['search_properties', 'search_locations', 'get_property_details']
    assert set(TOOL_HANDLERS) == {tool.name for tool in TOOLS}


def test_required_arguments():
    assert _tool('search_properties').inputSchema['required'] == []
    assert _tool('search_locations').inputSchema['required'] == ['query']
    assert _tool('get_property_details').inputSchema['required'] == ['propertyId']


def test_search_properties_schema():
    properties = _tool('search_properties').inputSchema['properties']

    assert properties['propertyType']['enum'] == ['apartment', 'house']
    assert properties['floor']['enum'] == ['bottomFloor', 'topFloor']
    assert properties['limit']['default'] == 10
    assert properties['minPrice']['type'] == 'number'
    assert properties['amenities']['type'] == 'string'
    assert len(properties) == 20


@pytest.mark.asyncio
async def test_dispatch_routes_by_name(mock_client):
    mock_client.search_locations.return_value = {'suggestions': []}

    result = await dispatch('search_locations', {'query': 'ektorp'}, mock_client)

    assert result.is_error is False
    mock_client.search_locations.assert_awaited_once_with('ektorp')


@pytest.mark.asyncio
async def test_dispatch_unknown_tool(mock_client):
    with pytest.raises(ValueError, match='Unknown tool: delete_property'):
        await dispatch('delete_property', {}, mock_client)


def test_to_text_content():
    content = to_text_content(ToolResult(content=['a', 'b']))

    assert [c.text for c in content] == ['a', 'b']
    assert all(c.type == 'text' for c in content)


def test_tool_result_wire_shape():
    assert ToolResult.text('ok').to_dict() == {'content': [{'type': 'text', 'text': 'ok'}]}
    assert ToolResult.error('bad').to_dict() == {
        'content': [{'type': 'text', 'text': 'bad'}],
        'isError': True,
    }


def test_create_server_registers_handlers(mock_client):
    server = create_server(mock_client)

    assert isinstance(server, Server)
    assert server.name == SERVER_NAME
    assert types.ListToolsRequest in server.request_handlers
    assert types.CallToolRequest in server.request_handlers


@pytest.mark.asyncio
async def test_call_tool_returns_text(mock_client):
    content = await call_tool('get_property_details', {'propertyId': '12345'}, mock_client)

    assert len(content) == 1
    assert isinstance(content[0], types.TextContent)
    assert 'Property Detail Limitation' in content[0].text


@pytest.mark.asyncio
async def test_call_tool_raises_for_error_envelopes(mock_client):
    mock_client.search_for_sale.side_effect = BooliError(
        ErrorKind.UPSTREAM, 'Failed to search properties: timeout'
    )

    with pytest.raises(ToolCallError) as excinfo:
        await call_tool('search_properties', {'location': 'Nacka'}, mock_client)

    assert str(excinfo.value) == 'Error searching for properties: Failed to search properties: timeout'


@pytest.mark.asyncio
async def test_call_tool_validation_error_never_reaches_client(mock_client):
    with pytest.raises(ToolCallError, match='at least 2 characters'):
        await call_tool('search_locations', {'query': 'a'}, mock_client)

    mock_client.search_locations.assert_not_awaited()


async def _request(server, request_type, request):
    return (await server.request_handlers[request_type](request)).root


@pytest.mark.asyncio
@pytest.mark.parametrize('arguments', [
    {'propertyType': 'villa', 'location': '509'},
    {'floor': 'middleFloor', 'location': '509'},
])
async def test_server_passes_values_outside_schema_enums_to_the_tool(mock_client, arguments):
    """Unknown enum values are handled by the tool, not rejected by the MCP layer."""
    mock_client.search_for_sale.return_value = {'totalCount': 0, 'result': []}
    server = create_server(mock_client)

    await _request(server, types.ListToolsRequest, types.ListToolsRequest(method='tools/list'))
    result = await _request(server, types.CallToolRequest, types.CallToolRequest(
        method='tools/call',
        params=types.CallToolRequestParams(name='search_properties', arguments=arguments),
    ))

    assert not result.isError
    assert result.content[0].text == 'No properties found matching your criteria in 509.'
    mock_client.search_for_sale.assert_awaited_once()
    criteria = mock_client.search_for_sale.await_args.args[0]
    keys = [pair.key for pair in SearchInputBuilder().build_filters(criteria)]
    assert 'objectType' not in keys
