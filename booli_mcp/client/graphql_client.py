"""
Booli GraphQL API client.

Sends inline-literal GraphQL queries to Booli's public endpoint using
browser-like headers (no API key). Each call makes exactly one HTTP request;
failures are re-raised once as BooliError with the original message.
"""

import json
import logging
from typing import Any, Callable, Dict, Optional

import aiohttp

from booli_mcp.client.queries import (
    CONNECTION_TEST_QUERY,
    INTROSPECTION_QUERY,
    compile_detail_query,
    compile_location_query,
    compile_search_query,
)
from booli_mcp.config import ClientConfig, get_client_config
from booli_mcp.error_handling import BooliError, ErrorKind, GraphQLRequestError, describe_error
from booli_mcp.models import SearchCriteria
from booli_mcp.query_builder import SearchInputBuilder


logger = logging.getLogger(__name__)


UNSUPPORTED_LOOKUP_MESSAGE = (
    "Direct property lookup by ID is not supported by Booli's API. "
    "Property ID {property_id} cannot be retrieved directly. "
    "Please use the search_properties tool with location or other filters to find "
    "properties, then reference the detailed information from the search results."
)


class BooliGraphQLClient:
    """
    Client for Booli's GraphQL endpoint.

    The client holds only read-only configuration and is safe to share
    between concurrent tool calls. An HTTP session is opened per request.

    Attributes:
        config: Endpoint, headers and timeout settings
    """

    def __init__(
        self,
        config: Optional[ClientConfig] = None,
        session_factory: Optional[Callable[..., aiohttp.ClientSession]] = None
    ):
        """
        Initialize the client.

        Args:
            config: Client configuration (default: read from environment)
            session_factory: Callable returning an aiohttp.ClientSession-like
                object, for substituting the transport
        """
        self.config = config or get_client_config()
        self._session_factory = session_factory or aiohttp.ClientSession
        self._builder = SearchInputBuilder()

    async def execute(self, query: str) -> Dict[str, Any]:
        """
        POST a query and return the ``data`` object of the response.

        The request body carries the query text only; Booli rejects a
        variables payload.

        Args:
            query: Complete GraphQL query text

        Returns:
            The response's ``data`` dictionary

        Raises:
            GraphQLRequestError: On non-200 status or GraphQL errors
            aiohttp.ClientError: On network failure
        """
        logger.debug(f"GraphQL query: {query}")
        timeout = aiohttp.ClientTimeout(total=self.config.request_timeout_seconds)

        async with self._session_factory(headers=self.config.headers, timeout=timeout) as session:
            async with session.post(self.config.graphql_url, json={'query': query}) as response:
                text = await response.text()
                if response.status != 200:
                    raise GraphQLRequestError(
                        f"GraphQL Error (Code: {response.status}): {text}",
                        status=response.status,
                    )

        try:
            payload = json.loads(text)
        except json.JSONDecodeError as e:
            raise GraphQLRequestError(f"Invalid JSON response: {e}", status=200)

        errors = payload.get('errors') if isinstance(payload, dict) else None
        if errors:
            messages = '; '.join(
                str(error.get('message', error)) if isinstance(error, dict) else str(error)
                for error in errors
            )
            raise GraphQLRequestError(messages, status=200)

        data = payload.get('data') if isinstance(payload, dict) else None
        return data or {}

    async def search_for_sale(self, criteria: SearchCriteria) -> Dict[str, Any]:
        """
        Search for properties for sale.

        Args:
            criteria: Sparse search criteria

        Returns:
            The raw ``searchForSale`` result object

        Raises:
            BooliError: UPSTREAM, prefixed "Failed to search properties: "
        """
        envelope = self._builder.build(criteria)
        query = compile_search_query(envelope)

        try:
            data = await self.execute(query)
        except Exception as e:
            logger.error(f"GraphQL query failed: {e}")
            raise BooliError(ErrorKind.UPSTREAM, f"Failed to search properties: {describe_error(e)}") from e

        return data.get('searchForSale') or {}

    async def search_locations(self, query: str) -> Dict[str, Any]:
        """
        Search for area suggestions matching a partial location name.

        Args:
            query: Free-text search string, already validated by the caller

        Returns:
            The raw ``areaSuggestionSearch`` result object

        Raises:
            BooliError: UPSTREAM, prefixed "Failed to search locations: "
        """
        try:
            data = await self.execute(compile_location_query(query))
        except Exception as e:
            logger.error(f"Location search query failed: {e}")
            raise BooliError(ErrorKind.UPSTREAM, f"Failed to search locations: {describe_error(e)}") from e

        return data.get('areaSuggestionSearch') or {}

    async def get_property_details(self, property_id: str) -> Dict[str, Any]:
        """
        Refuse a direct property lookup.

        Booli's API cannot query a property by ID alone; searches must be
        scoped by location or filters. No request is made.

        Raises:
            BooliError: Always, with kind UNSUPPORTED
        """
        raise BooliError(
            ErrorKind.UNSUPPORTED,
            UNSUPPORTED_LOOKUP_MESSAGE.format(property_id=property_id),
        )

    async def lookup_property_by_id(self, property_id: str) -> Dict[str, Any]:
        """
        Look up one property through a booliId-filtered searchForSale query.

        Alternative to get_property_details that attempts the request.

        Args:
            property_id: Numeric Booli property ID

        Returns:
            The single raw result entry

        Raises:
            BooliError: NOT_FOUND when the result list is empty, UPSTREAM
                (prefixed "Failed to get property details: ") on failure
        """
        query = compile_detail_query(self._builder.build_lookup(property_id))

        try:
            data = await self.execute(query)
        except Exception as e:
            logger.error(f"Property detail query failed: {e}")
            raise BooliError(ErrorKind.UPSTREAM, f"Failed to get property details: {describe_error(e)}") from e

        results = (data.get('searchForSale') or {}).get('result') or []
        if not results:
            raise BooliError(ErrorKind.NOT_FOUND, f"Property with ID {property_id} not found")

        return results[0]

    async def introspect_schema(self) -> Optional[Dict[str, Any]]:
        """
        Fetch the GraphQL schema description.

        Returns:
            The introspection result, or None if the request failed
        """
        try:
            return await self.execute(INTROSPECTION_QUERY)
        except Exception as e:
            logger.error(f"Schema introspection failed: {e}")
            return None

    async def test_connection(self) -> bool:
        """
        Check that the endpoint is reachable and accepts our headers.

        Returns:
            True if a trivial query succeeded, False otherwise
        """
        try:
            await self.execute(CONNECTION_TEST_QUERY)
            return True
        except Exception as e:
            logger.error(f"Connection test failed: {e}")
            return False
