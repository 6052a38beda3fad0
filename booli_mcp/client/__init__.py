"""GraphQL client for Booli.se."""

from .graphql_client import BooliGraphQLClient, UNSUPPORTED_LOOKUP_MESSAGE

__all__ = ['BooliGraphQLClient', 'UNSUPPORTED_LOOKUP_MESSAGE']
