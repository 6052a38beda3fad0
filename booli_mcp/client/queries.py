"""
GraphQL query text for Booli's API.

Booli's endpoint does not accept GraphQL variables, so every value is
embedded literally in the query text. All embedding goes through
``embed_literal``.
"""

from typing import Iterable

from booli_mcp.models import FilterPair, QueryEnvelope


# Fields requested for every property search result. The result list is a
# union of Property and Listing entries; both fragments may contribute
# fields to the same entry.
PROPERTY_SELECTION = """
          totalCount
          result {
            ... on Property {
              id
              livingArea {
                value
                formatted
              }
              rooms {
                value
                formatted
              }
              plotArea {
                value
                formatted
              }
              objectType
              streetAddress
              descriptiveAreaName
              location {
                region {
                  municipalityName
                }
              }
              constructionYear
              latitude
              longitude
              url
            }
            ... on Listing {
              id
              listPrice {
                formatted
                value
                unit
                raw
              }
              listSqmPrice {
                formatted
              }
              livingArea {
                value
                formatted
              }
              rooms {
                value
                formatted
              }
              plotArea {
                value
                formatted
              }
              rent {
                formatted
              }
              objectType
              streetAddress
              descriptiveAreaName
              location {
                region {
                  municipalityName
                }
              }
              floor
              constructionYear
              daysActive
              published
              tenureForm
              listPricePercentageDiff
              biddingOpen
              upcomingSale
              isNewConstruction
              nextShowing
              blockedImages
              primaryImage {
                alt
                url
              }
              displayAttributes {
                dataPoints {
                  value {
                    plainText
                  }
                }
              }
              latitude
              longitude
              url
              estimate {
                price {
                  formatted
                }
              }
              agency {
                name
                url
                thumbnail
              }
              amenities {
                key
                label
              }
            }
          }"""

LOCATION_SELECTION = """
          suggestions {
            id
            displayName
            parent
            parentType
            parentDisplayName
            parentTypeDisplayName
            parentId
          }"""

INTROSPECTION_QUERY = """
      query IntrospectionQuery {
        __schema {
          types {
            name
            kind
            description
            fields {
              name
              type {
                name
                kind
              }
            }
          }
        }
      }
"""

CONNECTION_TEST_QUERY = """
      query Test {
        __schema {
          queryType {
            name
          }
        }
      }
"""


def embed_literal(value: str) -> str:
    """Embed a string value as a GraphQL string literal.

    No escaping is performed; Booli accepts the raw text. Only criteria
    values and location queries pass through here. A value containing a
    double quote or backslash changes the meaning of the query text.
    """
    return f'"{value}"'


def render_bool(value: bool) -> str:
    return 'true' if value else 'false'


def render_filters(filters: Iterable[FilterPair]) -> str:
    """Render filter pairs as inline GraphQL input objects.

    Examples:
        >>> render_filters([FilterPair('minRooms', '2')])
        '{ key: "minRooms", value: "2" }'
    """
    return ', '.join(
        f'{{ key: {embed_literal(pair.key)}, value: {embed_literal(pair.value)} }}'
        for pair in filters
    )


def render_search_input(envelope: QueryEnvelope) -> str:
    """Render the searchForSale input object body.

    The area reference line is only present when the envelope has one.
    """
    lines = [f'filters: [{render_filters(envelope.filters)}]']
    if envelope.area_id is not None:
        lines.append(f'areaId: {embed_literal(envelope.area_id)}')
    lines.append(f'page: {int(envelope.page)}')
    lines.append(f'ascending: {render_bool(envelope.ascending)}')
    lines.append(f'excludeAncestors: {render_bool(envelope.exclude_ancestors)}')
    return '\n            '.join(lines)


def _compile_for_sale_query(operation_name: str, envelope: QueryEnvelope) -> str:
    return f"""
      query {operation_name} {{
        searchForSale(
          input: {{
            {render_search_input(envelope)}
          }}
        ) {{{PROPERTY_SELECTION}
        }}
      }}
    """


def compile_search_query(envelope: QueryEnvelope) -> str:
    """Compile the multi-result property search query."""
    return _compile_for_sale_query('searchCount', envelope)


def compile_detail_query(envelope: QueryEnvelope) -> str:
    """Compile the single-property query (same selection, one ID filter)."""
    return _compile_for_sale_query('propertyDetails', envelope)


def compile_location_query(query: str) -> str:
    """Compile the area suggestion query for a free-text search string."""
    return f"""
      query areaSuggestionSearch {{
        areaSuggestionSearch(search: {embed_literal(query)}) {{{LOCATION_SELECTION}
        }}
      }}
    """
