"""
Search input construction for Booli searchForSale queries.

This module converts a sparse SearchCriteria object into the ordered filter
list and envelope fields expected by Booli's GraphQL API.
"""

import re
from typing import Any, List, Optional, Tuple

from booli_mcp.models import FilterPair, QueryEnvelope, SearchCriteria


# Property types are sent as Booli's Swedish object type labels
PROPERTY_TYPE_LABELS = {
    'apartment': 'Lägenhet',
    'house': 'Villa',
}

# (SearchCriteria attribute, Booli filter key), in emission order.
# The object type filter is emitted between the living area and the
# price per square meter filters.
_BASIC_FILTERS: Tuple[Tuple[str, str], ...] = (
    ('min_price', 'minListPrice'),
    ('max_price', 'maxListPrice'),
    ('min_rooms', 'minRooms'),
    ('max_rooms', 'maxRooms'),
    ('min_area', 'minLivingArea'),
    ('max_area', 'maxLivingArea'),
)

_EXTENDED_FILTERS: Tuple[Tuple[str, str], ...] = (
    ('min_price_per_sqm', 'minListSqmPrice'),
    ('max_price_per_sqm', 'maxListSqmPrice'),
    ('min_plot_area', 'minPlotArea'),
    ('max_plot_area', 'maxPlotArea'),
    ('min_construction_year', 'minConstructionYear'),
    ('max_construction_year', 'maxConstructionYear'),
    ('max_rent', 'maxRent'),
    ('days_active', 'daysActive'),
    ('amenities', 'amenities'),
    ('floor', 'floor'),
    ('show_only', 'showOnly'),
)

PROPERTY_ID_FILTER_KEY = 'booliId'

_AREA_ID_PATTERN = re.compile(r'^\d+$')


def stringify_value(value: Any) -> str:
    """Convert a criteria value to the string Booli expects.

    Integral floats drop their fractional part (3.0 -> "3") and booleans
    are lower-cased, matching how the web front end serializes them.

    Examples:
        >>> stringify_value(2.5)
        '2.5'
        >>> stringify_value(3000000.0)
        '3000000'
    """
    if isinstance(value, bool):
        return 'true' if value else 'false'
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class SearchInputBuilder:
    """Builds the searchForSale input envelope from search criteria.

    The builder never fails: unmappable values are dropped and everything
    else is passed through without range validation.
    """

    def build_filters(self, criteria: SearchCriteria) -> List[FilterPair]:
        """Convert criteria into the ordered filter list.

        Presence is tested with ``is not None`` so explicit zeros and empty
        strings become filters.

        Args:
            criteria: Sparse search criteria

        Returns:
            Filter pairs in a fixed order
        """
        filters = self._collect(criteria, _BASIC_FILTERS)

        object_type = PROPERTY_TYPE_LABELS.get(criteria.property_type) \
            if isinstance(criteria.property_type, str) else None
        if object_type is not None:
            filters.append(FilterPair(key='objectType', value=object_type))

        filters.extend(self._collect(criteria, _EXTENDED_FILTERS))
        return filters

    def resolve_area_id(self, location: Optional[Any]) -> Optional[str]:
        """Resolve a location value to an area reference.

        Args:
            location: Numeric area ID or free-text location name

        Returns:
            The area reference, or None when no location was given
        """
        if not location:
            return None

        location = stringify_value(location)
        if _AREA_ID_PATTERN.match(location):
            # Numeric location ID, used directly
            return location
        # Text location, left to the API to resolve
        return location

    def build(self, criteria: SearchCriteria) -> QueryEnvelope:
        """Build a fresh envelope for one searchForSale call.

        Args:
            criteria: Sparse search criteria

        Returns:
            QueryEnvelope with filters, fixed paging/sort flags and area ID
        """
        return QueryEnvelope(
            filters=self.build_filters(criteria),
            area_id=self.resolve_area_id(criteria.location),
        )

    def build_lookup(self, property_id: str) -> QueryEnvelope:
        """Build an envelope that matches a single property by its Booli ID."""
        return QueryEnvelope(
            filters=[FilterPair(key=PROPERTY_ID_FILTER_KEY, value=stringify_value(property_id))],
        )

    def _collect(
        self,
        criteria: SearchCriteria,
        mapping: Tuple[Tuple[str, str], ...]
    ) -> List[FilterPair]:
        filters = []
        for attribute, key in mapping:
            value = getattr(criteria, attribute)
            if value is not None:
                filters.append(FilterPair(key=key, value=stringify_value(value)))
        return filters


def build_search_input(criteria: SearchCriteria) -> QueryEnvelope:
    """Convenience wrapper around SearchInputBuilder.build."""
    return SearchInputBuilder().build(criteria)


def build_lookup_input(property_id: str) -> QueryEnvelope:
    """Convenience wrapper around SearchInputBuilder.build_lookup."""
    return SearchInputBuilder().build_lookup(property_id)
