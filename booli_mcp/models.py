"""
Data models for the Booli MCP server.

This module defines the core data structures used throughout the application:
the sparse search criteria, the outbound query envelope, the normalized
property and location views, and the uniform tool result envelope.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple


# MCP argument name -> SearchCriteria attribute
CRITERIA_ARGUMENTS: Tuple[Tuple[str, str], ...] = (
    ('location', 'location'),
    ('minPrice', 'min_price'),
    ('maxPrice', 'max_price'),
    ('minRooms', 'min_rooms'),
    ('maxRooms', 'max_rooms'),
    ('minArea', 'min_area'),
    ('maxArea', 'max_area'),
    ('propertyType', 'property_type'),
    ('minPricePerSqm', 'min_price_per_sqm'),
    ('maxPricePerSqm', 'max_price_per_sqm'),
    ('minPlotArea', 'min_plot_area'),
    ('maxPlotArea', 'max_plot_area'),
    ('minConstructionYear', 'min_construction_year'),
    ('maxConstructionYear', 'max_construction_year'),
    ('maxRent', 'max_rent'),
    ('daysActive', 'days_active'),
    ('amenities', 'amenities'),
    ('floor', 'floor'),
    ('showOnly', 'show_only'),
)


@dataclass
class SearchCriteria:
    """Sparse property search parameters.

    Every attribute is optional. ``None`` means "no filter applied"; a
    numeric zero or an empty string is an explicit filter value.

    Attributes:
        location: Area ID (e.g. "509") or free-text location name
        min_price: Minimum list price in SEK
        max_price: Maximum list price in SEK
        min_rooms: Minimum number of rooms (fractional allowed)
        max_rooms: Maximum number of rooms (fractional allowed)
        min_area: Minimum living area in square meters
        max_area: Maximum living area in square meters
        property_type: "apartment" or "house"
        min_price_per_sqm: Minimum price per square meter
        max_price_per_sqm: Maximum price per square meter
        min_plot_area: Minimum plot area (houses)
        max_plot_area: Maximum plot area (houses)
        min_construction_year: Earliest construction year
        max_construction_year: Latest construction year
        max_rent: Maximum monthly rent in SEK
        days_active: Maximum number of days the listing has been active
        amenities: Comma-separated amenity tokens
        floor: "bottomFloor" or "topFloor"
        show_only: Comma-separated special filter tokens
    """
    location: Optional[str] = None
    min_price: Optional[Any] = None
    max_price: Optional[Any] = None
    min_rooms: Optional[Any] = None
    max_rooms: Optional[Any] = None
    min_area: Optional[Any] = None
    max_area: Optional[Any] = None
    property_type: Optional[str] = None
    min_price_per_sqm: Optional[Any] = None
    max_price_per_sqm: Optional[Any] = None
    min_plot_area: Optional[Any] = None
    max_plot_area: Optional[Any] = None
    min_construction_year: Optional[Any] = None
    max_construction_year: Optional[Any] = None
    max_rent: Optional[Any] = None
    days_active: Optional[Any] = None
    amenities: Optional[str] = None
    floor: Optional[str] = None
    show_only: Optional[str] = None

    @classmethod
    def from_arguments(cls, arguments: Optional[Dict[str, Any]]) -> 'SearchCriteria':
        """Create SearchCriteria from raw MCP tool arguments.

        Unknown argument names are ignored.

        Args:
            arguments: camelCase argument dictionary from the MCP client

        Returns:
            SearchCriteria instance
        """
        arguments = arguments or {}
        return cls(**{
            attribute: arguments.get(argument)
            for argument, attribute in CRITERIA_ARGUMENTS
        })


@dataclass(frozen=True)
class FilterPair:
    """A single key/value search constraint in the outbound query."""
    key: str
    value: str


@dataclass
class QueryEnvelope:
    """Structural fields wrapping the filter list of a searchForSale query.

    Attributes:
        filters: Ordered filter pairs
        page: Result page, always 1
        ascending: Sort direction, always newest/relevance first
        exclude_ancestors: Suppress results from parent areas
        area_id: Area reference, or None when no location was given
    """
    filters: List[FilterPair] = field(default_factory=list)
    page: int = 1
    ascending: bool = False
    exclude_ancestors: bool = True
    area_id: Optional[str] = None


@dataclass(frozen=True)
class FormattedValue:
    """Raw value paired with its upstream display string."""
    value: Optional[Any]
    formatted: Optional[str]


@dataclass(frozen=True)
class Amenity:
    key: Optional[str]
    label: Optional[str]


@dataclass(frozen=True)
class PropertyImage:
    alt: Optional[str]
    url: Optional[str]


@dataclass(frozen=True)
class Agency:
    name: Optional[str]
    url: Optional[str]
    thumbnail: Optional[str]


@dataclass(frozen=True)
class PropertyRecord:
    """Merged view over the Property and Listing result shapes.

    The upstream result list does not say which shape an entry belongs to,
    so both contribute to the same record. Every attribute except ``id`` may
    be None.
    """
    id: str
    object_type: Optional[str] = None
    street_address: Optional[str] = None
    descriptive_area_name: Optional[str] = None
    municipality_name: Optional[str] = None
    rooms: Optional[FormattedValue] = None
    living_area: Optional[FormattedValue] = None
    plot_area: Optional[FormattedValue] = None
    list_price: Optional[FormattedValue] = None
    list_sqm_price: Optional[str] = None
    estimated_value: Optional[str] = None
    rent: Optional[str] = None
    tenure_form: Optional[str] = None
    construction_year: Optional[Any] = None
    floor: Optional[Any] = None
    days_active: Optional[Any] = None
    published: Optional[str] = None
    price_change_percentage: Optional[float] = None
    bidding_open: Optional[bool] = None
    upcoming_sale: Optional[bool] = None
    is_new_construction: Optional[bool] = None
    amenities: Tuple[Amenity, ...] = ()
    additional_details: Tuple[str, ...] = ()
    agency: Optional[Agency] = None
    primary_image: Optional[PropertyImage] = None
    blocked_images: Optional[bool] = None
    next_showing: Optional[str] = None
    latitude: Optional[Any] = None
    longitude: Optional[Any] = None
    url: Optional[str] = None


@dataclass(frozen=True)
class LocationSuggestion:
    """Area suggestion returned by areaSuggestionSearch."""
    id: str
    display_name: str
    parent: str
    parent_type: str
    parent_display_name: str
    parent_type_display_name: str
    parent_id: str


@dataclass
class SearchPage:
    """Normalized searchForSale result."""
    total_count: int
    records: List[PropertyRecord]


@dataclass
class LocationPage:
    """Normalized areaSuggestionSearch result.

    ``total_count`` is the length of the full suggestion list, retained
    after the caller truncates ``suggestions``.
    """
    total_count: int
    suggestions: List[LocationSuggestion]


@dataclass
class ToolResult:
    """Uniform tool envelope: text segments plus an optional error flag."""
    content: List[str]
    is_error: bool = False

    @classmethod
    def text(cls, text: str) -> 'ToolResult':
        return cls(content=[text])

    @classmethod
    def error(cls, text: str) -> 'ToolResult':
        return cls(content=[text], is_error=True)

    def to_dict(self) -> dict:
        """Convert to the MCP wire shape ({"content": [...], "isError": ...})."""
        data = {'content': [{'type': 'text', 'text': text} for text in self.content]}
        if self.is_error:
            data['isError'] = True
        return data
