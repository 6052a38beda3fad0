"""
Property-based tests for search input construction.

These tests verify properties that should hold for every SearchCriteria the
builder can receive, including explicit zeros and unmappable values.
"""

import pytest
from hypothesis import given, settings, strategies as st

from booli_mcp.models import FilterPair, QueryEnvelope, SearchCriteria
from booli_mcp.query_builder import (
    PROPERTY_TYPE_LABELS,
    SearchInputBuilder,
    build_lookup_input,
    build_search_input,
    stringify_value,
)


NUMERIC_FIELDS = [
    ('min_price', 'minListPrice'),
    ('max_price', 'maxListPrice'),
    ('min_rooms', 'minRooms'),
    ('max_rooms', 'maxRooms'),
    ('min_area', 'minLivingArea'),
    ('max_area', 'maxLivingArea'),
    ('min_price_per_sqm', 'minListSqmPrice'),
    ('max_price_per_sqm', 'maxListSqmPrice'),
    ('min_plot_area', 'minPlotArea'),
    ('max_plot_area', 'maxPlotArea'),
    ('min_construction_year', 'minConstructionYear'),
    ('max_construction_year', 'maxConstructionYear'),
    ('max_rent', 'maxRent'),
    ('days_active', 'daysActive'),
]

EXPECTED_KEY_ORDER = [
    'minListPrice', 'maxListPrice', 'minRooms', 'maxRooms', 'minLivingArea',
    'maxLivingArea', 'objectType', 'minListSqmPrice', 'maxListSqmPrice',
    'minPlotArea', 'maxPlotArea', 'minConstructionYear', 'maxConstructionYear',
    'maxRent', 'daysActive', 'amenities', 'floor', 'showOnly',
]

numbers = st.one_of(
    st.integers(min_value=0, max_value=50_000_000),
    st.sampled_from([0.5, 1.5, 2.5, 3.0, 0.0]),
)
optional_numbers = st.one_of(st.none(), numbers)
optional_tokens = st.one_of(
    st.none(),
    st.just(''),
    st.sampled_from(['hasBalconyOrPatio', 'hasFireplace,buildingHasElevator', 'priceDecrease']),
)

criteria_strategy = st.builds(
    SearchCriteria,
    location=st.one_of(st.none(), st.sampled_from(['509', 'Stockholm', 'Södermalm'])),
    property_type=st.one_of(st.none(), st.sampled_from(['apartment', 'house', 'villa', 'Apartment'])),
    amenities=optional_tokens,
    floor=st.one_of(st.none(), st.sampled_from(['bottomFloor', 'topFloor'])),
    show_only=optional_tokens,
    **{attribute: optional_numbers for attribute, _ in NUMERIC_FIELDS},
)


def test_empty_criteria_produce_default_envelope():
    """No criteria means no filters and only the fixed envelope defaults."""
    envelope = build_search_input(SearchCriteria())

    assert envelope == QueryEnvelope()
    assert envelope.filters == []
    assert envelope.page == 1
    assert envelope.ascending is False
    assert envelope.exclude_ancestors is True
    assert envelope.area_id is None


@pytest.mark.parametrize('attribute,key', NUMERIC_FIELDS)
def test_explicit_zero_is_a_filter(attribute, key):
    """A zero value is emitted as "0", never treated as absent."""
    envelope = build_search_input(SearchCriteria(**{attribute: 0}))

    assert envelope.filters == [FilterPair(key=key, value='0')]


@pytest.mark.parametrize('attribute,key', [
    ('amenities', 'amenities'),
    ('floor', 'floor'),
    ('show_only', 'showOnly'),
])
def test_empty_string_is_a_filter(attribute, key):
    envelope = build_search_input(SearchCriteria(**{attribute: ''}))

    assert envelope.filters == [FilterPair(key=key, value='')]


@pytest.mark.parametrize('property_type,label', sorted(PROPERTY_TYPE_LABELS.items()))
def test_property_type_maps_to_booli_label(property_type, label):
    envelope = build_search_input(SearchCriteria(property_type=property_type))

    assert envelope.filters == [FilterPair(key='objectType', value=label)]


@given(property_type=st.text(max_size=20).filter(lambda t: t not in PROPERTY_TYPE_LABELS))
@settings(max_examples=100)
def test_unknown_property_type_is_dropped(property_type):
    """Any value other than apartment/house emits no category filter and no error."""
    envelope = build_search_input(SearchCriteria(property_type=property_type))

    assert envelope.filters == []


@given(criteria=criteria_strategy)
@settings(max_examples=200)
def test_filter_order_is_fixed(criteria):
    """Filter keys always appear in declaration order."""
    keys = [pair.key for pair in build_search_input(criteria).filters]

    assert keys == [key for key in EXPECTED_KEY_ORDER if key in keys]
    assert len(keys) == len(set(keys))


@given(criteria=criteria_strategy)
@settings(max_examples=200)
def test_build_is_deterministic(criteria):
    """Repeated builds with identical input produce identical envelopes."""
    first = build_search_input(criteria)
    second = build_search_input(criteria)

    assert first == second
    assert first is not second
    assert first.filters is not second.filters


@given(criteria=criteria_strategy)
@settings(max_examples=200)
def test_every_present_field_yields_one_string_filter(criteria):
    """Each populated field becomes exactly one filter with a string value."""
    filters = {pair.key: pair.value for pair in build_search_input(criteria).filters}

    for attribute, key in NUMERIC_FIELDS:
        value = getattr(criteria, attribute)
        if value is None:
            assert key not in filters
        else:
            assert filters[key] == stringify_value(value)

    for attribute, key in [('amenities', 'amenities'), ('floor', 'floor'), ('show_only', 'showOnly')]:
        value = getattr(criteria, attribute)
        if value is None:
            assert key not in filters
        else:
            assert filters[key] == value

    assert all(isinstance(value, str) for value in filters.values())


def test_bounds_are_not_validated():
    """A minimum above the maximum is passed through unchanged."""
    envelope = build_search_input(SearchCriteria(min_price=5_000_000, max_price=1_000_000))

    assert envelope.filters == [
        FilterPair('minListPrice', '5000000'),
        FilterPair('maxListPrice', '1000000'),
    ]


@pytest.mark.parametrize('value,expected', [
    (0, '0'),
    (2.5, '2.5'),
    (3.0, '3'),
    (3000000, '3000000'),
    (True, 'true'),
    (False, 'false'),
    ('hasFireplace', 'hasFireplace'),
])
def test_stringify_value(value, expected):
    assert stringify_value(value) == expected


@pytest.mark.parametrize('location', ['509', 'Stockholm', 'Södermalm'])
def test_location_becomes_area_reference(location):
    """Numeric IDs and free-text names are both passed as the area reference."""
    envelope = build_search_input(SearchCriteria(location=location))

    assert envelope.area_id == location
    assert envelope.filters == []


@pytest.mark.parametrize('location', [None, ''])
def test_missing_location_leaves_area_unset(location):
    assert build_search_input(SearchCriteria(location=location)).area_id is None


def test_lookup_envelope_filters_on_booli_id():
    envelope = build_lookup_input('12345')

    assert envelope.filters == [FilterPair('booliId', '12345')]
    assert envelope.area_id is None
    assert envelope.page == 1


def test_from_arguments_maps_camel_case_names():
    criteria = SearchCriteria.from_arguments({
        'location': '509',
        'minPrice': 0,
        'maxRooms': 2.5,
        'propertyType': 'house',
        'showOnly': 'priceDecrease',
        'limit': 5,
        'unknown': 'ignored',
    })

    assert criteria == SearchCriteria(
        location='509',
        min_price=0,
        max_rooms=2.5,
        property_type='house',
        show_only='priceDecrease',
    )


def test_builder_full_criteria():
    criteria = SearchCriteria(
        location='509',
        min_price=2000000,
        max_price=5000000,
        min_rooms=2.5,
        max_area=90,
        property_type='apartment',
        max_rent=4000,
        amenities='hasBalconyOrPatio',
        floor='topFloor',
    )

    envelope = SearchInputBuilder().build(criteria)

    assert envelope.area_id == '509'
    assert envelope.filters == [
        FilterPair('minListPrice', '2000000'),
        FilterPair('maxListPrice', '5000000'),
        FilterPair('minRooms', '2.5'),
        FilterPair('maxLivingArea', '90'),
        FilterPair('objectType', 'Lägenhet'),
        FilterPair('maxRent', '4000'),
        FilterPair('amenities', 'hasBalconyOrPatio'),
        FilterPair('floor', 'topFloor'),
    ]
