"""
Normalization of Booli GraphQL responses.

Booli's result entries are loosely typed: nearly every field is optional or
nullable, and each entry may carry fields from both the Property and the
Listing shape. These helpers read each attribute independently so that one
missing field never discards the whole entry.
"""

from typing import Any, Dict, List, Optional

from booli_mcp.models import (
    Agency,
    Amenity,
    FormattedValue,
    LocationPage,
    LocationSuggestion,
    PropertyImage,
    PropertyRecord,
    SearchPage,
)


def dig(data: Any, *path: str) -> Optional[Any]:
    """Follow a key path through nested dicts, returning None on any gap.

    Examples:
        >>> dig({'estimate': {'price': {'formatted': '3 mkr'}}}, 'estimate', 'price', 'formatted')
        '3 mkr'
        >>> dig({'estimate': None}, 'estimate', 'price')
    """
    for key in path:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def _formatted_value(data: Any) -> Optional[FormattedValue]:
    if not isinstance(data, dict):
        return None
    value = data.get('value', data.get('raw'))
    return FormattedValue(value=value, formatted=data.get('formatted'))


def _as_list(data: Any) -> List[Any]:
    return data if isinstance(data, list) else []


def _amenities(entry: Dict[str, Any]) -> tuple:
    return tuple(
        Amenity(key=item.get('key'), label=item.get('label'))
        for item in _as_list(entry.get('amenities'))
        if isinstance(item, dict)
    )


def _additional_details(entry: Dict[str, Any]) -> tuple:
    texts = (
        dig(point, 'value', 'plainText')
        for point in _as_list(dig(entry, 'displayAttributes', 'dataPoints'))
    )
    return tuple(text for text in texts if text)


def _agency(entry: Dict[str, Any]) -> Optional[Agency]:
    agency = entry.get('agency')
    if not isinstance(agency, dict):
        return None
    return Agency(name=agency.get('name'), url=agency.get('url'), thumbnail=agency.get('thumbnail'))


def _primary_image(entry: Dict[str, Any]) -> Optional[PropertyImage]:
    image = entry.get('primaryImage')
    if not isinstance(image, dict):
        return None
    return PropertyImage(alt=image.get('alt'), url=image.get('url'))


def _optional_bool(value: Any) -> Optional[bool]:
    return value if isinstance(value, bool) else None


def _optional_number(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _string(value: Any) -> str:
    return '' if value is None else str(value)


def normalize_property(entry: Dict[str, Any]) -> PropertyRecord:
    """Build a PropertyRecord from one raw searchForSale result entry."""
    entry = entry if isinstance(entry, dict) else {}
    return PropertyRecord(
        id=_string(entry.get('id')),
        object_type=entry.get('objectType'),
        street_address=entry.get('streetAddress'),
        descriptive_area_name=entry.get('descriptiveAreaName'),
        municipality_name=dig(entry, 'location', 'region', 'municipalityName'),
        rooms=_formatted_value(entry.get('rooms')),
        living_area=_formatted_value(entry.get('livingArea')),
        plot_area=_formatted_value(entry.get('plotArea')),
        list_price=_formatted_value(entry.get('listPrice')),
        list_sqm_price=dig(entry, 'listSqmPrice', 'formatted'),
        estimated_value=dig(entry, 'estimate', 'price', 'formatted'),
        rent=dig(entry, 'rent', 'formatted'),
        tenure_form=entry.get('tenureForm'),
        construction_year=entry.get('constructionYear'),
        floor=entry.get('floor'),
        days_active=entry.get('daysActive'),
        published=entry.get('published'),
        price_change_percentage=_optional_number(entry.get('listPricePercentageDiff')),
        bidding_open=_optional_bool(entry.get('biddingOpen')),
        upcoming_sale=_optional_bool(entry.get('upcomingSale')),
        is_new_construction=_optional_bool(entry.get('isNewConstruction')),
        amenities=_amenities(entry),
        additional_details=_additional_details(entry),
        agency=_agency(entry),
        primary_image=_primary_image(entry),
        blocked_images=_optional_bool(entry.get('blockedImages')),
        next_showing=entry.get('nextShowing'),
        latitude=entry.get('latitude'),
        longitude=entry.get('longitude'),
        url=entry.get('url'),
    )


def normalize_search_result(raw: Optional[Dict[str, Any]]) -> SearchPage:
    """Normalize a raw searchForSale object.

    A null result list is treated as empty. A missing totalCount falls
    back to the number of entries returned.
    """
    raw = raw if isinstance(raw, dict) else {}
    entries = _as_list(raw.get('result'))
    total_count = raw.get('totalCount')
    if isinstance(total_count, bool) or not isinstance(total_count, int):
        total_count = len(entries)
    return SearchPage(
        total_count=total_count,
        records=[normalize_property(entry) for entry in entries],
    )


def normalize_location(entry: Dict[str, Any]) -> LocationSuggestion:
    entry = entry if isinstance(entry, dict) else {}
    return LocationSuggestion(
        id=_string(entry.get('id')),
        display_name=_string(entry.get('displayName')),
        parent=_string(entry.get('parent')),
        parent_type=_string(entry.get('parentType')),
        parent_display_name=_string(entry.get('parentDisplayName')),
        parent_type_display_name=_string(entry.get('parentTypeDisplayName')),
        parent_id=_string(entry.get('parentId')),
    )


def normalize_location_result(raw: Optional[Dict[str, Any]]) -> LocationPage:
    """Normalize a raw areaSuggestionSearch object."""
    raw = raw if isinstance(raw, dict) else {}
    suggestions = [normalize_location(entry) for entry in _as_list(raw.get('suggestions'))]
    return LocationPage(total_count=len(suggestions), suggestions=suggestions)
