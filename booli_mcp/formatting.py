"""
Text formatting for Booli tool results.

Each populated attribute of a record becomes one line; absent attributes
produce nothing.
"""

from typing import List

from booli_mcp.models import LocationSuggestion, PropertyRecord
from booli_mcp.query_builder import stringify_value


BOOLI_BASE_URL = "https://www.booli.se"

LOCATION_USAGE_HINT = (
    "**How to use these results:**\n"
    "• Copy the ID number to use in property searches\n"
    "• Example: search_properties with location=\"509\" for Ektorp\n"
    "• Larger areas (like municipalities) will show more properties"
)

UNSUPPORTED_LOOKUP_GUIDANCE = (
    "**🚧 Property Detail Limitation**\n\n"
    "Unfortunately, direct property lookup by ID ({property_id}) is not supported by Booli's GraphQL API. "
    "The API requires location-based searches with additional filters.\n\n"
    "**🔍 Alternative Approach:**\n"
    "1. Use the `search_locations` tool to find area IDs for your target location\n"
    "2. Use the `search_properties` tool with location filters to find properties\n"
    "3. The search results include detailed information for each property\n\n"
    "**💡 Pro Tip:** Property search results already contain comprehensive details including:\n"
    "• Property specifications (rooms, area, price)\n"
    "• Location information and coordinates\n"
    "• Agency details and contact information\n"
    "• Amenities and property features\n"
    "• Direct links to view on Booli.se\n\n"
    "This approach provides the same detailed information through the search functionality."
)


def property_link(url: str) -> str:
    return f"{BOOLI_BASE_URL}{url}"


def _price_change(change: float):
    icon = '📈' if change > 0 else '📉'
    sign = '+' if change > 0 else ''
    return icon, f"{sign}{stringify_value(change)}%"


def _formatted(value) -> str:
    return value.formatted if value is not None and value.formatted else ''


def format_property_entry(index: int, record: PropertyRecord) -> str:
    """
    Format one search result entry.

    Args:
        index: 1-based position in the result list
        record: Normalized property

    Returns:
        Multi-line description; only the header line when nothing but the
        ID is known
    """
    lines = [f"{index}. {record.object_type or 'Property'} - ID: {record.id}"]

    # Address and location
    if record.street_address:
        lines.append(f"📍 Address: {record.street_address}")
    area = record.descriptive_area_name or ''
    if record.municipality_name:
        area = f"{area} ({record.municipality_name})" if area else f"({record.municipality_name})"
    if area:
        lines.append(f"🏘️  Area: {area}")

    # Characteristics
    if _formatted(record.rooms):
        lines.append(f"🏠 Rooms: {record.rooms.formatted}")
    if _formatted(record.living_area):
        lines.append(f"📐 Living Area: {record.living_area.formatted}")
    if _formatted(record.plot_area):
        lines.append(f"🌿 Plot Area: {record.plot_area.formatted}")

    # Pricing
    if _formatted(record.list_price):
        lines.append(f"💰 List Price: {record.list_price.formatted}")
    if record.list_sqm_price:
        lines.append(f"📊 Price per m²: {record.list_sqm_price}")
    if record.estimated_value:
        lines.append(f"📈 Estimated Value: {record.estimated_value}")
    if record.rent:
        lines.append(f"🏠 Monthly Rent: {record.rent}")

    # Listing lifecycle
    if record.days_active is not None:
        lines.append(f"⏰ Days Active: {record.days_active}")
    if record.published:
        lines.append(f"📅 Published: {record.published}")
    if record.tenure_form:
        lines.append(f"📋 Tenure: {record.tenure_form}")
    if record.floor is not None:
        lines.append(f"🏢 Floor: {record.floor}")
    if record.construction_year:
        lines.append(f"🏗️  Built: {record.construction_year}")
    if record.is_new_construction:
        lines.append("✨ New Construction")

    if record.amenities:
        labels = ', '.join(a.label for a in record.amenities if a.label)
        if labels:
            lines.append(f"🏖️  Amenities: {labels}")
    if record.additional_details:
        lines.append(f"ℹ️  Details: {' • '.join(record.additional_details)}")

    # Market status
    if record.price_change_percentage is not None:
        icon, change = _price_change(record.price_change_percentage)
        lines.append(f"{icon} Price Change: {change}")
    if record.bidding_open:
        lines.append("🔥 Bidding Open")
    if record.upcoming_sale:
        lines.append("⏳ Upcoming Sale")

    # Images
    if record.primary_image is not None:
        lines.append(f"📸 Image: {record.primary_image.alt or 'Available'}")
    if record.blocked_images is False:
        lines.append("🖼️  Images: Available")
    elif record.blocked_images is True:
        lines.append("🚫 Images: Blocked")

    if record.agency is not None and record.agency.name:
        lines.append(f"🏢 Agency: {record.agency.name}")
        if record.agency.url:
            lines.append(f"🔗 Agency: {record.agency.url}")
        if record.agency.thumbnail:
            lines.append("🖼️  Agency Logo: Available")

    if record.next_showing:
        lines.append(f"👁️  Next Showing: {record.next_showing}")
    if record.url:
        lines.append(f"🔗 View Property: {property_link(record.url)}")
    if record.latitude is not None and record.longitude is not None:
        lines.append(f"🗺️  Coordinates: {record.latitude}, {record.longitude}")

    return "\n   ".join(lines)


def _section(title: str, lines: List[str]) -> List[str]:
    return [f"\n**{title}**"] + lines if lines else []


def format_property_details(record: PropertyRecord) -> str:
    """
    Format the full detail block for a single property.

    Sections are emitted only when at least one of their lines is present.
    """
    overview = []
    if record.object_type:
        overview.append(f"🏷️  **Type**: {record.object_type}")
    if record.street_address:
        address = record.street_address
        if record.descriptive_area_name:
            address += f", {record.descriptive_area_name}"
        if record.municipality_name:
            address += f" ({record.municipality_name})"
        overview.append(f"📍 **Address**: {address}")
    if _formatted(record.rooms):
        overview.append(f"🚪 **Rooms**: {record.rooms.formatted}")
    if _formatted(record.living_area):
        overview.append(f"📐 **Living Area**: {record.living_area.formatted}")
    if _formatted(record.plot_area):
        overview.append(f"🌿 **Plot Area**: {record.plot_area.formatted}")
    if record.floor is not None:
        overview.append(f"🏢 **Floor**: {record.floor}")
    if record.construction_year:
        overview.append(f"🏗️  **Built**: {record.construction_year}")

    pricing = []
    if _formatted(record.list_price):
        pricing.append(f"💵 **List Price**: {record.list_price.formatted}")
    if record.list_sqm_price:
        pricing.append(f"📊 **Price per m²**: {record.list_sqm_price}")
    if record.rent:
        pricing.append(f"🏠 **Monthly Rent**: {record.rent}")
    if record.estimated_value:
        pricing.append(f"📈 **Estimated Value**: {record.estimated_value}")

    market = []
    if record.tenure_form:
        market.append(f"📋 **Tenure Form**: {record.tenure_form}")
    if record.days_active is not None:
        market.append(f"⏰ **Days Active**: {record.days_active} days")
    if record.published:
        market.append(f"📅 **Published**: {record.published}")
    if record.price_change_percentage is not None:
        icon, change = _price_change(record.price_change_percentage)
        market.append(f"{icon} **Price Change**: {change}")
    if record.bidding_open:
        market.append("🔥 **Bidding**: Open")
    if record.upcoming_sale:
        market.append("⏳ **Upcoming Sale**: Yes")
    if record.is_new_construction:
        market.append("✨ **New Construction**: Yes")
    if record.next_showing:
        market.append(f"👁️  **Next Showing**: {record.next_showing}")

    amenities = [f"• {a.label}" for a in record.amenities if a.label]

    details = [' • '.join(record.additional_details)] if record.additional_details else []

    agency = []
    if record.agency is not None and record.agency.name:
        agency.append(f"📛 **Name**: {record.agency.name}")
        if record.agency.url:
            agency.append(f"🔗 **Website**: {record.agency.url}")
        if record.agency.thumbnail:
            agency.append("🖼️  **Logo**: Available")

    media = []
    if record.primary_image is not None:
        media.append(f"🖼️  **Primary Image**: {record.primary_image.alt or 'Available'}")
        if record.primary_image.url:
            media.append(f"🔗 **Image URL**: {record.primary_image.url}")
    if record.blocked_images is False:
        media.append("✅ **Image Access**: Available")
    elif record.blocked_images is True:
        media.append("🚫 **Image Access**: Blocked")

    links = []
    if record.latitude is not None and record.longitude is not None:
        links.append(f"🗺️  **Coordinates**: {record.latitude}, {record.longitude}")
    if record.url:
        links.append(f"🔗 **View on Booli**: {property_link(record.url)}")

    lines = [f"**🏠 Property Details - ID: {record.id}**", ""]
    lines += overview
    lines += _section("💰 Pricing Information", pricing)
    lines += _section("📊 Market Status", market)
    lines += _section("🏖️  Amenities & Features", amenities)
    lines += _section("ℹ️  Additional Details", details)
    lines += _section("🏢 Real Estate Agency", agency)
    lines += _section("📸 Images & Media", media)
    lines += _section("🔗 Links", links)
    return "\n".join(lines).rstrip()


def format_location_entry(index: int, location: LocationSuggestion) -> str:
    """Format one area suggestion with its parent context and usage hint."""
    lines = [f"{index}. **{location.display_name}** (ID: {location.id})"]

    if location.parent and location.parent_display_name:
        lines.append(f"📍 Located in: {location.parent_display_name}")
    if location.parent_type_display_name:
        lines.append(f"🏛️  Type: {location.parent_type_display_name}")
    if location.parent_id:
        lines.append(f"🔗 Parent ID: {location.parent_id}")
    lines.append(f"💡 Use this ID ({location.id}) for property searches in this area")

    return "\n   ".join(lines)
