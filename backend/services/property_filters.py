"""
Reusable listing filters

Each builder returns a predicate over a Listing, or None when the
corresponding criterion was not supplied.
"""
from typing import Callable, List, Optional

from models.listing import Listing, PropertyType
from models.search import SearchCriteria
from services.errors import InvalidCriteria, InvalidRange

ListingPredicate = Callable[[Listing], bool]


def validate_criteria(criteria: SearchCriteria):
    """Reject criteria without filters or with inverted ranges"""
    if not criteria.has_filters():
        raise InvalidCriteria("At least one search parameter is required")

    if _is_inverted(criteria.min_price, criteria.max_price):
        raise InvalidRange(
            "Minimum price cannot be greater than maximum price",
            code="INVALID_PRICE_RANGE"
        )

    if _is_inverted(criteria.min_bedrooms, criteria.max_bedrooms):
        raise InvalidRange(
            "Minimum bedrooms cannot be greater than maximum bedrooms",
            code="INVALID_BEDROOM_RANGE"
        )


def _is_inverted(lower, upper) -> bool:
    return lower is not None and upper is not None and lower > upper


def build_city_filter(city: Optional[str]) -> Optional[ListingPredicate]:
    """Case-insensitive substring match on the listing city"""
    if not city:
        return None

    needle = city.strip().lower()
    return lambda listing: needle in listing.location.city.lower()


def build_range_filter(attribute: str, minimum=None, maximum=None) -> Optional[ListingPredicate]:
    """Inclusive range filter, either bound may be open"""
    if minimum is None and maximum is None:
        return None

    def predicate(listing: Listing) -> bool:
        value = getattr(listing, attribute)
        if minimum is not None and value < minimum:
            return False
        if maximum is not None and value > maximum:
            return False
        return True

    return predicate


def build_price_filter(min_price=None, max_price=None) -> Optional[ListingPredicate]:
    return build_range_filter("price", min_price, max_price)


def build_bedrooms_filter(min_bedrooms=None, max_bedrooms=None) -> Optional[ListingPredicate]:
    return build_range_filter("bedrooms", min_bedrooms, max_bedrooms)


def build_property_type_filter(property_type: Optional[PropertyType]) -> Optional[ListingPredicate]:
    if property_type is None:
        return None
    return lambda listing: listing.property_type == property_type


def available_only(listing: Listing) -> bool:
    """Sold and rented listings are never returned"""
    return listing.is_available()


def build_filters(criteria: SearchCriteria) -> List[ListingPredicate]:
    """Collect every predicate that applies to the criteria"""
    filters = [available_only]

    for built in (
        build_city_filter(criteria.city),
        build_price_filter(criteria.min_price, criteria.max_price),
        build_property_type_filter(criteria.property_type),
        build_bedrooms_filter(criteria.min_bedrooms, criteria.max_bedrooms),
    ):
        if built is not None:
            filters.append(built)

    return filters


def apply_filters(listings, filters: List[ListingPredicate]) -> List[Listing]:
    return [listing for listing in listings if all(check(listing) for check in filters)]
