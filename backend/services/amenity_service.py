"""
Nearby amenities service - cache lookup, ranking and per-category limits
"""
import logging
import math
from typing import Dict, List, Optional

from models.amenity import AMENITY_TYPE_VALUES, DEFAULT_AMENITY_TYPES, AmenityPoint, AmenityType
from models.listing import Listing
from services.amenity_cache import AmenityCache
from services.amenity_ranker import AmenityRanker
from services.errors import InvalidAmenityTypes

logger = logging.getLogger(__name__)

MIN_RADIUS_M = 500
MAX_RADIUS_M = 10000
DEFAULT_RADIUS_M = 5000
MAX_AMENITY_RESULTS = 50
DEFAULT_AMENITY_RESULTS = 10


def clamp(value: int, lower: int, upper: int) -> int:
    return min(upper, max(lower, value))


def parse_amenity_types(raw_types: Optional[List[str]]) -> List[AmenityType]:
    """
    Keep the recognised categories, in request order and without duplicates

    Nothing requested means the default categories. Unknown values are
    dropped silently; if none of the requested values is known the request
    is rejected.
    """
    if not raw_types:
        return list(DEFAULT_AMENITY_TYPES)

    amenity_types = []
    for raw in raw_types:
        # Accept comma separated values as well as repeated parameters
        for value in raw.split(","):
            value = value.strip()
            if value in AMENITY_TYPE_VALUES and AmenityType(value) not in amenity_types:
                amenity_types.append(AmenityType(value))

    if not amenity_types:
        raise InvalidAmenityTypes("At least one valid amenity type is required", AMENITY_TYPE_VALUES)
    return amenity_types


def collect_nearby_amenities(
    listing: Listing,
    amenity_types: List[AmenityType],
    radius: int,
    limit: int,
    ranker: AmenityRanker,
    cache: AmenityCache,
    ttl_ms: Optional[int] = None
) -> Dict[str, List[AmenityPoint]]:
    """Amenities per category; a failing category yields an empty list"""
    per_type_limit = math.ceil(limit / len(amenity_types))
    coordinates = listing.coordinates
    results = {}

    for amenity_type in amenity_types:
        try:
            amenities = cache.get(listing.id, amenity_type)
            if amenities is None:
                amenities = ranker.find_nearby(coordinates.lat, coordinates.lng, amenity_type, radius)
                cache.set(listing.id, amenity_type, amenities, ttl_ms)

            results[amenity_type.value] = amenities[:per_type_limit]
        except Exception:
            logger.exception("Error searching %s for property %s", amenity_type.value, listing.id)
            results[amenity_type.value] = []

    return results
