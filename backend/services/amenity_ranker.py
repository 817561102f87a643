"""
Amenity distance ranker - nearby places sorted by great-circle distance
"""
import logging
from typing import List, Optional

from models.amenity import AmenityPoint, AmenityType
from models.listing import Coordinates
from services.geo_service import calculate_distance, validate_origin, walking_minutes
from services.places_provider import PlacesProvider

logger = logging.getLogger(__name__)


class AmenityRanker:
    """Annotates provider candidates with distance and walking time"""

    def __init__(self, provider: PlacesProvider):
        self.provider = provider

    def find_nearby(self, lat, lng, category, radius: int, limit: Optional[int] = None) -> List[AmenityPoint]:
        """
        Candidates of `category` around (lat, lng), closest first

        Raises InvalidOrigin for missing or non-finite coordinates. Unknown
        categories yield an empty list. Ties keep the provider's order.
        """
        origin = validate_origin(lat, lng)

        try:
            category = AmenityType(category)
        except ValueError:
            logger.debug("Skipping unknown amenity category %r", category)
            return []

        candidates = self.provider.lookup_candidates(origin, category, radius)
        points = [self._rank_candidate(origin, category, place) for place in candidates]
        points.sort(key=lambda point: point.distance)

        if limit is not None:
            points = points[:max(0, limit)]
        return points

    @staticmethod
    def _rank_candidate(origin: Coordinates, category: AmenityType, place) -> AmenityPoint:
        distance = calculate_distance(
            origin.lat, origin.lng,
            place.coordinates.lat, place.coordinates.lng
        )
        return AmenityPoint(
            type=category,
            name=place.name,
            address=place.address,
            distance=round(distance),
            duration=walking_minutes(distance),
            place_id=place.place_id,
            rating=place.rating,
            user_ratings_total=place.user_ratings_total,
            coordinates=place.coordinates,
        )
