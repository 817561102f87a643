"""
Amenities router - Nearby amenities, place details and route estimates
"""
import logging
from typing import List, Optional
from fastapi import APIRouter, Depends, Query, Request

from models.amenity import RawPlace
from routers.dependencies import (
    get_amenity_cache,
    get_amenity_ranker,
    get_places_provider,
    get_repository,
)
from services.amenity_cache import AmenityCache
from services.amenity_ranker import AmenityRanker
from services.amenity_service import (
    DEFAULT_AMENITY_RESULTS,
    DEFAULT_RADIUS_M,
    MAX_AMENITY_RESULTS,
    MAX_RADIUS_M,
    MIN_RADIUS_M,
    clamp,
    collect_nearby_amenities,
    parse_amenity_types,
)
from services.errors import ListingSearchError, PlaceNotFound
from services.geo_service import build_distance_matrix
from services.listing_repository import ListingRepository
from services.places_provider import PlacesProvider
from services.stats_service import get_local_now

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["amenities"])


def format_place_details(place: RawPlace) -> dict:
    """Place details in the Google Places shape"""
    return {
        "place_id": place.place_id,
        "name": place.name,
        "vicinity": place.address,
        "geometry": {
            "location": {
                "lat": place.coordinates.lat,
                "lng": place.coordinates.lng
            }
        },
        "rating": place.rating,
        "user_ratings_total": place.user_ratings_total,
        "types": place.types
    }


@router.get("/properties/{listing_id}/nearby-amenities")
async def get_nearby_amenities(
    request: Request,
    listing_id: str,
    types: Optional[List[str]] = Query(None),
    radius: int = DEFAULT_RADIUS_M,
    limit: int = DEFAULT_AMENITY_RESULTS,
    repository: ListingRepository = Depends(get_repository),
    ranker: AmenityRanker = Depends(get_amenity_ranker),
    cache: AmenityCache = Depends(get_amenity_cache)
):
    """Nearby amenities of a listing grouped by category"""
    listing = repository.get(listing_id)
    search_radius = clamp(radius, MIN_RADIUS_M, MAX_RADIUS_M)
    search_limit = clamp(limit, 1, MAX_AMENITY_RESULTS)
    amenity_types = parse_amenity_types(types)

    try:
        amenities = collect_nearby_amenities(
            listing,
            amenity_types,
            search_radius,
            search_limit,
            ranker,
            cache,
            ttl_ms=request.app.state.amenity_cache_ttl_ms
        )
    except Exception as e:
        logger.exception("Nearby amenities search error")
        raise ListingSearchError(
            "Internal server error during amenity search", code="AMENITY_SEARCH_ERROR"
        ) from e

    coordinates = listing.coordinates
    return {
        "property": {
            "id": listing.id,
            "title": listing.title,
            "coordinates": {"lat": coordinates.lat, "lng": coordinates.lng}
        },
        "amenities": {
            amenity_type: [amenity.to_response() for amenity in points]
            for amenity_type, points in amenities.items()
        },
        "searchRadius": search_radius,
        "timestamp": get_local_now().isoformat()
    }


@router.get("/amenities/{place_id}")
async def get_amenity_details(place_id: str, provider: PlacesProvider = Depends(get_places_provider)):
    """Details of a place returned by a previous nearby search"""
    place = provider.get_place_details(place_id)
    if place is None:
        raise PlaceNotFound("Place not found")
    return format_place_details(place)


@router.get("/routes/{listing_id}/{destination_id}")
async def calculate_route(
    listing_id: str,
    destination_id: str,
    repository: ListingRepository = Depends(get_repository),
    provider: PlacesProvider = Depends(get_places_provider)
):
    """Straight-line route estimate from a listing to a place"""
    listing = repository.get(listing_id)
    place = provider.get_place_details(destination_id)
    if place is None:
        raise PlaceNotFound("Destination not found")

    origin = listing.coordinates
    destination = place.coordinates
    estimate = build_distance_matrix(origin, [destination])[0]

    return {
        "distance": estimate["distance"],
        "duration": estimate["duration"],
        "route": [
            {"lat": origin.lat, "lng": origin.lng},
            {"lat": destination.lat, "lng": destination.lng}
        ],
        "destination": {
            "placeId": place.place_id,
            "name": place.name
        }
    }


@router.get("/cache/stats")
async def get_cache_stats(cache: AmenityCache = Depends(get_amenity_cache)):
    """Number of cached amenity lists"""
    return {
        "cacheSize": cache.size(),
        "timestamp": get_local_now().isoformat()
    }
