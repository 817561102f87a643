"""
Request dependencies - shared services owned by the application
"""
from fastapi import Request

from services.amenity_cache import AmenityCache
from services.amenity_ranker import AmenityRanker
from services.listing_repository import ListingRepository
from services.places_provider import PlacesProvider


def get_repository(request: Request) -> ListingRepository:
    return request.app.state.repository


def get_places_provider(request: Request) -> PlacesProvider:
    return request.app.state.places_provider


def get_amenity_ranker(request: Request) -> AmenityRanker:
    return request.app.state.amenity_ranker


def get_amenity_cache(request: Request) -> AmenityCache:
    return request.app.state.amenity_cache
