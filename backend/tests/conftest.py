"""Shared pytest fixtures and configuration."""

import os
import random

import pytest

# Set test environment variables before the application modules are imported
os.environ.setdefault("PLACES_PROVIDER", "mock")
os.environ.setdefault("MOCK_PLACES_SEED", "42")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from fastapi.testclient import TestClient

from config.settings import AMENITY_NAMES_FILE
from factories import make_listing
from main import create_app
from services.amenity_cache import AmenityCache
from services.amenity_ranker import AmenityRanker
from services.listing_repository import ListingRepository
from services.places_provider import MockPlacesProvider, load_amenity_names


@pytest.fixture
def sample_listings():
    """Small mixed collection across two cities."""
    return [
        make_listing("pune1", price=3000000, city="Pune", property_type="apartment",
                     bedrooms=1, area=650, listed_date="2024-01-05"),
        make_listing("pune2", price=8000000, city="Pune", property_type="villa",
                     bedrooms=3, area=2200, listed_date="2024-01-20"),
        make_listing("pune3", price=15000000, city="Pune", property_type="villa",
                     bedrooms=4, area=3100, listed_date="2024-01-12"),
        make_listing("mum1", price=25000000, city="Mumbai", property_type="penthouse",
                     bedrooms=4, area=2600, listed_date="2024-01-18", lat=19.076, lng=72.8777),
        make_listing("mum2", price=9000000, city="Navi Mumbai", property_type="villa",
                     bedrooms=3, area=1800, listed_date="2024-01-02", lat=19.033, lng=73.0297),
        make_listing("mum3", price=7000000, city="Mumbai", property_type="apartment",
                     bedrooms=2, area=950, listed_date="2024-01-25", status="sold"),
    ]


@pytest.fixture
def amenity_names():
    return load_amenity_names(AMENITY_NAMES_FILE)


@pytest.fixture
def mock_provider(amenity_names):
    """Mock places provider with a fixed seed."""
    return MockPlacesProvider(amenity_names, rng=random.Random(1234))


@pytest.fixture
def ranker(mock_provider):
    return AmenityRanker(mock_provider)


@pytest.fixture
def amenity_cache():
    return AmenityCache()


@pytest.fixture
def app(sample_listings, mock_provider, amenity_cache):
    return create_app(
        repository=ListingRepository(sample_listings),
        places_provider=mock_provider,
        amenity_cache=amenity_cache,
    )


@pytest.fixture
def client(app):
    return TestClient(app)
