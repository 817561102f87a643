"""Tests for the nearby amenities service."""

from unittest.mock import Mock

import pytest

from factories import make_listing
from models.amenity import AmenityType
from services.amenity_cache import AmenityCache
from services.amenity_ranker import AmenityRanker
from services.amenity_service import clamp, collect_nearby_amenities, parse_amenity_types
from services.errors import InvalidAmenityTypes


@pytest.mark.unit
def test_parse_amenity_types_defaults():
    assert parse_amenity_types(None) == [
        AmenityType.SCHOOL, AmenityType.HOSPITAL, AmenityType.RESTAURANT, AmenityType.BANK
    ]
    assert parse_amenity_types([]) == parse_amenity_types(None)


@pytest.mark.unit
def test_parse_amenity_types_drops_unknown_values():
    parsed = parse_amenity_types(["gym", "casino", "park,gym", " metro_station "])

    assert parsed == [AmenityType.GYM, AmenityType.PARK, AmenityType.METRO_STATION]


@pytest.mark.unit
def test_parse_amenity_types_rejects_only_unknown_values():
    with pytest.raises(InvalidAmenityTypes) as exc_info:
        parse_amenity_types(["casino", "airport"])

    response = exc_info.value.to_response()
    assert response["code"] == "INVALID_AMENITY_TYPES"
    assert "shopping_mall" in response["validTypes"]


@pytest.mark.unit
@pytest.mark.parametrize("value, expected", [(100, 500), (5000, 5000), (20000, 10000)])
def test_clamp(value, expected):
    assert clamp(value, 500, 10000) == expected


@pytest.mark.unit
def test_collect_limits_results_per_type(ranker, amenity_cache):
    listing = make_listing("bang1")

    results = collect_nearby_amenities(
        listing, [AmenityType.SCHOOL, AmenityType.BANK, AmenityType.GYM], 3000, 7, ranker, amenity_cache
    )

    # ceil(7 / 3) per type
    assert set(results) == {"school", "bank", "gym"}
    assert all(len(points) == 3 for points in results.values())
    assert amenity_cache.size() == 3


@pytest.mark.unit
def test_collect_uses_cached_results(ranker, amenity_cache):
    listing = make_listing("bang1")
    first = collect_nearby_amenities(listing, [AmenityType.PARK], 3000, 10, ranker, amenity_cache)

    spy = Mock(wraps=ranker)
    second = collect_nearby_amenities(listing, [AmenityType.PARK], 3000, 10, spy, amenity_cache)

    spy.find_nearby.assert_not_called()
    assert [point.place_id for point in second["park"]] == [point.place_id for point in first["park"]]
    assert [point.distance for point in second["park"]] == [point.distance for point in first["park"]]


@pytest.mark.unit
def test_collect_isolates_failing_category(mock_provider):
    original = mock_provider.lookup_candidates

    def flaky_lookup(origin, category, radius):
        if category == AmenityType.HOSPITAL:
            raise RuntimeError("upstream timeout")
        return original(origin, category, radius)

    mock_provider.lookup_candidates = flaky_lookup
    cache = AmenityCache()

    results = collect_nearby_amenities(
        make_listing("bang1"),
        [AmenityType.SCHOOL, AmenityType.HOSPITAL, AmenityType.BANK],
        5000, 30, AmenityRanker(mock_provider), cache
    )

    assert results["hospital"] == []
    assert len(results["school"]) == 5
    assert len(results["bank"]) == 5
    # Failed lookups are not cached
    assert cache.get("bang1", "hospital") is None
