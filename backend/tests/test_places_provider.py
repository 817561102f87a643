"""Tests for the places providers."""

import json
import random
from unittest.mock import Mock

import pytest
import requests

from models.amenity import AmenityType
from models.listing import Coordinates
from services.errors import PlacesProviderError
from services.places_provider import (
    GooglePlacesProvider,
    MockPlacesProvider,
    create_places_provider,
    load_amenity_names,
)

ORIGIN = Coordinates(lat=12.9716, lng=77.5946)


def _google_response(payload, status_code=200):
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    response.raise_for_status = Mock()
    return response


@pytest.mark.unit
def test_load_amenity_names_covers_every_category(amenity_names):
    assert set(amenity_names) == set(AmenityType)
    assert all(len(names) == 5 for names in amenity_names.values())


@pytest.mark.unit
def test_load_amenity_names_skips_unknown_categories(tmp_path):
    path = tmp_path / "names.json"
    path.write_text(json.dumps({"school": ["A School"], "casino": ["Lucky"]}))

    assert load_amenity_names(str(path)) == {AmenityType.SCHOOL: ["A School"]}


@pytest.mark.unit
def test_mock_provider_caps_candidates():
    names = {AmenityType.GYM: [f"Gym {i}" for i in range(8)]}
    provider = MockPlacesProvider(names, rng=random.Random(3))

    places = provider.lookup_candidates(ORIGIN, AmenityType.GYM, 1000)

    assert [place.place_id for place in places] == [f"mock_place_gym_{i}" for i in range(5)]
    assert provider.lookup_candidates(ORIGIN, AmenityType.PARK, 1000) == []


@pytest.mark.unit
def test_mock_provider_is_deterministic_with_seed(amenity_names):
    first = MockPlacesProvider(amenity_names, rng=random.Random(99)).lookup_candidates(ORIGIN, AmenityType.BANK, 5000)
    second = MockPlacesProvider(amenity_names, rng=random.Random(99)).lookup_candidates(ORIGIN, AmenityType.BANK, 5000)

    assert [(p.coordinates.lat, p.coordinates.lng, p.rating) for p in first] == \
        [(p.coordinates.lat, p.coordinates.lng, p.rating) for p in second]


@pytest.mark.unit
def test_mock_provider_remembers_generated_places(mock_provider):
    places = mock_provider.lookup_candidates(ORIGIN, AmenityType.HOSPITAL, 2000)

    details = mock_provider.get_place_details(places[0].place_id)

    assert details is places[0]
    assert mock_provider.get_place_details("unknown") is None


@pytest.mark.unit
def test_mock_provider_ids_are_unique_across_origins(mock_provider):
    other_origin = Coordinates(lat=19.0760, lng=72.8777)
    first = mock_provider.lookup_candidates(ORIGIN, AmenityType.SCHOOL, 1000)
    second = mock_provider.lookup_candidates(other_origin, AmenityType.SCHOOL, 1000)

    assert not {p.place_id for p in first} & {p.place_id for p in second}
    assert mock_provider.get_place_details(first[0].place_id) is first[0]
    assert mock_provider.get_place_details(second[0].place_id) is second[0]


@pytest.mark.unit
def test_google_provider_requires_api_key():
    with pytest.raises(ValueError):
        GooglePlacesProvider("")


@pytest.mark.unit
def test_google_provider_nearby_search():
    session = Mock()
    session.get.return_value = _google_response({
        "status": "OK",
        "results": [
            {
                "place_id": "ChIJ1",
                "name": "MG Road Metro",
                "vicinity": "MG Road, Bengaluru",
                "geometry": {"location": {"lat": 12.9755, "lng": 77.6066}},
                "rating": 4.3,
                "user_ratings_total": 1200,
                "types": ["subway_station"],
            }
        ],
    })
    provider = GooglePlacesProvider("test-key", timeout=5, session=session)

    places = provider.lookup_candidates(ORIGIN, AmenityType.METRO_STATION, 1500)

    assert len(places) == 1
    assert places[0].name == "MG Road Metro"
    assert places[0].coordinates.lat == 12.9755
    args, kwargs = session.get.call_args
    assert args[0].endswith("/nearbysearch/json")
    assert kwargs["params"]["type"] == "subway_station"
    assert kwargs["params"]["radius"] == 1500
    assert kwargs["params"]["key"] == "test-key"
    assert kwargs["timeout"] == 5


@pytest.mark.unit
def test_google_provider_zero_results():
    session = Mock()
    session.get.return_value = _google_response({"status": "ZERO_RESULTS", "results": []})

    assert GooglePlacesProvider("k", session=session).lookup_candidates(ORIGIN, AmenityType.GYM, 500) == []


@pytest.mark.unit
def test_google_provider_error_status():
    session = Mock()
    session.get.return_value = _google_response({"status": "REQUEST_DENIED"})

    with pytest.raises(PlacesProviderError) as exc_info:
        GooglePlacesProvider("k", session=session).lookup_candidates(ORIGIN, AmenityType.GYM, 500)

    assert exc_info.value.status_code == 502


@pytest.mark.unit
def test_google_provider_transport_error():
    session = Mock()
    session.get.side_effect = requests.exceptions.ConnectTimeout("timed out")

    with pytest.raises(PlacesProviderError):
        GooglePlacesProvider("k", session=session).lookup_candidates(ORIGIN, AmenityType.GYM, 500)


@pytest.mark.unit
def test_google_provider_place_details_not_found():
    session = Mock()
    session.get.return_value = _google_response({"status": "NOT_FOUND"})

    assert GooglePlacesProvider("k", session=session).get_place_details("missing") is None


@pytest.mark.unit
def test_create_places_provider(amenity_names):
    from config.settings import AMENITY_NAMES_FILE

    provider = create_places_provider("mock", names_file=AMENITY_NAMES_FILE, seed=1)
    assert isinstance(provider, MockPlacesProvider)
    assert provider.names == amenity_names

    assert isinstance(create_places_provider("google", api_key="k"), GooglePlacesProvider)

    with pytest.raises(ValueError):
        create_places_provider("bing")


@pytest.mark.unit
def test_google_provider_place_details_invalid_id():
    session = Mock()
    session.get.return_value = _google_response({"status": "INVALID_REQUEST"})

    assert GooglePlacesProvider("k", session=session).get_place_details("not-a-place-id") is None
