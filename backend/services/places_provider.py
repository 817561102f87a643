"""
Places providers - candidate generation for the nearby amenity search

MockPlacesProvider synthesizes candidates around the origin from a static
name table. GooglePlacesProvider asks the Google Places web service.
"""
import json
import logging
import math
import random
from abc import ABC, abstractmethod
from collections import defaultdict
from itertools import count
from typing import Dict, List, Optional

import requests

from models.amenity import AmenityType, RawPlace
from models.listing import Coordinates
from services.errors import PlacesProviderError
from services.geo_service import destination_point

logger = logging.getLogger(__name__)

MAX_CANDIDATES_PER_TYPE = 5


class PlacesProvider(ABC):
    """Source of raw candidate places around a point"""

    @abstractmethod
    def lookup_candidates(self, origin: Coordinates, category: AmenityType, radius: int) -> List[RawPlace]:
        ...

    @abstractmethod
    def get_place_details(self, place_id: str) -> Optional[RawPlace]:
        ...


def load_amenity_names(path: str) -> Dict[AmenityType, List[str]]:
    """Read the static candidate-name table, ignoring unknown categories"""
    with open(path, "r", encoding="utf-8") as fh:
        raw = json.load(fh)

    names = {}
    for key, values in raw.items():
        try:
            names[AmenityType(key)] = list(values)
        except ValueError:
            logger.warning("Ignoring unknown amenity category in %s: %s", path, key)
    return names


class MockPlacesProvider(PlacesProvider):
    """Synthetic places with a random bearing and distance inside the radius"""

    def __init__(self, names: Dict[AmenityType, List[str]], rng: Optional[random.Random] = None,
                 max_candidates: int = MAX_CANDIDATES_PER_TYPE):
        self.names = names
        self.rng = rng or random.Random()
        self.max_candidates = max_candidates
        self.generated: Dict[str, RawPlace] = {}
        # One id per generated place across all origins
        self._sequence = defaultdict(count)

    def lookup_candidates(self, origin: Coordinates, category: AmenityType, radius: int) -> List[RawPlace]:
        candidates = []
        for name in self.names.get(category, [])[:self.max_candidates]:
            # Random radius is not area-uniform, points cluster toward the origin
            bearing = self.rng.random() * 2 * math.pi
            distance = self.rng.random() * radius
            point = destination_point(origin.lat, origin.lng, bearing, distance)

            place = RawPlace(
                place_id=f"mock_place_{category.value}_{next(self._sequence[category])}",
                name=name,
                address=f"{name} Address, Near Property",
                coordinates=point,
                rating=round(self.rng.uniform(3.0, 5.0), 1),
                user_ratings_total=self.rng.randint(50, 1049),
                types=[category.value],
            )
            self.generated[place.place_id] = place
            candidates.append(place)

        return candidates

    def get_place_details(self, place_id: str) -> Optional[RawPlace]:
        return self.generated.get(place_id)


class GooglePlacesProvider(PlacesProvider):
    """Google Places Nearby Search and Place Details"""

    BASE_URL = "https://maps.googleapis.com/maps/api/place"

    # Categories whose Google place type differs from ours
    GOOGLE_TYPES = {
        AmenityType.METRO_STATION: "subway_station",
    }

    def __init__(self, api_key: str, timeout: float = 10, session: Optional[requests.Session] = None):
        if not api_key:
            raise ValueError("GOOGLE_MAPS_API_KEY is required for the Google places provider")
        self.api_key = api_key
        self.timeout = timeout
        self.session = session or requests.Session()

    def _get(self, endpoint: str, params: dict, empty_statuses=("ZERO_RESULTS", "NOT_FOUND")) -> dict:
        params = dict(params, key=self.api_key)
        url = f"{self.BASE_URL}/{endpoint}/json"
        try:
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
            data = response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            raise PlacesProviderError(f"Places request failed: {e}") from e

        status = data.get("status")
        if status != "OK" and status not in empty_statuses:
            raise PlacesProviderError(f"Places API error: {status}")
        return data

    @staticmethod
    def _to_raw_place(result: dict) -> RawPlace:
        location = result["geometry"]["location"]
        return RawPlace(
            place_id=result["place_id"],
            name=result.get("name", ""),
            address=result.get("vicinity") or result.get("formatted_address", ""),
            coordinates=Coordinates(lat=location["lat"], lng=location["lng"]),
            rating=result.get("rating"),
            user_ratings_total=result.get("user_ratings_total"),
            types=result.get("types", []),
        )

    def lookup_candidates(self, origin: Coordinates, category: AmenityType, radius: int) -> List[RawPlace]:
        data = self._get("nearbysearch", {
            "location": f"{origin.lat},{origin.lng}",
            "radius": radius,
            "type": self.GOOGLE_TYPES.get(category, category.value),
        })
        results = data.get("results", [])[:MAX_CANDIDATES_PER_TYPE]
        return [self._to_raw_place(result) for result in results]

    def get_place_details(self, place_id: str) -> Optional[RawPlace]:
        data = self._get("details", {
            "place_id": place_id,
            "fields": "place_id,name,vicinity,formatted_address,geometry,rating,user_ratings_total,types",
        }, empty_statuses=("NOT_FOUND", "INVALID_REQUEST"))
        if data.get("status") != "OK" or not data.get("result"):
            return None
        return self._to_raw_place(data["result"])


def create_places_provider(name: str, api_key: Optional[str] = None, names_file: Optional[str] = None,
                           timeout: float = 10, seed: Optional[int] = None) -> PlacesProvider:
    """Build the provider selected by configuration"""
    if name == "google":
        logger.info("Using Google places provider")
        return GooglePlacesProvider(api_key, timeout=timeout)

    if name != "mock":
        raise ValueError(f"Unknown places provider: {name}")

    logger.info("Using mock places provider")
    names = load_amenity_names(names_file) if names_file else {}
    return MockPlacesProvider(names, rng=random.Random(seed))
