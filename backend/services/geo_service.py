"""
Reusable geolocation service
"""
from math import radians, degrees, cos, sin, asin, atan2, sqrt, isfinite
from typing import Dict, List

from models.listing import Coordinates
from services.errors import InvalidOrigin

EARTH_RADIUS_M = 6371000
WALKING_METERS_PER_MINUTE = 50


def calculate_distance(lat1: float, lng1: float, lat2: float, lng2: float) -> float:
    """Great-circle distance between two points in meters using Haversine"""
    lat1, lng1, lat2, lng2 = map(radians, [float(lat1), float(lng1), float(lat2), float(lng2)])
    dlat = lat2 - lat1
    dlng = lng2 - lng1
    a = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlng / 2) ** 2
    c = 2 * atan2(sqrt(a), sqrt(1 - a))
    return EARTH_RADIUS_M * c


def destination_point(lat: float, lng: float, bearing: float, distance: float) -> Coordinates:
    """
    Point reached travelling `distance` meters from (lat, lng) on the given bearing

    Bearing is in radians clockwise from north. The result lies exactly
    `distance` meters away along the great circle.
    """
    angular = distance / EARTH_RADIUS_M
    lat1 = radians(lat)
    lng1 = radians(lng)

    lat2 = asin(sin(lat1) * cos(angular) + cos(lat1) * sin(angular) * cos(bearing))
    lng2 = lng1 + atan2(
        sin(bearing) * sin(angular) * cos(lat1),
        cos(angular) - sin(lat1) * sin(lat2)
    )
    # Normalize longitude to [-180, 180]
    lng2 = (degrees(lng2) + 540) % 360 - 180
    return Coordinates(lat=degrees(lat2), lng=lng2)


def walking_minutes(distance: float) -> int:
    """Rough walking time estimate in minutes"""
    return round(distance / WALKING_METERS_PER_MINUTE)


def validate_origin(lat, lng) -> Coordinates:
    """Check that an origin has finite, in-range coordinates"""
    for value in (lat, lng):
        if value is None or isinstance(value, bool) or not isinstance(value, (int, float)) or not isfinite(value):
            raise InvalidOrigin("Invalid location coordinates")

    if not -90 <= lat <= 90 or not -180 <= lng <= 180:
        raise InvalidOrigin("Invalid location coordinates")

    return Coordinates(lat=lat, lng=lng)


def build_distance_matrix(origin: Coordinates, destinations: List[Coordinates]) -> List[Dict]:
    """Distance/duration pairs from one origin to several destinations"""
    results = []
    for destination in destinations:
        distance = calculate_distance(origin.lat, origin.lng, destination.lat, destination.lng)
        duration_minutes = walking_minutes(distance)
        results.append({
            "distance": {
                "text": f"{distance / 1000:.1f} km",
                "value": round(distance)
            },
            "duration": {
                "text": f"{duration_minutes} mins",
                "value": duration_minutes * 60
            },
            "status": "OK"
        })
    return results
