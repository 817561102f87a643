"""
Amenity models - Points of interest found around a listing
"""
from enum import Enum
from typing import List, Optional
from sqlmodel import SQLModel, Field

from models.listing import Coordinates


class AmenityType(str, Enum):
    SCHOOL = "school"
    HOSPITAL = "hospital"
    RESTAURANT = "restaurant"
    BANK = "bank"
    GYM = "gym"
    SHOPPING_MALL = "shopping_mall"
    PARK = "park"
    METRO_STATION = "metro_station"


AMENITY_TYPE_VALUES = [amenity_type.value for amenity_type in AmenityType]

DEFAULT_AMENITY_TYPES = [
    AmenityType.SCHOOL,
    AmenityType.HOSPITAL,
    AmenityType.RESTAURANT,
    AmenityType.BANK,
]


class RawPlace(SQLModel):
    """Candidate place as returned by a places provider, before ranking"""

    place_id: str
    name: str
    address: str
    coordinates: Coordinates
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    user_ratings_total: Optional[int] = Field(default=None, ge=0)
    types: List[str] = Field(default_factory=list)


class AmenityPoint(SQLModel):
    """Ranked amenity with its distance from the query origin"""

    type: AmenityType
    name: str
    address: str
    distance: int = Field(ge=0, description="Great-circle distance in meters")
    duration: int = Field(ge=0, description="Estimated walking time in minutes")
    place_id: str
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    user_ratings_total: Optional[int] = Field(default=None, ge=0)
    coordinates: Coordinates

    def to_response(self) -> dict:
        return {
            "type": self.type.value,
            "name": self.name,
            "address": self.address,
            "distance": self.distance,
            "duration": self.duration,
            "placeId": self.place_id,
            "rating": self.rating,
            "userRatingsTotal": self.user_ratings_total,
            "coordinates": {"lat": self.coordinates.lat, "lng": self.coordinates.lng},
        }
