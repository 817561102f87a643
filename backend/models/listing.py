"""
Listing model - Represents a real estate listing in the searchable collection
"""
from datetime import date
from enum import Enum
from typing import List
from sqlmodel import SQLModel, Field


class PropertyType(str, Enum):
    APARTMENT = "apartment"
    VILLA = "villa"
    HOUSE = "house"
    STUDIO = "studio"
    PENTHOUSE = "penthouse"


class ListingStatus(str, Enum):
    AVAILABLE = "available"
    SOLD = "sold"
    RENTED = "rented"


class Coordinates(SQLModel):
    """Latitude/longitude pair in decimal degrees"""

    lat: float = Field(ge=-90, le=90, description="Latitude")
    lng: float = Field(ge=-180, le=180, description="Longitude")


class Location(SQLModel):
    """Postal location of a listing"""

    city: str = Field(description="City name like 'Bangalore'")
    state: str = Field(description="State name")
    pincode: str = Field(description="Postal code")
    address: str = Field(description="Street address")
    coordinates: Coordinates


class Listing(SQLModel):
    """Listing record, created when the collection is loaded and never mutated"""

    id: str = Field(description="Listing identifier")
    title: str
    description: str = ""

    # Listing details
    price: int = Field(ge=0, description="Asking price in rupees")
    location: Location
    property_type: PropertyType
    bedrooms: int = Field(ge=0, description="Number of bedrooms")
    bathrooms: int = Field(ge=0, description="Number of bathrooms")
    area: float = Field(ge=0, description="Floor area in square feet")
    amenities: List[str] = Field(default_factory=list)
    images: List[str] = Field(default_factory=list)

    listed_date: date = Field(description="Date the listing was published")
    status: ListingStatus = ListingStatus.AVAILABLE

    @property
    def coordinates(self) -> Coordinates:
        return self.location.coordinates

    def is_available(self) -> bool:
        return self.status == ListingStatus.AVAILABLE
