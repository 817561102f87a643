"""
Data models for the Listing Search project
"""

from .listing import Coordinates, Listing, ListingStatus, Location, PropertyType
from .amenity import AmenityPoint, AmenityType, RawPlace
from .search import PaginationResult, SearchCriteria, SortKey, SortOrder

__all__ = [
    "Coordinates", "Listing", "ListingStatus", "Location", "PropertyType",
    "AmenityPoint", "AmenityType", "RawPlace",
    "PaginationResult", "SearchCriteria", "SortKey", "SortOrder",
]
