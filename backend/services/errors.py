"""
Error types surfaced by the listing search API
"""
from typing import Optional


class ListingSearchError(Exception):
    """Base error with a machine readable code and the HTTP status to answer with"""

    code = "INTERNAL_ERROR"
    status_code = 500

    def __init__(self, message: str, code: Optional[str] = None):
        super().__init__(message)
        self.message = message
        if code:
            self.code = code

    def to_response(self) -> dict:
        return {"error": self.message, "code": self.code}


class InvalidCriteria(ListingSearchError):
    """No filter was supplied for a search"""

    code = "MISSING_SEARCH_CRITERIA"
    status_code = 400


class InvalidRange(ListingSearchError):
    """Lower bound of a range is greater than its upper bound"""

    code = "INVALID_RANGE"
    status_code = 400


class InvalidOrigin(ListingSearchError):
    code = "INVALID_ORIGIN"
    status_code = 400


class InvalidAmenityTypes(ListingSearchError):
    code = "INVALID_AMENITY_TYPES"
    status_code = 400

    def __init__(self, message: str, valid_types: list):
        super().__init__(message)
        self.valid_types = valid_types

    def to_response(self) -> dict:
        response = super().to_response()
        response["validTypes"] = self.valid_types
        return response


class ListingNotFound(ListingSearchError):
    code = "PROPERTY_NOT_FOUND"
    status_code = 404


class PlaceNotFound(ListingSearchError):
    code = "PLACE_NOT_FOUND"
    status_code = 404


class PlacesProviderError(ListingSearchError):
    """Upstream places service failed or answered with an error status"""

    code = "PLACES_PROVIDER_ERROR"
    status_code = 502
