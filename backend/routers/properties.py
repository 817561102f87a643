"""
Properties router - Listing search, statistics and detail endpoints
"""
import logging
import time
from typing import Optional
from fastapi import APIRouter, Depends, Query

from models.listing import Listing, PropertyType
from models.search import DEFAULT_PAGE_SIZE, SearchCriteria, SortKey, SortOrder
from routers.dependencies import get_repository
from services.errors import ListingSearchError
from services.listing_repository import ListingRepository
from services.property_search import normalize_criteria, search
from services.stats_service import get_listing_stats

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["properties"])


def format_listing_data(listing: Listing) -> dict:
    """Format a listing for the response"""
    location = listing.location
    return {
        "id": listing.id,
        "title": listing.title,
        "description": listing.description,
        "price": listing.price,
        "location": {
            "city": location.city,
            "state": location.state,
            "pincode": location.pincode,
            "address": location.address,
            "coordinates": {
                "lat": location.coordinates.lat,
                "lng": location.coordinates.lng
            }
        },
        "propertyType": listing.property_type.value,
        "bedrooms": listing.bedrooms,
        "bathrooms": listing.bathrooms,
        "area": listing.area,
        "amenities": listing.amenities,
        "images": listing.images,
        "listedDate": listing.listed_date.isoformat(),
        "status": listing.status.value,
        "mapsLink": f"https://www.google.com/maps?q={location.coordinates.lat},{location.coordinates.lng}"
    }


@router.get("/properties/search")
async def search_properties(
    city: Optional[str] = None,
    min_price: Optional[int] = Query(None, alias="minPrice"),
    max_price: Optional[int] = Query(None, alias="maxPrice"),
    property_type: Optional[PropertyType] = Query(None, alias="propertyType"),
    min_bedrooms: Optional[int] = Query(None, alias="minBedrooms"),
    max_bedrooms: Optional[int] = Query(None, alias="maxBedrooms"),
    sort_by: SortKey = Query(SortKey.LISTED_DATE, alias="sortBy"),
    sort_order: SortOrder = Query(SortOrder.DESC, alias="sortOrder"),
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE,
    repository: ListingRepository = Depends(get_repository)
):
    """Search listings with filters, sorting and pagination"""
    start_time = time.perf_counter()
    criteria = SearchCriteria(
        city=city,
        min_price=min_price,
        max_price=max_price,
        property_type=property_type,
        min_bedrooms=min_bedrooms,
        max_bedrooms=max_bedrooms,
        sort_by=sort_by,
        sort_order=sort_order,
        page=page,
        limit=limit
    )

    try:
        listings, pagination = search(repository.all(), criteria)
    except ListingSearchError:
        raise
    except Exception as e:
        logger.exception("Property search error")
        raise ListingSearchError("Internal server error during property search", code="SEARCH_ERROR") from e

    search_time = round((time.perf_counter() - start_time) * 1000)
    logger.info(
        "Search matched %d listings (page %d/%d) in %d ms",
        pagination.total_items, pagination.current_page, pagination.total_pages, search_time
    )

    return {
        "properties": [format_listing_data(listing) for listing in listings],
        "pagination": pagination.to_response(),
        "filters": normalize_criteria(criteria).to_response(),
        "searchTime": search_time
    }


@router.get("/properties/stats")
async def get_property_stats(repository: ListingRepository = Depends(get_repository)):
    """Collection statistics"""
    try:
        return get_listing_stats(repository.all())
    except Exception as e:
        logger.exception("Get property stats error")
        raise ListingSearchError("Internal server error", code="STATS_ERROR") from e


@router.get("/properties/{listing_id}")
async def get_property(listing_id: str, repository: ListingRepository = Depends(get_repository)):
    """Get one listing by id"""
    return format_listing_data(repository.get(listing_id))
