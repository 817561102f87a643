"""
Listing search service - filter, sort and paginate the in-memory collection
"""
import math
from typing import List, Sequence, Tuple

from models.listing import Listing
from models.search import (
    MAX_PAGE_SIZE,
    PaginationResult,
    SearchCriteria,
    SortKey,
    SortOrder,
)
from services.property_filters import apply_filters, build_filters, validate_criteria

SORT_KEYS = {
    SortKey.PRICE: lambda listing: listing.price,
    SortKey.AREA: lambda listing: listing.area,
    SortKey.LISTED_DATE: lambda listing: listing.listed_date,
}


def normalize_criteria(criteria: SearchCriteria) -> SearchCriteria:
    """Clamp page to >= 1 and page size to [1, MAX_PAGE_SIZE]"""
    page = max(1, criteria.page)
    limit = min(MAX_PAGE_SIZE, max(1, criteria.limit))
    if page == criteria.page and limit == criteria.limit:
        return criteria
    return criteria.model_copy(update={"page": page, "limit": limit})


def sort_listings(listings: Sequence[Listing], sort_by: SortKey, sort_order: SortOrder) -> List[Listing]:
    """Stable sort, listings with equal keys keep their input order in both directions"""
    return sorted(
        listings,
        key=SORT_KEYS[sort_by],
        reverse=sort_order == SortOrder.DESC
    )


def paginate(listings: Sequence[Listing], page: int, limit: int) -> Tuple[List[Listing], PaginationResult]:
    total_items = len(listings)
    total_pages = math.ceil(total_items / limit)
    offset = (page - 1) * limit

    pagination = PaginationResult(
        current_page=page,
        total_pages=total_pages,
        total_items=total_items,
        items_per_page=limit,
        has_next_page=page < total_pages,
        has_prev_page=page > 1,
    )
    return list(listings[offset:offset + limit]), pagination


def search(collection: Sequence[Listing], criteria: SearchCriteria) -> Tuple[List[Listing], PaginationResult]:
    """
    Search the collection

    Raises InvalidCriteria when no filter is given and InvalidRange when a
    price or bedroom range is inverted. Pages past the last one are empty.
    """
    validate_criteria(criteria)
    criteria = normalize_criteria(criteria)

    matching = apply_filters(collection, build_filters(criteria))
    ordered = sort_listings(matching, criteria.sort_by, criteria.sort_order)
    return paginate(ordered, criteria.page, criteria.limit)
