"""
Search schemas - Criteria and pagination for the listing search endpoint
"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel

from models.listing import PropertyType

DEFAULT_PAGE_SIZE = 12
MAX_PAGE_SIZE = 50


class SortKey(str, Enum):
    PRICE = "price"
    LISTED_DATE = "listedDate"
    AREA = "area"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SearchCriteria(BaseModel):
    """Filter, sort and page parameters for one search"""

    city: Optional[str] = None
    min_price: Optional[int] = None
    max_price: Optional[int] = None
    property_type: Optional[PropertyType] = None
    min_bedrooms: Optional[int] = None
    max_bedrooms: Optional[int] = None
    sort_by: SortKey = SortKey.LISTED_DATE
    sort_order: SortOrder = SortOrder.DESC
    page: int = 1
    limit: int = DEFAULT_PAGE_SIZE

    def has_filters(self) -> bool:
        """True when at least one positive filter was supplied"""
        return any([
            bool(self.city and self.city.strip()),
            self.min_price is not None,
            self.max_price is not None,
            self.property_type is not None,
            self.min_bedrooms is not None,
            self.max_bedrooms is not None,
        ])

    def to_response(self) -> dict:
        return {
            "city": self.city,
            "minPrice": self.min_price,
            "maxPrice": self.max_price,
            "propertyType": self.property_type.value if self.property_type else None,
            "minBedrooms": self.min_bedrooms,
            "maxBedrooms": self.max_bedrooms,
            "sortBy": self.sort_by.value,
            "sortOrder": self.sort_order.value,
            "page": self.page,
            "limit": self.limit,
        }


class PaginationResult(BaseModel):
    current_page: int
    total_pages: int
    total_items: int
    items_per_page: int
    has_next_page: bool
    has_prev_page: bool

    def to_response(self) -> dict:
        return {
            "currentPage": self.current_page,
            "totalPages": self.total_pages,
            "totalItems": self.total_items,
            "itemsPerPage": self.items_per_page,
            "hasNextPage": self.has_next_page,
            "hasPrevPage": self.has_prev_page,
        }
