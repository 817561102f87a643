"""
Reusable statistics service
"""
from datetime import datetime
from typing import Dict, List
import pytz

from config.settings import LOCAL_TIMEZONE
from models.listing import Listing

LOCAL_TZ = pytz.timezone(LOCAL_TIMEZONE)

PRICE_BUCKETS = [
    ("under5M", 0, 5000000),
    ("5M-10M", 5000000, 10000000),
    ("10M-20M", 10000000, 20000000),
    ("above20M", 20000000, None),
]


def get_local_now():
    """Current time in the configured local timezone"""
    return datetime.now(LOCAL_TZ)


def _unique(values) -> List:
    seen = []
    for value in values:
        if value not in seen:
            seen.append(value)
    return seen


def get_price_ranges(listings: List[Listing]) -> Dict[str, int]:
    ranges = {}
    for name, lower, upper in PRICE_BUCKETS:
        ranges[name] = sum(
            1 for listing in listings
            if listing.price >= lower and (upper is None or listing.price < upper)
        )
    return ranges


def get_listing_stats(listings: List[Listing]) -> Dict:
    """Summary of the whole collection, sold and rented listings included"""
    total = len(listings)
    avg_price = round(sum(listing.price for listing in listings) / total) if total else 0

    return {
        "totalProperties": total,
        "availableProperties": sum(1 for listing in listings if listing.is_available()),
        "avgPrice": avg_price,
        "cities": _unique(listing.location.city for listing in listings),
        "propertyTypes": _unique(listing.property_type.value for listing in listings),
        "priceRanges": get_price_ranges(listings),
    }
