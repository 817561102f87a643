"""
Listing repository - the in-memory listing collection loaded at startup
"""
import json
import logging
from typing import Iterable, List

from models.listing import Listing
from services.errors import ListingNotFound

logger = logging.getLogger(__name__)


class ListingRepository:
    """Read-only collection of listings, kept in load order"""

    def __init__(self, listings: Iterable[Listing]):
        self._listings: List[Listing] = list(listings)
        self._by_id = {listing.id: listing for listing in self._listings}

    @classmethod
    def from_json_file(cls, path: str) -> "ListingRepository":
        with open(path, "r", encoding="utf-8") as fh:
            records = json.load(fh)

        listings = [Listing.model_validate(record) for record in records]
        logger.info("Loaded %d listings from %s", len(listings), path)
        return cls(listings)

    def all(self) -> List[Listing]:
        return list(self._listings)

    def get(self, listing_id: str) -> Listing:
        listing = self._by_id.get(listing_id)
        if listing is None:
            raise ListingNotFound("Property not found")
        return listing

    def __len__(self) -> int:
        return len(self._listings)
