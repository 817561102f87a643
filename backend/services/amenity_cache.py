"""
In-memory TTL cache for nearby amenity results

Entries are keyed by (listing id, amenity category) and expire lazily: an
expired entry is removed by the read that finds it. There is no size bound
and no background sweep. One instance is created per process and shared
by the request handlers.
"""
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional, Tuple

from models.amenity import AmenityPoint, AmenityType

DEFAULT_TTL_MS = 3600000


@dataclass
class CacheEntry:
    data: List[AmenityPoint]
    timestamp: float
    ttl: int


def _now_ms() -> float:
    return time.time() * 1000


class AmenityCache:

    def __init__(self, default_ttl_ms: int = DEFAULT_TTL_MS, clock: Callable[[], float] = _now_ms):
        self.default_ttl_ms = default_ttl_ms
        self.clock = clock
        self._entries: Dict[Tuple[str, str], CacheEntry] = {}

    @staticmethod
    def _key(listing_id: str, amenity_type) -> Tuple[str, str]:
        return listing_id, AmenityType(amenity_type).value

    def get(self, listing_id: str, amenity_type) -> Optional[List[AmenityPoint]]:
        key = self._key(listing_id, amenity_type)
        entry = self._entries.get(key)
        if entry is None:
            return None

        if self.clock() - entry.timestamp > entry.ttl:
            del self._entries[key]
            return None

        return entry.data

    def set(self, listing_id: str, amenity_type, data: List[AmenityPoint], ttl: Optional[int] = None):
        key = self._key(listing_id, amenity_type)
        self._entries[key] = CacheEntry(
            data=data,
            timestamp=self.clock(),
            ttl=self.default_ttl_ms if ttl is None else ttl,
        )

    def clear(self):
        self._entries.clear()

    def size(self) -> int:
        return len(self._entries)

    def __len__(self) -> int:
        return self.size()
