"""Cache entry domain entity.

ONLY cache entry entity - a stored aggregation result with the instant it
was stored and its TTL.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass
from typing import Any

from ..value_objects.cache_ttl import CacheTTL


@dataclass(frozen=True)
class CacheEntry:
    """Cache entry domain entity.

    Owned exclusively by the cache store. The value is always a complete
    aggregation result; failures are never stored.
    """

    key: str
    value: Any
    stored_at: float
    ttl: CacheTTL

    def is_expired(self, now: float) -> bool:
        """Check if cache entry has expired based on TTL."""
        return self.ttl.is_expired(self.stored_at, now)
