"""Platform cache module.

In-memory cache store with per-entry expiration, canonical cache keys and
the cache-through executor that fronts every aggregation.
"""

from .core.entities import CacheEntry
from .core.value_objects import CacheKey, CacheTTL, AggregationRequest
from .core.protocols import CacheStore
from .infrastructure.repositories import MemoryCacheStore
from .infrastructure.invalidators import ExpirySweeper
from .application.services import CacheThroughExecutor, Producer

__all__ = [
    "CacheEntry",
    "CacheKey",
    "CacheTTL",
    "AggregationRequest",
    "CacheStore",
    "MemoryCacheStore",
    "ExpirySweeper",
    "CacheThroughExecutor",
    "Producer",
]
