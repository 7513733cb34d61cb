"""Cache value objects."""

from .cache_key import CacheKey
from .cache_ttl import CacheTTL
from .aggregation_request import AggregationRequest

__all__ = ["CacheKey", "CacheTTL", "AggregationRequest"]
