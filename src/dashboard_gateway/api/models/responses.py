"""Response models."""
from datetime import datetime
from typing import List

from ...models import BaseSchema


class ErrorResponse(BaseSchema):
    """Error envelope."""

    error: str
    message: str


class CacheCounters(BaseSchema):
    hits: int
    misses: int
    key_count: int


class CacheStatsResponse(BaseSchema):
    """Active cache keys and counters."""

    keys: List[str]
    stats: CacheCounters


class CacheClearResponse(BaseSchema):
    message: str


class CacheSummary(BaseSchema):
    keys: int
    stats: CacheCounters


class HealthResponse(BaseSchema):
    """Liveness with a cache summary."""

    status: str
    timestamp: datetime
    cache: CacheSummary
