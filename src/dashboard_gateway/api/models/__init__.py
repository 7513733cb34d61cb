"""API request and response models."""

from .requests import BatchQuotesRequest
from .responses import (
    CacheClearResponse,
    CacheCounters,
    CacheStatsResponse,
    CacheSummary,
    ErrorResponse,
    HealthResponse,
)

__all__ = [
    "BatchQuotesRequest",
    "CacheClearResponse",
    "CacheCounters",
    "CacheStatsResponse",
    "CacheSummary",
    "ErrorResponse",
    "HealthResponse",
]
