"""Aggregation request value object.

ONLY request identity - an endpoint identifier plus its string parameters,
the unit the cache-through executor memoizes.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass, field
from typing import Dict

from .cache_key import CacheKey


@dataclass(frozen=True)
class AggregationRequest:
    """Aggregation request value object."""

    endpoint_id: str
    params: Dict[str, str] = field(default_factory=dict)

    @property
    def cache_key(self) -> CacheKey:
        """Canonical cache key for this request."""
        return CacheKey.build(self.endpoint_id, self.params)
