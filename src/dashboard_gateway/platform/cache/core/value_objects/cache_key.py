"""Cache key value object.

ONLY key building - immutable cache key derived canonically from an endpoint
identifier and its parameters, so identical logical requests always map to
the same entry regardless of call-site parameter ordering.

Following maximum separation architecture - one file = one purpose.
"""

from dataclasses import dataclass
from typing import Mapping, Optional
from urllib.parse import quote


# Characters left readable in parameter values; everything else
# (notably ":", "=" and "%") is percent-encoded.
_SAFE_VALUE_CHARS = " ,.-_~"


@dataclass(frozen=True)
class CacheKey:
    """Cache key value object.

    Keys have the shape ``endpoint`` or ``endpoint:name=value:name=value``
    with parameter names sorted.
    """

    value: str

    SEPARATOR = ":"

    def __post_init__(self):
        """Validate cache key on creation."""
        if not self.value or not self.value.strip():
            raise ValueError("Cache key cannot be empty")

    @classmethod
    def build(cls, endpoint_id: str, params: Optional[Mapping[str, object]] = None) -> "CacheKey":
        """Create the canonical key for an endpoint and its parameters."""
        endpoint_id = str(endpoint_id).strip()
        if not endpoint_id:
            raise ValueError("Endpoint identifier cannot be empty")
        if cls.SEPARATOR in endpoint_id:
            raise ValueError(f"Endpoint identifier cannot contain '{cls.SEPARATOR}'")

        parts = [endpoint_id]
        for name in sorted(params or {}):
            value = quote(str(params[name]), safe=_SAFE_VALUE_CHARS)
            parts.append(f"{name}={value}")
        return cls(cls.SEPARATOR.join(parts))

    def __str__(self) -> str:
        """String representation."""
        return self.value
