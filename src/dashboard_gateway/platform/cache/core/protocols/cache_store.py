"""Cache store protocol.

ONLY cache storage contract - defines the interface for process-wide
key/value storage with per-entry expiration.

Following maximum separation architecture - one file = one purpose.
"""

from typing import Any, Dict, List, Optional, Protocol, runtime_checkable

from ..value_objects.cache_ttl import CacheTTL


@runtime_checkable
class CacheStore(Protocol):
    """Cache store protocol."""

    async def get(self, key: str) -> Optional[Any]:
        """Get value by key, counting a hit or a miss.

        Returns None if key doesn't exist or has expired.
        """
        ...

    async def peek(self, key: str) -> Optional[Any]:
        """Get value by key without touching hit/miss counters."""
        ...

    async def set(self, key: str, value: Any, ttl: Optional[CacheTTL] = None) -> None:
        """Store value unconditionally, resetting its expiry."""
        ...

    async def keys(self) -> List[str]:
        """List active (non-expired) keys."""
        ...

    async def flush_all(self) -> int:
        """Remove every entry. Returns number of entries removed."""
        ...

    async def stats(self) -> Dict[str, int]:
        """Get ``{hits, misses, keyCount}``."""
        ...

    async def cleanup_expired(self) -> int:
        """Remove expired entries. Returns number of entries removed."""
        ...
