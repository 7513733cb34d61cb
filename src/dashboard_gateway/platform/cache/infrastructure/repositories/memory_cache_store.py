"""Memory cache store.

ONLY in-memory implementation - process-wide key/value storage with
per-entry expiration and hit/miss accounting. Nothing survives a restart.

Following maximum separation architecture - one file = one purpose.
"""

import asyncio
import logging
import time
from typing import Any, Callable, Dict, List, Optional

from ...core.entities.cache_entry import CacheEntry
from ...core.value_objects.cache_ttl import CacheTTL

logger = logging.getLogger(__name__)


class MemoryCacheStore:
    """Coroutine-safe in-memory cache storage.

    Expiry is enforced on read: an entry past ``stored_at + ttl`` is dropped
    the moment it is looked up. ``cleanup_expired`` performs the same check
    for every entry and is what the periodic sweeper calls.
    """

    def __init__(
        self,
        default_ttl: Optional[CacheTTL] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize memory cache store.

        Args:
            default_ttl: TTL applied when ``set`` is called without one
            clock: Monotonic time source, injectable for tests
        """
        self._entries: Dict[str, CacheEntry] = {}
        self._default_ttl = default_ttl or CacheTTL.default()
        self._clock = clock
        self._hits = 0
        self._misses = 0
        self._lock = asyncio.Lock()

    async def get(self, key: str) -> Optional[Any]:
        """Get value by key."""
        async with self._lock:
            entry = self._live_entry(key)
            if entry is None:
                self._misses += 1
                return None
            self._hits += 1
            return entry.value

    async def peek(self, key: str) -> Optional[Any]:
        """Get value by key without counting a hit or miss."""
        async with self._lock:
            entry = self._live_entry(key)
            return entry.value if entry is not None else None

    async def set(self, key: str, value: Any, ttl: Optional[CacheTTL] = None) -> None:
        """Set cache entry, replacing any existing one."""
        entry = CacheEntry(
            key=key,
            value=value,
            stored_at=self._clock(),
            ttl=ttl or self._default_ttl,
        )
        async with self._lock:
            self._entries[key] = entry

    async def keys(self) -> List[str]:
        """Get all non-expired keys."""
        async with self._lock:
            self._cleanup_expired()
            return sorted(self._entries)

    async def flush_all(self) -> int:
        """Clear all cache entries."""
        async with self._lock:
            removed = len(self._entries)
            self._entries.clear()
        logger.info(f"Cache flushed ({removed} entries removed)")
        return removed

    async def stats(self) -> Dict[str, int]:
        """Get cache statistics."""
        async with self._lock:
            self._cleanup_expired()
            return {
                "hits": self._hits,
                "misses": self._misses,
                "keyCount": len(self._entries),
            }

    async def cleanup_expired(self) -> int:
        """Remove all expired entries."""
        async with self._lock:
            return self._cleanup_expired()

    def _live_entry(self, key: str) -> Optional[CacheEntry]:
        """Return the entry for key, dropping it if expired. Caller holds the lock."""
        entry = self._entries.get(key)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            del self._entries[key]
            return None
        return entry

    def _cleanup_expired(self) -> int:
        """Internal method to clean up expired entries. Caller holds the lock."""
        now = self._clock()
        expired_keys = [key for key, entry in self._entries.items() if entry.is_expired(now)]

        for key in expired_keys:
            del self._entries[key]

        return len(expired_keys)
