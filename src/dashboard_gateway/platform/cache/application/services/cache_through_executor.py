"""Cache-through executor.

ONLY compute-if-absent orchestration - returns a cached value or runs the
producer once per key, no matter how many callers ask for the same cold key
at the same time.

Following maximum separation architecture - one file = one purpose.
"""

import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, List, Union

from ...core.protocols.cache_store import CacheStore
from ...core.value_objects.aggregation_request import AggregationRequest
from ...core.value_objects.cache_key import CacheKey
from ...core.value_objects.cache_ttl import CacheTTL

logger = logging.getLogger(__name__)

Producer = Callable[[], Awaitable[Any]]


class CacheThroughExecutor:
    """Cache-through executor with per-key in-flight deduplication.

    Each cold key gets exactly one computation task. Every caller, including
    the one that started it, awaits the task through ``asyncio.shield`` so a
    cancelled caller never aborts the shared computation. The pending marker
    is dropped as soon as the computation settles; failures are handed to
    every waiter and never stored.
    """

    def __init__(self, cache_store: CacheStore, ttl: CacheTTL):
        """Initialize executor.

        Args:
            cache_store: Store holding computed results
            ttl: TTL applied to every stored result
        """
        self._cache_store = cache_store
        self._ttl = ttl
        self._pending: Dict[str, "asyncio.Future[Any]"] = {}

    @property
    def cache_store(self) -> CacheStore:
        """Underlying cache store."""
        return self._cache_store

    @property
    def ttl(self) -> CacheTTL:
        """TTL applied to stored results."""
        return self._ttl

    @property
    def pending_keys(self) -> List[str]:
        """Keys with a computation currently in flight."""
        return sorted(self._pending)

    async def compute_if_absent(self, key: Union[CacheKey, str], producer: Producer) -> Any:
        """Get cached value for key or compute, store and return it.

        Args:
            key: Cache key
            producer: Zero-argument coroutine function producing a fresh value

        Returns:
            Cached or freshly computed value
        """
        cache_key = str(key)

        value = await self._cache_store.get(cache_key)
        if value is not None:
            logger.debug(f"Cache hit: {cache_key}")
            return value

        computation = self._pending.get(cache_key)
        if computation is None:
            logger.info(f"Cache miss: {cache_key} - fetching...")
            computation = asyncio.ensure_future(self._compute(cache_key, producer))
            computation.add_done_callback(_retrieve_exception)
            self._pending[cache_key] = computation
        else:
            logger.debug(f"Cache miss: {cache_key} - joining in-flight fetch")

        return await asyncio.shield(computation)

    async def execute(self, request: AggregationRequest, producer: Producer) -> Any:
        """Compute-if-absent keyed by an aggregation request."""
        return await self.compute_if_absent(request.cache_key, producer)

    async def _compute(self, cache_key: str, producer: Producer) -> Any:
        """Run the producer and store its result."""
        try:
            # A computation for this key may have finished between our miss
            # and registering this one.
            value = await self._cache_store.peek(cache_key)
            if value is not None:
                return value

            value = await producer()
            if value is None:
                raise ValueError(f"Producer for '{cache_key}' returned no result")

            await self._cache_store.set(cache_key, value, self._ttl)
            return value

        except Exception as e:
            logger.warning(f"Computation failed for {cache_key}: {e}")
            raise

        finally:
            self._pending.pop(cache_key, None)


def _retrieve_exception(task: "asyncio.Future[Any]") -> None:
    """Mark a failure as retrieved even when every waiter was cancelled."""
    if not task.cancelled():
        task.exception()
