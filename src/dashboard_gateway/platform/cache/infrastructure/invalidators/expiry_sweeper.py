"""Expiry sweeper.

ONLY periodic cleanup - background task that drops expired entries from
the cache store so idle keys do not linger until their next lookup.

Following maximum separation architecture - one file = one purpose.
"""

import asyncio
import logging
from typing import Optional

from ...core.protocols.cache_store import CacheStore

logger = logging.getLogger(__name__)


class ExpirySweeper:
    """Background sweeper for expired cache entries."""

    def __init__(self, cache_store: CacheStore, interval_seconds: float):
        """Initialize with cache store.

        Args:
            cache_store: Store to sweep
            interval_seconds: Delay between sweeps
        """
        if interval_seconds <= 0:
            raise ValueError("Sweep interval must be positive")
        self._cache_store = cache_store
        self._interval = interval_seconds
        self._background_task: Optional[asyncio.Task] = None

    @property
    def is_running(self) -> bool:
        """Whether the background task is active."""
        return self._background_task is not None and not self._background_task.done()

    async def start(self) -> None:
        """Start the background sweep task."""
        if not self.is_running:
            self._background_task = asyncio.create_task(self._sweep_loop())
            logger.info(f"Cache expiry sweeper started (interval={self._interval}s)")

    async def stop(self) -> None:
        """Stop the background sweep task."""
        if self._background_task:
            self._background_task.cancel()
            try:
                await self._background_task
            except asyncio.CancelledError:
                pass
            self._background_task = None
            logger.info("Cache expiry sweeper stopped")

    async def sweep_once(self) -> int:
        """Run a single sweep. Returns number of entries removed."""
        removed = await self._cache_store.cleanup_expired()
        if removed:
            logger.debug(f"Swept {removed} expired cache entries")
        return removed

    async def _sweep_loop(self) -> None:
        """Sweep forever until cancelled."""
        while True:
            await asyncio.sleep(self._interval)
            try:
                await self.sweep_once()
            except Exception as e:
                logger.error(f"Cache expiry sweep failed: {e}", exc_info=True)
