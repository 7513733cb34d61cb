"""Cache application services."""

from .cache_through_executor import CacheThroughExecutor, Producer

__all__ = ["CacheThroughExecutor", "Producer"]
