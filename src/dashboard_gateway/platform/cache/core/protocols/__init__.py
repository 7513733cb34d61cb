"""Cache protocols."""

from .cache_store import CacheStore

__all__ = ["CacheStore"]
