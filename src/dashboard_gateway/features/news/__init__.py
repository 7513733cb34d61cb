"""News feature."""

from .aggregator import NewsAggregator

__all__ = ["NewsAggregator"]
