"""Quotes feature."""

from .aggregator import QuoteAggregator, normalize_symbol
from .models import QuoteOutcome

__all__ = ["QuoteAggregator", "QuoteOutcome", "normalize_symbol"]
