"""Cache invalidators."""

from .expiry_sweeper import ExpirySweeper

__all__ = ["ExpirySweeper"]
