"""Shared models."""

from .base import BaseSchema, UpstreamFailure, utc_now

__all__ = ["BaseSchema", "UpstreamFailure", "utc_now"]
