"""Dashboard feature."""

from .aggregator import DashboardAggregator
from .models import DashboardResult, SectionFailure

__all__ = ["DashboardAggregator", "DashboardResult", "SectionFailure"]
