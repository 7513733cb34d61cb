"""GitHub feature."""

from .aggregator import GitHubAggregator, merge_profile
from .derivations import classify_health, language_breakdown, language_totals
from .models import DetailedRepo, GitHubProfile, LanguageShare, RepoDetails, RepoHealth

__all__ = [
    "GitHubAggregator",
    "merge_profile",
    "classify_health",
    "language_breakdown",
    "language_totals",
    "DetailedRepo",
    "GitHubProfile",
    "LanguageShare",
    "RepoDetails",
    "RepoHealth",
]
