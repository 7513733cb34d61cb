"""Upstream provider clients."""

from .base_client import UpstreamClient, path_segment
from .weather_client import WeatherClient
from .quotes_client import QuotesClient
from .github_client import GitHubClient
from .news_client import NewsClient

__all__ = [
    "UpstreamClient",
    "path_segment",
    "WeatherClient",
    "QuotesClient",
    "GitHubClient",
    "NewsClient",
]
