"""
NewsAPI client.

Top headlines by category and country. The API key travels in the
``X-Api-Key`` header.
"""
from typing import Any, Dict, Optional

import httpx

from .base_client import UpstreamClient


class NewsClient(UpstreamClient):
    """Client for the NewsAPI top-headlines endpoint."""

    provider = "newsapi"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: Optional[str],
        base_url: str = "https://newsapi.org/v2",
        timeout_seconds: float = 10.0,
    ):
        super().__init__(http_client, base_url, timeout_seconds)
        self._api_key = api_key

    async def top_headlines(self, category: str, country: str, page_size: int) -> Dict[str, Any]:
        """Fetch top headlines."""
        api_key = self._require_credential(self._api_key, "NEWS_API_KEY")
        return await self._get_json(
            "/top-headlines",
            params={"country": country, "category": category, "pageSize": page_size},
            headers={"X-Api-Key": api_key},
        )
