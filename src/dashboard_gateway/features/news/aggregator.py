"""News aggregator: one parameterized headline call, cached per slice."""
from typing import Any, Dict

from ...integrations.upstream import NewsClient
from ...platform.cache import AggregationRequest, CacheThroughExecutor


class NewsAggregator:
    """Builds cached headline results."""

    endpoint_id = "news"

    def __init__(self, client: NewsClient, executor: CacheThroughExecutor):
        self._client = client
        self._executor = executor

    def request(self, category: str, country: str, page_size: int) -> AggregationRequest:
        return AggregationRequest(
            self.endpoint_id,
            {"category": category, "country": country, "pageSize": str(page_size)},
        )

    async def headlines(self, category: str, country: str, page_size: int) -> Dict[str, Any]:
        """Top headlines for a category and country, from cache when fresh."""
        return await self._executor.execute(
            self.request(category, country, page_size),
            lambda: self._client.top_headlines(category, country, page_size),
        )
