"""
Weather aggregator.

Current conditions and forecast are fetched in parallel; a report is only
meaningful with both halves, so either failure fails the aggregation.
"""
import logging
from typing import Any, Dict

from ...integrations.upstream import WeatherClient
from ...platform.cache import AggregationRequest, CacheThroughExecutor
from ..fanout import gather_all
from .models import WeatherReport

logger = logging.getLogger(__name__)


def merge_weather(current: Dict[str, Any], forecast: Dict[str, Any]) -> WeatherReport:
    """Merge the two provider payloads into one report."""
    return WeatherReport(current=current, forecast=forecast)


class WeatherAggregator:
    """Builds cached weather reports."""

    endpoint_id = "weather"

    def __init__(self, client: WeatherClient, executor: CacheThroughExecutor):
        self._client = client
        self._executor = executor

    def request(self, city: str) -> AggregationRequest:
        return AggregationRequest(self.endpoint_id, {"city": city})

    async def report(self, city: str) -> WeatherReport:
        """Get the weather report for a city, from cache when fresh."""
        return await self._executor.execute(self.request(city), lambda: self.aggregate(city))

    async def aggregate(self, city: str) -> WeatherReport:
        """Fetch and merge a fresh report."""
        current, forecast = await gather_all(
            self._client.current(city),
            self._client.forecast(city),
        )
        logger.debug(f"Weather fetched for {city}")
        return merge_weather(current, forecast)
