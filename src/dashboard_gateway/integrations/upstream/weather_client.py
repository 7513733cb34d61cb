"""
OpenWeatherMap client.

Current conditions and the 5 day / 3 hour forecast for a city, in metric
units. The API key travels in the ``appid`` query parameter.
"""
from typing import Any, Dict, Optional

import httpx

from .base_client import UpstreamClient


class WeatherClient(UpstreamClient):
    """Client for the OpenWeatherMap API."""

    provider = "openweather"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: Optional[str],
        base_url: str = "https://api.openweathermap.org/data/2.5",
        timeout_seconds: float = 10.0,
    ):
        super().__init__(http_client, base_url, timeout_seconds)
        self._api_key = api_key

    def _city_params(self, city: str) -> Dict[str, str]:
        return {
            "q": city,
            "appid": self._require_credential(self._api_key, "OPENWEATHER_API_KEY"),
            "units": "metric",
        }

    async def current(self, city: str) -> Dict[str, Any]:
        """Fetch current weather for a city."""
        return await self._get_json("/weather", params=self._city_params(city))

    async def forecast(self, city: str) -> Dict[str, Any]:
        """Fetch forecast for a city."""
        return await self._get_json("/forecast", params=self._city_params(city))
