"""
Alpha Vantage equities client.

Alpha Vantage answers throttling and unknown symbols with HTTP 200 and a
``Note`` / ``Information`` / ``Error Message`` body; those are raised as
upstream errors so they are never cached as quotes.
"""
from typing import Any, Dict, Optional

import httpx

from ...core.exceptions import UpstreamError
from .base_client import UpstreamClient

ERROR_FIELDS = ("Error Message", "Note", "Information")


class QuotesClient(UpstreamClient):
    """Client for the Alpha Vantage API."""

    provider = "alphavantage"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        api_key: Optional[str],
        base_url: str = "https://www.alphavantage.co",
        timeout_seconds: float = 10.0,
    ):
        super().__init__(http_client, base_url, timeout_seconds)
        self._api_key = api_key

    async def _query(self, function: str, symbol: str) -> Dict[str, Any]:
        params = {
            "function": function,
            "symbol": symbol,
            "apikey": self._require_credential(self._api_key, "ALPHAVANTAGE_API_KEY"),
        }
        return await self._get_json("/query", params=params)

    async def global_quote(self, symbol: str) -> Dict[str, Any]:
        """Fetch the latest quote for a symbol."""
        return await self._query("GLOBAL_QUOTE", symbol)

    async def daily_series(self, symbol: str) -> Dict[str, Any]:
        """Fetch the daily time series for a symbol."""
        return await self._query("TIME_SERIES_DAILY", symbol)

    def _check_payload(self, payload: Any, response: httpx.Response) -> None:
        for field in ERROR_FIELDS:
            if field in payload:
                raise UpstreamError(
                    provider=self.provider,
                    message=f"{self.provider}: {payload[field]}",
                    status_code=response.status_code,
                    details={"reason": field},
                )
