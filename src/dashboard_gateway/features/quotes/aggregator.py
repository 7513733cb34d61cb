"""
Quote aggregator.

Single quotes and daily histories pass the provider payload through. A
batch fans out one cached quote per symbol; a failing symbol becomes a
failure marker and never fails the batch.
"""
import logging
from typing import Any, Dict, List, Sequence

from ...core.exceptions import UpstreamError
from ...integrations.upstream import QuotesClient
from ...models import UpstreamFailure
from ...platform.cache import AggregationRequest, CacheThroughExecutor
from ..fanout import gather_settled
from .models import QuoteOutcome

logger = logging.getLogger(__name__)


def normalize_symbol(symbol: str) -> str:
    """Canonical form of a ticker symbol."""
    return symbol.strip().upper()


class QuoteAggregator:
    """Builds cached quote and history results."""

    quote_endpoint_id = "stock"
    history_endpoint_id = "stock-history"

    def __init__(self, client: QuotesClient, executor: CacheThroughExecutor):
        self._client = client
        self._executor = executor

    def quote_request(self, symbol: str) -> AggregationRequest:
        return AggregationRequest(self.quote_endpoint_id, {"symbol": symbol})

    def history_request(self, symbol: str) -> AggregationRequest:
        return AggregationRequest(self.history_endpoint_id, {"symbol": symbol})

    async def quote(self, symbol: str) -> Dict[str, Any]:
        """Latest quote payload for a symbol."""
        return await self._executor.execute(
            self.quote_request(symbol),
            lambda: self._client.global_quote(symbol),
        )

    async def history(self, symbol: str) -> Dict[str, Any]:
        """Daily series payload for a symbol."""
        return await self._executor.execute(
            self.history_request(symbol),
            lambda: self._client.daily_series(symbol),
        )

    async def batch(self, symbols: Sequence[str]) -> List[QuoteOutcome]:
        """Quote every symbol, keeping the input order.

        Each symbol is cached on its own, so a retried batch only refetches
        the symbols that failed.
        """
        results = await gather_settled(*(self.quote(symbol) for symbol in symbols))

        outcomes = []
        for symbol, result in zip(symbols, results):
            if isinstance(result, UpstreamError):
                logger.warning(f"Quote for {symbol} failed: {result.message}")
                outcomes.append(QuoteOutcome(
                    symbol=symbol,
                    status="failed",
                    failure=UpstreamFailure.from_error(result),
                ))
            elif isinstance(result, BaseException):
                raise result
            else:
                outcomes.append(QuoteOutcome(symbol=symbol, status="ok", data=result))
        return outcomes
