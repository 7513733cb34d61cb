"""Stock quote endpoints."""
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Depends

from ...features.quotes import QuoteOutcome
from ...gateway import GatewayService
from ..dependencies import get_gateway
from ..errors import ERROR_RESPONSES, error_category
from ..models import BatchQuotesRequest

router = APIRouter(prefix="/api/stocks", tags=["Stocks"], responses=ERROR_RESPONSES)


@router.post("/batch", response_model=List[QuoteOutcome])
async def get_batch_quotes(
    body: Optional[BatchQuotesRequest] = None,
    gateway: GatewayService = Depends(get_gateway),
):
    """Quotes for several symbols.

    Each symbol succeeds or fails on its own; the response is 200 as long
    as the symbol list is valid.
    """
    with error_category("Failed to fetch batch stock data"):
        return await gateway.batch_quotes(body.symbols if body else None)


@router.get("/{symbol}")
async def get_quote(symbol: str, gateway: GatewayService = Depends(get_gateway)) -> Dict[str, Any]:
    """Latest quote for a symbol."""
    with error_category("Failed to fetch stock data"):
        return await gateway.quote(symbol)


@router.get("/{symbol}/history")
async def get_quote_history(symbol: str, gateway: GatewayService = Depends(get_gateway)) -> Dict[str, Any]:
    """Daily price series for a symbol."""
    with error_category("Failed to fetch historical stock data"):
        return await gateway.quote_history(symbol)
