"""News endpoints."""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Query

from ...gateway import GatewayService
from ..dependencies import get_gateway
from ..errors import ERROR_RESPONSES, error_category

router = APIRouter(prefix="/api/news", tags=["News"], responses=ERROR_RESPONSES)


@router.get("")
async def get_news(
    category: Optional[str] = None,
    country: Optional[str] = None,
    page_size: Optional[int] = Query(default=None, alias="pageSize"),
    gateway: GatewayService = Depends(get_gateway),
) -> Dict[str, Any]:
    """Top headlines; omitted parameters use the configured defaults."""
    with error_category("Failed to fetch news data"):
        return await gateway.news(category, country, page_size)
