"""Cache administration endpoints."""
from fastapi import APIRouter, Depends

from ...gateway import GatewayService
from ..dependencies import get_gateway
from ..errors import ERROR_RESPONSES
from ..models import CacheClearResponse, CacheStatsResponse

router = APIRouter(prefix="/api/cache", tags=["Cache"], responses=ERROR_RESPONSES)


@router.get("/stats", response_model=CacheStatsResponse)
async def get_cache_stats(gateway: GatewayService = Depends(get_gateway)):
    """Active keys with hit and miss counters."""
    return await gateway.cache_stats()


@router.post("/clear", response_model=CacheClearResponse)
async def clear_cache(gateway: GatewayService = Depends(get_gateway)):
    """Drop every cache entry."""
    await gateway.clear_cache()
    return CacheClearResponse(message="Cache cleared successfully")
