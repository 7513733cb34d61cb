"""Health endpoint."""
from fastapi import APIRouter, Depends

from ...gateway import GatewayService
from ..dependencies import get_gateway
from ..models import HealthResponse

router = APIRouter(tags=["System"])


@router.get("/health", response_model=HealthResponse)
async def health(gateway: GatewayService = Depends(get_gateway)):
    return await gateway.health()
