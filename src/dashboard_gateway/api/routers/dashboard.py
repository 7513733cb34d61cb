"""Dashboard endpoint."""
from typing import Optional

from fastapi import APIRouter, Depends

from ...features.dashboard import DashboardResult
from ...gateway import GatewayService
from ..dependencies import get_gateway
from ..errors import ERROR_RESPONSES, error_category

router = APIRouter(prefix="/api/dashboard", tags=["Dashboard"], responses=ERROR_RESPONSES)


@router.get("/{username}", response_model=DashboardResult)
async def get_dashboard(
    username: str,
    city: Optional[str] = None,
    stocks: Optional[str] = None,
    gateway: GatewayService = Depends(get_gateway),
):
    """Weather, GitHub profile, news and stock quotes in one response.

    Sections that failed are null and listed under ``failures``.
    """
    with error_category("Failed to fetch dashboard data"):
        return await gateway.dashboard(username, city=city, stocks=stocks)
