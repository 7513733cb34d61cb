"""Weather endpoints."""
from fastapi import APIRouter, Depends

from ...features.weather import WeatherReport
from ...gateway import GatewayService
from ..dependencies import get_gateway
from ..errors import ERROR_RESPONSES, error_category

router = APIRouter(prefix="/api/weather", tags=["Weather"], responses=ERROR_RESPONSES)


@router.get("/{city}", response_model=WeatherReport)
async def get_weather(city: str, gateway: GatewayService = Depends(get_gateway)):
    """Current weather and forecast for a city."""
    with error_category("Failed to fetch weather data"):
        return await gateway.weather(city)
