"""Weather aggregation result."""
from typing import Any, Dict

from ...models import BaseSchema


class WeatherReport(BaseSchema):
    """Current conditions and forecast for one city."""

    current: Dict[str, Any]
    forecast: Dict[str, Any]
