"""Weather feature."""

from .aggregator import WeatherAggregator, merge_weather
from .models import WeatherReport

__all__ = ["WeatherAggregator", "WeatherReport", "merge_weather"]
