"""Configuration for the dashboard gateway."""

from .settings import GatewaySettings, get_settings
from .logging_config import LoggingConfig

__all__ = [
    "GatewaySettings",
    "get_settings",
    "LoggingConfig",
]
