"""Gateway exception hierarchy."""

from .base import GatewayError
from .domain import (
    ValidationError,
    UpstreamError,
    UpstreamCredentialsError,
    DashboardUnavailableError,
)
from .http_mapping import HTTP_STATUS_MAP, get_http_status_code

__all__ = [
    "GatewayError",
    "ValidationError",
    "UpstreamError",
    "UpstreamCredentialsError",
    "DashboardUnavailableError",
    "HTTP_STATUS_MAP",
    "get_http_status_code",
]
