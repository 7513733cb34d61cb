"""HTTP status code mapping for gateway exceptions."""

from typing import Dict, Type

from .base import GatewayError
from .domain import (
    ValidationError,
    UpstreamError,
    UpstreamCredentialsError,
    DashboardUnavailableError,
)


HTTP_STATUS_MAP: Dict[Type[Exception], int] = {
    # 400 Bad Request
    ValidationError: 400,

    # 500 Internal Server Error
    UpstreamError: 500,
    UpstreamCredentialsError: 500,
    DashboardUnavailableError: 500,

    # Default for GatewayError
    GatewayError: 500,
}


def get_http_status_code(exception: Exception) -> int:
    """Get HTTP status code for exception, most specific class first.

    Args:
        exception: The exception instance

    Returns:
        HTTP status code
    """
    for exception_type in type(exception).__mro__:
        if exception_type in HTTP_STATUS_MAP:
            return HTTP_STATUS_MAP[exception_type]
    return 500
