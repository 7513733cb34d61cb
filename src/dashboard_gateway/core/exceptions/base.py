"""Base exceptions for the dashboard gateway.

All gateway exceptions inherit from GatewayError and carry an error code,
details, and the stable category string reported to API clients.
"""

from typing import Any, Dict, Optional


DEFAULT_CATEGORY = "Request failed"


class GatewayError(Exception):
    """Base exception for all gateway errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        category: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        self.category = category or DEFAULT_CATEGORY
