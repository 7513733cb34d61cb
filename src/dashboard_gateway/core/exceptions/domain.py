"""Domain exceptions for the dashboard gateway.

ValidationError rejects bad input before any upstream call. UpstreamError
reports a failed provider call and is never cached.
"""

from typing import Any, Dict, List, Optional

from .base import GatewayError


class ValidationError(GatewayError):
    """Raised when request input is missing or malformed."""

    def __init__(self, message: str, field: Optional[str] = None, category: Optional[str] = None):
        details = {"field": field} if field else {}
        super().__init__(message, details=details, category=category or "Validation failed")
        self.field = field


class UpstreamError(GatewayError):
    """Raised when a provider call fails (non-2xx, transport failure, timeout)."""

    def __init__(
        self,
        provider: str,
        message: str,
        status_code: Optional[int] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        merged = {"provider": provider, "status_code": status_code}
        merged.update(details or {})
        super().__init__(message, details=merged)
        self.provider = provider
        self.status_code = status_code

    @classmethod
    def timeout(cls, provider: str, timeout_seconds: float) -> "UpstreamError":
        """Create error for a call that exceeded its time budget."""
        return cls(
            provider=provider,
            message=f"{provider} request timed out after {timeout_seconds}s",
            details={"timeout_seconds": timeout_seconds},
        )


class UpstreamCredentialsError(UpstreamError):
    """Raised when a provider's API key is not configured."""

    def __init__(self, provider: str, setting: str):
        super().__init__(
            provider=provider,
            message=f"{setting} is not configured",
            details={"setting": setting},
        )
        self.setting = setting


class DashboardUnavailableError(UpstreamError):
    """Raised when every dashboard section failed."""

    def __init__(self, failed_sections: List[str]):
        super().__init__(
            provider="dashboard",
            message=f"All dashboard sections failed: {', '.join(failed_sections)}",
            details={"failed_sections": failed_sections},
        )
        self.failed_sections = failed_sections
