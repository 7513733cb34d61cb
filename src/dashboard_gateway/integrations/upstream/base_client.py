"""
Base HTTP client for upstream data providers.

Wraps a shared httpx.AsyncClient with per-call timeouts, credential checks
and uniform error mapping. Clients hold no cache of their own.
"""
import logging
from typing import Any, Dict, Optional
from urllib.parse import quote

import httpx

from ...core.exceptions import UpstreamError, UpstreamCredentialsError

logger = logging.getLogger(__name__)


def path_segment(value: str) -> str:
    """Escape a value for use as a single URL path segment."""
    return quote(str(value), safe="")


class UpstreamClient:
    """Base class for provider clients.

    Subclasses set ``provider`` and build requests through ``_get_json``.
    Any non-2xx answer, transport failure or timeout is raised as
    ``UpstreamError``.
    """

    provider: str = "upstream"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        base_url: str,
        timeout_seconds: float = 10.0,
    ):
        """
        Initialize client.

        Args:
            http_client: Shared async HTTP client
            base_url: Provider base URL
            timeout_seconds: Time budget for each call
        """
        self._http = http_client
        self._base_url = base_url.rstrip("/")
        self._timeout_seconds = timeout_seconds

    def _require_credential(self, value: Optional[str], setting: str) -> str:
        """Return a configured credential or fail this provider's call."""
        if not value:
            raise UpstreamCredentialsError(self.provider, setting)
        return value

    def _default_headers(self) -> Dict[str, str]:
        """Headers sent with every call to this provider."""
        return {}

    async def _get_json(
        self,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
        expected: type = dict,
    ) -> Any:
        """Issue a GET request and return the parsed JSON body.

        ``expected`` is the top-level JSON type the endpoint answers with;
        any other shape, including ``null``, is an upstream error.
        """
        request_headers = {**self._default_headers(), **(headers or {})}

        try:
            response = await self._http.get(
                f"{self._base_url}{path}",
                params=params,
                headers=request_headers,
                timeout=self._timeout_seconds,
            )
        except httpx.TimeoutException as e:
            logger.warning(f"{self.provider} call {path} timed out after {self._timeout_seconds}s")
            raise UpstreamError.timeout(self.provider, self._timeout_seconds) from e
        except httpx.HTTPError as e:
            logger.warning(f"{self.provider} call {path} failed: {e.__class__.__name__}")
            raise UpstreamError(
                provider=self.provider,
                message=f"{self.provider} request failed: {e.__class__.__name__}",
            ) from e

        if not response.is_success:
            detail = self._error_detail(response)
            logger.warning(f"{self.provider} call {path} returned {response.status_code}: {detail}")
            raise UpstreamError(
                provider=self.provider,
                message=f"{self.provider} responded with status {response.status_code}: {detail}",
                status_code=response.status_code,
            )

        payload = self._parse(response, expected)
        self._check_payload(payload, response)
        return payload

    def _parse(self, response: httpx.Response, expected: type) -> Any:
        """Decode a successful response body."""
        # 202: still computing, no body yet
        if response.status_code == 202 and not response.content:
            return expected()
        try:
            payload = response.json()
        except ValueError as e:
            raise UpstreamError(
                provider=self.provider,
                message=f"{self.provider} returned a non-JSON body",
                status_code=response.status_code,
            ) from e

        if not isinstance(payload, expected):
            logger.warning(
                f"{self.provider} answered {response.url.path} with {type(payload).__name__}, "
                f"expected {expected.__name__}"
            )
            raise UpstreamError(
                provider=self.provider,
                message=f"{self.provider} returned an unexpected payload: {type(payload).__name__}",
                status_code=response.status_code,
            )
        return payload

    def _check_payload(self, payload: Any, response: httpx.Response) -> None:
        """Hook for providers that report errors inside a 2xx body."""

    @staticmethod
    def _error_detail(response: httpx.Response) -> str:
        """Extract a short human-readable reason from an error response."""
        try:
            body = response.json()
        except ValueError:
            return response.reason_phrase or "error"
        if isinstance(body, dict):
            for field in ("message", "error", "cod"):
                if body.get(field):
                    return str(body[field])
        return response.reason_phrase or "error"
