"""
Exception handlers for the gateway API.

Every failure leaves the process as ``{"error": <category>, "message": ...}``.
Tracebacks are logged, never returned.
"""
import logging
from typing import Any, Dict, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from ..core.exceptions import GatewayError, get_http_status_code
from .models import ErrorResponse

logger = logging.getLogger(__name__)

INVALID_REQUEST = "Invalid request"
INTERNAL_ERROR = "Internal server error"
HIDDEN_INTERNAL_MESSAGE = "An unexpected error occurred"


def error_body(error: str, message: str) -> Dict[str, Any]:
    """Error envelope."""
    return ErrorResponse(error=error, message=message).model_dump(by_alias=True)


def error_response(
    status_code: int,
    error: str,
    message: str,
    headers: Optional[Dict[str, str]] = None,
) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=error_body(error, message), headers=headers)


def _describe_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error.get("loc", ()) if part != "body")
        message = error.get("msg", "invalid value")
        parts.append(f"{location}: {message}" if location else message)
    return "; ".join(parts) or "Request validation failed"


async def _on_gateway_error(request: Request, exc: GatewayError) -> JSONResponse:
    status_code = get_http_status_code(exc)
    logger.warning(f"{request.method} {request.url.path} -> {status_code} [{exc.category}] {exc.message}")
    return error_response(status_code, exc.category, exc.message)


async def _on_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Malformed path, query or body input."""
    return error_response(
        status.HTTP_400_BAD_REQUEST, INVALID_REQUEST, _describe_validation_errors(exc)
    )


async def _on_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Routing errors such as unknown paths or wrong methods."""
    return error_response(
        exc.status_code,
        str(exc.detail),
        f"{request.method} {request.url.path}",
        headers=getattr(exc, "headers", None),
    )


class ExceptionHandlerRegistry:
    """Installs the gateway's exception handlers on an application.

    ``is_production`` controls whether the text of unexpected exceptions
    reaches the client.
    """

    def __init__(self, is_production: bool = True):
        self.is_production = is_production

    async def _on_unexpected(self, request: Request, exc: Exception) -> JSONResponse:
        logger.error(f"Unhandled exception on {request.method} {request.url.path}: {exc}", exc_info=True)
        message = HIDDEN_INTERNAL_MESSAGE if self.is_production else (str(exc) or type(exc).__name__)
        return error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR, message)

    def register_handlers(self, app: FastAPI) -> None:
        handlers = (
            (GatewayError, _on_gateway_error),
            (RequestValidationError, _on_validation_error),
            (StarletteHTTPException, _on_http_exception),
            (Exception, self._on_unexpected),
        )
        for exc_class, handler in handlers:
            app.add_exception_handler(exc_class, handler)


def register_exception_handlers(app: FastAPI, is_production: bool = True) -> None:
    """Register the gateway's exception handlers on ``app``."""
    ExceptionHandlerRegistry(is_production).register_handlers(app)
