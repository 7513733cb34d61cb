"""Gateway service and dependency container."""

from .container import GatewayContainer, build_container
from .service import GatewayService, parse_symbol_list, validate_symbols

__all__ = [
    "GatewayContainer",
    "build_container",
    "GatewayService",
    "parse_symbol_list",
    "validate_symbols",
]
