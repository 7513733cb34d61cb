"""FastAPI dependencies."""
from fastapi import Request

from ..gateway import GatewayService


def get_gateway(request: Request) -> GatewayService:
    """Gateway service of the running application."""
    return request.app.state.container.gateway
