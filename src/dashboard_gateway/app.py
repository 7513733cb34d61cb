"""Dashboard gateway application.

FastAPI application factory. The lifespan owns the dependency container:
the sweeper starts with the application, and the HTTP client and cache are
released on shutdown.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import httpx
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .__version__ import __version__
from .api.exception_handlers import register_exception_handlers
from .api.routers import (
    cache_router,
    dashboard_router,
    github_router,
    health_router,
    news_router,
    stocks_router,
    weather_router,
)
from .config import GatewaySettings, get_settings
from .gateway import build_container

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    container = app.state.container
    await container.startup()
    logger.info(f"{container.settings.app_name} started (cache TTL {container.executor.ttl})")

    yield

    await container.shutdown()
    logger.info(f"{container.settings.app_name} stopped")


def create_app(
    settings: Optional[GatewaySettings] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    """Create the gateway application.

    Args:
        settings: Settings to use instead of the environment
        transport: httpx transport for upstream calls, used by tests

    Returns:
        Configured FastAPI application
    """
    settings = settings or get_settings()

    app = FastAPI(
        title=settings.app_name,
        version=__version__,
        description="Cache-through aggregation gateway for dashboard data providers",
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.container = build_container(settings, transport=transport)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app, is_production=settings.is_production)

    app.include_router(health_router)
    app.include_router(weather_router)
    app.include_router(stocks_router)
    app.include_router(github_router)
    app.include_router(news_router)
    app.include_router(dashboard_router)
    app.include_router(cache_router)

    return app
