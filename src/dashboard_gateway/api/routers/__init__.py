"""API routers."""

from .cache import router as cache_router
from .dashboard import router as dashboard_router
from .github import router as github_router
from .health import router as health_router
from .news import router as news_router
from .stocks import router as stocks_router
from .weather import router as weather_router

__all__ = [
    "cache_router",
    "dashboard_router",
    "github_router",
    "health_router",
    "news_router",
    "stocks_router",
    "weather_router",
]
