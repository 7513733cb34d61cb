"""
Dependency container.

Builds the object graph once per application: one shared HTTP client,
one cache store and executor, the provider clients and the aggregators.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import httpx

from ..config import GatewaySettings
from ..features.dashboard import DashboardAggregator
from ..features.github import GitHubAggregator
from ..features.news import NewsAggregator
from ..features.quotes import QuoteAggregator
from ..features.weather import WeatherAggregator
from ..integrations.upstream import GitHubClient, NewsClient, QuotesClient, WeatherClient
from ..platform.cache import (
    CacheThroughExecutor,
    CacheTTL,
    ExpirySweeper,
    MemoryCacheStore,
)
from .service import GatewayService

logger = logging.getLogger(__name__)


@dataclass
class GatewayContainer:
    """Long-lived components owned by one application instance."""

    settings: GatewaySettings
    http_client: httpx.AsyncClient
    cache_store: MemoryCacheStore
    executor: CacheThroughExecutor
    gateway: GatewayService
    sweeper: Optional[ExpirySweeper] = None

    async def startup(self) -> None:
        if self.sweeper is not None:
            await self.sweeper.start()

    async def shutdown(self) -> None:
        if self.sweeper is not None:
            await self.sweeper.stop()
        await self.http_client.aclose()
        await self.cache_store.flush_all()


def build_container(
    settings: GatewaySettings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> GatewayContainer:
    """Wire every component from settings.

    Args:
        settings: Gateway settings
        transport: Optional httpx transport replacing the network (tests)
    """
    timeout = settings.upstream_timeout_seconds
    http_client = httpx.AsyncClient(transport=transport, timeout=timeout)

    ttl = CacheTTL(settings.cache_ttl_default)
    cache_store = MemoryCacheStore(default_ttl=ttl)
    executor = CacheThroughExecutor(cache_store, ttl)

    weather = WeatherAggregator(
        WeatherClient(
            http_client,
            settings.reveal(settings.openweather_api_key),
            base_url=settings.openweather_base_url,
            timeout_seconds=timeout,
        ),
        executor,
    )
    quotes = QuoteAggregator(
        QuotesClient(
            http_client,
            settings.reveal(settings.alphavantage_api_key),
            base_url=settings.alphavantage_base_url,
            timeout_seconds=timeout,
        ),
        executor,
    )
    github = GitHubAggregator(
        GitHubClient(
            http_client,
            token=settings.reveal(settings.github_token),
            base_url=settings.github_base_url,
            timeout_seconds=timeout,
        ),
        executor,
        detail_limit=settings.github_detail_repo_limit,
        detail_concurrency=settings.github_detail_concurrency,
        breakdown_limit=settings.language_breakdown_limit,
    )
    news = NewsAggregator(
        NewsClient(
            http_client,
            settings.reveal(settings.news_api_key),
            base_url=settings.news_base_url,
            timeout_seconds=timeout,
        ),
        executor,
    )

    gateway = GatewayService(
        cache_store=cache_store,
        weather=weather,
        quotes=quotes,
        github=github,
        news=news,
        dashboard=DashboardAggregator(weather, github, news, quotes),
        default_city=settings.default_city,
        default_stocks=settings.default_stocks,
        default_news_category=settings.default_news_category,
        default_news_country=settings.default_news_country,
        default_news_page_size=settings.default_news_page_size,
    )

    sweeper = None
    if settings.cache_sweep_interval > 0:
        sweeper = ExpirySweeper(cache_store, settings.cache_sweep_interval)

    missing = [
        name for name, value in (
            ("OPENWEATHER_API_KEY", settings.openweather_api_key),
            ("ALPHAVANTAGE_API_KEY", settings.alphavantage_api_key),
            ("NEWS_API_KEY", settings.news_api_key),
        )
        if settings.reveal(value) is None
    ]
    if missing:
        logger.warning(f"Provider credentials not configured: {', '.join(missing)}")

    return GatewayContainer(
        settings=settings,
        http_client=http_client,
        cache_store=cache_store,
        executor=executor,
        gateway=gateway,
        sweeper=sweeper,
    )
