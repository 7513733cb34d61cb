"""
Gateway service.

Entry point for every inbound request: validates and normalizes input,
hands it to the matching aggregator and exposes cache administration.
Input errors are raised before any upstream is contacted.
"""
import logging
from typing import Any, Dict, List, Optional

from ..core.exceptions import ValidationError
from ..features.dashboard import DashboardAggregator, DashboardResult
from ..features.github import GitHubAggregator, GitHubProfile, RepoDetails
from ..features.news import NewsAggregator
from ..features.quotes import QuoteAggregator, QuoteOutcome, normalize_symbol
from ..features.weather import WeatherAggregator, WeatherReport
from ..models import utc_now
from ..platform.cache import CacheStore

logger = logging.getLogger(__name__)

INVALID_SYMBOLS = "Invalid symbols array"
MAX_NEWS_PAGE_SIZE = 100


def _require(value: Optional[str], field: str) -> str:
    """Trimmed non-empty parameter value."""
    cleaned = (value or "").strip()
    if not cleaned:
        raise ValidationError(f"{field} is required", field=field)
    return cleaned


def parse_symbol_list(raw: str) -> List[str]:
    """Split a comma separated symbol list, dropping blanks."""
    return [normalize_symbol(part) for part in raw.split(",") if part.strip()]


def validate_symbols(symbols: Any) -> List[str]:
    """Validate a batch symbol list.

    Raises:
        ValidationError: symbols is missing, not a list, empty, or holds a
            non-string or blank entry
    """
    if not isinstance(symbols, list) or not symbols:
        raise ValidationError(
            "Please provide an array of stock symbols",
            field="symbols",
            category=INVALID_SYMBOLS,
        )
    normalized = []
    for symbol in symbols:
        if not isinstance(symbol, str) or not symbol.strip():
            raise ValidationError(
                "Stock symbols must be non-empty strings",
                field="symbols",
                category=INVALID_SYMBOLS,
            )
        normalized.append(normalize_symbol(symbol))
    return normalized


class GatewayService:
    """Maps requests onto aggregators and the cache store."""

    def __init__(
        self,
        cache_store: CacheStore,
        weather: WeatherAggregator,
        quotes: QuoteAggregator,
        github: GitHubAggregator,
        news: NewsAggregator,
        dashboard: DashboardAggregator,
        default_city: str = "Toronto",
        default_stocks: str = "AAPL,GOOGL,MSFT",
        default_news_category: str = "technology",
        default_news_country: str = "us",
        default_news_page_size: int = 10,
    ):
        self._cache_store = cache_store
        self._weather = weather
        self._quotes = quotes
        self._github = github
        self._news = news
        self._dashboard = dashboard
        self.default_city = default_city
        self.default_stocks = default_stocks
        self.default_news_category = default_news_category
        self.default_news_country = default_news_country
        self.default_news_page_size = default_news_page_size

    async def weather(self, city: str) -> WeatherReport:
        return await self._weather.report(_require(city, "city"))

    async def quote(self, symbol: str) -> Dict[str, Any]:
        return await self._quotes.quote(normalize_symbol(_require(symbol, "symbol")))

    async def quote_history(self, symbol: str) -> Dict[str, Any]:
        return await self._quotes.history(normalize_symbol(_require(symbol, "symbol")))

    async def batch_quotes(self, symbols: Any) -> List[QuoteOutcome]:
        return await self._quotes.batch(validate_symbols(symbols))

    async def github_profile(self, username: str) -> GitHubProfile:
        return await self._github.profile(_require(username, "username"))

    async def github_repo(self, username: str, repo: str) -> RepoDetails:
        return await self._github.repo_details(_require(username, "username"), _require(repo, "repo"))

    async def news(
        self,
        category: Optional[str] = None,
        country: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> Dict[str, Any]:
        category, country, page_size = self._news_params(category, country, page_size)
        return await self._news.headlines(category, country, page_size)

    async def dashboard(
        self,
        username: str,
        city: Optional[str] = None,
        stocks: Optional[str] = None,
    ) -> DashboardResult:
        """Combined dashboard; city and stocks fall back to configured defaults."""
        category, country, page_size = self._news_params(None, None, None)
        return await self._dashboard.aggregate(
            username=_require(username, "username"),
            city=(city or "").strip() or self.default_city,
            symbols=parse_symbol_list(stocks if stocks is not None else self.default_stocks),
            news_category=category,
            news_country=country,
            news_page_size=page_size,
        )

    async def cache_stats(self) -> Dict[str, Any]:
        """Active keys and hit/miss counters."""
        return {
            "keys": await self._cache_store.keys(),
            "stats": await self._cache_store.stats(),
        }

    async def clear_cache(self) -> int:
        """Drop every cache entry. Returns the number removed."""
        removed = await self._cache_store.flush_all()
        logger.info(f"Cache cleared on request ({removed} entries)")
        return removed

    async def health(self) -> Dict[str, Any]:
        """Liveness summary with cache size."""
        stats = await self._cache_store.stats()
        return {
            "status": "OK",
            "timestamp": utc_now(),
            "cache": {"keys": stats["keyCount"], "stats": stats},
        }

    def _news_params(self, category, country, page_size):
        category = (category or "").strip().lower() or self.default_news_category
        country = (country or "").strip().lower() or self.default_news_country
        if page_size is None:
            page_size = self.default_news_page_size
        if not 1 <= page_size <= MAX_NEWS_PAGE_SIZE:
            raise ValidationError(
                f"pageSize must be between 1 and {MAX_NEWS_PAGE_SIZE}",
                field="pageSize",
            )
        return category, country, page_size
