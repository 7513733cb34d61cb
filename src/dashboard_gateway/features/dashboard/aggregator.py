"""
Dashboard aggregator.

Composes the weather, GitHub profile, news and quote aggregators. Every
section goes through its own cached entry point concurrently, so the
dashboard shares entries with the standalone endpoints. A failed section
is reported by name instead of failing the whole response.
"""
import logging
from typing import Any, Awaitable, Dict, List, Sequence

from ...core.exceptions import DashboardUnavailableError, UpstreamError
from ...models import utc_now
from ..fanout import gather_settled
from ..github import GitHubAggregator
from ..news import NewsAggregator
from ..quotes import QuoteAggregator
from ..weather import WeatherAggregator
from .models import DashboardResult, SectionFailure

logger = logging.getLogger(__name__)


class DashboardAggregator:
    """Builds the combined dashboard response."""

    def __init__(
        self,
        weather: WeatherAggregator,
        github: GitHubAggregator,
        news: NewsAggregator,
        quotes: QuoteAggregator,
    ):
        self._weather = weather
        self._github = github
        self._news = news
        self._quotes = quotes

    async def aggregate(
        self,
        username: str,
        city: str,
        symbols: Sequence[str],
        news_category: str,
        news_country: str,
        news_page_size: int,
    ) -> DashboardResult:
        """Build the dashboard for a user.

        Raises:
            DashboardUnavailableError: No section produced any data
        """
        sections: Dict[str, Awaitable[Any]] = {
            "weather": self._weather.report(city),
            "github": self._github.profile(username),
            "news": self._news.headlines(news_category, news_country, news_page_size),
            "stocks": self._quotes.batch(symbols),
        }
        results = await gather_settled(*sections.values())

        values: Dict[str, Any] = {}
        failures: List[SectionFailure] = []
        for section, result in zip(sections, results):
            if isinstance(result, UpstreamError):
                logger.warning(f"Dashboard section {section} failed: {result.message}")
                failures.append(SectionFailure(
                    section=section,
                    provider=result.provider,
                    cause=result.message,
                ))
                values[section] = None
            elif isinstance(result, BaseException):
                raise result
            else:
                values[section] = result

        if not _has_data(values):
            raise DashboardUnavailableError([failure.section for failure in failures])

        return DashboardResult(**values, failures=failures, timestamp=utc_now())


def _has_data(values: Dict[str, Any]) -> bool:
    """True when at least one section, or one stock quote, succeeded."""
    if any(values.get(section) is not None for section in ("weather", "github", "news")):
        return True
    return any(outcome.succeeded for outcome in values.get("stocks") or [])
