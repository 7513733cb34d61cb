"""Pytest configuration and fixtures for dashboard gateway tests."""

from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from dashboard_gateway.app import create_app
from dashboard_gateway.config import GatewaySettings
from dashboard_gateway.platform.cache import CacheThroughExecutor, CacheTTL, MemoryCacheStore

WEATHER_HOST = "weather.test"
QUOTES_HOST = "quotes.test"
GITHUB_HOST = "github.test"
NEWS_HOST = "news.test"

Handler = Callable[[httpx.Request], httpx.Response]


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeUpstream:
    """Routes httpx requests to canned provider answers and records every call."""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Handler] = {}
        self.calls: List[httpx.Request] = []

    def route(
        self,
        host: str,
        path: str,
        json: Any = None,
        status_code: int = 200,
        handler: Optional[Handler] = None,
    ) -> None:
        if handler is None:
            def handler(request, _json=json, _status=status_code):
                return httpx.Response(_status, json=_json)
        self.routes[(host, path)] = handler

    def count(self, host: Optional[str] = None, path: Optional[str] = None) -> int:
        return sum(
            1 for request in self.calls
            if (host is None or request.url.host == host)
            and (path is None or request.url.path == path)
        )

    def handle(self, request: httpx.Request) -> httpx.Response:
        self.calls.append(request)
        handler = self.routes.get((request.url.host, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"message": "Not Found"})
        return handler(request)

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handle)


def quotes_handler(failing: Iterable[str] = ()) -> Handler:
    """Alpha Vantage style handler; symbols in ``failing`` answer 500."""
    failing = set(failing)

    def handler(request: httpx.Request) -> httpx.Response:
        symbol = request.url.params["symbol"]
        if symbol in failing:
            return httpx.Response(500, json={"message": f"no data for {symbol}"})
        if request.url.params["function"] == "GLOBAL_QUOTE":
            return httpx.Response(200, json={
                "Global Quote": {"01. symbol": symbol, "05. price": "100.0000"},
            })
        return httpx.Response(200, json={
            "Meta Data": {"2. Symbol": symbol},
            "Time Series (Daily)": {"2024-03-01": {"4. close": "100.0000"}},
        })

    return handler


SAMPLE_REPOS = [
    {
        "name": "alpha",
        "full_name": "octocat/alpha",
        "html_url": "https://github.com/octocat/alpha",
        "language": "Python",
        "stargazers_count": 10,
        "forks_count": 2,
        "watchers_count": 10,
        "open_issues_count": 0,
        "size": 120,
        "updated_at": "2024-03-01T00:00:00Z",
    },
    {
        "name": "beta",
        "full_name": "octocat/beta",
        "html_url": "https://github.com/octocat/beta",
        "language": "Go",
        "stargazers_count": 5,
        "forks_count": 1,
        "watchers_count": 5,
        "open_issues_count": 3,
        "size": 80,
        "updated_at": "2024-02-01T00:00:00Z",
    },
    {
        "name": "gamma",
        "full_name": "octocat/gamma",
        "html_url": "https://github.com/octocat/gamma",
        "language": None,
        "stargazers_count": 1,
        "forks_count": 0,
        "watchers_count": 1,
        "open_issues_count": 7,
        "size": 10,
        "updated_at": "2024-01-01T00:00:00Z",
    },
]

SAMPLE_LANGUAGES = {
    "alpha": {"Python": 800, "JavaScript": 200},
    "beta": {"Python": 0, "Go": 1000},
    "gamma": {},
}


def install_providers(upstream: FakeUpstream) -> None:
    """Register happy-path answers for every provider."""
    upstream.route(WEATHER_HOST, "/weather", json={"name": "Toronto", "main": {"temp": 21.5}})
    upstream.route(WEATHER_HOST, "/forecast", json={"city": {"name": "Toronto"}, "list": [{"dt": 1}]})

    upstream.route(QUOTES_HOST, "/query", handler=quotes_handler())

    upstream.route(GITHUB_HOST, "/users/octocat", json={"login": "octocat", "public_repos": 3})
    upstream.route(GITHUB_HOST, "/users/octocat/repos", json=SAMPLE_REPOS)
    for repo in SAMPLE_REPOS:
        base = f"/repos/octocat/{repo['name']}"
        upstream.route(GITHUB_HOST, base, json=repo)
        upstream.route(GITHUB_HOST, f"{base}/commits", json=[{"sha": "abc123"}])
        upstream.route(GITHUB_HOST, f"{base}/languages", json=SAMPLE_LANGUAGES[repo["name"]])
        upstream.route(GITHUB_HOST, f"{base}/stats/participation", json={"all": [1, 0, 2]})

    upstream.route(NEWS_HOST, "/top-headlines", json={
        "status": "ok",
        "totalResults": 1,
        "articles": [{"title": "Headline"}],
    })


@pytest.fixture
def clock():
    """Fake monotonic clock."""
    return FakeClock()


@pytest.fixture
def cache_store(clock):
    """Memory cache store with a five minute TTL on the fake clock."""
    return MemoryCacheStore(default_ttl=CacheTTL(300), clock=clock)


@pytest.fixture
def executor(cache_store):
    """Cache-through executor over the test store."""
    return CacheThroughExecutor(cache_store, CacheTTL(300))


@pytest.fixture
def settings():
    """Settings pointing every provider at the fake upstream."""
    return GatewaySettings(
        _env_file=None,
        environment="test",
        openweather_api_key="weather-key",
        alphavantage_api_key="quotes-key",
        news_api_key="news-key",
        github_token=None,
        openweather_base_url=f"http://{WEATHER_HOST}",
        alphavantage_base_url=f"http://{QUOTES_HOST}",
        github_base_url=f"http://{GITHUB_HOST}",
        news_base_url=f"http://{NEWS_HOST}",
        cache_sweep_interval=0,
    )


@pytest.fixture
def upstream():
    """Fake providers with happy-path answers installed."""
    fake = FakeUpstream()
    install_providers(fake)
    return fake


@pytest_asyncio.fixture
async def client(settings, upstream):
    """HTTP client for the gateway app, with its lifespan running."""
    app = create_app(settings, transport=upstream.transport)
    async with app.router.lifespan_context(app):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
            yield ac
