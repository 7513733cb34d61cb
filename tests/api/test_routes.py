"""End-to-end tests for the gateway routes over a fake upstream."""

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from conftest import GITHUB_HOST, NEWS_HOST, QUOTES_HOST, WEATHER_HOST, quotes_handler
from dashboard_gateway.app import create_app


class TestHealth:

    @pytest.mark.asyncio
    async def test_health_reports_cache_summary(self, client):
        response = await client.get("/health")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "OK"
        assert body["cache"]["keys"] == 0
        assert body["cache"]["stats"] == {"hits": 0, "misses": 0, "keyCount": 0}
        assert "timestamp" in body


class TestWeatherRoutes:

    @pytest.mark.asyncio
    async def test_weather_report(self, client, upstream):
        response = await client.get("/api/weather/Toronto")

        assert response.status_code == 200
        assert response.json() == {
            "current": {"name": "Toronto", "main": {"temp": 21.5}},
            "forecast": {"city": {"name": "Toronto"}, "list": [{"dt": 1}]},
        }
        assert upstream.count(WEATHER_HOST) == 2

    @pytest.mark.asyncio
    async def test_repeat_request_hits_cache(self, client, upstream):
        await client.get("/api/weather/Toronto")
        await client.get("/api/weather/Toronto")

        assert upstream.count(WEATHER_HOST) == 2
        stats = (await client.get("/api/cache/stats")).json()
        assert stats["keys"] == ["weather:city=Toronto"]
        assert stats["stats"]["hits"] == 1

    @pytest.mark.asyncio
    async def test_upstream_failure_uses_route_category(self, client, upstream):
        upstream.route(WEATHER_HOST, "/forecast", json={"cod": 401, "message": "Invalid API key"}, status_code=401)

        response = await client.get("/api/weather/Toronto")

        assert response.status_code == 500
        body = response.json()
        assert body["error"] == "Failed to fetch weather data"
        assert "Invalid API key" in body["message"]
        assert (await client.get("/api/cache/stats")).json()["keys"] == []


class TestStockRoutes:

    @pytest.mark.asyncio
    async def test_quote_symbol_is_normalized(self, client, upstream):
        response = await client.get("/api/stocks/aapl")

        assert response.status_code == 200
        assert response.json()["Global Quote"]["01. symbol"] == "AAPL"
        await client.get("/api/stocks/AAPL")
        assert upstream.count(QUOTES_HOST) == 1

    @pytest.mark.asyncio
    async def test_history(self, client):
        response = await client.get("/api/stocks/MSFT/history")

        assert response.status_code == 200
        assert response.json()["Meta Data"]["2. Symbol"] == "MSFT"

    @pytest.mark.asyncio
    async def test_quote_failure(self, client, upstream):
        upstream.route(QUOTES_HOST, "/query", handler=quotes_handler(failing={"XXX"}))

        response = await client.get("/api/stocks/XXX")

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to fetch stock data"

    @pytest.mark.asyncio
    async def test_history_failure(self, client, upstream):
        upstream.route(QUOTES_HOST, "/query", json={"Note": "Thank you for using Alpha Vantage"})

        response = await client.get("/api/stocks/AAPL/history")

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to fetch historical stock data"

    @pytest.mark.asyncio
    async def test_batch_partial_failure_is_still_success(self, client, upstream):
        upstream.route(QUOTES_HOST, "/query", handler=quotes_handler(failing={"BBB"}))

        response = await client.post("/api/stocks/batch", json={"symbols": ["AAA", "BBB"]})

        assert response.status_code == 200
        first, second = response.json()
        assert first["symbol"] == "AAA"
        assert first["status"] == "ok"
        assert first["data"]["Global Quote"]["01. symbol"] == "AAA"
        assert second["symbol"] == "BBB"
        assert second["status"] == "failed"
        assert second["failure"]["provider"] == "alphavantage"

    @pytest.mark.asyncio
    async def test_batch_isolates_malformed_quote_and_does_not_cache_it(self, client, upstream):
        healthy = quotes_handler()

        def handler(request):
            if request.url.params["symbol"] == "BBB":
                return httpx.Response(200, json=["unexpected"])
            return healthy(request)

        upstream.route(QUOTES_HOST, "/query", handler=handler)

        response = await client.post("/api/stocks/batch", json={"symbols": ["AAA", "BBB"]})

        assert response.status_code == 200
        first, second = response.json()
        assert first["status"] == "ok"
        assert second["symbol"] == "BBB"
        assert second["status"] == "failed"
        assert second["failure"]["provider"] == "alphavantage"
        assert (await client.get("/api/cache/stats")).json()["keys"] == ["stock:symbol=AAA"]

        upstream.route(QUOTES_HOST, "/query", handler=healthy)
        retried = await client.post("/api/stocks/batch", json={"symbols": ["AAA", "BBB"]})

        assert [quote["status"] for quote in retried.json()] == ["ok", "ok"]
        assert upstream.count(QUOTES_HOST) == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize("body", [{"symbols": []}, {"symbols": "AAPL"}, {}, {"tickers": ["AAPL"]}])
    async def test_batch_validation_rejects_before_upstream(self, client, upstream, body):
        response = await client.post("/api/stocks/batch", json=body)

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid symbols array"
        assert upstream.calls == []

    @pytest.mark.asyncio
    async def test_batch_without_body(self, client, upstream):
        response = await client.post("/api/stocks/batch")

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid symbols array"
        assert upstream.calls == []

    @pytest.mark.asyncio
    async def test_batch_malformed_json(self, client, upstream):
        response = await client.post(
            "/api/stocks/batch",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"
        assert upstream.calls == []


class TestGitHubRoutes:

    @pytest.mark.asyncio
    async def test_profile(self, client):
        response = await client.get("/api/github/user/octocat")

        assert response.status_code == 200
        body = response.json()
        assert body["user"]["login"] == "octocat"
        assert body["repoCount"] == 3
        assert body["totalStars"] == 16
        assert body["totalForks"] == 3
        assert body["totalWatchers"] == 16
        assert body["totalIssues"] == 10
        assert body["languageBreakdown"] == [
            {"name": "Go", "value": "50.0", "bytes": 1000},
            {"name": "Python", "value": "40.0", "bytes": 800},
            {"name": "JavaScript", "value": "10.0", "bytes": 200},
        ]
        assert [row["status"] for row in body["projectHealth"]] == ["healthy", "warning", "attention"]
        alpha = body["repos"][0]
        assert alpha["name"] == "alpha"
        assert alpha["stargazersCount"] == 10
        assert alpha["commitActivity"] == [1, 0, 2]
        assert alpha["detailFailure"] is None

    @pytest.mark.asyncio
    async def test_profile_degrades_repo_when_stats_are_unavailable(self, client, upstream):
        upstream.route(GITHUB_HOST, "/repos/octocat/beta/languages", json={"message": "Server Error"}, status_code=502)

        response = await client.get("/api/github/user/octocat")

        assert response.status_code == 200
        beta = response.json()["repos"][1]
        assert beta["languages"] == {}
        assert beta["commitActivity"] == []
        assert beta["detailFailure"]["provider"] == "github"

    @pytest.mark.asyncio
    async def test_participation_still_computing(self, client, upstream):
        upstream.route(GITHUB_HOST, "/repos/octocat/alpha/stats/participation", handler=lambda request: httpx.Response(202))

        response = await client.get("/api/github/user/octocat")

        alpha = response.json()["repos"][0]
        assert alpha["commitActivity"] == []
        assert alpha["detailFailure"] is None

    @pytest.mark.asyncio
    async def test_unknown_user(self, client):
        response = await client.get("/api/github/user/nobody")

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to fetch GitHub data"

    @pytest.mark.asyncio
    async def test_repo_details(self, client):
        response = await client.get("/api/github/octocat/alpha")

        assert response.status_code == 200
        body = response.json()
        assert body["repo"]["name"] == "alpha"
        assert body["recentCommits"] == [{"sha": "abc123"}]
        assert body["languages"] == {"Python": 800, "JavaScript": 200}

    @pytest.mark.asyncio
    async def test_repo_details_failure(self, client):
        response = await client.get("/api/github/octocat/missing")

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to fetch GitHub repo data"


class TestNewsRoutes:

    @pytest.mark.asyncio
    async def test_defaults(self, client, upstream):
        response = await client.get("/api/news")

        assert response.status_code == 200
        assert response.json()["articles"] == [{"title": "Headline"}]
        request = upstream.calls[-1]
        assert request.url.params["category"] == "technology"
        assert request.url.params["country"] == "us"
        assert request.url.params["pageSize"] == "10"

    @pytest.mark.asyncio
    async def test_page_size_is_part_of_the_key(self, client, upstream):
        await client.get("/api/news", params={"pageSize": 5})
        await client.get("/api/news", params={"pageSize": 20})
        await client.get("/api/news", params={"pageSize": 5})

        assert upstream.count(NEWS_HOST) == 2

    @pytest.mark.asyncio
    async def test_non_numeric_page_size(self, client, upstream):
        response = await client.get("/api/news", params={"pageSize": "many"})

        assert response.status_code == 400
        assert response.json()["error"] == "Invalid request"
        assert upstream.calls == []

    @pytest.mark.asyncio
    async def test_failure(self, client, upstream):
        upstream.route(NEWS_HOST, "/top-headlines", json={"status": "error", "message": "apiKeyInvalid"}, status_code=401)

        response = await client.get("/api/news")

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to fetch news data"


class TestDashboardRoute:

    @pytest.mark.asyncio
    async def test_dashboard(self, client):
        response = await client.get("/api/dashboard/octocat", params={"stocks": "aapl,msft"})

        assert response.status_code == 200
        body = response.json()
        assert body["weather"]["current"]["name"] == "Toronto"
        assert body["github"]["totalStars"] == 16
        assert body["news"]["status"] == "ok"
        assert [quote["symbol"] for quote in body["stocks"]] == ["AAPL", "MSFT"]
        assert body["failures"] == []
        assert body["timestamp"]

    @pytest.mark.asyncio
    async def test_failed_section_is_reported(self, client, upstream):
        upstream.route(NEWS_HOST, "/top-headlines", json={"message": "rateLimited"}, status_code=429)

        response = await client.get("/api/dashboard/octocat")

        assert response.status_code == 200
        body = response.json()
        assert body["news"] is None
        assert body["weather"] is not None
        assert body["failures"][0]["section"] == "news"
        assert body["failures"][0]["provider"] == "newsapi"

    @pytest.mark.asyncio
    async def test_null_news_body_is_a_failed_section(self, client, upstream):
        upstream.route(NEWS_HOST, "/top-headlines", handler=lambda request: httpx.Response(200, content=b"null"))

        response = await client.get("/api/dashboard/octocat")

        assert response.status_code == 200
        body = response.json()
        assert body["news"] is None
        assert body["weather"] is not None
        assert body["github"] is not None
        assert [failure["section"] for failure in body["failures"]] == ["news"]
        assert body["failures"][0]["provider"] == "newsapi"

    @pytest.mark.asyncio
    async def test_reuses_standalone_entries(self, client, upstream):
        await client.get("/api/weather/Toronto")
        await client.get("/api/dashboard/octocat", params={"city": "Toronto"})

        assert upstream.count(WEATHER_HOST) == 2

    @pytest.mark.asyncio
    async def test_everything_failing(self, client, upstream):
        upstream.routes.clear()

        response = await client.get("/api/dashboard/octocat")

        assert response.status_code == 500
        assert response.json()["error"] == "Failed to fetch dashboard data"


class TestCacheRoutes:

    @pytest.mark.asyncio
    async def test_clear_then_stats_reports_zero_keys(self, client):
        await client.get("/api/weather/Toronto")
        await client.get("/api/stocks/AAPL")
        assert len((await client.get("/api/cache/stats")).json()["keys"]) == 2

        response = await client.post("/api/cache/clear")

        assert response.status_code == 200
        assert response.json() == {"message": "Cache cleared successfully"}
        stats = (await client.get("/api/cache/stats")).json()
        assert stats["keys"] == []
        assert stats["stats"]["keyCount"] == 0

    @pytest.mark.asyncio
    async def test_clear_forces_refetch(self, client, upstream):
        await client.get("/api/stocks/AAPL")
        await client.post("/api/cache/clear")
        await client.get("/api/stocks/AAPL")

        assert upstream.count(QUOTES_HOST) == 2


class TestErrorEnvelope:

    @pytest.mark.asyncio
    async def test_unknown_route(self, client):
        response = await client.get("/api/nothing-here")

        assert response.status_code == 404
        assert response.json()["error"] == "Not Found"

    @pytest.mark.asyncio
    async def test_error_envelope_is_documented(self, client):
        schema = (await client.get("/openapi.json")).json()

        responses = schema["paths"]["/api/weather/{city}"]["get"]["responses"]
        for status_code in ("400", "500"):
            ref = responses[status_code]["content"]["application/json"]["schema"]["$ref"]
            assert ref == "#/components/schemas/ErrorResponse"
        assert set(schema["components"]["schemas"]["ErrorResponse"]["required"]) == {"error", "message"}

    @pytest_asyncio.fixture
    async def keyless_client(self, settings, upstream):
        settings = settings.model_copy(update={"openweather_api_key": None})
        app = create_app(settings, transport=upstream.transport)
        async with app.router.lifespan_context(app):
            async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
                yield ac

    @pytest.mark.asyncio
    async def test_missing_credentials_fail_only_that_provider(self, keyless_client, upstream):
        weather = await keyless_client.get("/api/weather/Toronto")
        news = await keyless_client.get("/api/news")

        assert weather.status_code == 500
        assert weather.json() == {
            "error": "Failed to fetch weather data",
            "message": "OPENWEATHER_API_KEY is not configured",
        }
        assert news.status_code == 200
        assert upstream.count(WEATHER_HOST) == 0


class TestLifespan:

    @pytest.mark.asyncio
    async def test_sweeper_runs_with_the_app(self, settings, upstream):
        settings = settings.model_copy(update={"cache_sweep_interval": 60})
        app = create_app(settings, transport=upstream.transport)
        container = app.state.container

        async with app.router.lifespan_context(app):
            assert container.sweeper.is_running

        assert not container.sweeper.is_running
        assert container.http_client.is_closed

    def test_sweeper_disabled_by_zero_interval(self, settings, upstream):
        app = create_app(settings, transport=upstream.transport)

        assert app.state.container.sweeper is None
