"""
GitHub aggregator.

Profile: user and repo list in parallel, then per-repo detail calls for
the most recently updated repos under a concurrency bound. A failed detail
call degrades that repo to its base fields; it never fails the profile.
"""
import asyncio
import logging
from typing import Any, Dict, List, Sequence

from ...core.exceptions import UpstreamError
from ...integrations.upstream import GitHubClient
from ...models import UpstreamFailure
from ...platform.cache import AggregationRequest, CacheThroughExecutor
from ..fanout import gather_all
from .derivations import (
    LANGUAGE_BREAKDOWN_LIMIT,
    language_breakdown,
    most_recently_updated,
    project_health,
    sum_field,
)
from .models import DetailedRepo, GitHubProfile, RepoDetails

logger = logging.getLogger(__name__)


def merge_profile(
    user: Dict[str, Any],
    repos: Sequence[Dict[str, Any]],
    detailed: Sequence[DetailedRepo],
    breakdown_limit: int = LANGUAGE_BREAKDOWN_LIMIT,
) -> GitHubProfile:
    """Build the profile aggregate.

    Totals cover every repo; the language breakdown and health list cover
    only the detailed ones.
    """
    return GitHubProfile(
        user=user,
        repos=list(detailed),
        total_stars=sum_field(repos, "stargazers_count"),
        total_forks=sum_field(repos, "forks_count"),
        total_watchers=sum_field(repos, "watchers_count"),
        total_issues=sum_field(repos, "open_issues_count"),
        language_breakdown=language_breakdown((repo.languages for repo in detailed), breakdown_limit),
        project_health=project_health(detailed),
        repo_count=len(repos),
    )


class GitHubAggregator:
    """Builds cached profile and repo detail results."""

    profile_endpoint_id = "github"
    repo_endpoint_id = "github-repo"

    def __init__(
        self,
        client: GitHubClient,
        executor: CacheThroughExecutor,
        detail_limit: int = 10,
        detail_concurrency: int = 5,
        breakdown_limit: int = LANGUAGE_BREAKDOWN_LIMIT,
    ):
        if detail_concurrency <= 0:
            raise ValueError("detail_concurrency must be positive")
        self._client = client
        self._executor = executor
        self._detail_limit = detail_limit
        self._detail_concurrency = detail_concurrency
        self._breakdown_limit = breakdown_limit

    def profile_request(self, username: str) -> AggregationRequest:
        return AggregationRequest(self.profile_endpoint_id, {"username": username})

    def repo_request(self, username: str, repo: str) -> AggregationRequest:
        return AggregationRequest(self.repo_endpoint_id, {"username": username, "repo": repo})

    async def profile(self, username: str) -> GitHubProfile:
        """Profile aggregate for a user, from cache when fresh."""
        return await self._executor.execute(
            self.profile_request(username),
            lambda: self.aggregate_profile(username),
        )

    async def repo_details(self, username: str, repo: str) -> RepoDetails:
        """Repo, recent commits and languages, from cache when fresh."""
        return await self._executor.execute(
            self.repo_request(username, repo),
            lambda: self.aggregate_repo(username, repo),
        )

    async def aggregate_profile(self, username: str) -> GitHubProfile:
        user, repos = await gather_all(
            self._client.user(username),
            self._client.repos(username),
        )
        if not isinstance(repos, list):
            raise UpstreamError(
                provider=self._client.provider,
                message=f"{self._client.provider} returned an unexpected repo list",
            )

        top_repos = most_recently_updated(repos, self._detail_limit)
        semaphore = asyncio.Semaphore(self._detail_concurrency)
        detailed = await asyncio.gather(
            *(self._detail(username, repo, semaphore) for repo in top_repos)
        )

        degraded = sum(1 for repo in detailed if repo.detail_failure is not None)
        logger.info(
            f"GitHub profile for {username}: {len(repos)} repos, "
            f"{len(detailed)} detailed, {degraded} degraded"
        )
        return merge_profile(user, repos, detailed, self._breakdown_limit)

    async def aggregate_repo(self, username: str, repo: str) -> RepoDetails:
        info, commits, languages = await gather_all(
            self._client.repo(username, repo),
            self._client.commits(username, repo, per_page=10),
            self._client.languages(username, repo),
        )
        return RepoDetails(repo=info, recent_commits=commits or [], languages=languages or {})

    async def _detail(
        self,
        username: str,
        repo: Dict[str, Any],
        semaphore: asyncio.Semaphore,
    ) -> DetailedRepo:
        """Enrich one repo; degrade to base fields on failure."""
        name = repo.get("name") or ""
        async with semaphore:
            try:
                participation, languages = await gather_all(
                    self._client.participation(username, name),
                    self._client.languages(username, name),
                )
            except UpstreamError as e:
                logger.warning(f"Details for {username}/{name} unavailable: {e.message}")
                return DetailedRepo.from_raw(repo, detail_failure=UpstreamFailure.from_error(e))

        return DetailedRepo.from_raw(
            repo,
            commit_activity=_weekly_commits(participation),
            languages=languages,
        )


def _weekly_commits(participation: Any) -> List[int]:
    """Weekly commit counts; empty while the host is still computing them."""
    if isinstance(participation, dict):
        return list(participation.get("all") or [])
    return []
