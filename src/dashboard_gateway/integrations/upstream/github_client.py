"""
GitHub REST client.

Anonymous by default; a configured token is sent as a bearer credential to
lift the rate limit.
"""
from typing import Any, Dict, List, Optional

import httpx

from .base_client import UpstreamClient, path_segment


class GitHubClient(UpstreamClient):
    """Client for the GitHub REST API."""

    provider = "github"

    def __init__(
        self,
        http_client: httpx.AsyncClient,
        token: Optional[str] = None,
        base_url: str = "https://api.github.com",
        timeout_seconds: float = 10.0,
    ):
        super().__init__(http_client, base_url, timeout_seconds)
        self._token = token

    def _default_headers(self) -> Dict[str, str]:
        headers = {"Accept": "application/vnd.github.v3+json"}
        if self._token:
            headers["Authorization"] = f"Bearer {self._token}"
        return headers

    @staticmethod
    def _repo_path(username: str, repo: str) -> str:
        return f"/repos/{path_segment(username)}/{path_segment(repo)}"

    async def user(self, username: str) -> Dict[str, Any]:
        """Fetch a user's public profile."""
        return await self._get_json(f"/users/{path_segment(username)}")

    async def repos(self, username: str) -> List[Dict[str, Any]]:
        """Fetch up to 100 of a user's repos, most recently updated first."""
        return await self._get_json(
            f"/users/{path_segment(username)}/repos",
            params={"per_page": 100, "sort": "updated"},
            expected=list,
        )

    async def repo(self, username: str, repo: str) -> Dict[str, Any]:
        """Fetch a single repo."""
        return await self._get_json(self._repo_path(username, repo))

    async def commits(self, username: str, repo: str, per_page: int = 10) -> List[Dict[str, Any]]:
        """Fetch the most recent commits of a repo."""
        return await self._get_json(
            f"{self._repo_path(username, repo)}/commits",
            params={"per_page": per_page},
            expected=list,
        )

    async def languages(self, username: str, repo: str) -> Dict[str, int]:
        """Fetch byte counts per language for a repo."""
        return await self._get_json(f"{self._repo_path(username, repo)}/languages")

    async def participation(self, username: str, repo: str) -> Dict[str, Any]:
        """Fetch weekly commit counts.

        GitHub answers 202 with an empty body while it computes the stats;
        that comes back as an empty dict.
        """
        return await self._get_json(f"{self._repo_path(username, repo)}/stats/participation")
