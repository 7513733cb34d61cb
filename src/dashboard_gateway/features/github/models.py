"""GitHub aggregation results."""
from typing import Any, Dict, List, Literal, Optional

from pydantic import Field

from ...models import BaseSchema, UpstreamFailure

HealthStatus = Literal["healthy", "warning", "attention"]


class LanguageShare(BaseSchema):
    """One row of the language breakdown.

    ``value`` is the share of all bytes across the detailed repos, formatted
    with one decimal. Rows are truncated to the top entries, so they sum to
    at most 100.
    """

    name: str
    value: str
    byte_count: int = Field(alias="bytes")


class DetailedRepo(BaseSchema):
    """A repo enriched with its commit activity and language byte counts."""

    name: str
    full_name: Optional[str] = None
    description: Optional[str] = None
    html_url: Optional[str] = None
    language: Optional[str] = None
    stargazers_count: int = 0
    forks_count: int = 0
    watchers_count: int = 0
    open_issues_count: int = 0
    size: int = 0
    updated_at: Optional[str] = None
    commit_activity: List[int] = Field(default_factory=list)
    languages: Dict[str, int] = Field(default_factory=dict)
    detail_failure: Optional[UpstreamFailure] = None

    @classmethod
    def from_raw(
        cls,
        repo: Dict[str, Any],
        commit_activity: Optional[List[int]] = None,
        languages: Optional[Dict[str, int]] = None,
        detail_failure: Optional[UpstreamFailure] = None,
    ) -> "DetailedRepo":
        """Build from a raw repo object; missing counters default to zero."""
        return cls(
            name=repo.get("name") or "",
            full_name=repo.get("full_name"),
            description=repo.get("description"),
            html_url=repo.get("html_url"),
            language=repo.get("language"),
            stargazers_count=repo.get("stargazers_count") or 0,
            forks_count=repo.get("forks_count") or 0,
            watchers_count=repo.get("watchers_count") or 0,
            open_issues_count=repo.get("open_issues_count") or 0,
            size=repo.get("size") or 0,
            updated_at=repo.get("updated_at"),
            commit_activity=commit_activity or [],
            languages=languages or {},
            detail_failure=detail_failure,
        )


class RepoHealth(BaseSchema):
    """Health summary of one detailed repo."""

    name: str
    status: HealthStatus
    stars: int
    forks: int
    issues: int
    size: int
    language: Optional[str] = None
    description: Optional[str] = None
    url: Optional[str] = None
    last_updated: Optional[str] = None


class GitHubProfile(BaseSchema):
    """Profile aggregate: user, detailed top repos and derived stats."""

    user: Dict[str, Any]
    repos: List[DetailedRepo]
    total_stars: int
    total_forks: int
    total_watchers: int
    total_issues: int
    language_breakdown: List[LanguageShare]
    project_health: List[RepoHealth]
    repo_count: int


class RepoDetails(BaseSchema):
    """A single repo with its recent commits and languages."""

    repo: Dict[str, Any]
    recent_commits: List[Dict[str, Any]]
    languages: Dict[str, int]
