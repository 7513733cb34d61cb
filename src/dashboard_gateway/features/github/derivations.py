"""
Derived statistics for GitHub profiles.

Pure functions over provider payloads; nothing here performs I/O.
"""
from typing import Any, Dict, Iterable, List, Mapping, Sequence

from .models import DetailedRepo, HealthStatus, LanguageShare, RepoHealth

LANGUAGE_BREAKDOWN_LIMIT = 5
WARNING_ISSUE_THRESHOLD = 5


def sum_field(repos: Iterable[Mapping[str, Any]], field: str) -> int:
    """Sum a numeric repo counter, treating missing values as zero."""
    return sum(int(repo.get(field) or 0) for repo in repos)


def most_recently_updated(repos: Sequence[Dict[str, Any]], limit: int) -> List[Dict[str, Any]]:
    """Top repos by ``updated_at``, newest first."""
    if limit <= 0:
        return []
    ordered = sorted(repos, key=lambda repo: repo.get("updated_at") or "", reverse=True)
    return ordered[:limit]


def language_totals(language_maps: Iterable[Mapping[str, int]]) -> Dict[str, int]:
    """Sum byte counts per language across repos."""
    totals: Dict[str, int] = {}
    for languages in language_maps:
        for name, byte_count in languages.items():
            totals[name] = totals.get(name, 0) + int(byte_count or 0)
    return totals


def language_breakdown(
    language_maps: Iterable[Mapping[str, int]],
    limit: int = LANGUAGE_BREAKDOWN_LIMIT,
) -> List[LanguageShare]:
    """Percentage of bytes per language, largest first, top ``limit`` rows.

    Percentages are relative to every language's bytes, not just the kept
    rows, and are not renormalized after truncation.
    """
    totals = language_totals(language_maps)
    total_bytes = sum(totals.values())
    if total_bytes <= 0:
        return []

    ranked = sorted(totals.items(), key=lambda item: item[1], reverse=True)[:limit]
    return [
        LanguageShare(name=name, value=f"{byte_count / total_bytes * 100:.1f}", byte_count=byte_count)
        for name, byte_count in ranked
    ]


def classify_health(open_issues: int) -> HealthStatus:
    """healthy with no open issues, warning under five, attention otherwise."""
    if open_issues == 0:
        return "healthy"
    if open_issues < WARNING_ISSUE_THRESHOLD:
        return "warning"
    return "attention"


def project_health(repos: Iterable[DetailedRepo]) -> List[RepoHealth]:
    return [
        RepoHealth(
            name=repo.name,
            status=classify_health(repo.open_issues_count),
            stars=repo.stargazers_count,
            forks=repo.forks_count,
            issues=repo.open_issues_count,
            size=repo.size,
            language=repo.language,
            description=repo.description,
            url=repo.html_url,
            last_updated=repo.updated_at,
        )
        for repo in repos
    ]
