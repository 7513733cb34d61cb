"""GitHub endpoints."""
from fastapi import APIRouter, Depends

from ...features.github import GitHubProfile, RepoDetails
from ...gateway import GatewayService
from ..dependencies import get_gateway
from ..errors import ERROR_RESPONSES, error_category

router = APIRouter(prefix="/api/github", tags=["GitHub"], responses=ERROR_RESPONSES)


# Registered before the repo route so /user/<name> is never read as a repo.
@router.get("/user/{username}", response_model=GitHubProfile)
async def get_github_profile(username: str, gateway: GatewayService = Depends(get_gateway)):
    """Profile aggregate with totals, language breakdown and repo health."""
    with error_category("Failed to fetch GitHub data"):
        return await gateway.github_profile(username)


@router.get("/{username}/{repo}", response_model=RepoDetails)
async def get_github_repo(username: str, repo: str, gateway: GatewayService = Depends(get_gateway)):
    """A repo with its recent commits and languages."""
    with error_category("Failed to fetch GitHub repo data"):
        return await gateway.github_repo(username, repo)
