from __future__ import annotations

from typing import Any, Dict, List
from loguru import logger

from repo_proxy.schemas.repo_info import RepoInfo, RepoInfoError, RepoInfoResult, RepoOwner
from repo_proxy.services.repo_info.github_client import GitHubClient
from repo_proxy.utils.repo_url import normalize_repo_reference


def _first_commit(commits: List[Dict[str, Any]]) -> Dict[str, Any]:
    if not isinstance(commits, list):
        raise ValueError(f"Unexpected commits response: expected a list, got {type(commits).__name__}")
    return commits[0] if commits else {}


def build_repo_info(repo: Dict[str, Any], commits: List[Dict[str, Any]]) -> RepoInfo:
    commit = _first_commit(commits)
    commit_body = commit.get("commit") or {}
    committer = commit_body.get("committer") or {}
    owner = repo["owner"]

    return RepoInfo(
        name=repo["name"],
        full_name=repo["full_name"],
        description=repo.get("description"),
        url=repo["html_url"],
        stars=repo["stargazers_count"],
        forks=repo["forks_count"],
        last_updated=committer.get("date") or repo.get("updated_at"),
        last_commit_message=commit_body.get("message") or "",
        last_commit_url=commit.get("html_url") or "",
        owner=RepoOwner(
            login=owner["login"],
            avatar_url=owner["avatar_url"],
            url=owner["html_url"],
        ),
    )


async def fetch_repo_info(reference: str, client: GitHubClient) -> RepoInfoResult:
    """
    Look up one repository and its latest commit on the default branch.

    Never raises: any failure (bad status, network, unexpected payload)
    comes back as RepoInfoError keyed by the reference as given.
    """
    try:
        repo_path = normalize_repo_reference(reference)
        repo = await client.get_repo(repo_path)
        commits = await client.get_latest_commits(repo_path, repo["default_branch"])
        return build_repo_info(repo, commits)
    except Exception as e:
        message = str(e) or e.__class__.__name__
        logger.error(f"Error fetching repo info for {reference}: {message}")
        return RepoInfoError(name=reference, error=message)


def is_error(result: RepoInfoResult) -> bool:
    return isinstance(result, RepoInfoError)
