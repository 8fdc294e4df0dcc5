"""
Shared fixtures for the repo-info proxy tests.

GitHub is never contacted: every test routes the client through an
httpx.MockTransport built by `github_transport`.
"""

from typing import Any, Callable, Dict, List, Tuple

import httpx
import pytest

from repo_proxy.core.config import Settings

Route = Tuple[int, Any]


class FakeGitHub:
    """Serves canned responses keyed by request path and records every call."""

    def __init__(self, routes: Dict[str, Route]):
        self.routes = routes
        self.requests: List[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get(request.url.path)
        if route is None:
            return httpx.Response(404, json={"message": "Not Found"})
        status_code, body = route
        if isinstance(body, Exception):
            raise body
        return httpx.Response(status_code, json=body)

    @property
    def paths(self) -> List[str]:
        return [r.url.path for r in self.requests]


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        _env_file=None,
        GITHUB_TOKEN="ghp_test_token",
        GITHUB_API_BASE="https://api.github.test",
        CACHE_MAX_AGE_SECONDS=3600,
        REPO_FETCH_CONCURRENCY=4,
    )


@pytest.fixture
def sample_repo_metadata() -> dict:
    """Trimmed GET /repos/{owner}/{repo} payload."""
    return {
        "name": "hello-world",
        "full_name": "octocat/hello-world",
        "description": "My first repository",
        "html_url": "https://github.com/octocat/hello-world",
        "stargazers_count": 1500,
        "forks_count": 42,
        "updated_at": "2024-01-10T08:00:00Z",
        "default_branch": "main",
        "owner": {
            "login": "octocat",
            "avatar_url": "https://avatars.githubusercontent.com/u/583231?v=4",
            "html_url": "https://github.com/octocat",
        },
    }


@pytest.fixture
def sample_commits() -> list:
    """GET /repos/{owner}/{repo}/commits?per_page=1 payload."""
    return [
        {
            "sha": "1234567890abcdef1234567890abcdef12345678",
            "html_url": "https://github.com/octocat/hello-world/commit/1234567890abcdef",
            "commit": {
                "message": "Fix typo in README",
                "committer": {
                    "name": "The Octocat",
                    "date": "2024-01-15T12:30:00Z",
                },
            },
        }
    ]


@pytest.fixture
def github_transport() -> Callable[[Dict[str, Route]], Tuple[httpx.MockTransport, FakeGitHub]]:
    def _make(routes: Dict[str, Route]):
        fake = FakeGitHub(routes)
        return httpx.MockTransport(fake), fake

    return _make
