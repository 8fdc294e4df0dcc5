from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Optional
import httpx
from loguru import logger

from repo_proxy.core.config import Settings, settings as default_settings


class GitHubAPIError(Exception):
    def __init__(self, status_code: int, message: str) -> None:
        super().__init__(message)
        self.status_code = status_code


@dataclass
class GitHubRateLimit:
    remaining: Optional[int]
    reset_epoch: Optional[int]


class GitHubClient:
    def __init__(
        self,
        token: Optional[str] = None,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        cfg = settings or default_settings
        self.base = cfg.GITHUB_API_BASE.rstrip("/")
        self.user_agent = cfg.GITHUB_USER_AGENT
        self.timeout = cfg.GITHUB_TIMEOUT_SECONDS
        self.token = token
        self._transport = transport

    def _headers(self) -> Dict[str, str]:
        headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": self.user_agent,
        }
        if self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        return headers

    def _rate_limit(self, resp: httpx.Response) -> GitHubRateLimit:
        def _to_int(v: Optional[str]) -> Optional[int]:
            try:
                return int(v) if v is not None else None
            except ValueError:
                return None

        remaining = _to_int(resp.headers.get("x-ratelimit-remaining"))
        reset = _to_int(resp.headers.get("x-ratelimit-reset"))
        return GitHubRateLimit(remaining=remaining, reset_epoch=reset)

    async def _get(self, path: str, error_prefix: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base}{path}"
        async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
            resp = await client.get(url, headers=self._headers(), params=params)

        if resp.status_code in (403, 429):
            rl = self._rate_limit(resp)
            # logged only; the status still surfaces as an API error below
            logger.warning(
                f"GitHub rate limit or forbidden on {path}: status={resp.status_code} "
                f"remaining={rl.remaining} reset={rl.reset_epoch}"
            )

        if not resp.is_success:
            raise GitHubAPIError(resp.status_code, f"{error_prefix}: {resp.status_code}")

        return resp.json()

    async def get_repo(self, repo_path: str) -> Dict[str, Any]:
        return await self._get(f"/repos/{repo_path}", "GitHub API error")

    async def get_latest_commits(self, repo_path: str, branch: str) -> List[Dict[str, Any]]:
        return await self._get(
            f"/repos/{repo_path}/commits",
            "GitHub API error fetching commits",
            params={"per_page": 1, "sha": branch},
        )

    async def get_rate_limit(self) -> Dict[str, Any]:
        return await self._get("/rate_limit", "GitHub API error")
