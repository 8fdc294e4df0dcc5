from typing import Optional

import httpx
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.types import ASGIApp

from repo_proxy.api.v1.repo_info import REPO_INFO_PATH, REPOS_INFO_PATH, repo_info, repos_info
from repo_proxy.core.config import Settings, settings as default_settings


class RepoInfoMiddleware(BaseHTTPMiddleware):
    """Answers the repo-info routes itself; every other request goes downstream untouched."""

    def __init__(
        self,
        app: ASGIApp,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(app)
        self.settings = settings or default_settings
        self.transport = transport

    async def dispatch(self, request: Request, call_next):
        path = request.url.path

        if path == REPOS_INFO_PATH:
            return await repos_info(request, self.settings, self.transport)

        if path == REPO_INFO_PATH:
            return await repo_info(request, self.settings, self.transport)

        return await call_next(request)
