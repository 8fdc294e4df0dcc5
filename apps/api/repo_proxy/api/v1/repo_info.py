from typing import Any, Dict, Optional

import httpx
from fastapi import status
from fastapi.responses import JSONResponse
from loguru import logger
from pydantic import ValidationError
from starlette.requests import Request

from repo_proxy.core.config import Settings
from repo_proxy.schemas.repo_info import ReposInfoRequest
from repo_proxy.services.repo_info.batch import fetch_many
from repo_proxy.services.repo_info.fetcher import fetch_repo_info
from repo_proxy.services.repo_info.github_client import GitHubClient

REPOS_INFO_PATH = "/api/repos-info"
REPO_INFO_PATH = "/api/repo-info"


def _error(status_code: int, message: str, headers: Optional[Dict[str, str]] = None) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code, headers=headers)


def _cached(content: Any, settings: Settings) -> JSONResponse:
    return JSONResponse(content, headers={"Cache-Control": settings.cache_control})


async def repos_info(
    request: Request,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> JSONResponse:
    """
    Bulk lookup. The body must be an object whose `repos` is a list of
    strings; a null body, a missing key, or non-string items all get 400
    rather than being coerced. Only an unparseable body is a 500.
    """
    try:
        if request.method != "POST":
            return _error(
                status.HTTP_405_METHOD_NOT_ALLOWED,
                "Method not allowed. Use POST.",
                headers={"Allow": "POST"},
            )

        body = await request.json()
        try:
            payload = ReposInfoRequest.model_validate(body)
        except ValidationError:
            return _error(status.HTTP_400_BAD_REQUEST, "Invalid request. Provide an array of repo URLs.")

        client = GitHubClient(token=settings.GITHUB_TOKEN, settings=settings, transport=transport)
        results = await fetch_many(payload.repos, client, concurrency=settings.REPO_FETCH_CONCURRENCY)

        return _cached({ref: info.model_dump() for ref, info in results.items()}, settings)
    except Exception as e:
        logger.exception(f"repos-info failed: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))


async def repo_info(
    request: Request,
    settings: Settings,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> JSONResponse:
    try:
        repo = request.query_params.get("repo")
        if not repo:
            return _error(status.HTTP_400_BAD_REQUEST, "Missing repo parameter")

        token = settings.GITHUB_TOKEN if settings.FORWARD_TOKEN_ON_SINGLE_LOOKUP else None
        client = GitHubClient(token=token, settings=settings, transport=transport)
        info = await fetch_repo_info(repo, client)

        return _cached(info.model_dump(), settings)
    except Exception as e:
        logger.exception(f"repo-info failed: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
