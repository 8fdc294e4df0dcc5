from fastapi import APIRouter, Request
from loguru import logger

from repo_proxy.services.repo_info.github_client import GitHubClient

async def github_ok(client: GitHubClient) -> bool:
    try:
        await client.get_rate_limit()
        return True
    except Exception as e:
        logger.warning(f"github_ok failed: {e!r}")
        return False

router = APIRouter(tags=["health"])

@router.get("/health")
async def health(request: Request):
    settings = request.app.state.settings
    client = GitHubClient(
        token=settings.GITHUB_TOKEN,
        settings=settings,
        transport=request.app.state.github_transport,
    )
    return {
        "status": "ok",
        "github": await github_ok(client),
    }

@router.get("/health/live")
async def health_live():
    return {"status": "ok"}
