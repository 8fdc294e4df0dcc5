from typing import Iterable, Optional

import httpx
from fastapi import APIRouter, FastAPI
from fastapi.staticfiles import StaticFiles

from repo_proxy.api.middleware import RepoInfoMiddleware
from repo_proxy.api.v1.health import router as health_router
from repo_proxy.core.config import Settings, settings as default_settings
from repo_proxy.core.logging import setup_logging

logger = setup_logging(default_settings.LOG_LEVEL)

def create_app(
    settings: Optional[Settings] = None,
    downstream_routers: Iterable[APIRouter] = (),
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FastAPI:
    settings = settings or default_settings
    app = FastAPI(title=settings.APP_NAME)
    app.state.settings = settings
    app.state.github_transport = transport

    app.add_middleware(RepoInfoMiddleware, settings=settings, transport=transport)

    app.include_router(health_router, prefix="/api/v1")
    for router in downstream_routers:
        app.include_router(router)

    # static site last so it only catches what no route claimed
    if settings.STATIC_DIR:
        app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")
        logger.info(f"Serving static site from {settings.STATIC_DIR}")

    return app

app = create_app()
