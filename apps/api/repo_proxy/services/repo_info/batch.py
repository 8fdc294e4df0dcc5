from __future__ import annotations

import asyncio
from typing import Iterable

from repo_proxy.schemas.repo_info import BatchResult, RepoInfoResult
from repo_proxy.services.repo_info.fetcher import fetch_repo_info, is_error
from repo_proxy.services.repo_info.github_client import GitHubClient
from loguru import logger


async def fetch_many(references: Iterable[str], client: GitHubClient, concurrency: int = 0) -> BatchResult:
    """
    Fetch every reference concurrently and join on all of them.

    Duplicate references are fetched once. `concurrency` caps in-flight
    lookups; 0 leaves the fan-out unbounded.
    """
    unique = list(dict.fromkeys(references))
    sem = asyncio.Semaphore(concurrency) if concurrency > 0 else None

    async def _one(reference: str) -> RepoInfoResult:
        if sem is None:
            return await fetch_repo_info(reference, client)
        async with sem:
            return await fetch_repo_info(reference, client)

    results = await asyncio.gather(*(_one(r) for r in unique))

    failed = sum(1 for r in results if is_error(r))
    logger.info(f"Fetched {len(unique)} repos ({failed} failed)")
    return dict(zip(unique, results))
