"""Wiring of concrete adapters into the use case."""

from __future__ import annotations

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from pathlib import Path

import httpx

from gitdown.infrastructure.config import Settings
from gitdown.infrastructure.fzf_picker import FzfPicker, fzf_options
from gitdown.infrastructure.github_rest_adapter import GitHubRestAdapter
from gitdown.services.download_repo import DownloadRepoUseCase
from gitdown.services.fetch_scheduler import FetchScheduler


@asynccontextmanager
async def build_use_case(
    settings: Settings, dest_dir: str | Path = "."
) -> AsyncIterator[DownloadRepoUseCase]:
    """Yield a use case whose HTTP client is closed on exit."""
    async with httpx.AsyncClient(timeout=httpx.Timeout(settings.request_timeout)) as client:
        github_adapter = GitHubRestAdapter(
            client=client,
            api_root=settings.api_root,
            user_agent=settings.user_agent,
        )
        yield DownloadRepoUseCase(
            repo_fetcher=github_adapter,
            picker=FzfPicker(
                command=settings.picker_command,
                options=fzf_options(settings.picker_height),
            ),
            scheduler=FetchScheduler(
                repo_fetcher=github_adapter,
                dest_dir=dest_dir,
                raw_base=settings.raw_base,
                create_parent_dirs=settings.create_parent_dirs,
            ),
        )
