"""Download-repository use case — the main orchestration pipeline.

Resolve the tree, let the user pick, then download.  Each stage finishes
completely before the next one starts.
"""

from __future__ import annotations

import logging

from gitdown.domain.ports.picker import Picker
from gitdown.domain.ports.repo_fetcher import RepoFetcher
from gitdown.domain.value_objects import RepositoryRef
from gitdown.services.fetch_scheduler import FetchScheduler

logger = logging.getLogger(__name__)


class DownloadRepoUseCase:
    """Orchestrates the full tree → picker → download pipeline."""

    def __init__(
        self,
        repo_fetcher: RepoFetcher,
        picker: Picker,
        scheduler: FetchScheduler,
    ) -> None:
        self._fetcher = repo_fetcher
        self._picker = picker
        self._scheduler = scheduler

    async def execute(self, repo: RepositoryRef) -> tuple[str, ...]:
        """Run the pipeline and return the paths that were chosen."""
        logger.info("Listing %s@%s", repo.full_name, repo.ref)
        entries = await self._fetcher.fetch_tree(repo)
        logger.info("Found %d files in %s@%s", len(entries), repo.full_name, repo.ref)

        # Blocks until the user is done; the picker owns the terminal.
        chosen = self._picker.select(entry.path for entry in entries)
        if not chosen:
            logger.info("Nothing was chosen")
            return ()

        logger.info("Downloading %d file(s)", len(chosen.items))
        await self._scheduler.fetch_all(repo, chosen.items)
        return chosen.items
