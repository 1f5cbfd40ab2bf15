"""Concurrent download of chosen files with per-file failure isolation."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from gitdown.domain.entities import FetchTarget
from gitdown.domain.exceptions import GitdownError, LocalIOError
from gitdown.domain.ports.repo_fetcher import RepoFetcher
from gitdown.domain.value_objects import RepositoryRef

logger = logging.getLogger(__name__)

RAW_BASE = "https://raw.githubusercontent.com"

# Hard ceiling on in-flight downloads; keeps socket and buffer usage small.
MAX_CONCURRENT_FETCHES = 4


class FetchScheduler:
    """Download chosen repository paths and write them below *dest_dir*.

    Parameters
    ----------
    repo_fetcher:
        Adapter that can download raw file content.
    dest_dir:
        Directory the repository-relative paths are written under.
    raw_base:
        Root of the raw-content host.
    create_parent_dirs:
        Create missing directories for nested paths.  When false, a nested
        path whose directory does not exist fails on its own.
    """

    def __init__(
        self,
        repo_fetcher: RepoFetcher,
        dest_dir: str | Path = ".",
        raw_base: str = RAW_BASE,
        create_parent_dirs: bool = True,
    ) -> None:
        self._fetcher = repo_fetcher
        self._dest = Path(dest_dir)
        self._raw_base = raw_base
        self._create_parents = create_parent_dirs

    async def fetch_all(self, repo: RepositoryRef, chosen: Sequence[str]) -> None:
        """Download every chosen path; failures are logged, never raised."""
        targets = [
            FetchTarget.for_path(repo, path, self._raw_base)
            for path in dict.fromkeys(chosen)
        ]
        if not targets:
            return

        sem = asyncio.Semaphore(MAX_CONCURRENT_FETCHES)

        async def _fetch_one(target: FetchTarget) -> None:
            async with sem:
                try:
                    content = await self._fetcher.fetch_file_content(target)
                    self._write(target.path, content)
                except GitdownError as exc:
                    logger.error("%s (%s)", exc, _describe_cause(exc))
                    logger.debug("Failed to fetch %s", target.raw_url, exc_info=True)
                    return
            logger.info("Wrote %s (%d chars)", target.path, len(content))

        await asyncio.gather(*(_fetch_one(t) for t in targets))

    def _write(self, path: str, content: str) -> None:
        try:
            dest_root = self._dest.resolve()
            destination = (dest_root / path).resolve()
            if destination == dest_root or not destination.is_relative_to(dest_root):
                raise LocalIOError() from ValueError(
                    f"refusing to write outside {dest_root}: {path}"
                )
            if self._create_parents:
                destination.parent.mkdir(parents=True, exist_ok=True)
            with open(destination, "w", encoding="utf-8", newline="") as fh:
                fh.write(content)
        # ValueError: embedded NUL; RuntimeError: symlink loop.
        except (OSError, ValueError, RuntimeError) as exc:
            raise LocalIOError() from exc


def _describe_cause(exc: BaseException) -> str:
    cause = exc.__cause__
    if cause is None:
        return "no further detail"
    return str(cause) or type(cause).__name__
