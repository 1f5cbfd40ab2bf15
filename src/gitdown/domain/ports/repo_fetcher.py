"""Port: repository fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from gitdown.domain.entities import DirEntry, FetchTarget
from gitdown.domain.value_objects import RepositoryRef


class RepoFetcher(Protocol):
    """Abstract contract for listing and downloading GitHub repository files."""

    async def fetch_tree(self, repo: RepositoryRef) -> list[DirEntry]:
        """Return the blob entries of the recursive tree at ``repo.ref``."""
        ...

    async def fetch_file_content(self, target: FetchTarget) -> str:
        """Return the decoded text content of a single raw file."""
        ...
