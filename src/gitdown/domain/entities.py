"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from urllib.parse import quote

from gitdown.domain.value_objects import RepositoryRef


class EntryKind(str, Enum):
    """Object type of a git tree entry."""

    BLOB = "blob"
    TREE = "tree"
    COMMIT = "commit"  # submodule


@dataclass(frozen=True, slots=True)
class DirEntry:
    """A single node from the GitHub tree API."""

    path: str
    kind: EntryKind
    size: int | None = None


@dataclass(frozen=True, slots=True)
class FetchTarget:
    """A chosen path together with the raw-content URL it is downloaded from."""

    path: str
    raw_url: str

    @classmethod
    def for_path(cls, repo: RepositoryRef, path: str, raw_base: str) -> FetchTarget:
        raw_url = "/".join(
            [
                raw_base.rstrip("/"),
                quote(repo.owner, safe=""),
                quote(repo.name, safe=""),
                quote(repo.ref, safe="/"),
                quote(path, safe="/"),
            ]
        )
        return cls(path=path, raw_url=raw_url)


@dataclass(frozen=True, slots=True)
class Chosen:
    """Lines the user picked, in the order the picker reported them."""

    items: tuple[str, ...] = ()

    def __bool__(self) -> bool:
        return bool(self.items)
