"""Pydantic models for the GitHub git-trees payload."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ValidationError

from gitdown.domain.entities import DirEntry, EntryKind
from gitdown.domain.exceptions import OtherError, ResponseKeyError


class TreeItem(BaseModel):
    """One element of the ``tree`` array."""

    path: str
    type: str
    size: int | None = None

    @property
    def is_blob(self) -> bool:
        return self.type == EntryKind.BLOB.value

    def to_entry(self) -> DirEntry:
        return DirEntry(path=self.path, kind=EntryKind(self.type), size=self.size)


class TreeResponse(BaseModel):
    """Body of ``GET /repos/{owner}/{repo}/git/trees/{ref}``."""

    sha: str | None = None
    tree: list[TreeItem]
    truncated: bool = False


def parse_tree_response(payload: Any) -> TreeResponse:
    """Validate a decoded JSON body, translating failures to domain errors.

    A missing field (top-level ``tree`` or a field of one of its items)
    becomes :class:`ResponseKeyError`; any other shape problem becomes
    :class:`OtherError`.
    """
    try:
        return TreeResponse.model_validate(payload)
    except ValidationError as exc:
        for err in exc.errors():
            if err["type"] == "missing":
                key = next(
                    (str(part) for part in reversed(err["loc"]) if isinstance(part, str)),
                    "tree",
                )
                raise ResponseKeyError(key=key) from exc
        raise OtherError(status=f"unexpected tree listing shape: {exc.errors()[0]['msg']}") from exc
