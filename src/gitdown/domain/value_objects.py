"""Value objects — self-validating domain primitives."""

from __future__ import annotations

from dataclasses import dataclass

from gitdown.domain.exceptions import EmptyTextError, MalformedRepoError

DEFAULT_REF = "main"


@dataclass(frozen=True, slots=True)
class RepositoryRef:
    """A GitHub repository pinned to a ref (branch, tag or commit sha).

    Built from text like ``psf/requests``; anything without exactly one
    ``/`` separator is rejected.
    """

    owner: str
    name: str
    ref: str = DEFAULT_REF

    @classmethod
    def from_string(cls, text: str | None, ref: str = DEFAULT_REF) -> RepositoryRef:
        """Parse and validate ``owner/name`` text."""
        if text is None or not text.strip():
            raise EmptyTextError()
        text = text.strip()
        if text.count("/") != 1:
            raise MalformedRepoError(repo=text)
        owner, name = text.split("/", 1)
        if not owner or not name:
            raise MalformedRepoError(repo=text)
        return cls(owner=owner, name=name, ref=ref or DEFAULT_REF)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.name}"
