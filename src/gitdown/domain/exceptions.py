"""Domain exception hierarchy.

Every failure gitdown can report is one of the classes below.  Inner layers
raise them; the CLI prints the message together with the ``__cause__`` chain
and decides the exit status.
"""

from __future__ import annotations

from collections.abc import Iterator


class GitdownError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class EmptyTextError(GitdownError):
    """No repository text was given."""

    def __init__(self) -> None:
        super().__init__("Text was not provided")


class MalformedRepoError(GitdownError):
    """The repository text is not of the form ``owner/name``."""

    def __init__(self, repo: str) -> None:
        self.repo = repo
        super().__init__(f"The given repo {repo} is malformed.")


# ── GitHub API errors ───────────────────────────────────────────────────────


class GitHubStatusError(GitdownError):
    """The GitHub API answered with a status other than 200."""

    def __init__(self, status: int, msg: str) -> None:
        self.status = status
        self.msg = msg
        super().__init__(f"GitHub API failure with response status {status}: {msg}")


class TreeDoesNotExistError(GitdownError):
    """The requested tree (branch, tag or sha) could not be listed."""

    def __init__(self, tree: str, repo: str) -> None:
        self.tree = tree
        self.repo = repo
        super().__init__(
            f"The tree {tree} does not exist for repo {repo}. If you did not "
            "specify a tree, specify master (by default, the tree is main)."
        )


class ResponseKeyError(GitdownError):
    """A parsed response lacks a field we rely on."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"The response is missing the key: {key}")


# ── Download errors ─────────────────────────────────────────────────────────


class DownloadFailureError(GitdownError):
    """Requesting a raw file failed before a body was received."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Downloading from {path} caused an error")


class ReadFailureError(GitdownError):
    """A raw file response arrived but its body could not be read."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(f"Reading from {path} caused an error")


# ── Picker errors ───────────────────────────────────────────────────────────


class PickerInterruptedError(GitdownError):
    """The picker process was terminated by a signal."""

    def __init__(self) -> None:
        super().__init__("Fzf was interrupted")


# ── Wrapped errors ──────────────────────────────────────────────────────────


class HttpClientError(GitdownError):
    """Network transport failure.  The httpx error is the ``__cause__``."""

    def __init__(self) -> None:
        super().__init__("Network request failure")


class LocalIOError(GitdownError):
    """Local I/O failure.  The ``OSError`` is the ``__cause__``."""

    def __init__(self) -> None:
        super().__init__("I/O failure")


class OtherError(GitdownError):
    """Anything else, described by a free-form status string."""

    def __init__(self, status: str) -> None:
        self.status = status
        super().__init__(f"An error occured: {status}")


# ── Reporting helpers ───────────────────────────────────────────────────────


def cause_chain(exc: BaseException) -> Iterator[BaseException]:
    """Yield *exc* followed by each exception in its ``__cause__`` chain."""
    seen: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__


def format_error(exc: BaseException) -> str:
    """Render ``Error: <msg>: <cause>: ...`` on a single line."""
    messages = [str(e) or type(e).__name__ for e in cause_chain(exc)]
    return "Error: " + ": ".join(messages)
