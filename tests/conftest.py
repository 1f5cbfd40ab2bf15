"""Shared test fixtures."""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Iterable

import httpx
import pytest

from gitdown.domain.entities import Chosen, DirEntry, EntryKind, FetchTarget
from gitdown.domain.value_objects import RepositoryRef

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def repo() -> RepositoryRef:
    return RepositoryRef(owner="owner", name="demo", ref="main")


@pytest.fixture
def make_client() -> Callable[[Handler], httpx.AsyncClient]:
    """Build an AsyncClient whose requests are answered by *handler*."""

    def _make(handler: Handler) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))

    return _make


class StubPicker:
    """Picker that records what it was offered and returns a fixed choice."""

    def __init__(self, choice: Iterable[str]) -> None:
        self.choice = tuple(choice)
        self.offered: list[str] | None = None

    def select(self, items: Iterable[str]) -> Chosen:
        self.offered = list(items)
        return Chosen(items=self.choice)


class FakeFetcher:
    """In-memory RepoFetcher with optional per-path failures and latency."""

    def __init__(
        self,
        files: dict[str, str] | None = None,
        failures: dict[str, Exception] | None = None,
        delay: float = 0.0,
    ) -> None:
        self.files = files or {}
        self.failures = failures or {}
        self.delay = delay
        self.requested: list[str] = []
        self.in_flight = 0
        self.max_in_flight = 0

    async def fetch_tree(self, repo: RepositoryRef) -> list[DirEntry]:
        return [DirEntry(path=p, kind=EntryKind.BLOB) for p in self.files]

    async def fetch_file_content(self, target: FetchTarget) -> str:
        self.requested.append(target.raw_url)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            await asyncio.sleep(self.delay)
            if target.path in self.failures:
                raise self.failures[target.path]
            return self.files[target.path]
        finally:
            self.in_flight -= 1


@pytest.fixture
def stub_picker_cls() -> type[StubPicker]:
    return StubPicker


@pytest.fixture
def fake_fetcher_cls() -> type[FakeFetcher]:
    return FakeFetcher
