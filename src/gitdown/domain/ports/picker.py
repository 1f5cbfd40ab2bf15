"""Port: interactive picker."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from gitdown.domain.entities import Chosen


class Picker(Protocol):
    """Let a human choose a subset of candidate lines."""

    def select(self, items: Iterable[str]) -> Chosen:
        """Block until the user is done and return what was chosen."""
        ...
