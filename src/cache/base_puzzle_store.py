# src/cache/base_puzzle_store.py — v1
"""Abstract puzzle store interface.

Stores are context managers: entering opens the handle and leaving closes
it, so every open has exactly one close on every exit path.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType


class BasePuzzleStore(ABC):
    """Append-only (year, day) -> text persistence."""

    @abstractmethod
    def open(self) -> None:
        """Open the backing store and ensure the schema exists."""

    @abstractmethod
    def get(self, year: int, day: int) -> str | None:
        """Return stored text, or None when the key is absent."""

    @abstractmethod
    def put(self, year: int, day: int, text: str) -> None:
        """Insert text for a key that must not already exist."""

    @abstractmethod
    def close(self) -> None:
        """Release the handle. Safe to call when not open."""

    def __enter__(self) -> BasePuzzleStore:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
