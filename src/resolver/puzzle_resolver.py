# src/resolver/puzzle_resolver.py — v1
"""Cache-or-fetch resolution of puzzle inputs.

Lookup order:
  1. Open a fresh store handle (failure is fatal).
  2. Cache hit: return stored text without touching the network.
  3. Cache miss: fetch once; on success write the text back.
  4. Close the store on every path.

A failed write-back is logged and the fetched text is still returned.
"""

from __future__ import annotations

import logging
from typing import Callable

from rudolf.cache.base_puzzle_store import BasePuzzleStore
from rudolf.cache.store_factory import create_puzzle_store
from rudolf.config.settings import Settings
from rudolf.core.errors import StoreWriteError
from rudolf.core.models import PuzzleIdentifier
from rudolf.fetch.base_fetcher import BaseRemoteFetcher
from rudolf.fetch.http_fetcher import HttpRemoteFetcher
from rudolf.logging.context import puzzle_context, set_step

logger = logging.getLogger(__name__)


class PuzzleInputResolver:
    """Resolve puzzle inputs from the local store, falling back to the web."""

    def __init__(
        self,
        settings: Settings | None = None,
        fetcher: BaseRemoteFetcher | None = None,
        store_factory: Callable[[], BasePuzzleStore] | None = None,
    ) -> None:
        self._settings = settings or Settings()
        self._fetcher = fetcher or HttpRemoteFetcher.from_settings(self._settings)
        self._store_factory = store_factory or (
            lambda: create_puzzle_store(self._settings)
        )

    def resolve(self, year: int, day: int) -> str:
        """Return the puzzle input for (year, day).

        Raises:
            StoreOpenError: The backing store cannot be opened.
            StoreQueryError: The cache lookup failed.
            FetchError: Cache miss and the remote fetch failed.
        """
        puzzle = PuzzleIdentifier(year=year, day=day)

        with puzzle_context(puzzle.year, puzzle.day):
            set_step("cache_lookup")
            with self._store_factory() as store:
                cached = store.get(puzzle.year, puzzle.day)
                if cached is not None:
                    logger.info("Cache hit for puzzle %s", puzzle)
                    return cached

                logger.info("Cache miss for puzzle %s, fetching", puzzle)
                set_step("remote_fetch")
                text = self._fetcher.fetch(puzzle.year, puzzle.day)

                set_step("cache_write")
                try:
                    store.put(puzzle.year, puzzle.day, text)
                except StoreWriteError as e:
                    logger.warning(
                        "Fetched puzzle %s but could not cache it: %s",
                        puzzle, e,
                    )
                return text
