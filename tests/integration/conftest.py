# tests/integration/conftest.py — v1
"""Fixtures for end-to-end resolution: real SQLite file, mocked HTTP endpoint."""

from __future__ import annotations

import sqlite3

import pytest

from rudolf.fetch.http_fetcher import HttpRemoteFetcher
from rudolf.resolver.puzzle_resolver import PuzzleInputResolver


@pytest.fixture
def http_fetcher(settings, aoc_transport) -> HttpRemoteFetcher:
    return HttpRemoteFetcher.from_settings(settings, transport=aoc_transport)


@pytest.fixture
def resolver(settings, http_fetcher) -> PuzzleInputResolver:
    return PuzzleInputResolver(settings=settings, fetcher=http_fetcher)


@pytest.fixture
def count_rows(settings):
    """Count rows in the puzzles table with a raw connection."""

    def _count() -> int:
        conn = sqlite3.connect(str(settings.puzzle_db_path))
        try:
            return conn.execute("SELECT COUNT(*) FROM puzzles").fetchone()[0]
        finally:
            conn.close()

    return _count
