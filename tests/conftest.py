# tests/conftest.py — v1
"""Shared test fixtures for all unit and integration tests.

Provides settings pointing at temp files, an in-memory store that records
its open/close calls, and a fetcher double. No test touches the network.
"""

from __future__ import annotations

from pathlib import Path

import httpx
import pytest

from rudolf.cache.base_puzzle_store import BasePuzzleStore
from rudolf.config.settings import Settings
from rudolf.core.errors import RemoteNotFoundError, StoreWriteError
from rudolf.fetch.base_fetcher import BaseRemoteFetcher

SAMPLE_INPUT = "1000\n2000\n3000\n\n4000\n\n5000\n6000\n"


# === Doubles ===


class FakeFetcher(BaseRemoteFetcher):
    """Serves canned inputs; unknown keys behave like a 404."""

    def __init__(self, inputs: dict[tuple[int, int], str] | None = None) -> None:
        self.inputs = dict(inputs or {})
        self.calls: list[tuple[int, int]] = []

    def fetch(self, year: int, day: int) -> str:
        self.calls.append((year, day))
        if (year, day) not in self.inputs:
            raise RemoteNotFoundError(year, day, body="404 Not Found")
        return self.inputs[(year, day)]


class RecordingStore(BasePuzzleStore):
    """Dict-backed store that counts open/close calls."""

    def __init__(self, rows: dict[tuple[int, int], str] | None = None) -> None:
        self.rows = rows if rows is not None else {}
        self.opens = 0
        self.closes = 0
        self.fail_writes = False

    def open(self) -> None:
        self.opens += 1

    def get(self, year: int, day: int) -> str | None:
        return self.rows.get((year, day))

    def put(self, year: int, day: int, text: str) -> None:
        if self.fail_writes or (year, day) in self.rows:
            raise StoreWriteError(f"cannot store {year}/{day}")
        self.rows[(year, day)] = text

    def close(self) -> None:
        self.closes += 1


# === FIXTURES: Sample data ===


@pytest.fixture
def sample_input() -> str:
    """Multi-line puzzle input with a trailing newline."""
    return SAMPLE_INPUT


@pytest.fixture
def fake_fetcher(sample_input: str) -> FakeFetcher:
    """Fetcher that knows 2022 day 1 only."""
    return FakeFetcher({(2022, 1): sample_input})


@pytest.fixture
def make_fetcher():
    """Build a FakeFetcher from a {(year, day): text} mapping."""
    return FakeFetcher


@pytest.fixture
def recording_store() -> RecordingStore:
    return RecordingStore()


# === FIXTURES: Temp files ===


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "rudolf.db"


@pytest.fixture
def cookie_file(tmp_path: Path) -> Path:
    """Cookie jar holding a bare session token."""
    path = tmp_path / "cookie.txt"
    path.write_text("abc123\n", encoding="utf-8")
    return path


@pytest.fixture
def settings(db_path: Path, cookie_file: Path) -> Settings:
    """Settings isolated from any .env in the working directory."""
    return Settings(
        _env_file=None,
        puzzle_db_path=db_path,
        aoc_cookie_file=cookie_file,
    )


# === FIXTURES: HTTP ===


@pytest.fixture
def recorded_requests() -> list[httpx.Request]:
    return []


@pytest.fixture
def aoc_transport(
    sample_input: str, recorded_requests: list[httpx.Request]
) -> httpx.MockTransport:
    """Mock endpoint: 2022 day 1 exists, everything else is 404."""

    def handler(request: httpx.Request) -> httpx.Response:
        recorded_requests.append(request)
        if request.url.path == "/2022/day/1/input":
            return httpx.Response(200, text=sample_input)
        return httpx.Response(404, text="404 Not Found")

    return httpx.MockTransport(handler)
