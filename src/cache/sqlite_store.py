# src/cache/sqlite_store.py — v2
"""SQLite-backed puzzle store.

Uses stdlib sqlite3. One connection per open/close scope; the primary key on
(year, day) makes a second insert for the same puzzle fail instead of
overwriting it.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

from rudolf.cache.base_puzzle_store import BasePuzzleStore
from rudolf.core.errors import StoreOpenError, StoreQueryError, StoreWriteError
from rudolf.core.models import PuzzleRecord

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS puzzles (
    year INTEGER NOT NULL,
    day INTEGER NOT NULL,
    text TEXT NOT NULL,
    PRIMARY KEY (year, day)
);
"""


class SqlitePuzzleStore(BasePuzzleStore):
    """Puzzle inputs persisted in a single SQLite table."""

    def __init__(self, db_path: Path | str, timeout_s: float = 5.0) -> None:
        self._db_path = Path(db_path).expanduser()
        self._timeout_s = timeout_s
        self._conn: sqlite3.Connection | None = None

    @property
    def db_path(self) -> Path:
        return self._db_path

    @property
    def is_open(self) -> bool:
        return self._conn is not None

    def open(self) -> None:
        """Open (creating if needed) the database and ensure the table exists."""
        if self._conn is not None:
            raise StoreOpenError(f"Puzzle store already open: {self._db_path}")

        conn: sqlite3.Connection | None = None
        try:
            self._db_path.parent.mkdir(parents=True, exist_ok=True)
            conn = sqlite3.connect(str(self._db_path), timeout=self._timeout_s)
            conn.execute("PRAGMA journal_mode=WAL")
            conn.executescript(_SCHEMA)
        except (sqlite3.Error, OSError) as e:
            if conn is not None:
                conn.close()
            raise StoreOpenError(
                f"Cannot open puzzle store {self._db_path}: {e}"
            ) from e

        self._conn = conn
        logger.debug("Opened puzzle store %s", self._db_path)

    def get(self, year: int, day: int) -> str | None:
        """Look up the input for (year, day)."""
        record = self.get_record(year, day)
        if record is None:
            return None
        return record.text

    def get_record(self, year: int, day: int) -> PuzzleRecord | None:
        """Look up the persisted row for (year, day)."""
        conn = self._connection(StoreQueryError)
        try:
            cursor = conn.execute(
                "SELECT text FROM puzzles WHERE year = ? AND day = ?",
                (year, day),
            )
            row = cursor.fetchone()
        except sqlite3.Error as e:
            raise StoreQueryError(
                f"Failed to read puzzle {year}/{day:02d}: {e}"
            ) from e
        if row is None:
            return None
        return PuzzleRecord(year=year, day=day, text=row[0])

    def put(self, year: int, day: int, text: str) -> None:
        """Insert the input for (year, day); duplicates raise StoreWriteError."""
        conn = self._connection(StoreWriteError)
        try:
            with conn:
                conn.execute(
                    "INSERT INTO puzzles (year, day, text) VALUES (?, ?, ?)",
                    (year, day, text),
                )
        except sqlite3.Error as e:
            raise StoreWriteError(
                f"Failed to store puzzle {year}/{day:02d}: {e}"
            ) from e
        logger.debug("Stored puzzle %d/%02d (%d chars)", year, day, len(text))

    def close(self) -> None:
        """Close the database connection."""
        if self._conn is None:
            return
        self._conn.close()
        self._conn = None
        logger.debug("Closed puzzle store %s", self._db_path)

    def _connection(self, error: type[Exception]) -> sqlite3.Connection:
        if self._conn is None:
            raise error(f"Puzzle store is not open: {self._db_path}")
        return self._conn
