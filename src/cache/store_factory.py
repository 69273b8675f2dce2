# src/cache/store_factory.py — v1
"""Factory for puzzle store instantiation."""

from __future__ import annotations

from rudolf.cache.base_puzzle_store import BasePuzzleStore
from rudolf.cache.sqlite_store import SqlitePuzzleStore
from rudolf.config.settings import Settings


def create_puzzle_store(settings: Settings | None = None) -> BasePuzzleStore:
    """Instantiate an unopened store for the configured database file.

    Args:
        settings: Application settings. Defaults to ./rudolf.db.

    Returns:
        BasePuzzleStore ready to be opened (or used as a context manager).
    """
    if settings is None:
        return SqlitePuzzleStore(db_path="rudolf.db")
    return SqlitePuzzleStore(
        db_path=settings.puzzle_db_path,
        timeout_s=settings.puzzle_db_timeout_s,
    )
