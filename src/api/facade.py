# src/api/facade.py — v1
"""Public API facade.

Usage:
    from rudolf.api.facade import get_input, split
    lines = split(get_input(2022, 1), "\\n")
"""

from __future__ import annotations

from rudolf.config.settings import Settings
from rudolf.resolver.puzzle_resolver import PuzzleInputResolver
from rudolf.text.splitter import split

__all__ = ["get_input", "split"]


def get_input(year: int, day: int, settings: Settings | None = None) -> str:
    """Return the puzzle input for (year, day), fetching it at most once.

    Args:
        year: Event year, e.g. 2022.
        day: Puzzle day, 1-25.
        settings: Global settings. Loaded from .env if None.

    Raises:
        RudolfError: Store or fetch failure (see rudolf.core.errors).
    """
    return PuzzleInputResolver(settings=settings).resolve(year, day)
