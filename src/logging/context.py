# src/logging/context.py — v1
"""Contextual logging support: attach year, day and step to log records."""

from __future__ import annotations

import contextvars
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

_year: contextvars.ContextVar[int | None] = contextvars.ContextVar(
    "year", default=None
)
_day: contextvars.ContextVar[int | None] = contextvars.ContextVar(
    "day", default=None
)
_step: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "step", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    year: int | None = None
    day: int | None = None
    step: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(year=_year.get(), day=_day.get(), step=_step.get())


def set_puzzle_context(year: int, day: int) -> None:
    """Set puzzle-level context."""
    _year.set(year)
    _day.set(day)


def set_step(step: str | None) -> None:
    """Set the resolution step currently executing."""
    _step.set(step)


@contextmanager
def puzzle_context(year: int, day: int) -> Iterator[None]:
    """Scope year/day context to a block, restoring the previous values."""
    tokens = (_year.set(year), _day.set(day), _step.set(None))
    try:
        yield
    finally:
        _step.reset(tokens[2])
        _day.reset(tokens[1])
        _year.reset(tokens[0])


def clear_context() -> None:
    """Reset all context variables."""
    _year.set(None)
    _day.set(None)
    _step.set(None)
