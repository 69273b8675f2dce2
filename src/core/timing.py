# src/core/timing.py — v1
"""Measure a single run of a puzzle solution."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class Timed(Generic[R]):
    """Value returned by a solution together with its wall time in seconds."""

    value: R
    time: float


def time_fn(fn: Callable[[T], R], input: T) -> Timed[R]:
    """Run fn(input) once and time it. Exceptions from fn propagate."""
    start = time.perf_counter()
    value = fn(input)
    return Timed(value=value, time=time.perf_counter() - start)
