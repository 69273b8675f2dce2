# src/core/models.py — v1
"""Domain models: PuzzleIdentifier, PuzzleRecord, FetchResult."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PuzzleIdentifier(BaseModel):
    """Composite (year, day) key for one puzzle input."""

    model_config = ConfigDict(frozen=True)

    year: int = Field(gt=0)
    day: int = Field(gt=0)

    def url(self, template: str) -> str:
        """Render an endpoint URL template with this puzzle's year and day."""
        return template.format(year=self.year, day=self.day)

    def __str__(self) -> str:
        return f"{self.year}/{self.day:02d}"


class PuzzleRecord(BaseModel):
    """Persisted puzzle input row. Written once, never updated."""

    model_config = ConfigDict(frozen=True)

    year: int
    day: int
    text: str


class FetchResult(BaseModel):
    """Outcome of a single successful remote fetch."""

    year: int
    day: int
    url: str
    status_code: int
    text: str
    size_bytes: int
