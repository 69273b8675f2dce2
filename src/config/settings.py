# src/config/settings.py — v2
"""Typed configuration loaded from .env via pydantic-settings.

Store location, cookie jar, endpoint template and logging options live here
so callers never need to edit constants to point rudolf somewhere else.
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from rudolf.version import __version__

DEFAULT_INPUT_URL = "https://adventofcode.com/{year}/day/{day}/input"


class ConfigurationError(Exception):
    """Raised when configuration is internally inconsistent."""


class Settings(BaseSettings):
    """Application settings loaded from .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === Puzzle store ===
    puzzle_db_path: Path = Path("rudolf.db")
    puzzle_db_timeout_s: float = 5.0

    # === Remote endpoint ===
    aoc_input_url: str = DEFAULT_INPUT_URL
    aoc_cookie_file: Path = Path("cookie.txt")
    aoc_timeout_s: float = 30.0
    aoc_user_agent: str = f"rudolf/{__version__}"

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 5

    # --- Validators ---

    @field_validator("puzzle_db_timeout_s", "aoc_timeout_s")
    @classmethod
    def validate_positive_timeout(cls, v: float, info) -> float:  # noqa: N805
        if v <= 0:
            raise ValueError(f"{info.field_name} must be > 0")
        return v

    @model_validator(mode="after")
    def validate_config_consistency(self) -> Settings:
        """Check that the endpoint template can address a single puzzle."""
        errors: list[str] = []

        for placeholder in ("{year}", "{day}"):
            if placeholder not in self.aoc_input_url:
                errors.append(f"AOC_INPUT_URL must contain {placeholder}")
        try:
            self.aoc_input_url.format(year=1, day=1)
        except (KeyError, IndexError, ValueError) as e:
            errors.append(
                f"AOC_INPUT_URL cannot be rendered with year and day only: {e!r}"
            )

        if self.log_retention < 0:
            errors.append("LOG_RETENTION must be >= 0")

        if errors:
            raise ConfigurationError("; ".join(errors))

        return self


def load_settings(**overrides: object) -> Settings:
    """Load settings from .env with optional overrides.

    Args:
        **overrides: Field-level overrides (for testing or one-off paths).

    Returns:
        Validated Settings instance.

    Raises:
        ConfigurationError: If configuration is internally inconsistent.
    """
    return Settings(**overrides)  # type: ignore[arg-type]
