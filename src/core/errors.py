# src/core/errors.py — v1
"""Error taxonomy shared by the store, the fetcher and the resolver.

A cache miss is not an error: stores return None for it.
"""

from __future__ import annotations


class RudolfError(Exception):
    """Base class for every failure surfaced by rudolf."""


# --- Store ---


class StoreError(RudolfError):
    """Backing store failure."""


class StoreOpenError(StoreError):
    """Backing file cannot be created, opened or initialised."""


class StoreQueryError(StoreError):
    """Lookup failed (corrupt file, I/O error, closed handle)."""


class StoreWriteError(StoreError):
    """Insert failed, e.g. a duplicate (year, day) key."""


# --- Remote ---


class FetchError(RudolfError):
    """No puzzle input could be obtained from the remote endpoint."""

    def __init__(self, year: int, day: int, message: str) -> None:
        self.year = year
        self.day = day
        super().__init__(message)


class NetworkError(FetchError):
    """Transport-level failure: DNS, connection, timeout."""


class CookieFileError(FetchError):
    """Cookie jar exists but is unreadable or malformed."""


class RemoteStatusError(FetchError):
    """Endpoint answered with a non-success HTTP status."""

    def __init__(
        self, year: int, day: int, status_code: int, body: str = ""
    ) -> None:
        self.status_code = status_code
        self.body = body
        super().__init__(
            year, day, f"HTTP {status_code} for puzzle {year}/{day:02d}"
        )


class RemoteNotFoundError(RemoteStatusError):
    """Endpoint answered 404: input not available (yet)."""

    def __init__(self, year: int, day: int, body: str = "") -> None:
        super().__init__(year, day, 404, body)
