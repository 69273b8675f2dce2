# src/fetch/base_fetcher.py — v1
"""Abstract remote fetcher interface."""

from __future__ import annotations

from abc import ABC, abstractmethod


class BaseRemoteFetcher(ABC):
    """Single-attempt retrieval of one puzzle input."""

    @abstractmethod
    def fetch(self, year: int, day: int) -> str:
        """Return the puzzle input text.

        Raises:
            FetchError: NetworkError on transport failure, RemoteStatusError
                (RemoteNotFoundError for 404) on a non-success response.
        """
