# src/fetch/http_fetcher.py — v2
"""HTTP fetcher for puzzle inputs (httpx).

One GET per call, no retry. The body is streamed and appended chunk by chunk
to a single buffer in arrival order before decoding.
"""

from __future__ import annotations

import logging
from pathlib import Path

import httpx

from rudolf.config.settings import DEFAULT_INPUT_URL, Settings
from rudolf.core.errors import (
    CookieFileError,
    NetworkError,
    RemoteNotFoundError,
    RemoteStatusError,
)
from rudolf.core.models import FetchResult, PuzzleIdentifier
from rudolf.fetch.base_fetcher import BaseRemoteFetcher
from rudolf.fetch.cookies import load_cookies
from rudolf.version import __version__

logger = logging.getLogger(__name__)


class HttpRemoteFetcher(BaseRemoteFetcher):
    """Fetch puzzle inputs from the Advent of Code website."""

    def __init__(
        self,
        url_template: str = DEFAULT_INPUT_URL,
        cookie_file: Path | str = "cookie.txt",
        timeout_s: float = 30.0,
        user_agent: str = f"rudolf/{__version__}",
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._url_template = url_template
        self._cookie_file = Path(cookie_file)
        self._timeout_s = timeout_s
        self._user_agent = user_agent
        self._transport = transport

    @classmethod
    def from_settings(
        cls, settings: Settings, transport: httpx.BaseTransport | None = None
    ) -> HttpRemoteFetcher:
        return cls(
            url_template=settings.aoc_input_url,
            cookie_file=settings.aoc_cookie_file,
            timeout_s=settings.aoc_timeout_s,
            user_agent=settings.aoc_user_agent,
            transport=transport,
        )

    def fetch(self, year: int, day: int) -> str:
        """Return the puzzle input text for (year, day)."""
        return self.fetch_result(year, day).text

    def fetch_result(self, year: int, day: int) -> FetchResult:
        """Perform the request and return text plus response metadata.

        Raises:
            CookieFileError: The cookie jar exists but cannot be used.
            NetworkError: Connection, DNS, timeout or read failure.
            RemoteNotFoundError: HTTP 404.
            RemoteStatusError: Any other non-2xx status.
        """
        url = PuzzleIdentifier(year=year, day=day).url(self._url_template)
        try:
            cookies = load_cookies(self._cookie_file)
        except (OSError, ValueError) as e:
            logger.error("Cannot load cookie jar %s: %s", self._cookie_file, e)
            raise CookieFileError(
                year, day, f"Cannot load cookie jar {self._cookie_file}: {e}"
            ) from e

        logger.debug("GET %s", url)
        try:
            with httpx.Client(
                cookies=cookies,
                headers={"User-Agent": self._user_agent},
                timeout=self._timeout_s,
                follow_redirects=False,
                transport=self._transport,
            ) as client:
                with client.stream("GET", url) as response:
                    buffer = bytearray()
                    for chunk in response.iter_bytes():
                        buffer.extend(chunk)
                    status_code = response.status_code
        except httpx.RequestError as e:
            logger.error(
                "Request for puzzle %d/%02d failed: %s: %s",
                year, day, type(e).__name__, e,
            )
            raise NetworkError(
                year, day, f"Request to {url} failed: {e}"
            ) from e

        try:
            text = buffer.decode("utf-8")
        except UnicodeDecodeError as e:
            logger.warning(
                "Response for puzzle %d/%02d is not valid UTF-8 (%s), "
                "undecodable bytes replaced",
                year, day, e,
            )
            text = buffer.decode("utf-8", errors="replace")

        if status_code == 404:
            logger.warning("HTTP code %d received: %s", status_code, text.strip())
            raise RemoteNotFoundError(year, day, body=text)
        if not 200 <= status_code < 300:
            logger.warning(
                "HTTP code %d received for puzzle %d/%02d: %s",
                status_code, year, day, text.strip(),
            )
            raise RemoteStatusError(year, day, status_code, body=text)

        logger.debug(
            "Fetched puzzle %d/%02d (%d bytes)", year, day, len(buffer)
        )
        return FetchResult(
            year=year,
            day=day,
            url=url,
            status_code=status_code,
            text=text,
            size_bytes=len(buffer),
        )
