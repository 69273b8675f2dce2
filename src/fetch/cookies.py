# src/fetch/cookies.py — v2
"""Cookie jar loading for authenticated input requests.

Accepts either a Netscape/curl cookie file or a file holding only the
session token (optionally written as ``session=<token>``). The header line
decides the format: a file that starts with the Netscape header must parse
as one.
"""

from __future__ import annotations

import logging
import re
from http.cookiejar import MozillaCookieJar
from pathlib import Path

import httpx

logger = logging.getLogger(__name__)

SESSION_COOKIE = "session"

_NETSCAPE_HEADER = re.compile(r"#( Netscape)? HTTP Cookie File")


def load_cookies(path: Path | str) -> httpx.Cookies:
    """Read the cookie jar at path into httpx cookies.

    A missing file is not an error: the request goes out without
    credentials and the endpoint decides what to answer.

    Raises:
        OSError: The file cannot be read, or a Netscape file has a
            malformed line (http.cookiejar.LoadError).
        ValueError: The file is not valid UTF-8, or is neither a Netscape
            file nor a single session token.
    """
    cookie_path = Path(path).expanduser()
    cookies = httpx.Cookies()

    if not cookie_path.is_file():
        logger.warning(
            "Cookie jar %s not found, requesting without credentials",
            cookie_path,
        )
        return cookies

    content = cookie_path.read_text(encoding="utf-8")

    if not _NETSCAPE_HEADER.match(content):
        token = _parse_token(content, cookie_path)
        if token:
            cookies.set(SESSION_COOKIE, token)
            logger.debug("Loaded bare session token from %s", cookie_path)
        else:
            logger.warning("Cookie jar %s is empty", cookie_path)
        return cookies

    jar = MozillaCookieJar(str(cookie_path))
    jar.load(ignore_discard=True, ignore_expires=True)

    # Copy without expiry: curl writes 0 for session cookies, which the
    # request-time policy would otherwise treat as expired.
    for cookie in jar:
        if cookie.value is None:
            continue
        cookies.set(
            cookie.name, cookie.value, domain=cookie.domain, path=cookie.path
        )
    logger.debug("Loaded %d cookie(s) from %s", len(cookies), cookie_path)
    return cookies


def _parse_token(content: str, path: Path) -> str:
    token = content.strip()
    prefix = f"{SESSION_COOKIE}="
    if token.startswith(prefix):
        token = token[len(prefix):]
    if any(char.isspace() for char in token):
        raise ValueError(
            f"{path} is neither a Netscape cookie file nor a single session token"
        )
    return token
