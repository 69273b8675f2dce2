# src/text/splitter.py — v1
"""Split text on a set of single-character delimiters."""

from __future__ import annotations

from collections.abc import Iterable


def split(input: str | None, delimiters: Iterable[str]) -> list[str]:
    """Split input on any character in delimiters.

    Every delimiter character ends the current segment, so consecutive
    delimiters produce empty strings and the result always has one more
    element than there are delimiters. Empty or None input gives [].

    >>> split("a,,b", ",")
    ['a', '', 'b']
    >>> split("1 2\\n3", " \\n")
    ['1', '2', '3']
    """
    if not input:
        return []

    delimiter_set = frozenset(delimiters)
    parts: list[str] = []
    start = 0
    for i, char in enumerate(input):
        if char in delimiter_set:
            parts.append(input[start:i])
            start = i + 1
    parts.append(input[start:])
    return parts
