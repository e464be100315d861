"""Substring search and word splitting used by the XPM reader."""

from __future__ import annotations

import re
from typing import List

_WORD_SEPARATORS = re.compile(r"[ \t]+")


def _check_needle(needle: str) -> None:
    if not needle:
        raise ValueError("search string must not be empty")


def find(text: str, needle: str, length: int) -> int:
    """Return the position of ``needle`` in ``text``, or -1.

    ``length`` is the size of the region being searched; a needle longer
    than that is never found.
    """
    _check_needle(needle)
    if len(needle) > length:
        return -1
    return text.find(needle)


def find_unquoted(text: str, needle: str, length: int) -> int:
    """Like :func:`find`, but skip matches inside double-quoted strings.

    Each double quote met while scanning toggles the quoted state; a match is
    only accepted where the scan is outside quotes.
    """
    _check_needle(needle)
    if len(needle) > length:
        return -1
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> List[str]:
    """Split ``text`` into words separated by runs of spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]