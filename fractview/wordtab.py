"""Substring search and word splitting used by the XPM reader."""

from __future__ import annotations

import re

_SEPARATORS = re.compile(r"[ \t]+")


def find(text: str, needle: str, length: int) -> int:
    """Return the index of the first ``needle`` in ``text``, or -1.

    ``length`` is the size of the region being searched; a needle longer
    than it can never match.
    """
    if len(needle) > length:
        return -1
    return text.find(needle)


def find_unquoted(text: str, needle: str, length: int) -> int:
    """Like :func:`find`, but skip matches that lie inside double quotes."""
    if len(needle) > length:
        return -1
    if not needle:
        return 0
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return -1


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by runs of spaces and tabs."""
    return [word for word in _SEPARATORS.split(text) if word]