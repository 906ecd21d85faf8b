"""Reader for XPM pixmap images."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from .colornames import lookup_color
from .wordtab import find, find_unquoted, split_words

TRANSPARENT = 0xFF000000
"""Pixel value used for the colour ``None``."""

_INT = re.compile(r"\s*([+-]?\d+)")
_HEX = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")
_NAME_LIMIT = 63


class XpmError(ValueError):
    """The XPM data is malformed."""


@dataclass
class XpmImage:
    """A decoded image: rows of 32-bit pixel values, top row first."""

    width: int
    height: int
    pixels: list[list[int]]


def _atoi(text: str) -> int:
    match = _INT.match(text)
    return int(match.group(1)) if match else 0


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Resolve a colour spec (``#rrggbb`` or a colour name) to 0xRRGGBB.

    ``end`` is the word following the name; it is joined to it with a space
    before the name lookup. Unknown names give 0 and ``None`` gives -1.
    """
    if name.startswith("#"):
        match = _HEX.match(name, 1)
        if not match:
            return 0
        value = int(match.group(2), 16)
        return -value if match.group(1) == "-" else value
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _blank(text: str, start: int, count: int) -> str:
    stop = min(len(text), start + count)
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C comments outside string literals with spaces, keeping the length."""
    while (begin := find_unquoted(text, "/*", len(text))) != -1:
        tail = text[begin + 2:]
        text = _blank(text, begin, find(tail, "*/", len(tail)) + 4)
    while (begin := find_unquoted(text, "//", len(text))) != -1:
        tail = text[begin + 2:]
        text = _blank(text, begin, find(tail, "\n", len(tail)) + 3)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while True:
        rest = text[pos:]
        start = find(rest, '"', len(rest))
        if start == -1:
            return
        after = rest[start + 1:]
        end = find(after, '"', len(after))
        if end == -1:
            return
        yield after[:end]
        pos += start + end + 2


def _pixel_value(color: int) -> int:
    return TRANSPARENT if color == -1 else color & 0xFFFFFFFF


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode an image from its XPM strings: header, colours, then pixel rows."""
    source = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(source)
        except StopIteration:
            raise XpmError(f"missing {what}") from None

    header = split_words(next_line("header"))
    if len(header) < 4:
        raise XpmError("header needs width, height, colours and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in header[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("header values must be positive")

    direct = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = next_line("colour definition")
        if len(line) < cpp:
            raise XpmError(f"colour definition too short: {line!r}")
        words = split_words(line[cpp:])
        try:
            at = words.index("c") + 1
        except ValueError:
            raise XpmError(f"no colour key in {line!r}") from None
        if at >= len(words):
            raise XpmError(f"no colour after key in {line!r}")
        rgb = text_to_rgb(words[at], words[at + 1] if at + 1 < len(words) else None)
        key = line[:cpp]
        if direct:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    rows = []
    for _ in range(height):
        line = next_line("pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        rows.append([
            _pixel_value(palette.get(line[offset:offset + cpp], 0))
            for offset in range(0, width * cpp, cpp)
        ])
    return XpmImage(width=width, height=height, pixels=rows)


def parse_xpm_text(text: str) -> XpmImage:
    """Decode an image from the text of an XPM file."""
    return parse_xpm(quoted_lines(strip_comments(text)))


def load_xpm(path: str | PathLike[str]) -> XpmImage:
    """Read and decode an XPM file."""
    return parse_xpm_text(Path(path).read_text(encoding="latin-1"))