"""Reading XPM images, from a file or from a list of lines."""

from __future__ import annotations

import os
import re
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

from wiremap.colors import lookup_color
from wiremap.image import Image
from wiremap.text import find, find_unquoted, split_words

TRANSPARENT = 0xFF000000
_NAME_BUFFER = 63
_INTEGER = re.compile(r"\s*([+-]?\d+)")
_HEX = re.compile(r"\s*([+-]?[0-9a-fA-F]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


def _atoi(word: str) -> int:
    match = _INTEGER.match(word)
    return int(match.group(1)) if match else 0


def _blank(text: str, start: int, width: int) -> str:
    width = min(width, len(text) - start)
    return text[:start] + " " * width + text[start + width:]


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces.

    The result has the same length as ``text``. A ``//`` comment is blanked
    up to and including its newline.
    """
    while (begin := find_unquoted(text, "/*", len(text))) != -1:
        end = find(text[begin + 2:], "*/", len(text) - begin - 2)
        text = _blank(text, begin, end + 4)
    while (begin := find_unquoted(text, "//", len(text))) != -1:
        end = find(text[begin + 2:], "\n", len(text) - begin - 2)
        text = _blank(text, begin, end + 3)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield the contents of successive double-quoted strings in ``text``."""
    pos = 0
    while True:
        start = text.find('"', pos)
        if start == -1:
            return
        end = text.find('"', start + 1)
        if end == -1:
            return
        yield text[start + 1:end]
        pos = end + 1


def text_rgb(name: str, end: Optional[str]) -> int:
    """Return the colour named by an XPM colour spec.

    ``#RRGGBB`` is read as hexadecimal. Otherwise ``name`` (joined with
    ``end`` when given) is looked up among the named colours; "none" gives
    -1 and an unknown name gives 0.
    """
    if name.startswith("#"):
        match = _HEX.match(name[1:])
        return int(match.group(1), 16) if match else 0
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def color_key(chars: str) -> int:
    """Pack the characters of a pixel code into one integer key."""
    key = 0
    for char in chars:
        key = (key << 8) + ord(char)
    return key


def _parse_color_line(line: str, chars_per_pixel: int) -> Tuple[int, int]:
    words = split_words(line[chars_per_pixel:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line has no 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line has no colour after 'c': {line!r}")
    end = words[index + 1] if index + 1 < len(words) else None
    return color_key(line[:chars_per_pixel]), text_rgb(words[index], end)


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from XPM lines: header, colour lines, then pixel rows.

    Transparent pixels ("None") are stored as 0xFF000000 and pixel codes
    without a colour as 0.
    """
    rows = iter(lines)
    header = next(rows, None)
    if header is None:
        raise XpmError("missing XPM header line")
    words = split_words(header)
    if len(words) < 4:
        raise XpmError(f"XPM header needs four values: {header!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"XPM header values must be positive: {header!r}")

    palette: Dict[int, int] = {}
    for _ in range(ncolors):
        line = next(rows, None)
        if line is None:
            raise XpmError("XPM data ends inside the colour table")
        key, rgb = _parse_color_line(line, cpp)
        if cpp <= 2:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)

    image = Image(width, height)
    for y in range(height):
        line = next(rows, None)
        if line is None:
            raise XpmError("XPM data ends before the last pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {y} is too short")
        for x in range(width):
            color = palette.get(color_key(line[x * cpp:(x + 1) * cpp]), 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def xpm_from_file(path: Union[str, os.PathLike]) -> Image:
    """Read an XPM file and return its image."""
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(quoted_lines(strip_comments(text)))


def xpm_from_data(lines: Iterable[str]) -> Image:
    """Return the image held in XPM lines already split into strings."""
    return parse_xpm(lines)