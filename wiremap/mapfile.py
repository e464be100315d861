"""Reading height maps: rows of whitespace-separated heights with optional colours."""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple, Union

DEFAULT_COLOR = 0xFFFFFF
_DECIMAL = re.compile(r"\s*([+-]?)(\d*)")
_HEXADECIMAL = re.compile(r"\s*([+-]?)([0-9a-fA-F]*)")


class MapError(ValueError):
    """Raised when a map file holds no usable grid."""


def _leading_int(text: str, pattern: re.Pattern, base: int) -> int:
    match = pattern.match(text)
    sign, digits = match.group(1), match.group(2)
    if not digits:
        return 0
    value = int(digits, base)
    return -value if sign == "-" else value


def parse_point(token: str) -> Tuple[int, int]:
    """Return (height, colour) for one map token such as ``"5"`` or ``"5,0xFF0000"``.

    The colour is read as hexadecimal after the ``,0x`` prefix; a token without
    a comma is white.
    """
    height = _leading_int(token, _DECIMAL, 10)
    comma = token.find(",")
    if comma == -1:
        return height, DEFAULT_COLOR
    return height, _leading_int(token[comma + 3:], _HEXADECIMAL, 16)


@dataclass
class HeightMap:
    """A width x height grid of heights and colours, stored row by row."""

    width: int
    height: int
    heights: List[int] = field(default_factory=list)
    colors: List[int] = field(default_factory=list)
    top: int = 0
    bottom: int = 0

    def line_count(self) -> int:
        """Return the number of segments joining horizontal and vertical neighbours."""
        return self.width * self.height * 2 - self.width - self.height


def read_map(lines: Iterable[str]) -> HeightMap:
    """Build a height map from its text lines.

    The first line fixes the width; every row must have that many points.
    """
    rows = [line.split() for line in lines]
    if not rows or not rows[0]:
        raise MapError("map has no points")
    width = len(rows[0])
    heights: List[int] = []
    colors: List[int] = []
    for number, row in enumerate(rows, start=1):
        if len(row) != width:
            raise MapError(f"row {number} has {len(row)} points, expected {width}")
        for token in row:
            value, color = parse_point(token)
            heights.append(value)
            colors.append(color)
    return HeightMap(
        width=width,
        height=len(rows),
        heights=heights,
        colors=colors,
        top=max(heights),
        bottom=min(heights),
    )


def load_map(path: Union[str, os.PathLike]) -> HeightMap:
    """Read the height map stored in the file at ``path``."""
    with open(path, encoding="utf-8") as handle:
        return read_map(handle)