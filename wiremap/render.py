"""Drawing colour-graded lines into an image."""

from __future__ import annotations

import math
from typing import Sequence

from wiremap.image import Image


def interpolate_color(start: int, end: int, fraction: float) -> int:
    """Blend two 0xRRGGBB colours channel by channel; 0 gives ``start``, 1 ``end``."""
    channels = []
    for shift in (16, 8, 0):
        a = (start >> shift) & 0xFF if shift else start & 0xFF
        b = (end >> shift) & 0xFF if shift else end & 0xFF
        if shift == 16:
            a, b = start >> 16, end >> 16
        channels.append(int(a + (b - a) * fraction))
    red, green, blue = channels
    return red << 16 | green << 8 | blue


def draw_line(image: Image, start: Sequence[float], end: Sequence[float],
              start_color: int, end_color: int,
              offset_x: float = 0, offset_y: float = 0) -> int:
    """Draw a line between two points centred on the image and shifted by the offset.

    Points are (x, y) pairs relative to the image centre. Pixels falling
    outside the image are skipped. Returns the number of pixels written.
    """
    shift_x = image.width // 2 + offset_x
    shift_y = image.height // 2 + offset_y
    sx, sy = start[0] + shift_x, start[1] + shift_y
    ex, ey = end[0] + shift_x, end[1] + shift_y
    dx, dy = ex - sx, ey - sy
    length = math.hypot(dx, dy)
    step = 1 / length if length else math.inf
    written = 0
    fraction = 0.0
    while fraction < 1:
        x = sx + dx * fraction
        y = sy + dy * fraction
        if 0 <= x < image.width and 0 <= y < image.height:
            color = interpolate_color(start_color, end_color, fraction)
            image.put_pixel(int(x), int(y), color)
            written += 1
        fraction += step
    return written