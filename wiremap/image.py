"""In-memory pixel images with a packed, padded byte buffer."""

from __future__ import annotations

from typing import NamedTuple

_ROW_PAD_BITS = 32


class DataInfo(NamedTuple):
    """The raw buffer of an image and how its pixels are laid out."""

    data: bytearray
    bits_per_pixel: int
    size_line: int
    big_endian: bool


class Image:
    """A width x height image whose rows are padded to 32 bits."""

    def __init__(self, width: int, height: int, bits_per_pixel: int = 32,
                 big_endian: bool = False) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if bits_per_pixel <= 0 or bits_per_pixel % 8:
            raise ValueError(
                f"bits per pixel must be a positive multiple of 8, got {bits_per_pixel}"
            )
        self.width = width
        self.height = height
        self.bits_per_pixel = bits_per_pixel
        self.big_endian = bool(big_endian)
        row_bits = width * bits_per_pixel
        self.size_line = (row_bits + _ROW_PAD_BITS - 1) // _ROW_PAD_BITS * (_ROW_PAD_BITS // 8)
        self.data = bytearray(self.size_line * height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def _byteorder(self) -> str:
        return "big" if self.big_endian else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.size_line + x * self.bytes_per_pixel

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y), truncated to the pixel's size."""
        size = self.bytes_per_pixel
        value = color & ((1 << (8 * size)) - 1)
        offset = self._offset(x, y)
        self.data[offset:offset + size] = value.to_bytes(size, self._byteorder)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the pixel value stored at (x, y)."""
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset:offset + self.bytes_per_pixel], self._byteorder)

    def data_info(self) -> DataInfo:
        """Return the buffer together with its pixel size, row size and byte order."""
        return DataInfo(self.data, self.bits_per_pixel, self.size_line, self.big_endian)