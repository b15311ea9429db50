"""Off-screen 32-bit pixel images."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

BITS_PER_PIXEL = 32
_PAD_PIXELS = 32


@dataclass
class Image:
    """A ZPixmap-style image of 32-bit pixels stored row by row.

    ``endian`` is 0 for little-endian pixel storage and 1 for big-endian.
    """

    width: int
    height: int
    endian: int = 0
    bpp: int = field(init=False, default=BITS_PER_PIXEL)
    line_len: int = field(init=False)
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("image dimensions must be positive")
        if self.endian not in (0, 1):
            raise ValueError("endian must be 0 or 1")
        self.line_len = self.width * (self.bpp // 8)
        self.data = bytearray((self.width + _PAD_PIXELS) * self.height * 4)

    @property
    def _format(self) -> str:
        return ">I" if self.endian else "<I"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return y * self.line_len + x * (self.bpp // 8)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` (taken as a 32-bit value) at ``(x, y)``."""
        struct.pack_into(self._format, self.data, self._offset(x, y), color & 0xFFFFFFFF)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the 32-bit value stored at ``(x, y)``."""
        return struct.unpack_from(self._format, self.data, self._offset(x, y))[0]

    def to_bytes(self) -> bytes:
        """Return the visible rows of pixel data."""
        return bytes(self.data[: self.height * self.line_len])