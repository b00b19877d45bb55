"""A byte buffer of 8-bit four channel pixels."""

from __future__ import annotations

from enum import Enum

from .vector import XYZ

__all__ = ["PixelFormat", "FrameBuffer", "COMPONENTS"]

COMPONENTS = 4


class PixelFormat(Enum):
    """Byte order of the colour channels in a pixel."""

    RGBA = "RGBA"
    BGRA = "BGRA"


def _to_byte(value: float) -> int:
    return int(value) & 0xFF


class FrameBuffer:
    """Pixels stored row by row, four bytes each."""

    def __init__(
        self,
        width: int,
        height: int,
        pixel_format: PixelFormat = PixelFormat.RGBA,
        data: bytearray | None = None,
    ) -> None:
        size = width * height * COMPONENTS
        if data is None:
            data = bytearray(size)
        elif len(data) != size:
            raise ValueError(f"buffer holds {len(data)} bytes, expected {size}")
        self.width = width
        self.height = height
        self.pixel_format = pixel_format
        self.data = data

    def clear(self, value: XYZ, alpha: int = 255) -> None:
        """Set every pixel to the raw channel values of value."""
        pixel = self._pack(_to_byte(value.x), _to_byte(value.y), _to_byte(value.z), alpha)
        self.data[:] = pixel * (self.width * self.height)

    def fill_index(self, index: int, value: XYZ, alpha: int = 255) -> None:
        """Write a colour in [0, 1] to the pixel at a linear index."""
        self._write(index * COMPONENTS, value, alpha)

    def fill(self, x: int, y: int, value: XYZ, alpha: int = 255) -> int:
        """Write a colour in [0, 1] at (x, y); return the byte offset used."""
        byte_index = (y * self.width + x) * COMPONENTS
        self._write(byte_index, value, alpha)
        return byte_index

    def get_value(self, x: int, y: int) -> XYZ:
        """The raw red, green and blue bytes at (x, y)."""
        i = (y * self.width + x) * COMPONENTS
        d = self.data
        if self.pixel_format is PixelFormat.RGBA:
            return XYZ(d[i], d[i + 1], d[i + 2])
        return XYZ(d[i + 2], d[i + 1], d[i])

    def _pack(self, r: int, g: int, b: int, alpha: int) -> bytes:
        if self.pixel_format is PixelFormat.RGBA:
            return bytes((r, g, b, alpha & 0xFF))
        return bytes((b, g, r, alpha & 0xFF))

    def _write(self, byte_index: int, value: XYZ, alpha: int) -> None:
        # Out-of-range writes are ignored rather than raising.
        if byte_index < 0 or byte_index >= len(self.data):
            return
        r = _to_byte(255.999 * value.x)
        g = _to_byte(255.999 * value.y)
        b = _to_byte(255.999 * value.z)
        self.data[byte_index : byte_index + COMPONENTS] = self._pack(r, g, b, alpha)