"""Textures that map a surface point to a colour."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from os import PathLike

from PIL import Image

from .perlin import Perlin
from .vector import XYZ, Color

__all__ = [
    "Texture",
    "SolidColor",
    "CheckerTexture",
    "NoiseTexture",
    "MarbledTexture",
    "TurbulenceTexture",
    "ImageTexture",
]


class Texture(ABC):
    """A colour that may depend on texture coordinates and position."""

    @abstractmethod
    def value(self, u: float, v: float, p: XYZ) -> Color:
        """The colour at texture coordinates (u, v) and point p."""


class SolidColor(Texture):
    """The same colour everywhere."""

    def __init__(self, color: Color = Color()) -> None:
        self.color = color

    def value(self, u: float, v: float, p: XYZ) -> Color:
        return self.color


def _as_texture(source: Texture | Color) -> Texture:
    return source if isinstance(source, Texture) else SolidColor(source)


class CheckerTexture(Texture):
    """A 3D checker pattern alternating between two textures."""

    def __init__(self, odd: Texture | Color, even: Texture | Color) -> None:
        self.odd = _as_texture(odd)
        self.even = _as_texture(even)

    def value(self, u: float, v: float, p: XYZ) -> Color:
        sines = math.sin(10.0 * p.x) * math.sin(10.0 * p.y) * math.sin(10.0 * p.z)
        if sines > 1e-9:
            return self.even.value(u, v, p)
        return self.odd.value(u, v, p)


class NoiseTexture(Texture):
    """Grey Perlin noise, sampled at the point times scale."""

    def __init__(self, scale: float = 1.0) -> None:
        self.scale = scale
        self._noise = Perlin()

    def value(self, u: float, v: float, p: XYZ) -> Color:
        return Color(0.5, 0.5, 0.5) * (1.0 + self._noise.noise(p * self.scale))


class MarbledTexture(Texture):
    """Marble-like veins: a sine along z phase-shifted by turbulence."""

    def __init__(self, scale: float = 1.0) -> None:
        self.scale = scale
        self._noise = Perlin()

    def value(self, u: float, v: float, p: XYZ) -> Color:
        phase = self.scale * p.z + 10.0 * self._noise.turbulence(p)
        return Color(0.5, 0.5, 0.5) * (1.0 + math.sin(phase))


class TurbulenceTexture(Texture):
    """Grey turbulence, sampled at the point times scale."""

    def __init__(self, scale: float = 1.0) -> None:
        self.scale = scale
        self._noise = Perlin()

    def value(self, u: float, v: float, p: XYZ) -> Color:
        return Color(1.0, 1.0, 1.0) * self._noise.turbulence(p * self.scale)


class ImageTexture(Texture):
    """An RGB image mapped onto (u, v); solid blue if the image cannot be read."""

    MISSING = Color(0.0, 0.0, 1.0)

    def __init__(self, path: str | PathLike[str]) -> None:
        self.width = 0
        self.height = 0
        self._data: bytes | None = None
        try:
            with Image.open(path) as image:
                rgb = image.convert("RGB")
                self.width, self.height = rgb.size
                self._data = rgb.tobytes()
        except OSError:
            self._data = None

    @property
    def loaded(self) -> bool:
        return self._data is not None

    def value(self, u: float, v: float, p: XYZ) -> Color:
        if self._data is None:
            return self.MISSING

        # Texture v runs bottom to top while image rows run top to bottom.
        u = min(max(u, 0.0), 1.0)
        v = 1.0 - min(max(v, 0.0), 1.0)
        i = int(u * (self.width - 0.0001))
        j = int(v * (self.height - 0.0001))
        start = (j * self.width + i) * 3
        r, g, b = self._data[start : start + 3]
        factor = 1.0 / 255.0
        return Color(factor * r, factor * g, factor * b)