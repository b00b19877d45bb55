"""Small immutable 3D and 2D vectors."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator

from .mathutils import DOUBLE_EPS, random_double

__all__ = [
    "XYZ",
    "Color",
    "XY",
    "UV",
    "random_in_unit_sphere",
    "random_in_unit_disk",
    "reflect",
    "refract",
]

_NUMBER = (int, float)


@dataclass(frozen=True, eq=False, slots=True)
class XYZ:
    """A three component vector, also used for colours."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @classmethod
    def splat(cls, value: float) -> "XYZ":
        """A vector with all components equal to value."""
        return cls(value, value, value)

    @classmethod
    def random(cls, low: float = 0.0, high: float = 1.0) -> "XYZ":
        """A vector with components drawn uniformly from [low, high)."""
        return cls(random_double(low, high), random_double(low, high), random_double(low, high))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y, self.z)[index]

    def __neg__(self) -> "XYZ":
        return XYZ(-self.x, -self.y, -self.z)

    def __add__(self, other):
        if isinstance(other, XYZ):
            return XYZ(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, _NUMBER):
            return XYZ(self.x + other, self.y + other, self.z + other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, XYZ):
            return XYZ(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, XYZ):
            return XYZ(self.x * other.x, self.y * other.y, self.z * other.z)
        if isinstance(other, _NUMBER):
            return XYZ(self.x * other, self.y * other, self.z * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, t):
        if isinstance(t, _NUMBER):
            return self * (1.0 / t)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, XYZ):
            return NotImplemented
        return (
            abs(self.x - other.x) < DOUBLE_EPS
            and abs(self.y - other.y) < DOUBLE_EPS
            and abs(self.z - other.z) < DOUBLE_EPS
        )

    def dot(self, other: "XYZ") -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: "XYZ") -> "XYZ":
        return XYZ(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y + self.z * self.z

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> "XYZ":
        """This vector scaled to unit length."""
        return self / self.length()

    def is_zero(self) -> bool:
        return abs(self.x) < DOUBLE_EPS and abs(self.y) < DOUBLE_EPS and abs(self.z) < DOUBLE_EPS


Color = XYZ


@dataclass(frozen=True, eq=False, slots=True)
class XY:
    """A two component vector, also used for texture coordinates."""

    x: float = 0.0
    y: float = 0.0

    @classmethod
    def splat(cls, value: float) -> "XY":
        return cls(value, value)

    @classmethod
    def random(cls, low: float = 0.0, high: float = 1.0) -> "XY":
        return cls(random_double(low, high), random_double(low, high))

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __getitem__(self, index: int) -> float:
        return (self.x, self.y)[index]

    def __neg__(self) -> "XY":
        return XY(-self.x, -self.y)

    def __add__(self, other):
        if isinstance(other, XY):
            return XY(self.x + other.x, self.y + other.y)
        if isinstance(other, _NUMBER):
            return XY(self.x + other, self.y + other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other):
        if isinstance(other, XY):
            return XY(self.x - other.x, self.y - other.y)
        if isinstance(other, _NUMBER):
            return XY(self.x - other, self.y - other)
        return NotImplemented

    def __mul__(self, other):
        if isinstance(other, XY):
            return XY(self.x * other.x, self.y * other.y)
        if isinstance(other, _NUMBER):
            return XY(self.x * other, self.y * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, t):
        if isinstance(t, _NUMBER):
            return self * (1.0 / t)
        return NotImplemented

    def __eq__(self, other):
        if not isinstance(other, XY):
            return NotImplemented
        return self.x == other.x and self.y == other.y

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def length(self) -> float:
        return math.sqrt(self.length_squared())

    def normalized(self) -> "XY":
        return self / self.length()

    def is_zero(self) -> bool:
        return abs(self.x) < DOUBLE_EPS and abs(self.y) < DOUBLE_EPS


UV = XY


def random_in_unit_sphere() -> XYZ:
    """A random point strictly inside the unit sphere."""
    while True:
        p = XYZ.random(-1.0, 1.0)
        if p.length_squared() < 1.0:
            return p


def random_in_unit_disk() -> XYZ:
    """A random point strictly inside the unit disk in the z = 0 plane."""
    while True:
        p = XYZ(random_double(-1.0, 1.0), random_double(-1.0, 1.0), 0.0)
        if p.length_squared() < 1.0:
            return p


def reflect(ray_in: XYZ, normal: XYZ) -> XYZ:
    """Mirror ray_in about the plane with the given normal."""
    return ray_in - ray_in.dot(normal) * 2 * normal


def refract(uv: XYZ, normal: XYZ, etai_over_etat: float) -> XYZ:
    """Refract the unit vector uv through a surface with the given normal."""
    cos_theta = min((-uv).dot(normal), 1.0)
    out_perp = etai_over_etat * (uv + cos_theta * normal)
    out_parallel = -math.sqrt(abs(1.0 - out_perp.length_squared())) * normal
    return out_perp + out_parallel