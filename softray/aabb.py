"""Axis-aligned bounding boxes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .ray import Ray
from .vector import XYZ

__all__ = ["AABB"]


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


def _inverse(d: float) -> float:
    if d == 0.0:
        return math.copysign(math.inf, d)
    return 1.0 / d


@dataclass(frozen=True)
class AABB:
    """A box spanned by its minimum and maximum corners."""

    minimum: XYZ = field(default_factory=XYZ)
    maximum: XYZ = field(default_factory=XYZ)

    def hit(self, ray: Ray, min_t: float, max_t: float) -> bool:
        """Whether the ray crosses every slab of the box within [min_t, max_t]."""
        for low, high, origin, direction in zip(self.minimum, self.maximum, ray.origin, ray.direction):
            inverse = _inverse(direction)
            t_near = (low - origin) * inverse
            t_far = (high - origin) * inverse
            if inverse < 0.0:
                t_near, t_far = t_far, t_near
            if _fmin(max_t, t_far) <= _fmax(min_t, t_near):
                return False
        return True

    def merge(self, other: "AABB") -> "AABB":
        """The smallest box enclosing this box and other."""
        small = XYZ(*(_fmin(a, b) for a, b in zip(self.minimum, other.minimum)))
        big = XYZ(*(_fmax(a, b) for a, b in zip(self.maximum, other.maximum)))
        return AABB(small, big)