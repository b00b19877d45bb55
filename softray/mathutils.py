"""Numeric constants and small helpers shared across the renderer."""

from __future__ import annotations

import math
import random

DOUBLE_EPS = 0.000000001
DOUBLE_INFINITY = math.inf
PI = 3.1415926535897932385

__all__ = [
    "DOUBLE_EPS",
    "DOUBLE_INFINITY",
    "PI",
    "degrees_to_radians",
    "radians_to_degrees",
    "random_int",
    "random_double",
    "reflectance",
]


def degrees_to_radians(degrees: float) -> float:
    """Convert an angle in degrees to radians."""
    return degrees * (PI / 180.0)


def radians_to_degrees(radians: float) -> float:
    """Convert an angle in radians to degrees."""
    return radians * (180.0 / PI)


def random_int(low: int, high: int) -> int:
    """Return a random integer in the closed range [low, high]."""
    return random.randint(low, high)


def random_double(low: float = 0.0, high: float = 1.0) -> float:
    """Return a random float in the half-open range [low, high)."""
    return low + (high - low) * random.random()


def reflectance(cosine: float, refraction_index: float) -> float:
    """Schlick's approximation of the reflectance of a dielectric."""
    r0 = (1.0 - refraction_index) / (1.0 + refraction_index)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * (1.0 - cosine) ** 5