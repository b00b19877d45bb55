"""Perlin gradient noise."""

from __future__ import annotations

import itertools
import math

from .mathutils import random_int
from .vector import XYZ

__all__ = ["Perlin", "POINT_COUNT"]

POINT_COUNT = 256


class Perlin:
    """Lattice noise built from random vectors and shuffled permutations."""

    def __init__(self) -> None:
        self._gradients = [XYZ.random() for _ in range(POINT_COUNT)]
        self._perm_x = list(range(POINT_COUNT))
        self._perm_y = list(range(POINT_COUNT))
        self._perm_z = list(range(POINT_COUNT))
        for i in range(POINT_COUNT - 1, 0, -1):
            for perm in (self._perm_x, self._perm_y, self._perm_z):
                j = random_int(0, i)
                perm[i], perm[j] = perm[j], perm[i]

    def noise(self, p: XYZ) -> float:
        """Smoothed, trilinearly interpolated noise value at p."""
        fx, fy, fz = math.floor(p.x), math.floor(p.y), math.floor(p.z)
        u = p.x - fx
        v = p.y - fy
        w = p.z - fz
        u = u * u * (3 - 2 * u)
        v = v * v * (3 - 2 * v)
        w = w * w * (3 - 2 * w)
        i, j, k = int(fx), int(fy), int(fz)

        total = 0.0
        for di, dj, dk in itertools.product((0, 1), repeat=3):
            index = (
                self._perm_x[(i + di) & 255]
                ^ self._perm_y[(j + dj) & 255]
                ^ self._perm_z[(k + dk) & 255]
            )
            weight = XYZ(u - di, v - dj, w - dk)
            total += (
                self._gradients[index].dot(weight)
                * (di * u + (1 - di) * (1 - u))
                * (dj * v + (1 - dj) * (1 - v))
                * (dk * w + (1 - dk) * (1 - w))
            )
        return total

    def turbulence(self, p: XYZ, depth: int = 7) -> float:
        """Absolute weighted sum of noise octaves sampled at p."""
        sample = self.noise(p)
        total = sum(0.5**octave * sample for octave in range(depth))
        return abs(total)