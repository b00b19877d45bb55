"""Volumes of constant density such as smoke or fog."""

from __future__ import annotations

import math

from .aabb import AABB
from .hittable import Geometry, HitRecord
from .mathutils import DOUBLE_INFINITY, random_double
from .ray import Ray
from .vector import XY, XYZ

__all__ = ["ConstantMedium"]


class ConstantMedium(Geometry):
    """A medium filling a boundary, hit at a random depth set by density."""

    def __init__(self, boundary: Geometry, density: float) -> None:
        super().__init__()
        if density == 0:
            raise ValueError("density must be non-zero")
        self.boundary = boundary
        self.negative_inverse_density = -1.0 / density

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        return self.boundary.bounding_box(t0, t1)

    def hit(self, ray: Ray, min_t: float, max_t: float) -> HitRecord | None:
        entry = self.boundary.hit(ray, -DOUBLE_INFINITY, DOUBLE_INFINITY)
        if entry is None:
            return None
        exit_ = self.boundary.hit(ray, entry.t + 0.0001, DOUBLE_INFINITY)
        if exit_ is None:
            return None

        t_in = max(entry.t, min_t)
        t_out = min(exit_.t, max_t)
        if t_in >= t_out:
            return None
        t_in = max(t_in, 0.0)

        ray_length = ray.direction.length()
        distance_inside = (t_out - t_in) * ray_length
        sample = random_double()
        if sample <= 0.0:
            return None
        hit_distance = self.negative_inverse_density * math.log(sample)
        if hit_distance > distance_inside:
            return None

        t = t_in + hit_distance / ray_length
        return HitRecord(ray.at(t), XYZ(1.0, 0.0, 0.0), t, True, self)

    def uv(self, point: XYZ) -> XY:
        return self.boundary.uv(point)