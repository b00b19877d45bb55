"""Spheres, optionally moving over time."""

from __future__ import annotations

import math

from .aabb import AABB
from .hittable import Geometry, HitRecord
from .mathutils import DOUBLE_EPS, PI
from .ray import Ray
from .vector import UV, XYZ

__all__ = ["Sphere"]


class Sphere(Geometry):
    """A sphere; a negative radius turns its normals inward."""

    def __init__(self, center: XYZ, radius: float) -> None:
        super().__init__()
        self.center = center
        self.radius = radius

    def center_at(self, time: float = 0.0) -> XYZ:
        """The centre at the given time, following the configured motion."""
        span = self.move_end_time - self.move_begin_time
        if abs(span) < DOUBLE_EPS:
            return self.center
        fraction = (time - self.move_begin_time) / span
        return self.center + fraction * (self.move_end_pos - self.center)

    def hit(self, ray: Ray, min_t: float, max_t: float) -> HitRecord | None:
        center = self.center_at(ray.time)
        to_origin = ray.origin - center
        a = ray.direction.length_squared()
        half_b = to_origin.dot(ray.direction)
        c = to_origin.length_squared() - self.radius * self.radius
        discriminant = half_b * half_b - a * c
        if discriminant < DOUBLE_EPS:
            return None

        root_of = math.sqrt(discriminant)
        root = (-half_b - root_of) / a
        if root < min_t or root > max_t:
            root = (-half_b + root_of) / a
            if root < min_t or root > max_t:
                return None

        point = ray.at(root)
        outward = (point - center) / self.radius
        front = ray.direction.dot(outward) < DOUBLE_EPS
        return HitRecord(point, outward if front else -outward, root, front, self)

    def uv(self, point: XYZ) -> UV:
        """Spherical coordinates of a unit point: u around y from -x, v from -y."""
        v_angle = math.acos(max(-1.0, min(1.0, -point.y)))
        u_angle = math.atan2(-point.z, point.x) + PI
        return UV((u_angle * 0.5) / PI, v_angle / PI)

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        r = XYZ.splat(self.radius)
        start, end = self.center_at(t0), self.center_at(t1)
        return AABB(start - r, start + r).merge(AABB(end - r, end + r))