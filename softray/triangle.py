"""Triangles and parallelograms."""

from __future__ import annotations

import math

from .aabb import AABB
from .hittable import Geometry, HitRecord
from .mathutils import DOUBLE_EPS
from .ray import Ray
from .vector import UV, XYZ

__all__ = ["Triangle", "Rect"]


class Triangle(Geometry):
    """A flat triangle with vertices p0, p1 and p2."""

    def __init__(self, p0: XYZ, p1: XYZ, p2: XYZ) -> None:
        super().__init__()
        self.p0, self.p1, self.p2 = p0, p1, p2
        normal = (p2 - p0).cross(p1 - p0)
        if normal.length() == 0.0:
            raise ValueError("degenerate triangle: vertices are collinear")
        self.normal = normal.normalized()
        self._distance = -self.normal.dot(p0)

        self._edge1 = p1 - p0
        self._edge2 = p2 - p0
        self._dot11 = self._edge1.dot(self._edge1)
        self._dot22 = self._edge2.dot(self._edge2)
        self._dot12 = self._edge1.dot(self._edge2)
        denominator = self._dot11 * self._dot22 - self._dot12 * self._dot12
        self._factor = 1.0 / denominator if denominator else math.inf

    def _weights(self, point: XYZ) -> tuple[float, float]:
        offset = point - self.p0
        d1 = offset.dot(self._edge1)
        d2 = offset.dot(self._edge2)
        w1 = self._factor * (self._dot22 * d1 - self._dot12 * d2)
        w2 = self._factor * (-self._dot12 * d1 + self._dot11 * d2)
        return w1, w2

    def contains(self, w0: float, w1: float, w2: float) -> bool:
        """Whether barycentric weights lie strictly inside the triangle."""
        return w0 > DOUBLE_EPS and w1 > DOUBLE_EPS and w2 > DOUBLE_EPS

    def hit(self, ray: Ray, min_t: float, max_t: float) -> HitRecord | None:
        denominator = self.normal.dot(ray.direction)
        if denominator == 0.0:
            return None
        t = -(self.normal.dot(ray.origin) + self._distance) / denominator
        if t < min_t or t > max_t:
            return None

        point = ray.origin + ray.direction * t
        w1, w2 = self._weights(point)
        if not self.contains(1.0 - w1 - w2, w1, w2):
            return None

        front = ray.direction.dot(self.normal) < DOUBLE_EPS
        return HitRecord(point, self.normal if front else -self.normal, t, front, self)

    def uv(self, point: XYZ) -> UV:
        """Weights of the p1 and p2 edges that reach point from p0."""
        return UV(*self._weights(point))

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        corners = (self.p0, self.p1, self.p2)
        low = XYZ(*(min(axis) for axis in zip(*corners)))
        high = XYZ(*(max(axis) for axis in zip(*corners)))
        return AABB(low, high)


class Rect(Triangle):
    """The parallelogram spanned by p1 - p0 and p2 - p0."""

    def contains(self, w0: float, w1: float, w2: float) -> bool:
        return 0.0 <= w1 <= 1.0 and 0.0 <= w2 <= 1.0