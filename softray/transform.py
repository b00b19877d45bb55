"""Instances that rotate or translate other geometry."""

from __future__ import annotations

import math

from .aabb import AABB
from .hittable import Geometry, HitRecord
from .mathutils import degrees_to_radians
from .ray import Ray
from .vector import XY, XYZ

__all__ = ["Rotate", "Translate"]


class Rotate(Geometry):
    """Geometry rotated about the y axis by an angle in degrees."""

    def __init__(self, obj: Geometry, angle: float) -> None:
        super().__init__()
        self.obj = obj
        radians = degrees_to_radians(angle)
        self.sin_theta = math.sin(radians)
        self.cos_theta = math.cos(radians)

    def _to_object(self, p: XYZ) -> XYZ:
        c, s = self.cos_theta, self.sin_theta
        return XYZ(c * p.x - s * p.z, p.y, s * p.x + c * p.z)

    def _to_world(self, p: XYZ) -> XYZ:
        c, s = self.cos_theta, self.sin_theta
        return XYZ(c * p.x + s * p.z, p.y, -s * p.x + c * p.z)

    def hit(self, ray: Ray, min_t: float, max_t: float) -> HitRecord | None:
        rotated = Ray(self._to_object(ray.origin), self._to_object(ray.direction), ray.time)
        record = self.obj.hit(rotated, min_t, max_t)
        if record is None:
            return None
        record.point = self._to_world(record.point)
        normal = self._to_world(record.normal)
        front = rotated.direction.dot(normal) < 0
        record.normal = normal if front else -normal
        return record

    def uv(self, point: XYZ) -> XY:
        return self.obj.uv(point)

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        return self.obj.bounding_box(t0, t1)


class Translate(Geometry):
    """Geometry moved by a fixed offset."""

    def __init__(self, obj: Geometry, offset: XYZ) -> None:
        super().__init__()
        self.obj = obj
        self.offset = offset

    def hit(self, ray: Ray, min_t: float, max_t: float) -> HitRecord | None:
        moved = Ray(ray.origin - self.offset, ray.direction, ray.time)
        record = self.obj.hit(moved, min_t, max_t)
        if record is None:
            return None
        record.point = record.point + self.offset
        normal = record.normal
        front = moved.direction.dot(normal) < 0
        record.normal = normal if front else -normal
        return record

    def uv(self, point: XYZ) -> XY:
        return self.obj.uv(point)

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        box = self.obj.bounding_box(t0, t1)
        if box is None:
            return None
        return AABB(box.minimum + self.offset, box.maximum + self.offset)