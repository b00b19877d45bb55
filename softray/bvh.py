"""Bounding volume hierarchies over geometry."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable

from .aabb import AABB
from .hittable import Geometry, HitRecord
from .mathutils import random_int
from .ray import Ray
from .vector import XY, XYZ

__all__ = ["BVHNode"]


def _box_less(lhs: Geometry, rhs: Geometry, axis: int) -> bool:
    lhs_box = lhs.bounding_box(0.0, 0.0)
    rhs_box = rhs.bounding_box(0.0, 0.0)
    if lhs_box is None or rhs_box is None:
        return False
    return lhs_box.minimum[axis] < rhs_box.minimum[axis]


class BVHNode(Geometry):
    """A node joining two children under one bounding box."""

    def __init__(self, left: Geometry, right: Geometry, t0: float = 0.0, t1: float = 0.0) -> None:
        super().__init__()
        self.left = left
        self.right = right
        left_box = left.bounding_box(t0, t1)
        right_box = right.bounding_box(t0, t1)
        if left_box is not None and right_box is not None:
            self.box = left_box.merge(right_box)
        else:
            self.box = AABB()

    @classmethod
    def from_list(cls, hittables: Iterable[Geometry], t0: float, t1: float) -> "BVHNode":
        """Build a tree over the objects, splitting along a random axis at each level."""
        objects = list(hittables)
        if not objects:
            raise ValueError("cannot build a hierarchy over no objects")
        return cls._build(objects, t0, t1)

    @classmethod
    def _build(cls, objects: list[Geometry], t0: float, t1: float) -> "BVHNode":
        axis = random_int(0, 2)
        if len(objects) == 1:
            left = right = objects[0]
        elif len(objects) == 2:
            a, b = objects
            left, right = (a, b) if _box_less(a, b, axis) else (b, a)
        else:

            def compare(a: Geometry, b: Geometry) -> int:
                if _box_less(a, b, axis):
                    return -1
                if _box_less(b, a, axis):
                    return 1
                return 0

            ordered = sorted(objects, key=cmp_to_key(compare))
            mid = len(ordered) // 2
            left = cls._build(ordered[:mid], t0, t1)
            right = cls._build(ordered[mid:], t0, t1)
        return cls(left, right, t0, t1)

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        return self.box

    def hit(self, ray: Ray, min_t: float, max_t: float) -> HitRecord | None:
        """The left child's hit if it has one, otherwise the right child's."""
        if not self.box.hit(ray, min_t, max_t):
            return None
        record = self.left.hit(ray, min_t, max_t)
        if record is not None:
            return record
        return self.right.hit(ray, min_t, max_t)

    def uv(self, point: XYZ) -> XY:
        return self.left.uv(point)