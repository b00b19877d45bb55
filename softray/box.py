"""Axis-aligned boxes built from six parallelogram faces."""

from __future__ import annotations

from .aabb import AABB
from .hittable import Geometry, HitRecord, HittableList
from .material import Material
from .ray import Ray
from .triangle import Rect
from .vector import UV, XYZ

__all__ = ["Box"]


class Box(Geometry):
    """A box spanned by two opposite corners; each face is its own Rect."""

    def __init__(self, p0: XYZ, p1: XYZ) -> None:
        super().__init__()
        self.p0 = p0
        self.p1 = p1
        x0, y0, z0 = p0
        x1, y1, z1 = p1
        self.faces = HittableList(
            [
                Rect(XYZ(x0, y0, z0), XYZ(x1, y0, z0), XYZ(x0, y1, z0)),
                Rect(XYZ(x0, y0, z1), XYZ(x1, y0, z1), XYZ(x0, y1, z1)),
                Rect(XYZ(x0, y0, z0), XYZ(x0, y0, z1), XYZ(x0, y1, z0)),
                Rect(XYZ(x1, y0, z0), XYZ(x1, y0, z1), XYZ(x1, y1, z0)),
                Rect(XYZ(x0, y0, z0), XYZ(x0, y0, z1), XYZ(x1, y0, z0)),
                Rect(XYZ(x0, y1, z0), XYZ(x0, y1, z1), XYZ(x1, y1, z0)),
            ]
        )

    def hit(self, ray: Ray, min_t: float, max_t: float) -> HitRecord | None:
        return self.faces.hit(ray, min_t, max_t)

    def uv(self, point: XYZ) -> UV:
        # Each face computes its own texture coordinates.
        return UV(0.0, 0.0)

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        return AABB(self.p0, self.p1)

    def set_material(self, material: Material | None) -> None:
        """Give every face the material."""
        for face in self.faces:
            face.set_material(material)