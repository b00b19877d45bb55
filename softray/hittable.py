"""Hit records, the geometry interface and lists of geometry."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable, Iterator

from .aabb import AABB
from .ray import Ray
from .vector import XY, XYZ

if TYPE_CHECKING:
    from .material import Material

__all__ = ["HitRecord", "Geometry", "HittableList"]


@dataclass
class HitRecord:
    """Where and how a ray met a piece of geometry."""

    point: XYZ
    normal: XYZ
    t: float
    front_face: bool
    obj: "Geometry | None" = None
    uv: XY = field(init=False, default_factory=XY)

    def __post_init__(self) -> None:
        if self.obj is not None:
            self.uv = self.obj.uv(self.normal)


class Geometry(ABC):
    """Something a ray can hit, with a material and optional linear motion."""

    def __init__(self) -> None:
        self.material: "Material | None" = None
        self.move_end_pos = XYZ()
        self.move_begin_time = 0.0
        self.move_end_time = 0.0

    def set_material(self, material: "Material | None") -> None:
        self.material = material

    def set_motion(self, end_pos: XYZ, begin_time: float, end_time: float) -> None:
        """Move linearly to end_pos between begin_time and end_time."""
        self.move_end_pos = end_pos
        self.move_begin_time = begin_time
        self.move_end_time = end_time

    @abstractmethod
    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        """A box enclosing the object during [t0, t1], if it has one."""

    @abstractmethod
    def hit(self, ray: Ray, min_t: float, max_t: float) -> HitRecord | None:
        """The hit of ray with this object for t in [min_t, max_t], if any."""

    @abstractmethod
    def uv(self, point: XYZ) -> XY:
        """Texture coordinates for a point."""


class HittableList:
    """An ordered collection of geometry hit as a whole."""

    def __init__(self, objects: Iterable[Geometry] = ()) -> None:
        self.objects: list[Geometry] = list(objects)

    def __len__(self) -> int:
        return len(self.objects)

    def __getitem__(self, index: int) -> Geometry:
        return self.objects[index]

    def __iter__(self) -> Iterator[Geometry]:
        return iter(self.objects)

    def add(self, obj: Geometry) -> Geometry:
        """Append obj and return it."""
        self.objects.append(obj)
        return obj

    def clear(self) -> None:
        self.objects.clear()

    def hit(self, ray: Ray, min_t: float, max_t: float) -> HitRecord | None:
        """The closest hit among all objects."""
        closest = max_t
        result = None
        for obj in self.objects:
            record = obj.hit(ray, min_t, closest)
            if record is not None:
                closest = record.t
                result = record
        return result

    def bounding_box(self, t0: float, t1: float) -> AABB | None:
        """Merged boxes of the objects, stopping at the first without one."""
        box = None
        for obj in self.objects:
            obj_box = obj.bounding_box(t0, t1)
            if obj_box is None:
                break
            box = obj_box if box is None else box.merge(obj_box)
        return box