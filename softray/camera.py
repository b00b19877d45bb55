"""A thin-lens camera that produces primary rays."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .mathutils import degrees_to_radians, random_double
from .ray import Ray
from .vector import XYZ, random_in_unit_disk

__all__ = ["Camera"]


@dataclass
class Camera:
    """Viewport geometry plus lens and shutter settings."""

    origin: XYZ
    lower_left_corner: XYZ
    horizontal: XYZ
    vertical: XYZ
    aspect_ratio: float
    u: XYZ = field(default_factory=XYZ)
    v: XYZ = field(default_factory=XYZ)
    w: XYZ = field(default_factory=XYZ)
    lens_radius: float = 0.0
    shutter_min: float = 0.0
    shutter_max: float = 0.0

    @classmethod
    def simple(cls, vertical_fov: float = 90.0, aspect_ratio: float = 16.0 / 9.0) -> "Camera":
        """A camera at the origin looking down -z with focal length 1."""
        h = math.tan(degrees_to_radians(vertical_fov) * 0.5)
        viewport_height = 2.0 * h
        viewport_width = aspect_ratio * viewport_height
        focal_length = 1.0
        origin = XYZ(0.0, 0.0, 0.0)
        horizontal = XYZ(viewport_width, 0.0, 0.0)
        vertical = XYZ(0.0, viewport_height, 0.0)
        corner = origin - horizontal * 0.5 - vertical * 0.5 - XYZ(0.0, 0.0, focal_length)
        return cls(origin, corner, horizontal, vertical, aspect_ratio)

    @classmethod
    def look_at(
        cls,
        look_from: XYZ,
        look_at: XYZ,
        viewport_up: XYZ,
        vertical_fov: float = 90.0,
        aspect_ratio: float = 16.0 / 9.0,
        aperture: float = 0.0,
        focus_dist: float = 1.0,
    ) -> "Camera":
        """A camera placed at look_from and aimed at look_at."""
        viewport_height = 2.0 * math.tan(degrees_to_radians(vertical_fov) * 0.5)
        viewport_width = aspect_ratio * viewport_height
        w = (look_from - look_at).normalized()
        u = viewport_up.cross(w).normalized()
        v = w.cross(u)
        horizontal = focus_dist * viewport_width * u
        vertical = focus_dist * viewport_height * v
        corner = look_from - (vertical + horizontal) * 0.5 - focus_dist * w
        return cls(
            look_from,
            corner,
            horizontal,
            vertical,
            aspect_ratio,
            u=u,
            v=v,
            w=w,
            lens_radius=aperture * 0.5,
        )

    def set_shutter_time(self, min_time: float, max_time: float) -> None:
        """Rays get times drawn uniformly from [min_time, max_time)."""
        self.shutter_min = min_time
        self.shutter_max = max_time

    def get_ray(self, u: float, v: float) -> Ray:
        """The ray through viewport coordinates (u, v), each in [0, 1]."""
        rd = self.lens_radius * random_in_unit_disk()
        offset = self.u * rd.x + self.v * rd.y
        direction = self.lower_left_corner + u * self.horizontal + v * self.vertical - self.origin
        time = random_double(self.shutter_min, self.shutter_max)
        return Ray(self.origin + offset, direction - offset, time)