"""Materials describing how surfaces scatter and emit light."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from .hittable import HitRecord
from .ray import Ray
from .texture import SolidColor, Texture
from .vector import XYZ, Color, random_in_unit_sphere, reflect, refract

__all__ = [
    "Scatter",
    "Material",
    "Lambertian",
    "Metal",
    "Dielectric",
    "DiffuseLight",
    "Isotropic",
]


@dataclass(frozen=True)
class Scatter:
    """A scattered ray and the colour it is attenuated by."""

    attenuation: Color
    ray: Ray


def _as_texture(source: Texture | Color) -> Texture:
    return source if isinstance(source, Texture) else SolidColor(source)


class Material(ABC):
    """How a surface responds to an incoming ray."""

    def emitted(self, u: float, v: float, p: XYZ) -> Color:
        """Light given off at the point; black unless overridden."""
        return Color(0.0, 0.0, 0.0)

    @abstractmethod
    def scatter(self, ray: Ray, hit: HitRecord) -> Scatter | None:
        """The scattered ray, or None if the ray is absorbed."""


class Lambertian(Material):
    """An ideal diffuse surface."""

    def __init__(self, albedo: Texture | Color) -> None:
        self.albedo = _as_texture(albedo)

    def scatter(self, ray: Ray, hit: HitRecord) -> Scatter | None:
        direction = hit.normal + random_in_unit_sphere().normalized()
        if direction.is_zero():
            direction = hit.normal
        attenuation = self.albedo.value(hit.uv.x, hit.uv.y, hit.point)
        return Scatter(attenuation, Ray(hit.point, direction, ray.time))


class Metal(Material):
    """A mirror-like surface blurred by fuzz."""

    def __init__(self, albedo: Color, fuzz: float = 0.0) -> None:
        self.albedo = albedo
        self.fuzz = fuzz

    def scatter(self, ray: Ray, hit: HitRecord) -> Scatter | None:
        reflected = reflect(ray.direction.normalized(), hit.normal)
        direction = reflected + self.fuzz * random_in_unit_sphere().normalized()
        return Scatter(self.albedo, Ray(hit.point, direction, ray.time))


class Dielectric(Material):
    """A clear material such as glass that refracts or reflects."""

    def __init__(self, refraction_index: float) -> None:
        self.refraction_index = refraction_index

    def scatter(self, ray: Ray, hit: HitRecord) -> Scatter | None:
        ratio = 1.0 / self.refraction_index if hit.front_face else self.refraction_index
        unit = ray.direction.normalized()
        cos_theta = min(unit.dot(hit.normal), 1.0)
        sin_theta = math.sqrt(max(0.0, 1.0 - cos_theta * cos_theta))
        if ratio * sin_theta > 1.0:
            direction = reflect(unit, hit.normal)
        else:
            direction = refract(unit, hit.normal, ratio)
        return Scatter(Color(1.0, 1.0, 1.0), Ray(hit.point, direction, ray.time))


class DiffuseLight(Material):
    """A light source that emits a texture and scatters nothing."""

    def __init__(self, emit: Texture | Color) -> None:
        self.emit = _as_texture(emit)

    def scatter(self, ray: Ray, hit: HitRecord) -> Scatter | None:
        return None

    def emitted(self, u: float, v: float, p: XYZ) -> Color:
        return self.emit.value(u, v, p)


class Isotropic(Material):
    """A participating medium that scatters in a random direction."""

    def __init__(self, albedo: Texture | Color) -> None:
        self.albedo = _as_texture(albedo)

    def scatter(self, ray: Ray, hit: HitRecord) -> Scatter | None:
        scattered = Ray(hit.point, random_in_unit_sphere(), ray.time)
        attenuation = self.albedo.value(hit.uv.x, hit.uv.y, hit.point)
        return Scatter(attenuation, scattered)