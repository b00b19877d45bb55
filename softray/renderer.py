"""Sampling renderers that trace every pixel of an image."""

from __future__ import annotations

import logging
import math
import time
from os import PathLike
from pathlib import Path

from .camera import Camera
from .exporter import export_image
from .framebuffer import FrameBuffer, PixelFormat
from .hittable import HittableList
from .mathutils import DOUBLE_EPS, DOUBLE_INFINITY, random_double
from .ray import Ray
from .vector import Color

__all__ = ["Renderer", "EmissiveRenderer", "sky_color", "gamma_correct"]

logger = logging.getLogger(__name__)

_WHITE = Color(1.0, 1.0, 1.0)
_SKY_BLUE = Color(0.5, 0.7, 1.0)
_BLACK = Color(0.0, 0.0, 0.0)


def sky_color(ray: Ray) -> Color:
    """A vertical gradient from white below to light blue above."""
    unit = ray.direction.normalized()
    factor = 0.5 * (unit.y + 1.0)
    return (1.0 - factor) * _WHITE + factor * _SKY_BLUE


def _clamp01(value: float) -> float:
    return min(max(value, 0.0), 1.0)


def gamma_correct(color: Color, scale: float) -> Color:
    """Average an accumulated colour by scale, apply gamma 2 and clamp to [0, 1]."""
    return Color(
        *(_clamp01(math.sqrt(max(component * scale, 0.0))) for component in color)
    )


def _check_size(width: int, height: int) -> None:
    if width < 2 or height < 2:
        raise ValueError(f"image must be at least 2x2 pixels, got {width}x{height}")


class Renderer:
    """Renders a world into an RGBA frame buffer, several samples per pixel."""

    def __init__(
        self, width: int, height: int, sample_times: int = 100, max_depth: int = 50
    ) -> None:
        _check_size(width, height)
        self.frame_buffer = FrameBuffer(width, height, PixelFormat.RGBA)
        self.sample_times = sample_times
        self.max_depth = max_depth

    def ray_color(self, ray: Ray, world: HittableList, depth: int) -> Color:
        """The colour gathered along ray, following at most depth bounces."""
        if depth <= 0:
            return Color(1.0, 1.0, 1.0)

        record = world.hit(ray, DOUBLE_EPS, DOUBLE_INFINITY)
        if record is not None and record.obj is not None:
            material = record.obj.material
            if material is not None:
                scattered = material.scatter(ray, record)
                if scattered is None:
                    return Color(0.0, 0.0, 0.0)
                return scattered.attenuation * self.ray_color(scattered.ray, world, depth - 1)

        return sky_color(ray)

    def render(self, camera: Camera, world: HittableList) -> FrameBuffer:
        """Trace every pixel of the frame buffer and return it."""
        if self.sample_times < 1:
            raise ValueError("sample_times must be at least 1")

        start = time.monotonic()
        width = self.frame_buffer.width
        height = self.frame_buffer.height
        total = width * height
        scale = 1.0 / self.sample_times
        done = 0

        for j in range(height - 1, -1, -1):
            for i in range(width):
                accumulated = Color()
                for _ in range(self.sample_times):
                    u = (i + random_double()) / (width - 1)
                    v = (j + random_double()) / (height - 1)
                    accumulated = accumulated + self.ray_color(
                        camera.get_ray(u, v), world, self.max_depth
                    )
                index = (height - 1 - j) * width + i
                self.frame_buffer.fill_index(index, gamma_correct(accumulated, scale))
                done += 1
                logger.debug("filled pixel %d, progress %d/%d", index, done, total)

        logger.info("finished rendering in %d seconds", int(time.monotonic() - start))
        return self.frame_buffer

    def save(self, path: str | PathLike[str]) -> Path:
        """Write the frame buffer to an image file and return the path written.

        An existing file is kept; a time-stamped name is used instead.
        """
        return export_image(self.frame_buffer, path, False)


class EmissiveRenderer(Renderer):
    """A renderer for scenes lit by their own lights against a black sky."""

    def ray_color(self, ray: Ray, world: HittableList, depth: int) -> Color:
        if depth <= 0:
            return Color(1.0, 1.0, 1.0)

        record = world.hit(ray, DOUBLE_EPS, DOUBLE_INFINITY)
        if record is None:
            return Color(0.0, 0.0, 0.0)

        obj = record.obj
        if obj is None or obj.material is None:
            return Color(0.0, 0.0, 0.0)

        material = obj.material
        uv = obj.uv(record.point)
        emitted = material.emitted(uv.x, uv.y, record.point)
        scattered = material.scatter(ray, record)
        if scattered is None:
            return emitted
        return emitted + scattered.attenuation * self.ray_color(scattered.ray, world, depth - 1)