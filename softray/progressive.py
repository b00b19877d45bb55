"""A renderer that refines an image one pixel per step."""

from __future__ import annotations

import logging
import time

from .camera import Camera
from .framebuffer import FrameBuffer
from .hittable import HittableList
from .mathutils import DOUBLE_EPS, DOUBLE_INFINITY, random_double
from .ray import Ray
from .renderer import _check_size, gamma_correct, sky_color
from .vector import Color

__all__ = ["ProgressiveRenderer"]

logger = logging.getLogger(__name__)


class ProgressiveRenderer:
    """Renders column by column in passes, each pass adding more samples.

    Each call to step traces one pixel, so a display can show the image
    while it improves.  Accumulated samples are kept between passes.
    """

    def __init__(
        self, frame_buffer: FrameBuffer, sample_times: int = 100, max_depth: int = 50
    ) -> None:
        _check_size(frame_buffer.width, frame_buffer.height)
        if sample_times < 1:
            raise ValueError("sample_times must be at least 1")
        self.frame_buffer = frame_buffer
        self.sample_times = sample_times
        self.max_depth = max_depth
        self.finished = False
        self._cache = [Color()] * (frame_buffer.width * frame_buffer.height)
        self._start = time.monotonic()
        self._pixel_count = 0
        self._i = 0
        self._j = 0
        self._last_samples = 0
        self._current_samples = 1

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

    def step(self, camera: Camera, world: HittableList) -> bool:
        """Advance by one pixel; return True once all passes are done."""
        if self.finished:
            return True

        width = self.frame_buffer.width
        height = self.frame_buffer.height

        self._j += 1
        if self._j >= height:
            self._j = 0
            self._i += 1
            if self._i >= width:
                if self._current_samples >= self.sample_times:
                    self.finished = True
                    logger.info(
                        "finished rendering in %d seconds", int(time.monotonic() - self._start)
                    )
                    return True
                self._last_samples = self._current_samples
                increment = max(1, self.sample_times // 3)
                self._current_samples = min(self._current_samples + increment, self.sample_times)
                self._i = 0
                self._j = 0
                self._pixel_count = 0
            return False

        i, j = self._i, self._j
        cache_index = i + j * width
        color = self._cache[cache_index]
        for _ in range(self._current_samples - self._last_samples):
            u = (i + random_double()) / (width - 1)
            v = (j + random_double()) / (height - 1)
            color = color + self.ray_color(camera.get_ray(u, v), world, self.max_depth)
        self._cache[cache_index] = color

        pixel_index = width * height - (j + 1) * width + i
        self.frame_buffer.fill_index(
            pixel_index, gamma_correct(color, 1.0 / self._current_samples)
        )
        self._pixel_count += 1
        logger.debug(
            "filled pixel %d, progress %d/%d", pixel_index, self._pixel_count, width * height
        )
        return False