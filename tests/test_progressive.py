import pytest

from softray.camera import Camera
from softray.framebuffer import FrameBuffer, PixelFormat
from softray.hittable import HittableList
from softray.material import DiffuseLight
from softray.progressive import ProgressiveRenderer
from softray.ray import Ray
from softray.sphere import Sphere
from softray.vector import XYZ, Color


def _run(renderer, camera, world, limit=10000):
    for count in range(1, limit + 1):
        if renderer.step(camera, world):
            return count
    raise AssertionError("renderer did not finish")


def test_first_step_is_not_finished():
    renderer = ProgressiveRenderer(FrameBuffer(3, 3, PixelFormat.BGRA), sample_times=3, max_depth=2)
    assert renderer.step(Camera.simple(90.0, 1.0), HittableList()) is False
    assert renderer.finished is False


def test_finishes_and_stays_finished():
    renderer = ProgressiveRenderer(FrameBuffer(3, 3, PixelFormat.BGRA), sample_times=3, max_depth=2)
    camera = Camera.simple(90.0, 1.0)
    world = HittableList()
    steps = _run(renderer, camera, world)
    assert steps > 9
    assert renderer.finished is True
    assert renderer.step(camera, world) is True


def test_more_samples_take_more_steps():
    camera = Camera.simple(90.0, 1.0)
    world = HittableList()
    few = _run(ProgressiveRenderer(FrameBuffer(3, 3), sample_times=1, max_depth=1), camera, world)
    many = _run(ProgressiveRenderer(FrameBuffer(3, 3), sample_times=6, max_depth=1), camera, world)
    assert many > few


def test_rendered_pixel_is_opaque():
    buffer = FrameBuffer(3, 3, PixelFormat.BGRA)
    renderer = ProgressiveRenderer(buffer, sample_times=1, max_depth=2)
    _run(renderer, Camera.simple(90.0, 1.0), HittableList())
    # Column 1, row 1 lands at pixel (1, 1).
    assert buffer.data[(1 * 3 + 1) * 4 + 3] == 255


def test_ray_color_background_and_depth():
    renderer = ProgressiveRenderer(FrameBuffer(3, 3), sample_times=1, max_depth=2)
    up = Ray(XYZ(), XYZ(0.0, 1.0, 0.0))
    assert renderer.ray_color(up, HittableList(), 3) == Color(0.5, 0.7, 1.0)
    assert renderer.ray_color(up, HittableList(), 0) == Color(1.0, 1.0, 1.0)


def test_ray_color_absorbed_is_black():
    renderer = ProgressiveRenderer(FrameBuffer(3, 3), sample_times=1, max_depth=2)
    world = HittableList()
    sphere = Sphere(XYZ(0.0, 0.0, -1.0), 0.5)
    sphere.set_material(DiffuseLight(Color(2.0, 2.0, 2.0)))
    world.add(sphere)
    ray = Ray(XYZ(), XYZ(0.0, 0.0, -1.0))
    assert renderer.ray_color(ray, world, 3) == Color(0.0, 0.0, 0.0)


def test_invalid_sample_times():
    with pytest.raises(ValueError):
        ProgressiveRenderer(FrameBuffer(3, 3), sample_times=0)