import pytest
from PIL import Image

from softray.camera import Camera
from softray.exporter import UnsupportedFormatError
from softray.hittable import HittableList
from softray.material import DiffuseLight, Lambertian, Metal
from softray.ray import Ray
from softray.renderer import EmissiveRenderer, Renderer, gamma_correct, sky_color
from softray.sphere import Sphere
from softray.vector import XYZ, Color


def _world_with(material):
    world = HittableList()
    sphere = Sphere(XYZ(0.0, 0.0, -1.0), 0.5)
    sphere.set_material(material)
    world.add(sphere)
    return world


FORWARD = Ray(XYZ(0.0, 0.0, 0.0), XYZ(0.0, 0.0, -1.0))


def test_depth_exhausted_returns_white():
    renderer = Renderer(4, 4)
    assert renderer.ray_color(FORWARD, HittableList(), 0) == Color(1.0, 1.0, 1.0)


def test_background_gradient_ends():
    renderer = Renderer(4, 4)
    up = Ray(XYZ(), XYZ(0.0, 1.0, 0.0))
    down = Ray(XYZ(), XYZ(0.0, -1.0, 0.0))
    assert renderer.ray_color(up, HittableList(), 5) == Color(0.5, 0.7, 1.0)
    assert renderer.ray_color(down, HittableList(), 5) == Color(1.0, 1.0, 1.0)


def test_object_without_material_shows_background():
    renderer = Renderer(4, 4)
    world = _world_with(None)
    assert renderer.ray_color(FORWARD, world, 5) == sky_color(FORWARD)


def test_absorbing_material_is_black():
    renderer = Renderer(4, 4)
    world = _world_with(DiffuseLight(Color(4.0, 4.0, 4.0)))
    assert renderer.ray_color(FORWARD, world, 5) == Color(0.0, 0.0, 0.0)


def test_black_lambertian_is_black():
    renderer = Renderer(4, 4)
    world = _world_with(Lambertian(Color(0.0, 0.0, 0.0)))
    assert renderer.ray_color(FORWARD, world, 5) == Color(0.0, 0.0, 0.0)


def test_metal_reflects_sky_times_albedo():
    renderer = Renderer(4, 4)
    albedo = Color(0.5, 0.5, 0.5)
    world = _world_with(Metal(albedo))
    back = Ray(XYZ(), XYZ(0.0, 0.0, 1.0))
    expected = albedo * sky_color(back)
    assert renderer.ray_color(FORWARD, world, 5) == expected


def test_gamma_correct_clamps():
    result = gamma_correct(Color(4.0, 0.0, -1.0), 1.0)
    assert result == Color(1.0, 0.0, 0.0)


def test_render_fills_every_pixel_and_sky_gets_bluer_upward():
    renderer = Renderer(4, 3, sample_times=4, max_depth=3)
    buffer = renderer.render(Camera.simple(90.0, 4 / 3), HittableList())
    assert buffer is renderer.frame_buffer
    assert all(buffer.data[i * 4 + 3] == 255 for i in range(4 * 3))
    assert buffer.get_value(0, 0).x < buffer.get_value(0, 2).x


def test_render_rejects_zero_samples():
    renderer = Renderer(4, 4, sample_times=0)
    with pytest.raises(ValueError):
        renderer.render(Camera.simple(), HittableList())


def test_too_small_image_rejected():
    with pytest.raises(ValueError):
        Renderer(1, 4)


def test_save_round_trip(tmp_path):
    renderer = Renderer(5, 3, sample_times=1, max_depth=2)
    renderer.render(Camera.simple(90.0, 5 / 3), HittableList())
    written = renderer.save(tmp_path / "out.png")
    with Image.open(written) as image:
        assert image.size == (5, 3)


def test_save_unsupported_format(tmp_path):
    renderer = Renderer(4, 4)
    with pytest.raises(UnsupportedFormatError):
        renderer.save(tmp_path / "out.tga")


def test_emissive_background_is_black():
    renderer = EmissiveRenderer(4, 4)
    assert renderer.ray_color(FORWARD, HittableList(), 5) == Color(0.0, 0.0, 0.0)


def test_emissive_light_returns_emission():
    renderer = EmissiveRenderer(4, 4)
    light = Color(4.0, 4.0, 4.0)
    world = _world_with(DiffuseLight(light))
    assert renderer.ray_color(FORWARD, world, 5) == light


def test_emissive_depth_exhausted_returns_white():
    renderer = EmissiveRenderer(4, 4)
    world = _world_with(DiffuseLight(Color(4.0, 4.0, 4.0)))
    assert renderer.ray_color(FORWARD, world, 0) == Color(1.0, 1.0, 1.0)