"""Ready-made worlds paired with the cameras that view them."""

from __future__ import annotations

from dataclasses import dataclass

from .box import Box
from .camera import Camera
from .hittable import Geometry, HittableList
from .material import Dielectric, DiffuseLight, Isotropic, Lambertian, Material, Metal
from .mathutils import random_double
from .medium import ConstantMedium
from .sphere import Sphere
from .texture import SolidColor
from .transform import Rotate, Translate
from .triangle import Rect, Triangle
from .vector import XYZ, Color

__all__ = [
    "Scene",
    "glass_scene",
    "distant_view_scene",
    "defocus_scene",
    "random_spheres_scene",
    "cornell_box_scene",
    "triangle_scene",
]


@dataclass
class Scene:
    """A world, its camera, the image size and suggested render settings."""

    world: HittableList
    camera: Camera
    width: int
    height: int
    emissive: bool = False
    sample_times: int = 100
    max_depth: int = 50


def _aspect(width: int, height: int) -> float:
    if width <= 0 or height <= 0:
        raise ValueError(f"image size must be positive, got {width}x{height}")
    return width / height


def _with_material(obj: Geometry, material: Material) -> Geometry:
    obj.set_material(material)
    return obj


def _glass_world(inner_radius: float) -> HittableList:
    ground = Lambertian(Color(0.8, 0.8, 0.0))
    center = Lambertian(Color(0.1, 0.2, 0.5))
    left = Dielectric(1.5)
    right = Metal(Color(0.8, 0.6, 0.2), 0.0)
    return HittableList(
        [
            _with_material(Sphere(XYZ(0.0, -100.5, -1.0), 100.0), ground),
            _with_material(Sphere(XYZ(0.0, 0.0, -1.0), 0.5), center),
            _with_material(Sphere(XYZ(-1.0, 0.0, -1.0), 0.5), left),
            _with_material(Sphere(XYZ(-1.0, 0.0, -1.0), inner_radius), left),
            _with_material(Sphere(XYZ(1.0, 0.0, -1.0), 0.5), right),
        ]
    )


def glass_scene(width: int = 400, height: int = 225) -> Scene:
    """Diffuse, hollow glass and metal spheres on a large ground sphere."""
    camera = Camera.simple(90.0, _aspect(width, height))
    return Scene(_glass_world(-0.4), camera, width, height)


def distant_view_scene(width: int = 400, height: int = 225) -> Scene:
    """The glass scene seen from above and to the side through a narrow lens."""
    camera = Camera.look_at(
        XYZ(-2.0, 2.0, 1.0),
        XYZ(0.0, 0.0, -1.0),
        XYZ(0.0, 1.0, 0.0),
        20.0,
        _aspect(width, height),
    )
    return Scene(_glass_world(-0.45), camera, width, height)


def defocus_scene(width: int = 400, height: int = 225) -> Scene:
    """The glass scene with a wide aperture focused on the centre sphere."""
    look_from = XYZ(3.0, 3.0, 2.0)
    look_at = XYZ(0.0, 0.0, -1.0)
    camera = Camera.look_at(
        look_from,
        look_at,
        XYZ(0.0, 1.0, 0.0),
        20.0,
        _aspect(width, height),
        aperture=2.0,
        focus_dist=(look_from - look_at).length(),
    )
    return Scene(_glass_world(-0.45), camera, width, height)


def _random_material(choose: float) -> tuple[Material, bool]:
    if choose < 0.8:
        albedo = XYZ(
            random_double() * random_double(),
            random_double() * random_double(),
            random_double() * random_double(),
        )
        return Lambertian(albedo), True
    if choose < 0.95:
        albedo = XYZ(random_double(0.5, 1.0), random_double(0.5, 1.0), random_double(0.5, 1.0))
        return Metal(albedo, random_double(0.0, 0.5)), False
    return Dielectric(1.5), False


def random_spheres_scene(
    width: int | None = None, height: int | None = None, moving: bool = False
) -> Scene:
    """A field of small random spheres around three large ones.

    With moving, the diffuse spheres rise during a shutter open from 0 to 1.
    """
    if width is None:
        width = 400 if moving else 1200
    if height is None:
        height = 225 if moving else 800

    world = HittableList()
    world.add(_with_material(Sphere(XYZ(0.0, -1000.0, 0.0), 1000.0), Lambertian(Color(0.5, 0.5, 0.5))))

    for a in range(-11, 11):
        for b in range(-11, 11):
            choose = random_double()
            center = XYZ(a + 0.9 * random_double(), 0.2, b + 0.9 * random_double())
            if (center - XYZ(4.0, 0.2, 0.0)).length() <= 0.9:
                continue
            material, movable = _random_material(choose)
            sphere = Sphere(center, 0.2)
            sphere.set_material(material)
            if moving and movable:
                end = center + XYZ(0.0, random_double(0.0, 0.5), 0.0)
                sphere.set_motion(end, 0.0, 1.0)
            world.add(sphere)

    world.add(_with_material(Sphere(XYZ(0.0, 1.0, 0.0), 1.0), Dielectric(1.5)))
    world.add(_with_material(Sphere(XYZ(-4.0, 1.0, 0.0), 1.0), Lambertian(XYZ(0.4, 0.2, 0.1))))
    world.add(_with_material(Sphere(XYZ(4.0, 1.0, 0.0), 1.0), Metal(XYZ(0.7, 0.6, 0.5), 0.0)))

    camera = Camera.look_at(
        XYZ(13.0, 2.0, 3.0),
        XYZ(0.0, 0.0, 0.0),
        XYZ(0.0, 1.0, 0.0),
        20.0,
        _aspect(width, height),
        aperture=0.1,
        focus_dist=10.0,
    )
    if moving:
        camera.set_shutter_time(0.0, 1.0)
    samples = 100 if moving else 500
    return Scene(world, camera, width, height, sample_times=samples)


def cornell_box_scene(width: int = 300, height: int = 300, smoke: bool = False) -> Scene:
    """The Cornell box with two rotated blocks, solid or made of smoke."""
    red = Lambertian(Color(0.65, 0.05, 0.05))
    white = Lambertian(Color(0.73, 0.73, 0.73))
    green = Lambertian(Color(0.12, 0.45, 0.15))
    brightness = 7.0 if smoke else 30.0
    light = DiffuseLight(Color(brightness, brightness, brightness))

    world = HittableList(
        [
            _with_material(Rect(XYZ(555.0, 0.0, 0.0), XYZ(555.0, 555.0, 0.0), XYZ(555.0, 0.0, 555.0)), green),
            _with_material(Rect(XYZ(0.0, 0.0, 0.0), XYZ(0.0, 555.0, 0.0), XYZ(0.0, 0.0, 555.0)), red),
            _with_material(Rect(XYZ(0.0, 0.0, 0.0), XYZ(555.0, 0.0, 0.0), XYZ(0.0, 0.0, 555.0)), white),
            _with_material(Rect(XYZ(0.0, 555.0, 0.0), XYZ(0.0, 555.0, 555.0), XYZ(555.0, 555.0, 0.0)), white),
            _with_material(Rect(XYZ(0.0, 0.0, 555.0), XYZ(555.0, 0.0, 555.0), XYZ(0.0, 555.0, 555.0)), white),
            _with_material(Rect(XYZ(213.0, 554.0, 227.0), XYZ(213.0, 554.0, 332.0), XYZ(343.0, 554.0, 227.0)), light),
        ]
    )

    blocks = (
        (XYZ(165.0, 330.0, 165.0), 15.0, XYZ(265.0, 0.0, 295.0), Color(0.0, 0.0, 0.0)),
        (XYZ(165.0, 165.0, 165.0), -18.0, XYZ(130.0, 0.0, 65.0), Color(1.0, 1.0, 1.0)),
    )
    for corner, angle, offset, fog in blocks:
        box = Box(XYZ(0.0, 0.0, 0.0), corner)
        if not smoke:
            box.set_material(white)
        placed = Translate(Rotate(box, angle), offset)
        if smoke:
            medium = ConstantMedium(placed, 0.01)
            medium.set_material(Isotropic(SolidColor(fog)))
            world.add(medium)
        else:
            world.add(placed)

    camera = Camera.look_at(
        XYZ(278.0, 278.0, -800.0),
        XYZ(278.0, 278.0, 0.0),
        XYZ(0.0, 1.0, 0.0),
        40.0,
        _aspect(width, height),
        aperture=0.1,
        focus_dist=10.0,
    )
    samples = 500 if smoke else 2000
    return Scene(world, camera, width, height, emissive=True, sample_times=samples)


def triangle_scene(width: int = 400, height: int = 225) -> Scene:
    """A blue square and a blue triangle above it."""
    blue = Lambertian(Color(0.0, 0.0, 1.0))
    x = 0.25
    world = HittableList(
        [
            _with_material(Rect(XYZ(-x, -x, -1.0), XYZ(-x, x, -1.0), XYZ(x, -x, -1.0)), blue),
            _with_material(
                Triangle(XYZ(-x, -x + 0.7, -1.0), XYZ(-x, x + 0.7, -1.0), XYZ(x, -x + 0.7, -1.0)),
                blue,
            ),
        ]
    )
    camera = Camera.simple(90.0, _aspect(width, height))
    return Scene(world, camera, width, height)