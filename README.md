# softray

softray is a small software ray tracer in pure Python. Scenes are built from
spheres (optionally moving over time), triangles, parallelograms, boxes,
rotated and translated instances, constant-density volumes and bounding
volume hierarchies. Surfaces carry Lambertian, metal, glass, emissive or
isotropic materials, and textures can be solid, checkered, Perlin noise,
marble, turbulence or read from an image file. Finished frames are written
as PNG, BMP or JPEG through Pillow.

Everything runs in a single Python thread, so keep image sizes and sample
counts small when you try it out.

## Installation

```
pip install .
```

With the test dependencies:

```
pip install .[test]
```

## Command line

```
softray [SCENE] [-o OUTPUT] [--width W] [--height H] [--samples N] [--depth N] [--overwrite] [-v]
```

`SCENE` is one of:

- `gradient` (default): a 256×256 colour gradient, red along x and green along y, no ray tracing
- `glass`, `distant`, `defocus`: diffuse, hollow glass and metal spheres, seen with a plain camera, from afar, or with a wide aperture
- `spheres`, `moving-spheres`: a field of random small spheres, still or rising during the shutter
- `cornell`, `smoke`: the Cornell box with two solid blocks or two blocks of smoke
- `triangle`: a blue square and a blue triangle

Options:

- `-o`, `--output`: image file, `.png`, `.bmp` or `.jpg` (default `test.png`)
- `--width`, `--height`: image size; each scene has its own default
- `--samples`, `--depth`: samples per pixel and maximum ray bounces; each scene suggests its own
- `--overwrite`: replace an existing file. Without it an existing file is kept and the new image gets a time stamp added to its name.
- `-v`, `--verbose`: log progress

On success the command prints `Succeed to generate image.` and the path it
wrote, and exits with 0. On an unsupported extension, a bad size or a write
error it prints `Failed to generate image.` and the reason, and exits with 1.

Example:

```
softray cornell --width 100 --height 100 --samples 20 -o box.png
```

## Library use

Render a ready-made scene:

```python
from softray.scenes import glass_scene
from softray.renderer import Renderer

scene = glass_scene(200, 112)
renderer = Renderer(scene.width, scene.height, sample_times=20)
renderer.render(scene.camera, scene.world)
renderer.save("glass.png")
```

Build a scene of your own:

```python
from softray.vector import XYZ
from softray.sphere import Sphere
from softray.hittable import HittableList
from softray.material import Lambertian, Metal
from softray.camera import Camera
from softray.renderer import Renderer

world = HittableList()
ground = Sphere(XYZ(0.0, -100.5, -1.0), 100.0)
ground.set_material(Lambertian(XYZ(0.8, 0.8, 0.0)))
world.add(ground)
ball = Sphere(XYZ(0.0, 0.0, -1.0), 0.5)
ball.set_material(Metal(XYZ(0.8, 0.6, 0.2), 0.1))
world.add(ball)

camera = Camera.simple(90.0, 16 / 9)
renderer = Renderer(160, 90, sample_times=10)
renderer.render(camera, world)
renderer.save("balls.png")
```

`Renderer.save` never replaces an existing file; to choose, call
`softray.exporter.export_image(buffer, path, overwrite)` directly. It raises
`UnsupportedFormatError` for extensions other than `.png`, `.bmp` and `.jpg`
(lower or upper case).

### Modules

- `softray.vector`: `XYZ` (alias `Color`) and `XY` (alias `UV`), plus `reflect`, `refract`, `random_in_unit_sphere`, `random_in_unit_disk`
- `softray.ray`: `Ray` with an origin, a direction and a time
- `softray.camera`: `Camera.simple` and `Camera.look_at` (with aperture and focus distance), `set_shutter_time`, `get_ray`
- `softray.hittable`: `Geometry`, `HitRecord`, `HittableList`
- `softray.sphere`, `softray.triangle` (`Triangle`, `Rect`), `softray.box`, `softray.transform` (`Rotate` about y, `Translate`), `softray.medium` (`ConstantMedium`), `softray.bvh` (`BVHNode.from_list`), `softray.aabb`
- `softray.material`: `Lambertian`, `Metal`, `Dielectric`, `DiffuseLight`, `Isotropic`; `scatter` returns a `Scatter` or `None`
- `softray.texture`: `SolidColor`, `CheckerTexture`, `NoiseTexture`, `MarbledTexture`, `TurbulenceTexture`, `ImageTexture` (solid blue when the image cannot be read)
- `softray.perlin`: `Perlin` noise and turbulence
- `softray.framebuffer`: `FrameBuffer` in `PixelFormat.RGBA` or `PixelFormat.BGRA`
- `softray.exporter`: `export_image`
- `softray.scenes`: `Scene` and the scene functions listed above
- `softray.drawing`: `draw_line`, `draw_circle`, `draw_oval`, `draw_heart`, `draw_v_line`, `draw_parabola`, `draw_sinusoid`, drawing straight into a `FrameBuffer`

### Renderers

- `Renderer` traces every pixel against a sky gradient.
- `EmissiveRenderer` uses a black background and adds the light materials emit. Use it for scenes lit by `DiffuseLight`, such as `cornell_box_scene`; those scenes set `Scene.emissive`.
- `ProgressiveRenderer` fills a given `FrameBuffer` one pixel per `step` call, in passes that each add about a third of the requested samples. `step` returns `True` once all passes are done.

## What it does not do

softray has no window or live display. `ProgressiveRenderer` and
`softray.drawing` only write into a `FrameBuffer`; showing that buffer on
screen, or animating it, is left to the caller. There is no mesh or model
file loader: triangles are added one by one in code. Rendering is
single-threaded.