"""Command line entry point that renders a scene to an image file."""

from __future__ import annotations

import argparse
import logging
from typing import Callable, Sequence

from .exporter import UnsupportedFormatError, export_image
from .framebuffer import FrameBuffer, PixelFormat
from .renderer import EmissiveRenderer, Renderer
from .scenes import (
    Scene,
    cornell_box_scene,
    defocus_scene,
    distant_view_scene,
    glass_scene,
    random_spheres_scene,
    triangle_scene,
)
from .vector import XYZ

__all__ = ["gradient_image", "main"]

_SCENES: dict[str, Callable[..., Scene]] = {
    "glass": glass_scene,
    "distant": distant_view_scene,
    "defocus": defocus_scene,
    "spheres": random_spheres_scene,
    "moving-spheres": lambda **kw: random_spheres_scene(moving=True, **kw),
    "cornell": cornell_box_scene,
    "smoke": lambda **kw: cornell_box_scene(smoke=True, **kw),
    "triangle": triangle_scene,
}


def gradient_image(width: int = 256, height: int = 256) -> FrameBuffer:
    """Red rising along x and green along y, with a fixed touch of blue."""
    if width < 2 or height < 2:
        raise ValueError(f"image must be at least 2x2 pixels, got {width}x{height}")
    buffer = FrameBuffer(width, height, PixelFormat.RGBA)
    for x in range(width):
        for y in range(height):
            buffer.fill(x, y, XYZ(x / (width - 1), y / (height - 1), 0.25))
    return buffer


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="softray", description="Render a scene to an image.")
    parser.add_argument(
        "scene", nargs="?", default="gradient", choices=["gradient", *_SCENES], help="what to render"
    )
    parser.add_argument("-o", "--output", default="test.png", help="image file (.png, .bmp, .jpg)")
    parser.add_argument("--width", type=int, help="image width in pixels")
    parser.add_argument("--height", type=int, help="image height in pixels")
    parser.add_argument("--samples", type=int, help="samples per pixel")
    parser.add_argument("--depth", type=int, help="maximum ray bounces")
    parser.add_argument("--overwrite", action="store_true", help="replace an existing file")
    parser.add_argument("-v", "--verbose", action="store_true", help="log progress")
    return parser


def _render_scene(args: argparse.Namespace) -> FrameBuffer:
    size = {}
    if args.width is not None:
        size["width"] = args.width
    if args.height is not None:
        size["height"] = args.height
    scene = _SCENES[args.scene](**size)
    renderer_cls = EmissiveRenderer if scene.emissive else Renderer
    renderer = renderer_cls(
        scene.width,
        scene.height,
        args.samples if args.samples is not None else scene.sample_times,
        args.depth if args.depth is not None else scene.max_depth,
    )
    return renderer.render(scene.camera, scene.world)


def main(argv: Sequence[str] | None = None) -> int:
    """Render the chosen scene and write it; return the exit status."""
    args = _parser().parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    try:
        if args.scene == "gradient":
            buffer = gradient_image(args.width or 256, args.height or 256)
        else:
            buffer = _render_scene(args)
        written = export_image(buffer, args.output, args.overwrite)
    except (UnsupportedFormatError, ValueError, OSError) as error:
        print("Failed to generate image.")
        print(error)
        return 1

    print("Succeed to generate image.")
    print(written)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())