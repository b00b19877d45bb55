"""Writing frame buffers to image files."""

from __future__ import annotations

import time
from os import PathLike
from pathlib import Path

from PIL import Image

from .framebuffer import FrameBuffer, PixelFormat

__all__ = ["UnsupportedFormatError", "export_image"]

_FORMATS = {
    ".bmp": "BMP",
    ".BMP": "BMP",
    ".png": "PNG",
    ".PNG": "PNG",
    ".jpg": "JPEG",
    ".JPG": "JPEG",
}


class UnsupportedFormatError(ValueError):
    """The file extension names no image format that can be written."""


def _to_image(buffer: FrameBuffer) -> Image.Image:
    size = (buffer.width, buffer.height)
    raw_mode = "RGBA" if buffer.pixel_format is PixelFormat.RGBA else "BGRA"
    return Image.frombytes("RGBA", size, bytes(buffer.data), "raw", raw_mode)


def export_image(
    buffer: FrameBuffer, path: str | PathLike[str], overwrite: bool = False
) -> Path:
    """Write buffer to path as BMP, PNG or JPG and return the path written.

    Without overwrite, an existing file is kept and a time stamp is
    appended to the new file's name.
    """
    target = Path(path)
    if target.exists() and not overwrite:
        stamp = int(time.time())
        target = target.with_name(f"{target.stem}_{stamp}{target.suffix}")

    image_format = _FORMATS.get(target.suffix)
    if image_format is None:
        raise UnsupportedFormatError(f"unsupported image format: {target.suffix or '(none)'}")

    image = _to_image(buffer)
    if image_format == "JPEG":
        image.convert("RGB").save(target, image_format, quality=90)
    else:
        image.save(target, image_format)
    return target