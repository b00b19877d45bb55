"""A small software ray tracer: geometry, materials, textures, renderers and image output."""

__version__ = "0.1.0"