"""Rays with an origin, a direction and a time stamp."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vector import XYZ

__all__ = ["Ray"]


@dataclass(frozen=True)
class Ray:
    """A half line starting at origin, cast at the given time."""

    origin: XYZ = field(default_factory=XYZ)
    direction: XYZ = field(default_factory=XYZ)
    time: float = 0.0

    def at(self, t: float) -> XYZ:
        """The point at parameter t along the ray."""
        return self.origin + t * self.direction