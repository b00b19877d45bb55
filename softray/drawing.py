"""Rasterising simple curves into a frame buffer."""

from __future__ import annotations

import math

from .framebuffer import FrameBuffer
from .vector import XYZ

__all__ = [
    "draw_line",
    "draw_circle",
    "draw_oval",
    "draw_heart",
    "draw_v_line",
    "draw_parabola",
    "draw_sinusoid",
]

RED = XYZ(1.0, 0.0, 0.0)


def _slope(dy: int, dx: int) -> float:
    if dx == 0:
        return math.copysign(math.inf, dy) if dy else math.nan
    return dy / dx


def _trunc_half(n: int) -> int:
    # Integer halving that rounds toward zero.
    return int(n / 2)


def draw_line(
    buffer: FrameBuffer, x1: int, y1: int, x2: int, y2: int, color: XYZ = RED, alpha: int = 255
) -> None:
    """Midpoint line from (x1, y1) to (x2, y2); the first end point is not drawn."""
    k = _slope(y2 - y1, x2 - x1)
    steep = k > 1 or k < -1
    if steep:
        x1, y1 = y1, x1
        x2, y2 = y2, x2
        k = _slope(y2 - y1, x2 - x1)
    d = 0.5 - k
    if x1 > x2:
        x1, x2 = x2, x1
        y1, y2 = y2, y1
    while x1 != x2:
        if k > 0.0 and d < 0.0:
            y1 += 1
            d += 1
        elif k < 0.0 and d > 0.0:
            y1 -= 1
            d -= 1
        d -= k
        x1 += 1
        if steep:
            buffer.fill(y1, x1, color, alpha)
        else:
            buffer.fill(x1, y1, color, alpha)


def draw_circle(
    buffer: FrameBuffer, ox: int, oy: int, r: int, color: XYZ = RED, alpha: int = 255
) -> None:
    """Midpoint circle of radius r around (ox, oy), drawn in eight octants."""
    d = 1.25 - r
    x, y, fx = 0, int(r), int(r / 1.4)
    while x != fx:
        if d < 0:
            d += 2 * x + 3
        else:
            d += 2 * (x - y) + 5
            y -= 1
        for px, py in (
            (ox + x, oy + y),
            (ox + x, oy - y),
            (ox - x, oy + y),
            (ox - x, oy - y),
            (ox + y, oy - x),
            (ox + y, oy + x),
            (ox - y, oy + x),
            (ox - y, oy - x),
        ):
            buffer.fill(px, py, color, alpha)
        x += 1


def draw_oval(
    buffer: FrameBuffer, ox: int, oy: int, a: int, b: int, color: XYZ = RED, alpha: int = 255
) -> None:
    """Ellipse x^2/a^2 + y^2/b^2 = 1 around (ox, oy), swept along both axes."""
    for x in range(ox - a, ox + a):
        y = int(math.sqrt(max(0.0, 1 - (x - ox) ** 2 / a**2)) * b)
        buffer.fill(x, oy + y, color, alpha)
        buffer.fill(x, oy - y, color, alpha)

    # A second sweep along y fills gaps left by truncation.
    for y in range(oy - b, oy + b):
        x = int(math.sqrt(max(0.0, 1 - (y - oy) ** 2 / b**2)) * a)
        buffer.fill(ox + x, y, color, alpha)
        buffer.fill(ox - x, y, color, alpha)


def draw_heart(
    buffer: FrameBuffer, ox: int, oy: int, r: float, color: XYZ = RED, alpha: int = 255
) -> None:
    """Heart curve x^2 - |x|y + y^2 = r centred at (ox, oy)."""
    for x in range(buffer.width):
        dx = x - ox
        radicand = r - dx * dx * 3 / 4
        if radicand < 0:
            continue
        root = math.sqrt(radicand)
        y1 = int(abs(dx) // 2 + root)
        y2 = int(abs(dx) // 2 - root)
        buffer.fill(x, oy - y1, color, alpha)
        buffer.fill(x, oy - y2, color, alpha)

    for y in range(buffer.height):
        dy = y - oy
        radicand = r - dy * dy * 3 / 4
        if radicand < 0:
            continue
        x = int(_trunc_half(-dy) + math.sqrt(radicand))
        if x >= 0:
            buffer.fill(ox + x, y, color, alpha)
            buffer.fill(ox - x, y, color, alpha)


def draw_v_line(
    buffer: FrameBuffer, px: int, py: int, color: XYZ = RED, alpha: int = 255
) -> None:
    """An upside-down V with its apex at (px, py)."""
    for x in range(buffer.width):
        buffer.fill(x, py - abs(x - px), color, alpha)


def draw_parabola(
    buffer: FrameBuffer, px: int, py: int, color: XYZ = RED, alpha: int = 255
) -> None:
    """A parabola opening upward on screen with its vertex at (px, py)."""
    for x in range(buffer.width):
        buffer.fill(x, py - int(abs(x - px) ** 2 / 200), color, alpha)


def draw_sinusoid(
    buffer: FrameBuffer, px: int, py: int, color: XYZ = RED, alpha: int = 255
) -> None:
    """A sine wave mirrored about x = px along the row py."""
    for x in range(buffer.width):
        buffer.fill(x, py - int(math.sin(0.1 * abs(x - px)) * 12), color, alpha)