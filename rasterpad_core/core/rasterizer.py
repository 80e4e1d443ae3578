"""Scan conversion of points, lines, circles and triangle outlines.

Every shape is decomposed into integer points and written through
:func:`plot_point`. Errors raised by the buffer propagate unchanged, so a
shape that leaves the buffer aborts at its first out-of-range point.
"""

from __future__ import annotations

from typing import Iterator

from .color import Rgb
from .coordinates import Point, PointLike, as_point, require_int
from .errors import InvalidArgumentError
from .pixel_buffer import PixelBuffer


def plot_point(buffer: PixelBuffer, point: PointLike, color: Rgb) -> None:
    p = as_point(point)
    buffer.plot(p.x, p.y, color)


def line_points(start: PointLike, end: PointLike) -> Iterator[Point]:
    """Yield the Bresenham points from ``start`` to ``end``, both inclusive."""
    start = as_point(start)
    end = as_point(end)
    dx = abs(end.x - start.x)
    dy = abs(end.y - start.y)
    sx = 1 if start.x < end.x else -1
    sy = 1 if start.y < end.y else -1
    # Halving truncates toward zero.
    error = dx // 2 if dx > dy else -(dy // 2)

    x, y = start.x, start.y
    while True:
        yield Point(x, y)
        if x == end.x and y == end.y:
            return
        snapshot = error
        if snapshot > -dx:
            error -= dy
            x += sx
        if snapshot < dy:
            error += dx
            y += sy


def circle_points(center: PointLike, radius: int) -> Iterator[Point]:
    """Yield midpoint-circle points, four reflections per step, in plot order."""
    center = as_point(center)
    require_int(radius, "radius")
    if radius < 0:
        raise InvalidArgumentError(f"radius must be >= 0, got {radius}")

    cx, cy = center.x, center.y
    px, py = -radius, 0
    error = 2 - 2 * radius
    while True:
        yield Point(cx - px, cy + py)
        yield Point(cx - py, cy - px)
        yield Point(cx + px, cy - py)
        yield Point(cx + py, cy + px)

        r = error
        if r <= py:
            error += (py + 1) * 2
            py += 1
        if r > px or error > py:
            error += (px + 2) * 2
            px += 1
        if px >= 0:
            return


def draw_line(buffer: PixelBuffer, start: PointLike, end: PointLike, color: Rgb) -> int:
    plotted = 0
    for point in line_points(start, end):
        plot_point(buffer, point, color)
        plotted += 1
    return plotted


def draw_circle(buffer: PixelBuffer, center: PointLike, radius: int, color: Rgb) -> int:
    plotted = 0
    for point in circle_points(center, radius):
        plot_point(buffer, point, color)
        plotted += 1
    return plotted


def draw_triangle(buffer: PixelBuffer, a: PointLike, b: PointLike, c: PointLike, color: Rgb) -> int:
    """Outline only; degenerate vertices just overlap their segments."""
    return (
        draw_line(buffer, a, b, color)
        + draw_line(buffer, b, c, color)
        + draw_line(buffer, c, a, color)
    )
