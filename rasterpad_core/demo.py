from __future__ import annotations

from rasterpad_core.core.color import BLUE, GREEN, RED
from rasterpad_core.core.coordinates import Point
from rasterpad_core.core.pixel_buffer import PixelBuffer
from rasterpad_core.core.rasterizer import draw_circle, draw_line, draw_triangle, plot_point


DEFAULT_WIDTH = 160
DEFAULT_HEIGHT = 120

LINE_START = Point(11, 7)
LINE_END = Point(40, 60)
TRIANGLE = (Point(40, 15), Point(60, 60), Point(44, 44))
CIRCLE_CENTER = Point(50, 50)
CIRCLE_RADIUS = 30

# Smallest buffer the fixed shapes fit in.
MIN_WIDTH = max(LINE_END.x, *(p.x for p in TRIANGLE), CIRCLE_CENTER.x + CIRCLE_RADIUS) + 1
MIN_HEIGHT = max(LINE_END.y, *(p.y for p in TRIANGLE), CIRCLE_CENTER.y + CIRCLE_RADIUS) + 1


def corner_points(width: int, height: int) -> list[Point]:
    return [
        Point(0, 0),
        Point(width - 1, 0),
        Point(0, height - 1),
        Point(width - 1, height - 1),
    ]


def draw_demo_scene(buffer: PixelBuffer) -> None:
    """Corner markers, a line, a triangle outline and a circle.

    The shapes use fixed coordinates, so the buffer must be at least
    MIN_WIDTH x MIN_HEIGHT.
    """
    for point in corner_points(buffer.width, buffer.height):
        plot_point(buffer, point, RED)

    draw_line(buffer, LINE_START, LINE_END, BLUE)
    draw_triangle(buffer, *TRIANGLE, GREEN)
    draw_circle(buffer, CIRCLE_CENTER, CIRCLE_RADIUS, RED)
