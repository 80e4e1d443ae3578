from .color import (
    AZURE,
    BLACK,
    BLUE,
    CHARTREUSE,
    CYAN,
    GREEN,
    MAGENTA,
    ORANGE,
    PALETTE,
    RED,
    ROSE,
    SPRING_GREEN,
    VIOLET,
    WHITE,
    YELLOW,
    Rgb,
)
from .coordinates import Point, PointLike
from .display_runtime import DisplayRuntime, RunResult, build_frame
from .errors import AllocationError, InvalidArgumentError, OutOfBoundsError, RasterError
from .events import InputEvent
from .frame_rate_controller import FrameRateController
from .key_state import ESCAPE, KeyState
from .pixel_buffer import PixelBuffer
from .rasterizer import circle_points, draw_circle, draw_line, draw_triangle, line_points, plot_point

__all__ = [
    "AZURE",
    "AllocationError",
    "BLACK",
    "BLUE",
    "CHARTREUSE",
    "CYAN",
    "DisplayRuntime",
    "ESCAPE",
    "FrameRateController",
    "GREEN",
    "InputEvent",
    "InvalidArgumentError",
    "KeyState",
    "MAGENTA",
    "ORANGE",
    "OutOfBoundsError",
    "PALETTE",
    "PixelBuffer",
    "Point",
    "PointLike",
    "RED",
    "ROSE",
    "RasterError",
    "Rgb",
    "RunResult",
    "SPRING_GREEN",
    "VIOLET",
    "WHITE",
    "YELLOW",
    "build_frame",
    "circle_points",
    "draw_circle",
    "draw_line",
    "draw_triangle",
    "line_points",
    "plot_point",
]
