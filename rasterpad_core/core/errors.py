from __future__ import annotations


class RasterError(Exception):
    """Base class for rasterizer failures."""


class AllocationError(RasterError, ValueError):
    pass


class OutOfBoundsError(RasterError, IndexError):
    def __init__(self, x: int, y: int, width: int, height: int) -> None:
        super().__init__(f"pixel ({x}, {y}) outside buffer bounds {width}x{height}")
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class InvalidArgumentError(RasterError, ValueError):
    pass
