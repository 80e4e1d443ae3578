from __future__ import annotations

import logging
import sys
from typing import Callable, Optional

import numpy as np

from .color import OPAQUE_ALPHA, Rgb
from .coordinates import require_int
from .errors import AllocationError, OutOfBoundsError


LOGGER = logging.getLogger(__name__)
BYTES_PER_PIXEL = 4

PlotHook = Callable[[int, int, Rgb], None]


class PixelBuffer:
    """Row-major RGBA8 pixel store with a top-left origin and checked writes."""

    def __init__(self, width: int, height: int, plot_hook: Optional[PlotHook] = None) -> None:
        self._store = _allocate(width, height)
        self.width = width
        self.height = height
        self.plot_hook = plot_hook

    @classmethod
    def create(cls, width: int, height: int) -> PixelBuffer:
        return cls(width, height)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def plot(self, x: int, y: int, color: Rgb) -> None:
        self._check_address(x, y)
        pixel = self._store[y, x]
        pixel[0] = color.r
        pixel[1] = color.g
        pixel[2] = color.b
        pixel[3] = OPAQUE_ALPHA
        if self.plot_hook is not None:
            self.plot_hook(x, y, color)

    def get_pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        self._check_address(x, y)
        r, g, b, a = self._store[y, x].tolist()
        return (r, g, b, a)

    def _check_address(self, x: int, y: int) -> None:
        require_int(x, "x")
        require_int(y, "y")
        if not self.in_bounds(x, y):
            raise OutOfBoundsError(x, y, self.width, self.height)

    def clear(self, color: Rgb | None = None) -> None:
        if color is None:
            self._store.fill(0)
            return
        self._store[:, :] = color.rgba

    def as_bytes(self) -> memoryview:
        """Read-only view of the raw store, 4*width*height bytes."""
        return memoryview(self._store).cast("B").toreadonly()

    def as_array(self) -> np.ndarray:
        view = self._store.view()
        view.flags.writeable = False
        return view

    def resize(self, width: int, height: int) -> None:
        # Contents are discarded; the embedding application redraws.
        store = _allocate(width, height)
        LOGGER.debug("PixelBuffer resized %dx%d -> %dx%d", self.width, self.height, width, height)
        self._store = store
        self.width = width
        self.height = height

    def __len__(self) -> int:
        return self._store.size

    def __repr__(self) -> str:
        return f"PixelBuffer(width={self.width}, height={self.height})"


def _allocate(width: int, height: int) -> np.ndarray:
    for label, value in (("width", width), ("height", height)):
        if isinstance(value, bool) or not isinstance(value, int):
            raise AllocationError(f"{label} must be an int, got {type(value).__name__}")
        if value <= 0:
            raise AllocationError(f"{label} must be > 0, got {value}")
    size = BYTES_PER_PIXEL * width * height
    if size > sys.maxsize:
        raise AllocationError(f"buffer of {width}x{height} exceeds addressable size")
    try:
        store = np.zeros((height, width, BYTES_PER_PIXEL), dtype=np.uint8)
    except (MemoryError, ValueError) as exc:
        raise AllocationError(f"unable to allocate {width}x{height} buffer: {exc}") from exc
    LOGGER.debug("PixelBuffer allocated %dx%d (%d bytes)", width, height, size)
    return store
