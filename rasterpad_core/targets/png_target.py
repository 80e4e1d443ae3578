from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from .base import DisplayFrame
from .headless_target import HeadlessTarget


LOGGER = logging.getLogger(__name__)


class PngTarget(HeadlessTarget):
    """Headless target that writes the last presented frame to a PNG on stop."""

    def __init__(self, path: Path, **kwargs) -> None:
        super().__init__(**kwargs)
        self.path = Path(path)

    def stop(self) -> None:
        was_started = self.started
        super().stop()
        if was_started and self.last_frame is not None:
            save_frame_png(self.last_frame, self.path)


def save_frame_png(frame: DisplayFrame, path: Path) -> Path:
    rgba = frame.rgba.contiguous().cpu().numpy()
    if rgba.shape != (frame.height, frame.width, 4):
        raise ValueError(f"invalid frame shape: {tuple(rgba.shape)}")
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(rgba).save(path, format="PNG")
    LOGGER.info("wrote frame revision=%d %dx%d to %s", frame.revision, frame.width, frame.height, path)
    return path
