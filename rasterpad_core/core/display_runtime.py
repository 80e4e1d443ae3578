from __future__ import annotations

from dataclasses import dataclass
import logging
import time
from typing import Callable, Literal, Optional

import torch

from .errors import RasterError
from .events import InputEvent
from .frame_rate_controller import FrameRateController
from .key_state import ESCAPE, KeyState
from .pixel_buffer import PixelBuffer
from rasterpad_core.targets.base import DisplayFrame, RenderTarget

LOGGER = logging.getLogger(__name__)

Scene = Callable[[PixelBuffer], None]
StopReason = Literal["max_ticks", "close_event", "escape", "target_close", "stopped"]


@dataclass(frozen=True)
class RunResult:
    ticks_run: int
    frames_presented: int
    stopped_by: StopReason


class DisplayRuntime:
    """Single-threaded render loop: drain events, redraw after resize, present."""

    def __init__(
        self,
        buffer: PixelBuffer,
        target: RenderTarget,
        scene: Optional[Scene] = None,
        key_state: Optional[KeyState] = None,
    ) -> None:
        self._buffer = buffer
        self._target = target
        self._scene = scene
        self.key_state = key_state if key_state is not None else KeyState()
        self._revision = 0
        self._stop_reason: StopReason | None = None
        self._last_error: Exception | None = None

    @property
    def buffer(self) -> PixelBuffer:
        return self._buffer

    @property
    def revision(self) -> int:
        return self._revision

    @property
    def last_error(self) -> Exception | None:
        return self._last_error

    def request_stop(self) -> None:
        self._stop_reason = "stopped"

    def run(self, max_ticks: int | None = None, target_fps: int = 60, pace: bool = True) -> RunResult:
        if max_ticks is not None and max_ticks <= 0:
            raise ValueError("max_ticks must be > 0 when provided")
        rate = FrameRateController(target_fps=target_fps)
        self._stop_reason = None
        ticks = 0
        frames = 0
        self._target.start()
        try:
            self.redraw()
            while self._stop_reason is None:
                if max_ticks is not None and ticks >= max_ticks:
                    self._stop_reason = "max_ticks"
                    break
                started = time.perf_counter()
                if self.tick() is not None:
                    frames += 1
                ticks += 1
                if pace and self._stop_reason is None:
                    time.sleep(rate.compute_sleep(started, time.perf_counter()))
        except Exception as exc:
            self._last_error = exc
            LOGGER.exception("DisplayRuntime render loop failed: %s", exc)
            raise
        finally:
            self._target.stop()
        LOGGER.info("DisplayRuntime stopped by %s after %d ticks", self._stop_reason, ticks)
        return RunResult(ticks_run=ticks, frames_presented=frames, stopped_by=self._stop_reason)

    def tick(self) -> DisplayFrame | None:
        """Run one loop iteration. Returns the presented frame, or None when stopping."""
        for event in self._target.poll_events():
            self.handle_event(event)
            if self._stop_reason is not None:
                return None
        if self._target.should_close():
            self._stop_reason = "target_close"
            return None
        if self.key_state.is_pressed(ESCAPE):
            self._stop_reason = "escape"
            return None
        return self.present()

    def handle_event(self, event: InputEvent) -> None:
        if self.key_state.apply(event):
            return
        if event.event_type == "close":
            self._stop_reason = "close_event"
            return
        if event.event_type == "resize":
            if event.width is None or event.height is None:
                raise ValueError("resize event requires width and height")
            self._handle_resize(event.width, event.height)
            return
        raise ValueError(f"unsupported event type: {event.event_type!r}")

    def _handle_resize(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            # Minimized surface; keep presenting the current buffer.
            LOGGER.debug("DisplayRuntime ignoring resize to %dx%d", width, height)
            return
        self._buffer.resize(width, height)
        try:
            self.redraw()
        except RasterError as exc:
            LOGGER.warning("DisplayRuntime scene redraw at %dx%d incomplete: %s", width, height, exc)

    def redraw(self) -> None:
        if self._scene is not None:
            self._scene(self._buffer)

    def present(self) -> DisplayFrame:
        self._revision += 1
        frame = build_frame(self._buffer, revision=self._revision)
        self._target.present_frame(frame)
        return frame


def build_frame(buffer: PixelBuffer, revision: int) -> DisplayFrame:
    snapshot = torch.from_numpy(buffer.as_array().copy())
    return DisplayFrame(
        revision=revision,
        width=buffer.width,
        height=buffer.height,
        rgba=snapshot,
    )
