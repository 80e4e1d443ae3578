from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Iterable

from .base import DisplayFrame, RenderTarget

if TYPE_CHECKING:
    from rasterpad_core.core.events import InputEvent


class HeadlessTarget(RenderTarget):
    """Keeps presented frames in memory; events can be scripted per tick."""

    def __init__(self, events: Iterable[list[InputEvent]] = ()) -> None:
        self.started = False
        self.frames_presented = 0
        self.last_frame: DisplayFrame | None = None
        self._scripted: deque[list[InputEvent]] = deque(events)

    def queue_events(self, *events: InputEvent) -> None:
        self._scripted.append(list(events))

    def start(self) -> None:
        self.started = True

    def present_frame(self, frame: DisplayFrame) -> None:
        if not self.started:
            raise RuntimeError("headless target not started")
        self.frames_presented += 1
        self.last_frame = frame

    def stop(self) -> None:
        self.started = False

    def poll_events(self) -> list[InputEvent]:
        if not self._scripted:
            return []
        return self._scripted.popleft()
