from __future__ import annotations

from dataclasses import dataclass


@dataclass
class FrameRateController:
    """Paces the render loop to a target frame rate."""

    target_fps: int

    def __post_init__(self) -> None:
        if self.target_fps <= 0:
            raise ValueError("target_fps must be > 0")

    @property
    def target_dt(self) -> float:
        return 1.0 / float(self.target_fps)

    def compute_sleep(self, loop_started_at: float, loop_finished_at: float) -> float:
        elapsed = max(0.0, loop_finished_at - loop_started_at)
        return max(0.0, self.target_dt - elapsed)
