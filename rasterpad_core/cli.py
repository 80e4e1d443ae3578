from __future__ import annotations

import argparse
from dataclasses import dataclass
import logging
from pathlib import Path

from rasterpad_core.core import DisplayRuntime, PixelBuffer
from rasterpad_core.demo import DEFAULT_HEIGHT, DEFAULT_WIDTH, MIN_HEIGHT, MIN_WIDTH, draw_demo_scene
from rasterpad_core.targets import HeadlessTarget, PngTarget, RenderTarget


@dataclass(frozen=True)
class RunConfig:
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    fps: int = 60
    ticks: int = 60
    render: str = "headless"
    output: Path | None = None

    def __post_init__(self) -> None:
        if self.width < MIN_WIDTH or self.height < MIN_HEIGHT:
            raise ValueError(
                f"demo scene needs at least {MIN_WIDTH}x{MIN_HEIGHT}, got {self.width}x{self.height}"
            )
        if self.fps <= 0:
            raise ValueError("fps must be > 0")
        if self.ticks <= 0:
            raise ValueError("ticks must be > 0")
        if self.render not in ("headless", "png"):
            raise ValueError(f"unsupported render mode: {self.render}")
        if self.render == "png" and self.output is None:
            raise ValueError("--output is required for png render")


def build_target(config: RunConfig) -> RenderTarget:
    if config.render == "png":
        return PngTarget(path=config.output)
    return HeadlessTarget()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog="rasterpad")
    parser.add_argument("--log-level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    sub = parser.add_subparsers(dest="command", required=True)

    demo = sub.add_parser("demo", help="Rasterize the demo scene and present it.")
    demo.add_argument("--width", type=int, default=DEFAULT_WIDTH)
    demo.add_argument("--height", type=int, default=DEFAULT_HEIGHT)
    demo.add_argument("--fps", type=int, default=60)
    demo.add_argument("--ticks", type=int, default=60, help="Frames to present before exiting.")
    demo.add_argument("--render", choices=["headless", "png"], default="headless")
    demo.add_argument("--output", type=Path, default=None, help="PNG path for --render png.")
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    if args.command == "demo":
        try:
            config = RunConfig(
                width=args.width,
                height=args.height,
                fps=args.fps,
                ticks=args.ticks,
                render=args.render,
                output=args.output,
            )
        except ValueError as exc:
            parser.error(str(exc))
        buffer = PixelBuffer.create(config.width, config.height)
        runtime = DisplayRuntime(buffer=buffer, target=build_target(config), scene=draw_demo_scene)
        result = runtime.run(max_ticks=config.ticks, target_fps=config.fps)
        print(
            f"run complete: ticks={result.ticks_run} frames={result.frames_presented} "
            f"stopped_by={result.stopped_by}"
        )
        return

    raise RuntimeError(f"unsupported command: {args.command}")
