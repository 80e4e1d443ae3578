from .base import DisplayFrame, RenderTarget
from .headless_target import HeadlessTarget
from .png_target import PngTarget, save_frame_png

__all__ = ["DisplayFrame", "HeadlessTarget", "PngTarget", "RenderTarget", "save_frame_png"]
