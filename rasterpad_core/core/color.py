from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from .errors import InvalidArgumentError


OPAQUE_ALPHA = 0xFF


@dataclass(frozen=True)
class Rgb:
    r: int
    g: int
    b: int

    BLACK: ClassVar[Rgb]
    WHITE: ClassVar[Rgb]
    RED: ClassVar[Rgb]
    ORANGE: ClassVar[Rgb]
    YELLOW: ClassVar[Rgb]
    CHARTREUSE: ClassVar[Rgb]
    GREEN: ClassVar[Rgb]
    SPRING_GREEN: ClassVar[Rgb]
    CYAN: ClassVar[Rgb]
    AZURE: ClassVar[Rgb]
    BLUE: ClassVar[Rgb]
    VIOLET: ClassVar[Rgb]
    MAGENTA: ClassVar[Rgb]
    ROSE: ClassVar[Rgb]

    def __post_init__(self) -> None:
        for label, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise InvalidArgumentError(f"channel {label} must be an int, got {type(value).__name__}")
            if value < 0 or value > 255:
                raise InvalidArgumentError(f"channel {label} must be in [0, 255], got {value}")

    @property
    def rgba(self) -> tuple[int, int, int, int]:
        return (self.r, self.g, self.b, OPAQUE_ALPHA)


BLACK = Rgb(0, 0, 0)
WHITE = Rgb(0xFF, 0xFF, 0xFF)

RED = Rgb(0xFF, 0, 0)
ORANGE = Rgb(0xFF, 0x80, 0)
YELLOW = Rgb(0xFF, 0xFF, 0)
CHARTREUSE = Rgb(0x80, 0xFF, 0)
GREEN = Rgb(0, 0xFF, 0)
SPRING_GREEN = Rgb(0, 0xFF, 0x80)
CYAN = Rgb(0, 0xFF, 0xFF)
AZURE = Rgb(0, 0x80, 0xFF)
BLUE = Rgb(0, 0, 0xFF)
VIOLET = Rgb(0x80, 0, 0xFF)
MAGENTA = Rgb(0xFF, 0, 0xFF)
ROSE = Rgb(0xFF, 0, 0x80)

PALETTE: dict[str, Rgb] = {
    "black": BLACK,
    "white": WHITE,
    "red": RED,
    "orange": ORANGE,
    "yellow": YELLOW,
    "chartreuse": CHARTREUSE,
    "green": GREEN,
    "spring_green": SPRING_GREEN,
    "cyan": CYAN,
    "azure": AZURE,
    "blue": BLUE,
    "violet": VIOLET,
    "magenta": MAGENTA,
    "rose": ROSE,
}

for _name, _color in PALETTE.items():
    setattr(Rgb, _name.upper(), _color)
del _name, _color
