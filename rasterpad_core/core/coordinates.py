from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from .errors import InvalidArgumentError


def require_int(value: object, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(f"{label} must be an int, got {type(value).__name__}")
    return value


@dataclass(frozen=True)
class Point:
    """Pixel address in buffer space. May be negative or out of range."""

    x: int
    y: int

    def __post_init__(self) -> None:
        require_int(self.x, "x")
        require_int(self.y, "y")

    def offset(self, dx: int, dy: int) -> Point:
        return Point(self.x + dx, self.y + dy)

    def as_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)


PointLike = Union[Point, tuple[int, int]]


def as_point(value: PointLike) -> Point:
    if isinstance(value, Point):
        return value
    x, y = value
    return Point(x, y)
