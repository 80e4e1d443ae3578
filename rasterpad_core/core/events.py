from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional


EventType = Literal[
    "key_down",
    "key_up",
    "resize",
    "close",
]


@dataclass(frozen=True)
class InputEvent:
    event_type: EventType
    timestamp: float = 0.0
    key: Optional[str] = None
    width: Optional[int] = None
    height: Optional[int] = None
