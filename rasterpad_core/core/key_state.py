from __future__ import annotations

from dataclasses import dataclass, field

from .events import InputEvent


ESCAPE = "Escape"


@dataclass
class KeyState:
    """Pressed-key set owned by a render loop and updated from discrete events."""

    _pressed: set[str] = field(default_factory=set)

    def apply(self, event: InputEvent) -> bool:
        """Update from a key event. Returns False for events that are not key events."""
        if event.event_type not in ("key_down", "key_up"):
            return False
        if not event.key:
            raise ValueError(f"{event.event_type} event requires a key")
        if event.event_type == "key_down":
            self._pressed.add(event.key)
        else:
            self._pressed.discard(event.key)
        return True

    def is_pressed(self, key: str) -> bool:
        return key in self._pressed

    def pressed(self) -> frozenset[str]:
        return frozenset(self._pressed)

    def clear(self) -> None:
        self._pressed.clear()
