from __future__ import annotations

import unittest

from rasterpad_core.core.events import InputEvent
from rasterpad_core.core.key_state import ESCAPE, KeyState


class KeyStateTests(unittest.TestCase):
    def test_press_and_release(self) -> None:
        keys = KeyState()
        self.assertTrue(keys.apply(InputEvent("key_down", key=ESCAPE)))
        self.assertTrue(keys.is_pressed(ESCAPE))
        self.assertTrue(keys.apply(InputEvent("key_up", key=ESCAPE)))
        self.assertFalse(keys.is_pressed(ESCAPE))

    def test_release_of_unpressed_key_is_noop(self) -> None:
        keys = KeyState()
        keys.apply(InputEvent("key_up", key="a"))
        self.assertEqual(keys.pressed(), frozenset())

    def test_non_key_events_are_ignored(self) -> None:
        keys = KeyState()
        self.assertFalse(keys.apply(InputEvent("resize", width=4, height=4)))
        self.assertEqual(keys.pressed(), frozenset())

    def test_key_event_without_key_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            KeyState().apply(InputEvent("key_down"))

    def test_instances_do_not_share_state(self) -> None:
        first = KeyState()
        second = KeyState()
        first.apply(InputEvent("key_down", key="w"))
        self.assertFalse(second.is_pressed("w"))
        first.clear()
        self.assertFalse(first.is_pressed("w"))


if __name__ == "__main__":
    unittest.main()
