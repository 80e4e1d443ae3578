from __future__ import annotations

import unittest

from rasterpad_core.core.color import BLUE, PALETTE, RED, SPRING_GREEN, Rgb
from rasterpad_core.core.errors import InvalidArgumentError


class RgbTests(unittest.TestCase):
    def test_palette_values(self) -> None:
        self.assertEqual(len(PALETTE), 14)
        self.assertEqual(PALETTE["orange"], Rgb(255, 128, 0))
        self.assertEqual(PALETTE["rose"], Rgb(255, 0, 128))
        self.assertEqual(SPRING_GREEN, Rgb(0, 255, 128))

    def test_palette_is_exposed_on_class(self) -> None:
        self.assertIs(Rgb.RED, RED)
        self.assertIs(Rgb.BLUE, BLUE)
        self.assertEqual(Rgb.AZURE, Rgb(0, 128, 255))

    def test_rgba_is_opaque(self) -> None:
        self.assertEqual(Rgb(1, 2, 3).rgba, (1, 2, 3, 255))

    def test_rejects_out_of_range_channel(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            Rgb(256, 0, 0)
        with self.assertRaises(ValueError):
            Rgb(0, -1, 0)

    def test_rejects_non_int_channel(self) -> None:
        with self.assertRaises(InvalidArgumentError):
            Rgb(0.5, 0, 0)  # type: ignore[arg-type]

    def test_is_immutable(self) -> None:
        with self.assertRaises(AttributeError):
            RED.r = 0  # type: ignore[misc]


if __name__ == "__main__":
    unittest.main()
