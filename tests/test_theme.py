from __future__ import annotations

from unittest import mock
import unittest

import theme


class TestTheme(unittest.TestCase):
    def test_hex_helpers(self) -> None:
        self.assertEqual((71, 110, 174), theme._rgb("#476EAE"))
        self.assertTrue(theme._is_hex("a7e399"))
        self.assertFalse(theme._is_hex("#12345"))
        self.assertEqual(16, theme._cube_index(0, 0, 0))
        self.assertEqual(231, theme._cube_index(255, 255, 255))

    def test_escape_sequences_when_enabled(self) -> None:
        with mock.patch.object(theme, "_ENABLE", True), mock.patch.object(theme, "_USE_TRUECOLOR", True):
            self.assertEqual("\033[38;2;1;2;3m", theme._fg("#010203"))
        with mock.patch.object(theme, "_ENABLE", True), mock.patch.object(theme, "_USE_TRUECOLOR", False):
            self.assertEqual("\033[38;5;16m", theme._fg("#000000"))

    def test_color_is_plain_when_disabled(self) -> None:
        with mock.patch.object(theme, "_ENABLE", False):
            self.assertEqual("text", theme.color("text", theme.BOLD))
            self.assertEqual("", theme._sgr(1))

    def test_every_tier_has_a_color(self) -> None:
        self.assertEqual({"good", "passable", "poor"}, set(theme.TIER_COLOR))


if __name__ == "__main__":
    unittest.main()
