"""Tests for theme name normalization and color-mode selection."""

from __future__ import annotations

import unittest

from spotfind import ui_theme
from spotfind.ui_theme import DEFAULT_THEME, PLAIN_THEME, normalize_theme_name, resolve_theme


class UIThemeTests(unittest.TestCase):
    def test_normalize_theme_name_falls_back_to_default(self) -> None:
        self.assertEqual(normalize_theme_name(None), "default")
        self.assertEqual(normalize_theme_name(" PLAIN "), "plain")
        self.assertEqual(normalize_theme_name("solarized"), "default")

    def test_resolve_theme_honors_no_color(self) -> None:
        self.assertIs(resolve_theme("default"), DEFAULT_THEME)
        self.assertIs(resolve_theme("plain"), PLAIN_THEME)
        self.assertIs(resolve_theme("default", no_color=True), PLAIN_THEME)

    def test_public_surface(self) -> None:
        self.assertEqual(
            sorted(ui_theme.__all__),
            sorted(["UITheme", "DEFAULT_THEME", "PLAIN_THEME", "normalize_theme_name", "resolve_theme"]),
        )


if __name__ == "__main__":
    unittest.main()
