"""Tests for ``WrapConfig`` validation and copies."""

from __future__ import annotations

import unittest

from commentwrap import WrapConfig


class WrapConfigTests(unittest.TestCase):
    def test_defaults(self) -> None:
        config = WrapConfig()
        self.assertEqual(config.width, 80)
        self.assertEqual(config.delimiter, "//")
        self.assertEqual(config.tab_width, 8)

    def test_invalid_values_are_rejected(self) -> None:
        for kwargs in ({"width": 0}, {"width": -3}, {"width": True}, {"delimiter": ""}, {"delimiter": "#\n"}, {"tab_width": 0}):
            with self.subTest(kwargs=kwargs), self.assertRaises(ValueError):
                WrapConfig(**kwargs)

    def test_copies_leave_original_untouched(self) -> None:
        config = WrapConfig()
        narrow = config.with_width(40)
        hashed = config.with_delimiter("#")
        self.assertEqual(narrow.width, 40)
        self.assertEqual(hashed.delimiter, "#")
        self.assertEqual(config, WrapConfig())


if __name__ == "__main__":
    unittest.main()
