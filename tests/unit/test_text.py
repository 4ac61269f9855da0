import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "renderer"))

from mcdu_renderer.text import align_text, compose_columns, pad_or_truncate


class PadOrTruncateTests(unittest.TestCase):
    def test_pads_short_text(self):
        self.assertEqual(pad_or_truncate("abc", 6), "abc   ")

    def test_truncates_long_text(self):
        self.assertEqual(pad_or_truncate("abcdef", 3), "abc")

    def test_exact_length_unchanged(self):
        self.assertEqual(pad_or_truncate("abc", 3), "abc")


class AlignTextTests(unittest.TestCase):
    def test_left(self):
        self.assertEqual(align_text("hi", "left", 10), "hi        ")

    def test_right(self):
        self.assertEqual(align_text("hi", "right", 10), "        hi")

    def test_center(self):
        self.assertEqual(align_text("hi", "center", 10), "    hi    ")

    def test_center_odd_remainder_goes_right(self):
        self.assertEqual(align_text("hi", "center", 5), " hi  ")

    def test_overlong_text_truncated(self):
        self.assertEqual(align_text("abcdef", "right", 4), "abcd")


class ComposeColumnsTests(unittest.TestCase):
    def test_right_text_flush_right(self):
        self.assertEqual(compose_columns("ON", "OFF", 10), "ON     OFF")

    def test_right_text_wins_on_overlap(self):
        self.assertEqual(compose_columns("LONGTITLE", "12:00", 10), "LONG 12:00")

    def test_without_right_text(self):
        self.assertEqual(compose_columns("ON", "", 4), "ON  ")


if __name__ == "__main__":
    unittest.main()
