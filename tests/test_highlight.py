import unittest

from src.core.highlight import (
    get_highlight_spaces,
    highlight_leading_trailing_spaces,
    highlight_trailing_spaces,
)


def bg(s):
    return f"[{s}]"


class TestHighlightTrailing(unittest.TestCase):
    def test_trailing_run_is_wrapped(self):
        self.assertEqual(highlight_trailing_spaces("x  ", bg), "x[  ]")

    def test_no_trailing_whitespace(self):
        self.assertEqual(highlight_trailing_spaces("x y", bg), "x y")

    def test_leading_spaces_untouched(self):
        self.assertEqual(highlight_trailing_spaces("   x", bg), "   x")


class TestHighlightLeadingTrailing(unittest.TestCase):
    def test_odd_leading_highlights_only_last(self):
        self.assertEqual(highlight_leading_trailing_spaces("   x", bg), "  [ ]x")
        self.assertEqual(highlight_leading_trailing_spaces("     x", bg), "    [ ]x")
        self.assertEqual(highlight_leading_trailing_spaces("\tx", bg), "[\t]x")

    def test_even_leading_not_highlighted(self):
        self.assertEqual(highlight_leading_trailing_spaces("    x", bg), "    x")

    def test_only_whitespace_is_one_trailing_run(self):
        self.assertEqual(highlight_leading_trailing_spaces("   ", bg), "[   ]")

    def test_both_edges(self):
        self.assertEqual(highlight_leading_trailing_spaces(" x ", bg), "[ ]x[ ]")

    def test_selection(self):
        self.assertIs(get_highlight_spaces(True), highlight_leading_trailing_spaces)
        self.assertIs(get_highlight_spaces(False), highlight_trailing_spaces)


if __name__ == "__main__":
    unittest.main()
