import unittest

from src.core.line_normalizer import resolve_lines, split_lines, unindent


class TestLineNormalizer(unittest.TestCase):
    def test_split_lines(self):
        self.assertEqual(split_lines(""), [""])
        self.assertEqual(split_lines("a\nb\n"), ["a", "b", ""])

    def test_unindent(self):
        self.assertEqual(unindent("  a\n\tb\nc  "), "a\nb\nc  ")

    def test_without_original_shares_lists(self):
        lines = resolve_lines("a\nb", "a")
        self.assertIs(lines.a_lines_un, lines.a_lines_in)
        self.assertIs(lines.b_lines_un, lines.b_lines_in)
        self.assertFalse(lines.a_has_indentation)

    def test_with_original(self):
        lines = resolve_lines("a\nb", "a", ("a\n  b", "a"))
        self.assertEqual(lines.a_lines_un, ["a", "b"])
        self.assertEqual(lines.a_lines_in, ["a", "  b"])
        self.assertTrue(lines.a_has_indentation)
        self.assertTrue(lines.b_has_indentation)

    def test_length_mismatch_falls_back(self):
        lines = resolve_lines("a\nb", "a", ("a\n  b\nc", "a"))
        self.assertIs(lines.a_lines_un, lines.a_lines_in)
        self.assertIs(lines.b_lines_un, lines.b_lines_in)
        self.assertEqual(lines.a_lines_un, ["a", "  b", "c"])


if __name__ == "__main__":
    unittest.main()
