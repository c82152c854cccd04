import io
import unittest
import shutil
from contextlib import redirect_stdout, redirect_stderr
from pathlib import Path
from unittest import mock

from src.cli import main
from src.config import NO_DIFF_MESSAGE


class TestCli(unittest.TestCase):
    def setUp(self):
        self.base = Path("tests/_tmp_cli")
        if self.base.exists():
            shutil.rmtree(self.base)
        self.base.mkdir(parents=True, exist_ok=True)
        self.expected = self.base / "expected.txt"
        self.actual = self.base / "actual.txt"
        self.expected.write_text("foo\nbar\nbaz\n", encoding="utf-8")
        self.actual.write_text("foo\nBAR\nbaz\n", encoding="utf-8")
        patcher = mock.patch("src.cli.load_prefs", return_value={})
        patcher.start()
        self.addCleanup(patcher.stop)

    def tearDown(self):
        if self.base.exists():
            shutil.rmtree(self.base)

    def _run(self, *args):
        out = io.StringIO()
        with redirect_stdout(out), redirect_stderr(io.StringIO()):
            rc = main([str(self.expected), str(self.actual), "--no-color", *args])
        return rc, out.getvalue()

    def test_difference(self):
        rc, out = self._run("--no-expand", "-U", "1")
        self.assertEqual(rc, 1)
        self.assertIn("- bar\n+ BAR", out)
        self.assertNotIn("\x1b[", out)

    def test_identical(self):
        self.actual.write_text("foo\nbar\nbaz\n", encoding="utf-8")
        rc, out = self._run()
        self.assertEqual(rc, 0)
        self.assertEqual(out.strip(), NO_DIFF_MESSAGE)

    def test_ignore_indentation(self):
        self.expected.write_text("a\n    b\nc\n", encoding="utf-8")
        self.actual.write_text("a\n  b\nC\n", encoding="utf-8")
        rc, out = self._run("--ignore-indentation")
        self.assertEqual(rc, 1)
        self.assertIn("    b\n", out)
        self.assertIn("- c\n+ C", out)

    def test_counts(self):
        rc, out = self._run("--counts")
        self.assertIn("1 removed", out)
        self.assertIn("1 added", out)

    def test_missing_file(self):
        with redirect_stderr(io.StringIO()):
            rc = main([str(self.base / "nope.txt"), str(self.actual)])
        self.assertEqual(rc, 2)


if __name__ == "__main__":
    unittest.main()
