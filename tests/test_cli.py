"""Tests for the command-line front end."""

import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from io import StringIO
from pathlib import Path

from markupfmt.__main__ import main


def run(argv):
    out, err = StringIO(), StringIO()
    with redirect_stdout(out), redirect_stderr(err):
        status = main(argv)
    return status, out.getvalue(), err.getvalue()


class TestCommandLine(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.tmp = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def write(self, name, content):
        path = self.tmp / name
        path.write_text(content, encoding="utf-8")
        return path

    def test_prints_formatted_output(self):
        path = self.write("a.html", "<ul><li>x</li></ul>")
        status, out, _ = run([str(path)])
        assert status == 0
        assert out == "<ul>\n  <li>x</li>\n</ul>\n"

    def test_check_passes_for_formatted_file(self):
        path = self.write("a.html", "<br/>\n")
        status, out, _ = run(["--check", str(path)])
        assert status == 0
        assert out == ""

    def test_check_fails_with_diff(self):
        path = self.write("a.html", "<br>")
        status, out, _ = run(["--check", str(path)])
        assert status == 1
        assert "-<br>" in out
        assert "+<br/>" in out

    def test_write_rewrites_file(self):
        path = self.write("a.html", '<input   type=text>')
        status, out, _ = run(["--write", str(path)])
        assert status == 0
        assert path.read_text(encoding="utf-8") == '<input type="text"/>\n'
        assert "Formatted" in out

    def test_line_and_indent_width(self):
        path = self.write("a.html", '<input type="text" required>')
        status, out, _ = run(["--line-width", "20", "--indent-width", "4", str(path)])
        assert status == 0
        assert out == '<input\n    type="text"\n    required\n/>\n'

    def test_invalid_width(self):
        status, _, err = run(["--line-width", "-5"])
        assert status == 2
        assert "line_width" in err

    def test_missing_file(self):
        status, _, err = run([str(self.tmp / "missing.html")])
        assert status == 2
        assert "missing.html" in err

    def test_strict_error(self):
        path = self.write("a.html", "<p>x</p></div>")
        status, _, err = run(["--strict", str(path)])
        assert status == 2
        assert "unexpected-end-tag" in err


if __name__ == "__main__":
    unittest.main()
