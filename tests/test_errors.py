"""Tests for error reporting and strict mode."""

import unittest

from markupfmt import FormatError, ParseError, format


class TestParseError(unittest.TestCase):
    def test_str_with_location(self):
        error = ParseError("unexpected-end-tag", line=3, column=7)
        assert str(error) == "(3,7): unexpected-end-tag"
        assert repr(error) == "ParseError('unexpected-end-tag', line=3, column=7)"

    def test_str_with_message(self):
        error = ParseError("nesting-too-deep", message="Elements are nested too deeply")
        assert str(error) == "nesting-too-deep - Elements are nested too deeply"
        assert repr(error) == "ParseError('nesting-too-deep')"

    def test_equality_ignores_message(self):
        assert ParseError("x", 1, 2, "one") == ParseError("x", 1, 2, "two")
        assert ParseError("x", 1, 2) != ParseError("x", 1, 3)


class TestStrictMode(unittest.TestCase):
    def test_unmatched_end_tag_is_dropped_by_default(self):
        assert format("<p>x</p></div>trailing") == "<p>x</p>\n"

    def test_strict_mode_raises_on_unmatched_end_tag(self):
        with self.assertRaises(FormatError) as ctx:
            format("<p>x</p></div>trailing", strict=True)
        assert ctx.exception.error == ParseError("unexpected-end-tag", 1, 9)

    def test_strict_mode_reports_line_and_column(self):
        with self.assertRaises(FormatError) as ctx:
            format("<div>\n  <b>x</i>\n</div>", strict=True)
        error = ctx.exception.error
        assert error.code == "unexpected-end-tag"
        assert (error.line, error.column) == (2, 7)

    def test_strict_mode_accepts_well_formed_input(self):
        assert format("<p>x</p>", strict=True) == "<p>x</p>\n"

    def test_deep_nesting_is_a_format_error(self):
        source = "<div>" * 3000 + "</div>" * 3000
        with self.assertRaises(FormatError) as ctx:
            format(source)
        assert ctx.exception.error.code == "nesting-too-deep"


if __name__ == "__main__":
    unittest.main()
