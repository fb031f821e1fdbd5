"""Tests for the document algebra and renderer."""

import unittest

from markupfmt.doc import Concat, concat, group, hardline, join, line, line0, nest, nil, reflow, render, text


class TestConstruction(unittest.TestCase):
    def test_empty_text_is_nil(self):
        assert text("") is nil

    def test_concat_drops_nil_and_flattens(self):
        assert concat(nil, nil) is nil
        single = text("a")
        assert concat(nil, single) is single
        doc = concat(concat(text("a"), text("b")), text("c"))
        assert isinstance(doc, Concat)
        assert len(doc.parts) == 3

    def test_join(self):
        assert render(join([text("a"), text("b"), text("c")], text(", ")), 80) == "a, b, c"
        assert join([], line) is nil

    def test_repr(self):
        assert repr(group(concat(text("a"), line, line0))) == "group(concat(text('a'), line, line0))"


class TestRender(unittest.TestCase):
    def test_text(self):
        assert render(text("hello"), 80) == "hello"

    def test_group_flat_when_it_fits(self):
        doc = group(concat(text("a"), line, text("b")))
        assert render(doc, 80) == "a b"
        assert render(doc, 3) == "a b"

    def test_group_breaks_when_too_wide(self):
        doc = group(concat(text("a"), line, text("b")))
        assert render(doc, 2) == "a\nb"

    def test_line0_is_empty_when_flat(self):
        doc = group(concat(text("<p>"), line0, text("x"), line0, text("</p>")))
        assert render(doc, 80) == "<p>x</p>"
        assert render(doc, 5) == "<p>\nx\n</p>"

    def test_hardline_forces_enclosing_group_to_break(self):
        doc = group(concat(text("a"), line, text("b"), hardline, text("c")))
        assert render(doc, 80) == "a\nb\nc"

    def test_nest_indents_following_lines(self):
        doc = concat(text("a"), nest(2, concat(hardline, text("b"), hardline, text("c"))), hardline, text("d"))
        assert render(doc, 80) == "a\n  b\n  c\nd"

    def test_newline_takes_indentation_of_what_follows(self):
        doc = concat(nest(4, concat(text("a"), hardline)), text("b"))
        assert render(doc, 80) == "a\nb"

    def test_nested_groups_are_decided_independently(self):
        inner = group(concat(text("bb"), line, text("cc")))
        doc = group(concat(text("aaaa"), nest(2, concat(line, inner)), line, text("dd")))
        assert render(doc, 8) == "aaaa\n  bb cc\ndd"

    def test_fits_check_counts_trailing_content(self):
        doc = concat(group(concat(text("abc"), line, text("def"))), text("xyz"))
        assert render(doc, 10) == "abc defxyz"
        assert render(doc, 9) == "abc\ndefxyz"

    def test_fits_check_stops_at_next_line_break(self):
        doc = concat(group(concat(text("abc"), line, text("def"))), hardline, text("x" * 20))
        assert render(doc, 7) == "abc def\n" + "x" * 20

    def test_exact_width_fits(self):
        doc = group(concat(text("abcd"), line, text("efgh")))
        assert render(doc, 9) == "abcd efgh"
        assert render(doc, 8) == "abcd\nefgh"


class TestReflow(unittest.TestCase):
    def test_words_wrap_at_width(self):
        assert render(reflow("aaa bbb ccc"), 7) == "aaa bbb\nccc"

    def test_whitespace_runs_collapse(self):
        assert render(reflow("a  \n\t b"), 80) == "a b"

    def test_wrapped_words_keep_indentation(self):
        doc = concat(text("<p>"), nest(2, concat(hardline, reflow("one two three four"))), hardline, text("</p>"))
        assert render(doc, 12) == "<p>\n  one two\n  three four\n</p>"

    def test_long_word_overflows(self):
        assert render(reflow("a abcdefghij b"), 5) == "a\nabcdefghij\nb"


if __name__ == "__main__":
    unittest.main()
