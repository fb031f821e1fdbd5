"""Lexical predicates and small string helpers.

Character-class tests used across the parser, plus the line splitting the
formatter needs for comment bodies.
"""

from .constants import (
    ASCII_WHITESPACE,
    ATTRIBUTE_NAME_EXCLUDED,
    NONCHARACTERS,
    UNQUOTED_VALUE_EXCLUDED,
)


def is_attribute_name_char(char):
    """Check if char may appear in an attribute name."""
    if "\x7f" <= char <= "\x9f":
        return False
    return char not in ATTRIBUTE_NAME_EXCLUDED and char not in NONCHARACTERS


def is_unquoted_value_char(char):
    return char not in ASCII_WHITESPACE and char not in UNQUOTED_VALUE_EXCLUDED


def skip_ascii_whitespace(text, pos):
    """Return the first index at or after pos that is not ASCII whitespace."""
    length = len(text)
    while pos < length and text[pos] in ASCII_WHITESPACE:
        pos += 1
    return pos


def skip_whitespace(text, pos):
    """Like skip_ascii_whitespace, but for any Unicode whitespace."""
    length = len(text)
    while pos < length and text[pos].isspace():
        pos += 1
    return pos


def split_lines(text):
    """Split text into lines on LF, dropping a trailing CR from each line.

    A final line terminator does not produce an empty trailing line, and
    the empty string has no lines.
    """
    if not text:
        return []
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def line_and_column(text, offset):
    """Convert a string offset into a 1-based (line, column) pair."""
    line = text.count("\n", 0, offset) + 1
    last_newline = text.rfind("\n", 0, offset)
    return line, offset - last_newline
