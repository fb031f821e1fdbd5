"""Markup Formatter Constants

Element names and character tables shared by the parser and the formatter.

Usage:
    from markupfmt.constants import VOID_ELEMENTS

References:
    - https://html.spec.whatwg.org/multipage/syntax.html#void-elements
    - https://html.spec.whatwg.org/multipage/syntax.html#attributes-2
"""

# Elements that never have content or an end tag. Compared against the
# ASCII-lowercased tag name.
VOID_ELEMENTS = frozenset(
    [
        "area",
        "base",
        "br",
        "col",
        "embed",
        "hr",
        "img",
        "input",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    ]
)

# Characters the HTML tokenizer treats as whitespace (no vertical tab).
ASCII_WHITESPACE = frozenset("\t\n\x0c\r ")

# Unicode noncharacters: U+FDD0..U+FDEF plus U+xFFFE/U+xFFFF in planes 0-16.
NONCHARACTERS = frozenset(
    [chr(code) for code in range(0xFDD0, 0xFDF0)]
    + [chr((plane << 16) | low) for plane in range(17) for low in (0xFFFE, 0xFFFF)]
)

# Characters that may never appear in an attribute name, besides
# NONCHARACTERS and the C1 control range.
ATTRIBUTE_NAME_EXCLUDED = frozenset("\t\n\x0c\r \"'/>=")

# Characters that end an unquoted attribute value, besides ASCII whitespace.
UNQUOTED_VALUE_EXCLUDED = frozenset("\"'<=>`")

# Characters that end a tag name, besides ASCII whitespace.
TAG_NAME_TERMINATORS = frozenset("/>")

LEGACY_COMPAT = "about:legacy-compat"

DOCTYPE_HTML = "<!DOCTYPE html>"
DOCTYPE_HTML_LEGACY = '<!DOCTYPE html SYSTEM "about:legacy-compat">'
EMPTY_COMMENT = "<!---->"

DEFAULT_LINE_WIDTH = 80
DEFAULT_INDENT_WIDTH = 2

MAX_LINE_WIDTH = 2**32 - 1
MAX_INDENT_WIDTH = 2**8 - 1
