"""Markup parser.

Every parse method takes a position into the input and returns either None
(no match at that position, nothing consumed) or the parsed value together
with the position just past it. Failure is ordinary control flow: the node
sequence parser uses it to decide when to fall back to literal text, so a
malformed element never aborts the surrounding document.

Element content is parsed with an explicit stack of open elements, so a
document may leave any number of start tags unclosed.
"""

import re

from .constants import ASCII_WHITESPACE, LEGACY_COMPAT, TAG_NAME_TERMINATORS, VOID_ELEMENTS
from .node import Comment, Doctype, NormalElement, Text, VoidElement
from .utils import (
    is_attribute_name_char,
    is_unquoted_value_char,
    line_and_column,
    skip_ascii_whitespace,
    skip_whitespace,
)

_ASCII_LOWER_TABLE = str.maketrans({chr(code): chr(code + 32) for code in range(65, 91)})
_TAG_NAME_PATTERN = re.compile(f"[^{re.escape(''.join(sorted(ASCII_WHITESPACE | TAG_NAME_TERMINATORS)))}]*")


def _ascii_lower(text):
    return text.translate(_ASCII_LOWER_TABLE)


class _OpenElement:
    """A start tag whose content is still being parsed.

    name is None for the document itself. text_start is the offset where the
    text run currently being scanned began, or None between nodes.
    """

    __slots__ = ("attributes", "name", "nodes", "start", "text_start")

    def __init__(self, name, attributes, start):
        self.name = name
        self.attributes = attributes
        self.start = start
        self.nodes = []
        self.text_start = None


class Parser:
    __slots__ = ("_memo", "_open", "env_debug", "length", "text")

    def __init__(self, text, *, debug=False):
        self.text = text
        self.length = len(text)
        self.env_debug = bool(debug)
        # position -> result of parse_non_text at that position
        self._memo = {}
        self._open = []

    def debug(self, message, indent=0):
        if self.env_debug:
            depth = max(len(self._open) - 1, 0)
            print(f"{' ' * (indent + 2 * depth)}{message}")

    def _where(self, pos):
        line, column = line_and_column(self.text, pos)
        return f"{line}:{column}"

    def _match_no_case(self, literal, pos):
        """Check for an ASCII case-insensitive literal (given in lowercase) at pos."""
        return _ascii_lower(self.text[pos : pos + len(literal)]) == literal

    # Document

    def parse_document(self):
        """Parse the whole input as a node sequence.

        Returns (nodes, end). end is less than the input length only when the
        sequence stopped at an end tag with no open element to close.
        """
        nodes, end = self.parse_many(0)
        if end < self.length and self.env_debug:
            self.debug(f"Stopped at unmatched end tag at {self._where(end)}")
        return nodes, end

    def parse_many(self, pos):
        """Parse nodes until an end tag or the end of input.

        The end tag is left unconsumed for the caller.
        """
        return self._parse_content(_OpenElement(None, (), pos), pos)

    def parse_non_text(self, pos):
        """Try a comment, a doctype, then an element at pos."""
        if not self.text.startswith("<", pos):
            return None
        try:
            return self._memo[pos]
        except KeyError:
            pass
        result = self.parse_comment(pos) or self.parse_doctype(pos) or self.parse_element(pos)
        self._memo[pos] = result
        return result

    def parse_element(self, pos):
        start_tag = self.parse_start_tag(pos)
        if start_tag is None:
            return None
        name, attributes, void, end = start_tag
        if void:
            return VoidElement(name, attributes), end
        return self._parse_content(_OpenElement(name, attributes, pos), end)

    def _parse_content(self, root, pos):
        """Parse the content of root, and of every element opened inside it.

        Nodes accumulate in the innermost open element. An element closes at
        the first end tag at a node boundary: a matching name finishes it, any
        other end tag (or the end of input) fails it, and its parent then
        rescans the element's text from one past its `<` as literal text.

        Returns what parse_element returns for root, or (nodes, end) when root
        is the document.
        """
        text = self.text
        length = self.length
        memo = self._memo
        stack = self._open
        base = len(stack)
        stack.append(root)
        pos = skip_whitespace(text, pos)
        try:
            while True:
                current = stack[-1]
                if current.text_start is None:
                    if pos >= length or self.parse_end_tag(pos) is not None:
                        result = self._close(current, pos)
                        stack.pop()
                        if len(stack) == base:
                            return result
                        pos = self._attach(stack[-1], current.start, result)
                        continue
                    if not text.startswith("<", pos):
                        current.text_start = pos
                        continue
                    index = pos
                else:
                    index = text.find("<", pos)
                    if index == -1:
                        current.nodes.append(Text(text[current.text_start :].rstrip()))
                        current.text_start = None
                        pos = length
                        continue
                    if self.parse_end_tag(index) is not None:
                        current.nodes.append(Text(text[current.text_start : index].rstrip()))
                        current.text_start = None
                        pos = index
                        continue

                if index in memo:
                    result = memo[index]
                else:
                    result = self.parse_comment(index) or self.parse_doctype(index)
                    if result is None:
                        start_tag = self.parse_start_tag(index)
                        if start_tag is not None:
                            name, attributes, void, end = start_tag
                            if not void:
                                if self.env_debug:
                                    self.debug(f"<{name}> at {self._where(index)}")
                                stack.append(_OpenElement(name, attributes, index))
                                pos = skip_whitespace(text, end)
                                continue
                            result = VoidElement(name, attributes), end
                    memo[index] = result
                pos = self._attach(current, index, result)
        finally:
            del stack[base:]

    def _close(self, element, pos):
        """Finish an open element at the end tag (or end of input) at pos."""
        if element.name is None:
            return tuple(element.nodes), min(pos, self.length)

        end_tag = self.parse_end_tag(pos)
        if end_tag is None or end_tag[0] != element.name:
            if self.env_debug:
                where = f"<{element.name}> at {self._where(element.start)}"
                if end_tag is None:
                    self.debug(f"{where} has no end tag", indent=2)
                else:
                    self.debug(f"{where} closed by </{end_tag[0]}>", indent=2)
            result = None
        else:
            node = NormalElement(element.name, element.attributes, tuple(element.nodes))
            result = node, end_tag[1]
        self._memo[element.start] = result
        return result

    def _attach(self, parent, index, result):
        """Record the outcome of a node attempt at index; return where to resume."""
        if result is None:
            if parent.text_start is None:
                parent.text_start = index
            if self.env_debug:
                self.debug(f"Treating '<' at {self._where(index)} as text")
            return index + 1

        node, end = result
        if parent.text_start is not None:
            parent.nodes.append(Text(self.text[parent.text_start : index].rstrip()))
            parent.text_start = None
        parent.nodes.append(node)
        return skip_whitespace(self.text, end)

    # Leaf nodes

    def parse_comment(self, pos):
        text = self.text
        if not text.startswith("<!--", pos):
            return None
        start = pos + 4
        close = text.find("-->", start)
        if close == -1:
            if self.env_debug:
                self.debug(f"Unterminated comment at {self._where(pos)}")
            return None
        return Comment(normalize_comment(text[start:close])), close + 3

    def parse_doctype(self, pos):
        text = self.text
        if not text.startswith("<!", pos) or not self._match_no_case("doctype", pos + 2):
            return None
        pos += 9
        end = skip_ascii_whitespace(text, pos)
        if end == pos or not self._match_no_case("html", end):
            return None
        pos = end + 4

        legacy_end = self._parse_legacy_string(pos)
        if legacy_end is not None:
            pos = legacy_end
        if not text.startswith(">", pos):
            return None
        return Doctype(legacy=legacy_end is not None), pos + 1

    def _parse_legacy_string(self, pos):
        """Match whitespace + SYSTEM "about:legacy-compat" (either quote style)."""
        text = self.text
        end = skip_ascii_whitespace(text, pos)
        if end == pos or not self._match_no_case("system", end):
            return None
        pos = end + 6
        end = skip_ascii_whitespace(text, pos)
        if end == pos:
            return None
        for quote in "\"'":
            literal = f"{quote}{LEGACY_COMPAT}{quote}"
            if text.startswith(literal, end):
                return end + len(literal)
        return None

    # Tags and attributes

    def parse_tag_name(self, pos):
        """Return the end of the tag name starting at pos. The name may be empty."""
        return _TAG_NAME_PATTERN.match(self.text, pos).end()

    def parse_end_tag(self, pos):
        text = self.text
        if not text.startswith("</", pos):
            return None
        name_end = self.parse_tag_name(pos + 2)
        end = skip_ascii_whitespace(text, name_end)
        if not text.startswith(">", end):
            return None
        return text[pos + 2 : name_end], end + 1

    def parse_attribute_name(self, pos):
        text = self.text
        length = self.length
        end = pos
        while end < length and is_attribute_name_char(text[end]):
            end += 1
        if end == pos:
            return None
        return end

    def parse_attribute(self, pos):
        """Parse `name` or `name=value`. Returns ((name, value), end)."""
        name_end = self.parse_attribute_name(pos)
        if name_end is None:
            return None
        name = self.text[pos:name_end]
        value = self._parse_attribute_value(name_end)
        if value is None:
            return (name, None), name_end
        value, end = value
        return (name, value), end

    def _parse_attribute_value(self, pos):
        text = self.text
        pos = skip_ascii_whitespace(text, pos)
        if not text.startswith("=", pos):
            return None
        pos = skip_ascii_whitespace(text, pos + 1)
        if pos >= self.length:
            return None

        quote = text[pos]
        if quote in "\"'":
            close = text.find(quote, pos + 1)
            if close == -1:
                return None
            return text[pos + 1 : close], close + 1

        end = pos
        while end < self.length and is_unquoted_value_char(text[end]):
            end += 1
        if end == pos:
            return None
        return text[pos:end], end

    def parse_start_tag(self, pos):
        """Parse `<name attr...>` or `<name attr.../>`.

        Returns (name, attributes, void, end). void is true for self-closing
        tags and for void element names in any ASCII case.
        """
        text = self.text
        if not text.startswith("<", pos) or text.startswith("!", pos + 1):
            return None
        name_end = self.parse_tag_name(pos + 1)
        name = text[pos + 1 : name_end]
        pos = name_end

        attributes = []
        while True:
            attribute_start = skip_ascii_whitespace(text, pos)
            if attribute_start == pos:
                break
            result = self.parse_attribute(attribute_start)
            if result is None:
                break
            attribute, pos = result
            attributes.append(attribute)

        pos = skip_ascii_whitespace(text, pos)
        self_closing = text.startswith("/", pos)
        if self_closing:
            pos += 1
        if not text.startswith(">", pos):
            return None
        void = self_closing or _ascii_lower(name) in VOID_ELEMENTS
        return name, tuple(attributes), void, pos + 1


def normalize_comment(raw):
    """Extract the body of a comment from the text between its delimiters.

    Single-line content is trimmed. Multi-line content keeps every line
    between the first and last newline verbatim.
    """
    trimmed = raw.strip()
    if "\n" not in trimmed:
        return trimmed
    first = raw.find("\n")
    last = raw.rfind("\n")
    if first == last:
        return trimmed
    return raw[first + 1 : last]


def parse(text, *, debug=False):
    """Parse markup text into a tuple of nodes."""
    nodes, _ = Parser(text, debug=debug).parse_document()
    return nodes
