"""Document algebra and width-aware renderer.

A document is an immutable tree of the primitives below. `render` lays it out
for a given width: every group is printed flat (separators as spaces or
nothing) when it fits on the rest of the current line, and broken (separators
as newlines at the current indentation) otherwise.

    doc = group(concat(text("<p"), nest(2, concat(line, text('class="a"'))), line0, text(">")))
    render(doc, 80)  # '<p class="a">'
"""

from __future__ import annotations

from collections.abc import Iterable


class Doc:
    __slots__ = ()

    def __add__(self, other: Doc) -> Doc:
        return concat(self, other)


class Nil(Doc):
    __slots__ = ()

    def __repr__(self) -> str:
        return "nil"


class Text(Doc):
    __slots__ = ("text",)

    def __init__(self, text: str) -> None:
        self.text = text

    def __repr__(self) -> str:
        return f"text({self.text!r})"


class Line(Doc):
    """A separator that is `flat` in flat layout and a newline otherwise."""

    __slots__ = ("flat",)

    def __init__(self, flat: str) -> None:
        self.flat = flat

    def __repr__(self) -> str:
        return "line" if self.flat else "line0"


class HardLine(Doc):
    __slots__ = ()

    def __repr__(self) -> str:
        return "hardline"


class Nest(Doc):
    __slots__ = ("doc", "indent")

    def __init__(self, indent: int, doc: Doc) -> None:
        self.indent = indent
        self.doc = doc

    def __repr__(self) -> str:
        return f"nest({self.indent}, {self.doc!r})"


class Group(Doc):
    __slots__ = ("doc",)

    def __init__(self, doc: Doc) -> None:
        self.doc = doc

    def __repr__(self) -> str:
        return f"group({self.doc!r})"


class Concat(Doc):
    __slots__ = ("parts",)

    def __init__(self, parts: tuple[Doc, ...]) -> None:
        self.parts = parts

    def __repr__(self) -> str:
        return f"concat({', '.join(repr(part) for part in self.parts)})"


nil = Nil()
line = Line(" ")
line0 = Line("")
hardline = HardLine()


def text(value: str) -> Doc:
    return Text(value) if value else nil


def nest(indent: int, doc: Doc) -> Doc:
    return Nest(indent, doc)


def group(doc: Doc) -> Doc:
    return Group(doc)


def concat(*docs: Doc) -> Doc:
    """Concatenate documents left to right, flattening nested sequences."""
    parts: list[Doc] = []
    for doc in docs:
        if isinstance(doc, Concat):
            parts.extend(doc.parts)
        elif doc is not nil:
            parts.append(doc)
    if not parts:
        return nil
    if len(parts) == 1:
        return parts[0]
    return Concat(tuple(parts))


def join(docs: Iterable[Doc], separator: Doc) -> Doc:
    parts: list[Doc] = []
    for doc in docs:
        if parts:
            parts.append(separator)
        parts.append(doc)
    return concat(*parts)


def reflow(value: str) -> Doc:
    """Word-wrap text: words stay on one line while they fit.

    Every separator is its own group, so each break is decided by whether
    the next word still fits on the current line.
    """
    return join((Text(word) for word in value.split()), group(line))


# Layout modes
BREAK = 0
FLAT = 1


def _fits(doc: Doc, commands: list[tuple[int, int, Doc]], column: int, width: int) -> bool:
    """Check whether doc, laid out flat, fits on the current line.

    After doc itself, the pending commands are measured in broken layout
    until the first newline, so content that follows the group on the same
    line counts against the remaining width.
    """
    stack = [doc]
    mode = FLAT
    index = len(commands)
    while True:
        if stack:
            current = stack.pop()
        elif index:
            index -= 1
            mode = BREAK
            current = commands[index][2]
        else:
            return True

        while True:
            if isinstance(current, Text):
                column += len(current.text)
                if column > width:
                    return False
            elif isinstance(current, Concat):
                stack.extend(reversed(current.parts[1:]))
                current = current.parts[0]
                continue
            elif isinstance(current, Line):
                if mode == BREAK:
                    return True
                column += len(current.flat)
                if column > width:
                    return False
            elif isinstance(current, HardLine):
                return mode == BREAK
            elif isinstance(current, (Group, Nest)):
                current = current.doc
                continue
            break


def render(doc: Doc, width: int) -> str:
    """Lay out doc within width columns and return the text."""
    out: list[str] = []
    column = 0
    commands: list[tuple[int, int, Doc]] = [(0, BREAK, doc)]

    while commands:
        indent, mode, current = commands.pop()
        while True:
            if isinstance(current, Text):
                out.append(current.text)
                column += len(current.text)
            elif isinstance(current, Concat):
                for part in reversed(current.parts[1:]):
                    commands.append((indent, mode, part))
                current = current.parts[0]
                continue
            elif isinstance(current, Group):
                if mode == BREAK and _fits(current.doc, commands, column, width):
                    mode = FLAT
                current = current.doc
                continue
            elif isinstance(current, Nest):
                indent += current.indent
                current = current.doc
                continue
            elif isinstance(current, Line) and mode == FLAT:
                out.append(current.flat)
                column += len(current.flat)
            elif isinstance(current, (Line, HardLine)):
                # A newline takes the indentation of whatever follows it.
                if commands:
                    indent, mode, current = commands.pop()
                    out.append("\n" + " " * indent)
                    column = indent
                    continue
                out.append("\n" + " " * indent)
                column = indent
            break

    return "".join(out)
