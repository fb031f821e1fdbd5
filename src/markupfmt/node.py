"""Syntax tree produced by the parser.

Nodes are immutable values. They are built once per parse, consumed once by
the formatter, and never shared between calls.
"""

from __future__ import annotations

from dataclasses import dataclass, field

Attribute = tuple[str, "str | None"]


@dataclass(frozen=True, slots=True)
class Comment:
    """A comment. `text` is the normalized body without the delimiters."""

    text: str

    @property
    def is_empty(self) -> bool:
        return not self.text


@dataclass(frozen=True, slots=True)
class Doctype:
    # Only the presence of the about:legacy-compat string survives parsing.
    legacy: bool = False


@dataclass(frozen=True, slots=True)
class VoidElement:
    """An element without content or end tag.

    Either its name is one of the void element names, or it was written
    self-closing (`<MyComponent/>`).
    """

    name: str
    attributes: tuple[Attribute, ...] = ()


@dataclass(frozen=True, slots=True)
class NormalElement:
    name: str
    attributes: tuple[Attribute, ...] = ()
    content: tuple[Node, ...] = field(default=())


@dataclass(frozen=True, slots=True)
class Text:
    """A run of character data, trimmed. Never contains an end tag."""

    body: str


Element = VoidElement | NormalElement
Node = Comment | Doctype | VoidElement | NormalElement | Text
