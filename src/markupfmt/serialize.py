"""Formatting policy: turn parsed nodes into documents and render them."""

from __future__ import annotations

from collections.abc import Sequence

from .configuration import Configuration
from .constants import DOCTYPE_HTML, DOCTYPE_HTML_LEGACY, EMPTY_COMMENT
from .doc import Doc, concat, group, hardline, line, line0, nest, nil, reflow, render, text
from .errors import FormatError, ParseError
from .node import Comment, Doctype, Element, Node, NormalElement, Text, VoidElement
from .parser import Parser
from .utils import line_and_column, split_lines


def format(source: str, config: Configuration | None = None, *, strict: bool = False, debug: bool = False) -> str:  # noqa: A001
    """Format markup text.

    Raises FormatError if the input cannot be formatted. In strict mode an end
    tag at the top level, with no element to close, is an error; otherwise it
    and everything after it are dropped.
    """
    config = config or Configuration()
    if not isinstance(config, Configuration):
        msg = f"Expected a Configuration, got {type(config).__name__}"
        raise TypeError(msg)

    parser = Parser(source, debug=debug)
    try:
        nodes, end = parser.parse_document()
        if end < len(source) and strict:
            line_number, column = line_and_column(source, end)
            raise FormatError(ParseError("unexpected-end-tag", line_number, column))
        document = nodes_to_doc(nodes, config)
    except RecursionError:
        raise FormatError(ParseError("nesting-too-deep", message="Elements are nested too deeply")) from None

    if debug:
        print(f"Rendering {len(nodes)} nodes at width {config.line_width}, indent {config.indent_width}")
    return render(document, config.line_width)


def nodes_to_doc(nodes: Sequence[Node], config: Configuration) -> Doc:
    """Document for a top-level node sequence, one node per line."""
    return concat(*(concat(node_to_doc(node, config), line0) for node in nodes))


def node_to_doc(node: Node, config: Configuration) -> Doc:
    if isinstance(node, Comment):
        return _comment_to_doc(node, config)
    if isinstance(node, Doctype):
        return text(DOCTYPE_HTML_LEGACY if node.legacy else DOCTYPE_HTML)
    if isinstance(node, (VoidElement, NormalElement)):
        return _element_to_doc(node, config)
    if isinstance(node, Text):
        return reflow(node.body) if node.body else nil
    msg = f"Unknown node type: {type(node).__name__}"
    raise TypeError(msg)


def _comment_to_doc(comment: Comment, config: Configuration) -> Doc:
    if comment.is_empty:
        return text(EMPTY_COMMENT)

    lines = split_lines(comment.text)
    body = concat(*(concat(line, text(body_line)) for body_line in lines))

    if len(lines) == 1:
        # `<!-- text -->` when it fits, else the text indented on its own line
        body = concat(nest(config.indent_width, body), line)
    else:
        # Lines are kept verbatim; the closing delimiter goes on its own line
        body = concat(body, hardline)

    return group(concat(text("<!--"), body, text("-->")))


def _attribute_to_doc(name: str, value: str | None) -> Doc:
    if value is None:
        return concat(line, text(name))
    return concat(line, text(name), text("="), text(f'"{value}"'))


def _element_to_doc(element: Element, config: Configuration) -> Doc:
    indent = config.indent_width
    parts = [text("<"), text(element.name)]

    if element.attributes:
        attributes = concat(*(_attribute_to_doc(name, value) for name, value in element.attributes))
        parts.append(group(concat(nest(indent, attributes), line0)))

    if isinstance(element, VoidElement):
        parts.append(text("/>"))
        return concat(*parts)

    parts.append(text(">"))

    children = element.content
    if children:
        # Elements without any text child always get one child per line
        force_multiline = not any(isinstance(child, Text) for child in children)
        separator = hardline if force_multiline else line0
        block = concat(*(concat(separator, node_to_doc(child, config)) for child in children))
        parts.append(group(concat(nest(indent, block), line0)))

    parts.append(text(f"</{element.name}>"))
    return group(concat(*parts))
