from .configuration import Configuration
from .errors import ConfigurationError, FormatError, ParseError
from .node import Comment, Doctype, NormalElement, Text, VoidElement
from .parser import parse
from .serialize import format  # noqa: A004

__all__ = [
    "Comment",
    "Configuration",
    "ConfigurationError",
    "Doctype",
    "FormatError",
    "NormalElement",
    "ParseError",
    "Text",
    "VoidElement",
    "format",
    "parse",
]

__version__ = "0.1.0"
