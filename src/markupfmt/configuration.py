"""Formatter configuration.

A `Configuration` is a plain value: the maximum line width and the width of
one indentation step. The formatter only ever reads it.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from .constants import DEFAULT_INDENT_WIDTH, DEFAULT_LINE_WIDTH, MAX_INDENT_WIDTH, MAX_LINE_WIDTH
from .errors import ConfigurationError

# Field name -> external (serialized) name.
_EXTERNAL_NAMES = {
    "line_width": "lineWidth",
    "indent_width": "indentWidth",
}


def _check_width(name: str, value: Any, maximum: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int):
        msg = f"{name} must be an integer, got {type(value).__name__}"
        raise ConfigurationError(msg)
    if value < 0 or value > maximum:
        msg = f"{name} must be between 0 and {maximum}, got {value}"
        raise ConfigurationError(msg)


@dataclass(frozen=True, slots=True)
class Configuration:
    line_width: int = DEFAULT_LINE_WIDTH
    indent_width: int = DEFAULT_INDENT_WIDTH

    def __post_init__(self) -> None:
        _check_width("line_width", self.line_width, MAX_LINE_WIDTH)
        _check_width("indent_width", self.indent_width, MAX_INDENT_WIDTH)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Configuration:
        """Build a configuration from its serialized form.

        Keys use the external names (`lineWidth`, `indentWidth`); missing keys
        take their defaults and unknown keys are rejected.
        """
        known = {external: field for field, external in _EXTERNAL_NAMES.items()}
        unknown = sorted(set(data) - set(known))
        if unknown:
            msg = f"Unknown configuration keys: {', '.join(unknown)}"
            raise ConfigurationError(msg)
        return cls(**{known[key]: value for key, value in data.items()})

    def to_dict(self) -> dict[str, int]:
        return {external: getattr(self, field) for field, external in _EXTERNAL_NAMES.items()}
