"""Command-line front end: `python -m markupfmt [FILES...]`."""

import argparse
import difflib
import sys
from pathlib import Path

from .configuration import Configuration
from .constants import DEFAULT_INDENT_WIDTH, DEFAULT_LINE_WIDTH
from .errors import FormatError
from .serialize import format  # noqa: A004


def build_arg_parser():
    parser = argparse.ArgumentParser(prog="markupfmt", description="Format HTML and template markup")
    parser.add_argument("files", nargs="*", type=Path, help="Files to format (default: read stdin)")
    parser.add_argument(
        "--line-width",
        type=int,
        default=DEFAULT_LINE_WIDTH,
        help=f"Maximum line width (default: {DEFAULT_LINE_WIDTH})",
    )
    parser.add_argument(
        "--indent-width",
        type=int,
        default=DEFAULT_INDENT_WIDTH,
        help=f"Spaces per indentation level (default: {DEFAULT_INDENT_WIDTH})",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--check",
        action="store_true",
        help="Don't write anything; exit with 1 and show a diff if a file is not formatted",
    )
    mode.add_argument("--write", "-w", action="store_true", help="Rewrite files in place")
    parser.add_argument("--strict", action="store_true", help="Fail on unmatched top-level end tags")
    parser.add_argument("--debug", action="store_true", help="Print parser trace")
    return parser


def _diff(original, formatted, name):
    return "".join(
        difflib.unified_diff(
            original.splitlines(keepends=True),
            formatted.splitlines(keepends=True),
            fromfile=f"{name} (original)",
            tofile=f"{name} (formatted)",
        )
    )


def main(argv=None):
    args = build_arg_parser().parse_args(argv)
    try:
        config = Configuration(line_width=args.line_width, indent_width=args.indent_width)
    except FormatError as e:
        print(f"markupfmt: {e}", file=sys.stderr)
        return 2

    if not args.files:
        source = sys.stdin.read()
        try:
            formatted = format(source, config, strict=args.strict, debug=args.debug)
        except FormatError as e:
            print(f"markupfmt: <stdin>: {e}", file=sys.stderr)
            return 2
        if args.check:
            if formatted != source:
                sys.stdout.write(_diff(source, formatted, "<stdin>"))
                return 1
            return 0
        sys.stdout.write(formatted)
        return 0

    status = 0
    for path in args.files:
        try:
            source = path.read_text(encoding="utf-8")
            formatted = format(source, config, strict=args.strict, debug=args.debug)
        except (OSError, UnicodeDecodeError, FormatError) as e:
            print(f"markupfmt: {path}: {e}", file=sys.stderr)
            status = 2
            continue

        if args.check:
            if formatted != source:
                sys.stdout.write(_diff(source, formatted, str(path)))
                status = max(status, 1)
        elif args.write:
            if formatted != source:
                path.write_text(formatted, encoding="utf-8")
                print(f"Formatted {path}")
        else:
            sys.stdout.write(formatted)
    return status


if __name__ == "__main__":
    sys.exit(main())
