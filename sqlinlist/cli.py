"""Command line entry point: format pasted values into SQL IN lists."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from sqlinlist.editor import Editor
from sqlinlist.formatting import needs_column, split_lines
from sqlinlist.snippets import SnippetStore


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sqlinlist",
        description="Format one value per line into a quoted SQL value list.",
    )
    parser.add_argument("file", nargs="?", help="input file (default: stdin)")
    parser.add_argument(
        "-c", "--column", help="column name used when the input needs IN groups"
    )
    parser.add_argument(
        "-r",
        "--replace",
        nargs=2,
        action="append",
        metavar=("OLD", "NEW"),
        default=[],
        help="replace OLD with NEW in the result (may be repeated)",
    )
    parser.add_argument(
        "-s", "--snippet", help="print the given UTF-8 snippet file instead"
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the formatter and print the result."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    editor = Editor(snippets=SnippetStore())
    if args.snippet:
        try:
            editor.snippets.load(args.snippet, 0)
        except OSError as error:
            parser.error(f"cannot read snippet: {error}")
        editor.show_snippet(0)
    else:
        if args.file:
            try:
                with open(args.file, encoding="utf-8") as handle:
                    editor.text = handle.read()
            except OSError as error:
                parser.error(f"cannot read input: {error}")
        else:
            editor.text = sys.stdin.read()

        column = args.column
        if column is None and needs_column(split_lines(editor.text)):
            if not args.file:
                parser.error("input has too many lines: --column is required")
            column = input("Column name: ").strip()
        editor.format(column)

    for old, new in args.replace:
        editor.replace(old, new)
    print(editor.text)
    return 0


if __name__ == "__main__":
    sys.exit(main())