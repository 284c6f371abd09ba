"""Turn a column of pasted values into SQL ``IN`` list text."""

from __future__ import annotations

import re
from collections.abc import Sequence

BATCH_SIZE = 980
"""Largest number of values placed in one ``IN (...)`` group."""

_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> list[str]:
    """Split text into stripped lines; empty text still counts as one line."""
    return [line.strip() for line in _LINE_BREAK.split(text)]


def format_value_list(lines: Sequence[str]) -> str:
    """Join non-empty lines as quoted, comma separated SQL literals."""
    result = ""
    for position, raw in enumerate(lines):
        line = raw.strip()
        if not line:
            continue
        result = f"'{line}'" if position == 0 else f"{result},'{line}'"
    return result


def format_in_clauses(lines: Sequence[str], column: str) -> str:
    """Build ``column IN (...)`` groups of at most BATCH_SIZE values joined by OR."""
    last = len(lines) - 1
    result = ""
    for position, raw in enumerate(lines):
        line = raw.strip()
        if position == 0:
            if line:
                result = f"{column} IN ('{line}'"
        elif position == last:
            result += f",'{line}' )" if line else ")"
        elif position % BATCH_SIZE == 0:
            if line:
                result += f") OR {column} IN ('{line}'"
        elif line:
            result += f",'{line}'"
    return result


def needs_column(lines: Sequence[str]) -> bool:
    """Whether there are too many lines for a single value list."""
    return len(lines) > BATCH_SIZE


def format_text(text: str, column: str | None = None) -> str:
    """Format pasted text; a column name is required when it has many lines."""
    lines = split_lines(text)
    if needs_column(lines):
        if column is None:
            raise ValueError(
                f"more than {BATCH_SIZE} lines: a column name is required"
            )
        return format_in_clauses(lines, column)
    return format_value_list(lines)