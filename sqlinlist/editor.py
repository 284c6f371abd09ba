"""Editable text buffer with formatting, replacement and snippet commands."""

from __future__ import annotations

import os
import tempfile
import webbrowser
from dataclasses import dataclass, field
from pathlib import Path

from sqlinlist.formatting import format_text
from sqlinlist.snippets import SnippetStore


@dataclass
class Editor:
    """The working text and the snippets that can be put into it."""

    text: str = ""
    snippets: SnippetStore = field(default_factory=SnippetStore)

    def clear(self) -> None:
        """Empty the text."""
        self.text = ""

    def format(self, column: str | None = None) -> str:
        """Replace the text with its SQL value-list form and return it."""
        self.text = format_text(self.text, column)
        return self.text

    def replace(self, old: str, new: str) -> int:
        """Replace every ``old`` with ``new``; return how many were replaced."""
        if not old:
            return 0
        count = self.text.count(old)
        if count:
            self.text = self.text.replace(old, new)
        return count

    def show_snippet(self, index: int) -> str:
        """Put the snippet under ``index`` into the text and return it."""
        self.text = self.snippets.get(index)
        return self.text


def write_help_page(
    content: str | bytes, directory: str | os.PathLike[str] | None = None
) -> Path:
    """Write ``content`` to a new temporary ``.html`` file and return its path."""
    data = content.encode("utf-8") if isinstance(content, str) else content
    handle, name = tempfile.mkstemp(prefix="sql", suffix=".html", dir=directory)
    with os.fdopen(handle, "wb") as stream:
        stream.write(data)
    return Path(name)


def open_in_browser(path: str | os.PathLike[str]) -> None:
    """Open an existing HTML file with the default browser."""
    target = Path(path)
    if not target.exists():
        raise FileNotFoundError(f"HTML file does not exist: {target}")
    if not webbrowser.open(target.resolve().as_uri()):
        raise OSError(f"could not open HTML file: {target}")