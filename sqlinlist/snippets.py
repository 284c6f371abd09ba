"""Numbered store of SQL snippet texts loaded from UTF-8 files."""

from __future__ import annotations

import os


def decode_utf8(data: bytes | str) -> str:
    """Decode UTF-8 bytes, or re-decode text whose characters hold raw bytes."""
    if isinstance(data, str):
        data = data.split("\0", 1)[0]
        data = bytes(ord(char) & 0xFF for char in data)
    return data.decode("utf-8", errors="replace")


class SnippetStore:
    """Snippet texts keyed by number; unknown numbers read as empty text."""

    def __init__(self) -> None:
        self._snippets: dict[int, str] = {}

    def load(self, path: str | os.PathLike[str], index: int) -> str:
        """Read a UTF-8 file into slot ``index`` and return its text."""
        with open(path, "rb") as handle:
            text = decode_utf8(handle.read())
        self.add(index, text)
        return text

    def add(self, index: int, text: str) -> None:
        """Store ``text`` under ``index``, replacing what was there."""
        self._snippets[index] = text

    def get(self, index: int) -> str:
        """Return the snippet under ``index``, or an empty string."""
        return self._snippets.get(index, "")

    def __len__(self) -> int:
        return len(self._snippets)

    def __contains__(self, index: object) -> bool:
        return index in self._snippets