"""Editing surface used by the insert commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(frozen=True)
class Cursor:
    """Zero-based line and column position."""

    line: int
    ch: int


class Editor(Protocol):
    """Minimal document interface the commands write through."""

    def get_cursor(self) -> Cursor: ...

    def set_cursor(self, cursor: Cursor) -> None: ...

    def replace_range(self, text: str, at: Cursor) -> None: ...

    def get_value(self) -> str: ...

    def set_value(self, content: str) -> None: ...


class TextDocument:
    """In-memory plain-text document with a single cursor."""

    def __init__(self, content: str = "", cursor: Cursor | None = None) -> None:
        self._content = content
        self._cursor = self._clamp(cursor or Cursor(0, 0))

    def get_cursor(self) -> Cursor:
        return self._cursor

    def set_cursor(self, cursor: Cursor) -> None:
        self._cursor = self._clamp(cursor)

    def replace_range(self, text: str, at: Cursor) -> None:
        """Insert ``text`` at ``at``. The cursor is left where it was."""
        offset = self._offset(self._clamp(at))
        self._content = self._content[:offset] + text + self._content[offset:]

    def get_value(self) -> str:
        return self._content

    def set_value(self, content: str) -> None:
        self._content = content
        self._cursor = self._clamp(self._cursor)

    # helpers ------------------------------------------------------------
    def _lines(self) -> list[str]:
        return self._content.split("\n")

    def _clamp(self, cursor: Cursor) -> Cursor:
        lines = self._lines()
        line = min(max(cursor.line, 0), len(lines) - 1)
        ch = min(max(cursor.ch, 0), len(lines[line]))
        return Cursor(line, ch)

    def _offset(self, cursor: Cursor) -> int:
        lines = self._lines()
        return sum(len(text) + 1 for text in lines[: cursor.line]) + cursor.ch
