"""Tests for the in-memory text document."""

from __future__ import annotations

from weather_insert.editor import Cursor, TextDocument


class TestTextDocument:
    def test_defaults(self) -> None:
        doc = TextDocument()
        assert doc.get_value() == ""
        assert doc.get_cursor() == Cursor(0, 0)

    def test_replace_range_middle_line(self) -> None:
        doc = TextDocument("one\ntwo\nthree")
        doc.replace_range("X", Cursor(1, 1))
        assert doc.get_value() == "one\ntXwo\nthree"

    def test_replace_range_keeps_cursor(self) -> None:
        doc = TextDocument("abc", Cursor(0, 2))
        doc.replace_range("XYZ", Cursor(0, 0))
        assert doc.get_cursor() == Cursor(0, 2)

    def test_cursor_clamped(self) -> None:
        doc = TextDocument("ab\ncd")
        doc.set_cursor(Cursor(5, 10))
        assert doc.get_cursor() == Cursor(1, 2)
        doc.set_cursor(Cursor(-1, -1))
        assert doc.get_cursor() == Cursor(0, 0)

    def test_set_value_reclamps_cursor(self) -> None:
        doc = TextDocument("long line here", Cursor(0, 14))
        doc.set_value("short")
        assert doc.get_cursor() == Cursor(0, 5)

    def test_insert_at_end(self) -> None:
        doc = TextDocument("end\n", Cursor(1, 0))
        doc.replace_range("tail", doc.get_cursor())
        assert doc.get_value() == "end\ntail"
