"""Tests for the Row adapters."""

from __future__ import annotations

import sqlite3

import pytest

from apkprovenance.core.rows import CursorRow, MappingRow


class TestMappingRow:
    def test_positional_access_in_key_order(self) -> None:
        row = MappingRow({"id": "org.example", "name": "Example"})
        assert row.column_count == 2
        assert [row.name_at(i) for i in range(2)] == ["id", "name"]
        assert [row.value_at(i) for i in range(2)] == ["org.example", "Example"]

    def test_always_positioned(self) -> None:
        assert MappingRow({}).is_positioned()


class TestCursorRow:
    @pytest.fixture
    def cursor(self) -> sqlite3.Cursor:
        conn = sqlite3.connect(":memory:")
        conn.execute("CREATE TABLE app (id TEXT, name TEXT, suggestedVercode INTEGER)")
        conn.executemany(
            "INSERT INTO app VALUES (?, ?, ?)",
            [("org.a", "Alpha", 3), ("org.b", "Bravo", 5)],
        )
        return conn.execute("SELECT id, name, suggestedVercode FROM app ORDER BY id")

    def test_starts_before_first_record(self, cursor: sqlite3.Cursor) -> None:
        row = CursorRow(cursor)
        assert not row.is_positioned()
        assert row.column_count == 3
        assert row.name_at(2) == "suggestedVercode"
        with pytest.raises(IndexError):
            row.value_at(0)

    def test_walks_records_then_unpositions(self, cursor: sqlite3.Cursor) -> None:
        row = CursorRow(cursor)
        assert row.move_to_next()
        assert row.value_at(0) == "org.a"
        assert row.move_to_next()
        assert row.value_at(1) == "Bravo"
        assert not row.move_to_next()
        assert not row.is_positioned()
