"""Tests for row -> App hydration."""

from __future__ import annotations

import sqlite3
from datetime import datetime

import pytest

from apkprovenance.core.rows import CursorRow, MappingRow, hydrate_app, hydrate_apps
from apkprovenance.core.rows.hydrator import RECOGNISED_COLUMNS
from apkprovenance.exceptions import RowPositionError


def _catalog_row(**overrides: object) -> dict[str, object]:
    row: dict[str, object] = {
        "id": "org.example.notes",
        "name": "Notes",
        "summary": "Take notes",
        "license": "GPL-3.0-or-later",
        "webURL": "https://notes.example.org",
        "suggestedVercode": 22,
        "suggestedApkVersion": "2.2",
        "upstreamVercode": 23,
        "upstreamVersion": "2.3",
        "added": "2014-05-21",
        "lastUpdated": "2015-01-02",
        "categories": "Office,Writing",
        "antiFeatures": None,
        "requirements": "root",
        "compatible": 1,
        "ignoreAllUpdates": 0,
        "ignoreThisUpdate": 21,
        "installedVersionCode": 21,
        "installedVersionName": "2.1",
    }
    row.update(overrides)
    return row


class TestDecoding:
    def test_text_columns_pass_through(self) -> None:
        app = hydrate_app(MappingRow(_catalog_row()))
        assert app.id == "org.example.notes"
        assert app.name == "Notes"
        assert app.license == "GPL-3.0-or-later"
        assert app.web_url == "https://notes.example.org"

    def test_integer_columns(self) -> None:
        app = hydrate_app(MappingRow(_catalog_row()))
        assert app.suggested_vercode == 22
        assert app.upstream_vercode == 23
        assert app.ignore_this_update == 21
        assert app.installed_version_code == 21

    def test_integer_from_text_and_null(self) -> None:
        app = hydrate_app(MappingRow(_catalog_row(suggestedVercode="30", upstreamVercode=None)))
        assert app.suggested_vercode == 30
        assert app.upstream_vercode == 0

    def test_boolean_is_integer_equal_to_one(self) -> None:
        assert hydrate_app(MappingRow(_catalog_row(compatible=1))).compatible is True
        assert hydrate_app(MappingRow(_catalog_row(compatible=0))).compatible is False
        assert hydrate_app(MappingRow(_catalog_row(compatible=2))).compatible is False
        assert hydrate_app(MappingRow(_catalog_row(ignoreAllUpdates="1"))).ignore_all_updates

    def test_dates(self) -> None:
        app = hydrate_app(MappingRow(_catalog_row()))
        assert app.added == datetime(2014, 5, 21)
        assert app.last_updated == datetime(2015, 1, 2)

    def test_unparseable_date_is_absent(self) -> None:
        app = hydrate_app(MappingRow(_catalog_row(added="May 21st")))
        assert app.added is None

    def test_tag_lists(self) -> None:
        app = hydrate_app(MappingRow(_catalog_row()))
        assert app.categories == ["Office", "Writing"]
        assert app.anti_features is None
        assert app.requirements == ["root"]

    def test_suggested_version_is_hydrated(self) -> None:
        app = hydrate_app(MappingRow(_catalog_row()))
        assert app.suggested_version == "2.2"

    def test_installed_state(self) -> None:
        app = hydrate_app(MappingRow(_catalog_row()))
        assert app.installed_version_name == "2.1"
        assert app.installed_apk is None


class TestSchemaTolerance:
    def test_unknown_columns_are_ignored(self) -> None:
        app = hydrate_app(MappingRow(_catalog_row(futureColumn="x", _id=42)))
        assert app.id == "org.example.notes"

    def test_missing_columns_keep_defaults(self) -> None:
        app = hydrate_app(MappingRow({"id": "org.example"}))
        assert app.name == "Unknown"
        assert app.summary == "Unknown application"
        assert app.suggested_vercode == 0

    def test_every_recognised_column_is_a_known_name(self) -> None:
        assert "id" in RECOGNISED_COLUMNS
        assert "suggestedApkVersion" in RECOGNISED_COLUMNS
        assert "updated" not in RECOGNISED_COLUMNS


class TestPosition:
    def test_unpositioned_cursor_raises(self) -> None:
        conn = sqlite3.connect(":memory:")
        conn.execute("CREATE TABLE app (id TEXT)")
        row = CursorRow(conn.execute("SELECT id FROM app"))
        with pytest.raises(RowPositionError):
            hydrate_app(row)

    def test_exhausted_cursor_raises(self) -> None:
        conn = sqlite3.connect(":memory:")
        conn.execute("CREATE TABLE app (id TEXT, name TEXT)")
        conn.execute("INSERT INTO app VALUES ('org.a', 'Alpha')")
        row = CursorRow(conn.execute("SELECT id, name FROM app"))
        assert row.move_to_next()
        assert hydrate_app(row).name == "Alpha"
        assert not row.move_to_next()
        with pytest.raises(RowPositionError):
            hydrate_app(row)


class TestHydrateApps:
    def test_hydrates_each_row(self) -> None:
        rows = [MappingRow({"id": "a", "name": "A"}), MappingRow({"id": "b", "name": "B"})]
        assert [a.id for a in hydrate_apps(rows)] == ["a", "b"]
