"""Row -> ``App`` hydration.

Every recognised column name maps to the ``App`` attribute it fills and the
decoder that turns the raw cell into the attribute's type. The table is
built once at import. Columns that are not in it are skipped, so rows from a
newer schema with extra columns still hydrate.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from typing import Any

from apkprovenance.core.entities import App, parse_date, parse_tags
from apkprovenance.core.rows import columns as col
from apkprovenance.core.rows.row import Row
from apkprovenance.exceptions import RowPositionError

logger = logging.getLogger(__name__)


def _text(value: Any) -> str | None:
    if value is None or isinstance(value, str):
        return value
    return str(value)


def _int(value: Any) -> int:
    if value is None or value == "":
        return 0
    return int(value)


def _bool(value: Any) -> bool:
    return _int(value) == 1


def _date(value: Any) -> Any:
    return parse_date(_text(value), None)


def _tags(value: Any) -> list[str] | None:
    return parse_tags(_text(value))


_FIELDS: dict[str, tuple[str, Callable[[Any], Any]]] = {
    col.IS_COMPATIBLE: ("compatible", _bool),
    col.APP_ID: ("id", _text),
    col.NAME: ("name", _text),
    col.SUMMARY: ("summary", _text),
    col.ICON: ("icon", _text),
    col.DESCRIPTION: ("description", _text),
    col.LICENSE: ("license", _text),
    col.WEB_URL: ("web_url", _text),
    col.TRACKER_URL: ("tracker_url", _text),
    col.SOURCE_URL: ("source_url", _text),
    col.DONATE_URL: ("donate_url", _text),
    col.BITCOIN_ADDR: ("bitcoin_addr", _text),
    col.LITECOIN_ADDR: ("litecoin_addr", _text),
    col.DOGECOIN_ADDR: ("dogecoin_addr", _text),
    col.FLATTR_ID: ("flattr_id", _text),
    col.SUGGESTED_APK_VERSION: ("_suggested_version", _text),
    col.SUGGESTED_VERSION_CODE: ("suggested_vercode", _int),
    col.UPSTREAM_VERSION_CODE: ("upstream_vercode", _int),
    col.UPSTREAM_VERSION: ("upstream_version", _text),
    col.ADDED: ("added", _date),
    col.LAST_UPDATED: ("last_updated", _date),
    col.CATEGORIES: ("categories", _tags),
    col.ANTI_FEATURES: ("anti_features", _tags),
    col.REQUIREMENTS: ("requirements", _tags),
    col.IGNORE_ALL_UPDATES: ("ignore_all_updates", _bool),
    col.IGNORE_THIS_UPDATE: ("ignore_this_update", _int),
    col.ICON_URL: ("icon_url", _text),
    col.INSTALLED_VERSION_CODE: ("installed_version_code", _int),
    col.INSTALLED_VERSION_NAME: ("installed_version_name", _text),
}

RECOGNISED_COLUMNS = frozenset(_FIELDS)


def hydrate_app(row: Row) -> App:
    """Build an ``App`` from the record ``row`` is positioned on.

    Raises:
        RowPositionError: If the row is not positioned on a record.
        ValueError: If an integer column holds non-numeric text.
    """
    if not row.is_positioned():
        raise RowPositionError("Row is not positioned on a valid record")

    app = App()
    for i in range(row.column_count):
        name = row.name_at(i)
        target = _FIELDS.get(name)
        if target is None:
            logger.debug("Ignoring unrecognised column %r", name)
            continue
        attr, decode = target
        setattr(app, attr, decode(row.value_at(i)))
    return app


def hydrate_apps(rows: Iterable[Row]) -> Iterator[App]:
    """Hydrate every row of an iterable, lazily."""
    for row in rows:
        yield hydrate_app(row)
