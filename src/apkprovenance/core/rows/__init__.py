"""Mapping between App entities and generic column/value rows.

- ``columns``: the column names shared by both directions.
- ``row``: the narrow ``Row`` capability plus mapping and cursor adapters.
- ``hydrator``: row -> ``App``.
- ``serializer``: ``App`` / ``Apk`` -> row.
"""

from apkprovenance.core.rows.hydrator import hydrate_app, hydrate_apps
from apkprovenance.core.rows.row import CursorRow, MappingRow, Row
from apkprovenance.core.rows.serializer import APP_WRITE_COLUMNS, apk_to_row, app_to_row

__all__ = [
    "APP_WRITE_COLUMNS",
    "CursorRow",
    "MappingRow",
    "Row",
    "apk_to_row",
    "app_to_row",
    "hydrate_app",
    "hydrate_apps",
]
