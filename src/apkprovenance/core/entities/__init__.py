"""App and Apk entities plus the tag-list and date helpers they rely on.

The package is split into focused submodules:

- ``models``: the ``App`` and ``Apk`` dataclasses.
- ``tags``: parsing and joining of comma-separated tag lists.
- ``dates``: the day-resolution timestamp format used in rows.

All public names are re-exported here.
"""

from apkprovenance.core.entities.dates import DATE_FORMAT, format_date, parse_date
from apkprovenance.core.entities.models import App, Apk
from apkprovenance.core.entities.tags import join_tags, make_tags, parse_tags

__all__ = [
    "App",
    "Apk",
    "DATE_FORMAT",
    "format_date",
    "join_tags",
    "make_tags",
    "parse_date",
    "parse_tags",
]
