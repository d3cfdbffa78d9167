"""Day-resolution timestamps as stored in catalog rows."""

from __future__ import annotations

from datetime import datetime

DATE_FORMAT = "%Y-%m-%d"


def parse_date(text: str | None, default: datetime | None = None) -> datetime | None:
    """Parse a ``YYYY-MM-DD`` cell, returning ``default`` when it cannot."""
    if not text:
        return default
    try:
        return datetime.strptime(text, DATE_FORMAT)
    except ValueError:
        return default


def format_date(value: datetime | None, default: str = "") -> str:
    """Render a timestamp for a row cell, or ``default`` when absent."""
    if value is None:
        return default
    return value.strftime(DATE_FORMAT)
