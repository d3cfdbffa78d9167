"""The ``Row`` capability and two adapters for it.

A row is one record of a query result addressed by column position. It is
independent of any storage engine: ``MappingRow`` wraps a plain dict (for
JSON documents and tests), ``CursorRow`` wraps a DB-API 2.0 cursor such as
``sqlite3.Cursor``.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Protocol


class Row(Protocol):
    """Read access to one record of named columns."""

    @property
    def column_count(self) -> int: ...

    def name_at(self, index: int) -> str: ...

    def value_at(self, index: int) -> Any: ...

    def is_positioned(self) -> bool: ...


class MappingRow:
    """A row backed by a mapping of column name to value. Always positioned."""

    def __init__(self, values: Mapping[str, Any]) -> None:
        self._names = list(values.keys())
        self._values = [values[name] for name in self._names]

    @property
    def column_count(self) -> int:
        return len(self._names)

    def name_at(self, index: int) -> str:
        return self._names[index]

    def value_at(self, index: int) -> Any:
        return self._values[index]

    def is_positioned(self) -> bool:
        return True


class CursorRow:
    """A row view over a DB-API cursor.

    The view starts before the first record, like a freshly executed query,
    and only becomes positioned after ``move_to_next()`` returns True.
    """

    def __init__(self, cursor: Any) -> None:
        self._cursor = cursor
        description = cursor.description or ()
        self._names = [column[0] for column in description]
        self._current: Sequence[Any] | None = None

    @property
    def column_count(self) -> int:
        return len(self._names)

    def name_at(self, index: int) -> str:
        return self._names[index]

    def value_at(self, index: int) -> Any:
        if self._current is None:
            raise IndexError("Cursor is not positioned on a record")
        return self._current[index]

    def is_positioned(self) -> bool:
        return self._current is not None

    def move_to_next(self) -> bool:
        """Advance to the next record; False once the result is exhausted."""
        self._current = self._cursor.fetchone()
        return self._current is not None
