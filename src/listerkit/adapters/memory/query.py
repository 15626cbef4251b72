"""Memory adapter – InMemoryQuery and InMemoryRepository over a list of rows."""
from __future__ import annotations

import re
from typing import Any, Mapping, Sequence

from listerkit.application.ports.query import LIKE_ESCAPE, NamedOperation, Query, Repository


def _field(row: Any, column: str) -> Any:
    if isinstance(row, Mapping):
        return row.get(column)
    return getattr(row, column, None)


def like_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile a SQL ``LIKE`` pattern; matching is case-insensitive like SQLite's."""
    parts: list[str] = []
    chars = iter(pattern)
    for char in chars:
        if char == LIKE_ESCAPE:
            parts.append(re.escape(next(chars, LIKE_ESCAPE)))
        elif char == "%":
            parts.append(".*")
        elif char == "_":
            parts.append(".")
        else:
            parts.append(re.escape(char))
    return re.compile("".join(parts), re.IGNORECASE | re.DOTALL)


def _matches(value: Any, op: str, expected: Any) -> bool:  # noqa: PLR0911
    match op:
        case "=":    return value == expected
        case "!=":   return value != expected
        case "<":    return value is not None and value < expected
        case "<=":   return value is not None and value <= expected
        case ">":    return value is not None and value > expected
        case ">=":   return value is not None and value >= expected
        case "IN":   return value in expected
        case "LIKE": return value is not None and like_to_regex(str(expected)).fullmatch(str(value)) is not None
        case _:      return False


class InMemoryQuery(Query):
    """Query over an in-memory sequence of mappings or objects.

    Rows are never copied; :meth:`execute` returns the original row objects.
    """

    def __init__(
        self,
        rows: Sequence[Any],
        source: str = "memory",
        named: Mapping[str, NamedOperation] | None = None,
        alias: str = "r",
    ) -> None:
        super().__init__(source, named)
        self._rows = rows
        self._alias = alias
        self._predicates: list[tuple[str, str, Any]] = []
        self._order: list[tuple[str, str]] = []
        self._offset = 0
        self._limit: int | None = None

    def root_alias(self) -> str:
        return self._alias

    def offset(self, n: int) -> "InMemoryQuery":
        self._offset = max(n, 0)
        return self

    def limit(self, n: int | None) -> "InMemoryQuery":
        self._limit = n
        return self

    def count(self) -> int:
        return len(self._filtered())

    def execute(self) -> list[Any]:
        rows = self._filtered()
        for column, direction in reversed(self._order):
            rows.sort(
                key=lambda row, c=column: (_field(row, c) is None, _field(row, c)),
                reverse=direction == "DESC",
            )
        end = None if self._limit is None else self._offset + self._limit
        return rows[self._offset:end]

    def _filtered(self) -> list[Any]:
        return [
            row
            for row in self._rows
            if all(_matches(_field(row, c), op, v) for c, op, v in self._predicates)
        ]

    def _add_predicate(self, column: str, op: str, value: Any) -> None:
        self._predicates.append((column, op, value))

    def _add_order_by(self, column: str, direction: str) -> None:
        self._order.append((column, direction))

    def _copy(self) -> "InMemoryQuery":
        copy = InMemoryQuery(self._rows, self.source, alias=self._alias)
        copy._predicates = list(self._predicates)
        copy._order = list(self._order)
        copy._offset = self._offset
        copy._limit = self._limit
        return copy

    def _clear(self) -> None:
        self._predicates.clear()
        self._order.clear()
        self._offset = 0
        self._limit = None


class InMemoryRepository(Repository):
    """Creates :class:`InMemoryQuery` objects over a shared row list."""

    def __init__(
        self,
        rows: Sequence[Any],
        source: str = "memory",
        named: Mapping[str, NamedOperation] | None = None,
        alias: str = "r",
    ) -> None:
        super().__init__(named)
        self._rows = rows
        self._source = source
        self._alias = alias

    @property
    def source(self) -> str:
        return self._source

    def create_query(self) -> InMemoryQuery:
        return InMemoryQuery(self._rows, self._source, self._named, self._alias)


__all__ = ["InMemoryQuery", "InMemoryRepository", "like_to_regex"]
