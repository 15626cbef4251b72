"""Application ports – Query and Repository.

A :class:`Query` is a mutable builder over one data source. Adapters implement
the storage-specific hooks (``_add_predicate``, ``_add_order_by``, ``count`` ...)
while this base class validates arguments, dispatches named operations and
records every structural change so the query can be described as a
:class:`QuerySnapshot` and replayed later through its :class:`Repository`.
"""
from __future__ import annotations

import abc
import dataclasses
from typing import Any, Callable, Mapping, Sequence

from listerkit.kernel.errors import ConfigError, FormatError

PREDICATE_OPERATORS: frozenset[str] = frozenset({"=", "!=", "<", "<=", ">", ">=", "LIKE", "IN"})
ORDER_DIRECTIONS: frozenset[str] = frozenset({"ASC", "DESC"})
LIKE_ESCAPE = "\\"
"""Escape character for literal ``%`` / ``_`` in ``LIKE`` patterns."""

NamedOperation = Callable[..., Any]
"""``operation(query, *args)``; mutates *query* through its public methods."""


@dataclasses.dataclass(frozen=True)
class QueryOperation:
    """One recorded structural change of a query."""

    kind: str
    args: tuple[Any, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind, "args": list(self.args)}


@dataclasses.dataclass(frozen=True)
class QuerySnapshot:
    """Replayable description of a query: its source plus recorded operations."""

    source: str
    operations: tuple[QueryOperation, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "source": self.source,
            "operations": [op.to_dict() for op in self.operations],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "QuerySnapshot":
        if not isinstance(data, Mapping):
            raise FormatError("Query snapshot must be a mapping")
        source = data.get("source")
        operations = data.get("operations")
        if not isinstance(source, str) or not isinstance(operations, list):
            raise FormatError("Query snapshot requires 'source' and 'operations'")
        parsed: list[QueryOperation] = []
        for raw in operations:
            if (
                not isinstance(raw, Mapping)
                or raw.get("kind") not in ("predicate", "order_by", "named")
                or not isinstance(raw.get("args"), list)
            ):
                raise FormatError(f"Invalid query operation {raw!r}")
            parsed.append(QueryOperation(raw["kind"], tuple(raw["args"])))
        return cls(source=source, operations=tuple(parsed))


class Query(abc.ABC):
    """Port: filter / order / slice / count capability over one data source."""

    def __init__(self, source: str, named: Mapping[str, NamedOperation] | None = None) -> None:
        self._source = source
        self._named: dict[str, NamedOperation] = dict(named or {})
        self._operations: list[QueryOperation] = []
        self._recording = True

    @property
    def source(self) -> str:
        return self._source

    # Named operations -------------------------------------------------
    def supports(self, name: str) -> bool:
        return name in self._named

    def apply_named_predicate(self, name: str, args: Sequence[Any] = ()) -> "Query":
        """Run the operation registered under *name* with *args*."""
        operation = self._named.get(name)
        if operation is None:
            raise ConfigError(
                f"Method '{name}' is not defined for query source '{self._source}'",
                detail={"method": name, "source": self._source},
            )
        self._record("named", name, *args)
        recording, self._recording = self._recording, False
        try:
            operation(self, *args)
        finally:
            self._recording = recording
        return self

    # Structural changes -----------------------------------------------
    def add_predicate(self, field: str, op: str, value: Any) -> "Query":
        op = op.upper()
        if op not in PREDICATE_OPERATORS:
            raise ConfigError(f"Unsupported predicate operator {op!r}")
        self._record("predicate", field, op, value)
        self._add_predicate(self._column_name(field), op, value)
        return self

    def add_order_by(self, field: str, direction: str = "ASC") -> "Query":
        direction = direction.upper()
        if direction not in ORDER_DIRECTIONS:
            raise ConfigError(f"Unsupported order direction {direction!r}")
        self._record("order_by", field, direction)
        self._add_order_by(self._column_name(field), direction)
        return self

    def clone(self) -> "Query":
        """Return an independent copy; later changes do not leak between the two."""
        copy = self._copy()
        copy._named = dict(self._named)
        copy._operations = list(self._operations)
        return copy

    def clear(self) -> "Query":
        """Drop every predicate, ordering and slice, back to the bare source."""
        self._operations.clear()
        self._clear()
        return self

    # Snapshots ----------------------------------------------------------
    def to_snapshot(self) -> QuerySnapshot:
        return QuerySnapshot(source=self._source, operations=tuple(self._operations))

    def replay(self, snapshot: QuerySnapshot) -> "Query":
        """Re-apply the operations recorded in *snapshot* on this query."""
        if snapshot.source != self._source:
            raise FormatError(
                f"Snapshot of '{snapshot.source}' cannot be replayed on '{self._source}'"
            )
        for operation in snapshot.operations:
            if operation.kind == "predicate":
                self.add_predicate(*operation.args)
            elif operation.kind == "order_by":
                self.add_order_by(*operation.args)
            else:
                name, *args = operation.args
                self.apply_named_predicate(name, args)
        return self

    def _record(self, kind: str, *args: Any) -> None:
        if self._recording:
            self._operations.append(QueryOperation(kind, tuple(args)))

    def _column_name(self, field: str) -> str:
        """Strip a leading ``<root alias>.`` from *field*."""
        prefix = f"{self.root_alias()}."
        return field[len(prefix):] if field.startswith(prefix) else field

    # Adapter hooks ------------------------------------------------------
    @abc.abstractmethod
    def root_alias(self) -> str: ...

    @abc.abstractmethod
    def offset(self, n: int) -> "Query": ...

    @abc.abstractmethod
    def limit(self, n: int | None) -> "Query": ...

    @abc.abstractmethod
    def count(self) -> int: ...

    @abc.abstractmethod
    def execute(self) -> Sequence[Any]: ...

    @abc.abstractmethod
    def _add_predicate(self, column: str, op: str, value: Any) -> None: ...

    @abc.abstractmethod
    def _add_order_by(self, column: str, direction: str) -> None: ...

    @abc.abstractmethod
    def _copy(self) -> "Query": ...

    @abc.abstractmethod
    def _clear(self) -> None: ...


class Repository(abc.ABC):
    """Port: creates fresh queries for one source and rebuilds them from snapshots."""

    def __init__(self, named: Mapping[str, NamedOperation] | None = None) -> None:
        self._named: dict[str, NamedOperation] = dict(named or {})

    @property
    @abc.abstractmethod
    def source(self) -> str: ...

    @abc.abstractmethod
    def create_query(self) -> Query: ...

    def register(self, name: str, operation: NamedOperation) -> "Repository":
        """Register a named filter / ordering operation for queries created later."""
        self._named[name] = operation
        return self

    def restore_query(self, snapshot: QuerySnapshot) -> Query:
        return self.create_query().replay(snapshot)


__all__ = [
    "LIKE_ESCAPE",
    "ORDER_DIRECTIONS",
    "PREDICATE_OPERATORS",
    "NamedOperation",
    "Query",
    "QueryOperation",
    "QuerySnapshot",
    "Repository",
]
