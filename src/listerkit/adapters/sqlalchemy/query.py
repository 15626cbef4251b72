"""SQLAlchemy adapter – SqlAlchemyQuery and SqlAlchemyRepository over a sync Session."""
from __future__ import annotations

from typing import Any, Mapping

from listerkit.application.ports.query import LIKE_ESCAPE, NamedOperation, Query, Repository
from listerkit.kernel.errors import ConfigError


def _require_sqlalchemy() -> None:
    try:
        import sqlalchemy  # noqa: F401
    except ImportError as exc:
        raise ImportError("Install 'listerkit[sqlalchemy]' to use the SQLAlchemy adapter") from exc


class SqlAlchemyQuery(Query):
    """Query backed by an immutable SQLAlchemy 2.x ``Select`` on one mapped class.

    Named operations may call :meth:`where` / :meth:`order_by` with arbitrary
    SQLAlchemy expressions::

        repo.register("filterByRecent", lambda q, v, *_: q.where(Book.year >= int(v)))
    """

    def __init__(
        self,
        session: Any,
        model: type,
        source: str | None = None,
        named: Mapping[str, NamedOperation] | None = None,
    ) -> None:
        _require_sqlalchemy()
        from sqlalchemy import select  # type: ignore[import-untyped]

        super().__init__(source or model.__name__, named)
        self._session = session
        self._model = model
        self._stmt = select(model)
        self._offset = 0
        self._limit: int | None = None

    @property
    def statement(self) -> Any:
        """The current ``Select`` without offset / limit."""
        return self._stmt

    def where(self, *criteria: Any) -> "SqlAlchemyQuery":
        self._stmt = self._stmt.where(*criteria)
        return self

    def order_by(self, *clauses: Any) -> "SqlAlchemyQuery":
        self._stmt = self._stmt.order_by(*clauses)
        return self

    def root_alias(self) -> str:
        return str(getattr(self._model, "__tablename__", self._model.__name__.lower()))

    def offset(self, n: int) -> "SqlAlchemyQuery":
        self._offset = max(n, 0)
        return self

    def limit(self, n: int | None) -> "SqlAlchemyQuery":
        self._limit = n
        return self

    def count(self) -> int:
        from sqlalchemy import func, select  # type: ignore[import-untyped]

        counted = select(func.count()).select_from(self._stmt.order_by(None).subquery())
        return int(self._session.scalar(counted) or 0)

    def execute(self) -> list[Any]:
        stmt = self._stmt
        if self._offset:
            stmt = stmt.offset(self._offset)
        if self._limit is not None:
            stmt = stmt.limit(self._limit)
        return list(self._session.scalars(stmt).all())

    def _column(self, column: str) -> Any:
        attribute = getattr(self._model, column, None)
        if attribute is None:
            raise ConfigError(
                f"'{self._model.__name__}' has no column '{column}'",
                detail={"column": column, "source": self.source},
            )
        return attribute

    def _add_predicate(self, column: str, op: str, value: Any) -> None:  # noqa: PLR0911
        col = self._column(column)
        match op:
            case "=":    expr = col.is_(None) if value is None else col == value
            case "!=":   expr = col.is_not(None) if value is None else col != value
            case "<":    expr = col < value
            case "<=":   expr = col <= value
            case ">":    expr = col > value
            case ">=":   expr = col >= value
            case "IN":   expr = col.in_(list(value))
            case _:      expr = col.like(value, escape=LIKE_ESCAPE)
        self._stmt = self._stmt.where(expr)

    def _add_order_by(self, column: str, direction: str) -> None:
        col = self._column(column)
        self._stmt = self._stmt.order_by(col.desc() if direction == "DESC" else col.asc())

    def _copy(self) -> "SqlAlchemyQuery":
        copy = SqlAlchemyQuery(self._session, self._model, self.source)
        copy._stmt = self._stmt
        copy._offset = self._offset
        copy._limit = self._limit
        return copy

    def _clear(self) -> None:
        from sqlalchemy import select  # type: ignore[import-untyped]

        self._stmt = select(self._model)
        self._offset = 0
        self._limit = None


class SqlAlchemyRepository(Repository):
    """Creates :class:`SqlAlchemyQuery` objects for one mapped class."""

    def __init__(
        self,
        session: Any,
        model: type,
        named: Mapping[str, NamedOperation] | None = None,
        source: str | None = None,
    ) -> None:
        _require_sqlalchemy()
        super().__init__(named)
        self._session = session
        self._model = model
        self._source = source or model.__name__

    @property
    def source(self) -> str:
        return self._source

    def create_query(self) -> SqlAlchemyQuery:
        return SqlAlchemyQuery(self._session, self._model, self._source, self._named)


__all__ = ["SqlAlchemyQuery", "SqlAlchemyRepository"]
