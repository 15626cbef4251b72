"""Unit tests for the in-memory query and session adapters."""

from __future__ import annotations

from typing import Any

import pytest

from listerkit.adapters.memory import (
    InMemoryQuery,
    InMemoryRepository,
    InMemorySessionStore,
    MappingSessionStore,
    like_to_regex,
)


class Obj:
    def __init__(self, **attrs: Any) -> None:
        self.__dict__.update(attrs)


ROWS = [
    {"id": 1, "name": "Alpha", "score": 10},
    {"id": 2, "name": "beta", "score": None},
    {"id": 3, "name": "Gamma", "score": 5},
]


def _ids(rows: list[Any]) -> list[int]:
    return [r["id"] if isinstance(r, dict) else r.id for r in rows]


# ---------------------------------------------------------------------------
# LIKE translation
# ---------------------------------------------------------------------------


class TestLikeToRegex:
    @pytest.mark.parametrize(
        ("pattern", "text", "matches"),
        [
            ("%a%", "Gamma", True),
            ("a%", "Alpha", True),
            ("a_pha", "alpha", True),
            ("a_pha", "alpXXha", False),
            ("100\\%", "100%", True),
            ("100\\%", "1000", False),
            ("a\\_b", "a_b", True),
            ("a\\_b", "axb", False),
            ("a\\\\b", "a\\b", True),
            ("exact", "exactly", False),
        ],
    )
    def test_patterns(self, pattern: str, text: str, matches: bool) -> None:
        assert (like_to_regex(pattern).fullmatch(text) is not None) is matches


# ---------------------------------------------------------------------------
# InMemoryQuery
# ---------------------------------------------------------------------------


class TestInMemoryQuery:
    def test_operators(self) -> None:
        assert _ids(InMemoryQuery(ROWS).add_predicate("score", ">", 5).execute()) == [1]
        assert _ids(InMemoryQuery(ROWS).add_predicate("score", "<=", 5).execute()) == [3]
        assert _ids(InMemoryQuery(ROWS).add_predicate("score", "=", None).execute()) == [2]
        assert _ids(InMemoryQuery(ROWS).add_predicate("score", "!=", None).execute()) == [1, 3]
        assert _ids(InMemoryQuery(ROWS).add_predicate("id", "IN", [1, 3]).execute()) == [1, 3]

    def test_like_is_case_insensitive(self) -> None:
        assert _ids(InMemoryQuery(ROWS).add_predicate("name", "LIKE", "g%").execute()) == [3]

    def test_objects_are_supported(self) -> None:
        rows = [Obj(id=1, n=2), Obj(id=2, n=1)]
        query = InMemoryQuery(rows).add_order_by("n")
        assert _ids(query.execute()) == [2, 1]

    def test_multi_column_order(self) -> None:
        rows = [{"id": 1, "a": 1, "b": 2}, {"id": 2, "a": 1, "b": 1}, {"id": 3, "a": 0, "b": 9}]
        query = InMemoryQuery(rows).add_order_by("a", "DESC").add_order_by("b")
        assert _ids(query.execute()) == [2, 1, 3]

    def test_slicing(self) -> None:
        query = InMemoryQuery(ROWS).offset(1).limit(1)
        assert _ids(query.execute()) == [2]
        assert query.count() == 3

    def test_negative_offset_floors(self) -> None:
        assert _ids(InMemoryQuery(ROWS).offset(-2).execute()) == [1, 2, 3]

    def test_source_rows_untouched(self) -> None:
        rows = list(ROWS)
        InMemoryQuery(rows).add_order_by("id", "DESC").execute()
        assert _ids(rows) == [1, 2, 3]


class TestInMemoryRepository:
    def test_queries_share_named_operations(self) -> None:
        repo = InMemoryRepository(ROWS, source="rows", alias="x")
        repo.register("filterByTop", lambda q, n: q.add_order_by("x.score", "DESC").limit(n))
        query = repo.create_query()
        assert query.source == "rows"
        assert query.root_alias() == "x"
        assert query.supports("filterByTop")


# ---------------------------------------------------------------------------
# Session stores
# ---------------------------------------------------------------------------


class TestSessionStores:
    def test_mapping_store_writes_through(self) -> None:
        backing: dict[str, Any] = {}
        store = MappingSessionStore(backing)
        store.set("k", [1])
        assert backing == {"k": [1]}
        assert store.has("k")
        store.remove("k")
        store.remove("k")
        assert not store.has("k")

    def test_memory_store_copies_values(self) -> None:
        store = InMemorySessionStore()
        value = {"a": [1]}
        store.set("k", value)
        value["a"].append(2)
        fetched = store.get("k")
        fetched["a"].append(3)
        assert store.get("k") == {"a": [1]}

    def test_default(self) -> None:
        assert InMemorySessionStore().get("missing", 7) == 7
