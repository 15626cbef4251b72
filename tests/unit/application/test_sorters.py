"""Unit tests for Sorter."""

from __future__ import annotations

import pytest

from listerkit.adapters.memory import InMemoryQuery
from listerkit.application.lister import ListEngine
from listerkit.application.sorters import SortDirection, Sorter
from listerkit.kernel.errors import FormatError, SorterError

ROWS = [{"id": 1, "n": 3}, {"id": 2, "n": 1}, {"id": 3, "n": None}, {"id": 4, "n": 2}]


def _engine(**named: object) -> ListEngine:
    return ListEngine("s", query=InMemoryQuery(ROWS, named=named))  # type: ignore[arg-type]


def _ids(engine: ListEngine) -> list[int]:
    return [row["id"] for row in engine.get_query(clone=False).execute()]


class TestDirection:
    def test_value_is_normalised(self) -> None:
        assert Sorter("n", value=" desc ").value == "DESC"
        assert Sorter("n", value=SortDirection.ASC).value == "ASC"

    def test_unknown_value_has_no_direction(self) -> None:
        sorter = Sorter("n", value="sideways")
        assert sorter.value == "SIDEWAYS"
        assert sorter.direction is None

    def test_flip_cycle(self) -> None:
        sorter = Sorter("n")
        assert [sorter.flip(), sorter.flip(), sorter.flip()] == ["ASC", "DESC", "ASC"]

    def test_flip_from_unknown_value_starts_ascending(self) -> None:
        assert Sorter("n", value="sideways").flip() == "ASC"

    def test_default_method(self) -> None:
        assert Sorter("my_field").method_name == "orderByMyField"


class TestApply:
    def test_inactive_sorter_is_noop(self) -> None:
        engine = _engine()
        assert Sorter("n").apply(engine) is None
        assert _ids(engine) == [1, 2, 3, 4]

    def test_generic_ascending_puts_nulls_last(self) -> None:
        engine = _engine()
        Sorter("n", value="ASC").apply(engine)
        assert _ids(engine) == [2, 4, 1, 3]

    def test_generic_descending(self) -> None:
        engine = _engine()
        Sorter("n", value="DESC").apply(engine)
        assert _ids(engine) == [3, 1, 4, 2]

    def test_named_operation_receives_direction(self) -> None:
        calls: list[str] = []

        def order_by_n(query: InMemoryQuery, direction: str) -> None:
            calls.append(direction)
            query.add_order_by("id", "DESC")

        engine = _engine(orderByN=order_by_n)
        Sorter("n", value="asc").apply(engine)
        assert calls == ["ASC"]
        assert _ids(engine) == [4, 3, 2, 1]

    def test_missing_query(self) -> None:
        with pytest.raises(SorterError):
            Sorter("n", value="ASC").apply(ListEngine("s"))

    def test_unknown_explicit_method(self) -> None:
        with pytest.raises(SorterError) as exc_info:
            Sorter("n", method="byN", value="ASC").apply(_engine())
        assert exc_info.value.sorter_name == "n"


class TestSorterSnapshot:
    def test_round_trip(self) -> None:
        sorter = Sorter("n", "N", method="byN", value="DESC")
        restored = Sorter.from_dict(sorter.to_dict())
        assert restored.to_dict() == sorter.to_dict()

    def test_rejects_non_string_value(self) -> None:
        with pytest.raises(FormatError):
            Sorter.from_dict({**Sorter("n").to_dict(), "value": 1})

    def test_rejects_other_item_type(self) -> None:
        with pytest.raises(FormatError):
            Sorter.from_dict({"type": "element"})
