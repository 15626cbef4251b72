"""Unit tests for the order-preserving Bag container."""

from __future__ import annotations

import pytest

from listerkit.application.elements import Element, ElementBag
from listerkit.application.filters import Filter, FilterBag
from listerkit.application.sorters import Sorter, SorterBag
from listerkit.kernel import Bag


class TestBag:
    def test_preserves_insertion_order(self) -> None:
        bag: Bag[int] = Bag({"b": 2, "a": 1})
        bag.set("c", 3)
        assert bag.keys() == ["b", "a", "c"]
        assert list(bag) == [2, 1, 3]

    def test_reset_keeps_position(self) -> None:
        bag: Bag[int] = Bag({"a": 1, "b": 2})
        bag.set("a", 10)
        assert bag.all() == {"a": 10, "b": 2}
        assert bag.keys() == ["a", "b"]

    def test_add_merges(self) -> None:
        bag: Bag[int] = Bag({"a": 1})
        bag.add({"a": 5, "b": 2})
        assert bag.all() == {"a": 5, "b": 2}

    def test_replace(self) -> None:
        bag: Bag[int] = Bag({"a": 1})
        bag.replace({"z": 26})
        assert bag.all() == {"z": 26}
        bag.replace()
        assert len(bag) == 0

    def test_get_has_remove(self) -> None:
        bag: Bag[int] = Bag({"a": 1})
        assert bag.get("a") == 1
        assert bag.get("missing", 0) == 0
        assert bag.has("a") and "a" in bag
        bag.remove("a")
        bag.remove("a")
        assert not bag.has("a")

    def test_all_returns_copy(self) -> None:
        bag: Bag[int] = Bag({"a": 1})
        bag.all()["b"] = 2
        assert not bag.has("b")

    def test_iteration_tolerates_mutation(self) -> None:
        bag: Bag[int] = Bag({"a": 1, "b": 2})
        for value in bag:
            bag.remove("b")
        assert bag.keys() == ["a"]


class TestTypedBags:
    def test_filter_bag_rejects_foreign_items(self) -> None:
        with pytest.raises(TypeError):
            FilterBag().set("title", Sorter("title"))  # type: ignore[arg-type]

    def test_sorter_bag_rejects_on_construction(self) -> None:
        with pytest.raises(TypeError):
            SorterBag({"title": Element("title")})  # type: ignore[dict-item]

    def test_element_bag_rejects_on_add(self) -> None:
        with pytest.raises(TypeError):
            ElementBag().add({"title": Filter("text", "title")})  # type: ignore[dict-item]

    def test_repr(self) -> None:
        assert repr(FilterBag({"title": Filter("text", "title")})) == "FilterBag(['title'])"
