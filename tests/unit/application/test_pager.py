"""Unit tests for Pager and page_links."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st

from listerkit.adapters.memory import InMemoryQuery
from listerkit.application.pagination import Pager, page_links


def _query(n: int) -> InMemoryQuery:
    return InMemoryQuery([{"n": i} for i in range(1, n + 1)])


def _pager(n: int, per_page: int, page: int = 1) -> Pager:
    pager = Pager(_query(n), per_page)
    pager.page = page
    return pager.init()


# ---------------------------------------------------------------------------
# Slicing
# ---------------------------------------------------------------------------


class TestSlicing:
    def test_pages_of_four(self) -> None:
        assert [r["n"] for r in _pager(10, 4, 1)] == [1, 2, 3, 4]
        assert [r["n"] for r in _pager(10, 4, 2)] == [5, 6, 7, 8]
        assert [r["n"] for r in _pager(10, 4, 3)] == [9, 10]

    def test_last_page_and_total(self) -> None:
        pager = _pager(10, 4)
        assert pager.total_results == 10
        assert pager.last_page == 3

    def test_page_clamped_to_last_page(self) -> None:
        pager = _pager(10, 4, 99)
        assert pager.page == 3
        assert len(pager) == 2

    def test_page_setter_floors_at_one(self) -> None:
        pager = Pager(_query(3), 2)
        pager.page = -4
        assert pager.page == 1

    def test_per_page_zero_shows_everything(self) -> None:
        pager = _pager(7, 0)
        assert len(pager) == 7
        assert pager.last_page == 1
        assert pager.page == 1
        assert not pager.have_to_paginate()

    def test_per_page_negative_means_unlimited(self) -> None:
        pager = Pager(_query(3), -3).init()
        assert pager.per_page == 0
        assert pager.last_page == 1
        assert len(pager.get_results()) == 3

    def test_empty_source(self) -> None:
        pager = _pager(0, 4, 2)
        assert pager.last_page == 0
        assert pager.page == 0
        assert pager.is_empty()
        assert pager.first_page == 0

    def test_empty_source_with_per_page_zero(self) -> None:
        pager = _pager(0, 0)
        assert pager.last_page == 0
        assert pager.is_empty()

    def test_results_are_memoised(self) -> None:
        pager = _pager(5, 2)
        assert pager.get_results() is pager.get_results()

    def test_count_runs_on_a_clone(self) -> None:
        query = _query(5)
        pager = Pager(query, 2)
        pager.page = 2
        pager.init()
        assert query.execute() == [{"n": 3}, {"n": 4}]


class TestHaveToPaginate:
    def test_more_rows_than_page(self) -> None:
        assert _pager(5, 2).have_to_paginate()

    def test_exactly_one_page(self) -> None:
        assert not _pager(4, 4).have_to_paginate()

    def test_fewer_rows_than_page(self) -> None:
        assert not _pager(1, 4).have_to_paginate()


class TestMaxRecordLimit:
    def test_caps_total_and_pages(self) -> None:
        pager = Pager(_query(10), 4)
        pager.max_record_limit = 6
        pager.page = 2
        pager.init()
        assert pager.total_results == 6
        assert pager.last_page == 2
        assert [r["n"] for r in pager] == [5, 6]

    def test_applies_with_per_page_zero(self) -> None:
        pager = Pager(_query(10), 0)
        pager.max_record_limit = 3
        pager.init()
        assert len(pager) == 3


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------


class TestNavigation:
    def test_indexes(self) -> None:
        pager = _pager(10, 4, 3)
        assert pager.first_index == 9
        assert pager.last_index == 10

    def test_indexes_without_paging(self) -> None:
        pager = _pager(6, 0)
        assert (pager.first_index, pager.last_index) == (1, 6)

    def test_next_and_previous(self) -> None:
        pager = _pager(10, 4, 2)
        assert pager.next_page == 3
        assert pager.previous_page == 1
        last = _pager(10, 4, 3)
        assert last.next_page == 3
        assert last.is_last_page()
        assert _pager(10, 4, 1).is_first_page()

    def test_get_links_tracks_max_link(self) -> None:
        pager = _pager(100, 10, 5)
        assert pager.get_links(3) == [4, 5, 6]
        assert pager.current_max_link == 6

    def test_repr(self) -> None:
        assert repr(_pager(3, 2)) == "Pager(page=1, per_page=2, last_page=2, total=3)"


class TestPageLinks:
    def test_centred(self) -> None:
        assert page_links(5, 10, 5) == [3, 4, 5, 6, 7]

    def test_clamped_at_start(self) -> None:
        assert page_links(1, 10, 5) == [1, 2, 3, 4, 5]

    def test_clamped_at_end(self) -> None:
        assert page_links(10, 10, 5) == [6, 7, 8, 9, 10]

    def test_fewer_pages_than_window(self) -> None:
        assert page_links(2, 3, 7) == [1, 2, 3]

    def test_no_pages(self) -> None:
        assert page_links(0, 0, 5) == []

    @given(
        page=st.integers(min_value=1, max_value=50),
        last_page=st.integers(min_value=1, max_value=50),
        window=st.integers(min_value=1, max_value=12),
    )
    def test_window_is_contiguous_and_in_range(self, page: int, last_page: int, window: int) -> None:
        page = min(page, last_page)
        links = page_links(page, last_page, window)
        assert len(links) == min(window, last_page)
        assert links == list(range(links[0], links[-1] + 1))
        assert 1 <= links[0] and links[-1] <= last_page
        assert page in links
