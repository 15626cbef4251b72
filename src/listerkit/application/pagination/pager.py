"""Application pagination – Pager over a Query, plus page-link windows."""
from __future__ import annotations

import math
from typing import Any, Iterator, Sequence

from listerkit.application.ports.query import Query


def page_links(page: int, last_page: int, window: int = 5) -> list[int]:
    """Return up to *window* consecutive page numbers centred on *page*.

    The window is shifted so it never starts before 1 nor runs past
    *last_page*; an empty list is returned when there are no pages.
    """
    if window <= 0 or last_page <= 0:
        return []
    begin = page - window // 2
    upper = max(last_page - window + 1, 1)
    begin = min(max(begin, 1), upper)
    return list(range(begin, min(begin + window, last_page + 1)))


class Pager:
    """Slices a query into pages.

    Call :meth:`init` after setting :attr:`page`; it counts the full result
    set on a clone of the query, clamps the page and applies offset / limit
    to the query itself. ``per_page == 0`` shows everything on one page and
    negative values clamp to 0.
    """

    def __init__(self, query: Query, per_page: int = 10) -> None:
        self.query = query
        self.per_page = per_page
        self.max_record_limit: int | None = None
        self.current_max_link = 1
        self._page = 1
        self._last_page = 1
        self._total = 0
        self._results: list[Any] | None = None

    # Configuration -----------------------------------------------------
    @property
    def per_page(self) -> int:
        return self._per_page

    @per_page.setter
    def per_page(self, value: int) -> None:
        self._per_page = max(int(value), 0)

    @property
    def page(self) -> int:
        return self._page

    @page.setter
    def page(self, value: int) -> None:
        self._page = max(int(value), 1)

    def init(self) -> "Pager":
        counter = self.query.clone().offset(0).limit(None)
        count = counter.count()
        if self.max_record_limit is not None:
            count = min(count, self.max_record_limit)
        self._total = count
        self._results = None
        self.query.offset(0).limit(None)

        if self._per_page == 0:
            self._last_page = 1 if count else 0
            self._page = self._last_page
            if self.max_record_limit is not None:
                self.query.limit(self.max_record_limit)
            return self

        self._last_page = math.ceil(count / self._per_page)
        self._page = min(self._page, self._last_page) if self._last_page else 0
        offset = max(self._page - 1, 0) * self._per_page
        self.query.offset(offset)
        limit = self._per_page
        if self.max_record_limit is not None:
            limit = max(min(limit, self.max_record_limit - offset), 0)
        self.query.limit(limit)
        return self

    # Results -----------------------------------------------------------
    def get_results(self) -> list[Any]:
        if self._results is None:
            self._results = list(self.query.execute())
        return self._results

    @property
    def total_results(self) -> int:
        return self._total

    @property
    def last_page(self) -> int:
        return self._last_page

    def have_to_paginate(self) -> bool:
        return self._per_page != 0 and self._total > self._per_page

    def is_empty(self) -> bool:
        return len(self) == 0

    def __iter__(self) -> Iterator[Any]:
        return iter(self.get_results())

    def __len__(self) -> int:
        return len(self.get_results())

    # Navigation --------------------------------------------------------
    @property
    def first_page(self) -> int:
        return 0 if self._total == 0 else 1

    @property
    def next_page(self) -> int:
        return min(self._page + 1, self._last_page)

    @property
    def previous_page(self) -> int:
        return max(self._page - 1, self.first_page)

    def is_first_page(self) -> bool:
        return self._page == self.first_page

    def is_last_page(self) -> bool:
        return self._page == self._last_page

    @property
    def first_index(self) -> int:
        """1-based index of the first row on this page."""
        if self._page == 0 or self._per_page == 0:
            return 1
        return (self._page - 1) * self._per_page + 1

    @property
    def last_index(self) -> int:
        if self._page == 0 or self._per_page == 0:
            return self._total
        return min(self._page * self._per_page, self._total)

    def get_links(self, window: int = 5) -> Sequence[int]:
        links = page_links(self._page, self._last_page, window)
        self.current_max_link = links[-1] if links else 1
        return links

    def __repr__(self) -> str:
        return (
            f"Pager(page={self._page}, per_page={self._per_page}, "
            f"last_page={self._last_page}, total={self._total})"
        )


__all__ = ["Pager", "page_links"]
