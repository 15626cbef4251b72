"""Shared fixtures: a small book catalogue and list engines over it."""
from __future__ import annotations

import dataclasses
from typing import Any, Callable

import pytest

from listerkit.adapters.memory import InMemoryRepository
from listerkit.application.forms import ParamFormBinder
from listerkit.application.lister import ListEngine


@dataclasses.dataclass
class Book:
    id: int
    title: str
    author: str
    year: int
    genre: str

    def get_label(self) -> str:
        return f"{self.title} ({self.year})"


@pytest.fixture()
def books() -> list[Book]:
    return [
        Book(1, "Dune", "Herbert", 1965, "scifi"),
        Book(2, "Neuromancer", "Gibson", 1984, "scifi"),
        Book(3, "Emma", "Austen", 1815, "classic"),
        Book(4, "Dracula", "Stoker", 1897, "horror"),
        Book(5, "100% Pure_Fiction", "Anon", 2001, "misc"),
    ]


@pytest.fixture()
def book_repo(books: list[Book]) -> InMemoryRepository:
    return InMemoryRepository(books, source="book")


@pytest.fixture()
def make_engine(book_repo: InMemoryRepository) -> Callable[..., ListEngine]:
    """Build the ``books`` list: title (text filter, sortable), year (sortable), genre (select)."""

    def factory(per_page: int = 2, list_id: str = "books", **kwargs: Any) -> ListEngine:
        engine = ListEngine(list_id, **(kwargs or {"repository": book_repo}))
        engine.bind_forms(ParamFormBinder(), f"lister_filters_{list_id}")
        engine.per_page = per_page
        engine.add_field("title", "Title", sort=True, filter_type="text")
        engine.add_field("year", "Year", sort=True)
        engine.add_field(
            "genre",
            "Genre",
            filter_type="select",
            filter_values=["scifi", "classic", "horror", "misc"],
        )
        return engine

    return factory
