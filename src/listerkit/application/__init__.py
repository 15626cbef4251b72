"""Application – list definitions and the list engine (framework-agnostic)."""

from listerkit.application.elements import Element, ElementBag
from listerkit.application.filters import Filter, FilterBag, FilterKind, FilterType
from listerkit.application.forms import ParamFormBinder
from listerkit.application.lister import ListEngine, ListFactory, ListSessionRegistry
from listerkit.application.pagination import Pager, page_links
from listerkit.application.ports import ListRequest, Query, Repository, SessionStore
from listerkit.application.sorters import SortDirection, Sorter, SorterBag

__all__ = [
    "Element",
    "ElementBag",
    "Filter",
    "FilterBag",
    "FilterKind",
    "FilterType",
    "ListEngine",
    "ListFactory",
    "ListRequest",
    "ListSessionRegistry",
    "Pager",
    "ParamFormBinder",
    "Query",
    "Repository",
    "SessionStore",
    "SortDirection",
    "Sorter",
    "SorterBag",
    "page_links",
]
