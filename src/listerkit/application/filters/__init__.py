"""Application filters – filter specs and their bag."""
from listerkit.application.filters.bag import FilterBag
from listerkit.application.filters.filter import ChoiceValues, Filter, FilterKind, FilterType

__all__ = ["ChoiceValues", "Filter", "FilterBag", "FilterKind", "FilterType"]
