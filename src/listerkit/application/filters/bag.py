"""Application filters – FilterBag."""
from __future__ import annotations

from listerkit.application.filters.filter import Filter
from listerkit.kernel.bag import Bag


class FilterBag(Bag[Filter]):
    item_type = Filter


__all__ = ["FilterBag"]
