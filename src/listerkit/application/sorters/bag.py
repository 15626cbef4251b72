"""Application sorters – SorterBag."""
from __future__ import annotations

from listerkit.application.sorters.sorter import Sorter
from listerkit.kernel.bag import Bag


class SorterBag(Bag[Sorter]):
    item_type = Sorter


__all__ = ["SorterBag"]
