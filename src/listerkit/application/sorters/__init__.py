"""Application sorters – ordering specs and their bag."""
from listerkit.application.sorters.bag import SorterBag
from listerkit.application.sorters.sorter import SortDirection, Sorter

__all__ = ["SortDirection", "Sorter", "SorterBag"]
