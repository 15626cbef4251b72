"""Application elements – ElementBag."""
from __future__ import annotations

from listerkit.application.elements.element import Element
from listerkit.kernel.bag import Bag


class ElementBag(Bag[Element]):
    item_type = Element


__all__ = ["ElementBag"]
