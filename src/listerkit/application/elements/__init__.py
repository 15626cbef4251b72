"""Application elements – per-row display extractors."""
from listerkit.application.elements.bag import ElementBag
from listerkit.application.elements.element import Element, Extractor

__all__ = ["Element", "ElementBag", "Extractor"]
