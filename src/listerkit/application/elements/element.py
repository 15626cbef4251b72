"""Application elements – Element, a named display-value extractor."""
from __future__ import annotations

import copy
from typing import Any, Callable, Mapping

from listerkit.kernel.errors import ElementError, FormatError
from listerkit.kernel.naming import derive_method_name

_SCALARS = (str, bytes, int, float, bool)

Extractor = Callable[["Element"], Any]


class Element:
    """Determines how one piece of a row is displayed.

    Data is read, in order, from the custom extractor, the named accessor of
    the bound row, or (for default-derived accessors missing on the row) the
    attribute / key named after the field.
    """

    def __init__(
        self,
        name: str = "",
        label: str = "",
        method: str = "",
        callable_: Extractor | None = None,
        data: Any = None,
    ) -> None:
        self.name = name
        self.label = label
        self.data = data
        self._callable = callable_
        self._custom = callable(callable_)
        if not method and name and not self._custom:
            self._method = derive_method_name("get", name)
            self._default = True
        else:
            self._method = method
            self._default = False

    @property
    def method_name(self) -> str:
        return self._method

    @method_name.setter
    def method_name(self, method: str) -> None:
        self._default = False
        self._method = method

    @property
    def extractor(self) -> Extractor | None:
        return self._callable

    @extractor.setter
    def extractor(self, value: Extractor | None) -> None:
        self._callable = value
        self._custom = self._custom and callable(value)

    @property
    def is_custom(self) -> bool:
        return self._custom

    def set_custom(self, state: bool) -> "Element":
        """Use the extractor (``True``) or the accessor (``False``)."""
        self._custom = state and callable(self._callable)
        return self

    @property
    def is_default_method(self) -> bool:
        return self._default

    def with_data(self, row: Any) -> "Element":
        """Return a detached copy bound to *row*; ``self`` is left untouched."""
        detached = copy.copy(self)
        detached.data = row
        return detached

    def get_data(self, raw: bool = False) -> Any:
        if raw:
            return self.data
        if self._custom:
            try:
                return self._callable(self)  # type: ignore[misc]
            except Exception as exc:
                raise ElementError(
                    "Error while calling custom extractor", element_name=self.name, cause=exc
                ) from exc
        row = self.data
        if row is None or isinstance(row, _SCALARS):
            return row
        if isinstance(row, Mapping):
            return self._from_mapping(row)
        return self._from_object(row)

    def _from_mapping(self, row: Mapping[str, Any]) -> Any:
        key = self._method if (self._method in row or not self._default) else self.name
        try:
            return row[key]
        except KeyError as exc:
            raise ElementError(f"Row has no key {key!r}", element_name=self.name, cause=exc) from exc

    def _from_object(self, row: Any) -> Any:
        accessor = getattr(row, self._method, None) if self._method else None
        try:
            if accessor is None:
                if not self._default and self._method:
                    raise AttributeError(self._method)
                return getattr(row, self.name)
            return accessor() if callable(accessor) else accessor
        except Exception as exc:
            raise ElementError(
                f'Error while reading "{self._method or self.name}"',
                element_name=self.name,
                cause=exc,
            ) from exc

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "element",
            "name": self.name,
            "label": self.label,
            "method": self._method,
            "default": self._default,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Element":
        if data.get("type") != "element":
            raise FormatError(f"Not an element snapshot: {data!r}")
        name, label, method = data.get("name"), data.get("label"), data.get("method")
        if not all(isinstance(v, str) for v in (name, label, method)) or not isinstance(
            data.get("default"), bool
        ):
            raise FormatError(f"Invalid element snapshot: {data!r}")
        element = cls(name, label)
        if not data["default"]:
            element.method_name = method
        return element

    def __repr__(self) -> str:
        return f"Element(name={self.name!r}, method={self._method!r}, custom={self._custom})"


__all__ = ["Element", "Extractor"]
