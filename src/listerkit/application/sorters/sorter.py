"""Application sorters – Sorter, a named ordering with a direction."""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping, Sequence

from listerkit.application.ports.query import Query
from listerkit.kernel.errors import FormatError, SorterError
from listerkit.kernel.naming import derive_method_name

if TYPE_CHECKING:
    from listerkit.application.lister.engine import ListEngine


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"

    def flipped(self) -> "SortDirection":
        return SortDirection.DESC if self is SortDirection.ASC else SortDirection.ASC


def _normalise(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, SortDirection):
        return value.value
    return str(value).strip().upper()


class Sorter:
    """Declarative ordering on one field.

    ``value`` is ``None`` (inactive), ``"ASC"`` or ``"DESC"``; any other string
    is stored but ignored when the sorter is applied.
    """

    def __init__(
        self,
        name: str = "",
        label: str = "",
        method: str = "",
        value: str | SortDirection | None = None,
    ) -> None:
        self.name = name
        self.label = label
        self._value = _normalise(value)
        if not method and name:
            self._method = derive_method_name("order_by", name)
            self._default = True
        else:
            self._method = method
            self._default = False

    @property
    def value(self) -> str | None:
        return self._value

    @value.setter
    def value(self, value: str | SortDirection | None) -> None:
        self._value = _normalise(value)

    @property
    def direction(self) -> SortDirection | None:
        """The value as a :class:`SortDirection`, ``None`` when inactive or unknown."""
        try:
            return SortDirection(self._value) if self._value is not None else None
        except ValueError:
            return None

    @property
    def method_name(self) -> str:
        return self._method

    @method_name.setter
    def method_name(self, method: str) -> None:
        self._default = False
        self._method = method

    @property
    def is_default_method(self) -> bool:
        return self._default

    def flip(self) -> str:
        """Advance inactive → ASC → DESC → ASC and return the new value."""
        current = self.direction
        self._value = (current.flipped() if current else SortDirection.ASC).value
        return self._value

    def apply(self, engine: "ListEngine", extra_args: Sequence[Any] = ()) -> Query | None:
        direction = self.direction
        if direction is None:
            return None
        query = engine.get_query(clone=False)
        if query is None:
            raise SorterError(
                "List is not ready to apply sorter - missing assigned query object",
                sorter_name=self.name,
            )
        if query.supports(self._method):
            return query.apply_named_predicate(self._method, [direction.value, *extra_args])
        if not self._default:
            raise SorterError(
                f'Method "{self._method}" of assigned query object is not defined',
                sorter_name=self.name,
            )
        return query.add_order_by(f"{query.root_alias()}.{self.name}", direction.value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "sorter",
            "name": self.name,
            "label": self.label,
            "value": self._value,
            "method": self._method,
            "default": self._default,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Sorter":
        if data.get("type") != "sorter":
            raise FormatError(f"Not a sorter snapshot: {data!r}")
        name, label, method = data.get("name"), data.get("label"), data.get("method")
        value = data.get("value")
        if (
            not all(isinstance(v, str) for v in (name, label, method))
            or not (value is None or isinstance(value, str))
            or not isinstance(data.get("default"), bool)
        ):
            raise FormatError(f"Invalid sorter snapshot: {data!r}")
        sorter = cls(name, label, value=value)
        if not data["default"]:
            sorter.method_name = method
        return sorter

    def __repr__(self) -> str:
        return f"Sorter(name={self.name!r}, value={self._value!r})"


__all__ = ["SortDirection", "Sorter"]
