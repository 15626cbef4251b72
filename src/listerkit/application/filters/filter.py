"""Application filters – Filter, a named predicate with a current value."""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, Mapping, Sequence

from listerkit.application.ports.query import Query
from listerkit.kernel.errors import FilterError, FormatError
from listerkit.kernel.naming import derive_method_name

if TYPE_CHECKING:
    from listerkit.application.lister.engine import ListEngine


class FilterType(str, Enum):
    TEXT = "text"
    SELECT = "select"
    MULTISELECT = "multi"
    CHECKBOX = "checkbox"
    RADIO = "radio"


class FilterKind(str, Enum):
    """Widget kind a filter resolves to."""

    TEXT = "text"
    CHOICE = "choice"
    CHECKBOX = "checkbox"
    RADIO = "radio"


ChoiceValues = Mapping[str, Any] | Sequence[Any]


def _normalise_values(values: ChoiceValues | None) -> dict[str, Any]:
    """Choices are kept as ``{label: value}``; bare sequences label by ``str(value)``."""
    if not values:
        return {}
    if isinstance(values, Mapping):
        return {str(label): value for label, value in values.items()}
    return {str(value): value for value in values}


class Filter:
    """Declarative filter bound to one field.

    Without an explicit ``method`` the filter targets the named backend
    operation ``filterBy<Name>`` and, when the backend has none, a generic
    predicate on the field itself.
    """

    def __init__(
        self,
        type: FilterType | str,  # noqa: A002
        name: str = "",
        label: str = "",
        method: str = "",
        value: Any = None,
        values: ChoiceValues | None = None,
    ) -> None:
        self._type = self._check_type(type)
        self.name = name
        self.label = label
        self.value = value
        self._values = _normalise_values(values)
        if not method and name:
            self._method = derive_method_name("filter_by", name)
            self._default = True
        else:
            self._method = method
            self._default = False

    @staticmethod
    def _check_type(type_: FilterType | str) -> FilterType:
        try:
            return FilterType(type_)
        except ValueError as exc:
            raise FilterError(f"Invalid filter type {type_!r}", cause=exc) from exc

    @property
    def type(self) -> FilterType:
        return self._type

    @type.setter
    def type(self, type_: FilterType | str) -> None:
        self._type = self._check_type(type_)

    @property
    def values(self) -> dict[str, Any]:
        return dict(self._values)

    @values.setter
    def values(self, values: ChoiceValues | None) -> None:
        self._values = _normalise_values(values)

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

    def resolved_kind(self) -> FilterKind:
        """Enum values promote checkbox / radio filters to a choice widget."""
        if (
            (self._type in (FilterType.CHECKBOX, FilterType.RADIO) and self._values)
            or self._type in (FilterType.SELECT, FilterType.MULTISELECT)
        ):
            return FilterKind.CHOICE
        if self._type is FilterType.CHECKBOX:
            return FilterKind.CHECKBOX
        if self._type is FilterType.RADIO:
            return FilterKind.RADIO
        return FilterKind.TEXT

    def is_multiple(self) -> bool:
        return self._type in (FilterType.MULTISELECT, FilterType.CHECKBOX)

    def is_expanded(self) -> bool:
        return self._type in (FilterType.CHECKBOX, FilterType.RADIO)

    def apply(self, engine: "ListEngine", extra_args: Sequence[Any] = ()) -> Query:
        """Apply the current value to the engine's working query.

        Returns the (possibly unmodified) query.
        """
        if self.resolved_kind() is FilterKind.CHOICE and not self._values:
            raise FilterError(
                "Filter values are required when the filter is an enum type",
                filter_name=self.name,
            )
        query = engine.get_query(clone=False)
        if query is None:
            raise FilterError(
                "List is not ready to apply filter - missing assigned query object",
                filter_name=self.name,
            )
        if self.value is None:
            return query
        if query.supports(self._method):
            return query.apply_named_predicate(self._method, [self.value, *extra_args])
        if not self._default:
            raise FilterError(
                f'Method "{self._method}" of assigned query object is not defined',
                filter_name=self.name,
            )
        if extra_args:
            op = str(extra_args[0])
        elif isinstance(self.value, (list, tuple)):
            op = "IN"
        else:
            op = "="
        return query.add_predicate(f"{query.root_alias()}.{self.name}", op, self.value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "filter",
            "filterType": self._type.value,
            "name": self.name,
            "label": self.label,
            "value": self.value,
            "values": dict(self._values),
            "method": self._method,
            "default": self._default,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Filter":
        if data.get("type") != "filter":
            raise FormatError(f"Not a filter snapshot: {data!r}")
        strings = [data.get(key) for key in ("filterType", "name", "label", "method")]
        if (
            not all(isinstance(v, str) for v in strings)
            or not isinstance(data.get("values"), Mapping)
            or not isinstance(data.get("default"), bool)
            or "value" not in data
        ):
            raise FormatError(f"Invalid filter snapshot: {data!r}")
        try:
            filter_ = cls(data["filterType"], data["name"], data["label"], value=data["value"], values=data["values"])
        except FilterError as exc:
            raise FormatError("Invalid filter snapshot", cause=exc) from exc
        if not data["default"]:
            filter_.method_name = data["method"]
        return filter_

    def __repr__(self) -> str:
        return f"Filter(type={self._type.value!r}, name={self.name!r}, value={self.value!r})"


__all__ = ["ChoiceValues", "Filter", "FilterKind", "FilterType"]
