"""Application lister – ListSnapshot, the serialisable state of a list engine.

A snapshot is a plain ``dict`` of JSON-friendly values::

    {
        "id": "…", "query": {...} | None, "externalQuery": {...} | None,
        "filters": [{"type": "filter", ...}], "sorters": [...], "elements": [...],
        "perpage": 15, "currentPage": 1, "persist": True, "dynamic": True,
        "filterLayout": "…", "listLayout": "…", "elementLayout": "…",
        "paginationLayout": "…", "translationDomain": "…", "customOptions": {...},
    }

Decoding is all-or-nothing: any missing key or mistyped value raises a single
:class:`~listerkit.kernel.errors.FormatError`.
"""
from __future__ import annotations

import dataclasses
from typing import Any, Callable, Mapping, TypeVar

from listerkit.application.elements import Element
from listerkit.application.filters import Filter
from listerkit.application.lister.options import resolve_custom_options
from listerkit.application.ports.query import QuerySnapshot
from listerkit.application.sorters import Sorter
from listerkit.kernel.errors import FormatError, ListerKitError

T = TypeVar("T")

SNAPSHOT_KEYS: tuple[str, ...] = (
    "id",
    "query",
    "externalQuery",
    "filters",
    "sorters",
    "elements",
    "perpage",
    "currentPage",
    "persist",
    "dynamic",
    "filterLayout",
    "listLayout",
    "elementLayout",
    "paginationLayout",
    "translationDomain",
    "customOptions",
)

_STRING_KEYS = ("filterLayout", "listLayout", "elementLayout", "paginationLayout", "translationDomain")


@dataclasses.dataclass
class ListSnapshot:
    id: str
    query: QuerySnapshot | None
    external_query: QuerySnapshot | None
    filters: list[Filter]
    sorters: list[Sorter]
    elements: list[Element]
    per_page: int
    current_page: int
    persist: bool
    dynamic: bool
    filter_layout: str
    list_layout: str
    element_layout: str
    pagination_layout: str
    translation_domain: str
    custom_options: dict[str, Any]

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "query": self.query.to_dict() if self.query else None,
            "externalQuery": self.external_query.to_dict() if self.external_query else None,
            "filters": [f.to_dict() for f in self.filters],
            "sorters": [s.to_dict() for s in self.sorters],
            "elements": [e.to_dict() for e in self.elements],
            "perpage": self.per_page,
            "currentPage": self.current_page,
            "persist": self.persist,
            "dynamic": self.dynamic,
            "filterLayout": self.filter_layout,
            "listLayout": self.list_layout,
            "elementLayout": self.element_layout,
            "paginationLayout": self.pagination_layout,
            "translationDomain": self.translation_domain,
            "customOptions": {**self.custom_options, "params": dict(self.custom_options["params"])},
        }

    @classmethod
    def from_dict(cls, data: Any) -> "ListSnapshot":
        if not isinstance(data, Mapping) or not data:
            raise FormatError("This is not a serialized list")
        for key in SNAPSHOT_KEYS:
            if key not in data:
                raise FormatError(f"Serialized list is missing {key!r}", key=key)
        list_id = data["id"]
        if not isinstance(list_id, str) or not list_id:
            raise FormatError("Serialized list has an invalid id", key="id")
        for key in ("perpage", "currentPage"):
            if not _is_int(data[key]):
                raise FormatError(f"Serialized list has a non-integer {key!r}", key=key)
        if data["perpage"] < 0:
            raise FormatError("Serialized list has a negative 'perpage'", key="perpage")
        if data["currentPage"] < 1:
            raise FormatError("Serialized list has a 'currentPage' below 1", key="currentPage")
        for key in ("persist", "dynamic"):
            if not isinstance(data[key], bool):
                raise FormatError(f"Serialized list has a non-boolean {key!r}", key=key)
        for key in _STRING_KEYS:
            if not isinstance(data[key], str):
                raise FormatError(f"Serialized list has a non-string {key!r}", key=key)
        if not isinstance(data["customOptions"], Mapping):
            raise FormatError("Serialized list has invalid custom options", key="customOptions")

        try:
            return cls(
                id=list_id,
                query=_decode_query(data["query"]),
                external_query=_decode_query(data["externalQuery"]),
                filters=_decode_items(data["filters"], Filter.from_dict, "filters"),
                sorters=_decode_items(data["sorters"], Sorter.from_dict, "sorters"),
                elements=_decode_items(data["elements"], Element.from_dict, "elements"),
                per_page=data["perpage"],
                current_page=data["currentPage"],
                persist=data["persist"],
                dynamic=data["dynamic"],
                filter_layout=data["filterLayout"],
                list_layout=data["listLayout"],
                element_layout=data["elementLayout"],
                pagination_layout=data["paginationLayout"],
                translation_domain=data["translationDomain"],
                custom_options=resolve_custom_options(data["customOptions"], list_id),
            )
        except FormatError:
            raise
        except ListerKitError as exc:
            raise FormatError("Serialized list could not be decoded", cause=exc) from exc


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _decode_query(raw: Any) -> QuerySnapshot | None:
    return None if raw is None else QuerySnapshot.from_dict(raw)


def _decode_items(raw: Any, decode: Callable[[Mapping[str, Any]], T], key: str) -> list[T]:
    if not isinstance(raw, list):
        raise FormatError(f"Serialized list has a non-list {key!r}", key=key)
    items: list[T] = []
    for item in raw:
        if not isinstance(item, Mapping):
            raise FormatError(f"Serialized list has an invalid item in {key!r}", key=key)
        items.append(decode(item))
    return items


__all__ = ["SNAPSHOT_KEYS", "ListSnapshot"]
