"""Bag – order-preserving, uniquely-keyed, optionally type-validated container."""

from __future__ import annotations

from typing import Any, ClassVar, Generic, Iterator, Mapping, TypeVar

T = TypeVar("T")


class Bag(Generic[T]):
    """Keyed container that keeps insertion order.

    Subclasses pin ``item_type`` to reject foreign items with :class:`TypeError`.
    Re-setting an existing key keeps its original position.
    """

    item_type: ClassVar[type | None] = None

    def __init__(self, items: Mapping[str, T] | None = None) -> None:
        self._items: dict[str, T] = {}
        if items:
            self._validate_all(items)
            self._items = dict(items)

    def all(self) -> dict[str, T]:
        """Return a shallow copy of the stored mapping."""
        return dict(self._items)

    def keys(self) -> list[str]:
        return list(self._items)

    def replace(self, items: Mapping[str, T] | None = None) -> None:
        items = items or {}
        self._validate_all(items)
        self._items = dict(items)

    def add(self, items: Mapping[str, T]) -> None:
        """Merge *items* in; existing keys are overwritten in place."""
        self._validate_all(items)
        self._items.update(items)

    def get(self, key: str, default: Any = None) -> T | Any:
        return self._items.get(key, default)

    def set(self, key: str, value: T) -> None:
        self._validate(key, value)
        self._items[key] = value

    def has(self, key: str) -> bool:
        return key in self._items

    def remove(self, key: str) -> None:
        self._items.pop(key, None)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._items.values()))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, key: object) -> bool:
        return key in self._items

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.keys()!r})"

    def _validate_all(self, items: Mapping[str, Any]) -> None:
        for key, value in items.items():
            self._validate(key, value)

    def _validate(self, key: str, value: Any) -> None:
        expected = self.item_type
        if expected is not None and not isinstance(value, expected):
            raise TypeError(
                f"Item {key!r} is {type(value).__name__}, expected {expected.__name__}"
            )


__all__ = ["Bag"]
