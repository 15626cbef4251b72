"""Memory adapter – dict-backed session stores."""
from __future__ import annotations

import copy
from typing import Any, MutableMapping

from listerkit.application.ports.session import SessionStore


class MappingSessionStore(SessionStore):
    """Adapts any mutable mapping, e.g. Starlette's ``request.session``."""

    def __init__(self, mapping: MutableMapping[str, Any]) -> None:
        self._mapping = mapping

    def get(self, key: str, default: Any = None) -> Any:
        return self._mapping.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._mapping[key] = value

    def has(self, key: str) -> bool:
        return key in self._mapping

    def remove(self, key: str) -> None:
        self._mapping.pop(key, None)


class InMemorySessionStore(MappingSessionStore):
    """Private dict store; values are deep-copied in and out like a real backend."""

    def __init__(self) -> None:
        super().__init__({})

    def get(self, key: str, default: Any = None) -> Any:
        return copy.deepcopy(super().get(key, default))

    def set(self, key: str, value: Any) -> None:
        super().set(key, copy.deepcopy(value))


__all__ = ["InMemorySessionStore", "MappingSessionStore"]
