"""Application ports – SessionStore."""
from __future__ import annotations

import abc
from typing import Any


class SessionStore(abc.ABC):
    """Port: per-user key/value store holding list snapshots between requests.

    Values are plain JSON-compatible structures (dicts, lists, scalars).
    """

    @abc.abstractmethod
    def get(self, key: str, default: Any = None) -> Any: ...

    @abc.abstractmethod
    def set(self, key: str, value: Any) -> None: ...

    @abc.abstractmethod
    def has(self, key: str) -> bool: ...

    @abc.abstractmethod
    def remove(self, key: str) -> None: ...


__all__ = ["SessionStore"]
