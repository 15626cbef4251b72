"""Config settings – Settings, base of the validated settings dataclasses.

A subclass names its environment prefix in ``_prefix`` (``LISTER`` reads
``LISTER_PER_PAGE`` ...) and lists in ``_secret_fields`` the values that must
not show up in ``repr`` output, which ends up in log lines.
"""
from __future__ import annotations

import dataclasses
from typing import ClassVar

MASK = "***"


@dataclasses.dataclass(repr=False)
class Settings:
    _prefix: ClassVar[str] = ""
    _secret_fields: ClassVar[frozenset[str]] = frozenset()

    def __post_init__(self) -> None:
        self._validate()

    @classmethod
    def env_key(cls, field_name: str) -> str:
        """Environment variable holding *field_name*, e.g. ``LISTER_PER_PAGE``."""
        return f"{cls._prefix}_{field_name}".upper().lstrip("_")

    def _validate(self) -> None:
        """Cross-field checks; raise :class:`InvalidSettingValueError`."""

    def __repr__(self) -> str:
        parts = []
        for field in dataclasses.fields(self):
            value = getattr(self, field.name)
            shown = MASK if field.name in self._secret_fields and value is not None else repr(value)
            parts.append(f"{field.name}={shown}")
        return f"{type(self).__name__}({', '.join(parts)})"


__all__ = ["MASK", "Settings"]
