"""Application ports – ListRequest."""
from __future__ import annotations

import dataclasses
from typing import Any, Mapping


@dataclasses.dataclass(frozen=True)
class ListRequest:
    """Framework-neutral view of an incoming request.

    ``params`` merges query-string and submitted form values; forms are nested
    under their form name (``{"lister_filters_<id>": {"title": "foo"}}``).
    """

    params: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    method: str = "GET"

    def get(self, key: str, default: Any = None) -> Any:
        return self.params.get(key, default)


__all__ = ["ListRequest"]
