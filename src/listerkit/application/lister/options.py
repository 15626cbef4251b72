"""Application lister – custom option resolution."""
from __future__ import annotations

from typing import Any, Mapping

from listerkit.kernel.errors import ListerError

QUICK_RELOAD_ROUTE = "lister_quick_reload"
DEFAULT_MAX_LINKS = 7

_ALLOWED_TYPES: dict[str, type] = {"max_links": int, "route": str, "params": dict}


def default_custom_options(list_id: str, max_links: int = DEFAULT_MAX_LINKS) -> dict[str, Any]:
    return {"max_links": max_links, "route": QUICK_RELOAD_ROUTE, "params": {"uuid": list_id}}


def resolve_custom_options(
    options: Mapping[str, Any],
    list_id: str,
    max_links: int = DEFAULT_MAX_LINKS,
) -> dict[str, Any]:
    """Merge *options* over the defaults and type-check every key.

    Raises :class:`ListerError` on an unknown key or a mistyped value.
    """
    unknown = sorted(set(options) - set(_ALLOWED_TYPES))
    if unknown:
        raise ListerError(
            "Invalid custom options",
            list_id=list_id,
            detail={"unknown": unknown},
        )
    resolved = {**default_custom_options(list_id, max_links), **options}
    for key, expected in _ALLOWED_TYPES.items():
        value = resolved[key]
        # bool is an int subclass; it is not a valid link count
        if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
            raise ListerError(
                "Invalid custom options",
                list_id=list_id,
                detail={"key": key, "expected": expected.__name__},
            )
    resolved["params"] = dict(resolved["params"])
    return resolved


__all__ = [
    "DEFAULT_MAX_LINKS",
    "QUICK_RELOAD_ROUTE",
    "default_custom_options",
    "resolve_custom_options",
]
