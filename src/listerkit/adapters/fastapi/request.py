"""FastAPI adapter – conversion of Starlette requests into ListRequest."""
from __future__ import annotations

import re
from typing import Any, Iterable

from listerkit.application.ports.request import ListRequest

_KEY = re.compile(r"^([^\[\]]+)((?:\[[^\[\]]*\])*)$")
_PART = re.compile(r"\[([^\[\]]*)\]")


def parse_nested(items: Iterable[tuple[str, str]]) -> dict[str, Any]:
    """Fold flat form pairs with bracketed keys into nested dicts.

    ``a[b]=1`` becomes ``{"a": {"b": "1"}}``; a trailing ``[]`` collects
    repeated values into a list. Keys that do not parse are kept verbatim.
    """
    result: dict[str, Any] = {}
    for raw_key, value in items:
        match = _KEY.match(raw_key)
        if match is None:
            result[raw_key] = value
            continue
        path = [match.group(1), *_PART.findall(match.group(2))]
        collect = len(path) > 1 and path[-1] == ""
        if collect:
            path.pop()
        target = result
        for part in path[:-1]:
            child = target.get(part)
            if not isinstance(child, dict):
                child = target[part] = {}
            target = child
        last = path[-1]
        if collect:
            values = target.get(last)
            if not isinstance(values, list):
                values = target[last] = []
            values.append(value)
        else:
            target[last] = value
    return result


async def request_from_starlette(request: Any) -> ListRequest:
    """Merge query string and (for form posts) body fields into a :class:`ListRequest`."""
    items: list[tuple[str, str]] = list(request.query_params.multi_items())
    if request.method in ("POST", "PUT", "PATCH"):
        form = await request.form()
        items.extend((key, value) for key, value in form.multi_items() if isinstance(value, str))
    return ListRequest(params=parse_nested(items), method=request.method)


__all__ = ["parse_nested", "request_from_starlette"]
