"""Application ports – Router and ListRenderer."""
from __future__ import annotations

import abc
from typing import TYPE_CHECKING, Any, Mapping

if TYPE_CHECKING:
    from listerkit.application.lister.engine import ListEngine


class Router(abc.ABC):
    """Port: URL generation for form actions."""

    @abc.abstractmethod
    def url_for(self, route_name: str, params: Mapping[str, Any]) -> str: ...


class ListRenderer(abc.ABC):
    """Port: turns an applied list into HTML fragments."""

    @abc.abstractmethod
    def render_list(self, engine: "ListEngine") -> str: ...

    @abc.abstractmethod
    def render_filters(self, engine: "ListEngine") -> str: ...

    @abc.abstractmethod
    def render_pagination(self, engine: "ListEngine") -> str: ...


class NullRenderer(ListRenderer):
    """Renders nothing; for clients that only consume the JSON rows."""

    def render_list(self, engine: "ListEngine") -> str:  # noqa: ARG002
        return ""

    def render_filters(self, engine: "ListEngine") -> str:  # noqa: ARG002
        return ""

    def render_pagination(self, engine: "ListEngine") -> str:  # noqa: ARG002
        return ""


__all__ = ["ListRenderer", "NullRenderer", "Router"]
