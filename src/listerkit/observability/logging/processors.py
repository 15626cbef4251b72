"""Observability – structlog processors and get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


class ListContextProcessor:
    """structlog processor copying ``list_id`` out of a bound ``engine`` value.

    Lets call sites log ``engine=engine`` without rendering the whole object::

        structlog.configure(processors=[ListContextProcessor(), ...])
    """

    def __call__(
        self,
        logger: Any,           # noqa: ARG002
        method_name: str,      # noqa: ARG002
        event_dict: dict[str, Any],
    ) -> dict[str, Any]:
        engine = event_dict.pop("engine", None)
        if engine is not None:
            event_dict.setdefault("list_id", getattr(engine, "id", None))
        return event_dict


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger, bound to *initial_values* when given.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


__all__ = ["ListContextProcessor", "get_logger"]
