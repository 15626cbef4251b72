"""Application-layer errors – list engine preconditions and row extraction."""

from __future__ import annotations

from typing import Any

from listerkit.kernel.errors.base import ListerKitError


class ListerError(ListerKitError):
    """A list engine cannot be applied in its current state."""

    default_code = "lister_error"
    subject_field = "list_id"

    def __init__(
        self,
        message: str,
        *,
        list_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.list_id = list_id


class ElementError(ListerKitError):
    """Reading display data out of a bound row failed."""

    default_code = "element_error"
    subject_field = "element_name"

    def __init__(
        self,
        message: str,
        *,
        element_name: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.element_name = element_name


__all__ = ["ElementError", "ListerError"]
