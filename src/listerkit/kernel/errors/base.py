"""Kernel errors – ListerKitError, root of everything listerkit raises.

Most errors are about one named part of a list: the list itself, a filter,
a sorter, an element, a snapshot key or a setting. Subclasses declare the
attribute holding that name in ``subject_field`` and :meth:`to_dict` carries
it, so HTTP bodies and log lines say which part failed.
"""

from __future__ import annotations

import json
from typing import Any, ClassVar


class ListerKitError(Exception):
    """Root of the error hierarchy.

    Args:
        message: Human-readable description.
        code: Machine-readable slug (defaults to ``default_code``).
        detail: Extra JSON-compatible context.
        cause: Original exception that triggered this error.
    """

    default_code: ClassVar[str] = "listerkit_error"
    subject_field: ClassVar[str | None] = None

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = detail or {}
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    @property
    def subject(self) -> Any:
        """Name of the list part this error is about, or ``None``."""
        if self.subject_field is None:
            return None
        return getattr(self, self.subject_field, None)

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form used by the exception mapper and log events."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.subject_field is not None:
            payload[self.subject_field] = self.subject
        payload["detail"] = self.detail
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def __str__(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False, default=str)

    def __repr__(self) -> str:
        subject = f", {self.subject_field}={self.subject!r}" if self.subject is not None else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{subject})"


__all__ = ["ListerKitError"]
