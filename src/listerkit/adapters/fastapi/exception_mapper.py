"""FastAPI adapter – ListerExceptionMapper."""
from __future__ import annotations

from typing import Any, Callable


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'listerkit[fastapi]' to use the FastAPI adapter"
        ) from exc


class ListerExceptionMapper:
    """Register listerkit error → HTTP status-code mappings on a FastAPI app.

    Error body schema::

        {"code": "format_error", "message": "...", "detail": {...}}

    Mappings
    --------
    ``FormatError``    → 500
    ``SerializeError`` → 500
    ``ElementError``   → 500
    ``ListerError``    → 500
    ``ConfigError``    → 500

    *overrides* replaces the status for individual error classes.
    """

    def __init__(self, overrides: dict[type[Exception], int] | None = None) -> None:
        _require_fastapi()
        from listerkit.kernel.errors import (
            ConfigError,
            ElementError,
            FormatError,
            ListerError,
            SerializeError,
        )

        # more-specific subtypes first
        self._map: list[tuple[type[Exception], int]] = [
            (FormatError, 500),
            (SerializeError, 500),
            (ElementError, 500),
            (ListerError, 500),
            (ConfigError, 500),
        ]
        if overrides:
            self._map = [(etype, overrides.get(etype, status)) for etype, status in self._map]

    @property
    def mappings(self) -> list[tuple[type[Exception], int]]:
        return list(self._map)

    def register(self, app: Any) -> None:
        """Register all error handlers on a ``FastAPI`` or ``Starlette`` app."""
        from fastapi.responses import JSONResponse  # type: ignore[import-untyped]

        for exc_type, status in self._map:

            def make_handler(code: int) -> Callable[[Any, Any], Any]:
                def handler(request: Any, exc: Any) -> Any:  # noqa: ARG001
                    from listerkit.kernel.errors import ListerKitError

                    if isinstance(exc, ListerKitError):
                        body = exc.to_dict()
                    else:
                        body = {"code": "error", "message": str(exc)}
                    return JSONResponse(status_code=code, content=body)

                return handler

            app.add_exception_handler(exc_type, make_handler(status))


__all__ = ["ListerExceptionMapper"]
