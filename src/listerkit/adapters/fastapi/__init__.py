"""FastAPI adapter – quick-reload router, exception mapper, request conversion."""
from listerkit.adapters.fastapi.exception_mapper import ListerExceptionMapper
from listerkit.adapters.fastapi.request import parse_nested, request_from_starlette
from listerkit.adapters.fastapi.routers import (
    CACHE_CONTROL,
    create_quick_reload_router,
)

__all__ = [
    "CACHE_CONTROL",
    "ListerExceptionMapper",
    "create_quick_reload_router",
    "parse_nested",
    "request_from_starlette",
]
