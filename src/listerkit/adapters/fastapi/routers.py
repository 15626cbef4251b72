"""FastAPI adapter – quick-reload router for dynamic lists.

Annotations stay evaluated at runtime here: FastAPI resolves the endpoint
signature against this module, and ``Request`` is imported lazily.
"""

import asyncio
from typing import Any, Callable

from listerkit.adapters.fastapi.request import request_from_starlette
from listerkit.adapters.memory.session import MappingSessionStore
from listerkit.application.lister.factory import ListFactory
from listerkit.application.ports.query import Query, Repository
from listerkit.application.ports.request import ListRequest
from listerkit.application.ports.routing import ListRenderer, NullRenderer
from listerkit.application.ports.session import SessionStore
from listerkit.kernel.errors import ListerError, ListerKitError
from listerkit.observability.logging import get_logger

_log = get_logger(__name__)

CACHE_CONTROL = "max-age=0, s-maxage=0, private"

SourceResolver = Callable[[str], "Repository | Query"]
SessionResolver = Callable[[Any], SessionStore]


def _require_fastapi() -> None:
    try:
        import fastapi  # noqa: F401
    except ImportError as exc:
        raise ImportError(
            "Install 'listerkit[fastapi]' to use the FastAPI adapter"
        ) from exc


def _starlette_session(request: Any) -> SessionStore:
    return MappingSessionStore(request.session)


def create_quick_reload_router(
    factory: ListFactory,
    source_resolver: SourceResolver,
    renderer: ListRenderer | None = None,
    path: str = "/lister/{uuid}",
    session_resolver: SessionResolver | None = None,
    tags: list[str] | None = None,
) -> Any:
    """Return a router re-applying a persisted list and answering with JSON.

    The list is restored, applied and rendered in a worker thread so slow
    queries do not block the event loop.

    Parameters
    ----------
    factory:
        Factory used to restore the list; its settings name the session key.
    source_resolver:
        Maps a list id to the repository (or query) the list reads from.
    renderer:
        Produces the HTML fragments; defaults to :class:`NullRenderer`.
    path:
        Route path; must contain ``{uuid}``.
    session_resolver:
        Maps the request to a :class:`SessionStore`; defaults to Starlette's
        ``request.session`` (requires ``SessionMiddleware``).

    Success body::

        {"id", "result", "resultCount", "firstPage", "lastPage", "currentPage",
         "listHTML", "filterHTML", "paginationHTML",
         "status": {"type": "OK", "message": ""}}

    Any failure answers HTTP 500 with ``{"id", "status": {"type": "ERROR", "message"}}``.
    """
    _require_fastapi()
    from fastapi import APIRouter, Request  # type: ignore[import-untyped]
    from fastapi.encoders import jsonable_encoder  # type: ignore[import-untyped]
    from fastapi.responses import JSONResponse  # type: ignore[import-untyped]

    router = APIRouter(tags=tags or ["lister"])
    render = renderer or NullRenderer()
    resolve_session = session_resolver or _starlette_session

    def reload_list(uuid: str, session: SessionStore, list_request: ListRequest) -> dict[str, Any]:
        if factory.registry.load(session, uuid) is None:
            raise ListerError(f"{uuid} is not a persisted list", list_id=uuid)
        engine = factory.create_list(source_resolver(uuid), uuid, session=session)
        engine.apply(list_request, session)
        pager = engine.get_pager()
        result = list(engine.iter_rows())
        return {
            "id": engine.id,
            "result": jsonable_encoder(result),
            "resultCount": len(result),
            "firstPage": 1,
            "lastPage": pager.last_page,
            "currentPage": pager.page,
            "listHTML": render.render_list(engine),
            "filterHTML": render.render_filters(engine),
            "paginationHTML": render.render_pagination(engine),
            "status": {"type": "OK", "message": ""},
        }

    @router.api_route(path, methods=["GET", "POST"], name="lister_quick_reload")
    async def quick_reload(uuid: str, request: Request) -> Any:
        try:
            session = resolve_session(request)
            list_request = await request_from_starlette(request)
            # Engines and query adapters are synchronous.
            body = await asyncio.to_thread(reload_list, uuid, session, list_request)
            status_code = 200
        except Exception as exc:
            _log.exception("lister.quick_reload_failed", list_id=uuid)
            message = exc.message if isinstance(exc, ListerKitError) else str(exc)
            status_code = 500
            body = {"id": uuid, "status": {"type": "ERROR", "message": message}}
        return JSONResponse(
            status_code=status_code,
            content=body,
            headers={"Cache-Control": CACHE_CONTROL},
        )

    return router


__all__ = ["CACHE_CONTROL", "SessionResolver", "SourceResolver", "create_quick_reload_router"]
