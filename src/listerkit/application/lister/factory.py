"""Application lister – ListFactory, the entry point for building list engines."""
from __future__ import annotations

from listerkit.application.forms import ParamFormBinder
from listerkit.application.lister.engine import ListEngine
from listerkit.application.lister.session import ListSessionRegistry
from listerkit.application.ports.forms import FormBinder
from listerkit.application.ports.query import Query, Repository
from listerkit.application.ports.routing import Router
from listerkit.application.ports.session import SessionStore
from listerkit.config.settings import ListerSettings
from listerkit.observability.logging import get_logger

_log = get_logger(__name__)


class ListFactory:
    """Creates engines bound to forms, router and settings defaults.

    When a session holds a snapshot for the requested id the engine is
    restored from it instead of being created anew.
    """

    def __init__(
        self,
        settings: ListerSettings | None = None,
        form_binder: FormBinder | None = None,
        router: Router | None = None,
    ) -> None:
        self.settings = settings or ListerSettings()
        self.form_binder = form_binder or ParamFormBinder(self.settings.csrf_secret)
        self.router = router
        self.registry = ListSessionRegistry(self.settings.session_key)

    def filter_form_name(self, list_id: str) -> str:
        prefix = self.settings.form_name_prefix
        return f"{prefix}_{list_id}" if prefix else list_id

    def create_list(
        self,
        source: Repository | Query,
        id: str = "",  # noqa: A002
        translation_domain: str | None = None,
        session: SessionStore | None = None,
    ) -> ListEngine:
        repository = source if isinstance(source, Repository) else None
        engine = None
        if id and session is not None:
            engine = self.registry.load(session, id, repository=repository)
        if engine is not None:
            if isinstance(source, Query):
                engine.set_query(source)
            _log.debug("lister.restored", list_id=engine.id)
        else:
            engine = ListEngine(
                id,
                query=source if isinstance(source, Query) else None,
                repository=repository,
            )
            engine.per_page = self.settings.per_page
            engine.translation_domain = translation_domain or self.settings.translation_domain
            engine.set_default_max_links(self.settings.max_links)
            engine.session_key = self.settings.session_key
            _log.debug("lister.created", list_id=engine.id, persist=engine.persist)

        name = self.filter_form_name(engine.id)
        engine.bind_forms(self.form_binder, name, f"{name}_sorter", csrf=self.settings.use_csrf)
        engine.set_router(self.router)
        return engine


__all__ = ["ListFactory"]
