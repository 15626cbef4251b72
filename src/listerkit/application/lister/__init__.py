"""Application lister – the list engine, its snapshots, session registry and factory."""
from listerkit.application.lister.engine import (
    LIST_ID_FIELD,
    PAGE_PARAMETER_PREFIX,
    RESET_BUTTON,
    SUBMIT_BUTTON,
    ListEngine,
    like_pattern,
)
from listerkit.application.lister.factory import ListFactory
from listerkit.application.lister.options import (
    DEFAULT_MAX_LINKS,
    QUICK_RELOAD_ROUTE,
    default_custom_options,
    resolve_custom_options,
)
from listerkit.application.lister.session import SESSION_KEY, ListSessionRegistry
from listerkit.application.lister.snapshot import SNAPSHOT_KEYS, ListSnapshot

__all__ = [
    "DEFAULT_MAX_LINKS",
    "LIST_ID_FIELD",
    "PAGE_PARAMETER_PREFIX",
    "QUICK_RELOAD_ROUTE",
    "RESET_BUTTON",
    "SESSION_KEY",
    "SNAPSHOT_KEYS",
    "SUBMIT_BUTTON",
    "ListEngine",
    "ListFactory",
    "ListSessionRegistry",
    "ListSnapshot",
    "default_custom_options",
    "like_pattern",
    "resolve_custom_options",
]
