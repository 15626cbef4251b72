"""Application ports – collaborator interfaces consumed by the list engine."""
from listerkit.application.ports.forms import FieldKind, Form, FormBinder, FormField
from listerkit.application.ports.query import (
    LIKE_ESCAPE,
    ORDER_DIRECTIONS,
    PREDICATE_OPERATORS,
    NamedOperation,
    Query,
    QueryOperation,
    QuerySnapshot,
    Repository,
)
from listerkit.application.ports.request import ListRequest
from listerkit.application.ports.routing import ListRenderer, NullRenderer, Router
from listerkit.application.ports.session import SessionStore

__all__ = [
    "LIKE_ESCAPE",
    "ORDER_DIRECTIONS",
    "PREDICATE_OPERATORS",
    "FieldKind",
    "Form",
    "FormBinder",
    "FormField",
    "ListRenderer",
    "ListRequest",
    "NamedOperation",
    "NullRenderer",
    "Query",
    "QueryOperation",
    "QuerySnapshot",
    "Repository",
    "Router",
    "SessionStore",
]
