"""Application ports – declarative form fields, Form and FormBinder."""
from __future__ import annotations

import abc
import dataclasses
from enum import Enum
from typing import Any, Mapping, Sequence

from listerkit.application.ports.request import ListRequest
from listerkit.application.ports.session import SessionStore


class FieldKind(str, Enum):
    TEXT = "text"
    CHOICE = "choice"
    CHECKBOX = "checkbox"
    RADIO = "radio"
    HIDDEN = "hidden"
    SUBMIT = "submit"


@dataclasses.dataclass
class FormField:
    """Declarative description of one form control.

    ``choices`` maps display labels to values (choice fields only).
    ``data`` is the value rendered into the control and, after a request is
    handled, the submitted value.
    """

    name: str
    kind: FieldKind = FieldKind.TEXT
    label: str = ""
    data: Any = None
    choices: Mapping[str, Any] = dataclasses.field(default_factory=dict)
    multiple: bool = False
    expanded: bool = False
    attrs: dict[str, str] = dataclasses.field(default_factory=dict)
    translation_domain: str | None = None

    @property
    def is_button(self) -> bool:
        return self.kind is FieldKind.SUBMIT


class Form(abc.ABC):
    """Port: a bound form able to read one request."""

    name: str
    action: str | None

    @property
    @abc.abstractmethod
    def fields(self) -> dict[str, FormField]: ...

    @abc.abstractmethod
    def handle_request(self, request: ListRequest) -> None: ...

    @abc.abstractmethod
    def is_submitted(self) -> bool: ...

    @abc.abstractmethod
    def is_valid(self) -> bool: ...

    @abc.abstractmethod
    def clicked_button(self) -> str | None: ...

    def get(self, name: str) -> FormField:
        return self.fields[name]

    def has(self, name: str) -> bool:
        return name in self.fields

    def data(self) -> dict[str, Any]:
        """Return ``{field: data}`` for every non-button field."""
        return {name: f.data for name, f in self.fields.items() if not f.is_button}


class FormBinder(abc.ABC):
    """Port: turns a declarative field list into a bindable :class:`Form`."""

    @abc.abstractmethod
    def create_form(
        self,
        name: str,
        fields: Sequence[FormField],
        action: str | None = None,
        csrf: bool = False,
        session: SessionStore | None = None,
    ) -> Form:
        """Build a form; *session* carries per-user CSRF state when *csrf* is on."""


__all__ = ["FieldKind", "Form", "FormBinder", "FormField"]
