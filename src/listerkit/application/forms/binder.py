"""Application forms – ParamFormBinder, a FormBinder over nested request params."""
from __future__ import annotations

import dataclasses
import hashlib
import hmac
import secrets
from typing import Any, Mapping, Sequence

from listerkit.application.ports.forms import FieldKind, Form, FormBinder, FormField
from listerkit.application.ports.request import ListRequest
from listerkit.application.ports.session import SessionStore
from listerkit.kernel.errors import ConfigError

CSRF_FIELD = "_token"
CSRF_SESSION_KEY = "_lister_csrf"
_FALSE_STRINGS = frozenset({"", "0", "false", "off", "no"})


class ParamForm(Form):
    """Form reading its submission from ``request.params[form_name]``.

    A form counts as submitted when its name is present in the request with a
    mapping value. Hidden fields must come back unchanged and choice values
    must be among the declared choices, otherwise the form is invalid.
    """

    def __init__(
        self,
        name: str,
        fields: Sequence[FormField],
        action: str | None = None,
        csrf_token: str | None = None,
    ) -> None:
        self.name = name
        self.action = action
        self._fields: dict[str, FormField] = {f.name: dataclasses.replace(f) for f in fields}
        if csrf_token is not None:
            self._fields[CSRF_FIELD] = FormField(CSRF_FIELD, FieldKind.HIDDEN, data=csrf_token)
        self._submitted = False
        self._errors: list[str] = []
        self._clicked: str | None = None

    @property
    def fields(self) -> dict[str, FormField]:
        return self._fields

    @property
    def errors(self) -> list[str]:
        return list(self._errors)

    def handle_request(self, request: ListRequest) -> None:
        raw = request.get(self.name)
        if not isinstance(raw, Mapping):
            return
        self._submitted = True
        self._errors = []
        self._clicked = None
        for field in self._fields.values():
            self._bind(field, raw)

    def is_submitted(self) -> bool:
        return self._submitted

    def is_valid(self) -> bool:
        return self._submitted and not self._errors

    def clicked_button(self) -> str | None:
        return self._clicked

    def _bind(self, field: FormField, raw: Mapping[str, Any]) -> None:
        present = field.name in raw
        value = raw.get(field.name)
        if field.kind is FieldKind.SUBMIT:
            if present and self._clicked is None:
                self._clicked = field.name
        elif field.kind is FieldKind.HIDDEN:
            submitted = str(value if present else "").encode()
            if not hmac.compare_digest(submitted, str(field.data).encode()):
                self._errors.append(f"{field.name}: hidden value mismatch")
        elif field.kind in (FieldKind.CHECKBOX, FieldKind.RADIO):
            field.data = present and str(value).strip().lower() not in _FALSE_STRINGS
        elif field.kind is FieldKind.CHOICE:
            field.data = self._bind_choice(field, value)
        else:
            field.data = value if present and value != "" else None

    def _bind_choice(self, field: FormField, value: Any) -> Any:
        if value is None or value == "" or value == []:
            return [] if field.multiple else None
        submitted = value if isinstance(value, (list, tuple)) else [value]
        if not field.multiple and len(submitted) > 1:
            self._errors.append(f"{field.name}: expected a single choice")
            return None
        by_text = {str(choice): choice for choice in field.choices.values()}
        resolved: list[Any] = []
        for item in submitted:
            if str(item) not in by_text:
                self._errors.append(f"{field.name}: {item!r} is not a valid choice")
                continue
            resolved.append(by_text[str(item)])
        if field.multiple:
            return resolved
        return resolved[0] if resolved else None


class ParamFormBinder(FormBinder):
    """Default :class:`FormBinder`; optionally signs forms with a CSRF token.

    The token is an HMAC-SHA256 over a random nonce kept in the user's
    session and the form name, so it cannot be replayed across sessions.
    """

    def __init__(self, csrf_secret: str | None = None) -> None:
        self._csrf_secret = csrf_secret

    def create_form(
        self,
        name: str,
        fields: Sequence[FormField],
        action: str | None = None,
        csrf: bool = False,
        session: SessionStore | None = None,
    ) -> ParamForm:
        token = self.csrf_token(name, session) if csrf else None
        return ParamForm(name, fields, action=action, csrf_token=token)

    def csrf_token(self, form_name: str, session: SessionStore | None) -> str:
        if not self._csrf_secret:
            raise ConfigError("CSRF protection requires a csrf_secret")
        if session is None:
            raise ConfigError("CSRF protection requires a session")
        nonce = session.get(CSRF_SESSION_KEY)
        if not isinstance(nonce, str) or not nonce:
            nonce = secrets.token_urlsafe(32)
            session.set(CSRF_SESSION_KEY, nonce)
        return hmac.new(
            self._csrf_secret.encode(), f"{nonce}:{form_name}".encode(), hashlib.sha256
        ).hexdigest()


__all__ = ["CSRF_FIELD", "CSRF_SESSION_KEY", "ParamForm", "ParamFormBinder"]
