"""Config settings – ListerSettings, defaults applied by ListFactory."""
from __future__ import annotations

import dataclasses

from listerkit.config.settings.base import Settings
from listerkit.config.validation import InvalidSettingValueError


@dataclasses.dataclass(repr=False)
class ListerSettings(Settings):
    """Defaults for every list created by a :class:`~listerkit.application.lister.ListFactory`.

    Read from ``LISTER_*`` environment variables by :class:`EnvSettingsLoader`
    (``LISTER_PER_PAGE=25``, ``LISTER_USE_CSRF=true`` ...).
    """

    _prefix = "LISTER"
    _secret_fields = frozenset({"csrf_secret"})

    per_page: int = 15
    form_name_prefix: str = "lister_filters"
    use_csrf: bool = False
    csrf_secret: str | None = None
    max_links: int = 7
    session_key: str = "lister_serialized_objects"
    translation_domain: str = "lister"

    def _validate(self) -> None:
        if self.per_page < 0:
            raise InvalidSettingValueError("per_page", self.per_page, "must be >= 0")
        if self.max_links < 1:
            raise InvalidSettingValueError("max_links", self.max_links, "must be >= 1")
        if not self.session_key:
            raise InvalidSettingValueError("session_key", self.session_key, "must not be empty")
        if self.use_csrf and not self.csrf_secret:
            raise InvalidSettingValueError("csrf_secret", self.csrf_secret, "required when use_csrf is on")


__all__ = ["ListerSettings"]
