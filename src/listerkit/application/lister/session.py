"""Application lister – ListSessionRegistry, snapshots of many lists in one session."""
from __future__ import annotations

from typing import Any

from listerkit.application.lister.engine import ListEngine
from listerkit.application.ports.query import Repository
from listerkit.application.ports.session import SessionStore
from listerkit.kernel.errors import FormatError
from listerkit.observability.logging import get_logger

_log = get_logger(__name__)

SESSION_KEY = "lister_serialized_objects"


class ListSessionRegistry:
    """Stores list snapshots under one session key as ``{list_id: snapshot}``.

    Malformed entries are treated as absent: :meth:`load` returns ``None``
    and :meth:`remove` deletes them.
    """

    def __init__(self, session_key: str | None = None) -> None:
        self.session_key = session_key or SESSION_KEY

    def _lists(self, session: SessionStore) -> dict[str, Any]:
        lists = session.get(self.session_key, {})
        return dict(lists) if isinstance(lists, dict) else {}

    def has(self, session: SessionStore, list_id: str) -> bool:
        return list_id in self._lists(session)

    def load(
        self,
        session: SessionStore,
        list_id: str,
        repository: Repository | None = None,
    ) -> ListEngine | None:
        data = self._lists(session).get(list_id)
        if not data:
            return None
        try:
            engine = ListEngine.restore(data, repository=repository)
        except FormatError as exc:
            _log.warning("lister.snapshot_invalid", list_id=list_id, error=exc.message, key=exc.key)
            return None
        if engine.id != list_id:
            _log.warning("lister.snapshot_invalid", list_id=list_id, error="id mismatch")
            return None
        engine.session_key = self.session_key
        return engine

    def store(self, session: SessionStore, engine: ListEngine, overwrite: bool = True) -> bool:
        """Save *engine*; ``False`` when it is not persistent or already stored and *overwrite* is off."""
        lists = self._lists(session)
        if not engine.persist or (engine.id in lists and not overwrite):
            return False
        lists[engine.id] = engine.serialize()
        session.set(self.session_key, lists)
        _log.debug("lister.stored", list_id=engine.id)
        return True

    def remove(self, session: SessionStore, list_id: str) -> bool:
        lists = self._lists(session)
        if list_id not in lists:
            return False
        try:
            engine = ListEngine.restore(lists[list_id])
        except FormatError:
            engine = None
        if engine is not None and engine.id != list_id:
            return False
        del lists[list_id]
        session.set(self.session_key, lists)
        return True


__all__ = ["SESSION_KEY", "ListSessionRegistry"]
