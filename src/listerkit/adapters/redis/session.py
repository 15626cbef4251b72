"""Redis adapter – RedisSessionStore."""
from __future__ import annotations

import json
from typing import Any

from listerkit.application.ports.session import SessionStore


def _require_redis() -> Any:
    try:
        import redis
        return redis
    except ImportError as exc:
        raise ImportError("Install 'listerkit[redis]' to use the Redis adapter") from exc


class RedisSessionStore(SessionStore):
    """Session values stored as JSON strings under ``<namespace>:<session_id>:<key>``.

    Parameters
    ----------
    url:
        Redis connection URL, e.g. ``redis://localhost:6379/0``.
    session_id:
        Identifier of the user session the store is scoped to.
    ttl:
        Expiry in seconds applied on every write; ``None`` keeps keys forever.
    namespace:
        Key prefix shared by all sessions.
    """

    def __init__(
        self,
        url: str,
        session_id: str,
        ttl: int | None = None,
        namespace: str = "listerkit:session",
        **kwargs: Any,
    ) -> None:
        redis = _require_redis()
        self._client = redis.Redis.from_url(url, decode_responses=True, **kwargs)
        self._prefix = f"{namespace}:{session_id}"
        self._ttl = ttl

    def _key(self, key: str) -> str:
        return f"{self._prefix}:{key}"

    def get(self, key: str, default: Any = None) -> Any:
        raw = self._client.get(self._key(key))
        if raw is None:
            return default
        return json.loads(raw)

    def set(self, key: str, value: Any) -> None:
        self._client.set(self._key(key), json.dumps(value), ex=self._ttl)

    def has(self, key: str) -> bool:
        return bool(self._client.exists(self._key(key)))

    def remove(self, key: str) -> None:
        self._client.delete(self._key(key))

    def close(self) -> None:
        self._client.close()


__all__ = ["RedisSessionStore"]
