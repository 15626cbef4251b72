"""Redis adapter – session storage for list snapshots."""
from listerkit.adapters.redis.session import RedisSessionStore

__all__ = ["RedisSessionStore"]
