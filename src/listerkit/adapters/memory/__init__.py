"""Memory adapter – list queries and session stores held in process memory."""
from listerkit.adapters.memory.query import InMemoryQuery, InMemoryRepository, like_to_regex
from listerkit.adapters.memory.session import InMemorySessionStore, MappingSessionStore

__all__ = [
    "InMemoryQuery",
    "InMemoryRepository",
    "InMemorySessionStore",
    "MappingSessionStore",
    "like_to_regex",
]
