"""SQLAlchemy adapter – Select-backed list queries and their repository."""
from listerkit.adapters.sqlalchemy.query import SqlAlchemyQuery, SqlAlchemyRepository

__all__ = ["SqlAlchemyQuery", "SqlAlchemyRepository"]
