"""
listerkit – Server-side list presentation: filters, sorting, pagination, snapshots.

Import path convention::

    from listerkit.application.lister import ListEngine, ListFactory
    from listerkit.application.filters import Filter, FilterType
    from listerkit.adapters.sqlalchemy import SqlAlchemyRepository
    from listerkit.adapters.fastapi import create_quick_reload_router
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
