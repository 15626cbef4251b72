"""Application pagination – Pager and page-link windows."""
from listerkit.application.pagination.pager import Pager, page_links

__all__ = ["Pager", "page_links"]
