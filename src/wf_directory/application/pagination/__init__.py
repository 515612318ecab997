"""Application pagination – result store, derived bounds and page window."""
from wf_directory.application.pagination.store import PagedResultStore
from wf_directory.application.pagination.view import PaginationView, clamp_page, total_pages_for
from wf_directory.application.pagination.window import PageWindow, page_window

__all__ = [
    "PageWindow",
    "PagedResultStore",
    "PaginationView",
    "clamp_page",
    "page_window",
    "total_pages_for",
]
