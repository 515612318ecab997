"""Application – listing engine building blocks (framework-agnostic)."""

from wf_directory.application.catalog import AliasTable, Facet, FacetKind, FilterCatalog
from wf_directory.application.debounce import DebouncedInputController
from wf_directory.application.fetch import FetchCoordinator, FetchResult, FetchStatus, QueryService, ResultPage
from wf_directory.application.listing import ListingEngine, ListingView
from wf_directory.application.pagination import PagedResultStore, PaginationView, page_window
from wf_directory.application.query import ListingSchema, QueryComposer, QueryDescriptor
from wf_directory.application.scroll import SyncedScrollBridge

__all__ = [
    "AliasTable",
    "DebouncedInputController",
    "Facet",
    "FacetKind",
    "FetchCoordinator",
    "FetchResult",
    "FetchStatus",
    "FilterCatalog",
    "ListingEngine",
    "ListingSchema",
    "ListingView",
    "PagedResultStore",
    "PaginationView",
    "QueryComposer",
    "QueryDescriptor",
    "QueryService",
    "ResultPage",
    "SyncedScrollBridge",
    "page_window",
]
