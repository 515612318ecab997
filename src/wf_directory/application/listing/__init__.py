"""Application listing – page-facing engine, read model and change feed."""
from wf_directory.application.listing.cells import as_list, as_text
from wf_directory.application.listing.changes import (
    ChangeCallback,
    ChangeEvent,
    ChangeFeed,
    ChangeKind,
    Unsubscribe,
)
from wf_directory.application.listing.engine import ListingEngine, ViewListener
from wf_directory.application.listing.view import ListingView

__all__ = [
    "ChangeCallback",
    "ChangeEvent",
    "ChangeFeed",
    "ChangeKind",
    "ListingEngine",
    "ListingView",
    "Unsubscribe",
    "ViewListener",
    "as_list",
    "as_text",
]
