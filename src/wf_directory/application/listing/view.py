"""Application listing – ListingView read model."""
from __future__ import annotations

import dataclasses
from typing import Mapping

from wf_directory.application.fetch import Record
from wf_directory.application.pagination import PageWindow, PaginationView


@dataclasses.dataclass(frozen=True)
class ListingView:
    """Immutable snapshot handed to the rendering layer."""

    rows: tuple[Record, ...]
    loading: bool
    error: str | None
    displayed_range_start: int
    displayed_range_end: int
    total_count: int
    page_index: int
    total_pages: int
    page_size: int
    search_term: str = ""
    search_text: str = ""
    selections: Mapping[str, frozenset[str]] = dataclasses.field(default_factory=dict)
    window: PageWindow | None = None
    noun: str = "items"

    @property
    def has_filters(self) -> bool:
        return any(self.selections.values())

    @property
    def pagination(self) -> PaginationView:
        return PaginationView(self.page_index, self.page_size, self.total_count)

    @property
    def range_label(self) -> str:
        return self.pagination.range_label

    @property
    def page_label(self) -> str:
        return f"Page {self.page_index} of {self.total_pages}"

    @property
    def summary(self) -> str:
        """One-line result count, e.g. ``Showing 1–25 of 57 results for “slack”``."""
        if self.total_count == 0:
            return f"No results for “{self.search_term}”." if self.search_term else "No results."
        text = f"Showing {self.range_label} of {self.total_count}"
        text += f" results for “{self.search_term}”" if self.search_term else f" total {self.noun}"
        if self.has_filters:
            text += " with filters"
        return text


__all__ = ["ListingView"]
