"""Application query – ListingSchema."""
from __future__ import annotations

import dataclasses

from wf_directory.application.catalog import FilterCatalog


@dataclasses.dataclass(frozen=True)
class ListingSchema:
    """Parameters that distinguish one faceted listing from another.

    ``source`` names the backing table; ``searchable_fields`` is the explicit
    list of text columns the free-text search looks at; ``order_key`` must be
    a stable identity column so paging is deterministic.
    """

    source: str
    searchable_fields: tuple[str, ...]
    catalog: FilterCatalog = dataclasses.field(default_factory=FilterCatalog)
    order_key: str = "id"
    page_size: int = 25
    noun: str = "items"

    def __post_init__(self) -> None:
        if not self.searchable_fields:
            raise ValueError("searchable_fields must not be empty")
        if len(set(self.searchable_fields)) != len(self.searchable_fields):
            raise ValueError("searchable_fields must not repeat")
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")

    def with_page_size(self, page_size: int) -> "ListingSchema":
        return dataclasses.replace(self, page_size=page_size)

    def with_catalog(self, catalog: FilterCatalog) -> "ListingSchema":
        return dataclasses.replace(self, catalog=catalog)


__all__ = ["ListingSchema"]
