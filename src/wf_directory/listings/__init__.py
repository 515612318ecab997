"""Listings – concrete schemas for every faceted listing view."""
from __future__ import annotations

from wf_directory.application.catalog import load_alias_tables
from wf_directory.application.query import ListingSchema
from wf_directory.config.settings import DirectorySettings
from wf_directory.listings import canon_library, workflow_directory

LISTINGS: dict[str, ListingSchema] = {
    workflow_directory.SOURCE: workflow_directory.SCHEMA,
    canon_library.SOURCE: canon_library.SCHEMA,
}


def configured(schema: ListingSchema, settings: DirectorySettings) -> ListingSchema:
    """Apply page size and any alias file from *settings* to *schema*.

    Alias files may name facets that only some listings have; each schema
    picks up the tables for its own facets.
    """
    schema = schema.with_page_size(settings.page_size)
    if settings.alias_file:
        tables = load_alias_tables(settings.alias_file)
        own = {name: table for name, table in tables.items() if name in schema.catalog}
        schema = schema.with_catalog(schema.catalog.with_aliases(own))
    return schema


__all__ = ["LISTINGS", "canon_library", "configured", "workflow_directory"]
