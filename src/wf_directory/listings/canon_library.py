"""Listings – the canon library (curated workflows filtered by pillar)."""
from __future__ import annotations

from wf_directory.application.catalog import Facet, FacetKind, FilterCatalog
from wf_directory.application.query import ListingSchema

SOURCE = "aia-workflows"

SEARCHABLE_FIELDS = (
    "workflow_name",
    "executive_summary",
    "primary_objective",
    "business_results",
    "business_use_cases",
)

PILLAR_OPTIONS = ("Marketing", "Sales", "Operations")

CATALOG = FilterCatalog([
    Facet("Pillar", "pillar", PILLAR_OPTIONS, FacetKind.MEMBERSHIP),
])

SCHEMA = ListingSchema(
    source=SOURCE,
    searchable_fields=SEARCHABLE_FIELDS,
    catalog=CATALOG,
    order_key="id",
    page_size=25,
    noun="workflows",
)

__all__ = ["CATALOG", "PILLAR_OPTIONS", "SCHEMA", "SEARCHABLE_FIELDS", "SOURCE"]
