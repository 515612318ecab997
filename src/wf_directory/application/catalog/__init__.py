"""Application catalog – facets, option lists and alias expansion."""
from wf_directory.application.catalog.alias import AliasTable
from wf_directory.application.catalog.catalog import FilterCatalog
from wf_directory.application.catalog.facet import Facet, FacetKind
from wf_directory.application.catalog.loader import load_alias_tables, parse_alias_tables

__all__ = [
    "AliasTable",
    "Facet",
    "FacetKind",
    "FilterCatalog",
    "load_alias_tables",
    "parse_alias_tables",
]
