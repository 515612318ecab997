"""Listings – the workflow directory."""
from __future__ import annotations

from wf_directory.application.catalog import AliasTable, Facet, FacetKind, FilterCatalog
from wf_directory.application.query import ListingSchema

SOURCE = "workflow_directory"

SEARCHABLE_FIELDS = (
    "workflow_name",
    "executive_summary",
    "primary_objective",
    "business_results",
    "business_use_cases",
    "step_by_step",
    "integrations_used",
    "core_ai_capabilities",
    "notification_channels",
)

FUNCTION_OPTIONS = (
    "Admin",
    "Agriculture",
    "Content Creation",
    "Creativity and Entertainment",
    "Customer/Client Service",
    "Ecommerce",
    "Education",
    "Finance",
    "HR",
    "Health and Wellness",
    "Hospitality and Food Services",
    "IT",
    "Knowledge Management and Internal Communications",
    "Legal",
    "Logistics",
    "Manufacturing",
    "Marketing",
    "Online Service or Education",
    "Operations",
    "Procurement",
    "Product/Service Development",
    "Professional and Business Services",
    "Quality Control",
    "Research",
    "Retail and Ecommerce",
    "SaaS",
    "Sales",
    "Secops",
    "Security",
    "Support",
)

# stored rows use both spellings
FUNCTION_ALIASES = AliasTable.from_mapping({
    "Product/Service Development": ["Product Service Development", "Product/Service Development"],
})

INDUSTRY_OPTIONS = (
    "Agriculture",
    "Business and Personal Transportation",
    "Consulting",
    "Creativity and Entertainment",
    "Crop Management",
    "Crop Science",
    "Education",
    "Farming Technology",
    "Finance",
    "Financial Products and Wealth Management",
    "Food Production",
    "Food and Beverage",
    "Health and Wellness",
    "Healthcare",
    "Healthcare and Wellness",
    "Home Services and Trades",
    "Hospitality and Food Services",
    "Human Resources",
    "IT",
    "IT Services",
    "Investment",
    "Legal",
    "Logistics",
    "Manufacturing",
    "Marketing",
    "Media and Publishing",
    "Online Service",
    "Online Service or Education",
    "Other",
    "Procurement",
    "Product/Service Development",
    "Professional and Business Services",
    "Property Management",
    "Real Estate",
    "Research",
    "Retail and Ecommerce",
    "SaaS",
    "Sustainability Consulting",
    "Technology",
    "Travel and Hospitality",
    "Travel and Tourism",
)

CATALOG = FilterCatalog([
    Facet("Function", "business_functions", FUNCTION_OPTIONS, FacetKind.OVERLAP, FUNCTION_ALIASES),
    Facet("Industry", "industry_relevance", INDUSTRY_OPTIONS, FacetKind.OVERLAP),
])

SCHEMA = ListingSchema(
    source=SOURCE,
    searchable_fields=SEARCHABLE_FIELDS,
    catalog=CATALOG,
    order_key="id",
    page_size=25,
    noun="workflows",
)

__all__ = [
    "CATALOG",
    "FUNCTION_ALIASES",
    "FUNCTION_OPTIONS",
    "INDUSTRY_OPTIONS",
    "SCHEMA",
    "SEARCHABLE_FIELDS",
    "SOURCE",
]
