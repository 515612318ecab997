"""Application query – descriptor, schema and composer."""
from wf_directory.application.query.composer import QueryComposer
from wf_directory.application.query.descriptor import (
    MembershipPredicate,
    Ordering,
    OverlapPredicate,
    Predicate,
    QueryDescriptor,
    SortDirection,
    TextPredicate,
)
from wf_directory.application.query.schema import ListingSchema

__all__ = [
    "ListingSchema",
    "MembershipPredicate",
    "Ordering",
    "OverlapPredicate",
    "Predicate",
    "QueryComposer",
    "QueryDescriptor",
    "SortDirection",
    "TextPredicate",
]
