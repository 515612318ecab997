"""Application query – QueryComposer."""
from __future__ import annotations

from typing import Iterable, Mapping

from wf_directory.application.catalog import FacetKind
from wf_directory.application.query.descriptor import (
    MembershipPredicate,
    Ordering,
    OverlapPredicate,
    QueryDescriptor,
    SortDirection,
    TextPredicate,
)
from wf_directory.application.query.schema import ListingSchema


class QueryComposer:
    """Builds a :class:`QueryDescriptor` from the current UI state.

    Pure: no I/O, no clock, and the same inputs always give an equal
    descriptor. Facets are emitted in catalog order and their values sorted,
    so the descriptor does not depend on selection order. Selections keyed by
    a name the catalog does not know are ignored.
    """

    def __init__(self, schema: ListingSchema) -> None:
        self._schema = schema

    @property
    def schema(self) -> ListingSchema:
        return self._schema

    def compose(
        self,
        search_term: str,
        facet_selections: Mapping[str, Iterable[str]],
        page_index: int = 1,
        page_size: int | None = None,
    ) -> QueryDescriptor:
        term = search_term.strip()
        text = TextPredicate(term, self._schema.searchable_fields) if term else None

        facets: list[OverlapPredicate | MembershipPredicate] = []
        for facet in self._schema.catalog:
            selection = frozenset(facet_selections.get(facet.name, ()))
            if not selection:
                continue
            values = tuple(sorted(facet.expand(selection)))
            if facet.kind is FacetKind.MEMBERSHIP:
                facets.append(MembershipPredicate(facet.field, values))
            else:
                facets.append(OverlapPredicate(facet.field, values))

        return QueryDescriptor(
            search_term=term,
            text_predicate=text,
            facet_predicates=tuple(facets),
            page_index=max(1, page_index),
            page_size=page_size or self._schema.page_size,
            order=Ordering(self._schema.order_key, SortDirection.ASC),
        )


__all__ = ["QueryComposer"]
