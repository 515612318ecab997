"""Unit tests for QueryComposer and QueryDescriptor."""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from wf_directory.application.catalog import AliasTable, Facet, FacetKind, FilterCatalog
from wf_directory.application.query import (
    ListingSchema,
    MembershipPredicate,
    Ordering,
    OverlapPredicate,
    QueryComposer,
    QueryDescriptor,
    SortDirection,
    TextPredicate,
)

FIELDS = ("workflow_name", "executive_summary", "notification_channels")


def _schema(page_size: int = 25) -> ListingSchema:
    catalog = FilterCatalog([
        Facet(
            "Function",
            "business_functions",
            ("Sales", "Product/Service Development"),
            aliases=AliasTable.from_mapping({
                "Product/Service Development": [
                    "Product Service Development",
                    "Product and Service Development",
                    "Product/Service Development",
                ],
            }),
        ),
        Facet("Industry", "industry_relevance", ("IT", "SaaS")),
        Facet("Pillar", "pillar", ("Marketing", "Sales"), FacetKind.MEMBERSHIP),
    ])
    return ListingSchema("workflow_directory", FIELDS, catalog, page_size=page_size)


def _compose(term: str = "", selections=None, page: int = 1, size: int | None = None) -> QueryDescriptor:
    return QueryComposer(_schema()).compose(term, selections or {}, page, size)


# ---------------------------------------------------------------------------
# Text predicate
# ---------------------------------------------------------------------------


class TestTextPredicate:
    def test_empty_term_has_no_text_predicate(self) -> None:
        d = _compose("")
        assert d.text_predicate is None
        assert d.filters == ()

    def test_whitespace_term_is_empty(self) -> None:
        assert _compose("   ").text_predicate is None

    def test_term_is_trimmed(self) -> None:
        d = _compose("  slack ")
        assert d.search_term == "slack"
        assert d.text_predicate == TextPredicate("slack", FIELDS)

    def test_fields_are_exactly_the_schema_list(self) -> None:
        assert _compose("x").text_predicate.fields == FIELDS


# ---------------------------------------------------------------------------
# Facet predicates
# ---------------------------------------------------------------------------


class TestFacetPredicates:
    def test_empty_selection_is_no_constraint(self) -> None:
        assert _compose(selections={"Industry": set()}).facet_predicates == ()

    def test_overlap_predicate(self) -> None:
        d = _compose(selections={"Industry": {"SaaS", "IT"}})
        assert d.facet_predicates == (OverlapPredicate("industry_relevance", ("IT", "SaaS")),)

    def test_alias_group_is_expanded_and_deduplicated(self) -> None:
        d = _compose(selections={"Function": {"Sales", "Product/Service Development"}})
        (predicate,) = d.facet_predicates
        assert predicate.field == "business_functions"
        assert sorted(predicate.values) == sorted({
            "Sales",
            "Product Service Development",
            "Product and Service Development",
            "Product/Service Development",
        })
        assert len(predicate.values) == len(set(predicate.values))

    def test_membership_facet(self) -> None:
        d = _compose(selections={"Pillar": {"Sales"}})
        assert d.facet_predicates == (MembershipPredicate("pillar", ("Sales",)),)

    def test_facets_follow_catalog_order(self) -> None:
        d = _compose(selections={"Pillar": {"Sales"}, "Industry": {"IT"}})
        assert [p.field for p in d.facet_predicates] == ["industry_relevance", "pillar"]

    def test_unknown_value_passes_through(self) -> None:
        d = _compose(selections={"Industry": {"Deep Sea Mining"}})
        assert d.facet_predicates[0].values == ("Deep Sea Mining",)

    def test_unknown_facet_name_is_ignored(self) -> None:
        assert _compose(selections={"Colour": {"red"}}).facet_predicates == ()

    def test_text_and_facets_combine(self) -> None:
        d = _compose("crm", {"Industry": {"IT"}})
        assert len(d.filters) == 2
        assert isinstance(d.filters[0], TextPredicate)


# ---------------------------------------------------------------------------
# Paging and ordering
# ---------------------------------------------------------------------------


class TestPagingAndOrdering:
    def test_offset_and_limit(self) -> None:
        d = _compose(page=3)
        assert d.offset == 50
        assert d.limit == 25

    def test_explicit_page_size(self) -> None:
        d = _compose(page=2, size=10)
        assert (d.offset, d.limit) == (10, 10)

    def test_page_below_one_is_coerced(self) -> None:
        assert _compose(page=0).page_index == 1
        assert _compose(page=-4).page_index == 1

    def test_order_is_stable_key_ascending(self) -> None:
        assert _compose().order == Ordering("id", SortDirection.ASC)

    def test_with_page(self) -> None:
        assert _compose(page=1).with_page(4).offset == 75

    def test_descriptor_rejects_invalid_page(self) -> None:
        with pytest.raises(ValueError):
            QueryDescriptor("", None, (), 0, 25, Ordering("id"))


# ---------------------------------------------------------------------------
# Properties
# ---------------------------------------------------------------------------


class TestComposeProperties:
    @given(
        term=st.text(max_size=20),
        functions=st.sets(st.sampled_from(["Sales", "Product/Service Development", "Other"])),
        industries=st.sets(st.sampled_from(["IT", "SaaS"])),
        page=st.integers(min_value=-3, max_value=500),
    )
    def test_idempotent(self, term: str, functions: set[str], industries: set[str], page: int) -> None:
        selections = {"Function": functions, "Industry": industries}
        first = _compose(term, selections, page)
        second = _compose(term, dict(reversed(list(selections.items()))), page)
        assert first == second
        assert hash(first) == hash(second)
        assert first.page_index >= 1


class TestListingSchema:
    def test_requires_searchable_fields(self) -> None:
        with pytest.raises(ValueError):
            ListingSchema("t", ())

    def test_rejects_repeated_fields(self) -> None:
        with pytest.raises(ValueError):
            ListingSchema("t", ("a", "a"))

    def test_with_page_size(self) -> None:
        assert _schema().with_page_size(50).page_size == 50
