"""Application query – predicates, ordering and QueryDescriptor."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Union


@dataclasses.dataclass(frozen=True)
class TextPredicate:
    """Case-insensitive substring match OR-ed across *fields*."""

    term: str
    fields: tuple[str, ...]


@dataclasses.dataclass(frozen=True)
class OverlapPredicate:
    """Array column *field* shares at least one element with *values*."""

    field: str
    values: tuple[str, ...]


@dataclasses.dataclass(frozen=True)
class MembershipPredicate:
    """Scalar column *field* equals one of *values*."""

    field: str
    values: tuple[str, ...]


Predicate = Union[TextPredicate, OverlapPredicate, MembershipPredicate]


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclasses.dataclass(frozen=True)
class Ordering:
    """Single sort criterion."""
    field: str
    direction: SortDirection = SortDirection.ASC


@dataclasses.dataclass(frozen=True)
class QueryDescriptor:
    """Everything the Query Service needs to produce one result page.

    Frozen and hashable: two descriptors composed from the same UI state
    compare equal.
    """

    search_term: str
    text_predicate: TextPredicate | None
    facet_predicates: tuple[OverlapPredicate | MembershipPredicate, ...]
    page_index: int
    page_size: int
    order: Ordering

    def __post_init__(self) -> None:
        if self.page_index < 1:
            raise ValueError("page_index must be >= 1")
        if self.page_size < 1:
            raise ValueError("page_size must be >= 1")

    @property
    def offset(self) -> int:
        return (self.page_index - 1) * self.page_size

    @property
    def limit(self) -> int:
        return self.page_size

    @property
    def filters(self) -> tuple[Predicate, ...]:
        """All predicates, ANDed together by the Query Service."""
        head: tuple[Predicate, ...] = (self.text_predicate,) if self.text_predicate else ()
        return head + self.facet_predicates

    def with_page(self, page_index: int) -> "QueryDescriptor":
        return dataclasses.replace(self, page_index=page_index)


__all__ = [
    "MembershipPredicate",
    "Ordering",
    "OverlapPredicate",
    "Predicate",
    "QueryDescriptor",
    "SortDirection",
    "TextPredicate",
]
