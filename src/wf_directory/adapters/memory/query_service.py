"""In-memory adapter – InMemoryQueryService."""
from __future__ import annotations

from typing import Any, Callable, Iterable, Sequence

from wf_directory.application.fetch import Record, ResultPage
from wf_directory.application.listing.cells import as_list, as_text
from wf_directory.application.query import (
    MembershipPredicate,
    Ordering,
    OverlapPredicate,
    Predicate,
    SortDirection,
    TextPredicate,
)


def matches(record: Record, predicate: Predicate) -> bool:
    """Evaluate one predicate the way the remote store would."""
    match predicate:
        case TextPredicate(term=term, fields=fields):
            needle = term.lower()
            return any(needle in as_text(record.get(f)).lower() for f in fields)
        case OverlapPredicate(field=field, values=values):
            return not set(as_list(record.get(field))).isdisjoint(values)
        case MembershipPredicate(field=field, values=values):
            return record.get(field) in values
        case _:
            raise TypeError(f"unsupported predicate {predicate!r}")


class InMemoryQueryService:
    """Query Service over a list of dicts, for tests and local demos."""

    def __init__(self, records: Iterable[Record] = (), key_fn: Callable[[Any], Record] | None = None) -> None:
        self._records = list(records)
        self._key_fn: Callable[[Any], Record] = key_fn or (lambda x: x if isinstance(x, dict) else x.__dict__)
        self.calls: list[tuple[tuple[Predicate, ...], Ordering, int, int]] = []

    @property
    def records(self) -> list[Record]:
        return list(self._records)

    def replace(self, records: Iterable[Record]) -> None:
        self._records = list(records)

    async def count_and_fetch(
        self,
        filters: Sequence[Predicate],
        order: Ordering,
        offset: int,
        limit: int,
    ) -> ResultPage:
        self.calls.append((tuple(filters), order, offset, limit))
        hits = [
            self._key_fn(item)
            for item in self._records
            if all(matches(self._key_fn(item), p) for p in filters)
        ]
        hits.sort(
            key=lambda r: (r.get(order.field) is None, r.get(order.field)),
            reverse=order.direction is SortDirection.DESC,
        )
        return ResultPage(tuple(hits[offset: offset + limit]), len(hits))


__all__ = ["InMemoryQueryService", "matches"]
