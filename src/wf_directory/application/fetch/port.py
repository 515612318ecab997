"""Application fetch – QueryService port and ResultPage."""
from __future__ import annotations

import dataclasses
from typing import Any, Protocol, Sequence, runtime_checkable

from wf_directory.application.query import Ordering, Predicate
from wf_directory.kernel.errors import MalformedResponseError

Record = dict[str, Any]


@dataclasses.dataclass(frozen=True)
class ResultPage:
    """One page of matching records plus the filter-wide count."""

    rows: tuple[Record, ...]
    total_count: int

    @classmethod
    def checked(cls, rows: Any, total_count: Any, *, limit: int | None = None) -> "ResultPage":
        """Validate an untrusted reply and build a page from it."""
        if not isinstance(rows, (list, tuple)):
            raise MalformedResponseError("rows must be a list", payload_type=type(rows).__name__)
        if isinstance(total_count, bool) or not isinstance(total_count, int) or total_count < 0:
            raise MalformedResponseError(
                f"total_count must be a non-negative integer, got {total_count!r}",
                payload_type=type(total_count).__name__,
            )
        if limit is not None and len(rows) > limit:
            raise MalformedResponseError(f"received {len(rows)} rows for a page of {limit}")
        return cls(tuple(rows), total_count)


@runtime_checkable
class QueryService(Protocol):
    """External store able to filter, order, slice and count in one call.

    ``filters`` are ANDed. ``total_count`` in the returned page must count all
    matches, independent of ``offset`` and ``limit``. Any failure surfaces as
    a raised exception.
    """

    async def count_and_fetch(
        self,
        filters: Sequence[Predicate],
        order: Ordering,
        offset: int,
        limit: int,
    ) -> ResultPage: ...


__all__ = ["QueryService", "Record", "ResultPage"]
