"""PostgREST adapter – encode predicates as PostgREST query parameters.

Values are always double-quoted so commas, dots and parentheses in user
input cannot break the filter grammar. LIKE metacharacters in the search
term are escaped; note that PostgREST itself turns every ``*`` into ``%``,
so a literal asterisk in the term still acts as a wildcard.
"""
from __future__ import annotations

from typing import Sequence

from wf_directory.application.query import (
    MembershipPredicate,
    Ordering,
    OverlapPredicate,
    Predicate,
    TextPredicate,
)
from wf_directory.kernel.errors import MalformedResponseError

Param = tuple[str, str]


def quote(value: str) -> str:
    escaped = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def like_contains(term: str) -> str:
    escaped = term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return f"*{escaped}*"


def encode_predicate(predicate: Predicate) -> Param:
    match predicate:
        case TextPredicate(term=term, fields=fields):
            pattern = quote(like_contains(term))
            return "or", "(" + ",".join(f"{f}.ilike.{pattern}" for f in fields) + ")"
        case OverlapPredicate(field=field, values=values):
            return field, "ov.{" + ",".join(quote(v) for v in values) + "}"
        case MembershipPredicate(field=field, values=values):
            return field, "in.(" + ",".join(quote(v) for v in values) + ")"
        case _:
            raise TypeError(f"unsupported predicate {predicate!r}")


def encode_query(
    filters: Sequence[Predicate],
    order: Ordering,
    offset: int,
    limit: int,
) -> list[Param]:
    params: list[Param] = [("select", "*")]
    params.extend(encode_predicate(p) for p in filters)
    params.append(("order", f"{order.field}.{order.direction.value}"))
    params.append(("offset", str(offset)))
    params.append(("limit", str(limit)))
    return params


def parse_content_range(header: str | None) -> int:
    """Total count from ``Content-Range: 0-24/57`` (or ``*/0`` for no rows)."""
    if not header or "/" not in header:
        raise MalformedResponseError(f"missing or invalid Content-Range: {header!r}")
    total = header.rsplit("/", 1)[1].strip()
    if not total.isdigit():
        raise MalformedResponseError(f"Content-Range carries no exact count: {header!r}")
    return int(total)


__all__ = [
    "encode_predicate",
    "encode_query",
    "like_contains",
    "parse_content_range",
    "quote",
]
