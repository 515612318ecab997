"""Application listing – change-feed port.

A change feed pushes notifications when rows of a source table change. A
listing that watches a feed simply re-runs its last query on every matching
event.
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Any, Callable, Mapping, Protocol, runtime_checkable


class ChangeKind(str, Enum):
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


@dataclasses.dataclass(frozen=True)
class ChangeEvent:
    source: str
    kind: ChangeKind
    record: Mapping[str, Any] = dataclasses.field(default_factory=dict)


ChangeCallback = Callable[[ChangeEvent], None]
Unsubscribe = Callable[[], None]


@runtime_checkable
class ChangeFeed(Protocol):
    def subscribe(self, source: str, callback: ChangeCallback) -> Unsubscribe: ...


__all__ = ["ChangeCallback", "ChangeEvent", "ChangeFeed", "ChangeKind", "Unsubscribe"]
