"""Testing fakes – InMemoryChangeFeed."""
from __future__ import annotations

from collections import defaultdict

from wf_directory.application.listing.changes import ChangeCallback, ChangeEvent, Unsubscribe


class InMemoryChangeFeed:
    """Synchronous change feed; :meth:`publish` calls subscribers immediately."""

    def __init__(self) -> None:
        self._subscribers: dict[str, list[ChangeCallback]] = defaultdict(list)

    def subscribe(self, source: str, callback: ChangeCallback) -> Unsubscribe:
        self._subscribers[source].append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers[source]:
                self._subscribers[source].remove(callback)

        return unsubscribe

    def publish(self, event: ChangeEvent) -> None:
        for callback in list(self._subscribers[event.source]):
            callback(event)

    def subscriber_count(self, source: str) -> int:
        return len(self._subscribers[source])


__all__ = ["InMemoryChangeFeed"]
