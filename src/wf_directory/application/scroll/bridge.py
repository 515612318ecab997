"""Application scroll – SyncedScrollBridge.

Keeps a slim decorative scrollbar above a wide table in step with the table's
own horizontal scroll container. The UI toolkit is reached through the small
protocols below; a browser binding maps them onto ``scrollLeft``,
``scrollWidth``, ``ResizeObserver`` and ``window.onresize``.
"""
from __future__ import annotations

from typing import Callable, Protocol, Sequence

Listener = Callable[[], None]
Disconnect = Callable[[], None]


class ScrollSurface(Protocol):
    """An element with a horizontal scroll offset and scroll notifications."""

    scroll_left: float

    def add_scroll_listener(self, listener: Listener) -> None: ...
    def remove_scroll_listener(self, listener: Listener) -> None: ...


class ContentMeasure(Protocol):
    """The table whose full content width drives the decorative bar."""

    @property
    def scroll_width(self) -> float: ...


class WidthTarget(Protocol):
    """The inner element of the decorative bar whose width sets its scroll range."""

    def set_width(self, width: float) -> None: ...


class ResizeSource(Protocol):
    """Anything that can report size changes (content observer, viewport)."""

    def observe(self, listener: Listener) -> Disconnect: ...


class SyncedScrollBridge:
    """Mirror horizontal scroll offsets between *top* and *bottom*, both ways."""

    def __init__(
        self,
        top: ScrollSurface,
        bottom: ScrollSurface,
        spacer: WidthTarget,
        table: ContentMeasure,
        resize_sources: Sequence[ResizeSource] = (),
    ) -> None:
        self._top = top
        self._bottom = bottom
        self._spacer = spacer
        self._table = table
        self._resize_sources = tuple(resize_sources)
        self._disconnects: list[Disconnect] = []
        self._syncing = False
        self._attached = False

    @property
    def attached(self) -> bool:
        return self._attached

    def attach(self) -> None:
        if self._attached:
            return
        self.sync_width()
        self._disconnects = [source.observe(self.sync_width) for source in self._resize_sources]
        self._top.add_scroll_listener(self._on_top_scroll)
        self._bottom.add_scroll_listener(self._on_bottom_scroll)
        self._attached = True

    def detach(self) -> None:
        if not self._attached:
            return
        self._top.remove_scroll_listener(self._on_top_scroll)
        self._bottom.remove_scroll_listener(self._on_bottom_scroll)
        for disconnect in self._disconnects:
            disconnect()
        self._disconnects = []
        self._attached = False

    def sync_width(self) -> None:
        self._spacer.set_width(self._table.scroll_width)

    def _on_top_scroll(self) -> None:
        self._mirror(self._top, self._bottom)

    def _on_bottom_scroll(self) -> None:
        self._mirror(self._bottom, self._top)

    def _mirror(self, source: ScrollSurface, target: ScrollSurface) -> None:
        if self._syncing:
            return
        self._syncing = True
        try:
            target.scroll_left = source.scroll_left
        finally:
            self._syncing = False


__all__ = [
    "ContentMeasure",
    "Disconnect",
    "Listener",
    "ResizeSource",
    "ScrollSurface",
    "SyncedScrollBridge",
    "WidthTarget",
]
