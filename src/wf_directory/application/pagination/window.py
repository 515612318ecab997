"""Application pagination – page window for numbered navigation."""
from __future__ import annotations

import dataclasses

from wf_directory.application.pagination.view import clamp_page


@dataclasses.dataclass(frozen=True)
class PageWindow:
    """Page numbers shown around the current page, plus navigation flags."""

    current: int
    total_pages: int
    pages: tuple[int, ...]

    @property
    def leading_ellipsis(self) -> bool:
        return bool(self.pages) and self.pages[0] > 1

    @property
    def trailing_ellipsis(self) -> bool:
        return bool(self.pages) and self.pages[-1] < self.total_pages

    @property
    def can_go_first(self) -> bool:
        return self.current != 1

    can_go_previous = can_go_first

    @property
    def can_go_last(self) -> bool:
        return self.current != self.total_pages

    can_go_next = can_go_last


def page_window(page_index: int, total_pages: int, radius: int = 2) -> PageWindow:
    """Pages ``[page - radius, page + radius]`` cut to ``[1, total_pages]``."""
    if radius < 0:
        raise ValueError("radius must be >= 0")
    total_pages = max(1, total_pages)
    current = clamp_page(page_index, total_pages)
    start = max(1, current - radius)
    end = min(total_pages, current + radius)
    return PageWindow(current, total_pages, tuple(range(start, end + 1)))


__all__ = ["PageWindow", "page_window"]
