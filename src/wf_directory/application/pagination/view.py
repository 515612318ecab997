"""Application pagination – PaginationView and page arithmetic."""
from __future__ import annotations

import dataclasses
import math


def total_pages_for(total_count: int, page_size: int) -> int:
    """``ceil(total / size)`` with a floor of 1, so an empty listing is page 1 of 1."""
    if page_size <= 0:
        raise ValueError("page_size must be >= 1")
    return max(1, math.ceil(max(0, total_count) / page_size))


def clamp_page(page_index: int, total_pages: int) -> int:
    return min(max(1, page_index), max(1, total_pages))


@dataclasses.dataclass(frozen=True)
class PaginationView:
    """Derived pagination bounds; never stored, always recomputed."""

    page_index: int
    page_size: int
    total_count: int

    @property
    def total_pages(self) -> int:
        return total_pages_for(self.total_count, self.page_size)

    @property
    def displayed_range_start(self) -> int:
        if self.total_count == 0:
            return 0
        return (self.page_index - 1) * self.page_size + 1

    @property
    def displayed_range_end(self) -> int:
        if self.total_count == 0:
            return 0
        return min(self.page_index * self.page_size, self.total_count)

    @property
    def range_label(self) -> str:
        """``"0"`` for an empty listing, otherwise ``"start–end"``."""
        if self.total_count == 0:
            return "0"
        return f"{self.displayed_range_start}–{self.displayed_range_end}"


__all__ = ["PaginationView", "clamp_page", "total_pages_for"]
