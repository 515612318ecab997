"""Application pagination – PagedResultStore."""
from __future__ import annotations

from typing import Generic, Sequence, TypeVar

from wf_directory.application.pagination.view import PaginationView, clamp_page, total_pages_for

T = TypeVar("T")


class PagedResultStore(Generic[T]):
    """Process-local state for one listing's current page.

    ``page_index`` is kept inside ``[1, total_pages]`` at all times: every
    mutation that can move the bounds re-clamps it against the *current*
    total.
    """

    def __init__(self, page_size: int = 25) -> None:
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self._rows: list[T] = []
        self._total_count = 0
        self._page_index = 1
        self._page_size = page_size
        self._error: str | None = None

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def rows(self) -> list[T]:
        return list(self._rows)

    @property
    def total_count(self) -> int:
        return self._total_count

    @property
    def page_index(self) -> int:
        return self._page_index

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def total_pages(self) -> int:
        return total_pages_for(self._total_count, self._page_size)

    @property
    def view(self) -> PaginationView:
        return PaginationView(self._page_index, self._page_size, self._total_count)

    @property
    def displayed_range_start(self) -> int:
        return self.view.displayed_range_start

    @property
    def displayed_range_end(self) -> int:
        return self.view.displayed_range_end

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def set_result(self, rows: Sequence[T], total_count: int, *, page_index: int | None = None) -> int:
        """Store a freshly fetched page; returns the (possibly re-clamped) page index.

        *page_index* is the page the rows were fetched for; it is clamped
        against the new total rather than the previous one.
        """
        if total_count < 0:
            raise ValueError("total_count must be >= 0")
        self._rows = list(rows)
        self._total_count = total_count
        self._error = None
        if page_index is not None:
            self._page_index = page_index
        return self._reclamp()

    def set_page(self, page_index: int) -> int:
        self._page_index = clamp_page(page_index, self.total_pages)
        return self._page_index

    def set_page_size(self, page_size: int) -> int:
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self._page_size = page_size
        return self._reclamp()

    def set_error(self, message: str) -> None:
        """Flag a failed fetch; rows and total from the last success are kept."""
        self._error = message

    def _reclamp(self) -> int:
        self._page_index = clamp_page(self._page_index, self.total_pages)
        return self._page_index


__all__ = ["PagedResultStore"]
