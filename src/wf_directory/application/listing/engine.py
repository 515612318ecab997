"""Application listing – ListingEngine.

The page-facing side of a faceted listing. UI handlers are plain synchronous
calls; each one that changes the query state composes a new descriptor and
schedules a fetch on the running event loop. Text input is debounced, facet
and page changes are not.
"""
from __future__ import annotations

import asyncio
from typing import Callable, Iterable

from wf_directory.application.debounce import DEFAULT_QUIET_SECONDS, DebouncedInputController
from wf_directory.application.fetch import FetchCoordinator, FetchResult, FetchStatus, QueryService
from wf_directory.application.listing.changes import ChangeEvent, ChangeFeed, Unsubscribe
from wf_directory.application.listing.view import ListingView
from wf_directory.application.pagination import PagedResultStore, clamp_page, page_window
from wf_directory.application.query import ListingSchema, QueryComposer, QueryDescriptor
from wf_directory.config.settings import DirectorySettings
from wf_directory.kernel.time import Timers
from wf_directory.observability.logging import get_logger

logger = get_logger(__name__)

ViewListener = Callable[[ListingView], None]


class ListingEngine:
    """Search, facet filters and paging over one :class:`ListingSchema`."""

    def __init__(
        self,
        schema: ListingSchema,
        service: QueryService,
        *,
        timers: Timers | None = None,
        quiet_seconds: float = DEFAULT_QUIET_SECONDS,
        page_window_radius: int = 2,
    ) -> None:
        self._schema = schema
        self._composer = QueryComposer(schema)
        self._store: PagedResultStore = PagedResultStore(schema.page_size)
        self._coordinator = FetchCoordinator(service, self._store, on_change=self._publish, source=schema.source)
        self._debouncer = DebouncedInputController(self._on_settled, quiet_seconds=quiet_seconds, timers=timers)
        self._radius = page_window_radius
        self._search_term = ""
        self._page = 1
        self._selections: dict[str, frozenset[str]] = {}
        self._listeners: list[ViewListener] = []
        self._subscriptions: list[Unsubscribe] = []
        self._tasks: set[asyncio.Task[None]] = set()
        self._settle_task: asyncio.Task[None] | None = None
        self._closed = False
        self._log = logger.bind(source=schema.source)

    @classmethod
    def from_settings(
        cls,
        schema: ListingSchema,
        service: QueryService,
        settings: DirectorySettings,
        *,
        timers: Timers | None = None,
    ) -> "ListingEngine":
        return cls(
            schema.with_page_size(settings.page_size),
            service,
            timers=timers,
            quiet_seconds=settings.debounce_seconds,
            page_window_radius=settings.page_window_radius,
        )

    # ------------------------------------------------------------------
    # Read model
    # ------------------------------------------------------------------

    @property
    def schema(self) -> ListingSchema:
        return self._schema

    @property
    def store(self) -> PagedResultStore:
        return self._store

    @property
    def search_term(self) -> str:
        return self._search_term

    @property
    def selections(self) -> dict[str, frozenset[str]]:
        return dict(self._selections)

    @property
    def view(self) -> ListingView:
        pagination = self._store.view
        return ListingView(
            rows=tuple(self._store.rows),
            loading=self._coordinator.loading,
            error=self._store.error,
            displayed_range_start=pagination.displayed_range_start,
            displayed_range_end=pagination.displayed_range_end,
            total_count=pagination.total_count,
            page_index=pagination.page_index,
            total_pages=pagination.total_pages,
            page_size=pagination.page_size,
            search_term=self._search_term,
            search_text=self._debouncer.raw,
            selections=dict(self._selections),
            window=page_window(pagination.page_index, pagination.total_pages, self._radius),
            noun=self._schema.noun,
        )

    def add_listener(self, listener: ViewListener) -> Unsubscribe:
        """Call *listener* with a fresh :class:`ListingView` after every state change."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    # ------------------------------------------------------------------
    # UI handlers
    # ------------------------------------------------------------------

    def start(self) -> asyncio.Task[None] | None:
        """Load the first page for the initial (empty) state."""
        return self._issue(force=True)

    def on_search_text_change(self, raw: str) -> None:
        if self._closed:
            return
        self._debouncer.feed(raw)
        self._publish()

    def on_clear_search(self) -> asyncio.Task[None] | None:
        if self._closed:
            return None
        self._settle_task = None
        self._debouncer.settle_now("")
        return self._settle_task

    def on_facet_change(self, facet_name: str, new_selection: Iterable[str]) -> asyncio.Task[None] | None:
        if self._closed:
            return None
        self._schema.catalog.facet(facet_name)
        selection = frozenset(new_selection)
        if selection:
            self._selections[facet_name] = selection
        else:
            self._selections.pop(facet_name, None)
        self._page = 1
        return self._issue()

    def on_clear_filters(self) -> asyncio.Task[None] | None:
        """Drop every facet selection; text still waiting to settle settles now."""
        if self._closed:
            return None
        self._selections.clear()
        if self._debouncer.pending:
            self._settle_task = None
            self._debouncer.settle_now(self._debouncer.raw)
            return self._settle_task
        self._page = 1
        return self._issue()

    def on_page_change(self, page_index: int) -> asyncio.Task[None] | None:
        if self._closed:
            return None
        self._page = clamp_page(page_index, self._store.total_pages)
        return self._issue()

    def refresh(self) -> asyncio.Task[None] | None:
        """Re-run the last issued query, e.g. after a change notification."""
        if self._closed:
            return None
        descriptor = self._coordinator.last_descriptor or self._compose()
        return self._spawn(descriptor)

    def watch(
        self,
        feed: ChangeFeed,
        predicate: Callable[[ChangeEvent], bool] | None = None,
    ) -> Unsubscribe:
        """Refresh whenever *feed* reports a change on this listing's source."""

        def on_event(event: ChangeEvent) -> None:
            if self._closed or (predicate is not None and not predicate(event)):
                return
            self._log.debug("listing.change.received", kind=event.kind.value)
            self.refresh()

        unsubscribe = feed.subscribe(self._schema.source, on_event)
        self._subscriptions.append(unsubscribe)
        return unsubscribe

    async def wait_idle(self) -> None:
        """Wait until every scheduled fetch has finished."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def close(self) -> None:
        """Tear down: no timer, listener or in-flight reply may act after this."""
        if self._closed:
            return
        self._closed = True
        self._debouncer.close()
        self._listeners.clear()
        for unsubscribe in self._subscriptions:
            unsubscribe()
        self._subscriptions.clear()
        self._coordinator.invalidate()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _on_settled(self, term: str) -> None:
        self._log.debug("listing.search.settled", term=term)
        self._search_term = term
        self._page = 1
        self._settle_task = self._issue()

    def _compose(self) -> QueryDescriptor:
        return self._composer.compose(
            self._search_term,
            self._selections,
            self._page,
            self._store.page_size,
        )

    def _issue(self, *, force: bool = False) -> asyncio.Task[None] | None:
        if self._closed:
            return None
        descriptor = self._compose()
        unchanged = descriptor == self._coordinator.last_descriptor and self._store.error is None
        if unchanged and not force:
            self._publish()
            return None
        return self._spawn(descriptor)

    def _spawn(self, descriptor: QueryDescriptor) -> asyncio.Task[None]:
        task = asyncio.get_running_loop().create_task(self._run(descriptor))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _run(self, descriptor: QueryDescriptor) -> None:
        result: FetchResult = await self._coordinator.execute(descriptor)
        if self._closed or result.status is FetchStatus.STALE:
            return
        # the requested page only becomes current once its rows are applied
        self._page = self._store.page_index
        if result.applied and self._page != descriptor.page_index:
            # the total shrank under us; fetch the page we were clamped to
            await self._run(descriptor.with_page(self._page))

    def _publish(self) -> None:
        if not self._listeners:
            return
        view = self.view
        for listener in list(self._listeners):
            listener(view)


__all__ = ["ListingEngine", "ViewListener"]
