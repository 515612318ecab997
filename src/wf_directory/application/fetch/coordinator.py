"""Application fetch – FetchCoordinator.

Every :meth:`FetchCoordinator.execute` call takes a fresh request token
before it suspends on the Query Service. When the reply arrives it is only
applied if its token is still the most recently *issued* one; anything older
has been superseded and is dropped. Replies are therefore applied in issue
order regardless of the order in which they arrive.
"""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Callable

from wf_directory.application.fetch.port import QueryService, ResultPage
from wf_directory.application.pagination import PagedResultStore
from wf_directory.application.query import QueryDescriptor
from wf_directory.kernel.errors import BaseError
from wf_directory.observability.logging import get_logger

logger = get_logger(__name__)

GENERIC_FAILURE_MESSAGE = "Could not load results."


class FetchStatus(str, Enum):
    APPLIED = "applied"
    STALE = "stale"
    FAILED = "failed"


@dataclasses.dataclass(frozen=True)
class FetchResult:
    """How one :meth:`FetchCoordinator.execute` call ended."""

    token: int
    descriptor: QueryDescriptor
    status: FetchStatus
    page: ResultPage | None = None
    error: BaseException | None = None

    @property
    def applied(self) -> bool:
        return self.status is FetchStatus.APPLIED


class FetchCoordinator:
    """Run descriptors against a :class:`QueryService` and apply only the newest reply."""

    def __init__(
        self,
        service: QueryService,
        store: PagedResultStore,
        *,
        on_change: Callable[[], None] | None = None,
        source: str = "",
    ) -> None:
        self._service = service
        self._store = store
        self._on_change = on_change
        self._issued = 0
        self._settled = 0
        self._last_descriptor: QueryDescriptor | None = None
        self._log = logger.bind(source=source) if source else logger

    @property
    def loading(self) -> bool:
        """True from issue until the latest issued request settles."""
        return self._settled < self._issued

    @property
    def last_descriptor(self) -> QueryDescriptor | None:
        """The descriptor of the most recently issued request."""
        return self._last_descriptor

    @property
    def latest_token(self) -> int:
        return self._issued

    def invalidate(self) -> None:
        """Supersede whatever is in flight without issuing a new request."""
        self._issued += 1
        self._settled = self._issued
        self._notify()

    async def execute(self, descriptor: QueryDescriptor) -> FetchResult:
        self._issued += 1
        token = self._issued
        self._last_descriptor = descriptor
        self._log.debug(
            "listing.fetch.issued",
            token=token,
            page=descriptor.page_index,
            term=descriptor.search_term,
        )
        self._notify()

        try:
            reply = await self._service.count_and_fetch(
                descriptor.filters,
                descriptor.order,
                descriptor.offset,
                descriptor.limit,
            )
            page = ResultPage.checked(
                getattr(reply, "rows", None),
                getattr(reply, "total_count", None),
                limit=descriptor.limit,
            )
        except Exception as exc:  # noqa: BLE001 – every failure is reported the same way
            if token != self._issued:
                self._log.debug("listing.fetch.stale", token=token, latest=self._issued, failed=True)
                return FetchResult(token, descriptor, FetchStatus.STALE, error=exc)
            self._settled = token
            if isinstance(exc, BaseError):
                code, payload = exc.code, exc.to_dict()
            else:
                code, payload = type(exc).__name__, {"message": repr(exc)}
            self._log.warning("listing.fetch.failed", token=token, code=code, error=payload)
            self._store.set_error(GENERIC_FAILURE_MESSAGE)
            self._notify()
            return FetchResult(token, descriptor, FetchStatus.FAILED, error=exc)

        if token != self._issued:
            self._log.debug("listing.fetch.stale", token=token, latest=self._issued)
            return FetchResult(token, descriptor, FetchStatus.STALE, page=page)

        self._settled = token
        self._store.set_result(page.rows, page.total_count, page_index=descriptor.page_index)
        self._log.info(
            "listing.fetch.applied",
            token=token,
            page=self._store.page_index,
            rows=len(page.rows),
            total=page.total_count,
        )
        self._notify()
        return FetchResult(token, descriptor, FetchStatus.APPLIED, page=page)

    def _notify(self) -> None:
        if self._on_change is not None:
            self._on_change()


__all__ = ["FetchCoordinator", "FetchResult", "FetchStatus", "GENERIC_FAILURE_MESSAGE"]
