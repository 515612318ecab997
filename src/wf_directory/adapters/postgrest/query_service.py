"""PostgREST adapter – PostgrestQueryService (httpx)."""
from __future__ import annotations

from typing import Any, Sequence

import httpx

from wf_directory.adapters.postgrest.filters import encode_query, parse_content_range
from wf_directory.application.fetch import ResultPage
from wf_directory.application.query import Ordering, Predicate
from wf_directory.config.settings import DirectorySettings
from wf_directory.config.validation import MissingRequiredSettingError
from wf_directory.kernel.errors import (
    MalformedResponseError,
    QueryServiceError,
    QueryServiceTimeoutError,
)
from wf_directory.observability.logging import get_logger

logger = get_logger(__name__)


class PostgrestQueryService:
    """Query one PostgREST table with an exact count in a single round trip.

    *base_url* is the REST root (for a hosted project, ``https://<ref>/rest/v1``).
    Pass *client* to share one :class:`httpx.AsyncClient` between listings.
    """

    def __init__(
        self,
        base_url: str,
        table: str,
        *,
        api_key: str = "",
        timeout: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._table = table
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(base_url=base_url, timeout=timeout)
        self._headers = {
            "Accept": "application/json",
            "Prefer": "count=exact",
        }
        if api_key:
            self._headers["apikey"] = api_key
            self._headers["Authorization"] = f"Bearer {api_key}"

    @classmethod
    def from_settings(cls, settings: DirectorySettings, table: str, **kwargs: Any) -> "PostgrestQueryService":
        if not settings.query_url:
            raise MissingRequiredSettingError(
                f"{settings._prefix}_QUERY_URL", needed_by=cls.__name__
            )
        return cls(
            settings.query_url,
            table,
            api_key=settings.api_key,
            timeout=settings.request_timeout,
            **kwargs,
        )

    @property
    def table(self) -> str:
        return self._table

    async def __aenter__(self) -> "PostgrestQueryService":
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def count_and_fetch(
        self,
        filters: Sequence[Predicate],
        order: Ordering,
        offset: int,
        limit: int,
    ) -> ResultPage:
        params = encode_query(filters, order, offset, limit)
        try:
            response = await self._client.get(f"/{self._table}", params=params, headers=self._headers)
        except httpx.TimeoutException as exc:
            raise QueryServiceTimeoutError(
                self._table, f"Query on '{self._table}' timed out", cause=exc
            ) from exc
        except httpx.HTTPError as exc:
            raise QueryServiceError(self._table, str(exc) or type(exc).__name__, cause=exc) from exc

        logger.debug(
            "postgrest.request",
            table=self._table,
            status=response.status_code,
            offset=offset,
            limit=limit,
        )

        # offset past the last row: no rows, but the count is still reported
        if response.status_code == httpx.codes.REQUESTED_RANGE_NOT_SATISFIABLE:
            return ResultPage((), parse_content_range(response.headers.get("content-range")))
        if response.is_error:
            raise QueryServiceError(
                self._table,
                f"HTTP {response.status_code} from '{self._table}'",
                status_code=response.status_code,
                detail={"body": response.text[:500]},
            )

        try:
            rows = response.json()
        except ValueError as exc:
            raise MalformedResponseError(
                f"'{self._table}' returned a non-JSON body", payload_type="text", cause=exc
            ) from exc
        total = parse_content_range(response.headers.get("content-range"))
        return ResultPage.checked(rows, total, limit=limit)


__all__ = ["PostgrestQueryService"]
