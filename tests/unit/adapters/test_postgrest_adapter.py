"""Unit tests – PostgREST adapter (query encoding and httpx error mapping)."""
from __future__ import annotations

import asyncio

import httpx
import pytest
import respx

from wf_directory.adapters.postgrest import PostgrestQueryService, encode_query, parse_content_range
from wf_directory.adapters.postgrest.filters import like_contains, quote
from wf_directory.application.query import (
    MembershipPredicate,
    Ordering,
    OverlapPredicate,
    SortDirection,
    TextPredicate,
)
from wf_directory.config import DirectorySettings, MissingRequiredSettingError
from wf_directory.kernel.errors import (
    MalformedResponseError,
    QueryServiceError,
    QueryServiceTimeoutError,
)

BASE = "http://db.test/rest/v1"
TABLE_URL = f"{BASE}/workflow_directory"
BY_ID = Ordering("id", SortDirection.ASC)


def _service(**kwargs) -> PostgrestQueryService:
    return PostgrestQueryService(BASE, "workflow_directory", **kwargs)


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

class TestEncoding:
    def test_quote_escapes_quotes_and_backslashes(self) -> None:
        assert quote('a"b\\c') == '"a\\"b\\\\c"'

    def test_like_contains_escapes_metacharacters(self) -> None:
        assert like_contains("50%_off") == "*50\\%\\_off*"

    def test_full_query(self) -> None:
        filters = (
            TextPredicate("slack", ("workflow_name", "executive_summary")),
            OverlapPredicate("business_functions", ("Product Service Development", "Product/Service Development")),
            MembershipPredicate("pillar", ("Sales",)),
        )
        params = encode_query(filters, BY_ID, 25, 25)
        assert params == [
            ("select", "*"),
            ("or", '(workflow_name.ilike."*slack*",executive_summary.ilike."*slack*")'),
            ("business_functions", 'ov.{"Product Service Development","Product/Service Development"}'),
            ("pillar", 'in.("Sales")'),
            ("order", "id.asc"),
            ("offset", "25"),
            ("limit", "25"),
        ]

    def test_values_with_commas_stay_one_element(self) -> None:
        _, value = encode_query((OverlapPredicate("tags", ("a,b",)),), BY_ID, 0, 1)[1]
        assert value == 'ov.{"a,b"}'


class TestContentRange:
    @pytest.mark.parametrize(
        ("header", "total"),
        [("0-24/57", 57), ("*/0", 0), ("50-56/57", 57)],
    )
    def test_total_is_parsed(self, header: str, total: int) -> None:
        assert parse_content_range(header) == total

    @pytest.mark.parametrize("header", [None, "", "0-24", "0-24/*"])
    def test_missing_or_inexact_total_is_malformed(self, header: str | None) -> None:
        with pytest.raises(MalformedResponseError):
            parse_content_range(header)


# ---------------------------------------------------------------------------
# HTTP round trip
# ---------------------------------------------------------------------------

class TestCountAndFetch:
    @respx.mock
    def test_rows_and_count_in_one_request(self) -> None:
        route = respx.get(url__startswith=TABLE_URL).mock(
            return_value=httpx.Response(
                200,
                json=[{"id": 1}, {"id": 2}],
                headers={"Content-Range": "0-1/57"},
            )
        )

        async def run() -> None:
            async with _service(api_key="anon-key") as service:
                page = await service.count_and_fetch(
                    (TextPredicate("crm", ("workflow_name",)),), BY_ID, 0, 25
                )
            assert [r["id"] for r in page.rows] == [1, 2]
            assert page.total_count == 57
            sent = route.calls.last.request
            assert sent.headers["prefer"] == "count=exact"
            assert sent.headers["apikey"] == "anon-key"
            assert sent.headers["authorization"] == "Bearer anon-key"
            assert sent.url.path == "/rest/v1/workflow_directory"
            assert sent.url.params["or"] == '(workflow_name.ilike."*crm*")'
            assert sent.url.params["order"] == "id.asc"
            assert sent.url.params["limit"] == "25"

        asyncio.run(run())

    @respx.mock
    def test_no_api_key_sends_no_auth_headers(self) -> None:
        route = respx.get(url__startswith=TABLE_URL).mock(
            return_value=httpx.Response(200, json=[], headers={"Content-Range": "*/0"})
        )

        async def run() -> None:
            async with _service() as service:
                page = await service.count_and_fetch((), BY_ID, 0, 25)
            assert page.total_count == 0
            assert "authorization" not in route.calls.last.request.headers

        asyncio.run(run())

    @respx.mock
    def test_range_not_satisfiable_is_an_empty_page(self) -> None:
        respx.get(url__startswith=TABLE_URL).mock(
            return_value=httpx.Response(416, headers={"Content-Range": "*/57"})
        )

        async def run() -> None:
            async with _service() as service:
                page = await service.count_and_fetch((), BY_ID, 100, 25)
            assert page.rows == ()
            assert page.total_count == 57

        asyncio.run(run())

    @respx.mock
    def test_server_error_maps_to_query_service_error(self) -> None:
        respx.get(url__startswith=TABLE_URL).mock(
            return_value=httpx.Response(500, text="boom")
        )

        async def run() -> None:
            async with _service() as service:
                with pytest.raises(QueryServiceError) as exc_info:
                    await service.count_and_fetch((), BY_ID, 0, 25)
            assert exc_info.value.status_code == 500
            assert exc_info.value.to_dict()["code"] == "query_service_error"
            assert exc_info.value.detail["body"] == "boom"

        asyncio.run(run())

    @respx.mock
    def test_timeout_maps_to_timeout_error(self) -> None:
        respx.get(url__startswith=TABLE_URL).mock(side_effect=httpx.ReadTimeout("slow"))

        async def run() -> None:
            async with _service() as service:
                with pytest.raises(QueryServiceTimeoutError):
                    await service.count_and_fetch((), BY_ID, 0, 25)

        asyncio.run(run())

    @respx.mock
    def test_transport_error_maps_to_query_service_error(self) -> None:
        respx.get(url__startswith=TABLE_URL).mock(side_effect=httpx.ConnectError("refused"))

        async def run() -> None:
            async with _service() as service:
                with pytest.raises(QueryServiceError) as exc_info:
                    await service.count_and_fetch((), BY_ID, 0, 25)
            assert not isinstance(exc_info.value, QueryServiceTimeoutError)
            assert isinstance(exc_info.value.cause, httpx.ConnectError)

        asyncio.run(run())

    @respx.mock
    def test_non_json_body_is_malformed(self) -> None:
        respx.get(url__startswith=TABLE_URL).mock(
            return_value=httpx.Response(200, text="<html>", headers={"Content-Range": "0-0/1"})
        )

        async def run() -> None:
            async with _service() as service:
                with pytest.raises(MalformedResponseError):
                    await service.count_and_fetch((), BY_ID, 0, 25)

        asyncio.run(run())

    @respx.mock
    def test_missing_count_is_malformed(self) -> None:
        respx.get(url__startswith=TABLE_URL).mock(return_value=httpx.Response(200, json=[]))

        async def run() -> None:
            async with _service() as service:
                with pytest.raises(MalformedResponseError):
                    await service.count_and_fetch((), BY_ID, 0, 25)

        asyncio.run(run())

    @respx.mock
    def test_shared_client_is_not_closed(self) -> None:
        respx.get(url__startswith=TABLE_URL).mock(
            return_value=httpx.Response(200, json=[], headers={"Content-Range": "*/0"})
        )

        async def run() -> None:
            async with httpx.AsyncClient(base_url=BASE) as client:
                async with PostgrestQueryService(BASE, "workflow_directory", client=client) as service:
                    await service.count_and_fetch((), BY_ID, 0, 25)
                assert not client.is_closed

        asyncio.run(run())


class TestFromSettings:
    def test_requires_query_url(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            PostgrestQueryService.from_settings(DirectorySettings(), "workflow_directory")
        assert exc_info.value.setting_name == "WFDIR_QUERY_URL"

    def test_uses_url_key_and_table(self) -> None:
        settings = DirectorySettings(query_url=BASE, api_key="k", request_timeout=3.0)
        service = PostgrestQueryService.from_settings(settings, "aia-workflows")
        assert service.table == "aia-workflows"
        asyncio.run(service.aclose())
