"""Unit tests for the kernel error hierarchy."""

from __future__ import annotations

import json

import pytest

from wf_directory.kernel.errors import (
    ApplicationError,
    BaseError,
    InfrastructureError,
    MalformedResponseError,
    QueryServiceError,
    QueryServiceTimeoutError,
    UnknownFacetError,
)


class TestBaseError:
    def test_default_code(self) -> None:
        err = BaseError("boom")
        assert err.code == "base_error"
        assert err.message == "boom"
        assert err.detail == {}

    def test_str_carries_code(self) -> None:
        assert str(BaseError("boom", code="custom")) == "[custom] boom"

    def test_to_json(self) -> None:
        err = BaseError("boom", code="custom", detail={"k": 1})
        payload = json.loads(err.to_json())
        assert payload == {"type": "BaseError", "code": "custom", "message": "boom", "detail": {"k": 1}}

    def test_cause_is_chained(self) -> None:
        cause = RuntimeError("inner")
        err = BaseError("outer", cause=cause)
        assert err.__cause__ is cause
        assert "RuntimeError" in err.to_dict()["cause"]

    def test_repr(self) -> None:
        assert repr(BaseError("x")) == "BaseError(code='base_error', message='x')"


class TestHierarchy:
    @pytest.mark.parametrize(
        "err, parent",
        [
            (UnknownFacetError("Colour"), ApplicationError),
            (QueryServiceError("jobs"), InfrastructureError),
            (QueryServiceTimeoutError("jobs"), QueryServiceError),
            (MalformedResponseError("bad"), InfrastructureError),
        ],
    )
    def test_subclassing(self, err: BaseError, parent: type) -> None:
        assert isinstance(err, parent)
        assert isinstance(err, BaseError)

    def test_unknown_facet_message(self) -> None:
        err = UnknownFacetError("Colour")
        assert err.facet_name == "Colour"
        assert err.code == "unknown_facet"
        assert "Colour" in err.message

    def test_query_service_error_defaults(self) -> None:
        err = QueryServiceError("workflow_directory", status_code=503)
        assert err.service == "workflow_directory"
        assert err.status_code == 503
        assert err.message == "Query service 'workflow_directory' error"

    def test_timeout_code(self) -> None:
        assert QueryServiceTimeoutError("t").code == "query_service_timeout"

    def test_malformed_payload_type(self) -> None:
        err = MalformedResponseError("rows must be a list", payload_type="str")
        assert err.payload_type == "str"
        assert err.code == "malformed_response"


class TestContextFields:
    def test_query_service_error_flattens_identity(self) -> None:
        payload = QueryServiceError("workflow_directory", "HTTP 500", status_code=500).to_dict()
        assert payload["type"] == "QueryServiceError"
        assert payload["service"] == "workflow_directory"
        assert payload["status_code"] == 500
        assert "detail" not in payload

    def test_unknown_facet_context(self) -> None:
        assert UnknownFacetError("Colour").context == {"facet_name": "Colour"}

    def test_base_error_has_no_context(self) -> None:
        assert BaseError("x").context == {}
