"""Infrastructure errors – Query Service failures."""

from __future__ import annotations

from typing import Any

from wf_directory.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a wiring problem."""

    default_code = "infrastructure_error"


class QueryServiceError(InfrastructureError):
    """The Query Service rejected the call or could not be reached."""

    default_code = "query_service_error"
    context_fields = ("service", "status_code")

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message or f"Query service '{service}' error", **kwargs)
        self.service = service
        self.status_code = status_code


class QueryServiceTimeoutError(QueryServiceError):
    """The Query Service did not answer before the request deadline."""

    default_code = "query_service_timeout"


class MalformedResponseError(InfrastructureError):
    """The Query Service answered with a payload that cannot be a result page."""

    default_code = "malformed_response"
    context_fields = ("payload_type",)

    def __init__(
        self,
        message: str,
        *,
        payload_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.payload_type = payload_type


__all__ = [
    "InfrastructureError",
    "MalformedResponseError",
    "QueryServiceError",
    "QueryServiceTimeoutError",
]
