"""Application fetch – Query Service port and race-free result application."""
from wf_directory.application.fetch.coordinator import (
    GENERIC_FAILURE_MESSAGE,
    FetchCoordinator,
    FetchResult,
    FetchStatus,
)
from wf_directory.application.fetch.port import QueryService, Record, ResultPage

__all__ = [
    "FetchCoordinator",
    "FetchResult",
    "FetchStatus",
    "GENERIC_FAILURE_MESSAGE",
    "QueryService",
    "Record",
    "ResultPage",
]
