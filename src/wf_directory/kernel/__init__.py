"""Kernel – framework-agnostic building blocks."""

from wf_directory.kernel.errors import (
    ApplicationError,
    BaseError,
    InfrastructureError,
    MalformedResponseError,
    QueryServiceError,
    QueryServiceTimeoutError,
    UnknownFacetError,
)
from wf_directory.kernel.time import AsyncioTimers, TimerHandle, Timers

__all__ = [
    "ApplicationError",
    "AsyncioTimers",
    "BaseError",
    "InfrastructureError",
    "MalformedResponseError",
    "QueryServiceError",
    "QueryServiceTimeoutError",
    "TimerHandle",
    "Timers",
    "UnknownFacetError",
]
