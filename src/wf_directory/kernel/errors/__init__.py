"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError          (application.py)
    │   └── UnknownFacetError
    └── InfrastructureError       (infrastructure.py)
        ├── QueryServiceError
        │   └── QueryServiceTimeoutError
        └── MalformedResponseError
"""

from wf_directory.kernel.errors.application import ApplicationError, UnknownFacetError
from wf_directory.kernel.errors.base import BaseError
from wf_directory.kernel.errors.infrastructure import (
    InfrastructureError,
    MalformedResponseError,
    QueryServiceError,
    QueryServiceTimeoutError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "MalformedResponseError",
    "QueryServiceError",
    "QueryServiceTimeoutError",
    "UnknownFacetError",
]
