"""Application-layer errors – wiring and configuration problems."""

from __future__ import annotations

from typing import Any

from wf_directory.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class UnknownFacetError(ApplicationError):
    """A listing was asked about a facet name its catalog does not define.

    Unknown facet *values* are never an error; they pass through to the
    backend unchanged.
    """

    default_code = "unknown_facet"
    context_fields = ("facet_name",)

    def __init__(self, facet_name: str, **kwargs: Any) -> None:
        super().__init__(f"Facet '{facet_name}' is not defined", **kwargs)
        self.facet_name = facet_name


__all__ = ["ApplicationError", "UnknownFacetError"]
