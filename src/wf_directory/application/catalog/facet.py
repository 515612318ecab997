"""Application catalog – Facet, FacetKind."""
from __future__ import annotations

import dataclasses
from enum import Enum
from typing import Iterable

from wf_directory.application.catalog.alias import AliasTable


class FacetKind(str, Enum):
    """How a facet's selection is matched against the record."""

    OVERLAP = "overlap"        # array column shares at least one value
    MEMBERSHIP = "membership"  # scalar column equals one of the values


@dataclasses.dataclass(frozen=True)
class Facet:
    """A categorical filter dimension with a fixed, ordered option list."""

    name: str
    field: str
    options: tuple[str, ...] = ()
    kind: FacetKind = FacetKind.OVERLAP
    aliases: AliasTable = dataclasses.field(default_factory=AliasTable)

    def expand(self, selection: Iterable[str]) -> frozenset[str]:
        return self.aliases.expand(selection)

    def with_aliases(self, aliases: AliasTable) -> "Facet":
        return dataclasses.replace(self, aliases=self.aliases.merged(aliases))


__all__ = ["Facet", "FacetKind"]
