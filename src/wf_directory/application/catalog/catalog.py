"""Application catalog – FilterCatalog."""
from __future__ import annotations

from typing import Iterable, Iterator, Mapping

from wf_directory.application.catalog.alias import AliasTable
from wf_directory.application.catalog.facet import Facet
from wf_directory.kernel.errors import UnknownFacetError


class FilterCatalog:
    """Ordered set of facets offered by one listing."""

    def __init__(self, facets: Iterable[Facet] = ()) -> None:
        self._facets: dict[str, Facet] = {}
        for facet in facets:
            if facet.name in self._facets:
                raise ValueError(f"duplicate facet name {facet.name!r}")
            self._facets[facet.name] = facet

    def __iter__(self) -> Iterator[Facet]:
        return iter(self._facets.values())

    def __len__(self) -> int:
        return len(self._facets)

    def __contains__(self, name: object) -> bool:
        return name in self._facets

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self._facets)

    def facet(self, name: str) -> Facet:
        try:
            return self._facets[name]
        except KeyError:
            raise UnknownFacetError(name) from None

    def options(self, name: str) -> tuple[str, ...]:
        return self.facet(name).options

    def expand(self, name: str, selection: Iterable[str]) -> frozenset[str]:
        """Expand *selection* through the alias table of facet *name*."""
        return self.facet(name).expand(selection)

    def with_aliases(self, tables: Mapping[str, AliasTable]) -> "FilterCatalog":
        """Return a copy with extra alias groups merged into the named facets."""
        for name in tables:
            self.facet(name)
        return FilterCatalog(
            facet.with_aliases(tables[facet.name]) if facet.name in tables else facet
            for facet in self
        )


__all__ = ["FilterCatalog"]
