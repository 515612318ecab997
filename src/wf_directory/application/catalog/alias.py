"""Application catalog – AliasTable."""
from __future__ import annotations

import dataclasses
from typing import Iterable, Mapping


@dataclasses.dataclass(frozen=True)
class AliasTable:
    """Canonical display value → group of stored synonyms.

    Every group contains its canonical value, so expansion never drops what
    the user selected. Values without a group pass through unchanged.
    """

    groups: Mapping[str, frozenset[str]] = dataclasses.field(default_factory=dict)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Iterable[str]]) -> "AliasTable":
        return cls({canonical: frozenset(synonyms) | {canonical} for canonical, synonyms in mapping.items()})

    def group(self, value: str) -> frozenset[str]:
        return self.groups.get(value, frozenset({value}))

    def expand(self, selection: Iterable[str]) -> frozenset[str]:
        """Replace each canonical value with its alias group and flatten."""
        expanded: set[str] = set()
        for value in selection:
            expanded |= self.group(value)
        return frozenset(expanded)

    def merged(self, other: "AliasTable") -> "AliasTable":
        """Return a table where *other*'s groups replace ours on conflict."""
        return AliasTable({**self.groups, **other.groups})

    def __bool__(self) -> bool:
        return bool(self.groups)


__all__ = ["AliasTable"]
