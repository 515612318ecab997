"""Application catalog – load alias tables from a JSON document.

The file maps facet names to ``{canonical: [synonym, ...]}`` objects::

    {"Function": {"Product/Service Development": ["Product Service Development"]}}
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from wf_directory.application.catalog.alias import AliasTable
from wf_directory.config.validation import ConfigError


def parse_alias_tables(document: Any) -> dict[str, AliasTable]:
    if not isinstance(document, dict):
        raise ConfigError("alias document must be an object keyed by facet name")
    tables: dict[str, AliasTable] = {}
    for facet_name, groups in document.items():
        if not isinstance(groups, dict) or not all(
            isinstance(v, list) and all(isinstance(s, str) for s in v) for v in groups.values()
        ):
            raise ConfigError(f"aliases for facet {facet_name!r} must map strings to string lists")
        tables[facet_name] = AliasTable.from_mapping(groups)
    return tables


def load_alias_tables(path: str | Path) -> dict[str, AliasTable]:
    try:
        document = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        raise ConfigError(f"cannot read alias file {str(path)!r}: {exc}", cause=exc) from exc
    return parse_alias_tables(document)


__all__ = ["load_alias_tables", "parse_alias_tables"]
